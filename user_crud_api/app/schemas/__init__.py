"""
Pydantic schemas used by the API layer.
"""
