"""
Configuration, logging, error types and middleware.
"""
