"""
Endpoint subpackage for API v1.

Each module defines an ``APIRouter`` for one domain; they are combined
in ``router.py``.
"""
