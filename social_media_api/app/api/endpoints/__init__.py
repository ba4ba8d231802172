"""
Endpoint subpackage.

Each module defines an APIRouter for one resource.  The JSON routers
are aggregated in ``api/router.py``.
"""
