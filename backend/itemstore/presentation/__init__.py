"""
Presentation Layer - API endpoints and request/response handling.

This layer contains:
- api/: FastAPI routers and endpoints
- middleware/: correlation id and request audit
- dependencies/: per-request identity
- errors.py: exception → HTTP response mapping
"""
