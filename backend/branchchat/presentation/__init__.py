"""
Presentation Layer - API endpoints and request/response handling.

This layer contains:
- api/: FastAPI routers and endpoints (handlers injected via Dishka)
"""
