"""
FastAPI routers for all API endpoints.

Each module defines a router for a specific area (health, cocktails).
"""
