"""
API routes module.

FastAPI application factory and routers for all HTTP endpoints.
"""
