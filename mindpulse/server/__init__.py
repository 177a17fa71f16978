"""MindPulse REST server: FastAPI application, API routers and services."""
