"""
API routers.

Every router is mounted under ``/api`` except ``health``.
"""
