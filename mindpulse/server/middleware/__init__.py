"""
Middleware modules for the MindPulse server.
"""

from .request_timing import RequestTimingMiddleware

__all__ = ["RequestTimingMiddleware"]
