"""
Exception handlers for the MindPulse server.

Domain errors map to their HTTP status; anything else becomes a logged 500.
"""

from .global_handler import setup_exception_handlers

__all__ = ["setup_exception_handlers"]
