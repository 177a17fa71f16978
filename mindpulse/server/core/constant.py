"""Project-wide constants for the MindPulse server."""

PROJECT_NAME = "MindPulse"
API_PREFIX = "/api"
