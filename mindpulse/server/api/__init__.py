"""HTTP API of the MindPulse server."""
