"""Core building blocks shared by the server: logging, monitoring, errors and the database layer."""
