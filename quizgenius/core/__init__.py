"""Core application wiring: logging, lifespan and exception handlers."""
