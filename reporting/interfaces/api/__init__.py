"""FastAPI application interface."""
