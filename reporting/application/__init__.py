"""Application layer orchestrating the template use cases."""
