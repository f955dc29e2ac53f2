"""Use cases exposed by the application layer."""
