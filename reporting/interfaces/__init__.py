"""HTTP interfaces of the application."""
