"""Infrastructure layer: database, repositories and report compilation."""
