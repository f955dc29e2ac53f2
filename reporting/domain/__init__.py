"""Domain layer: entities, error types and value-type registry."""
