"""Domain layer: entities and storage contracts."""
