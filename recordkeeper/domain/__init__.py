"""Domain layer: models, collection interfaces, services and errors."""
