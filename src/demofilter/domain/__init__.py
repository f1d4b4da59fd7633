"""Domain layer: value objects, configuration, errors and ports."""
