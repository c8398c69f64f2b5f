"""Domain layer - value objects with no I/O."""
