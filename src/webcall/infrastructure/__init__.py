"""Infrastructure layer - network I/O."""
