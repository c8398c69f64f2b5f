"""Application layer - handler-facing services."""
