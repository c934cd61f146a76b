"""Library services."""
