"""Domain event subscribers."""
