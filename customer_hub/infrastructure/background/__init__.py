"""Background task runners."""
