"""Route metadata registry for the customer API."""
