"""Core building blocks shared by every layer (result, errors, config, container)."""
