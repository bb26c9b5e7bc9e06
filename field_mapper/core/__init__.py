"""Core utilities - caching, coercion, configuration, naming and exceptions."""
