"""Infrastructure layer: persistence, cache, external clients, security."""
