"""Federated natural-language search service."""
