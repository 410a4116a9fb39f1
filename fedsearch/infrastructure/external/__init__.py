"""Outbound clients for external services."""
