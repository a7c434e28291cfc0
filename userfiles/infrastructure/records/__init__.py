"""Adapters for the records bounded context."""
