"""Use cases for the records bounded context."""
