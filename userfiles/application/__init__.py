"""
Application layer package.

Use cases coordinate domain entities and ports to fulfill
operations. No framework or infrastructure imports allowed.
"""
