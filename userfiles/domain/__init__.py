"""
Domain layer package.

Contains entities, port interfaces and errors.
No framework imports, no IO.
"""
