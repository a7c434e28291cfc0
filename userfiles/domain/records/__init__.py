"""
Records bounded context, domain layer.

A record is the raw content uploaded for one user identifier,
persisted as a single ``<user_id>.json`` file.
"""
