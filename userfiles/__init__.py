"""
userfiles: per-user file store exposed over HTTP.

Application package root. This is a small service using
hexagonal architecture (ports & adapters).

Bounded contexts:
    - records: Upload, existence check and listing of per-user files.

Layers:
    - domain: Entities, ports (ABCs), errors. No framework imports.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: Adapters implementing domain ports (filesystem).
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
