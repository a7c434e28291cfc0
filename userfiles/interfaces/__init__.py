"""
Interfaces layer package.

Contains FastAPI routers, Pydantic response schemas,
and request parsing. No business logic belongs here.
Routes call use cases and return responses.
"""
