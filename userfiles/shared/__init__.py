"""
Shared module package.

Contains cross-cutting concerns:
- Error handling and mapping
- Security and request logging middleware
- Rate limiting
- Logging configuration
"""
