"""
Shared module package.

Contains cross-cutting concerns used across layers:
- The generic mapper contract
- Error handling and mapping
- Logging configuration
"""
