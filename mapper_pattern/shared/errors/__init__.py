"""
Shared error handling package.

Centralizes error-to-exit-code mapping so that domain errors
are consistently reported by the entry point.
"""
