"""
Infrastructure adapters for the address bounded context.

Each adapter implements a port (ABC) and connects to the
address store.
"""
