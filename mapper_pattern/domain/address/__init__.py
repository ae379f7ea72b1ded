"""
Address bounded context — domain layer.

Holds the canonical in-application address, the repository port
and the errors raised while resolving an address.
"""
