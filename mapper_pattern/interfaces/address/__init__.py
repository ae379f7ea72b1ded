"""
Presentation layer for the address bounded context.
"""
