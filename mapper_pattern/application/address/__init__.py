"""
Application layer for the address bounded context.
"""
