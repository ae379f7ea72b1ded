"""
Application layer package.

Contains use cases that orchestrate domain ports.
Each use case is a single class with one public operation.
This layer depends on domain ports, never on infrastructure.
"""
