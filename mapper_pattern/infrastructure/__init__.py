"""
Infrastructure layer package.

Contains concrete implementations (adapters) of the ports
defined in the domain layer, together with the raw data shapes
delivered by external stores.
"""
