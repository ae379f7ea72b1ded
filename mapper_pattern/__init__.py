"""
Mapper Pattern — layered address mapping sample.

Application package root. Hexagonal layout (ports & adapters) showing how
one entity travels through data, domain and presentation shapes.

Bounded contexts:
    - address: Fetch a postal address and render it.

Layers:
    - domain: Entities, ports (ABCs), errors, closed HTTP error sets.
    - application: Use cases.
    - infrastructure: Data models, the mock store, data sources, repositories.
    - interfaces: Presentation models, view-models and views.
    - shared: Cross-cutting concerns (mapping contract, errors, logging).
"""
