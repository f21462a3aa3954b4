"""Infrastructure Layer — cross-cutting concerns around the pure core.

Invariants:
    - Infrastructure never imports from core/ domain logic

Design Decisions:
    - Only observability lives here; storage belongs to the host application
"""
