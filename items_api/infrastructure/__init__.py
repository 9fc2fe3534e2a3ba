"""Infrastructure Layer: database access and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from api/
    - All driver exceptions mapped to core.errors.DatabaseError before leaving this layer
"""
