"""Items API Package: CRUD over a single collection of named records.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
