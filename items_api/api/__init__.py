"""API Layer: FastAPI routes, dependencies, and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every response, success or error, is a JSON body
"""
