"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Item authorization failures answered with redirects; other errors with JSON envelopes
"""
