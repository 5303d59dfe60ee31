"""Infrastructure Layer — database access and cross-cutting concerns.

Invariants:
    - Infrastructure never imports domain decisions from core/ (errors only)
    - All database calls wrapped with rollback and error mapping
"""
