"""Items Application Package — owner-scoped to-do items behind session sign-in.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
