"""Services Layer — imperative shell around the pure item authorization core.

Invariants:
    - Services do the IO (store, session, password hashing); core/ decides
    - Route handlers call services, never the ORM directly

Design Decisions:
    - One file per collaborator: store, identity, accounts, access controller
"""
