"""Infrastructure Layer — host store adapters and cross-cutting concerns.

Invariants:
    - Infrastructure implements core/repository_protocols.py contracts
    - All driver errors mapped to core/errors.py types before leaving this layer

Design Decisions:
    - One adapter per host concern (content store, typed fields, DB sessions, logging)
"""
