"""Services Layer — async orchestration between the host store and core formatting.

Invariants:
    - Services hold no state beyond the current request
    - Every lookup failure surfaces as a core/errors.py exception

Design Decisions:
    - One service class for all content routes: they share the formatting path
"""
