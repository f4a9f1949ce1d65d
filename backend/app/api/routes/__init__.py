"""Route Modules — one file per resource/concern.

Invariants:
    - Content and taxonomy routers carry no prefix; main.py mounts them under settings.api_namespace
    - Routes never contain business logic (delegate to services/content_service.py)

Design Decisions:
    - Explicit registration in main.py over auto-discovery
"""
