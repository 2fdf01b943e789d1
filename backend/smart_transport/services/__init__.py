"""Service Layer: one handler class per resource.

Invariants:
    - Handlers receive the store by injection, never via a module global
    - Each handler method performs at most one storage call
"""
