"""Smart Transport API: CRUD service for transport requests, users and notices.

Invariants:
    - Package root holds only the version (import side-effects prohibited)
"""

__version__ = "1.0.0"
