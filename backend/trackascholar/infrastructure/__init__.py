"""Infrastructure Layer — file storage and cross-cutting concerns.

Invariants:
    - Infrastructure never holds domain state of its own
    - All OS errors mapped to StorageError (core/errors.py)
"""
