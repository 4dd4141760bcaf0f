"""Core Layer — pure domain logic, no IO, no logging.

Invariants:
    - No module in core/ imports from services/, schemas/ or infrastructure/
    - All functions are pure and deterministic (registry mutation is explicit)

Design Decisions:
    - Functional core separated from imperative shell: services/ does IO and logging
"""
