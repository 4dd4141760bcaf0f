"""Pydantic Schemas — JSON document validation for the persistence boundary.

Invariants:
    - Schemas validate document shape; domain invariants are replayed through core/
    - Value types from core/ are the only way records become Applicants

Design Decisions:
    - Separate from core: schemas are storage contracts, core is the domain
"""
