"""Services Layer — imperative shell around the pure registry core.

Invariants:
    - Services own logging; core stays silent
    - Errors from core propagate unchanged after being logged
"""
