"""Core Layer — pure domain logic, no IO, no async.

Invariants:
    - No module in core/ imports from api/ or infrastructure/
"""
