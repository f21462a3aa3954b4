"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from models/, schemas/, infrastructure/ or config
    - Everything here is in-memory and single-threaded

Design Decisions:
    - Functional core separated from the shells that store or serialize it
"""
