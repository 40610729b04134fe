"""Core Layer — pure classpath inference logic, no IO, no logging.

Invariants:
    - No module in core/ imports from services/, schemas/, infrastructure/, or config
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell (version lookup, logging)
"""
