"""Infrastructure Layer — logging setup and library version metadata.

Invariants:
    - Infrastructure never contains classpath inference logic
    - Version lookup failures surface as typed errors from core/errors.py

Design Decisions:
    - Kept apart from core so inference stays free of environment reads
"""
