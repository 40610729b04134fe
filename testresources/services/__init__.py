"""Services Layer — imperative shell around the pure inference core.

Invariants:
    - Services resolve defaults (library version) and log; core does neither
    - Errors from core propagate unchanged to the caller
"""
