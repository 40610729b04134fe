"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - ModuleId is the short support-module name ("kafka", "jdbc-mysql", ...)
    - ModuleNotation is always "group:artifact" and never carries a version
    - Rule variants are a closed set encoded as an Enum (RuleKind)

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum for RuleKind: readable in reprs and error envelopes
"""

from enum import Enum
from typing import NewType


# ─── Value Types ─────────────────────────────────────────────────

ModuleId = NewType("ModuleId", str)              # e.g. "kafka"
ModuleNotation = NewType("ModuleNotation", str)  # e.g. "org.postgresql:postgresql"


# ─── Enums ───────────────────────────────────────────────────────

class RuleKind(str, Enum):
    """The three rule variants understood by the matcher."""
    EXACT_ARTIFACT = "exact_artifact"
    PREDICATE = "predicate"
    PASSTHROUGH = "passthrough"
