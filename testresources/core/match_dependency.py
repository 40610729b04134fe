"""Dependency Matcher — evaluates the rule table against one dependency.

Invariants:
    - All functions are PURE: no IO, no side effects, inputs never mutated
    - Output order follows rule declaration order
    - Exact duplicates (group + artifact + version) collapse to the first occurrence
    - Different modules emitted by different rules are all kept

Design Decisions:
    - One interpreter over RuleKind (match statement) instead of per-rule methods:
      the rule set is closed and known at import time
    - all_dependencies passed by reference as a Sequence: read-only shared view
"""

from typing import Sequence

from testresources.core.dependency_coordinate import DependencyCoordinate
from testresources.core.domain_types import RuleKind
from testresources.core.errors import InvalidDependencyCoordinate
from testresources.core.inference_rules import (
    RULE_TABLE,
    InferenceRule,
    support_module,
)


def check_version(version: object) -> None:
    """Support-module version must be a non-empty string, used verbatim."""
    if not isinstance(version, str) or not version.strip():
        raise InvalidDependencyCoordinate(
            f"Test resources version must be a non-empty string, got {version!r}",
            field="version", value=version,
        )


def apply_rule(
    rule: InferenceRule,
    dependency: DependencyCoordinate,
    all_dependencies: Sequence[DependencyCoordinate],
    version: str,
) -> DependencyCoordinate | None:
    """Return the coordinate a single rule emits for dependency, or None."""
    match rule.kind:
        case RuleKind.EXACT_ARTIFACT:
            if dependency.artifact == rule.artifact:
                return support_module(rule.module_id, version)
        case RuleKind.PREDICATE:
            if (rule.artifact_predicate(dependency.artifact)
                    and rule.classpath_predicate(all_dependencies)):
                return support_module(rule.module_id, version)
        case RuleKind.PASSTHROUGH:
            if dependency.module in rule.modules:
                return dependency
    return None


def evaluate(
    dependency: DependencyCoordinate,
    all_dependencies: Sequence[DependencyCoordinate],
    version: str,
    rules: Sequence[InferenceRule] = RULE_TABLE,
) -> list[DependencyCoordinate]:
    """Infer the coordinates contributed by one dependency of the classpath."""
    check_version(version)
    inferred: dict[DependencyCoordinate, None] = {}
    for rule in rules:
        emitted = apply_rule(rule, dependency, all_dependencies, version)
        if emitted is not None:
            inferred.setdefault(emitted)
    return list(inferred)
