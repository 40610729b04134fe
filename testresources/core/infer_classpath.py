"""Classpath Inference — derives the test resources classpath from a user classpath.

Invariants:
    - Output = core support modules (fixed order) + per-dependency matches (input order)
    - Deduplication happens only inside one evaluate() call, never across dependencies
      and never against the core support modules
    - Empty input yields exactly the core support modules
    - Pure and deterministic: no IO, no logging, inputs never mutated

Design Decisions:
    - version is a required argument here; the shell layer supplies the library
      version fallback (services/infer_test_resources.py) so core stays IO-free
"""

from typing import Sequence

from testresources.core.dependency_coordinate import DependencyCoordinate
from testresources.core.inference_rules import (
    CORE_SUPPORT,
    RULE_TABLE,
    InferenceRule,
    support_module,
)
from testresources.core.match_dependency import check_version, evaluate


def core_support_modules(version: str) -> list[DependencyCoordinate]:
    """The support modules present on every test resources classpath."""
    check_version(version)
    return [support_module(module_id, version) for module_id in CORE_SUPPORT]


def infer_classpath(
    dependencies: Sequence[DependencyCoordinate],
    version: str,
    rules: Sequence[InferenceRule] = RULE_TABLE,
) -> list[DependencyCoordinate]:
    """Determine the dependencies to add to the test resources classpath.

    The result mostly consists of test resources modules, but may also contain
    entries copied from the input (database drivers, for example).
    """
    result = core_support_modules(version)
    for dependency in dependencies:
        result.extend(evaluate(dependency, dependencies, version, rules))
    return result
