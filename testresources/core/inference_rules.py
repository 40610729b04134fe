"""Inference Rules — the static table mapping user dependencies to support modules.

Invariants:
    - RULE_TABLE is an immutable, ordered tuple; declaration order is output order
    - Every rule is a frozen dataclass tagged with a RuleKind (closed tagged union)
    - Predicates are pure functions of their argument with no captured mutable state
    - CORE_SUPPORT modules are always emitted first, "server" before "testcontainers"

Design Decisions:
    - Declarative data over a callback builder: adding a framework integration means
      appending one entry here; match_dependency and infer_classpath never change
    - Classpath predicates receive the whole input sequence, including the dependency
      under evaluation, so a driver can satisfy its own presence check
"""

from dataclasses import dataclass, field
from typing import Callable, Sequence, Union

from testresources.core.dependency_coordinate import DependencyCoordinate
from testresources.core.domain_types import ModuleId, ModuleNotation, RuleKind


TEST_RESOURCES_GROUP = "io.micronaut.testresources"
TEST_RESOURCES_ARTIFACT_PREFIX = "micronaut-test-resources-"

CORE_SUPPORT: tuple[ModuleId, ...] = (
    ModuleId("server"),
    ModuleId("testcontainers"),
)

ArtifactPredicate = Callable[[str], bool]
DependencyPredicate = Callable[[DependencyCoordinate], bool]
ClasspathPredicate = Callable[[Sequence[DependencyCoordinate]], bool]


# ─── Rule Variants ───────────────────────────────────────────────

@dataclass(frozen=True)
class ExactArtifactRule:
    """Artifact name equality ⇒ one support module."""
    artifact: str
    module_id: ModuleId
    kind: RuleKind = field(default=RuleKind.EXACT_ARTIFACT, init=False)


@dataclass(frozen=True)
class PredicateRule:
    """Artifact predicate AND classpath predicate ⇒ one support module."""
    artifact_predicate: ArtifactPredicate
    classpath_predicate: ClasspathPredicate
    module_id: ModuleId
    kind: RuleKind = field(default=RuleKind.PREDICATE, init=False)


@dataclass(frozen=True)
class PassthroughRule:
    """Module in set ⇒ the dependency itself is copied to the output."""
    modules: frozenset[ModuleNotation]
    kind: RuleKind = field(default=RuleKind.PASSTHROUGH, init=False)


InferenceRule = Union[ExactArtifactRule, PredicateRule, PassthroughRule]


# ─── Predicate Builders ──────────────────────────────────────────

def artifact_starts_with(prefix: str) -> ArtifactPredicate:
    return lambda name: name.startswith(prefix)


def artifact_equals(artifact: str) -> DependencyPredicate:
    return lambda dep: dep.artifact == artifact


def module_equals(module: str) -> DependencyPredicate:
    return lambda dep: dep.module == module


def any_dependency(predicate: DependencyPredicate) -> ClasspathPredicate:
    """Lift a per-dependency predicate to 'some dependency on the classpath matches'."""
    return lambda deps: any(predicate(d) for d in deps)


def always(_deps: Sequence[DependencyCoordinate]) -> bool:
    return True


# ─── Support Module Coordinates ──────────────────────────────────

def support_module(module_id: str, version: str) -> DependencyCoordinate:
    """Synthesize io.micronaut.testresources:micronaut-test-resources-<id>:<version>."""
    return DependencyCoordinate(
        TEST_RESOURCES_GROUP,
        TEST_RESOURCES_ARTIFACT_PREFIX + module_id,
        version,
    )


# ─── Rule Table ──────────────────────────────────────────────────

MICRONAUT_DATA_PREFIX = "micronaut-data-"

MYSQL_CONNECTOR_JAVA = ModuleNotation("mysql:mysql-connector-java")
POSTGRESQL = ModuleNotation("org.postgresql:postgresql")
MARIADB_JAVA_CLIENT = ModuleNotation("org.mariadb.jdbc:mariadb-java-client")
MONGODB_DRIVER_ASYNC = ModuleNotation("org.mongodb:mongodb-driver-async")
MONGODB_DRIVER_SYNC = ModuleNotation("org.mongodb:mongodb-driver-sync")
MONGODB_DRIVER_REACTIVESTREAMS = ModuleNotation("org.mongodb:mongodb-driver-reactivestreams")

RULE_TABLE: tuple[InferenceRule, ...] = (
    ExactArtifactRule("micronaut-kafka", ModuleId("kafka")),
    ExactArtifactRule("micronaut-mqtt", ModuleId("hivemq")),
    ExactArtifactRule("micronaut-data-mongodb", ModuleId("mongodb")),
    PredicateRule(
        artifact_starts_with("micronaut-neo4j"), always, ModuleId("neo4j"),
    ),
    PredicateRule(
        artifact_starts_with(MICRONAUT_DATA_PREFIX),
        any_dependency(artifact_equals("mysql-connector-java")),
        ModuleId("jdbc-mysql"),
    ),
    PredicateRule(
        artifact_starts_with(MICRONAUT_DATA_PREFIX),
        any_dependency(module_equals(POSTGRESQL)),
        ModuleId("jdbc-postgresql"),
    ),
    PredicateRule(
        artifact_starts_with(MICRONAUT_DATA_PREFIX),
        any_dependency(module_equals(MARIADB_JAVA_CLIENT)),
        ModuleId("jdbc-mariadb"),
    ),
    PassthroughRule(frozenset({
        MYSQL_CONNECTOR_JAVA,
        POSTGRESQL,
        MARIADB_JAVA_CLIENT,
        MONGODB_DRIVER_ASYNC,
        MONGODB_DRIVER_SYNC,
        MONGODB_DRIVER_REACTIVESTREAMS,
    })),
)
