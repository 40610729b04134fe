"""Inference Rules — verifies the static rule table and predicate builders.

Tests:
    - support_module synthesizes io.micronaut.testresources coordinates
    - CORE_SUPPORT is exactly server, testcontainers (in that order)
    - RULE_TABLE reproduces the recognized mappings in declaration order
    - Passthrough set holds the six driver modules
    - Predicate builders are pure
"""

from testresources.core.dependency_coordinate import DependencyCoordinate
from testresources.core.domain_types import RuleKind
from testresources.core.inference_rules import (
    CORE_SUPPORT,
    RULE_TABLE,
    ExactArtifactRule,
    PassthroughRule,
    PredicateRule,
    always,
    any_dependency,
    artifact_equals,
    artifact_starts_with,
    module_equals,
    support_module,
)


def test_support_module_coordinate():
    coord = support_module("kafka", "2.0.0")
    assert coord == DependencyCoordinate(
        "io.micronaut.testresources", "micronaut-test-resources-kafka", "2.0.0",
    )


def test_core_support_order():
    assert CORE_SUPPORT == ("server", "testcontainers")


def test_rule_table_emitted_modules_in_declaration_order():
    emitted = [r.module_id for r in RULE_TABLE if r.kind != RuleKind.PASSTHROUGH]
    assert emitted == [
        "kafka", "hivemq", "mongodb", "neo4j",
        "jdbc-mysql", "jdbc-postgresql", "jdbc-mariadb",
    ]


def test_exact_artifact_rules():
    exact = {r.artifact: r.module_id for r in RULE_TABLE if isinstance(r, ExactArtifactRule)}
    assert exact == {
        "micronaut-kafka": "kafka",
        "micronaut-mqtt": "hivemq",
        "micronaut-data-mongodb": "mongodb",
    }


def test_passthrough_modules():
    passthrough = [r for r in RULE_TABLE if isinstance(r, PassthroughRule)]
    assert len(passthrough) == 1
    assert passthrough[0].modules == {
        "mysql:mysql-connector-java",
        "org.postgresql:postgresql",
        "org.mariadb.jdbc:mariadb-java-client",
        "org.mongodb:mongodb-driver-async",
        "org.mongodb:mongodb-driver-sync",
        "org.mongodb:mongodb-driver-reactivestreams",
    }


def test_rule_kinds_are_tagged():
    assert ExactArtifactRule("a", "b").kind == RuleKind.EXACT_ARTIFACT
    assert PredicateRule(str.isalpha, always, "b").kind == RuleKind.PREDICATE
    assert PassthroughRule(frozenset()).kind == RuleKind.PASSTHROUGH


def test_neo4j_rule_matches_any_neo4j_artifact():
    neo4j = next(r for r in RULE_TABLE
                 if isinstance(r, PredicateRule) and r.module_id == "neo4j")
    assert neo4j.artifact_predicate("micronaut-neo4j-bolt")
    assert not neo4j.artifact_predicate("neo4j-java-driver")
    assert neo4j.classpath_predicate([])


# ─── Predicate builders ──────────────────────────────────────────

def test_artifact_starts_with():
    pred = artifact_starts_with("micronaut-data-")
    assert pred("micronaut-data-jdbc")
    assert not pred("micronaut-kafka")


def test_artifact_and_module_equals():
    driver = DependencyCoordinate("org.postgresql", "postgresql")
    assert artifact_equals("postgresql")(driver)
    assert module_equals("org.postgresql:postgresql")(driver)
    assert not module_equals("postgresql")(driver)


def test_any_dependency_scans_whole_classpath():
    pred = any_dependency(artifact_equals("mysql-connector-java"))
    deps = [
        DependencyCoordinate("io.micronaut.data", "micronaut-data-jdbc"),
        DependencyCoordinate("com.example", "mysql-connector-java"),
    ]
    assert pred(deps)
    assert not pred(deps[:1])
    assert not pred([])
