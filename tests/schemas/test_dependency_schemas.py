"""Dependency Schemas — boundary validation for build-tool supplied records.

Invariants:
    - group/artifact stripped, non-empty, colon-free
    - version optional but never blank
    - records convert to and from core coordinates without loss
"""

import pytest
from pydantic import ValidationError

from testresources.core.dependency_coordinate import DependencyCoordinate
from testresources.schemas.dependency import (
    DependencyRecord,
    InferenceRequest,
    InferenceResponse,
)


def test_record_strips_identifiers():
    record = DependencyRecord(group="  org.postgresql ", artifact="postgresql\n")
    assert record.group == "org.postgresql"
    assert record.artifact == "postgresql"
    assert record.version is None


@pytest.mark.parametrize("fields", [
    {"group": "", "artifact": "postgresql"},
    {"group": "   ", "artifact": "postgresql"},
    {"group": "org.postgresql", "artifact": ""},
    {"group": "org:postgresql", "artifact": "postgresql"},
    {"group": "org.postgresql", "artifact": "postgresql", "version": " "},
    {"artifact": "postgresql"},
])
def test_record_rejects_malformed_fields(fields):
    with pytest.raises(ValidationError):
        DependencyRecord(**fields)


def test_record_to_coordinate():
    record = DependencyRecord(group="org.postgresql", artifact="postgresql", version="42.5.1")
    assert record.to_coordinate() == DependencyCoordinate("org.postgresql", "postgresql", "42.5.1")


def test_record_from_coordinate():
    coord = DependencyCoordinate("mysql", "mysql-connector-java")
    record = DependencyRecord.from_coordinate(coord)
    assert record.group == "mysql"
    assert record.artifact == "mysql-connector-java"
    assert record.version is None


def test_request_defaults():
    request = InferenceRequest()
    assert request.dependencies == []
    assert request.version is None


@pytest.mark.parametrize("version", ["", "   ", "\t\n"])
def test_request_rejects_blank_version(version):
    with pytest.raises(ValidationError):
        InferenceRequest(version=version)


def test_request_strips_version():
    assert InferenceRequest(version=" 2.1.0 ").version == "2.1.0"


def test_request_parses_json():
    request = InferenceRequest.model_validate_json(
        '{"dependencies": [{"group": "io.micronaut.kafka", "artifact": "micronaut-kafka"}],'
        ' "version": "2.1.0"}'
    )
    assert request.dependencies[0].artifact == "micronaut-kafka"
    assert request.version == "2.1.0"


def test_response_serializes():
    response = InferenceResponse(
        version="2.1.0",
        dependencies=[DependencyRecord(group="a", artifact="b", version="1")],
    )
    assert response.model_dump() == {
        "version": "2.1.0",
        "dependencies": [{"group": "a", "artifact": "b", "version": "1"}],
    }
