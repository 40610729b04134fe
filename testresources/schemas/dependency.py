"""Dependency Schemas — Pydantic models for classpath inference requests.

Invariants:
    - DependencyRecord.group / artifact: stripped, non-empty, no ':'
    - DependencyRecord.version: optional, stripped, non-empty when present
    - InferenceRequest.version follows the same rule as DependencyRecord.version
    - Round trip record → coordinate → record preserves all three fields

Design Decisions:
    - field_validator for side-effect-free transforms (strip)
"""

from pydantic import BaseModel, Field, field_validator

from testresources.core.dependency_coordinate import DependencyCoordinate


def _strip_optional_version(v: str | None) -> str | None:
    if v is None:
        return None
    v = v.strip()
    if not v:
        raise ValueError("version cannot be empty or whitespace")
    return v


class DependencyRecord(BaseModel):
    """One classpath entry as supplied by a build-tool integration."""
    group: str = Field(min_length=1)
    artifact: str = Field(min_length=1)
    version: str | None = None

    @field_validator("group", "artifact")
    @classmethod
    def strip_identifier(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("identifier cannot be empty or whitespace")
        if ":" in v:
            raise ValueError("identifier cannot contain ':'")
        return v

    @field_validator("version")
    @classmethod
    def strip_version(cls, v: str | None) -> str | None:
        return _strip_optional_version(v)

    def to_coordinate(self) -> DependencyCoordinate:
        return DependencyCoordinate(self.group, self.artifact, self.version)

    @classmethod
    def from_coordinate(cls, coordinate: DependencyCoordinate) -> "DependencyRecord":
        return cls(
            group=coordinate.group,
            artifact=coordinate.artifact,
            version=coordinate.version,
        )


class InferenceRequest(BaseModel):
    """User classpath plus an optional override for support-module versions."""
    dependencies: list[DependencyRecord] = Field(default_factory=list)
    version: str | None = None

    @field_validator("version")
    @classmethod
    def strip_version(cls, v: str | None) -> str | None:
        return _strip_optional_version(v)


class InferenceResponse(BaseModel):
    """Inferred test resources classpath."""
    version: str
    dependencies: list[DependencyRecord]
