"""Dependency Coordinate — immutable group:artifact[:version] value object.

Invariants:
    - group and artifact are non-empty, unpadded, and contain no ':'
    - module is always f"{group}:{artifact}" (version never participates)
    - Instances are frozen; equality and hash cover group, artifact, version
    - Malformed input raises InvalidDependencyCoordinate at construction

Design Decisions:
    - Frozen dataclass over pydantic model: core stays dependency-free and hashable
    - Fail fast in __post_init__: a blank artifact would otherwise silently match nothing
"""

from dataclasses import dataclass

from testresources.core.domain_types import ModuleNotation
from testresources.core.errors import ErrorContext, InvalidDependencyCoordinate


def _check_part(name: str, value: object) -> None:
    if not isinstance(value, str) or not value.strip():
        raise InvalidDependencyCoordinate(
            f"Dependency {name} must be a non-empty string, got {value!r}",
            field=name, value=value,
        )
    if value != value.strip():
        raise InvalidDependencyCoordinate(
            f"Dependency {name} must not have surrounding whitespace, got {value!r}",
            field=name, value=value,
        )
    if ":" in value:
        raise InvalidDependencyCoordinate(
            f"Dependency {name} must not contain ':', got {value!r}",
            field=name, value=value,
        )


@dataclass(frozen=True)
class DependencyCoordinate:
    """One resolved dependency on a classpath."""

    group: str
    artifact: str
    version: str | None = None

    def __post_init__(self):
        _check_part("group", self.group)
        _check_part("artifact", self.artifact)
        if self.version is not None and (
            not isinstance(self.version, str) or not self.version.strip()
            or self.version != self.version.strip()
        ):
            raise InvalidDependencyCoordinate(
                f"Dependency version must be a non-empty, unpadded string when given, "
                f"got {self.version!r}",
                field="version", value=self.version,
                context=ErrorContext(coordinate=f"{self.group}:{self.artifact}"),
            )

    @property
    def module(self) -> ModuleNotation:
        return ModuleNotation(f"{self.group}:{self.artifact}")

    @classmethod
    def parse(cls, notation: str) -> "DependencyCoordinate":
        """Parse Maven short notation: group:artifact or group:artifact:version."""
        if not isinstance(notation, str):
            raise InvalidDependencyCoordinate(
                f"Dependency notation must be a string, got {notation!r}",
                field="notation", value=notation,
            )
        parts = notation.strip().split(":")
        if len(parts) not in (2, 3):
            raise InvalidDependencyCoordinate(
                f"Expected 'group:artifact[:version]', got {notation!r}",
                field="notation", value=notation,
                context=ErrorContext(coordinate=notation),
            )
        return cls(*parts)

    def __str__(self) -> str:
        if self.version is None:
            return self.module
        return f"{self.module}:{self.version}"
