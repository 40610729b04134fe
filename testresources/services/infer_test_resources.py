"""Test Resources Inference Service — shell entry point for build integrations.

Invariants:
    - version=None falls back to version_info.get_version() (process-wide default)
    - One INFO log line per inference; the core itself never logs
    - Errors from core and version lookup propagate unchanged

Design Decisions:
    - Thin wrapper: all matching lives in core/infer_classpath.py
    - infer_from_records speaks pydantic schemas for JSON-based integrations
"""

import logging
from typing import Sequence

from testresources.config import get_settings
from testresources.core.dependency_coordinate import DependencyCoordinate
from testresources.core.infer_classpath import infer_classpath
from testresources.infrastructure.observability import setup_logging
from testresources.infrastructure.version_info import get_version
from testresources.schemas.dependency import (
    DependencyRecord,
    InferenceRequest,
    InferenceResponse,
)

logger = logging.getLogger(__name__)


def configure_logging() -> logging.Handler:
    """Install the log handler described by settings (LOG_LEVEL, LOG_FORMAT)."""
    settings = get_settings()
    return setup_logging(settings.log_level, settings.log_format)


def infer_test_resources_classpath(
    dependencies: Sequence[DependencyCoordinate],
    version: str | None = None,
) -> list[DependencyCoordinate]:
    """Infer the test resources classpath for a user classpath.

    Args:
        dependencies: the user classpath
        version: version of the test resources libraries; defaults to the
            current library version

    Returns:
        Support modules and passthrough dependencies to add
    """
    if version is None:
        version = get_version()
    result = infer_classpath(dependencies, version)
    logger.info(
        "Inferred %d test resources entries from %d dependencies",
        len(result), len(dependencies),
        extra={
            "input_count": len(dependencies),
            "output_count": len(result),
            "version": version,
        },
    )
    return result


def infer_from_records(request: InferenceRequest) -> InferenceResponse:
    """Run inference on boundary records and return boundary records."""
    version = request.version if request.version is not None else get_version()
    coordinates = [record.to_coordinate() for record in request.dependencies]
    inferred = infer_test_resources_classpath(coordinates, version)
    return InferenceResponse(
        version=version,
        dependencies=[DependencyRecord.from_coordinate(c) for c in inferred],
    )
