"""Version Info — the process-wide test resources library version.

Invariants:
    - Configured override (TEST_RESOURCES_VERSION) wins over installed metadata
    - Never returns an empty string; raises VersionUnavailableError instead
"""

import logging
from importlib import metadata

from testresources.config import get_settings
from testresources.core.errors import VersionUnavailableError

logger = logging.getLogger(__name__)


def get_version() -> str:
    """Return the version stamped on synthesized support-module coordinates."""
    settings = get_settings()
    if settings.test_resources_version:
        return settings.test_resources_version
    try:
        return metadata.version(settings.distribution_name)
    except metadata.PackageNotFoundError:
        logger.error(
            "Distribution %s not installed", settings.distribution_name,
            extra={"error_code": "VERSION_UNAVAILABLE"},
        )
        raise VersionUnavailableError(settings.distribution_name) from None
