from __future__ import annotations

from nocodefolio.constants.defaults import (
    FALLBACK_FAVICON,
    NEW_ENTRY_DEFAULTS,
    PLACEHOLDERS,
)
from nocodefolio.constants.dependencies import (
    DEPENDENCIES,
    DEV_DEPENDENCIES,
    PACKAGE_SCRIPTS,
    PACKAGE_VERSION,
)

__all__ = [
    "DEPENDENCIES",
    "DEV_DEPENDENCIES",
    "FALLBACK_FAVICON",
    "NEW_ENTRY_DEFAULTS",
    "PACKAGE_SCRIPTS",
    "PACKAGE_VERSION",
    "PLACEHOLDERS",
]
