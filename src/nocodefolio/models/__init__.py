"""Data models and type definitions"""

from nocodefolio.models.export import ArchiveBuildError, ExportResult
from nocodefolio.models.portfolio import (
    DEFAULT_THEME,
    Contact,
    InvalidUpdateError,
    PortfolioRecord,
    Project,
    Skill,
    Theme,
    WorkEntry,
)

__all__ = [
    "ArchiveBuildError",
    "Contact",
    "DEFAULT_THEME",
    "ExportResult",
    "InvalidUpdateError",
    "PortfolioRecord",
    "Project",
    "Skill",
    "Theme",
    "WorkEntry",
]
