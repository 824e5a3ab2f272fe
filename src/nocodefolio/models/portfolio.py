"""Portfolio record types shared by the editor contract and the generators.

Attributes are snake_case in Python; the wire format (what the editor sends
and what ``model_dump(by_alias=True)`` returns) is camelCase.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from nocodefolio.constants.defaults import FALLBACK_FAVICON, PLACEHOLDERS

__all__ = [
    "DEFAULT_THEME",
    "Contact",
    "InvalidUpdateError",
    "PortfolioRecord",
    "Project",
    "Skill",
    "Theme",
    "WorkEntry",
]


class Theme(StrEnum):
    """Visual themes the engine can generate a project for."""

    GALAXY = "galaxy"
    NEON = "neon"


DEFAULT_THEME = Theme.GALAXY


class InvalidUpdateError(ValueError):
    """Raised when an editing operation names an unknown field or index."""


class _RecordModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


class WorkEntry(_RecordModel):
    """A single role; every field may hold rich-text HTML."""

    title: str = ""
    company: str = ""
    duration: str = ""
    description: str = ""


class Skill(_RecordModel):
    name: str = ""
    level: str = ""
    icon: str = ""


class Project(_RecordModel):
    title: str = ""
    image: str = ""
    github_link: str = ""
    live_demo_link: str = ""


class Contact(_RecordModel):
    email: str = ""
    linkedin: str = ""
    github: str = ""
    phone: str = ""


class PortfolioRecord(_RecordModel):
    """A fully populated portfolio, as produced by ``normalize_record``."""

    name: str = PLACEHOLDERS["name"]
    bio: str = PLACEHOLDERS["bio"]
    profile_image: str = ""
    resume_link: str = ""
    about_text: str = PLACEHOLDERS["about_text"]
    work_experience: tuple[WorkEntry, ...] = ()
    skills: tuple[Skill, ...] = ()
    projects: tuple[Project, ...] = ()
    contact: Contact = Field(default_factory=Contact)
    theme: str = DEFAULT_THEME.value
    vercel_project_id: str | None = None
    vercel_domain: str | None = None
    favicon: str = FALLBACK_FAVICON
