"""Fill structural defaults on a possibly-partial portfolio record.

The editor may hand over records with missing keys, ``None`` values, legacy
camelCase keys or stray non-string values. :func:`normalize_record` turns any
of these into a complete :class:`PortfolioRecord` without raising.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from pydantic.alias_generators import to_camel

from nocodefolio.constants.defaults import PLACEHOLDERS
from nocodefolio.models.portfolio import (
    Contact,
    PortfolioRecord,
    Project,
    Skill,
    Theme,
    WorkEntry,
)

__all__ = ["normalize_record"]

_WORK_FIELDS = tuple(WorkEntry.model_fields)
_SKILL_FIELDS = tuple(Skill.model_fields)
_PROJECT_FIELDS = tuple(Project.model_fields)
_CONTACT_FIELDS = tuple(Contact.model_fields)


def _lookup(data: Mapping[str, Any], field: str) -> Any:
    """Return *field* from *data*, accepting the snake_case or camelCase key."""
    if field in data:
        return data[field]
    return data.get(to_camel(field))


def _text(value: Any, default: str = "") -> str:
    """Coerce *value* to text; falsy and non-scalar values become *default*."""
    if isinstance(value, str):
        return value or default
    if isinstance(value, bool):
        return default
    if isinstance(value, int | float):
        return str(value)
    return default


def _optional_text(value: Any) -> str | None:
    if isinstance(value, str):
        return value
    if isinstance(value, int | float) and not isinstance(value, bool):
        return str(value)
    return None


def _as_mapping(value: Any) -> Mapping[str, Any] | None:
    if isinstance(value, Mapping):
        return value
    if hasattr(value, "model_dump"):
        return value.model_dump()
    return None


def _entries(value: Any, fields: tuple[str, ...]) -> list[dict[str, str]]:
    """Return one dict per mapping-like element of *value*, order preserved."""
    if isinstance(value, str | bytes) or not isinstance(value, Sequence):
        return []
    result: list[dict[str, str]] = []
    for raw in value:
        entry = _as_mapping(raw)
        if entry is None:
            continue
        result.append({field: _text(_lookup(entry, field)) for field in fields})
    return result


def normalize_record(
    data: Mapping[str, Any] | PortfolioRecord | None,
    theme: Theme | str,
) -> PortfolioRecord:
    """Return a fully populated record built from *data*.

    Args:
        data: Partial record as a mapping (either key spelling), an existing
            record, or ``None``.
        theme: Theme identifier stamped on the result, regardless of the
            theme stated in *data*.

    Returns:
        A new :class:`PortfolioRecord`. Applying this function to its own
        output with the same *theme* returns an equal record.
    """
    source = _as_mapping(data) or {}
    contact = _as_mapping(_lookup(source, "contact")) or {}
    work = _entries(_lookup(source, "work_experience"), _WORK_FIELDS)
    skills = _entries(_lookup(source, "skills"), _SKILL_FIELDS)
    projects = _entries(_lookup(source, "projects"), _PROJECT_FIELDS)

    return PortfolioRecord(
        name=_text(_lookup(source, "name"), PLACEHOLDERS["name"]),
        bio=_text(_lookup(source, "bio"), PLACEHOLDERS["bio"]),
        profile_image=_text(_lookup(source, "profile_image"), PLACEHOLDERS["profile_image"]),
        resume_link=_text(_lookup(source, "resume_link"), PLACEHOLDERS["resume_link"]),
        about_text=_text(_lookup(source, "about_text"), PLACEHOLDERS["about_text"]),
        work_experience=tuple(WorkEntry(**entry) for entry in work),
        skills=tuple(Skill(**entry) for entry in skills),
        projects=tuple(Project(**entry) for entry in projects),
        contact=Contact(**{field: _text(_lookup(contact, field)) for field in _CONTACT_FIELDS}),
        theme=str(theme),
        vercel_project_id=_optional_text(_lookup(source, "vercel_project_id")),
        vercel_domain=_optional_text(_lookup(source, "vercel_domain")),
        favicon=_text(_lookup(source, "favicon"), PLACEHOLDERS["favicon"]),
    )
