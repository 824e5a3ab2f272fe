"""Editing operations on a portfolio record.

These are the only mutations the editor applies between exports. Each
operation is a small frozen dataclass and :func:`apply_update` returns a new
record, leaving the input untouched. The generators never call this module.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, get_args

from nocodefolio.constants.defaults import NEW_ENTRY_DEFAULTS
from nocodefolio.models.portfolio import (
    Contact,
    InvalidUpdateError,
    PortfolioRecord,
    Project,
    Skill,
    WorkEntry,
)

__all__ = [
    "AppendEntry",
    "ContactUpdate",
    "DeleteEntry",
    "EntryField",
    "EntryUpdate",
    "FieldUpdate",
    "RecordUpdate",
    "apply_update",
]

RecordField = Literal[
    "name",
    "bio",
    "profile_image",
    "resume_link",
    "about_text",
    "favicon",
    "theme",
    "vercel_project_id",
    "vercel_domain",
]
ContactField = Literal["email", "linkedin", "github", "phone"]
WorkField = Literal["title", "company", "duration", "description"]
SkillField = Literal["name", "level", "icon"]
ProjectField = Literal["title", "image", "github_link", "live_demo_link"]
EntryField = WorkField | SkillField | ProjectField
Section = Literal["work_experience", "skills", "projects"]

# Fields that can be replaced by a FieldUpdate
_RECORD_FIELDS: tuple[str, ...] = get_args(RecordField)
_CONTACT_FIELDS: tuple[str, ...] = get_args(ContactField)
_SECTION_TYPES: dict[str, type[WorkEntry] | type[Skill] | type[Project]] = {
    "work_experience": WorkEntry,
    "skills": Skill,
    "projects": Project,
}
_SECTION_FIELDS: dict[str, tuple[str, ...]] = {
    "work_experience": get_args(WorkField),
    "skills": get_args(SkillField),
    "projects": get_args(ProjectField),
}
_OPTIONAL_FIELDS = ("vercel_project_id", "vercel_domain")


@dataclass(frozen=True, slots=True)
class FieldUpdate:
    """Replace one top-level scalar field."""

    field: RecordField
    value: str | None


@dataclass(frozen=True, slots=True)
class ContactUpdate:
    """Replace one field of ``contact``."""

    field: ContactField
    value: str


@dataclass(frozen=True, slots=True)
class EntryUpdate:
    """Replace one field of the element at *index* in *section*."""

    section: Section
    index: int
    field: EntryField
    value: str


@dataclass(frozen=True, slots=True)
class AppendEntry:
    """Append a placeholder element to *section*."""

    section: Section


@dataclass(frozen=True, slots=True)
class DeleteEntry:
    """Remove the element at *index* from *section*."""

    section: Section
    index: int


RecordUpdate = FieldUpdate | ContactUpdate | EntryUpdate | AppendEntry | DeleteEntry


def _section_items(record: PortfolioRecord, section: str) -> tuple:
    if section not in _SECTION_TYPES:
        msg = f"Unknown section {section!r}. Available: {', '.join(_SECTION_TYPES)}"
        raise InvalidUpdateError(msg)
    return getattr(record, section)


def _check_index(items: tuple, section: str, index: int) -> None:
    if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < len(items):
        msg = f"Index {index!r} out of range for {section} ({len(items)} entries)"
        raise InvalidUpdateError(msg)


def _apply_field(record: PortfolioRecord, update: FieldUpdate) -> PortfolioRecord:
    if update.field not in _RECORD_FIELDS:
        raise InvalidUpdateError(f"Unknown record field {update.field!r}")
    if update.value is None and update.field not in _OPTIONAL_FIELDS:
        raise InvalidUpdateError(f"Field {update.field!r} cannot be cleared")
    return record.model_copy(update={update.field: update.value})


def _apply_contact(record: PortfolioRecord, update: ContactUpdate) -> PortfolioRecord:
    if update.field not in _CONTACT_FIELDS:
        raise InvalidUpdateError(f"Unknown contact field {update.field!r}")
    contact: Contact = record.contact.model_copy(update={update.field: update.value})
    return record.model_copy(update={"contact": contact})


def _apply_entry(record: PortfolioRecord, update: EntryUpdate) -> PortfolioRecord:
    items = _section_items(record, update.section)
    _check_index(items, update.section, update.index)
    if update.field not in _SECTION_FIELDS[update.section]:
        raise InvalidUpdateError(f"Unknown {update.section} field {update.field!r}")

    updated = items[update.index].model_copy(update={update.field: update.value})
    new_items = items[: update.index] + (updated,) + items[update.index + 1 :]
    return record.model_copy(update={update.section: new_items})


def _apply_append(record: PortfolioRecord, update: AppendEntry) -> PortfolioRecord:
    items = _section_items(record, update.section)
    entry = _SECTION_TYPES[update.section](**NEW_ENTRY_DEFAULTS[update.section])
    return record.model_copy(update={update.section: items + (entry,)})


def _apply_delete(record: PortfolioRecord, update: DeleteEntry) -> PortfolioRecord:
    items = _section_items(record, update.section)
    _check_index(items, update.section, update.index)
    new_items = items[: update.index] + items[update.index + 1 :]
    return record.model_copy(update={update.section: new_items})


_HANDLERS = {
    FieldUpdate: _apply_field,
    ContactUpdate: _apply_contact,
    EntryUpdate: _apply_entry,
    AppendEntry: _apply_append,
    DeleteEntry: _apply_delete,
}


def apply_update(record: PortfolioRecord, update: RecordUpdate) -> PortfolioRecord:
    """Return a copy of *record* with *update* applied.

    Raises:
        InvalidUpdateError: If the update names an unknown field or section,
            or an index outside the section.
    """
    handler = _HANDLERS.get(type(update))
    if handler is None:
        raise InvalidUpdateError(f"Unsupported update {type(update).__name__}")
    return handler(record, update)
