"""Tests for the record editing operations."""

from __future__ import annotations

from typing import get_args

import pytest

from nocodefolio.models import InvalidUpdateError, PortfolioRecord, Project, Skill, WorkEntry
from nocodefolio.services import (
    AppendEntry,
    ContactUpdate,
    DeleteEntry,
    EntryUpdate,
    FieldUpdate,
    apply_update,
    normalize_record,
)
from nocodefolio.services.editing import ProjectField, SkillField, WorkField


@pytest.fixture
def record(sample_record: dict) -> PortfolioRecord:
    return normalize_record(sample_record, "galaxy")


def _three_roles() -> PortfolioRecord:
    roles = tuple(WorkEntry(title=f"E{i}") for i in range(3))
    return PortfolioRecord(work_experience=roles)


class TestFieldUpdate:
    def test_replaces_scalar_field(self, record: PortfolioRecord) -> None:
        updated = apply_update(record, FieldUpdate("about_text", "<p>New</p>"))

        assert updated.about_text == "<p>New</p>"
        assert record.about_text == "<p>I build things for the web.</p>"

    def test_other_fields_untouched(self, record: PortfolioRecord) -> None:
        updated = apply_update(record, FieldUpdate("name", "John"))
        assert updated.model_copy(update={"name": record.name}) == record

    def test_optional_deployment_field_can_be_cleared(self, record: PortfolioRecord) -> None:
        record = apply_update(record, FieldUpdate("vercel_domain", "jane.vercel.app"))
        cleared = apply_update(record, FieldUpdate("vercel_domain", None))
        assert cleared.vercel_domain is None

    def test_required_field_cannot_be_cleared(self, record: PortfolioRecord) -> None:
        with pytest.raises(InvalidUpdateError, match="cannot be cleared"):
            apply_update(record, FieldUpdate("name", None))

    def test_unknown_field(self, record: PortfolioRecord) -> None:
        with pytest.raises(InvalidUpdateError, match="Unknown record field"):
            apply_update(record, FieldUpdate("skills", "x"))  # type: ignore[arg-type]


class TestContactUpdate:
    def test_replaces_contact_field(self, record: PortfolioRecord) -> None:
        updated = apply_update(record, ContactUpdate("phone", "+44 20 7946 0000"))

        assert updated.contact.phone == "+44 20 7946 0000"
        assert updated.contact.email == record.contact.email
        assert record.contact.phone == "+1 555 0100"

    def test_unknown_contact_field(self, record: PortfolioRecord) -> None:
        with pytest.raises(InvalidUpdateError):
            apply_update(record, ContactUpdate("twitter", "@jane"))  # type: ignore[arg-type]


class TestEntryUpdate:
    def test_replaces_field_of_one_entry(self, record: PortfolioRecord) -> None:
        updated = apply_update(record, EntryUpdate("work_experience", 1, "company", "Initech"))

        assert updated.work_experience[1].company == "Initech"
        assert updated.work_experience[1].title == "Senior Engineer"
        assert updated.work_experience[0] == record.work_experience[0]

    def test_updates_project_link(self, record: PortfolioRecord) -> None:
        update = EntryUpdate("projects", 0, "live_demo_link", "https://new.example.com")
        updated = apply_update(record, update)
        assert updated.projects[0].live_demo_link == "https://new.example.com"

    def test_index_out_of_range(self, record: PortfolioRecord) -> None:
        with pytest.raises(InvalidUpdateError, match="out of range"):
            apply_update(record, EntryUpdate("skills", 5, "name", "Go"))

    def test_negative_index_rejected(self, record: PortfolioRecord) -> None:
        with pytest.raises(InvalidUpdateError):
            apply_update(record, EntryUpdate("skills", -1, "name", "Go"))

    def test_unknown_entry_field(self, record: PortfolioRecord) -> None:
        with pytest.raises(InvalidUpdateError, match="Unknown skills field"):
            apply_update(record, EntryUpdate("skills", 0, "rating", "5"))  # type: ignore[arg-type]

    def test_field_of_another_section_rejected(self, record: PortfolioRecord) -> None:
        with pytest.raises(InvalidUpdateError, match="Unknown skills field"):
            apply_update(record, EntryUpdate("skills", 0, "title", "x"))

    @pytest.mark.parametrize(
        ("names", "model"),
        [(WorkField, WorkEntry), (SkillField, Skill), (ProjectField, Project)],
    )
    def test_field_names_match_models(self, names: object, model: type) -> None:
        assert set(get_args(names)) == set(model.model_fields)

    def test_unknown_section(self, record: PortfolioRecord) -> None:
        with pytest.raises(InvalidUpdateError, match="Unknown section"):
            update = EntryUpdate("education", 0, "name", "MIT")  # type: ignore[arg-type]
            apply_update(record, update)


class TestAppendEntry:
    def test_appends_role_placeholder(self) -> None:
        updated = apply_update(PortfolioRecord(), AppendEntry("work_experience"))

        assert updated.work_experience == (
            WorkEntry(
                title="New Role",
                company="Company",
                duration="2024 — Present",
                description="Description",
            ),
        )

    def test_appends_skill_placeholder(self, record: PortfolioRecord) -> None:
        updated = apply_update(record, AppendEntry("skills"))

        assert len(updated.skills) == len(record.skills) + 1
        assert updated.skills[-1] == Skill(name="New Skill", level="Beginner", icon="")
        assert updated.skills[:-1] == record.skills

    def test_appends_project_placeholder(self) -> None:
        updated = apply_update(PortfolioRecord(), AppendEntry("projects"))
        assert updated.projects == (Project(title="New Project"),)


class TestDeleteEntry:
    def test_removes_only_the_indexed_entry(self) -> None:
        updated = apply_update(_three_roles(), DeleteEntry("work_experience", 1))
        assert [entry.title for entry in updated.work_experience] == ["E0", "E2"]

    def test_duplicate_entries_delete_by_position(self) -> None:
        twins = PortfolioRecord(skills=(Skill(name="Go"), Skill(name="Go")))
        updated = apply_update(twins, DeleteEntry("skills", 0))
        assert updated.skills == (Skill(name="Go"),)

    def test_original_record_unchanged(self) -> None:
        original = _three_roles()
        apply_update(original, DeleteEntry("work_experience", 0))
        assert len(original.work_experience) == 3

    def test_delete_from_empty_section(self) -> None:
        with pytest.raises(InvalidUpdateError):
            apply_update(PortfolioRecord(), DeleteEntry("projects", 0))

    def test_boolean_index_rejected(self) -> None:
        with pytest.raises(InvalidUpdateError):
            apply_update(_three_roles(), DeleteEntry("work_experience", True))


class TestApplyUpdate:
    def test_unsupported_update_type(self, record: PortfolioRecord) -> None:
        with pytest.raises(InvalidUpdateError, match="Unsupported update"):
            apply_update(record, object())  # type: ignore[arg-type]

    def test_updated_record_still_renders(self, record: PortfolioRecord) -> None:
        from nocodefolio.templates import generate_project_files

        updated = apply_update(record, AppendEntry("projects"))
        files = generate_project_files(updated)
        assert "New Project" in files["app/page.tsx"]
