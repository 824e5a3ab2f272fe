"""Placeholder values used when a portfolio record is missing content.

The normalizer fills top-level text fields from :data:`PLACEHOLDERS`, and the
editing reducer seeds newly appended entries from :data:`NEW_ENTRY_DEFAULTS`.
"""

from __future__ import annotations

from types import MappingProxyType

FALLBACK_FAVICON = "https://nocodefolio.vercel.app/favicon.ico"

PLACEHOLDERS = MappingProxyType(
    {
        "name": "Your Name",
        "bio": "Build cosmic experiences.",
        "about_text": "Tell your story",
        "profile_image": "",
        "resume_link": "",
        "favicon": FALLBACK_FAVICON,
    }
)

NEW_ENTRY_DEFAULTS = MappingProxyType(
    {
        "work_experience": MappingProxyType(
            {
                "title": "New Role",
                "company": "Company",
                "duration": "2024 — Present",
                "description": "Description",
            }
        ),
        "skills": MappingProxyType({"name": "New Skill", "level": "Beginner", "icon": ""}),
        "projects": MappingProxyType(
            {
                "title": "New Project",
                "image": "",
                "github_link": "",
                "live_demo_link": "",
            }
        ),
    }
)
