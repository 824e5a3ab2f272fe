"""Template registry and theme dispatch for site generation."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from nocodefolio.models.portfolio import DEFAULT_THEME, PortfolioRecord, Theme
from nocodefolio.templates.base import PROJECT_FILES, SiteTemplate
from nocodefolio.templates.galaxy import GalaxySiteTemplate
from nocodefolio.templates.neon import NeonSiteTemplate

logger = logging.getLogger(__name__)

__all__ = [
    "PROJECT_FILES",
    "SiteTemplate",
    "generate_project_files",
    "get_template",
    "list_templates",
    "resolve_theme",
]

_REGISTRY: dict[Theme, SiteTemplate] = {
    Theme.GALAXY: GalaxySiteTemplate(),
    Theme.NEON: NeonSiteTemplate(),
}


def resolve_theme(value: Any) -> Theme:
    """Return the :class:`Theme` named by *value*.

    Unknown, legacy or missing identifiers resolve to ``DEFAULT_THEME``
    rather than raising, so an export always has a template to use.
    """
    if isinstance(value, str):
        try:
            return Theme(value.strip())
        except ValueError:
            pass
    logger.debug("Unknown theme %r; falling back to %s", value, DEFAULT_THEME.value)
    return DEFAULT_THEME


def get_template(theme: Any) -> SiteTemplate:
    """Return the template registered for *theme*, or the default template."""
    return _REGISTRY[resolve_theme(theme)]


def list_templates() -> list[str]:
    """Return sorted identifiers of all registered templates."""
    return sorted(theme.value for theme in _REGISTRY)


def generate_project_files(data: Mapping[str, Any] | PortfolioRecord | None) -> dict[str, str]:
    """Generate the project files for the theme *data* asks for.

    Args:
        data: A portfolio record or partial mapping; its ``theme`` (or legacy
            ``template``) key picks the template.

    Returns:
        Exactly the selected template's ``{path: content}`` mapping.
    """
    if isinstance(data, PortfolioRecord):
        theme = data.theme
    elif isinstance(data, Mapping):
        # Older editor builds stored the theme under "template".
        theme = data.get("theme") or data.get("template")
    else:
        theme = None
    return get_template(theme).build(data)
