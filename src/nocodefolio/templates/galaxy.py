"""Galaxy theme.

Deep slate background with fuchsia, cyan and emerald accents, a gradient
headline and radial "nebula" glows behind the page.
"""

from __future__ import annotations

from nocodefolio.models.portfolio import Theme
from nocodefolio.templates.base import SiteTemplate, ThemeDescriptor, ThemeTokens

__all__ = ["GalaxySiteTemplate"]

_TOKENS = ThemeTokens(
    page="bg-slate-950 text-slate-100 font-lexend selection:bg-fuchsia-500/20",
    nav="bg-slate-950/80 backdrop-blur border-b border-slate-800",
    nav_link="text-slate-300 hover:text-fuchsia-400",
    avatar_ring="ring-fuchsia-500/40",
    heading=(
        "text-5xl md:text-7xl font-black tracking-tight bg-clip-text text-transparent "
        "bg-gradient-to-r from-fuchsia-400 via-cyan-300 to-emerald-300"
    ),
    bio="text-lg md:text-xl text-slate-300",
    body_text="text-slate-300",
    accent_text="text-fuchsia-300",
    separator="text-slate-500",
    card="bg-slate-900 border border-slate-800 rounded-xl",
    alt_section="bg-slate-900/50",
    chip="bg-slate-900 border border-slate-800 rounded-full px-3 py-1 text-slate-300",
    project_card="rounded-xl border border-slate-800",
    project_body="bg-slate-900/80",
    primary_button=(
        "px-5 py-2 rounded-lg bg-fuchsia-600 hover:bg-fuchsia-500 text-white font-semibold"
    ),
    secondary_button="px-3 py-1.5 rounded-md bg-slate-800 hover:bg-slate-700 text-slate-200",
    icon_link="text-slate-400 hover:text-fuchsia-400",
    footer="py-8 text-center text-sm text-slate-500 border-t border-slate-800",
)

_DESCRIPTOR = ThemeDescriptor(
    theme=Theme.GALAXY,
    display_name="Galaxy",
    package_suffix="nocodefolio-galaxy",
    tokens=_TOKENS,
    backdrop_class="pointer-events-none absolute inset-0 opacity-30",
    backdrop_style=(
        "radial-gradient(600px circle at 0% 0%, rgba(217, 70, 239, 0.25), transparent 40%), "
        "radial-gradient(800px circle at 100% 0%, rgba(59, 130, 246, 0.2), transparent 40%), "
        "radial-gradient(600px circle at 100% 100%, rgba(16, 185, 129, 0.2), transparent 40%)"
    ),
    font_family="Lexend",
)


class GalaxySiteTemplate(SiteTemplate):
    """Dark, nebula-lit single page portfolio."""

    @property
    def descriptor(self) -> ThemeDescriptor:
        return _DESCRIPTOR
