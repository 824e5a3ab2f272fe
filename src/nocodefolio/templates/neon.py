"""Neon theme.

Black page with cyan type, a conic colour glow and a call-to-action
email button in the contact section.
"""

from __future__ import annotations

from nocodefolio.models.portfolio import PortfolioRecord, Theme
from nocodefolio.templates.base import SiteTemplate, ThemeDescriptor, ThemeTokens, pad

__all__ = ["NeonSiteTemplate"]

_TOKENS = ThemeTokens(
    page="bg-black text-cyan-100 selection:bg-cyan-400/20",
    nav="bg-black/70 backdrop-blur border-b border-white/10",
    nav_link="text-cyan-300 hover:text-cyan-100",
    avatar_ring="ring-cyan-400/40",
    heading=(
        "text-6xl md:text-7xl font-black tracking-tight "
        "drop-shadow-[0_0_12px_rgba(34,211,238,0.6)]"
    ),
    bio="text-cyan-300",
    body_text="text-cyan-200/80",
    accent_text="text-fuchsia-300",
    separator="text-cyan-400/60",
    card="rounded-xl bg-white/5 border border-white/10",
    alt_section="bg-white/5",
    chip="px-3 py-1 rounded-full bg-white/5 border border-white/10 text-cyan-100",
    project_card="rounded-xl bg-black/60 border border-white/10",
    project_body="bg-black/40",
    primary_button="px-5 py-2 rounded-md bg-cyan-500 text-black font-semibold hover:bg-cyan-400",
    secondary_button="px-3 py-1.5 rounded-md bg-white/10 hover:bg-white/20 text-cyan-100",
    icon_link="text-cyan-300 hover:text-cyan-100",
    footer="py-8 text-center text-xs text-cyan-300/70 border-t border-white/10",
)

_DESCRIPTOR = ThemeDescriptor(
    theme=Theme.NEON,
    display_name="Neon",
    package_suffix="nocodefolio-neon",
    tokens=_TOKENS,
    backdrop_class="pointer-events-none fixed inset-0 -z-10 opacity-30",
    backdrop_style=(
        "conic-gradient(from 180deg at 50% 50%, rgba(34,211,238,.25) 0deg, "
        "rgba(192,132,252,.2) 120deg, rgba(34,211,238,.25) 240deg, "
        "rgba(192,132,252,.2) 360deg)"
    ),
)


class NeonSiteTemplate(SiteTemplate):
    """High-contrast cyan-on-black portfolio."""

    @property
    def descriptor(self) -> ThemeDescriptor:
        return _DESCRIPTOR

    def render_contact(self, record: PortfolioRecord) -> list[str]:
        lines = super().render_contact(record)
        email = record.contact.email
        if email:
            button = "px-4 py-2 rounded-md bg-cyan-500 text-black inline-flex items-center gap-2"
            lines += [
                pad(6, '<div className="mt-4">'),
                pad(7, self.anchor(f"mailto:{email}", button, external=False)),
                pad(8, "<FiMail /> Send Email"),
                pad(7, "</a>"),
                pad(6, "</div>"),
            ]
        return lines
