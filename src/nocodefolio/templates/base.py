"""Abstract base class for pluggable site themes.

Every theme produces the same Next.js file layout. A theme supplies a
:class:`ThemeDescriptor` (Tailwind class tokens, section order, package
suffix, font) and may override individual ``render_*`` section methods.
"""

from __future__ import annotations

import html
import json
import re
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from nocodefolio.models.portfolio import PortfolioRecord, Theme
from nocodefolio.services.normalizer import normalize_record
from nocodefolio.templates import scaffold

__all__ = [
    "PROJECT_FILES",
    "SECTION_ORDER",
    "SiteTemplate",
    "ThemeDescriptor",
    "ThemeTokens",
]

PROJECT_FILES = (
    "app/layout.tsx",
    "app/page.tsx",
    "app/globals.css",
    "package.json",
    "tailwind.config.js",
    "postcss.config.js",
    "next.config.js",
    "tsconfig.json",
)

SECTION_ORDER = ("about", "experience", "skills", "projects", "contact")

_NAV_LABELS = {
    "about": "About",
    "experience": "Experience",
    "skills": "Skills",
    "projects": "Projects",
    "contact": "Contact",
}
_SECTION_HEADINGS = {**_NAV_LABELS, "contact": "Get In Touch"}
_CONTAINER_CLASSES = {
    "about": "max-w-4xl",
    "experience": "max-w-4xl",
    "skills": "max-w-4xl",
    "projects": "max-w-5xl",
    "contact": "max-w-3xl text-center",
}

# Characters that would end or reinterpret a JavaScript template literal,
# plus control characters and lone surrogates that cannot appear verbatim.
_TEMPLATE_LITERAL_HAZARD = re.compile(
    r"\$\{|[\\`\r\x00-\x08\x0b\x0c\x0e-\x1f\x7f\ud800-\udfff]"
)
_TEMPLATE_LITERAL_ESCAPES = {
    "${": "\\${",
    "\\": "\\\\",
    "`": "\\`",
    "\r": "\\r",
}
_HTML_TAG = re.compile(r"<[^>]*>")

_PAGE_IMPORTS = (
    "import Image from 'next/image';\n"
    "import { FiDownload, FiExternalLink, FiGithub, FiLinkedin, FiMail, FiPhone } "
    "from 'react-icons/fi';\n"
)
_COVER = "w-full h-full object-cover"
_PROJECT_IMAGE = "w-full h-56 object-cover"


def pad(depth: int, text: str) -> str:
    """Indent *text* by *depth* JSX levels (two spaces each)."""
    return "  " * depth + text


@dataclass(frozen=True, slots=True)
class ThemeTokens:
    """Tailwind class lists for each visual slot of the page."""

    page: str
    nav: str
    nav_link: str
    avatar_ring: str
    heading: str
    bio: str
    body_text: str
    accent_text: str
    separator: str
    card: str
    alt_section: str
    chip: str
    project_card: str
    project_body: str
    primary_button: str
    secondary_button: str
    icon_link: str
    footer: str


@dataclass(frozen=True, slots=True)
class ThemeDescriptor:
    """Everything that distinguishes one theme's output from another's."""

    theme: Theme
    display_name: str
    package_suffix: str
    tokens: ThemeTokens
    backdrop_class: str
    backdrop_style: str
    font_family: str | None = None
    section_order: tuple[str, ...] = SECTION_ORDER


class SiteTemplate(ABC):
    """Interface that every site theme must implement."""

    @property
    @abstractmethod
    def descriptor(self) -> ThemeDescriptor:
        """Tokens, ordering and naming for this theme."""

    @property
    def name(self) -> str:
        return self.descriptor.display_name

    # ------------------------------------------------------------------
    # public API
    # ------------------------------------------------------------------

    def build(self, data: Mapping[str, Any] | PortfolioRecord | None) -> dict[str, str]:
        """Return the generated project as ``{relative path: file content}``.

        *data* is normalized first and stamped with this template's theme, so
        partial records and records naming another theme are accepted.
        """
        record = normalize_record(data, self.descriptor.theme)
        font = self.descriptor.font_family
        suffix = self.descriptor.package_suffix
        files = {
            "app/layout.tsx": self.render_layout(record),
            "app/page.tsx": self.render_page(record),
            "app/globals.css": scaffold.globals_css(font),
            "package.json": scaffold.package_manifest(record.name, suffix),
            "tailwind.config.js": scaffold.tailwind_config(font),
            "postcss.config.js": scaffold.postcss_config(),
            "next.config.js": scaffold.next_config(),
            "tsconfig.json": scaffold.tsconfig(),
        }
        return {path: files[path] for path in PROJECT_FILES}

    def render_layout(self, record: PortfolioRecord) -> str:
        js = self.js_string
        title = self.strip_html(record.name)
        return (
            "import type { Metadata } from 'next';\n"
            "import type { ReactNode } from 'react';\n"
            "import './globals.css';\n"
            "\n"
            "export const metadata: Metadata = {\n"
            f"  title: {js(f'{title} | Portfolio')},\n"
            f"  description: {js(f'Portfolio of {title}')},\n"
            "};\n"
            "\n"
            "export default function RootLayout({ children }: { children: ReactNode }) {\n"
            "  return (\n"
            '    <html lang="en">\n'
            "      <head>\n"
            f'        <link rel="icon" href={{{js(record.favicon)}}} />\n'
            "      </head>\n"
            "      <body>{children}</body>\n"
            "    </html>\n"
            "  );\n"
            "}\n"
        )

    def render_page(self, record: PortfolioRecord) -> str:
        d = self.descriptor
        backdrop = f"style={{{{ background: {self.js_string(d.backdrop_style)} }}}}"
        lines = [
            "export default function Home() {",
            "  return (",
            pad(2, f'<div className="relative min-h-screen {d.tokens.page}">'),
            pad(3, f'<div className="{d.backdrop_class}" {backdrop} />'),
            pad(3, '<main className="relative">'),
            *self.render_nav(record),
            *self.render_hero(record),
        ]
        for position, section in enumerate(d.section_order):
            lines.extend(self.render_section(section, record, position))
        lines.extend(
            [
                *self.render_footer(record),
                pad(3, "</main>"),
                pad(2, "</div>"),
                "  );",
                "}",
            ]
        )
        return _PAGE_IMPORTS + "\n" + "\n".join(lines) + "\n"

    # ------------------------------------------------------------------
    # sections
    # ------------------------------------------------------------------

    def render_section(self, section: str, record: PortfolioRecord, position: int) -> list[str]:
        """Wrap the body of *section* in its anchor, container and heading.

        Sections at odd positions get the theme's alternate background.
        """
        body = self._section_renderers()[section]
        section_class = "py-24"
        if position % 2:
            section_class += f" {self.descriptor.tokens.alt_section}"
        heading = _SECTION_HEADINGS[section]
        return [
            pad(4, f'<section id="{section}" className="{section_class}">'),
            pad(5, f'<div className="container mx-auto px-6 {_CONTAINER_CLASSES[section]}">'),
            pad(6, f'<h2 className="text-3xl font-extrabold">{heading}</h2>'),
            *body(record),
            pad(5, "</div>"),
            pad(4, "</section>"),
        ]

    def _section_renderers(self) -> dict[str, Callable[[PortfolioRecord], list[str]]]:
        return {
            "about": self.render_about,
            "experience": self.render_experience,
            "skills": self.render_skills,
            "projects": self.render_projects,
            "contact": self.render_contact,
        }

    def render_nav(self, record: PortfolioRecord) -> list[str]:
        t = self.descriptor.tokens
        links = [
            pad(7, f'<a href="#{section}" className="{t.nav_link}">{_NAV_LABELS[section]}</a>')
            for section in self.descriptor.section_order
        ]
        brand = self.raw_html("a", record.name, "text-sm font-semibold", extra='href="#profile"')
        return [
            pad(4, f'<nav className="sticky top-0 z-40 px-6 py-3 {t.nav}">'),
            pad(5, '<div className="max-w-6xl mx-auto flex items-center justify-between">'),
            pad(6, brand),
            pad(6, '<div className="hidden md:flex items-center gap-4 text-xs">'),
            *links,
            pad(6, "</div>"),
            pad(5, "</div>"),
            pad(4, "</nav>"),
        ]

    def render_hero(self, record: PortfolioRecord) -> list[str]:
        t = self.descriptor.tokens
        contact = record.contact
        lines = [
            pad(4, '<section id="profile" className="min-h-screen flex items-center '
                 'justify-center px-6 py-24">'),
            pad(5, '<div className="max-w-4xl w-full text-center">'),
        ]
        if record.profile_image:
            avatar = f"mx-auto mb-8 w-36 h-36 rounded-full ring-4 {t.avatar_ring} overflow-hidden"
            lines += [
                pad(6, f'<div className="{avatar}">'),
                pad(7, self.image(record.profile_image, "Avatar", 144, 144, _COVER)),
                pad(6, "</div>"),
            ]
        lines += [
            pad(6, self.raw_html("h1", record.name, t.heading)),
            pad(6, self.raw_html("div", record.bio, f"mt-4 {t.bio}")),
            pad(6, '<div className="mt-6 flex items-center justify-center gap-4">'),
        ]
        if record.resume_link:
            lines += [
                pad(7, self.anchor(record.resume_link, t.primary_button)),
                pad(8, '<FiDownload className="inline -mt-1 mr-2" /> Download CV'),
                pad(7, "</a>"),
            ]
        lines.append(pad(7, '<div className="flex items-center gap-3">'))
        socials = (
            (contact.github, contact.github, "GitHub", "FiGithub", True),
            (contact.linkedin, contact.linkedin, "LinkedIn", "FiLinkedin", True),
            (contact.email, f"mailto:{contact.email}", "Email", "FiMail", False),
        )
        for value, href, label, icon, external in socials:
            if value:
                link = self.anchor(href, t.icon_link, external=external, label=label)
                lines.append(pad(8, f"{link}<{icon} size={{20}} /></a>"))
        lines += [
            pad(7, "</div>"),
            pad(6, "</div>"),
            pad(5, "</div>"),
            pad(4, "</section>"),
        ]
        return lines

    def render_about(self, record: PortfolioRecord) -> list[str]:
        body_class = f"mt-4 leading-relaxed {self.descriptor.tokens.body_text}"
        return [pad(6, self.raw_html("div", record.about_text, body_class))]

    def render_experience(self, record: PortfolioRecord) -> list[str]:
        t = self.descriptor.tokens
        lines = [pad(6, '<div className="mt-8 space-y-6">')]
        for entry in record.work_experience:
            lines += [
                pad(7, f'<div className="relative p-6 {t.card}">'),
                pad(8, self.raw_html("h3", entry.title, "text-xl font-bold")),
                pad(8, f'<div className="flex items-center gap-4 text-sm {t.accent_text}">'),
                pad(9, self.raw_html("div", entry.company)),
                pad(9, f'<span className="{t.separator}">•</span>'),
                pad(9, self.raw_html("div", entry.duration)),
                pad(8, "</div>"),
                pad(8, self.raw_html("div", entry.description, f"mt-2 {t.body_text}")),
                pad(7, "</div>"),
            ]
        lines.append(pad(6, "</div>"))
        return lines

    def render_skills(self, record: PortfolioRecord) -> list[str]:
        t = self.descriptor.tokens
        lines = [pad(6, '<div className="mt-6 flex flex-wrap gap-3">')]
        for skill in record.skills:
            title = f" title={{{self.js_string(skill.level)}}}" if skill.level else ""
            chip = f'<div className="inline-flex items-center gap-2 {t.chip}"{title}>'
            lines.append(pad(7, chip))
            if skill.icon:
                alt = self.strip_html(skill.name)
                lines.append(pad(8, self.image(skill.icon, alt, 20, 20, "w-5 h-5 object-contain")))
            lines += [
                pad(8, self.raw_html("span", skill.name)),
                pad(7, "</div>"),
            ]
        lines.append(pad(6, "</div>"))
        return lines

    def render_projects(self, record: PortfolioRecord) -> list[str]:
        t = self.descriptor.tokens
        lines = [pad(6, '<div className="mt-8 grid grid-cols-1 md:grid-cols-2 gap-8">')]
        for project in record.projects:
            lines.append(pad(7, f'<div className="relative overflow-hidden {t.project_card}">'))
            if project.image:
                alt = self.strip_html(project.title)
                lines.append(pad(8, self.image(project.image, alt, 800, 480, _PROJECT_IMAGE)))
            lines += [
                pad(8, f'<div className="p-6 {t.project_body}">'),
                pad(9, self.raw_html("h3", project.title, "text-xl font-bold")),
                pad(9, '<div className="mt-3 flex gap-3">'),
            ]
            if project.github_link:
                lines += [
                    pad(10, self.anchor(project.github_link, t.secondary_button)),
                    pad(11, '<FiGithub className="inline mr-1" /> GitHub'),
                    pad(10, "</a>"),
                ]
            if project.live_demo_link:
                lines += [
                    pad(10, self.anchor(project.live_demo_link, t.primary_button)),
                    pad(11, '<FiExternalLink className="inline mr-1" /> Live'),
                    pad(10, "</a>"),
                ]
            lines += [
                pad(9, "</div>"),
                pad(8, "</div>"),
                pad(7, "</div>"),
            ]
        lines.append(pad(6, "</div>"))
        return lines

    def render_contact(self, record: PortfolioRecord) -> list[str]:
        t = self.descriptor.tokens
        contact = record.contact
        email = contact.email or "your@email.com"
        lines = [pad(6, self.raw_html("div", email, f"mt-4 inline-block {t.accent_text}"))]
        if contact.phone:
            lines += [
                pad(6, '<div className="mt-3">'),
                pad(7, self.anchor(f"tel:{contact.phone}", t.icon_link, external=False)),
                pad(8, '<FiPhone className="inline -mt-1 mr-2" />'),
                pad(8, self.raw_html("span", contact.phone)),
                pad(7, "</a>"),
                pad(6, "</div>"),
            ]
        return lines

    def render_footer(self, record: PortfolioRecord) -> list[str]:
        name = self.raw_html("span", record.name)
        return [
            pad(4, f'<footer className="{self.descriptor.tokens.footer}">'),
            pad(5, f"© {{new Date().getFullYear()}} {name}. All Rights Reserved."),
            pad(4, "</footer>"),
        ]

    # ------------------------------------------------------------------
    # Shared helpers available to all templates
    # ------------------------------------------------------------------

    @staticmethod
    def escape_template_literal(text: str) -> str:
        r"""Escape *text* for the body of a JavaScript template literal.

        Handles: ``\ ` ${``, carriage returns, other control characters and
        lone surrogates. Evaluating the resulting literal yields *text*.
        """

        def _replace(match: re.Match[str]) -> str:
            token = match.group()
            escaped = _TEMPLATE_LITERAL_ESCAPES.get(token)
            if escaped is not None:
                return escaped
            return f"\\u{ord(token):04x}"

        return _TEMPLATE_LITERAL_HAZARD.sub(_replace, text)

    @classmethod
    def template_literal(cls, text: str) -> str:
        return f"`{cls.escape_template_literal(text)}`"

    @staticmethod
    def js_string(text: str) -> str:
        """Return *text* as a double-quoted, ASCII-only JavaScript string literal."""
        return json.dumps(text)

    @classmethod
    def raw_html(cls, tag: str, markup: str, class_name: str = "", *, extra: str = "") -> str:
        """Return a JSX element rendering *markup* verbatim via ``dangerouslySetInnerHTML``."""
        attrs = ""
        if extra:
            attrs += f" {extra}"
        if class_name:
            attrs += f' className="{class_name}"'
        literal = cls.template_literal(markup)
        return f"<{tag}{attrs} dangerouslySetInnerHTML={{{{ __html: {literal} }}}} />"

    @classmethod
    def anchor(
        cls,
        href: str,
        class_name: str,
        *,
        external: bool = True,
        label: str = "",
    ) -> str:
        """Return the opening ``<a>`` tag for *href*."""
        attrs = [f"href={{{cls.js_string(href)}}}"]
        if external:
            attrs.append('target="_blank" rel="noopener noreferrer"')
        if label:
            attrs.append(f'aria-label="{label}"')
        attrs.append(f'className="{class_name}"')
        return f"<a {' '.join(attrs)}>"

    @classmethod
    def image(cls, src: str, alt: str, width: int, height: int, class_name: str) -> str:
        """Return a ``next/image`` element for a remote *src*."""
        js = cls.js_string
        return (
            f"<Image src={{{js(src)}}} alt={{{js(alt)}}} width={{{width}}} "
            f'height={{{height}}} className="{class_name}" />'
        )

    @staticmethod
    def strip_html(text: str) -> str:
        """Drop tags, decode entities and collapse whitespace in *text*."""
        return " ".join(html.unescape(_HTML_TAG.sub("", text)).split())
