"""Build and tooling files shared by every generated project.

Everything here is plain configuration: the package manifest, the
TypeScript, Tailwind, PostCSS and Next.js configs, and the global
stylesheet. None of it depends on rich-text content.
"""

from __future__ import annotations

import json
import re

from nocodefolio.constants.dependencies import (
    DEPENDENCIES,
    DEV_DEPENDENCIES,
    PACKAGE_SCRIPTS,
    PACKAGE_VERSION,
)

__all__ = [
    "globals_css",
    "next_config",
    "package_manifest",
    "postcss_config",
    "slugify_name",
    "tailwind_config",
    "tsconfig",
]

_WHITESPACE_RUN = re.compile(r"\s+")

_TSCONFIG = {
    "compilerOptions": {
        "target": "es2017",
        "lib": ["dom", "dom.iterable", "esnext"],
        "allowJs": True,
        "skipLibCheck": True,
        "strict": True,
        "noEmit": True,
        "esModuleInterop": True,
        "module": "esnext",
        "moduleResolution": "bundler",
        "resolveJsonModule": True,
        "isolatedModules": True,
        "jsx": "preserve",
        "incremental": True,
        "plugins": [{"name": "next"}],
    },
    "include": ["next-env.d.ts", "**/*.ts", "**/*.tsx", ".next/types/**/*.ts"],
    "exclude": ["node_modules"],
}


def slugify_name(name: str) -> str:
    """Lower-case *name* and collapse each whitespace run to one hyphen.

    No other characters are touched, so ``"A&B"`` becomes ``"a&b"``.
    """
    return _WHITESPACE_RUN.sub("-", name.lower())


def package_manifest(name: str, suffix: str) -> str:
    """Return ``package.json`` for a project named after *name*."""
    manifest = {
        "name": f"{slugify_name(name)}-{suffix}",
        "version": PACKAGE_VERSION,
        "private": True,
        "scripts": dict(PACKAGE_SCRIPTS),
        "dependencies": dict(DEPENDENCIES),
        "devDependencies": dict(DEV_DEPENDENCIES),
    }
    return json.dumps(manifest, indent=2) + "\n"


def tsconfig() -> str:
    return json.dumps(_TSCONFIG, indent=2) + "\n"


def postcss_config() -> str:
    return (
        "module.exports = {\n"
        "  plugins: {\n"
        "    tailwindcss: {},\n"
        "    autoprefixer: {},\n"
        "  },\n"
        "};\n"
    )


def next_config() -> str:
    """Return ``next.config.js`` allowing remote images from any host."""
    return (
        "/** @type {import('next').NextConfig} */\n"
        "const nextConfig = {\n"
        "  images: {\n"
        "    remotePatterns: [\n"
        "      { protocol: 'https', hostname: '**' },\n"
        "      { protocol: 'http', hostname: '**' },\n"
        "    ],\n"
        "  },\n"
        "};\n"
        "\n"
        "module.exports = nextConfig;\n"
    )


def _font_key(font_family: str) -> str:
    return slugify_name(font_family)


def tailwind_config(font_family: str | None = None) -> str:
    """Return ``tailwind.config.js``; *font_family* adds a ``font-<key>`` utility."""
    extend = "{}"
    if font_family:
        key = json.dumps(_font_key(font_family))
        families = json.dumps([font_family, "sans-serif"])
        extend = "{\n      fontFamily: {\n" f"        {key}: {families},\n" "      },\n    }"
    return (
        "/** @type {import('tailwindcss').Config} */\n"
        "module.exports = {\n"
        "  content: ['./app/**/*.{js,ts,jsx,tsx,mdx}'],\n"
        "  theme: {\n"
        f"    extend: {extend},\n"
        "  },\n"
        "  plugins: [],\n"
        "};\n"
    )


def globals_css(font_family: str | None = None) -> str:
    lines: list[str] = []
    if font_family:
        family = font_family.replace(" ", "+")
        lines.append(
            "@import url('https://fonts.googleapis.com/css2?"
            f"family={family}:wght@300;400;600;700;800;900&display=swap');"
        )
        lines.append("")
    lines.extend(
        [
            "@tailwind base;",
            "@tailwind components;",
            "@tailwind utilities;",
            "",
            "html {",
            "  scroll-behavior: smooth;",
            "}",
        ]
    )
    return "\n".join(lines) + "\n"
