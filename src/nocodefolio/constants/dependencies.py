"""Pinned npm versions written into every generated ``package.json``."""

from __future__ import annotations

from types import MappingProxyType

PACKAGE_VERSION = "0.1.0"

PACKAGE_SCRIPTS = MappingProxyType(
    {
        "dev": "next dev",
        "build": "next build",
        "start": "next start",
    }
)

DEPENDENCIES = MappingProxyType(
    {
        "next": "14.1.3",
        "react": "^18.2.0",
        "react-dom": "^18.2.0",
        "react-icons": "^5.0.1",
    }
)

# Tailwind and TypeScript must be installed for ``next build`` to succeed
# on a fresh checkout.
DEV_DEPENDENCIES = MappingProxyType(
    {
        "@types/node": "^20.11.30",
        "@types/react": "^18.2.67",
        "@types/react-dom": "^18.2.22",
        "autoprefixer": "^10.4.19",
        "postcss": "^8.4.38",
        "tailwindcss": "^3.4.1",
        "typescript": "^5.4.3",
    }
)
