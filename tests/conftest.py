from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import esprima
import pytest

# The generated layout only uses these two TypeScript-only constructs.
_TYPE_IMPORT = re.compile(r"^import type .*;\n", re.MULTILINE)
_TYPE_ANNOTATIONS = (": Metadata =", ": { children: ReactNode }")


def _walk(node: Any) -> Iterator[dict]:
    """Yield every AST node (a dict with a ``type``) below *node*."""
    if isinstance(node, dict):
        if "type" in node:
            yield node
        for value in node.values():
            yield from _walk(value)
    elif isinstance(node, list):
        for item in node:
            yield from _walk(item)


def _cooked(node: dict) -> str:
    """Return the runtime value of a TemplateLiteral with no substitutions."""
    assert node["expressions"] == [], "template literal must not interpolate"
    return "".join(quasi["value"]["cooked"] for quasi in node["quasis"])


def _parse_tsx(source: str) -> dict:
    code = _TYPE_IMPORT.sub("", source)
    for annotation in _TYPE_ANNOTATIONS:
        code = code.replace(annotation, " =" if annotation.endswith("=") else "")
    return esprima.parseModule(code, {"jsx": True}).toDict()


def _html_literals(source: str) -> list[str]:
    values = []
    for node in _walk(_parse_tsx(source)):
        if node["type"] != "Property" or node["key"].get("name") != "__html":
            continue
        assert node["value"]["type"] == "TemplateLiteral"
        values.append(_cooked(node["value"]))
    return values


def _string_literals(source: str) -> list[str]:
    return [
        node["value"]
        for node in _walk(_parse_tsx(source))
        if node["type"] == "Literal" and isinstance(node["value"], str)
    ]


def _template_literal_value(literal: str) -> str:
    tree = esprima.parseModule(f"const value = {literal};").toDict()
    (node,) = [n for n in _walk(tree) if n["type"] == "TemplateLiteral"]
    return _cooked(node)


@pytest.fixture
def parse_tsx() -> Callable[[str], dict]:
    """Parse a generated ``.tsx`` file with a real JavaScript parser."""
    return _parse_tsx


@pytest.fixture
def html_literals() -> Callable[[str], list[str]]:
    """Return the evaluated ``__html`` values of a generated ``.tsx`` file, in order."""
    return _html_literals


@pytest.fixture
def string_literals() -> Callable[[str], list[str]]:
    return _string_literals


@pytest.fixture
def template_literal_value() -> Callable[[str], str]:
    """Evaluate a JavaScript template literal expression."""
    return _template_literal_value


@pytest.fixture(autouse=True)
def export_dir(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Send default-location exports to a temporary directory."""
    root = tmp_path / "exports"
    monkeypatch.setenv("NOCODEFOLIO_EXPORT_DIR", root.as_posix())
    monkeypatch.delenv("NOCODEFOLIO_MAX_ARCHIVE_BYTES", raising=False)
    return root


@pytest.fixture
def sample_record() -> dict:
    return {
        "name": "Jane Doe",
        "bio": "<p>Full-stack <strong>developer</strong></p>",
        "profileImage": "https://images.example.com/jane.png",
        "resumeLink": "https://example.com/jane.pdf",
        "aboutText": "<p>I build things for the web.</p>",
        "workExperience": [
            {
                "title": "Engineer",
                "company": "Acme",
                "duration": "2021 — 2023",
                "description": "<ul><li>Shipped features</li></ul>",
            },
            {
                "title": "Senior Engineer",
                "company": "Globex",
                "duration": "2023 — Present",
                "description": "Led a team",
            },
        ],
        "skills": [
            {"name": "Python", "level": "Expert", "icon": "https://icons.example.com/py.svg"},
            {"name": "TypeScript", "level": "Intermediate", "icon": ""},
        ],
        "projects": [
            {
                "title": "Portfolio Builder",
                "image": "https://images.example.com/builder.png",
                "githubLink": "https://github.com/jane/builder",
                "liveDemoLink": "https://builder.example.com",
            }
        ],
        "contact": {
            "email": "jane@example.com",
            "linkedin": "https://linkedin.com/in/jane",
            "github": "https://github.com/jane",
            "phone": "+1 555 0100",
        },
        "theme": "galaxy",
    }
