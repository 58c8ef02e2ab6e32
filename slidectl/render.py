"""Markdown rendering of a presentation spec."""

from __future__ import annotations

from slidectl.api import PresentationSpec

_HTML_ESCAPES = str.maketrans(
    {
        "\0": "\ufffd",
        '"': "&#34;",
        "&": "&amp;",
        "'": "&#39;",
        "+": "&#43;",
        "<": "&lt;",
        ">": "&gt;",
    }
)


def _escape(text: str) -> str:
    return text.translate(_HTML_ESCAPES)


def render_markdown(spec: PresentationSpec) -> str:
    """Render the slides as a markdown deck, HTML-escaping every value."""
    parts = ["\n"]
    for slide in spec.slides:
        parts.append(f"\n### {_escape(slide.title)}\n\n")
        parts.extend(f"\n- {_escape(bullet)}\n" for bullet in slide.bullets)
        parts.append("\n\n")
        parts.extend(f"\n![]({_escape(image)})\n" for image in slide.images)
        parts.append("\n\n---\n")
    parts.append("\n")
    return "".join(parts)