"""
Highlight Renderer — Turn validation results into display output.

Surface text is escaped here and nowhere else. Tokens that failed the
word list are wrapped so the caller can style them.
"""

from typing import Any

from markupsafe import Markup, escape

from wordlevel.validation.document import ValidationResult

INVALID_CLASS = "invalid-word"


def render_html(result: ValidationResult, invalid_class: str = INVALID_CLASS) -> Markup:
    """
    Render annotations as escaped HTML.

    Invalid tokens become <span class="invalid-word">…</span>; whitespace
    between tokens is kept as-is.
    """
    parts: list[str] = []
    for annotation in result.annotations:
        text = escape(annotation.text)
        if annotation.is_valid:
            parts.append(text)
        else:
            parts.append(Markup('<span class="{}">{}</span>').format(invalid_class, text))
        parts.append(escape(annotation.whitespace))
    return Markup("").join(parts)


def render_text(result: ValidationResult, open_marker: str = "[", close_marker: str = "]") -> str:
    """Render annotations as plain text with invalid tokens bracketed."""
    parts: list[str] = []
    for annotation in result.annotations:
        if annotation.is_valid:
            parts.append(annotation.text)
        else:
            parts.append(f"{open_marker}{annotation.text}{close_marker}")
        parts.append(annotation.whitespace)
    return "".join(parts)


def word_count_label(result: ValidationResult) -> str:
    return f"Words: {result.word_count}"


def to_dict(result: ValidationResult) -> dict[str, Any]:
    """JSON-ready view of a result."""
    return {
        "word_count": result.word_count,
        "invalid_count": result.invalid_count,
        "annotations": [
            {
                "text": a.text,
                "is_valid": a.is_valid,
                "whitespace": a.whitespace,
            }
            for a in result.annotations
        ],
    }
