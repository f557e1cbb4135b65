"""Resume text extraction.

Only plain-text resumes are read. PDF and Word uploads are accepted but
stored with a placeholder in place of their extracted text.
"""

from __future__ import annotations

from pathlib import Path

_PDF_SUFFIXES = frozenset({".pdf"})
_WORD_SUFFIXES = frozenset({".doc", ".docx"})


def extract_resume_text(path: str | Path) -> str:
    """Return resume text for ``path``, or a placeholder for binary formats."""

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(path)

    suffix = path.suffix.lower()
    if suffix in _PDF_SUFFIXES:
        return (
            f"[PDF Resume: {path.name}]\n\n"
            "Note: PDF parsing would extract full text content here."
        )
    if suffix in _WORD_SUFFIXES:
        return (
            f"[DOCX Resume: {path.name}]\n\n"
            "Note: DOCX parsing would extract full text content here."
        )

    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError:
        return f"[Resume: {path.name}]"


__all__ = ["extract_resume_text"]
