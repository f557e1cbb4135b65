from __future__ import annotations

from pathlib import Path

import pytest

from talentnetwork.resume_text import extract_resume_text


def test_plain_text_resume_is_read(tmp_path: Path):
    path = tmp_path / "resume.txt"
    path.write_text("Operating Partner\n", encoding="utf-8")

    assert extract_resume_text(path) == "Operating Partner\n"


@pytest.mark.parametrize(
    ("name", "prefix"),
    [
        ("cv.pdf", "[PDF Resume: cv.pdf]"),
        ("cv.DOCX", "[DOCX Resume: cv.DOCX]"),
        ("cv.doc", "[DOCX Resume: cv.doc]"),
    ],
)
def test_binary_formats_get_placeholder(tmp_path: Path, name: str, prefix: str):
    path = tmp_path / name
    path.write_bytes(b"%binary")

    assert extract_resume_text(path).startswith(prefix)


def test_undecodable_text_falls_back_to_name(tmp_path: Path):
    path = tmp_path / "resume.txt"
    path.write_bytes(b"\xff\xfe\xfa")

    assert extract_resume_text(path) == "[Resume: resume.txt]"


def test_missing_file_raises(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        extract_resume_text(tmp_path / "missing.txt")
