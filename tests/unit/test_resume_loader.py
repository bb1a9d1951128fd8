from __future__ import annotations

from pathlib import Path

import hireiq.io.resume_loader as resume_loader
from hireiq.io.resume_loader import load_resume_text


def test_text_resume_is_loaded(fixtures_dir: Path) -> None:
    loaded = load_resume_text(resume_text_path=str(fixtures_dir / "resume_strong.txt"), resume_pdf_path=None)
    assert loaded.source == "text"
    assert "Jane Doe" in loaded.text
    assert loaded.error is None


def test_text_takes_precedence_over_pdf(fixtures_dir: Path) -> None:
    loaded = load_resume_text(
        resume_text_path=str(fixtures_dir / "resume_strong.txt"),
        resume_pdf_path=str(fixtures_dir / "missing.pdf"),
    )
    assert loaded.source == "text"


def test_missing_text_file_is_best_effort(tmp_path: Path) -> None:
    loaded = load_resume_text(resume_text_path=str(tmp_path / "nope.txt"), resume_pdf_path=None)
    assert loaded.source == "none"
    assert loaded.text == ""
    assert loaded.error


def test_size_limit(tmp_path: Path) -> None:
    p = tmp_path / "resume.txt"
    p.write_text("x" * 100, encoding="utf-8")
    loaded = load_resume_text(resume_text_path=str(p), resume_pdf_path=None, max_bytes=10)
    assert loaded.source == "none"
    assert "too large" in (loaded.error or "")


def test_pdf_path_must_be_pdf(tmp_path: Path) -> None:
    p = tmp_path / "resume.docx"
    p.write_bytes(b"binary")
    loaded = load_resume_text(resume_text_path=None, resume_pdf_path=str(p))
    assert loaded.source == "none"
    assert loaded.error == "please provide a PDF file"


def test_corrupt_pdf_is_best_effort(tmp_path: Path) -> None:
    p = tmp_path / "resume.pdf"
    p.write_bytes(b"this is not a pdf at all")
    loaded = load_resume_text(resume_text_path=None, resume_pdf_path=str(p))
    assert loaded.source == "none"
    assert loaded.path == str(p)
    assert loaded.error


def test_pdf_pages_are_joined(tmp_path: Path, monkeypatch) -> None:
    class _Page:
        def __init__(self, text):
            self._text = text

        def extract_text(self):
            return self._text

    class _Reader:
        def __init__(self, path):
            self.pages = [_Page("Jane Doe"), _Page("   "), _Page("Skills: Go")]

    monkeypatch.setattr(resume_loader, "PdfReader", _Reader)
    p = tmp_path / "resume.PDF"
    p.write_bytes(b"%PDF-1.4 stub")
    loaded = load_resume_text(resume_text_path=None, resume_pdf_path=str(p))
    assert loaded.source == "pdf"
    assert loaded.text == "Jane Doe\nSkills: Go"


def test_pdf_without_text(tmp_path: Path, monkeypatch) -> None:
    class _Reader:
        def __init__(self, path):
            self.pages = []

    monkeypatch.setattr(resume_loader, "PdfReader", _Reader)
    p = tmp_path / "scan.pdf"
    p.write_bytes(b"%PDF-1.4 stub")
    loaded = load_resume_text(resume_text_path=None, resume_pdf_path=str(p))
    assert loaded.source == "none"
    assert loaded.error == "no extractable text"


def test_nothing_given() -> None:
    loaded = load_resume_text(resume_text_path=None, resume_pdf_path=None)
    assert loaded.source == "none"
    assert loaded.path is None
