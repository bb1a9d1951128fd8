from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from pypdf import PdfReader
from pypdf.errors import PyPdfError

from hireiq import config


@dataclass(frozen=True)
class LoadedResume:
    text: str
    source: str  # "text" | "pdf" | "none"
    path: Optional[str] = None
    error: Optional[str] = None


def _too_large(p: Path, max_bytes: int) -> Optional[str]:
    size = p.stat().st_size
    if size > max_bytes:
        return f"file too large ({size} bytes, max {max_bytes})"
    return None


def _read_pdf(p: Path) -> str:
    reader = PdfReader(str(p))
    parts = []
    for page in reader.pages:
        t = page.extract_text() or ""
        if t.strip():
            parts.append(t)
    return "\n".join(parts).strip()


def load_resume_text(
        *,
        resume_text_path: Optional[str],
        resume_pdf_path: Optional[str],
        max_bytes: Optional[int] = None,
) -> LoadedResume:
    """
    Load resume content locally.
    Precedence:
      1) resume_text_path (.txt)
      2) resume_pdf_path (.pdf)
      3) none
    Best-effort: failures return source='none', empty text and an error message.
    """
    limit = max_bytes if max_bytes is not None else config.max_resume_bytes()

    if resume_text_path:
        p = Path(resume_text_path)
        try:
            err = _too_large(p, limit)
            if err:
                return LoadedResume(text="", source="none", path=str(p), error=err)
            return LoadedResume(text=p.read_text(encoding="utf-8"), source="text", path=str(p))
        except (OSError, UnicodeDecodeError) as exc:
            return LoadedResume(text="", source="none", path=str(p), error=str(exc))

    if resume_pdf_path:
        p = Path(resume_pdf_path)
        if p.suffix.lower() != ".pdf":
            return LoadedResume(text="", source="none", path=str(p), error="please provide a PDF file")
        try:
            err = _too_large(p, limit)
            if err:
                return LoadedResume(text="", source="none", path=str(p), error=err)
            text = _read_pdf(p)
        except (OSError, ValueError, PyPdfError) as exc:
            return LoadedResume(text="", source="none", path=str(p), error=str(exc))
        if not text:
            return LoadedResume(text="", source="none", path=str(p), error="no extractable text")
        return LoadedResume(text=text, source="pdf", path=str(p))

    return LoadedResume(text="", source="none", path=None)
