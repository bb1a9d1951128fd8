from __future__ import annotations

from typing import Any, Optional, Sequence

from hireiq.scoring import critique_score
from .checks import CHECKS, Check
from .types import CritiqueResult, Finding, Severity


def critique(
        resume_text: Optional[str],
        target_job: Optional[Any] = None,
        *,
        checks: Sequence[Check] = CHECKS,
) -> CritiqueResult:
    """
    Run the rule checklist over a resume and score it.

    Findings are concatenated in check order. The score only counts
    critical and warning issues; info-level suggestions are free.
    Total over any string input, including "".
    """
    text = resume_text or ""

    combined = Finding.none()
    for check in checks:
        combined += check(text, target_job)

    criticals = sum(1 for i in combined.issues if i.severity is Severity.CRITICAL)
    warnings = sum(1 for i in combined.issues if i.severity is Severity.WARNING)

    return CritiqueResult(
        issues=combined.issues,
        strengths=combined.strengths,
        score=critique_score(criticals, warnings),
        target_job_title=getattr(target_job, "title", None),
    )
