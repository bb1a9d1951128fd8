from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class Severity(str, Enum):
    CRITICAL = "critical"
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True)
class CritiqueIssue:
    category: str
    severity: Severity
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return {"cat": self.category, "sev": self.severity.value, "msg": self.message}


@dataclass(frozen=True)
class Finding:
    """What a single check contributes: zero or more issues and strengths."""
    issues: Tuple[CritiqueIssue, ...] = ()
    strengths: Tuple[str, ...] = ()

    @classmethod
    def none(cls) -> "Finding":
        return cls()

    @classmethod
    def issue(cls, category: str, severity: Severity, message: str) -> "Finding":
        return cls(issues=(CritiqueIssue(category=category, severity=severity, message=message),))

    @classmethod
    def strength(cls, text: str) -> "Finding":
        return cls(strengths=(text,))

    def __add__(self, other: "Finding") -> "Finding":
        return Finding(issues=self.issues + other.issues, strengths=self.strengths + other.strengths)


@dataclass(frozen=True)
class CritiqueResult:
    issues: Tuple[CritiqueIssue, ...]
    strengths: Tuple[str, ...]
    score: int
    target_job_title: Optional[str] = None

    # Issue order is check order, not severity order
    def _count(self, severity: Severity) -> int:
        return sum(1 for i in self.issues if i.severity is severity)

    @property
    def critical_count(self) -> int:
        return self._count(Severity.CRITICAL)

    @property
    def warning_count(self) -> int:
        return self._count(Severity.WARNING)

    @property
    def info_count(self) -> int:
        return self._count(Severity.INFO)

    def issues_by_severity(self, severity: Severity) -> Tuple[CritiqueIssue, ...]:
        return tuple(i for i in self.issues if i.severity is severity)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "issues": [i.to_dict() for i in self.issues],
            "strengths": list(self.strengths),
            "targetJob": self.target_job_title,
        }
