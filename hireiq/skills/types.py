from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from hireiq.scoring import fit_label as _fit_label


class SkillStatus(str, Enum):
    HAVE = "have"
    PARTIAL = "partial"
    MISSING = "missing"


@dataclass(frozen=True)
class SkillGapItem:
    skill: str
    status: SkillStatus
    matched_with: Optional[str] = None  # candidate skill behind a partial match
    is_preferred: bool = False

    @property
    def is_required(self) -> bool:
        return not self.is_preferred

    @property
    def covered(self) -> bool:
        return self.status in (SkillStatus.HAVE, SkillStatus.PARTIAL)

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {
            "skill": self.skill,
            "status": self.status.value,
            "isPreferred": self.is_preferred,
        }
        if self.matched_with is not None:
            d["matchedWith"] = self.matched_with
        return d


@dataclass(frozen=True)
class SkillGapResult:
    items: Tuple[SkillGapItem, ...]
    coverage_required: int
    coverage_all: int
    have_count: int
    partial_count: int
    missing_count: int

    @property
    def required_items(self) -> Tuple[SkillGapItem, ...]:
        return tuple(i for i in self.items if i.is_required)

    @property
    def preferred_items(self) -> Tuple[SkillGapItem, ...]:
        return tuple(i for i in self.items if i.is_preferred)

    @property
    def fit_label(self) -> str:
        return _fit_label(self.coverage_required)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "items": [i.to_dict() for i in self.items],
            "coverageRequired": self.coverage_required,
            "coverageAll": self.coverage_all,
            "haveCount": self.have_count,
            "partialCount": self.partial_count,
            "missingCount": self.missing_count,
            "fitLabel": self.fit_label,
        }
