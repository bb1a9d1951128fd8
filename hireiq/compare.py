from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

from hireiq.models import Job, UserProfile
from hireiq.skills.aliases import DEFAULT_ALIASES, AliasTable
from hireiq.skills.gap import analyze_job_fit, prioritized_items
from hireiq.skills.types import SkillGapResult

JOB_LABELS: Tuple[str, ...] = ("A", "B", "C", "D")
MIN_JOBS = 2


@dataclass(frozen=True)
class ComparisonEntry:
    label: str
    job: Job
    gap: Optional[SkillGapResult]  # None: nothing to compare for this job

    def to_dict(self, *, display_limit: int = 8) -> Dict[str, Any]:
        d: Dict[str, Any] = {
            "label": self.label,
            "job": self.job.to_dict(),
            "gap": None,
        }
        if self.gap is not None:
            d["gap"] = self.gap.to_dict()
            d["top_items"] = [i.to_dict() for i in prioritized_items(self.gap, limit=display_limit)]
        return d


@dataclass(frozen=True)
class JobComparison:
    entries: Tuple[ComparisonEntry, ...]

    def best_fit(self) -> Optional[str]:
        """Label with the highest required coverage; earliest label wins ties."""
        best: Optional[ComparisonEntry] = None
        for e in self.entries:
            if e.gap is None:
                continue
            if best is None or e.gap.coverage_required > best.gap.coverage_required:  # type: ignore[union-attr]
                best = e
        return best.label if best else None

    def to_dict(self, *, display_limit: int = 8) -> Dict[str, Any]:
        return {
            "entries": [e.to_dict(display_limit=display_limit) for e in self.entries],
            "best_fit": self.best_fit(),
        }


def compare_skill_gaps(
        profile: UserProfile,
        jobs: Sequence[Job],
        *,
        aliases: AliasTable = DEFAULT_ALIASES,
) -> JobComparison:
    """
    Side-by-side gap reports for 2-4 jobs against one profile.
    Jobs are labelled A-D in the order given.
    """
    if not MIN_JOBS <= len(jobs) <= len(JOB_LABELS):
        raise ValueError(
            f"compare needs between {MIN_JOBS} and {len(JOB_LABELS)} jobs, got {len(jobs)}"
        )
    entries: List[ComparisonEntry] = [
        ComparisonEntry(label=label, job=job, gap=analyze_job_fit(profile, job, aliases=aliases))
        for label, job in zip(JOB_LABELS, jobs)
    ]
    return JobComparison(entries=tuple(entries))
