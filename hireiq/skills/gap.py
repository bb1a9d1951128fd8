from __future__ import annotations

from typing import Any, List, Optional, Sequence, Tuple

from hireiq.scoring import coverage_band, coverage_percent, fit_label
from .aliases import DEFAULT_ALIASES, AliasTable, is_partial_match, normalize_skill
from .extract import extract_skills_from_description
from .types import SkillGapItem, SkillGapResult, SkillStatus

_DISPLAY_ORDER = {
    SkillStatus.MISSING: 0,
    SkillStatus.PARTIAL: 1,
    SkillStatus.HAVE: 2,
}


def _classify(
        skill: str,
        user: Sequence[Tuple[str, str]],
        *,
        is_preferred: bool,
        aliases: AliasTable,
) -> SkillGapItem:
    key = normalize_skill(skill)
    if any(norm == key for _, norm in user):
        return SkillGapItem(skill=skill, status=SkillStatus.HAVE, is_preferred=is_preferred)
    for original, _ in user:
        if is_partial_match(original, skill, aliases):
            return SkillGapItem(
                skill=skill,
                status=SkillStatus.PARTIAL,
                matched_with=original,
                is_preferred=is_preferred,
            )
    return SkillGapItem(skill=skill, status=SkillStatus.MISSING, is_preferred=is_preferred)


def analyze_skill_gap(
        user_skills: Sequence[str],
        required_skills: Sequence[str],
        preferred_skills: Sequence[str],
        *,
        aliases: AliasTable = DEFAULT_ALIASES,
) -> SkillGapResult:
    """
    Classify every required, then every preferred, job skill against the
    candidate's skills.

    - have: some user skill has the same normalized key
    - partial: first user skill (in user order) that is an alias or a
      substring of it; recorded in matched_with
    - missing: neither

    Duplicates in the job lists each get their own item. Coverage counts
    have + partial; an empty list is 100% covered.
    """
    user = [(s, normalize_skill(s)) for s in user_skills]

    items: List[SkillGapItem] = []
    for s in required_skills:
        items.append(_classify(s, user, is_preferred=False, aliases=aliases))
    for s in preferred_skills:
        items.append(_classify(s, user, is_preferred=True, aliases=aliases))

    required = [i for i in items if i.is_required]

    return SkillGapResult(
        items=tuple(items),
        coverage_required=coverage_percent(sum(1 for i in required if i.covered), len(required)),
        coverage_all=coverage_percent(sum(1 for i in items if i.covered), len(items)),
        have_count=sum(1 for i in items if i.status is SkillStatus.HAVE),
        partial_count=sum(1 for i in items if i.status is SkillStatus.PARTIAL),
        missing_count=sum(1 for i in items if i.status is SkillStatus.MISSING),
    )


def effective_required_skills(job: Any) -> List[str]:
    """Explicit required skills, else catalogue skills found in the description."""
    required = list(getattr(job, "required_skills", None) or [])
    if required:
        return required
    return extract_skills_from_description(getattr(job, "description", "") or "")


def analyze_job_fit(
        profile: Any,
        job: Any,
        *,
        aliases: AliasTable = DEFAULT_ALIASES,
) -> Optional[SkillGapResult]:
    """
    Gap report for a (profile, job) pair, or None when there is nothing to
    compare: the profile lists no skills, or the job yields no required and
    no preferred skills.
    """
    user_skills = list(getattr(profile, "skills", None) or [])
    if not user_skills:
        return None

    required = effective_required_skills(job)
    preferred = list(getattr(job, "preferred_skills", None) or [])
    if not required and not preferred:
        return None

    return analyze_skill_gap(user_skills, required, preferred, aliases=aliases)


def prioritized_items(
        result: SkillGapResult,
        *,
        limit: int = 8,
        include_preferred: bool = False,
) -> List[SkillGapItem]:
    """
    Rows for a compact card: missing first, then partial, then have.
    Order within a status follows the report.
    """
    pool = result.items if include_preferred else result.required_items
    ordered = sorted(pool, key=lambda i: _DISPLAY_ORDER[i.status])
    return ordered[:limit]


__all__ = [
    "analyze_skill_gap",
    "analyze_job_fit",
    "effective_required_skills",
    "prioritized_items",
    "fit_label",
    "coverage_band",
]
