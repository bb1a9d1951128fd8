from .aliases import DEFAULT_ALIASES, AliasTable, is_partial_match, normalize_skill
from .extract import KNOWN_SKILLS, extract_skills_from_description
from .gap import analyze_job_fit, analyze_skill_gap, prioritized_items
from .types import SkillGapItem, SkillGapResult, SkillStatus

__all__ = [
    "AliasTable",
    "DEFAULT_ALIASES",
    "KNOWN_SKILLS",
    "SkillGapItem",
    "SkillGapResult",
    "SkillStatus",
    "analyze_job_fit",
    "analyze_skill_gap",
    "extract_skills_from_description",
    "is_partial_match",
    "normalize_skill",
    "prioritized_items",
]
