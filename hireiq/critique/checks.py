"""
Resume checks, one function per rule.

Each check reads the raw resume text (and optionally the target job) and
returns a Finding. Checks are independent; the engine runs them in the order
of CHECKS, which fixes the order of issues and strengths in the output.
"""
from __future__ import annotations

import re
from typing import Any, Callable, Optional, Tuple

from hireiq.core.text_processing import (
    bullet_lines,
    find_terms,
    has_bullet_at_line_start,
    non_blank_lines,
)
from .types import Finding, Severity

Check = Callable[[str, Optional[Any]], Finding]

MIN_LINES = 10
MAX_LINES = 60

_IMPACT_RE = re.compile(
    r"\d+%|\$\d|\d+ (?:users|customers|projects|teams|people|clients|requests"
    r"|transactions|applications|endpoints|services)",
    re.IGNORECASE,
)

WEAK_VERBS: Tuple[str, ...] = (
    "worked", "helped", "used", "did", "made", "attended",
    "was responsible", "assisted", "participated",
)

CLICHES: Tuple[str, ...] = (
    "fast-paced", "team player", "hard worker", "go-getter",
    "looking for a challenging role", "passionate", "detail-oriented",
    "self-starter", "results-driven",
)

_SUMMARY_RE = re.compile(r"summary|objective|profile|about", re.IGNORECASE)
_SKILLS_RE = re.compile(r"skills|technologies|tech stack", re.IGNORECASE)
_EDUCATION_RE = re.compile(
    r"education|university|degree|bachelor|master|phd|b\.s\.|m\.s\.",
    re.IGNORECASE,
)


def _quoted(items) -> str:
    return '"' + '", "'.join(items) + '"'


def check_length(text: str, target_job: Optional[Any] = None) -> Finding:
    lines = len(non_blank_lines(text))
    if lines < MIN_LINES:
        return Finding.issue(
            "Length", Severity.WARNING,
            "Resume appears too short. Aim for at least 15-20 substantive lines "
            "to cover experience adequately.",
        )
    if lines > MAX_LINES:
        return Finding.issue(
            "Length", Severity.WARNING,
            "Resume may be too long. Try to keep it to 1-2 pages for most roles.",
        )
    return Finding.strength("Good length - concise but substantive")


def check_quantified_impact(text: str, target_job: Optional[Any] = None) -> Finding:
    if _IMPACT_RE.search(text):
        return Finding.strength("Includes quantifiable metrics - shows measurable impact")
    return Finding.issue(
        "Impact", Severity.CRITICAL,
        "No quantifiable metrics found. Add numbers to show impact (e.g., "
        "'Reduced load time by 40%', 'Served 50k users', 'Managed team of 8').",
    )


def check_weak_verbs(text: str, target_job: Optional[Any] = None) -> Finding:
    found = find_terms(text, WEAK_VERBS)
    if not found:
        return Finding.strength("Uses strong action verbs throughout")
    return Finding.issue(
        "Language", Severity.CRITICAL,
        f"Weak verbs found: {_quoted(found)}. Replace with strong action verbs like "
        '"Architected", "Spearheaded", "Optimized", "Delivered", "Scaled".',
    )


def check_cliches(text: str, target_job: Optional[Any] = None) -> Finding:
    found = find_terms(text, CLICHES)
    if not found:
        return Finding.none()
    return Finding.issue(
        "Clarity", Severity.WARNING,
        f"Cliché phrases found: {_quoted(found)}. Replace with specific examples "
        "that demonstrate these qualities.",
    )


def check_contact_info(text: str, target_job: Optional[Any] = None) -> Finding:
    if "@" in text:
        return Finding.strength("Contact information is present")
    return Finding.issue(
        "Formatting", Severity.WARNING,
        "No email address detected. Ensure contact info is clearly visible at the top.",
    )


def check_summary_section(text: str, target_job: Optional[Any] = None) -> Finding:
    if _SUMMARY_RE.search(text):
        return Finding.strength("Has a summary/profile section")
    return Finding.issue(
        "Structure", Severity.INFO,
        "Consider adding a professional summary at the top - a 2-3 sentence "
        "elevator pitch tailored to your target roles.",
    )


def check_skills_section(text: str, target_job: Optional[Any] = None) -> Finding:
    if _SKILLS_RE.search(text):
        return Finding.strength("Includes a skills/technologies section")
    return Finding.issue(
        "Structure", Severity.INFO,
        "Consider adding a dedicated skills section to make it easy for ATS "
        "systems and recruiters to spot your technical abilities.",
    )


def check_bullet_usage(text: str, target_job: Optional[Any] = None) -> Finding:
    if has_bullet_at_line_start(text):
        return Finding.strength("Uses bullet points for readability")
    return Finding.issue(
        "Formatting", Severity.INFO,
        "Consider using bullet points for experience items - they're easier "
        "to scan than paragraphs.",
    )


def check_bullet_punctuation(text: str, target_job: Optional[Any] = None) -> Finding:
    bullets = bullet_lines(text)
    with_period = sum(1 for b in bullets if b.endswith("."))
    if len(bullets) > 2 and 0 < with_period < len(bullets):
        return Finding.issue(
            "Punctuation", Severity.WARNING,
            f"Inconsistent punctuation: {with_period}/{len(bullets)} bullets end with "
            "periods. Pick one style and apply consistently.",
        )
    return Finding.none()


def check_education(text: str, target_job: Optional[Any] = None) -> Finding:
    if _EDUCATION_RE.search(text):
        return Finding.strength("Education section is present")
    return Finding.none()


def check_role_alignment(text: str, target_job: Optional[Any] = None) -> Finding:
    """
    Substring search for each of the target job's required skills.
    Skipped without a target job or when it lists no required skills.
    """
    if target_job is None:
        return Finding.none()
    required = list(getattr(target_job, "required_skills", None) or [])
    if not required:
        return Finding.none()

    title = getattr(target_job, "title", "") or "this role"
    mentioned = find_terms(text, required)
    missing = [s for s in required if s not in mentioned]

    finding = Finding.none()
    if missing:
        finding += Finding.issue(
            "Alignment", Severity.CRITICAL,
            f"Missing key skills for {title}: {', '.join(missing)}. "
            "Add these if you have experience with them.",
        )
    if mentioned:
        finding += Finding.strength(
            f"Mentions {len(mentioned)}/{len(required)} required skills for {title}"
        )
    return finding


CHECKS: Tuple[Check, ...] = (
    check_length,
    check_quantified_impact,
    check_weak_verbs,
    check_cliches,
    check_contact_info,
    check_summary_section,
    check_skills_section,
    check_bullet_usage,
    check_bullet_punctuation,
    check_education,
    check_role_alignment,
)
