from __future__ import annotations

from hireiq.critique.checks import (
    CHECKS,
    check_bullet_punctuation,
    check_bullet_usage,
    check_cliches,
    check_contact_info,
    check_education,
    check_length,
    check_quantified_impact,
    check_role_alignment,
    check_skills_section,
    check_summary_section,
    check_weak_verbs,
)
from hireiq.critique.types import Severity
from hireiq.models import Job


def _lines(n: int) -> str:
    return "\n".join(f"line {i}" for i in range(n))


def test_length_thresholds() -> None:
    short = check_length(_lines(9))
    assert short.issues[0].category == "Length"
    assert short.issues[0].severity is Severity.WARNING
    assert "too short" in short.issues[0].message

    assert check_length(_lines(10)).strengths and not check_length(_lines(10)).issues
    assert check_length(_lines(60)).strengths

    long = check_length(_lines(61))
    assert "too long" in long.issues[0].message


def test_length_counts_only_non_blank_lines() -> None:
    text = "\n\n".join(f"line {i}" for i in range(9))
    assert check_length(text).issues


def test_quantified_impact_patterns() -> None:
    for text in ["Cut costs by 30%", "Saved $2M", "Served 500 customers", "Shipped 3 Projects"]:
        f = check_quantified_impact(text)
        assert not f.issues, text
        assert f.strengths

    missing = check_quantified_impact("Saved money for the team")
    assert missing.issues[0].severity is Severity.CRITICAL
    assert missing.issues[0].category == "Impact"
    assert check_quantified_impact("Served 500customers").issues
    assert check_quantified_impact("Grew revenue by $ 100").issues


def test_weak_verbs_named_in_list_order() -> None:
    f = check_weak_verbs("Made dashboards. Helped ops. Was responsible for on-call.")
    issue = f.issues[0]
    assert issue.severity is Severity.CRITICAL
    assert issue.category == "Language"
    assert issue.message.startswith('Weak verbs found: "helped", "made", "was responsible".')
    assert not f.strengths


def test_weak_verbs_substring_hits_inside_words() -> None:
    assert check_weak_verbs("Focused on reliability").issues  # "used"


def test_no_weak_verbs_is_strength() -> None:
    f = check_weak_verbs("Architected and shipped the billing platform")
    assert f.strengths == ("Uses strong action verbs throughout",)


def test_cliches_warning_without_strength() -> None:
    f = check_cliches("A passionate team player in a fast-paced setting")
    assert f.issues[0].severity is Severity.WARNING
    assert f.issues[0].category == "Clarity"
    assert '"fast-paced", "team player", "passionate"' in f.issues[0].message
    empty = check_cliches("Shipped things")
    assert not empty.issues and not empty.strengths


def test_contact_info() -> None:
    assert check_contact_info("me@example.com").strengths
    missing = check_contact_info("no email here")
    assert missing.issues[0].category == "Formatting"
    assert missing.issues[0].severity is Severity.WARNING


def test_summary_and_skills_sections_are_info_level() -> None:
    assert check_summary_section("PROFILE").strengths
    assert check_summary_section("About me").strengths
    s = check_summary_section("Experience only")
    assert s.issues[0].severity is Severity.INFO
    assert s.issues[0].category == "Structure"

    assert check_skills_section("Tech Stack: Go").strengths
    k = check_skills_section("Experience only")
    assert k.issues[0].severity is Severity.INFO


def test_bullet_usage_column_zero_only() -> None:
    assert check_bullet_usage("Intro\n- item").strengths
    f = check_bullet_usage("Intro\n  - indented")
    assert f.issues[0].severity is Severity.INFO
    assert f.issues[0].category == "Formatting"


def test_bullet_punctuation_mixed() -> None:
    text = "- one.\n- two\n- three"
    f = check_bullet_punctuation(text)
    assert f.issues[0].category == "Punctuation"
    assert f.issues[0].severity is Severity.WARNING
    assert "1/3 bullets" in f.issues[0].message


def test_bullet_punctuation_consistent_or_too_few() -> None:
    assert not check_bullet_punctuation("- one.\n- two.\n- three.").issues
    assert not check_bullet_punctuation("- one\n- two\n- three").issues
    assert not check_bullet_punctuation("- one.\n- two").issues


def test_bullet_punctuation_counts_indented_bullets() -> None:
    text = "  - one.\n  - two\n  • three"
    assert check_bullet_punctuation(text).issues


def test_education_strength_only() -> None:
    assert check_education("B.S. Computer Science").strengths
    assert check_education("PhD candidate").strengths
    f = check_education("Self-taught")
    assert not f.issues and not f.strengths


def test_role_alignment_reports_missing_and_mentioned() -> None:
    job = Job(title="Data Engineer", required_skills=["SQL", "Go"])
    f = check_role_alignment("Built SQL reporting pipelines", job)
    assert len(f.issues) == 1
    issue = f.issues[0]
    assert issue.severity is Severity.CRITICAL
    assert issue.category == "Alignment"
    assert "Missing key skills for Data Engineer: Go." in issue.message
    assert f.strengths == ("Mentions 1/2 required skills for Data Engineer",)


def test_role_alignment_all_mentioned() -> None:
    job = Job(title="Data Engineer", required_skills=["SQL", "dbt"])
    f = check_role_alignment("sql and DBT daily", job)
    assert not f.issues
    assert f.strengths == ("Mentions 2/2 required skills for Data Engineer",)


def test_role_alignment_none_mentioned_has_no_strength() -> None:
    job = Job(title="Data Engineer", required_skills=["Snowflake"])
    f = check_role_alignment("Built reports", job)
    assert f.issues and not f.strengths


def test_role_alignment_skipped_without_job_or_skills() -> None:
    assert check_role_alignment("anything", None) == check_role_alignment("anything", Job(title="X"))
    f = check_role_alignment("anything", None)
    assert not f.issues and not f.strengths


def test_checks_are_in_published_order() -> None:
    assert [c.__name__ for c in CHECKS] == [
        "check_length",
        "check_quantified_impact",
        "check_weak_verbs",
        "check_cliches",
        "check_contact_info",
        "check_summary_section",
        "check_skills_section",
        "check_bullet_usage",
        "check_bullet_punctuation",
        "check_education",
        "check_role_alignment",
    ]
