from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from hireiq import config
from hireiq.compare import JobComparison, compare_skill_gaps
from hireiq.critique import CritiqueResult, Severity, critique
from hireiq.io.resume_loader import load_resume_text
from hireiq.models import Job, UserProfile
from hireiq.skills.gap import analyze_job_fit, prioritized_items
from hireiq.skills.types import SkillGapResult, SkillStatus

_STATUS_SYMBOLS = {
    SkillStatus.HAVE: "✓",
    SkillStatus.PARTIAL: "~",
    SkillStatus.MISSING: "✗",
}


class CLIError(Exception):
    """User-facing failure: reported on stderr, exit status 2."""

    def __init__(self, message: str, tip: Optional[str] = None) -> None:
        super().__init__(message)
        self.tip = tip


def _fail(message: str, tip: Optional[str] = None) -> None:
    print(f"[HireIQ] {message}", file=sys.stderr)
    if tip:
        print(f"Tip: {tip}", file=sys.stderr)
    raise SystemExit(2)


def _read_json(path: Path, what: str) -> Any:
    if not path.exists():
        raise CLIError(
            f"{what} file not found: {path}",
            tip="pass an absolute path or place the file under $HIREIQ_HOME (default .hireiq/)",
        )
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise CLIError(f"{what} file is not valid JSON ({path}): {exc}") from exc


def _resolve(raw: str, default: Path) -> Path:
    return Path(raw) if raw else default


def load_profile(raw_path: str) -> UserProfile:
    data = _read_json(_resolve(raw_path, config.default_profile_path()), "Profile")
    if not isinstance(data, dict):
        raise CLIError("Profile file must contain a JSON object")
    return UserProfile.from_dict(data)


def load_jobs(raw_path: str) -> List[Job]:
    data = _read_json(_resolve(raw_path, config.default_jobs_path()), "Jobs")
    records = data.get("jobs", []) if isinstance(data, dict) else data
    if not isinstance(records, list):
        raise CLIError("Jobs file must contain a list of jobs (or {\"jobs\": [...]})")
    jobs: List[Job] = []
    for idx, rec in enumerate(records):
        try:
            jobs.append(Job.from_dict(rec))
        except (TypeError, ValueError, AttributeError) as exc:
            raise CLIError(f"Jobs file entry #{idx} is invalid: {exc}") from exc
    return jobs


def select_jobs(jobs: Sequence[Job], job_ids: Sequence[str]) -> List[Job]:
    by_id: Dict[str, Job] = {j.job_id: j for j in jobs if j.job_id}
    selected: List[Job] = []
    for jid in job_ids:
        if jid not in by_id:
            raise CLIError(f"Unknown job id: {jid}")
        selected.append(by_id[jid])
    return selected


# --- human output ---

def print_gap(result: Optional[SkillGapResult], job: Job, *, limit: int) -> None:
    print(f"\n=== {job.title} @ {job.company} ===" if job.company else f"\n=== {job.title} ===")
    if result is None:
        print("No skill data to compare (add skills to your profile or the job).")
        return
    print(f"Coverage (required): {result.coverage_required}%  [{result.fit_label}]")
    print(f"Coverage (all):      {result.coverage_all}%")
    print(f"{result.have_count} matched · {result.partial_count} partial · {result.missing_count} missing")
    for item in prioritized_items(result, limit=limit, include_preferred=True):
        via = f" (via {item.matched_with})" if item.matched_with else ""
        kind = "preferred" if item.is_preferred else "required"
        print(f"  {_STATUS_SYMBOLS[item.status]} {item.skill}{via}  [{kind}]")


def print_comparison(comparison: JobComparison, *, limit: int) -> None:
    print("\n=== Skill Gap Comparison ===")
    for entry in comparison.entries:
        at = f" @ {entry.job.company}" if entry.job.company else ""
        print(f"\n{entry.label}: {entry.job.title}{at}")
        gap = entry.gap
        if gap is None:
            print("   no skill data")
            continue
        print(f"   {gap.coverage_required}%  {gap.fit_label}")
        print(f"   {gap.have_count} matched · {gap.partial_count} partial · {gap.missing_count} missing")
        for item in prioritized_items(gap, limit=limit):
            print(f"   {_STATUS_SYMBOLS[item.status]} {item.skill}")
    best = comparison.best_fit()
    if best:
        print(f"\nBest skill fit: {best}")


def print_critique(result: CritiqueResult) -> None:
    print("\n=== Resume Critique ===")
    if result.target_job_title:
        print(f"Target role: {result.target_job_title}")
    print(f"Score: {result.score}/100")
    for severity in (Severity.CRITICAL, Severity.WARNING, Severity.INFO):
        issues = result.issues_by_severity(severity)
        if not issues:
            continue
        print(f"\n{severity.value.upper()} ({len(issues)}):")
        for issue in issues:
            print(f"  [{issue.category}] {issue.message}")
    if result.strengths:
        print("\nStrengths:")
        for s in result.strengths:
            print(f"  + {s}")


# --- commands ---

def _cmd_gap(args: argparse.Namespace) -> Dict[str, Any]:
    profile = load_profile(args.profile)
    [job] = select_jobs(load_jobs(args.jobs), [args.job_id])
    result = analyze_job_fit(profile, job)
    if not args.json:
        print_gap(result, job, limit=config.HIREIQ_DISPLAY_LIMIT)
    return {"job": job.to_dict(), "gap": result.to_dict() if result else None}


def _cmd_compare(args: argparse.Namespace) -> Dict[str, Any]:
    profile = load_profile(args.profile)
    jobs = select_jobs(load_jobs(args.jobs), args.job_id)
    try:
        comparison = compare_skill_gaps(profile, jobs)
    except ValueError as exc:
        raise CLIError(str(exc)) from exc
    if not args.json:
        print_comparison(comparison, limit=config.HIREIQ_DISPLAY_LIMIT)
    return comparison.to_dict(display_limit=config.HIREIQ_DISPLAY_LIMIT)


def _cmd_critique(args: argparse.Namespace) -> Dict[str, Any]:
    loaded = load_resume_text(
        resume_text_path=args.resume_text or None,
        resume_pdf_path=args.resume_pdf or None,
    )
    if loaded.source == "none":
        raise CLIError(f"Could not read resume {loaded.path}: {loaded.error}")
    if not loaded.text.strip():
        raise CLIError("Resume is empty")

    target: Optional[Job] = None
    if args.job_id:
        [target] = select_jobs(load_jobs(args.jobs), [args.job_id])

    result = critique(loaded.text, target)
    if not args.json:
        print_critique(result)
    return result.to_dict()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hireiq", description="HireIQ skill gap and resume critique (local)")
    sub = parser.add_subparsers(dest="command", required=True)

    def _common(p: argparse.ArgumentParser) -> None:
        p.add_argument("--jobs", type=str, default="", help=f"Path to jobs.json (default: $HIREIQ_HOME/{config.JOBS_FILENAME})")
        p.add_argument("--json", action="store_true", help="Print JSON only (machine-readable)")

    p_gap = sub.add_parser("gap", help="Skill gap between your profile and one job")
    p_gap.add_argument("--profile", type=str, default="", help=f"Path to profile.json (default: $HIREIQ_HOME/{config.PROFILE_FILENAME})")
    p_gap.add_argument("--job-id", required=True, help="Job id from the jobs file")
    _common(p_gap)
    p_gap.set_defaults(func=_cmd_gap)

    p_cmp = sub.add_parser("compare", help="Compare skill coverage across 2-4 jobs")
    p_cmp.add_argument("--profile", type=str, default="", help="Path to profile.json")
    p_cmp.add_argument("--job-id", action="append", required=True, help="Job id (repeat 2-4 times)")
    _common(p_cmp)
    p_cmp.set_defaults(func=_cmd_compare)

    p_crit = sub.add_parser("critique", help="Rule-based resume critique")
    src = p_crit.add_mutually_exclusive_group(required=True)
    src.add_argument("--resume-text", type=str, default="", help="Path to resume .txt")
    src.add_argument("--resume-pdf", type=str, default="", help="Path to resume .pdf")
    p_crit.add_argument("--job-id", default="", help="Optional target job id for role alignment")
    _common(p_crit)
    p_crit.set_defaults(func=_cmd_critique)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    try:
        payload = args.func(args)
    except CLIError as exc:
        _fail(str(exc), tip=exc.tip)
    if args.json:
        print(json.dumps(payload, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
