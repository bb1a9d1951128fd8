from __future__ import annotations

from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional


class ApplicationStatus(str, Enum):
    SAVED = "saved"
    APPLIED = "applied"
    SCREENING = "screening"
    INTERVIEW = "interview"
    OFFER = "offer"
    REJECTED = "rejected"


def normalize_whitespace(text: str) -> str:
    return " ".join((text or "").split()).strip()


def clean_skill_list(skills: Optional[List[str]]) -> List[str]:
    """
    Trim each entry and drop blanks. Order and duplicates are kept:
    every listed skill gets its own line in a gap report.
    """
    return [normalize_whitespace(s) for s in skills or [] if normalize_whitespace(s)]


def _first(data: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    # API records use camelCase, local files often snake_case
    for k in keys:
        if data.get(k) is not None:
            return data[k]
    return default


@dataclass(frozen=True)
class Job:
    """
    A tracked job as supplied by the application layer.
    Only the fields the scoring core reads are modelled.
    """
    title: str
    company: str = ""
    description: str = ""
    required_skills: List[str] = field(default_factory=list)
    preferred_skills: List[str] = field(default_factory=list)

    location: Optional[str] = None
    tags: List[str] = field(default_factory=list)
    status: ApplicationStatus = ApplicationStatus.SAVED
    job_id: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "title", normalize_whitespace(self.title))
        object.__setattr__(self, "company", normalize_whitespace(self.company))
        # description keeps its line structure; detection is regex based
        object.__setattr__(self, "description", (self.description or "").strip())
        object.__setattr__(self, "required_skills", clean_skill_list(self.required_skills))
        object.__setattr__(self, "preferred_skills", clean_skill_list(self.preferred_skills))
        object.__setattr__(self, "tags", clean_skill_list(self.tags))
        if self.location is not None:
            object.__setattr__(self, "location", normalize_whitespace(self.location))
        if not isinstance(self.status, ApplicationStatus):
            object.__setattr__(self, "status", ApplicationStatus(str(self.status).lower()))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Job":
        title = _first(data, "title")
        if not title or not str(title).strip():
            raise ValueError("job record is missing a title")
        job_id = _first(data, "id", "job_id", "jobId")
        return cls(
            title=str(title),
            company=_first(data, "company", default=""),
            description=_first(data, "description", default=""),
            required_skills=list(_first(data, "requiredSkills", "required_skills", default=[])),
            preferred_skills=list(_first(data, "preferredSkills", "preferred_skills", default=[])),
            location=_first(data, "location"),
            tags=list(_first(data, "tags", default=[])),
            status=_first(data, "status", default=ApplicationStatus.SAVED.value) or ApplicationStatus.SAVED.value,
            job_id=str(job_id) if job_id is not None else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["status"] = self.status.value
        return d


@dataclass(frozen=True)
class UserProfile:
    """
    The candidate side of a comparison: a free-text skill list plus display fields.
    """
    skills: List[str] = field(default_factory=list)
    name: str = ""
    location: Optional[str] = None
    work_style: Optional[str] = None  # "remote" | "onsite" | "hybrid"

    def __post_init__(self) -> None:
        object.__setattr__(self, "skills", clean_skill_list(self.skills))
        object.__setattr__(self, "name", normalize_whitespace(self.name))
        if self.location is not None:
            object.__setattr__(self, "location", normalize_whitespace(self.location))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "UserProfile":
        return cls(
            skills=list(_first(data, "skills", default=[])),
            name=_first(data, "name", default=""),
            location=_first(data, "location"),
            work_style=_first(data, "workStyle", "work_style"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
