from .checks import CHECKS, CLICHES, WEAK_VERBS
from .engine import critique
from .types import CritiqueIssue, CritiqueResult, Finding, Severity

__all__ = [
    "CHECKS",
    "CLICHES",
    "WEAK_VERBS",
    "CritiqueIssue",
    "CritiqueResult",
    "Finding",
    "Severity",
    "critique",
]
