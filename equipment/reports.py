"""
Report shapes shared by every analyzer.

Two outcomes are used throughout:
- FramingReport: {holds, issues, details} for purely structural checks
- PendingReport: {holds, pending, issues, details, witness} for laws whose
  full verification outruns the evidence model

A pending report never claims `holds`. With no structural issues it is
marked `pending=True` (coherence unverified); any issue makes it a hard
failure with `pending=False`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence


def _witness_repr(witness: Any) -> Optional[str]:
    return None if witness is None else type(witness).__name__


@dataclass(frozen=True)
class FramingReport:
    """
    Structural verdict.

    Attributes:
        holds: True iff no issue was recorded
        issues: Every violated constraint, in check order
        details: Single human-readable summary line
    """

    holds: bool
    issues: List[str]
    details: str

    def to_dict(self) -> Dict[str, Any]:
        return {"holds": self.holds, "issues": list(self.issues), "details": self.details}


@dataclass(frozen=True)
class PendingReport:
    """
    Three-valued verdict for coherence laws.

    Attributes:
        holds: True only for mechanically verified laws
        pending: True when every structural prerequisite succeeded but the
                 coherence itself could not be certified
        issues: Structural failures
        details: Single human-readable summary line
        witness: The data the verdict was computed from
    """

    holds: bool
    pending: bool
    issues: List[str]
    details: str
    witness: Any = None
    extras: Dict[str, Any] = field(default_factory=dict)

    def __getattr__(self, name: str) -> Any:
        # Sub-reports are exposed as attributes (report.action_report, ...).
        extras = self.__dict__.get("extras", {})
        if name in extras:
            return extras[name]
        raise AttributeError(name)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "holds": self.holds,
            "pending": self.pending,
            "issues": list(self.issues),
            "details": self.details,
            "witness": _witness_repr(self.witness),
        }
        for key, value in self.extras.items():
            data[key] = value.to_dict() if hasattr(value, "to_dict") else value
        return data


def render_details(construct: str, issues: Sequence[str], success: str) -> str:
    return success if not issues else f"{construct} issues: {'; '.join(issues)}"


def framing_report(issues: List[str], success: str, construct: str) -> FramingReport:
    return FramingReport(holds=not issues, issues=issues, details=render_details(construct, issues, success))


def structural_report(
    issues: List[str],
    success: str,
    construct: str,
    witness: Any = None,
    **extras: Any,
) -> PendingReport:
    """Verdict for laws this model certifies outright."""
    return PendingReport(
        holds=not issues,
        pending=False,
        issues=issues,
        details=render_details(construct, issues, success),
        witness=witness,
        extras=extras,
    )


def pending_report(
    issues: List[str],
    success: str,
    construct: str,
    witness: Any = None,
    **extras: Any,
) -> PendingReport:
    """Verdict for laws whose coherence stays unverified once the structure checks out."""
    return PendingReport(
        holds=False,
        pending=not issues,
        issues=issues,
        details=render_details(construct, issues, success),
        witness=witness,
        extras=extras,
    )
