"""
Equality and framing utilities shared by every analyzer.

Each helper compares an actual value against the expected one and appends a
descriptive string to a shared `issues` list; none of them raise or return
early. Two kinds of comparison are offered:
- structural: endpoints under the object equality plus the same tight handle
- reference: the exact boundary or witness object must be reused
"""

from __future__ import annotations

from typing import Any, List, Optional

from .core import (
    Frame,
    ObjectEquality,
    Proarrow,
    VerticalBoundary,
    default_object_equality,
    equality_for,
    vertical_boundaries_equal,
)

__all__ = [
    "boundaries_match",
    "collect_report_issues",
    "default_object_equality",
    "ensure_boundary_reuse",
    "ensure_frame_alignment",
    "ensure_same_witness",
    "equality_for",
    "frame_matches_loose_cell",
    "frames_coincide",
    "single_arrow",
    "vertical_boundaries_equal",
]


def boundaries_match(
    equality: ObjectEquality,
    actual: VerticalBoundary,
    expected: VerticalBoundary,
    label: str,
    issues: List[str],
    phrase: str = "must equal the designated tight boundary.",
) -> None:
    if not vertical_boundaries_equal(equality, actual, expected):
        issues.append(f"{label} {phrase}")


def ensure_boundary_reuse(
    actual: VerticalBoundary,
    expected: VerticalBoundary,
    label: str,
    issues: List[str],
) -> None:
    if actual is not expected:
        issues.append(f"{label} must reuse the specified tight boundary.")


def ensure_same_witness(actual: Any, expected: Any, message: str, issues: List[str]) -> None:
    if actual is not expected:
        issues.append(message)


def ensure_frame_alignment(
    equality: ObjectEquality,
    frame: Frame,
    expected_left: Any,
    expected_right: Any,
    label: str,
    issues: List[str],
) -> None:
    if not equality(frame.left_boundary, expected_left):
        issues.append(f"{label} should start at the designated domain object.")
    if not equality(frame.right_boundary, expected_right):
        issues.append(f"{label} should end at the designated codomain object.")
    if not frame.arrows:
        issues.append(f"{label} should describe at least one loose arrow in its frame.")


def single_arrow(frame: Frame) -> Optional[Proarrow]:
    return frame.arrows[0] if len(frame.arrows) == 1 else None


def frame_matches_loose_cell(
    equality: ObjectEquality,
    frame: Frame,
    loose_cell: Proarrow,
    label: str,
    issues: List[str],
    notation: str = "E(j,t)",
) -> None:
    arrow = single_arrow(frame)
    if arrow is None:
        issues.append(f"{label} should consist of exactly one loose arrow matching {notation}.")
        return
    if not equality(arrow.from_obj, loose_cell.from_obj) or not equality(arrow.to_obj, loose_cell.to_obj):
        issues.append(f"{label} arrow must share the loose cell's endpoints.")


def frames_coincide(
    equality: ObjectEquality, candidate: Frame, expected: Frame, label: str, issues: List[str]
) -> None:
    """Boundary objects and arrow endpoints agree position by position."""
    if not equality(candidate.left_boundary, expected.left_boundary):
        issues.append(f"{label} left boundary should match {expected.left_boundary!r}.")
    if not equality(candidate.right_boundary, expected.right_boundary):
        issues.append(f"{label} right boundary should match {expected.right_boundary!r}.")
    if len(candidate.arrows) != len(expected.arrows):
        issues.append(f"{label} should expose {len(expected.arrows)} arrow(s).")
        return
    for index, (arrow, anticipated) in enumerate(zip(candidate.arrows, expected.arrows)):
        if not equality(arrow.from_obj, anticipated.from_obj) or not equality(arrow.to_obj, anticipated.to_obj):
            issues.append(f"{label} arrow {index} must reuse the anticipated endpoints.")


def collect_report_issues(label: str, report: Any, issues: List[str]) -> None:
    """Fold a failing dependency report into the caller's issues."""
    if report is None or report.holds or getattr(report, "pending", False):
        return
    issues.append(f"{label} failed: {report.details}")
    issues.extend(f"{label}: {issue}" for issue in report.issues)
