"""
Composition of relative adjunctions and relative monads, and the bridge
between relative monads and loose monoids.

Adjunction composition chains ℓ₁ ⊣_j r₁ with ℓ₂ ⊣_{r₁} r₂: the first right
leg must be the second root. Once the chaining checks pass, the composite
legs are built with the tight composition, the framing of both adjunctions
is re-run and the composite legs are checked against the first root.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from equipment.core import (
    VerticalBoundary,
    VirtualEquipment,
    compose_vertical_boundaries,
    equality_for,
    vertical_boundaries_equal,
)
from equipment.framing import collect_report_issues
from equipment.loose import LooseMonoidData, analyze_loose_monoid_shape
from equipment.reports import FramingReport

from .adjunctions import RelativeAdjunctionData, analyze_relative_adjunction_framing
from .monads import RelativeMonadData, analyze_relative_monad_framing

logger = logging.getLogger(__name__)

COMPOSITE_DETAILS = "Composite tight 1-cell induced by consecutive relative adjunction boundaries."


@dataclass(frozen=True)
class RelativeAdjunctionCompositionReport:
    """
    Outcome of composing two relative adjunctions.

    Attributes:
        holds: True when the adjunctions chain and the composite is framed
        issues: Chaining or composite framing defects
        details: Summary line
        root: Root of the composite (the first root)
        left: Composite left leg ℓ₂ ∘ ℓ₁
        right: Composite right leg
    """

    holds: bool
    issues: List[str]
    details: str
    root: Optional[VerticalBoundary] = None
    left: Optional[VerticalBoundary] = None
    right: Optional[VerticalBoundary] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"holds": self.holds, "issues": list(self.issues), "details": self.details}


@dataclass(frozen=True)
class RelativeMonadLooseMonoidBridgeReport:
    holds: bool
    issues: List[str]
    details: str
    loose_monoid_report: FramingReport
    framing: FramingReport
    data: RelativeMonadData

    def to_dict(self) -> Dict[str, Any]:
        return {
            "holds": self.holds,
            "issues": list(self.issues),
            "details": self.details,
            "loose_monoid": self.loose_monoid_report.to_dict(),
            "framing": self.framing.to_dict(),
        }


def _composite_leg_issues(
    first: RelativeAdjunctionData,
    second: RelativeAdjunctionData,
    left: VerticalBoundary,
    right: VerticalBoundary,
) -> List[str]:
    equality = equality_for(first.equipment)
    root = first.root
    issues: List[str] = []
    collect_report_issues("First adjunction framing", analyze_relative_adjunction_framing(first), issues)
    collect_report_issues("Second adjunction framing", analyze_relative_adjunction_framing(second), issues)

    if not equality(root.from_obj, left.from_obj):
        issues.append("Composite root j and composite left leg must share their domain object.")
    if not equality(root.from_obj, right.from_obj):
        issues.append("Composite root j and composite right leg must agree on their domain.")
    if not equality(left.to_obj, right.from_obj):
        issues.append("Composite left leg codomain must feed the composite right leg domain.")
    if not equality(root.to_obj, right.to_obj):
        issues.append("Composite root j and composite right leg must land in the same codomain.")
    return issues


def analyze_relative_adjunction_composition(
    first: RelativeAdjunctionData, second: RelativeAdjunctionData
) -> RelativeAdjunctionCompositionReport:
    if first.equipment is not second.equipment:
        return RelativeAdjunctionCompositionReport(
            holds=False,
            issues=["Relative adjunctions must inhabit the same virtual equipment to compose."],
            details="Relative adjunctions reference distinct equipment instances.",
        )

    equipment = first.equipment
    equality = equality_for(equipment)
    issues: List[str] = []

    if not vertical_boundaries_equal(equality, first.right, second.root):
        issues.append("First adjunction's right leg must match the second adjunction's root j.")
    if not equality(first.left.to_obj, second.left.from_obj):
        issues.append(
            "Intermediate category C should agree between ℓ₁ : A → C and ℓ₂ : C → D to compose left legs."
        )
    if not equality(first.right.to_obj, second.right.from_obj):
        issues.append(
            "Right leg codomain of the first adjunction must supply the domain for the second right leg."
        )

    if issues:
        logger.debug(f"relative adjunction composition refused: {len(issues)} issue(s)")
        return RelativeAdjunctionCompositionReport(
            holds=False,
            issues=issues,
            details=f"Relative adjunction composition issues: {'; '.join(issues)}",
        )

    composite_left = compose_vertical_boundaries(equipment, second.left, first.left, COMPOSITE_DETAILS)
    composite_right = compose_vertical_boundaries(equipment, second.right, first.right, COMPOSITE_DETAILS)
    issues = _composite_leg_issues(first, second, composite_left, composite_right)

    holds = not issues
    logger.debug(f"relative adjunction composition: {len(issues)} issue(s)")
    return RelativeAdjunctionCompositionReport(
        holds=holds,
        issues=issues,
        details=(
            f"Relative adjunctions compose with left leg {composite_left.details} "
            f"and right leg {composite_right.details}."
            if holds
            else f"Relative adjunction composition issues: {'; '.join(issues)}"
        ),
        root=first.root,
        left=composite_left,
        right=composite_right,
    )


def analyze_relative_monad_composition(first: RelativeMonadData, second: RelativeMonadData) -> FramingReport:
    if first.equipment is not second.equipment:
        return FramingReport(
            holds=False,
            issues=["Relative monads must inhabit the same equipment to compose."],
            details="Relative monads reference distinct equipment instances.",
        )

    equality = equality_for(first.equipment)
    issues: List[str] = []

    if not vertical_boundaries_equal(equality, first.carrier, second.root):
        issues.append(
            "Carrier of the first relative monad must coincide with the root of the second to compose extensions."
        )
    if not equality(first.loose_cell.to_obj, second.loose_cell.from_obj):
        issues.append("Loose arrows must align so the composite extension is defined.")

    if issues:
        return FramingReport(
            holds=False,
            issues=issues,
            details=f"Relative monad composition issues: {'; '.join(issues)}",
        )

    framing_issues = analyze_relative_monad_framing(first).issues + analyze_relative_monad_framing(second).issues
    holds = not framing_issues
    logger.debug(f"relative monad composition: {len(framing_issues)} framing issue(s)")
    return FramingReport(
        holds=holds,
        issues=framing_issues,
        details=(
            "Relative monads exhibit compatible framing data to admit composition."
            if holds
            else f"Relative monads must satisfy framing conditions before composing: {'; '.join(framing_issues)}"
        ),
    )


def relative_monad_from_loose_monoid(
    equipment: VirtualEquipment,
    root: VerticalBoundary,
    carrier: VerticalBoundary,
    monoid: LooseMonoidData,
) -> RelativeMonadLooseMonoidBridgeReport:
    """Read a loose monoid on dom(j) as a j-relative monad (multiplication as extension)."""
    loose_monoid_report = analyze_loose_monoid_shape(equipment, monoid)
    data = RelativeMonadData(
        equipment=equipment,
        root=root,
        carrier=carrier,
        loose_cell=monoid.loose_cell,
        extension=monoid.multiplication,
        unit=monoid.unit,
    )
    framing = analyze_relative_monad_framing(data)
    issues = loose_monoid_report.issues + framing.issues
    holds = not issues
    return RelativeMonadLooseMonoidBridgeReport(
        holds=holds,
        issues=issues,
        details=(
            "Loose monoid realises a relative monad via the representation theorem."
            if holds
            else f"Loose monoid to relative monad conversion issues: {'; '.join(issues)}"
        ),
        loose_monoid_report=loose_monoid_report,
        framing=framing,
        data=data,
    )


def relative_monad_to_loose_monoid(data: RelativeMonadData) -> LooseMonoidData:
    return LooseMonoidData(
        object=data.root.from_obj,
        loose_cell=data.loose_cell,
        multiplication=data.extension,
        unit=data.unit,
    )
