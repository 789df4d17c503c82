"""Relative comonads: the dual framing of relative monads along a root j."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List

from equipment.core import (
    CellBoundaries,
    Equipment2Cell,
    Proarrow,
    RepresentabilityWitness,
    VerticalBoundary,
    VirtualEquipment,
    equality_for,
    frame_from_proarrow,
    identity_proarrow,
    identity_vertical_boundary,
    is_identity_vertical_boundary,
)
from equipment.framing import boundaries_match, frame_matches_loose_cell
from equipment.reports import FramingReport, framing_report

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RelativeComonadData:
    """
    Presentation of a j-relative comonad.

    Attributes:
        equipment: Ambient virtual equipment
        root: Root j
        carrier: Carrier t
        loose_cell: Loose arrow C(t,j) from dom(t) to cod(j)
        coextension: Coextension 2-cell framed on C(t,j)
        counit: Counit 2-cell framed on C(t,j)
    """

    equipment: VirtualEquipment
    root: VerticalBoundary
    carrier: VerticalBoundary
    loose_cell: Proarrow
    coextension: Equipment2Cell
    counit: Equipment2Cell


@dataclass(frozen=True)
class RelativeComonadCorepresentabilityReport:
    holds: bool
    issues: List[str]
    details: str
    framing: FramingReport
    representability: RepresentabilityWitness

    def to_dict(self) -> Dict[str, Any]:
        return {
            "holds": self.holds,
            "issues": list(self.issues),
            "details": self.details,
            "framing": self.framing.to_dict(),
            "orientation": self.representability.orientation,
        }


def analyze_relative_comonad_framing(data: RelativeComonadData) -> FramingReport:
    equality = equality_for(data.equipment)
    root, carrier, loose_cell = data.root, data.carrier, data.loose_cell
    coextension, counit = data.coextension, data.counit
    issues: List[str] = []

    if not equality(root.from_obj, carrier.from_obj) or not equality(root.to_obj, carrier.to_obj):
        issues.append("Root j and carrier t must share domain and codomain.")
    if not equality(loose_cell.from_obj, carrier.from_obj) or not equality(loose_cell.to_obj, root.to_obj):
        issues.append("Underlying loose cell C(t,j) must run from dom(t) to cod(j).")

    frame_matches_loose_cell(equality, coextension.target, loose_cell, "Coextension target", issues, "C(t,j)")
    frame_matches_loose_cell(equality, counit.target, loose_cell, "Counit target", issues, "C(t,j)")

    if not equality(coextension.source.left_boundary, carrier.from_obj):
        issues.append("Coextension source left boundary must equal dom(t).")
    if not equality(coextension.source.right_boundary, root.to_obj):
        issues.append("Coextension source right boundary must equal cod(j).")
    if not equality(counit.source.left_boundary, carrier.from_obj):
        issues.append("Counit source left boundary must equal dom(t).")
    if not equality(counit.source.right_boundary, carrier.to_obj):
        issues.append("Counit source right boundary must equal cod(t) = cod(j).")

    boundaries_match(equality, coextension.boundaries.left, carrier, "Coextension left boundary", issues)
    boundaries_match(equality, coextension.boundaries.right, root, "Coextension right boundary", issues)
    boundaries_match(equality, counit.boundaries.left, carrier, "Counit left boundary", issues)
    boundaries_match(equality, counit.boundaries.right, root, "Counit right boundary", issues)

    logger.debug(f"relative comonad framing: {len(issues)} issue(s)")
    return framing_report(
        issues,
        "Relative comonad counit and coextension 2-cells have compatible framing with the chosen root and carrier.",
        "Relative comonad framing",
    )


def describe_trivial_relative_comonad(equipment: VirtualEquipment, obj: Any) -> RelativeComonadData:
    """Identity root and carrier on obj; the coextension is the counit cell itself."""
    root = identity_vertical_boundary(
        equipment, obj, "Trivial relative comonad root chosen as the identity tight 1-cell."
    )
    carrier = identity_vertical_boundary(
        equipment, obj, "Trivial relative comonad carrier equals the identity tight 1-cell."
    )
    loose_cell = identity_proarrow(equipment, obj)
    frame = frame_from_proarrow(loose_cell)
    boundaries = CellBoundaries(left=carrier, right=root)
    counit = Equipment2Cell(
        source=frame,
        target=frame,
        boundaries=boundaries,
        evidence=equipment.identity_evidence(frame, boundaries),
    )
    logger.debug(f"described trivial relative comonad on {obj!r}")
    return RelativeComonadData(
        equipment=equipment,
        root=root,
        carrier=carrier,
        loose_cell=loose_cell,
        coextension=counit,
        counit=counit,
    )


def analyze_relative_comonad_corepresentability(
    data: RelativeComonadData, witness: RepresentabilityWitness
) -> RelativeComonadCorepresentabilityReport:
    framing = analyze_relative_comonad_framing(data)
    equality = equality_for(data.equipment)
    issues = list(framing.issues)

    if witness.orientation != "right":
        issues.append(
            "Corepresentability witness must arise from a right restriction B(1,j) "
            "to align with the dual of Theorem 4.16."
        )
    if not equality(witness.object, data.root.to_obj):
        issues.append("Corepresentability witness object must match the codomain of the root j.")
    if witness.tight is not data.root.tight:
        issues.append("Corepresentability witness must reuse the root tight 1-cell when restricting the identity.")
    if not equality(data.loose_cell.to_obj, data.root.to_obj):
        issues.append(
            "Relative comonad loose arrow should end at the codomain certified by the corepresentability witness."
        )

    holds = not issues
    logger.debug(f"relative comonad corepresentability: {len(issues)} issue(s)")
    return RelativeComonadCorepresentabilityReport(
        holds=holds,
        issues=issues,
        details=(
            "Relative comonad is corepresentable by a right restriction witness."
            if holds
            else f"Relative comonad corepresentability issues: {'; '.join(issues)}"
        ),
        framing=framing,
        representability=witness,
    )


def analyze_relative_comonad_identity_reduction(data: RelativeComonadData) -> FramingReport:
    equipment = data.equipment
    equality = equality_for(equipment)
    issues: List[str] = []

    if not is_identity_vertical_boundary(equipment, data.root.from_obj, data.root):
        issues.append("Root must be the identity tight 1-cell to recover an ordinary comonad.")
    if not is_identity_vertical_boundary(equipment, data.carrier.from_obj, data.carrier):
        issues.append("Carrier must be the identity tight 1-cell when reducing to a classical comonad.")
    if not equality(data.loose_cell.from_obj, data.root.from_obj) or not equality(
        data.loose_cell.to_obj, data.root.to_obj
    ):
        issues.append("Underlying loose arrow must be an endoproarrow on the identity object.")

    logger.debug(f"relative comonad identity reduction: {len(issues)} issue(s)")
    return framing_report(
        issues,
        "Relative comonad collapses to an ordinary comonad along the identity root.",
        "Relative comonad identity reduction",
    )
