"""
Relative adjunctions ℓ ⊣_j r.

Definition 5.1 presents a j-relative adjunction by a root j : A → E, a left
leg ℓ : A → C, a right leg r : C → E and a pair of hom-set isomorphism
2-cells C(ℓ-,=) ≅ E(j-,r=). This module checks that presentation, its
unit/counit form (Lemma 5.5), left/right/strict morphisms (Definitions 5.14
and 5.18), tight precomposition (Proposition 5.29) and the characterisations
of r as a pointwise left lift or a left extension along j, together with
preservation of colimits by ℓ.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from equipment.core import (
    CellBoundaries,
    Equipment2Cell,
    Frame,
    ObjectEquality,
    VerticalBoundary,
    VirtualEquipment,
    compose_vertical_boundaries,
    equality_for,
    frame_from_proarrow,
    identity_cell,
    identity_proarrow,
    identity_vertical_boundary,
    vertical_boundaries_equal,
)
from equipment.extensions import (
    LeftExtensionFromColimitData,
    PointwiseLeftLiftData,
    analyze_left_extension_from_weighted_colimit,
    analyze_pointwise_left_lift,
    analyze_right_extension,
    describe_identity_left_extension,
    describe_identity_right_lift,
)
from equipment.framing import boundaries_match, collect_report_issues, ensure_frame_alignment, frames_coincide
from equipment.reports import FramingReport, PendingReport, framing_report, structural_report

logger = logging.getLogger(__name__)

COINCIDE = "must coincide with the designated tight boundary."


@dataclass(frozen=True)
class RelativeAdjunctionHomIsomorphism:
    forward: Equipment2Cell
    backward: Equipment2Cell
    details: str = ""


@dataclass(frozen=True)
class RelativeAdjunctionData:
    """
    Presentation of a j-relative adjunction.

    Attributes:
        equipment: Ambient virtual equipment
        root: Root j : A → E
        left: Left leg ℓ : A → C
        right: Right leg r : C → E
        hom_isomorphism: Forward and backward hom-set isomorphism cells
    """

    equipment: VirtualEquipment
    root: VerticalBoundary
    left: VerticalBoundary
    right: VerticalBoundary
    hom_isomorphism: RelativeAdjunctionHomIsomorphism


@dataclass(frozen=True)
class RelativeAdjunctionUnitCounitPresentation:
    unit: Equipment2Cell
    counit: Equipment2Cell


@dataclass(frozen=True)
class RelativeAdjunctionLeftMorphismData:
    source: RelativeAdjunctionData
    target: RelativeAdjunctionData
    comparison: VerticalBoundary
    transformation: Equipment2Cell


@dataclass(frozen=True)
class RelativeAdjunctionRightMorphismData:
    source: RelativeAdjunctionData
    target: RelativeAdjunctionData
    comparison: VerticalBoundary
    transformation: Equipment2Cell


@dataclass(frozen=True)
class RelativeAdjunctionStrictMorphismData:
    left: RelativeAdjunctionLeftMorphismData
    right: RelativeAdjunctionRightMorphismData


@dataclass(frozen=True)
class RelativeAdjunctionStrictMorphismReport:
    holds: bool
    issues: List[str]
    details: str
    left: FramingReport
    right: FramingReport

    def to_dict(self) -> Dict[str, Any]:
        return {
            "holds": self.holds,
            "issues": list(self.issues),
            "details": self.details,
            "left": self.left.to_dict(),
            "right": self.right.to_dict(),
        }


@dataclass(frozen=True)
class RelativeAdjunctionPrecompositionReport:
    """Outcome of precomposing an adjunction with a tight cell u : A' → A."""

    holds: bool
    issues: List[str]
    details: str
    root: Optional[VerticalBoundary] = None
    left: Optional[VerticalBoundary] = None
    right: Optional[VerticalBoundary] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"holds": self.holds, "issues": list(self.issues), "details": self.details}


def analyze_relative_adjunction_framing(data: RelativeAdjunctionData) -> FramingReport:
    equality = equality_for(data.equipment)
    root, left, right = data.root, data.left, data.right
    forward, backward = data.hom_isomorphism.forward, data.hom_isomorphism.backward
    issues: List[str] = []

    if not equality(root.from_obj, left.from_obj):
        issues.append("Root j and left ℓ must share their domain object A.")
    if not equality(root.from_obj, right.from_obj):
        issues.append("Root j and right r must agree on their domain when compared through ℓ.")
    if not equality(left.to_obj, right.from_obj):
        issues.append("Left ℓ’s codomain must feed the right r’s domain so ℓ ⊣ r factors through C.")
    if not equality(root.to_obj, right.to_obj):
        issues.append("Root j and right r must land in the same codomain E.")

    for label, cell in (("Forward", forward), ("Backward", backward)):
        boundaries_match(
            equality, cell.boundaries.left, left, f"{label} hom isomorphism left boundary", issues, COINCIDE
        )
        boundaries_match(
            equality, cell.boundaries.right, right, f"{label} hom isomorphism right boundary", issues, COINCIDE
        )

    logger.debug(f"relative adjunction framing: {len(issues)} issue(s)")
    return framing_report(
        issues,
        "Relative adjunction root/left/right data share boundaries compatible with Definition 5.1.",
        "Relative adjunction framing",
    )


def _check_hom_frame(
    equality: ObjectEquality, frame: Frame, left: Any, right: Any, label: str, issues: List[str]
) -> None:
    if not equality(frame.left_boundary, left):
        issues.append(f"{label} should start at the domain shared by j and ℓ.")
    if not equality(frame.right_boundary, right):
        issues.append(f"{label} should end at the codomain shared by r and j.")
    if not frame.arrows:
        issues.append(f"{label} should describe at least one loose arrow in the frame.")


def analyze_relative_adjunction_hom_isomorphism(data: RelativeAdjunctionData) -> FramingReport:
    equality = equality_for(data.equipment)
    start, end = data.left.from_obj, data.right.to_obj
    forward, backward = data.hom_isomorphism.forward, data.hom_isomorphism.backward
    issues: List[str] = []

    _check_hom_frame(equality, forward.source, start, end, "Forward hom isomorphism source frame", issues)
    _check_hom_frame(equality, forward.target, start, end, "Forward hom isomorphism target frame", issues)
    _check_hom_frame(equality, backward.source, start, end, "Backward hom isomorphism source frame", issues)
    _check_hom_frame(equality, backward.target, start, end, "Backward hom isomorphism target frame", issues)

    if not vertical_boundaries_equal(equality, forward.boundaries.left, backward.boundaries.left):
        issues.append("Forward and backward isomorphism cells must share the same left boundary ℓ.")
    if not vertical_boundaries_equal(equality, forward.boundaries.right, backward.boundaries.right):
        issues.append("Forward and backward isomorphism cells must share the same right boundary r.")

    logger.debug(f"relative adjunction hom isomorphism: {len(issues)} issue(s)")
    return framing_report(
        issues,
        "Hom-set isomorphism witnesses share frames and boundaries consistent with Definition 5.1.",
        "Relative adjunction hom-isomorphism",
    )


def analyze_relative_adjunction_unit_counit(
    data: RelativeAdjunctionData, presentation: RelativeAdjunctionUnitCounitPresentation
) -> FramingReport:
    """Lemma 5.5: unit j ⇒ rℓ and counit framed on ℓ."""
    equality = equality_for(data.equipment)
    root, left, right = data.root, data.left, data.right
    unit, counit = presentation.unit, presentation.counit
    issues: List[str] = []

    if not vertical_boundaries_equal(equality, unit.boundaries.left, root):
        issues.append("Unit 2-cell must reuse the root j as its left boundary.")
    if not vertical_boundaries_equal(equality, unit.boundaries.right, right):
        issues.append("Unit 2-cell must reuse the right leg r as its right boundary.")
    if not vertical_boundaries_equal(equality, counit.boundaries.left, left):
        issues.append("Counit 2-cell must reuse the left leg ℓ as its left boundary.")
    if not vertical_boundaries_equal(equality, counit.boundaries.right, left):
        issues.append("Counit 2-cell should target the same tight boundary as ℓ on the right, reflecting Lemma 5.5.")

    ensure_frame_alignment(equality, unit.source, root.from_obj, right.to_obj, "Unit source frame", issues)
    ensure_frame_alignment(equality, unit.target, root.from_obj, right.to_obj, "Unit target frame", issues)
    ensure_frame_alignment(equality, counit.source, left.from_obj, left.to_obj, "Counit source frame", issues)
    ensure_frame_alignment(equality, counit.target, left.from_obj, left.to_obj, "Counit target frame", issues)

    logger.debug(f"relative adjunction unit/counit: {len(issues)} issue(s)")
    return framing_report(
        issues,
        "Unit and counit reuse the designated boundaries and frames from Lemma 5.5.",
        "Relative adjunction unit/counit",
    )


def _shared_equipment(
    source: RelativeAdjunctionData, target: RelativeAdjunctionData, issues: List[str]
) -> VirtualEquipment:
    if source.equipment is not target.equipment:
        issues.append("Source and target relative adjunctions must live in the same virtual equipment.")
    return source.equipment


def _ensure_morphism_frames(cell: Equipment2Cell, label: str, issues: List[str]) -> None:
    if not cell.source.arrows:
        issues.append(f"{label} 2-cell source frame should describe at least one loose arrow.")
    if not cell.target.arrows:
        issues.append(f"{label} 2-cell target frame should describe at least one loose arrow.")


def analyze_relative_adjunction_left_morphism(data: RelativeAdjunctionLeftMorphismData) -> FramingReport:
    """Definition 5.14: a tight comparison between the apexes of the left legs."""
    issues: List[str] = []
    equality = equality_for(_shared_equipment(data.source, data.target, issues))
    source, target, comparison = data.source, data.target, data.comparison

    if not vertical_boundaries_equal(equality, source.root, target.root):
        issues.append("Left morphisms require both relative adjunctions to share the same root j.")
    if not equality(comparison.from_obj, source.left.to_obj):
        issues.append("Comparison tight cell must start at the codomain of the source left leg.")
    if not equality(comparison.to_obj, target.left.to_obj):
        issues.append("Comparison tight cell must land in the codomain of the target left leg.")
    if not vertical_boundaries_equal(equality, data.transformation.boundaries.left, source.left):
        issues.append("Left morphism 2-cell should reuse the source left leg as its left boundary.")
    if not vertical_boundaries_equal(equality, data.transformation.boundaries.right, target.left):
        issues.append("Left morphism 2-cell should reuse the target left leg as its right boundary.")
    _ensure_morphism_frames(data.transformation, "Left morphism", issues)

    logger.debug(f"relative adjunction left morphism: {len(issues)} issue(s)")
    return framing_report(
        issues,
        "Left morphism witnesses share the expected root, left-leg boundaries, and frame endpoints "
        "from Definition 5.14.",
        "Relative adjunction left-morphism",
    )


def analyze_relative_adjunction_right_morphism(data: RelativeAdjunctionRightMorphismData) -> FramingReport:
    """Definition 5.18: a tight comparison between the domains of the right legs."""
    issues: List[str] = []
    equality = equality_for(_shared_equipment(data.source, data.target, issues))
    source, target, comparison = data.source, data.target, data.comparison

    if not vertical_boundaries_equal(equality, source.root, target.root):
        issues.append("Right morphisms require both relative adjunctions to share the same root j.")
    if not equality(comparison.from_obj, source.right.from_obj):
        issues.append("Comparison tight cell must start at the domain of the source right leg.")
    if not equality(comparison.to_obj, target.right.from_obj):
        issues.append("Comparison tight cell must land in the domain of the target right leg.")
    if not vertical_boundaries_equal(equality, data.transformation.boundaries.left, target.right):
        issues.append("Right morphism 2-cell should reuse the target right leg as its left boundary.")
    if not vertical_boundaries_equal(equality, data.transformation.boundaries.right, source.right):
        issues.append("Right morphism 2-cell should reuse the source right leg as its right boundary.")
    _ensure_morphism_frames(data.transformation, "Right morphism", issues)

    logger.debug(f"relative adjunction right morphism: {len(issues)} issue(s)")
    return framing_report(
        issues,
        "Right morphism witnesses reuse the shared root and right-leg boundaries expected by Definition 5.18.",
        "Relative adjunction right-morphism",
    )


def analyze_relative_adjunction_strict_morphism(
    data: RelativeAdjunctionStrictMorphismData,
) -> RelativeAdjunctionStrictMorphismReport:
    left_report = analyze_relative_adjunction_left_morphism(data.left)
    right_report = analyze_relative_adjunction_right_morphism(data.right)
    equality = equality_for(data.left.source.equipment)
    issues: List[str] = []

    if not vertical_boundaries_equal(equality, data.left.comparison, data.right.comparison):
        issues.append(
            "Strict morphisms require the left and right comparisons to coincide as the same tight 1-cell."
        )
    if data.left.source is not data.right.source or data.left.target is not data.right.target:
        issues.append(
            "Strict morphisms must be built from the same pair of relative adjunctions on the left and right sides."
        )
    issues.extend(left_report.issues)
    issues.extend(right_report.issues)

    holds = not issues
    logger.debug(f"relative adjunction strict morphism: {len(issues)} issue(s)")
    return RelativeAdjunctionStrictMorphismReport(
        holds=holds,
        issues=issues,
        details=(
            "Strict morphism simultaneously satisfies the Definition 5.14 and 5.18 framing constraints."
            if holds
            else f"Relative adjunction strict-morphism issues: {'; '.join(issues)}"
        ),
        left=left_report,
        right=right_report,
    )


def analyze_relative_adjunction_precomposition(
    adjunction: RelativeAdjunctionData, precomposition: VerticalBoundary
) -> RelativeAdjunctionPrecompositionReport:
    """
    Proposition 5.29: ℓ ⊣_j r induces ℓu ⊣_{ju} r for any tight u into A.

    Endpoint mismatches stop the analysis before any composite is built.
    """
    equipment = adjunction.equipment
    equality = equality_for(equipment)
    issues: List[str] = []

    if not equality(precomposition.to_obj, adjunction.root.from_obj):
        issues.append("Precomposition tight cell must target the adjunction root domain A.")
    if not equality(precomposition.to_obj, adjunction.left.from_obj):
        issues.append("Precomposition tight cell must also target the left leg domain A.")

    if issues:
        return RelativeAdjunctionPrecompositionReport(
            holds=False,
            issues=issues,
            details=f"Relative adjunction precomposition issues: {'; '.join(issues)}",
        )

    return RelativeAdjunctionPrecompositionReport(
        holds=True,
        issues=[],
        details="Tight precomposition transports the relative adjunction along u, aligning with Proposition 5.29.",
        root=compose_vertical_boundaries(
            equipment, adjunction.root, precomposition, "Precomposed root j ∘ u supplied by Proposition 5.29."
        ),
        left=compose_vertical_boundaries(
            equipment, adjunction.left, precomposition, "Precomposed left leg ℓ ∘ u supplied by Proposition 5.29."
        ),
        right=adjunction.right,
    )


def _identity_cell_between(
    equipment: VirtualEquipment, obj: Any, left: VerticalBoundary, right: VerticalBoundary
) -> Equipment2Cell:
    frame = frame_from_proarrow(identity_proarrow(equipment, obj))
    boundaries = CellBoundaries(left=left, right=right)
    return Equipment2Cell(
        source=frame,
        target=frame,
        boundaries=boundaries,
        evidence=equipment.identity_evidence(frame, boundaries),
    )


def describe_identity_relative_adjunction_left_morphism(
    adjunction: RelativeAdjunctionData,
) -> RelativeAdjunctionLeftMorphismData:
    equipment, left = adjunction.equipment, adjunction.left
    return RelativeAdjunctionLeftMorphismData(
        source=adjunction,
        target=adjunction,
        comparison=identity_vertical_boundary(
            equipment, left.to_obj, "Identity left morphism comparison on the apex of ℓ."
        ),
        transformation=_identity_cell_between(equipment, left.from_obj, left, left),
    )


def describe_identity_relative_adjunction_right_morphism(
    adjunction: RelativeAdjunctionData,
) -> RelativeAdjunctionRightMorphismData:
    equipment, right = adjunction.equipment, adjunction.right
    return RelativeAdjunctionRightMorphismData(
        source=adjunction,
        target=adjunction,
        comparison=identity_vertical_boundary(
            equipment, right.from_obj, "Identity right morphism comparison on the domain of r."
        ),
        transformation=_identity_cell_between(equipment, right.from_obj, right, right),
    )


def describe_identity_relative_adjunction_strict_morphism(
    adjunction: RelativeAdjunctionData,
) -> RelativeAdjunctionStrictMorphismData:
    return RelativeAdjunctionStrictMorphismData(
        left=describe_identity_relative_adjunction_left_morphism(adjunction),
        right=describe_identity_relative_adjunction_right_morphism(adjunction),
    )


def describe_trivial_relative_adjunction_unit_counit(
    data: RelativeAdjunctionData,
) -> RelativeAdjunctionUnitCounitPresentation:
    equipment = data.equipment
    return RelativeAdjunctionUnitCounitPresentation(
        unit=_identity_cell_between(equipment, data.root.from_obj, data.root, data.right),
        counit=_identity_cell_between(equipment, data.root.from_obj, data.left, data.left),
    )


def describe_trivial_relative_adjunction(equipment: VirtualEquipment, obj: Any) -> RelativeAdjunctionData:
    """Identity root and legs on obj with identity hom-set isomorphism cells."""
    root = identity_vertical_boundary(
        equipment, obj, "Trivial relative adjunction root chosen as the identity tight 1-cell."
    )
    left = identity_vertical_boundary(
        equipment, obj, "Trivial relative adjunction left leg equals the identity tight 1-cell."
    )
    right = identity_vertical_boundary(
        equipment, obj, "Trivial relative adjunction right leg equals the identity tight 1-cell."
    )
    frame = frame_from_proarrow(identity_proarrow(equipment, obj))
    boundaries = CellBoundaries(left=left, right=right)
    evidence = equipment.identity_evidence(frame, boundaries)
    logger.debug(f"described trivial relative adjunction on {obj!r}")
    return RelativeAdjunctionData(
        equipment=equipment,
        root=root,
        left=left,
        right=right,
        hom_isomorphism=RelativeAdjunctionHomIsomorphism(
            forward=Equipment2Cell(source=frame, target=frame, boundaries=boundaries, evidence=evidence),
            backward=Equipment2Cell(source=frame, target=frame, boundaries=boundaries, evidence=evidence),
            details="Identity hom-set isomorphism witnesses for the trivial relative adjunction.",
        ),
    )


# ----------------------------------------------------------------------
# Lifts, extensions and colimit preservation (Propositions 5.8, 5.10, 5.11)
# ----------------------------------------------------------------------


@dataclass(frozen=True)
class RelativeAdjunctionColimitPreservationData:
    """Left extensions along j and along ℓ computed from one shared weight."""

    root: LeftExtensionFromColimitData
    left: LeftExtensionFromColimitData


def analyze_relative_adjunction_pointwise_left_lift(
    data: RelativeAdjunctionData, lift: PointwiseLeftLiftData
) -> PendingReport:
    """The right leg r is the pointwise left lift of ℓ through j."""
    equality = equality_for(data.equipment)
    root, left, right = data.root, data.left, data.right
    issues: List[str] = []

    lift_report = analyze_pointwise_left_lift(data.equipment, lift)
    collect_report_issues("Pointwise left lift", lift_report, issues)
    if lift.along is not root.tight:
        issues.append("Pointwise left lift should be computed along the root j to recover the right leg.")

    loose, arrow = lift.lift.loose, lift.lift.lift
    if not equality(loose.from_obj, left.from_obj):
        issues.append("Lift loose arrow should start at the root/left domain.")
    if not equality(loose.to_obj, left.to_obj):
        issues.append("Lift loose arrow should land at the left codomain so that ℓ participates in the lift framing.")
    if not equality(arrow.from_obj, right.from_obj):
        issues.append("Computed lift arrow should originate at the right leg domain.")
    if not equality(arrow.to_obj, right.to_obj):
        issues.append("Computed lift arrow should land at the right leg codomain.")

    logger.debug(f"relative adjunction pointwise left lift: {len(issues)} issue(s)")
    return structural_report(
        issues,
        "Pointwise left lift exhibits the right leg r and matches the relative adjunction framing.",
        "Relative adjunction left lift",
        witness=lift,
        lift_report=lift_report,
    )


def analyze_relative_adjunction_right_extension(
    data: RelativeAdjunctionData, extension: LeftExtensionFromColimitData
) -> PendingReport:
    """Along a fully faithful root, the right leg is a left extension computed from a weighted colimit."""
    equipment = data.equipment
    equality = equality_for(equipment)
    root, left, right = data.root, data.left, data.right
    issues: List[str] = []

    colimit_report = analyze_left_extension_from_weighted_colimit(equipment, extension)
    collect_report_issues("Left extension framing", colimit_report, issues)
    extension_report = analyze_right_extension(equipment, extension.extension)
    collect_report_issues("Extension counit", extension_report, issues)

    witness = extension.extension
    if witness.along is not root.tight:
        issues.append("Left extension should be taken along the root j to recover the right adjoint.")
    if not equality(witness.loose.from_obj, left.from_obj):
        issues.append("Left extension loose arrow should start at ℓ's domain.")
    if not equality(witness.loose.to_obj, root.to_obj):
        issues.append("Left extension loose arrow should land at j's codomain.")
    if not equality(witness.extension.from_obj, right.from_obj):
        issues.append("Resulting extension arrow should originate at r's domain.")
    if not equality(witness.extension.to_obj, right.to_obj):
        issues.append("Resulting extension arrow should land at r's codomain.")

    logger.debug(f"relative adjunction right extension: {len(issues)} issue(s)")
    return structural_report(
        issues,
        "Left extension along the root recovers the right relative adjoint.",
        "Relative adjunction left extension",
        witness=extension,
        colimit_report=colimit_report,
        extension_report=extension_report,
    )


def analyze_relative_adjunction_colimit_preservation(
    data: RelativeAdjunctionData, preservation: RelativeAdjunctionColimitPreservationData
) -> PendingReport:
    """ℓ preserves every weighted colimit that j preserves."""
    equipment = data.equipment
    equality = equality_for(equipment)
    issues: List[str] = []

    root_report = analyze_left_extension_from_weighted_colimit(equipment, preservation.root)
    left_report = analyze_left_extension_from_weighted_colimit(equipment, preservation.left)

    if preservation.root.extension.along is not data.root.tight:
        issues.append("Root preservation data should exhibit a left extension along j.")
    if preservation.left.extension.along is not data.left.tight:
        issues.append("Left preservation data should exhibit a left extension along ℓ.")
    frames_coincide(
        equality, preservation.left.colimit.weight, preservation.root.colimit.weight, "Shared weighted colimit", issues
    )
    if not root_report.holds:
        issues.append(f"Root j does not preserve the chosen colimit. Details: {root_report.details}")
    elif not left_report.holds:
        issues.append(f"Despite j preserving the colimit, ℓ failed the preservation check: {left_report.details}")

    logger.debug(f"relative adjunction colimit preservation: {len(issues)} issue(s)")
    return structural_report(
        issues,
        "Left relative adjoint preserves the colimit shared with the root.",
        "Relative adjunction colimit preservation",
        witness=preservation,
        root_report=root_report,
        left_report=left_report,
    )


def describe_trivial_relative_adjunction_pointwise_left_lift(data: RelativeAdjunctionData) -> PointwiseLeftLiftData:
    equipment = data.equipment
    loose = identity_proarrow(equipment, data.left.from_obj)
    lift = describe_identity_right_lift(equipment, loose, identity_cell(equipment, frame_from_proarrow(loose)))
    return PointwiseLeftLiftData(lift=lift, along=lift.along)


def describe_trivial_relative_adjunction_left_extension(data: RelativeAdjunctionData) -> LeftExtensionFromColimitData:
    equipment = data.equipment
    loose = identity_proarrow(equipment, data.left.from_obj)
    return describe_identity_left_extension(equipment, loose, identity_cell(equipment, frame_from_proarrow(loose)))


def describe_trivial_relative_adjunction_colimit_preservation(
    data: RelativeAdjunctionData,
) -> RelativeAdjunctionColimitPreservationData:
    extension = describe_trivial_relative_adjunction_left_extension(data)
    return RelativeAdjunctionColimitPreservationData(root=extension, left=extension)
