"""
Street actions of a relative monad and their coherence.

A Street action is a right action of the loose arrow E(j,t) on a carrier:
a 2-cell whose left boundary is the root j and whose right boundary is the
action carrier. Coherence is checked by pasting: each law is recorded as a
red and a green composite built with vertical_compose_cells, and the
analyzers compare the two composites frame by frame.

Composites are compared on frame shape and boundary endpoints only; the
evidence they carry is opaque.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from equipment.core import (
    CellBoundaries,
    Equipment2Cell,
    ObjectEquality,
    RestrictionResult,
    VerticalBoundary,
    VirtualEquipment,
    equality_for,
    frame_from_proarrow,
    vertical_compose_cells,
)
from equipment.framing import (
    collect_report_issues,
    ensure_boundary_reuse,
    ensure_frame_alignment,
    ensure_same_witness,
    frame_matches_loose_cell,
)
from equipment.loose import (
    LooseAdjunctionData,
    LooseMonoidData,
    analyze_loose_adjunction,
    analyze_loose_monoid_shape,
)
from equipment.reports import FramingReport, PendingReport, framing_report, pending_report, structural_report

from .algebras import (
    RelativeAlgebraData,
    RelativeAlgebraPresentation,
    RelativeKleisliPresentation,
    RelativeOpalgebraData,
    RelativeOpalgebraPresentation,
    analyze_relative_algebra_framing,
    analyze_relative_opalgebra_framing,
)
from .composition import relative_monad_to_loose_monoid
from .monads import RelativeMonadData

logger = logging.getLogger(__name__)


# ----------------------------------------------------------------------
# Data
# ----------------------------------------------------------------------


@dataclass(frozen=True)
class RelativeStreetActionData:
    """
    Right action of E(j,t) on a carrier.

    Attributes:
        carrier: Tight boundary the action lands in
        action: The action 2-cell
        representable_carriers: Carriers whose restriction is known to be representable
    """

    carrier: VerticalBoundary
    action: Equipment2Cell
    representable_carriers: Tuple[VerticalBoundary, ...] = ()


@dataclass(frozen=True)
class StreetPasting:
    red: Equipment2Cell
    green: Equipment2Cell


@dataclass(frozen=True)
class RelativeStreetActionCoherenceWitness:
    """
    Identity and composition laws of a Street action as pasting pairs.

    Attributes:
        street_action: The action under test
        identity: Identity 2-cell on E(j,t) used for the unit law
        identity_law: action ∘ identity against the action itself
        composition_law: action ∘ extension against action ∘ action
    """

    street_action: RelativeStreetActionData
    identity: Equipment2Cell
    identity_law: StreetPasting
    composition_law: StreetPasting


@dataclass(frozen=True)
class RelativeStreetActionHomomorphismWitness:
    source: RelativeStreetActionData
    target: RelativeStreetActionData
    morphism: Equipment2Cell
    red_composite: Equipment2Cell
    green_composite: Equipment2Cell


@dataclass(frozen=True)
class RelativeStreetHomCategoryWitness:
    street_action: RelativeStreetActionData
    identity: RelativeStreetActionHomomorphismWitness
    composite: Equipment2Cell


@dataclass(frozen=True)
class RelativeStreetLooseAdjunctionWitness:
    street_action: RelativeStreetActionData
    unit: Equipment2Cell
    counit: Equipment2Cell


@dataclass(frozen=True)
class RelativeStreetRepresentableRestrictionWitness:
    street_action: RelativeStreetActionData
    restriction: Optional[RestrictionResult]


@dataclass(frozen=True)
class RelativeAlgebraStreetActionEquivalenceWitness:
    presentation: RelativeAlgebraPresentation
    street_action: RelativeStreetActionData
    recovered: RelativeAlgebraData


@dataclass(frozen=True)
class RelativeOpalgebraStreetActionEquivalenceWitness:
    presentation: RelativeOpalgebraPresentation
    street_action: RelativeStreetActionData
    recovered: RelativeOpalgebraData


@dataclass(frozen=True)
class RelativeStreetRepresentabilityUpgradeWitness:
    street_action: RelativeStreetActionData
    restriction: RelativeStreetRepresentableRestrictionWitness


@dataclass(frozen=True)
class RelativeStreetRepresentableSubmulticategoryWitness:
    """
    Street cells whose domains are representable, closed under the action.

    Attributes:
        street_action: The action generating the submulticategory
        restriction: Representability of the left restriction B(j,1)
        representable_cells: Cells kept in the submulticategory; each is framed by j and the carrier
    """

    street_action: RelativeStreetActionData
    restriction: RelativeStreetRepresentableRestrictionWitness
    representable_cells: Tuple[Equipment2Cell, ...]


@dataclass(frozen=True)
class RelativeStreetLooseAdjunctionRightActionWitness:
    street_action: RelativeStreetActionData
    adjunction: LooseAdjunctionData


# ----------------------------------------------------------------------
# Helpers
# ----------------------------------------------------------------------


def _paste(equipment: VirtualEquipment, beta: Equipment2Cell, alpha: Equipment2Cell, label: str) -> Equipment2Cell:
    composite = vertical_compose_cells(equipment, beta, alpha)
    if composite is None:
        raise ValueError(f"{label}: the supplied equipment cannot paste the cells vertically.")
    return composite


def compare_street_composites(
    equality: ObjectEquality, red: Equipment2Cell, green: Equipment2Cell, label: str
) -> FramingReport:
    """Compare two pasted composites on frames and boundary endpoints."""
    issues: List[str] = []
    for side in ("source", "target"):
        red_frame, green_frame = getattr(red, side), getattr(green, side)
        if len(red_frame.arrows) != len(green_frame.arrows):
            issues.append(
                f"{label} {side} frame arrow count mismatch: red exposes {len(red_frame.arrows)}, "
                f"green exposes {len(green_frame.arrows)}."
            )
        else:
            for index, (left, right) in enumerate(zip(red_frame.arrows, green_frame.arrows)):
                if not equality(left.from_obj, right.from_obj) or not equality(left.to_obj, right.to_obj):
                    issues.append(f"{label} {side} frame arrow {index} endpoints differ.")
        if not equality(red_frame.left_boundary, green_frame.left_boundary) or not equality(
            red_frame.right_boundary, green_frame.right_boundary
        ):
            issues.append(f"{label} {side} frame boundaries differ.")
    for side in ("left", "right"):
        red_boundary, green_boundary = getattr(red.boundaries, side), getattr(green.boundaries, side)
        if not equality(red_boundary.from_obj, green_boundary.from_obj) or not equality(
            red_boundary.to_obj, green_boundary.to_obj
        ):
            issues.append(f"{label} {side} boundary endpoints differ.")
    return framing_report(issues, f"{label} red and green composites agree.", label)


def _street_action_layout_issues(monad: RelativeMonadData, street_action: RelativeStreetActionData) -> List[str]:
    equality = equality_for(monad.equipment)
    action = street_action.action
    issues: List[str] = []

    ensure_boundary_reuse(action.boundaries.left, monad.root, "Street action 2-cell left boundary", issues)
    ensure_boundary_reuse(action.boundaries.right, street_action.carrier, "Street action 2-cell right boundary", issues)
    ensure_frame_alignment(
        equality, action.source, monad.root.from_obj, street_action.carrier.to_obj, "Street action source frame", issues
    )
    ensure_frame_alignment(
        equality, action.target, monad.root.from_obj, street_action.carrier.to_obj, "Street action target frame", issues
    )
    return issues


def _street_action_structure(monad: RelativeMonadData, street_action: RelativeStreetActionData) -> PendingReport:
    return structural_report(
        _street_action_layout_issues(monad, street_action),
        "Street action reuses the root j and its carrier as boundaries.",
        "Street action",
        witness=street_action,
    )


def _representability_issues(restriction: Optional[RestrictionResult], label: str, issues: List[str]) -> None:
    if restriction is None:
        issues.append(f"{label} requires the equipment to restrict E(j,t) along the root j.")
    elif restriction.representability is None:
        issues.append(
            f"{label} should carry a representability witness for B(j,1). Details: {restriction.details}"
        )


def _action_identity(monad: RelativeMonadData, street_action: RelativeStreetActionData) -> Equipment2Cell:
    frame = street_action.action.source
    boundaries = CellBoundaries(left=monad.root, right=street_action.carrier)
    return Equipment2Cell(
        source=frame,
        target=frame,
        boundaries=boundaries,
        evidence=monad.equipment.identity_evidence(frame, boundaries),
    )


# ----------------------------------------------------------------------
# Street action data and coherence
# ----------------------------------------------------------------------


def describe_relative_street_action(monad: RelativeMonadData) -> RelativeStreetActionData:
    """The monad acting on its own carrier through the extension."""
    return RelativeStreetActionData(
        carrier=monad.carrier,
        action=monad.extension,
        representable_carriers=(monad.carrier,),
    )


def analyze_relative_street_action(monad: RelativeMonadData, street_action: RelativeStreetActionData) -> PendingReport:
    issues = _street_action_layout_issues(monad, street_action)
    logger.debug(f"relative Street action: {len(issues)} issue(s)")
    return pending_report(
        issues,
        "Street action reuses the root j and its carrier; the action laws remain pending.",
        "Street action",
        witness=street_action,
    )


def describe_relative_street_action_coherence(
    monad: RelativeMonadData, street_action: Optional[RelativeStreetActionData] = None
) -> RelativeStreetActionCoherenceWitness:
    """Paste the identity and composition laws; raises ValueError when the cells do not chain."""
    street_action = street_action or describe_relative_street_action(monad)
    equipment = monad.equipment
    identity = _action_identity(monad, street_action)
    action = street_action.action
    return RelativeStreetActionCoherenceWitness(
        street_action=street_action,
        identity=identity,
        identity_law=StreetPasting(
            red=_paste(equipment, action, identity, "Street action identity law"),
            green=action,
        ),
        composition_law=StreetPasting(
            red=_paste(equipment, action, monad.extension, "Street action composition law"),
            green=_paste(equipment, action, action, "Street action composition law"),
        ),
    )


def analyze_relative_street_action_coherence(
    monad: RelativeMonadData, witness: RelativeStreetActionCoherenceWitness
) -> PendingReport:
    equality = equality_for(monad.equipment)
    street_action = witness.street_action
    issues = _street_action_layout_issues(monad, street_action)

    ensure_boundary_reuse(witness.identity.boundaries.left, monad.root, "Street action identity left boundary", issues)
    ensure_boundary_reuse(
        witness.identity.boundaries.right, street_action.carrier, "Street action identity right boundary", issues
    )

    identity = compare_street_composites(
        equality, witness.identity_law.red, witness.identity_law.green, "Street action identity"
    )
    composition = compare_street_composites(
        equality, witness.composition_law.red, witness.composition_law.green, "Street action composition"
    )
    issues.extend(identity.issues)
    issues.extend(composition.issues)

    logger.debug(f"relative Street action coherence: {len(issues)} issue(s)")
    return structural_report(
        issues,
        "Street action identity and composition pastings agree.",
        "Street action coherence",
        witness=witness,
        comparisons={"identity": identity, "composition": composition},
    )


# ----------------------------------------------------------------------
# Homomorphisms and the hom-category
# ----------------------------------------------------------------------


def describe_identity_relative_street_action_homomorphism(
    monad: RelativeMonadData, street_action: Optional[RelativeStreetActionData] = None
) -> RelativeStreetActionHomomorphismWitness:
    street_action = street_action or describe_relative_street_action(monad)
    equipment = monad.equipment
    frame = street_action.action.target
    boundaries = CellBoundaries(left=street_action.carrier, right=street_action.carrier)
    morphism = Equipment2Cell(
        source=frame,
        target=frame,
        boundaries=boundaries,
        evidence=equipment.identity_evidence(frame, boundaries),
    )
    return RelativeStreetActionHomomorphismWitness(
        source=street_action,
        target=street_action,
        morphism=morphism,
        red_composite=_paste(equipment, morphism, street_action.action, "Street action homomorphism"),
        green_composite=_paste(equipment, street_action.action, morphism, "Street action homomorphism"),
    )


def analyze_relative_street_action_homomorphism(
    monad: RelativeMonadData, witness: RelativeStreetActionHomomorphismWitness
) -> PendingReport:
    equality = equality_for(monad.equipment)
    issues: List[str] = []

    collect_report_issues("Source Street action", _street_action_structure(monad, witness.source), issues)
    collect_report_issues("Target Street action", _street_action_structure(monad, witness.target), issues)
    ensure_boundary_reuse(
        witness.morphism.boundaries.left, witness.source.carrier, "Street action homomorphism left boundary", issues
    )
    ensure_boundary_reuse(
        witness.morphism.boundaries.right, witness.target.carrier, "Street action homomorphism right boundary", issues
    )

    recomputed = vertical_compose_cells(monad.equipment, witness.target.action, witness.morphism)
    if recomputed is None:
        issues.append("Street action homomorphism green composite could not be recomputed from the supplied cells.")
    else:
        recomputation = compare_street_composites(
            equality, recomputed, witness.green_composite, "Street action homomorphism recomputation"
        )
        if not recomputation.holds:
            issues.append(
                "Street action homomorphism green composite must coincide with the recorded street action "
                f"homomorphism green composite witness. {recomputation.details}"
            )

    comparison = compare_street_composites(
        equality, witness.red_composite, witness.green_composite, "Street action homomorphism"
    )
    issues.extend(comparison.issues)

    logger.debug(f"relative Street action homomorphism: {len(issues)} issue(s)")
    return structural_report(
        issues,
        "Street action homomorphism commutes with both actions.",
        "Street action homomorphism",
        witness=witness,
        comparison=comparison,
    )


def describe_relative_street_hom_category(
    monad: RelativeMonadData, street_action: Optional[RelativeStreetActionData] = None
) -> RelativeStreetHomCategoryWitness:
    street_action = street_action or describe_relative_street_action(monad)
    identity = describe_identity_relative_street_action_homomorphism(monad, street_action)
    return RelativeStreetHomCategoryWitness(
        street_action=street_action,
        identity=identity,
        composite=_paste(monad.equipment, identity.morphism, identity.morphism, "Street action hom-category"),
    )


def analyze_relative_street_hom_category(
    monad: RelativeMonadData, witness: RelativeStreetHomCategoryWitness
) -> PendingReport:
    equality = equality_for(monad.equipment)
    carrier = witness.street_action.carrier
    morphism = witness.identity.morphism
    issues = _street_action_layout_issues(monad, witness.street_action)

    ensure_boundary_reuse(
        morphism.boundaries.left, carrier, "Street action hom-category identity left boundary", issues
    )
    ensure_boundary_reuse(
        morphism.boundaries.right, carrier, "Street action hom-category identity right boundary", issues
    )

    identity = compare_street_composites(
        equality,
        witness.identity.red_composite,
        witness.identity.green_composite,
        "Street action hom-category identity",
    )
    composition = compare_street_composites(
        equality, witness.composite, morphism, "Street action hom-category composition"
    )
    issues.extend(identity.issues)
    issues.extend(composition.issues)

    logger.debug(f"relative Street hom-category: {len(issues)} issue(s)")
    return structural_report(
        issues,
        "Identity homomorphism is a unit for composition of Street action homomorphisms.",
        "Street action hom-category",
        witness=witness,
        comparisons={"identity": identity, "composition": composition},
    )


# ----------------------------------------------------------------------
# Canonical and monoid-induced actions
# ----------------------------------------------------------------------


def describe_relative_canonical_street_action(monad: RelativeMonadData) -> RelativeStreetActionData:
    return RelativeStreetActionData(
        carrier=monad.carrier,
        action=monad.extension,
        representable_carriers=(monad.carrier,),
    )


def analyze_relative_canonical_street_action(
    monad: RelativeMonadData, street_action: RelativeStreetActionData
) -> PendingReport:
    issues = _street_action_layout_issues(monad, street_action)
    ensure_boundary_reuse(street_action.carrier, monad.carrier, "Canonical Street action carrier", issues)
    ensure_same_witness(
        street_action.action,
        monad.extension,
        "Canonical Street action must reuse the relative monad extension 2-cell.",
        issues,
    )

    logger.debug(f"relative canonical Street action: {len(issues)} issue(s)")
    return structural_report(
        issues,
        "Relative monad acts on its carrier through the extension 2-cell.",
        "Canonical Street action",
        witness=street_action,
    )


def describe_relative_street_action_from_monoid(
    monad: RelativeMonadData, monoid: Optional[LooseMonoidData] = None
) -> RelativeStreetActionData:
    """Right action of E(j,t) on itself through the loose monoid multiplication."""
    monoid = monoid or relative_monad_to_loose_monoid(monad)
    return RelativeStreetActionData(
        carrier=monad.carrier,
        action=monoid.multiplication,
        representable_carriers=(monad.carrier,),
    )


def analyze_relative_street_action_from_monoid(
    monad: RelativeMonadData, street_action: RelativeStreetActionData
) -> PendingReport:
    issues = _street_action_layout_issues(monad, street_action)
    monoid = relative_monad_to_loose_monoid(monad)
    loose_monoid_report = analyze_loose_monoid_shape(monad.equipment, monoid)
    collect_report_issues("Loose monoid", loose_monoid_report, issues)
    ensure_same_witness(
        street_action.action,
        monoid.multiplication,
        "Monoid-induced Street action must reuse the relative monad extension 2-cell.",
        issues,
    )

    logger.debug(f"relative monoid-induced Street action: {len(issues)} issue(s)")
    return structural_report(
        issues,
        "Loose monoid multiplication induces the Street action on E(j,t).",
        "Monoid-induced Street action",
        witness=street_action,
        loose_monoid_report=loose_monoid_report,
    )


def describe_relative_opalgebra_right_action(presentation: RelativeOpalgebraPresentation) -> RelativeStreetActionData:
    carrier = presentation.monad.carrier
    return RelativeStreetActionData(
        carrier=carrier,
        action=presentation.opalgebra.action,
        representable_carriers=(carrier,),
    )


def analyze_relative_opalgebra_right_action(
    presentation: RelativeOpalgebraPresentation, street_action: RelativeStreetActionData
) -> PendingReport:
    """The opalgebra action read as a right action of E(j,t); left boundary is the opalgebra carrier."""
    monad, opalgebra = presentation.monad, presentation.opalgebra
    issues: List[str] = []

    collect_report_issues("Opalgebra framing", analyze_relative_opalgebra_framing(presentation), issues)
    ensure_boundary_reuse(street_action.carrier, monad.carrier, "Opalgebra Street action carrier", issues)
    ensure_boundary_reuse(
        street_action.action.boundaries.left, opalgebra.carrier, "Opalgebra Street action left boundary", issues
    )
    ensure_same_witness(
        street_action.action,
        opalgebra.action,
        "Street action 2-cell must reuse the recorded relative opalgebra action.",
        issues,
    )

    logger.debug(f"relative opalgebra right action: {len(issues)} issue(s)")
    return pending_report(
        issues,
        "Opalgebra action induces a right Street action of E(j,t); the action laws remain pending.",
        "Opalgebra Street action",
        witness=street_action,
    )


# ----------------------------------------------------------------------
# Loose adjunction action and representability
# ----------------------------------------------------------------------


def describe_relative_loose_adjunction_action(
    monad: RelativeMonadData, street_action: Optional[RelativeStreetActionData] = None
) -> RelativeStreetLooseAdjunctionWitness:
    street_action = street_action or describe_relative_street_action(monad)
    equipment = monad.equipment
    frame = frame_from_proarrow(monad.loose_cell)
    unit_boundaries = CellBoundaries(left=monad.root, right=monad.carrier)
    counit_boundaries = CellBoundaries(left=monad.carrier, right=monad.carrier)
    return RelativeStreetLooseAdjunctionWitness(
        street_action=street_action,
        unit=Equipment2Cell(
            source=frame,
            target=frame,
            boundaries=unit_boundaries,
            evidence=equipment.identity_evidence(frame, unit_boundaries),
        ),
        counit=Equipment2Cell(
            source=frame,
            target=frame,
            boundaries=counit_boundaries,
            evidence=equipment.identity_evidence(frame, counit_boundaries),
        ),
    )


def analyze_relative_loose_adjunction_action(
    monad: RelativeMonadData, witness: RelativeStreetLooseAdjunctionWitness
) -> PendingReport:
    equality = equality_for(monad.equipment)
    issues: List[str] = []

    action_report = _street_action_structure(monad, witness.street_action)
    collect_report_issues("Street action", action_report, issues)
    ensure_boundary_reuse(witness.unit.boundaries.left, monad.root, "Loose adjunction unit left boundary", issues)
    ensure_boundary_reuse(witness.unit.boundaries.right, monad.carrier, "Loose adjunction unit right boundary", issues)
    ensure_boundary_reuse(
        witness.counit.boundaries.left, monad.carrier, "Loose adjunction counit left boundary", issues
    )
    ensure_boundary_reuse(
        witness.counit.boundaries.right, monad.carrier, "Loose adjunction counit right boundary", issues
    )
    frame_matches_loose_cell(equality, witness.unit.target, monad.loose_cell, "Loose adjunction unit target", issues)
    frame_matches_loose_cell(
        equality, witness.counit.source, monad.loose_cell, "Loose adjunction counit source", issues
    )
    ensure_same_witness(
        witness.street_action.action,
        monad.extension,
        "Loose adjunction Street action must reuse the relative monad extension 2-cell.",
        issues,
    )

    logger.debug(f"relative loose adjunction action: {len(issues)} issue(s)")
    return structural_report(
        issues,
        "Loose adjunction unit and counit frame the Street action of the extension.",
        "Loose adjunction Street action",
        witness=witness,
        action_report=action_report,
    )


def describe_relative_loose_adjunction_right_action(
    monad: RelativeMonadData, street_action: Optional[RelativeStreetActionData] = None
) -> RelativeStreetLooseAdjunctionRightActionWitness:
    """E(j,t) as a loose adjunction with itself; the extension is both the counit and the action."""
    street_action = street_action or describe_relative_street_action(monad)
    return RelativeStreetLooseAdjunctionRightActionWitness(
        street_action=street_action,
        adjunction=LooseAdjunctionData(
            left=monad.loose_cell,
            right=monad.loose_cell,
            unit=monad.unit,
            counit=monad.extension,
        ),
    )


def analyze_relative_loose_adjunction_right_action(
    monad: RelativeMonadData, witness: RelativeStreetLooseAdjunctionRightActionWitness
) -> PendingReport:
    """A loose adjunction ℓ ⊣ r with ℓ = E(j,t) makes E(j,t) act on the right through its counit."""
    issues: List[str] = []

    action_report = _street_action_structure(monad, witness.street_action)
    collect_report_issues("Street action", action_report, issues)
    adjunction_report = analyze_loose_adjunction(monad.equipment, witness.adjunction)
    collect_report_issues("Loose adjunction", adjunction_report, issues)
    ensure_same_witness(
        witness.adjunction.left,
        monad.loose_cell,
        "Loose adjunction left leg must reuse the loose arrow E(j,t).",
        issues,
    )
    ensure_same_witness(
        witness.street_action.action,
        monad.extension,
        "Loose adjunction Street right action must reuse the relative monad extension 2-cell.",
        issues,
    )
    ensure_same_witness(
        witness.adjunction.counit,
        witness.street_action.action,
        "Loose adjunction counit must be the Street action 2-cell.",
        issues,
    )

    logger.debug(f"relative loose adjunction right action: {len(issues)} issue(s)")
    return structural_report(
        issues,
        "Loose adjunction on E(j,t) induces the Street right action through its counit.",
        "Loose adjunction Street right action",
        witness=witness,
        action_report=action_report,
        adjunction_report=adjunction_report,
    )


def describe_relative_street_representable_restriction(
    monad: RelativeMonadData, street_action: Optional[RelativeStreetActionData] = None
) -> RelativeStreetRepresentableRestrictionWitness:
    street_action = street_action or describe_relative_street_action(monad)
    return RelativeStreetRepresentableRestrictionWitness(
        street_action=street_action,
        restriction=monad.equipment.restrict_left(monad.root.tight, monad.loose_cell),
    )


def analyze_relative_street_representable_restriction(
    monad: RelativeMonadData, witness: RelativeStreetRepresentableRestrictionWitness
) -> PendingReport:
    street_action = witness.street_action
    issues: List[str] = []

    action_report = _street_action_structure(monad, street_action)
    collect_report_issues("Street action", action_report, issues)
    if not any(carrier is street_action.carrier for carrier in street_action.representable_carriers):
        issues.append("Representable Street restriction must mark the Street action carrier as representable.")
    _representability_issues(witness.restriction, "Representable Street restriction", issues)

    logger.debug(f"relative Street representable restriction: {len(issues)} issue(s)")
    return structural_report(
        issues,
        "Street action carrier is representable through the left restriction B(j,1).",
        "Representable Street restriction",
        witness=witness,
        action_report=action_report,
    )


def describe_relative_street_representability_upgrade(
    monad: RelativeMonadData,
) -> RelativeStreetRepresentabilityUpgradeWitness:
    street_action = describe_relative_street_action(monad)
    return RelativeStreetRepresentabilityUpgradeWitness(
        street_action=street_action,
        restriction=describe_relative_street_representable_restriction(monad, street_action),
    )


def analyze_relative_street_representability_upgrade(
    monad: RelativeMonadData, witness: RelativeStreetRepresentabilityUpgradeWitness
) -> PendingReport:
    issues: List[str] = []

    action_report = _street_action_structure(monad, witness.street_action)
    collect_report_issues("Street action", action_report, issues)
    representability_report = analyze_relative_street_representable_restriction(monad, witness.restriction)
    collect_report_issues("Representable restriction", representability_report, issues)
    ensure_same_witness(
        witness.restriction.street_action,
        witness.street_action,
        "Street representability upgrade must reuse the recorded Street action witness.",
        issues,
    )

    logger.debug(f"relative Street representability upgrade: {len(issues)} issue(s)")
    return structural_report(
        issues,
        "Street action upgrades to a representable action through the left restriction B(j,1).",
        "Street representability upgrade",
        witness=witness,
        action_report=action_report,
        representability_report=representability_report,
    )


def describe_relative_street_representable_submulticategory(
    monad: RelativeMonadData,
) -> RelativeStreetRepresentableSubmulticategoryWitness:
    street_action = describe_relative_street_action(monad)
    return RelativeStreetRepresentableSubmulticategoryWitness(
        street_action=street_action,
        restriction=describe_relative_street_representable_restriction(monad, street_action),
        representable_cells=(street_action.action,),
    )


def analyze_relative_street_representable_submulticategory(
    monad: RelativeMonadData, witness: RelativeStreetRepresentableSubmulticategoryWitness
) -> PendingReport:
    street_action = witness.street_action
    issues: List[str] = []

    restriction_report = analyze_relative_street_representable_restriction(monad, witness.restriction)
    collect_report_issues("Representable restriction", restriction_report, issues)
    ensure_same_witness(
        witness.restriction.street_action,
        street_action,
        "Representable submulticategory must reuse the recorded Street action witness.",
        issues,
    )
    if not witness.representable_cells:
        issues.append("Representable submulticategory should contain at least the Street action 2-cell.")
    for index, cell in enumerate(witness.representable_cells, start=1):
        ensure_boundary_reuse(
            cell.boundaries.left, monad.root, f"Representable Street cell #{index} left boundary", issues
        )
        ensure_boundary_reuse(
            cell.boundaries.right, street_action.carrier, f"Representable Street cell #{index} right boundary", issues
        )

    logger.debug(f"relative Street representable submulticategory: {len(issues)} issue(s)")
    return structural_report(
        issues,
        "Street cells over representable domains form a submulticategory containing the action.",
        "Representable Street submulticategory",
        witness=witness,
        restriction_report=restriction_report,
    )


def describe_relative_opalgebra_representable_action_bridge(
    presentation: RelativeOpalgebraPresentation,
) -> Optional[RestrictionResult]:
    monad = presentation.monad
    return monad.equipment.restrict_left(monad.root.tight, monad.loose_cell)


def analyze_relative_opalgebra_representable_action_bridge(
    presentation: RelativeOpalgebraPresentation, restriction: Optional[RestrictionResult]
) -> PendingReport:
    """
    Opalgebras are right Street actions once B(j,1) is representable.

    The restriction is checked directly: the opalgebra action has the
    opalgebra carrier, not j, as its left boundary.
    """
    monad, opalgebra = presentation.monad, presentation.opalgebra
    equality = equality_for(monad.equipment)
    issues: List[str] = []

    right_action = analyze_relative_opalgebra_right_action(
        presentation, describe_relative_opalgebra_right_action(presentation)
    )
    collect_report_issues("Opalgebra Street action", right_action, issues)
    _representability_issues(restriction, "Representable opalgebra action", issues)
    comparison = compare_street_composites(
        equality, opalgebra.action, monad.extension, "Representable opalgebra action"
    )
    issues.extend(comparison.issues)

    logger.debug(f"relative opalgebra representable action bridge: {len(issues)} issue(s)")
    return structural_report(
        issues,
        "Opalgebra action is a right Street action of E(j,t) over the representable restriction B(j,1).",
        "Representable opalgebra action bridge",
        witness=restriction,
        comparison=comparison,
        right_action=right_action,
    )


# ----------------------------------------------------------------------
# Algebra and opalgebra bridges
# ----------------------------------------------------------------------


def describe_relative_algebra_street_action_bridge(
    presentation: RelativeAlgebraPresentation,
) -> RelativeStreetActionData:
    algebra = presentation.algebra
    return RelativeStreetActionData(
        carrier=algebra.carrier,
        action=algebra.action,
        representable_carriers=(algebra.carrier,),
    )


def analyze_relative_algebra_street_action_bridge(
    presentation: RelativeAlgebraPresentation, street_action: RelativeStreetActionData
) -> PendingReport:
    issues: List[str] = []

    collect_report_issues("Algebra framing", analyze_relative_algebra_framing(presentation), issues)
    ensure_boundary_reuse(
        street_action.carrier, presentation.algebra.carrier, "Relative algebra Street action carrier", issues
    )
    action_report = _street_action_structure(presentation.monad, street_action)
    issues.extend(action_report.issues)

    logger.debug(f"relative algebra Street action bridge: {len(issues)} issue(s)")
    return structural_report(
        issues,
        "Relative algebra induces a Street action on its carrier.",
        "Relative algebra Street action bridge",
        witness=street_action,
        action_report=action_report,
    )


def describe_relative_algebra_street_action_equivalence(
    presentation: RelativeAlgebraPresentation,
) -> RelativeAlgebraStreetActionEquivalenceWitness:
    street_action = describe_relative_algebra_street_action_bridge(presentation)
    return RelativeAlgebraStreetActionEquivalenceWitness(
        presentation=presentation,
        street_action=street_action,
        recovered=RelativeAlgebraData(carrier=street_action.carrier, action=street_action.action),
    )


def analyze_relative_algebra_street_action_equivalence(
    presentation: RelativeAlgebraPresentation,
    witness: RelativeAlgebraStreetActionEquivalenceWitness,
) -> PendingReport:
    algebra = presentation.algebra
    issues: List[str] = []

    ensure_same_witness(
        witness.presentation,
        presentation,
        "Algebra/Street action equivalence witness must reuse the supplied algebra presentation.",
        issues,
    )

    bridge = analyze_relative_algebra_street_action_bridge(presentation, witness.street_action)
    collect_report_issues("Street action bridge", bridge, issues)
    recovery = analyze_relative_algebra_framing(
        RelativeAlgebraPresentation(monad=presentation.monad, algebra=witness.recovered)
    )
    collect_report_issues("Recovered algebra", recovery, issues)
    ensure_boundary_reuse(witness.recovered.carrier, algebra.carrier, "Recovered algebra carrier", issues)
    ensure_same_witness(
        witness.street_action.action,
        algebra.action,
        "Relative algebra Street action must reuse the algebra multiplication 2-cell.",
        issues,
    )
    ensure_same_witness(
        witness.recovered.action,
        algebra.action,
        "Recovered algebra action must reuse the algebra multiplication 2-cell.",
        issues,
    )

    logger.debug(f"relative algebra/Street action equivalence: {len(issues)} issue(s)")
    return structural_report(
        issues,
        "Algebra and Street action data determine each other.",
        "Relative algebra/Street action equivalence",
        witness=witness,
        bridge=bridge,
        recovery=recovery,
    )


def describe_relative_opalgebra_street_action_equivalence(
    kleisli: RelativeKleisliPresentation,
) -> RelativeOpalgebraStreetActionEquivalenceWitness:
    street_action = describe_relative_opalgebra_right_action(kleisli)
    return RelativeOpalgebraStreetActionEquivalenceWitness(
        presentation=kleisli,
        street_action=street_action,
        recovered=RelativeOpalgebraData(carrier=kleisli.opalgebra.carrier, action=street_action.action),
    )


def analyze_relative_opalgebra_street_action_equivalence(
    presentation: RelativeOpalgebraPresentation,
    witness: RelativeOpalgebraStreetActionEquivalenceWitness,
) -> PendingReport:
    opalgebra = presentation.opalgebra
    issues: List[str] = []

    ensure_same_witness(
        witness.presentation,
        presentation,
        "Opalgebra/Street action equivalence witness must reuse the supplied opalgebra presentation.",
        issues,
    )

    right_action = analyze_relative_opalgebra_right_action(presentation, witness.street_action)
    collect_report_issues("Opalgebra Street action", right_action, issues)
    recovery = analyze_relative_opalgebra_framing(
        RelativeOpalgebraPresentation(monad=presentation.monad, opalgebra=witness.recovered)
    )
    collect_report_issues("Recovered opalgebra", recovery, issues)
    ensure_boundary_reuse(witness.recovered.carrier, opalgebra.carrier, "Recovered opalgebra carrier", issues)
    ensure_same_witness(
        witness.recovered.action,
        opalgebra.action,
        "Recovered opalgebra action must reuse the recorded opalgebra action.",
        issues,
    )

    logger.debug(f"relative opalgebra/Street action equivalence: {len(issues)} issue(s)")
    return structural_report(
        issues,
        "Kleisli opalgebra and its right Street action determine each other.",
        "Relative opalgebra/Street action equivalence",
        witness=witness,
        right_action=right_action,
        recovery=recovery,
    )
