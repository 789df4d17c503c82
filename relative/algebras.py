"""
Relative algebras, opalgebras and the Kleisli / Eilenberg–Moore presentations.

Layout conventions checked throughout:
- an algebra action reuses the monad root j on the left and the algebra
  carrier on the right
- an opalgebra action reuses the opalgebra carrier on the left and the monad
  carrier t on the right
- morphisms reuse the source carrier on the left and the target carrier on
  the right

"Reuse" is a reference check: a field-identical copy of a boundary or cell
is reported. Laws whose coherence outruns the evidence model return pending
reports; purely structural properties return structural ones.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, List, Optional, Tuple

from equipment.core import (
    CellBoundaries,
    Equipment2Cell,
    Frame,
    VerticalBoundary,
    equality_for,
    frame_from_proarrow,
    identity_vertical_boundary,
    vertical_compose_cells,
)
from equipment.framing import (
    collect_report_issues,
    ensure_boundary_reuse,
    ensure_frame_alignment,
    ensure_same_witness,
    frame_matches_loose_cell,
)
from equipment.loose import LooseMonoidData, analyze_loose_monoid_shape
from equipment.reports import PendingReport, pending_report, structural_report
from equipment.tight import TightFunctor

from .adjunctions import RelativeAdjunctionData
from .composition import relative_monad_to_loose_monoid
from .monads import RelativeMonadData, analyze_relative_monad_identity_reduction
from .resolution import analyze_relative_monad_resolution, describe_relative_monad_resolution

logger = logging.getLogger(__name__)


# ----------------------------------------------------------------------
# Data
# ----------------------------------------------------------------------


@dataclass(frozen=True)
class RelativeAlgebraData:
    carrier: VerticalBoundary
    action: Equipment2Cell


@dataclass(frozen=True)
class RelativeOpalgebraData:
    carrier: VerticalBoundary
    action: Equipment2Cell


@dataclass(frozen=True)
class RelativeAlgebraPresentation:
    monad: RelativeMonadData
    algebra: RelativeAlgebraData


@dataclass(frozen=True)
class RelativeOpalgebraPresentation:
    monad: RelativeMonadData
    opalgebra: RelativeOpalgebraData


@dataclass(frozen=True)
class RelativeAlgebraMorphismPresentation:
    source: RelativeAlgebraPresentation
    target: RelativeAlgebraPresentation
    morphism: Equipment2Cell


@dataclass(frozen=True)
class RelativeOpalgebraMorphismPresentation:
    source: RelativeOpalgebraPresentation
    target: RelativeOpalgebraPresentation
    morphism: Equipment2Cell


@dataclass(frozen=True)
class RelativeAlgebraMediatingTightCell:
    """
    Comparison tight 1-cell into the Eilenberg–Moore object.

    Attributes:
        tight: The mediating tight boundary
        target: Algebra the comparison lands in; must be the recorded one
        details: Free-form provenance
    """

    tight: VerticalBoundary
    target: RelativeAlgebraData
    details: str = ""


@dataclass(frozen=True)
class RelativeKleisliPresentation(RelativeOpalgebraPresentation):
    """Kleisli presentation: the free opalgebra on dom(j)."""


@dataclass(frozen=True)
class RelativeEilenbergMoorePresentation(RelativeAlgebraPresentation):
    """Eilenberg–Moore presentation with its mediating tight cell."""

    mediating: Optional[RelativeAlgebraMediatingTightCell] = None


@dataclass(frozen=True)
class RelativeAlgebraResolutionWitness:
    """
    Resolution of the monad through its algebra object.

    Attributes:
        monad: Relative monad being resolved
        eilenberg_moore: Eilenberg–Moore presentation the resolution factors through
        adjunction: Adjunction resolving the monad
        comparison_monad: Monad induced by the adjunction; must reuse unit and extension
    """

    monad: RelativeMonadData
    eilenberg_moore: RelativeEilenbergMoorePresentation
    adjunction: RelativeAdjunctionData
    comparison_monad: RelativeMonadData


@dataclass(frozen=True)
class RelativeOpalgebraCarrierTriangle:
    presentation: RelativeOpalgebraPresentation
    carrier: VerticalBoundary
    unit: Equipment2Cell
    action: Equipment2Cell
    codomain: VerticalBoundary


@dataclass(frozen=True)
class RelativeOpalgebraExtensionRectangle:
    presentation: RelativeOpalgebraPresentation
    extension: Equipment2Cell
    action: Equipment2Cell


@dataclass(frozen=True)
class RelativeOpalgebraDiagrams:
    carrier_triangle: RelativeOpalgebraCarrierTriangle
    extension_rectangle: RelativeOpalgebraExtensionRectangle


@dataclass(frozen=True)
class RelativeOpalgebraExtraordinaryTransformation:
    presentation: RelativeOpalgebraPresentation
    loose_monoid: LooseMonoidData
    action: Equipment2Cell


@dataclass(frozen=True)
class OrdinaryAlgebraData:
    carrier: VerticalBoundary
    action: Equipment2Cell


@dataclass(frozen=True)
class RelativeAlgebraIdentityRootWitness:
    presentation: RelativeAlgebraPresentation
    ordinary: OrdinaryAlgebraData


# ----------------------------------------------------------------------
# Helpers
# ----------------------------------------------------------------------


def _identity_cell_on(
    frame: Frame, left: VerticalBoundary, right: VerticalBoundary, monad: RelativeMonadData
) -> Equipment2Cell:
    boundaries = CellBoundaries(left=left, right=right)
    return Equipment2Cell(
        source=frame,
        target=frame,
        boundaries=boundaries,
        evidence=monad.equipment.identity_evidence(frame, boundaries),
    )


def _algebra_layout_issues(presentation: RelativeAlgebraPresentation) -> List[str]:
    monad, algebra = presentation.monad, presentation.algebra
    equality = equality_for(monad.equipment)
    action = algebra.action
    issues: List[str] = []

    if not equality(algebra.carrier.from_obj, monad.root.from_obj):
        issues.append("Relative algebra carrier must share its domain with the root j.")
    ensure_boundary_reuse(action.boundaries.left, monad.root, "Relative algebra action left boundary", issues)
    ensure_boundary_reuse(action.boundaries.right, algebra.carrier, "Relative algebra action right boundary", issues)
    ensure_frame_alignment(
        equality,
        action.source,
        monad.root.from_obj,
        algebra.carrier.to_obj,
        "Relative algebra action source frame",
        issues,
    )
    ensure_frame_alignment(
        equality,
        action.target,
        monad.root.from_obj,
        algebra.carrier.to_obj,
        "Relative algebra action target frame",
        issues,
    )
    return issues


def _opalgebra_layout_issues(presentation: RelativeOpalgebraPresentation) -> List[str]:
    monad, opalgebra = presentation.monad, presentation.opalgebra
    equality = equality_for(monad.equipment)
    action = opalgebra.action
    issues: List[str] = []

    if not equality(opalgebra.carrier.from_obj, monad.root.from_obj):
        issues.append("Relative opalgebra carrier must share its domain with the root j.")
    ensure_boundary_reuse(action.boundaries.left, opalgebra.carrier, "Relative opalgebra action left boundary", issues)
    ensure_boundary_reuse(action.boundaries.right, monad.carrier, "Relative opalgebra action right boundary", issues)
    ensure_frame_alignment(
        equality,
        action.source,
        opalgebra.carrier.from_obj,
        monad.carrier.to_obj,
        "Relative opalgebra action source frame",
        issues,
    )
    ensure_frame_alignment(
        equality,
        action.target,
        opalgebra.carrier.from_obj,
        monad.carrier.to_obj,
        "Relative opalgebra action target frame",
        issues,
    )
    return issues


# ----------------------------------------------------------------------
# Framing and morphisms
# ----------------------------------------------------------------------


def analyze_relative_algebra_framing(presentation: RelativeAlgebraPresentation) -> PendingReport:
    issues = _algebra_layout_issues(presentation)
    logger.debug(f"relative algebra framing: {len(issues)} issue(s)")
    return structural_report(
        issues,
        "Relative algebra action reuses the root j and the algebra carrier as its boundaries.",
        "Relative algebra framing",
        witness=presentation,
    )


def analyze_relative_opalgebra_framing(presentation: RelativeOpalgebraPresentation) -> PendingReport:
    issues = _opalgebra_layout_issues(presentation)
    logger.debug(f"relative opalgebra framing: {len(issues)} issue(s)")
    return structural_report(
        issues,
        "Relative opalgebra action reuses the opalgebra carrier and the monad carrier t as its boundaries.",
        "Relative opalgebra framing",
        witness=presentation,
    )


def analyze_relative_algebra_morphism_compatibility(
    presentation: RelativeAlgebraMorphismPresentation,
) -> PendingReport:
    source, target, morphism = presentation.source, presentation.target, presentation.morphism
    issues: List[str] = []

    if source.monad is not target.monad:
        issues.append("Relative algebra morphism must relate algebras over the same relative monad.")
    collect_report_issues("Source algebra framing", analyze_relative_algebra_framing(source), issues)
    collect_report_issues("Target algebra framing", analyze_relative_algebra_framing(target), issues)
    ensure_boundary_reuse(
        morphism.boundaries.left, source.algebra.carrier, "Relative algebra morphism left boundary", issues
    )
    ensure_boundary_reuse(
        morphism.boundaries.right, target.algebra.carrier, "Relative algebra morphism right boundary", issues
    )

    logger.debug(f"relative algebra morphism: {len(issues)} issue(s)")
    return pending_report(
        issues,
        "Relative algebra morphism reuses both carriers; compatibility with the actions awaits Street pastings.",
        "Relative algebra morphism",
        witness=presentation,
    )


def analyze_relative_opalgebra_morphism_compatibility(
    presentation: RelativeOpalgebraMorphismPresentation,
) -> PendingReport:
    source, target, morphism = presentation.source, presentation.target, presentation.morphism
    issues: List[str] = []

    if source.monad is not target.monad:
        issues.append("Relative opalgebra morphism must relate opalgebras over the same relative monad.")
    collect_report_issues("Source opalgebra framing", analyze_relative_opalgebra_framing(source), issues)
    collect_report_issues("Target opalgebra framing", analyze_relative_opalgebra_framing(target), issues)
    ensure_boundary_reuse(
        morphism.boundaries.left, source.opalgebra.carrier, "Relative opalgebra morphism left boundary", issues
    )
    ensure_boundary_reuse(
        morphism.boundaries.right, target.opalgebra.carrier, "Relative opalgebra morphism right boundary", issues
    )

    logger.debug(f"relative opalgebra morphism: {len(issues)} issue(s)")
    return pending_report(
        issues,
        "Relative opalgebra morphism reuses both carriers; compatibility with the actions awaits Street pastings.",
        "Relative opalgebra morphism",
        witness=presentation,
    )


def describe_identity_relative_algebra_morphism(
    presentation: RelativeAlgebraPresentation,
) -> RelativeAlgebraMorphismPresentation:
    carrier = presentation.algebra.carrier
    frame = presentation.algebra.action.target
    return RelativeAlgebraMorphismPresentation(
        source=presentation,
        target=presentation,
        morphism=_identity_cell_on(frame, carrier, carrier, presentation.monad),
    )


def describe_identity_relative_opalgebra_morphism(
    presentation: RelativeOpalgebraPresentation,
) -> RelativeOpalgebraMorphismPresentation:
    carrier = presentation.opalgebra.carrier
    frame = presentation.opalgebra.action.target
    return RelativeOpalgebraMorphismPresentation(
        source=presentation,
        target=presentation,
        morphism=_identity_cell_on(frame, carrier, carrier, presentation.monad),
    )


# ----------------------------------------------------------------------
# Kleisli and Eilenberg–Moore
# ----------------------------------------------------------------------


def describe_trivial_relative_kleisli(monad: RelativeMonadData) -> RelativeKleisliPresentation:
    """Free opalgebra: a fresh identity carrier on dom(j) acting into the monad carrier."""
    carrier = identity_vertical_boundary(
        monad.equipment, monad.root.from_obj, "Kleisli opalgebra carrier chosen as the identity on dom(j)."
    )
    action = _identity_cell_on(frame_from_proarrow(monad.loose_cell), carrier, monad.carrier, monad)
    logger.debug("described trivial relative Kleisli presentation")
    return RelativeKleisliPresentation(monad=monad, opalgebra=RelativeOpalgebraData(carrier=carrier, action=action))


def describe_relative_algebra_mediating_tight_cell(
    monad: RelativeMonadData, algebra: RelativeAlgebraData
) -> RelativeAlgebraMediatingTightCell:
    return RelativeAlgebraMediatingTightCell(
        tight=identity_vertical_boundary(
            monad.equipment, monad.root.from_obj, "Mediating comparison into the Eilenberg–Moore object."
        ),
        target=algebra,
        details="Identity comparison exhibiting the algebra as the terminal resolution.",
    )


def describe_trivial_relative_eilenberg_moore(monad: RelativeMonadData) -> RelativeEilenbergMoorePresentation:
    """The monad acting on its own carrier through the extension 2-cell."""
    algebra = RelativeAlgebraData(carrier=monad.carrier, action=monad.extension)
    logger.debug("described trivial relative Eilenberg–Moore presentation")
    return RelativeEilenbergMoorePresentation(
        monad=monad,
        algebra=algebra,
        mediating=describe_relative_algebra_mediating_tight_cell(monad, algebra),
    )


def analyze_relative_kleisli_universal_property(presentation: RelativeOpalgebraPresentation) -> PendingReport:
    monad, opalgebra = presentation.monad, presentation.opalgebra
    equality = equality_for(monad.equipment)
    issues = _opalgebra_layout_issues(presentation)

    if not equality(opalgebra.carrier.to_obj, monad.root.from_obj):
        issues.append("Kleisli opalgebra carrier should be an endo tight 1-cell on dom(j).")
    frame_matches_loose_cell(
        equality, opalgebra.action.target, monad.loose_cell, "Kleisli opalgebra action target", issues
    )

    logger.debug(f"relative Kleisli universal property: {len(issues)} issue(s)")
    return structural_report(
        issues,
        "Kleisli opalgebra is the free opalgebra on dom(j) acting through E(j,t).",
        "Relative Kleisli universal property",
        witness=presentation,
    )


def analyze_relative_algebra_mediating_tight_cell(presentation: RelativeEilenbergMoorePresentation) -> PendingReport:
    monad, algebra, mediating = presentation.monad, presentation.algebra, presentation.mediating
    equality = equality_for(monad.equipment)
    issues: List[str] = []

    if mediating is None:
        issues.append("Eilenberg–Moore presentation should record a mediating tight cell.")
    else:
        if mediating.target is not algebra:
            issues.append("Mediating tight cell target must coincide with the recorded algebra presentation.")
        if not equality(mediating.tight.from_obj, monad.root.from_obj):
            issues.append("Mediating tight cell must start at dom(j).")
        if not equality(mediating.tight.to_obj, algebra.carrier.from_obj):
            issues.append("Mediating tight cell must land at the domain of the algebra carrier.")

    logger.debug(f"relative algebra mediating tight cell: {len(issues)} issue(s)")
    return structural_report(
        issues,
        "Mediating tight cell lands in the recorded Eilenberg–Moore algebra.",
        "Mediating tight cell",
        witness=mediating,
    )


def analyze_relative_eilenberg_moore_universal_property(
    presentation: RelativeEilenbergMoorePresentation,
) -> PendingReport:
    monad = presentation.monad
    equality = equality_for(monad.equipment)
    issues = _algebra_layout_issues(presentation)
    frame_matches_loose_cell(
        equality, presentation.algebra.action.target, monad.loose_cell, "Eilenberg–Moore action target", issues
    )

    mediating_report = analyze_relative_algebra_mediating_tight_cell(presentation)
    issues.extend(mediating_report.issues)

    logger.debug(f"relative Eilenberg–Moore universal property: {len(issues)} issue(s)")
    return structural_report(
        issues,
        "Eilenberg–Moore algebra acts through E(j,t) and the mediating tight cell lands in it.",
        "Relative Eilenberg–Moore universal property",
        witness=presentation,
        mediating_tight_cell_report=mediating_report,
    )


# ----------------------------------------------------------------------
# Resolution through the algebra object
# ----------------------------------------------------------------------


def describe_relative_algebra_resolution_witness(
    monad: RelativeMonadData, eilenberg_moore: RelativeEilenbergMoorePresentation
) -> RelativeAlgebraResolutionWitness:
    adjunction = describe_relative_monad_resolution(monad)
    comparison = RelativeMonadData(
        equipment=monad.equipment,
        root=adjunction.root,
        carrier=adjunction.right,
        loose_cell=monad.loose_cell,
        extension=monad.extension,
        unit=monad.unit,
    )
    return RelativeAlgebraResolutionWitness(
        monad=monad,
        eilenberg_moore=eilenberg_moore,
        adjunction=adjunction,
        comparison_monad=comparison,
    )


def analyze_relative_algebra_resolution(witness: RelativeAlgebraResolutionWitness) -> PendingReport:
    issues: List[str] = []
    resolution_report = analyze_relative_monad_resolution(witness.comparison_monad, witness.adjunction)
    collect_report_issues("Resolution", resolution_report, issues)

    ensure_same_witness(
        witness.comparison_monad.unit,
        witness.monad.unit,
        "Comparison monad must reuse the relative monad unit witness.",
        issues,
    )
    ensure_same_witness(
        witness.comparison_monad.extension,
        witness.monad.extension,
        "Comparison monad must reuse the relative monad extension witness.",
        issues,
    )
    if witness.eilenberg_moore.monad is not witness.monad:
        issues.append("Eilenberg–Moore presentation must be built over the resolved relative monad.")

    mediating_report = analyze_relative_algebra_mediating_tight_cell(witness.eilenberg_moore)
    issues.extend(mediating_report.issues)

    logger.debug(f"relative algebra resolution: {len(issues)} issue(s)")
    return pending_report(
        issues,
        "Algebra object resolves the relative monad; terminality among resolutions remains pending.",
        "Relative algebra resolution",
        witness=witness,
        resolution_report=resolution_report,
        mediating_tight_cell_report=mediating_report,
    )


# ----------------------------------------------------------------------
# Canonical actions
# ----------------------------------------------------------------------


def describe_relative_algebra_canonical_action(monad: RelativeMonadData) -> RelativeAlgebraPresentation:
    return RelativeAlgebraPresentation(
        monad=monad, algebra=RelativeAlgebraData(carrier=monad.carrier, action=monad.extension)
    )


def analyze_relative_algebra_canonical_action(presentation: RelativeAlgebraPresentation) -> PendingReport:
    monad, algebra = presentation.monad, presentation.algebra
    issues = _algebra_layout_issues(presentation)
    ensure_boundary_reuse(algebra.carrier, monad.carrier, "Relative canonical algebra carrier", issues)
    ensure_same_witness(
        algebra.action,
        monad.extension,
        "Relative canonical algebra action must reuse the monad extension 2-cell.",
        issues,
    )

    logger.debug(f"relative canonical algebra action: {len(issues)} issue(s)")
    return pending_report(
        issues,
        "Monad extension acts on the carrier t; the algebra laws reduce to the monad laws, still pending.",
        "Relative canonical algebra",
        witness=presentation,
    )


def describe_relative_opalgebra_canonical_action(monad: RelativeMonadData) -> RelativeOpalgebraPresentation:
    return RelativeOpalgebraPresentation(
        monad=monad, opalgebra=RelativeOpalgebraData(carrier=monad.root, action=monad.unit)
    )


def analyze_relative_opalgebra_canonical_action(presentation: RelativeOpalgebraPresentation) -> PendingReport:
    monad, opalgebra = presentation.monad, presentation.opalgebra
    issues = _opalgebra_layout_issues(presentation)
    ensure_boundary_reuse(opalgebra.carrier, monad.root, "Relative canonical opalgebra carrier", issues)
    ensure_same_witness(
        opalgebra.action, monad.unit, "Relative canonical opalgebra action must reuse the monad unit 2-cell.", issues
    )

    logger.debug(f"relative canonical opalgebra action: {len(issues)} issue(s)")
    return pending_report(
        issues,
        "Monad unit acts on the root j; the opalgebra laws reduce to the monad laws, still pending.",
        "Relative canonical opalgebra",
        witness=presentation,
    )


# ----------------------------------------------------------------------
# Adjunction legs as (op)algebras (Proposition 6.25)
# ----------------------------------------------------------------------


def describe_relative_adjunction_left_opalgebra(
    adjunction: RelativeAdjunctionData, monad: RelativeMonadData
) -> RelativeOpalgebraPresentation:
    """The left leg ℓ acting through the forward hom-isomorphism cell."""
    return RelativeOpalgebraPresentation(
        monad=monad,
        opalgebra=RelativeOpalgebraData(carrier=adjunction.left, action=adjunction.hom_isomorphism.forward),
    )


def describe_relative_adjunction_right_algebra(
    adjunction: RelativeAdjunctionData, monad: RelativeMonadData
) -> RelativeAlgebraPresentation:
    frame = frame_from_proarrow(monad.loose_cell)
    return RelativeAlgebraPresentation(
        monad=monad,
        algebra=RelativeAlgebraData(
            carrier=adjunction.right,
            action=_identity_cell_on(frame, adjunction.root, adjunction.right, monad),
        ),
    )


def analyze_relative_adjunction_left_opalgebra(
    adjunction: RelativeAdjunctionData, presentation: RelativeOpalgebraPresentation
) -> PendingReport:
    issues = _opalgebra_layout_issues(presentation)
    ensure_boundary_reuse(presentation.opalgebra.carrier, adjunction.left, "Left leg opalgebra carrier", issues)
    ensure_boundary_reuse(presentation.monad.carrier, adjunction.right, "Induced monad carrier", issues)

    logger.debug(f"relative adjunction left opalgebra: {len(issues)} issue(s)")
    return pending_report(
        issues,
        "Left leg ℓ carries an opalgebra for the induced monad; the action laws remain pending.",
        "Left leg opalgebra",
        witness=presentation,
    )


def analyze_relative_adjunction_right_algebra(
    adjunction: RelativeAdjunctionData, presentation: RelativeAlgebraPresentation
) -> PendingReport:
    issues = _algebra_layout_issues(presentation)
    ensure_boundary_reuse(presentation.algebra.carrier, adjunction.right, "Right leg algebra carrier", issues)
    ensure_boundary_reuse(presentation.monad.root, adjunction.root, "Induced monad root", issues)

    logger.debug(f"relative adjunction right algebra: {len(issues)} issue(s)")
    return pending_report(
        issues,
        "Right leg r carries an algebra for the induced monad; the action laws remain pending.",
        "Right leg algebra",
        witness=presentation,
    )


# ----------------------------------------------------------------------
# Opalgebra diagrams
# ----------------------------------------------------------------------


def describe_relative_opalgebra_diagrams(presentation: RelativeOpalgebraPresentation) -> RelativeOpalgebraDiagrams:
    monad, opalgebra = presentation.monad, presentation.opalgebra
    return RelativeOpalgebraDiagrams(
        carrier_triangle=RelativeOpalgebraCarrierTriangle(
            presentation=presentation,
            carrier=opalgebra.carrier,
            unit=monad.unit,
            action=opalgebra.action,
            codomain=opalgebra.action.boundaries.right,
        ),
        extension_rectangle=RelativeOpalgebraExtensionRectangle(
            presentation=presentation,
            extension=monad.extension,
            action=opalgebra.action,
        ),
    )


def analyze_relative_opalgebra_carrier_triangle(
    presentation: RelativeOpalgebraPresentation, triangle: RelativeOpalgebraCarrierTriangle
) -> PendingReport:
    monad, opalgebra = presentation.monad, presentation.opalgebra
    equality = equality_for(monad.equipment)
    issues = _opalgebra_layout_issues(presentation)

    ensure_boundary_reuse(triangle.carrier, opalgebra.carrier, "Relative opalgebra carrier triangle carrier", issues)
    ensure_same_witness(
        triangle.unit,
        monad.unit,
        "Relative opalgebra carrier triangle must reuse the relative monad unit 2-cell.",
        issues,
    )
    ensure_same_witness(
        triangle.action,
        opalgebra.action,
        "Relative opalgebra carrier triangle must reuse the opalgebra action 2-cell.",
        issues,
    )
    if not (
        equality(triangle.codomain.from_obj, opalgebra.action.boundaries.right.from_obj)
        and equality(triangle.codomain.to_obj, opalgebra.action.boundaries.right.to_obj)
        and triangle.codomain.tight is opalgebra.action.boundaries.right.tight
    ):
        issues.append("Relative opalgebra carrier triangle codomain must match the opalgebra action target boundary.")

    logger.debug(f"relative opalgebra carrier triangle: {len(issues)} issue(s)")
    return pending_report(
        issues,
        "Carrier triangle data reuse the unit and action; the triangle identity itself remains pending.",
        "Relative opalgebra carrier triangle",
        witness=triangle,
    )


def analyze_relative_opalgebra_extension_rectangle(
    presentation: RelativeOpalgebraPresentation, rectangle: RelativeOpalgebraExtensionRectangle
) -> PendingReport:
    monad, opalgebra = presentation.monad, presentation.opalgebra
    issues = _opalgebra_layout_issues(presentation)

    ensure_same_witness(
        rectangle.extension,
        monad.extension,
        "Relative opalgebra extension rectangle must reuse the relative monad extension 2-cell.",
        issues,
    )
    ensure_same_witness(
        rectangle.action,
        opalgebra.action,
        "Relative opalgebra extension rectangle must reuse the opalgebra action 2-cell.",
        issues,
    )

    logger.debug(f"relative opalgebra extension rectangle: {len(issues)} issue(s)")
    return pending_report(
        issues,
        "Extension rectangle data reuse the extension and action; commutativity remains pending.",
        "Relative opalgebra extension rectangle",
        witness=rectangle,
    )


def describe_relative_opalgebra_extraordinary_transformation(
    presentation: RelativeOpalgebraPresentation,
) -> RelativeOpalgebraExtraordinaryTransformation:
    return RelativeOpalgebraExtraordinaryTransformation(
        presentation=presentation,
        loose_monoid=relative_monad_to_loose_monoid(presentation.monad),
        action=presentation.opalgebra.action,
    )


def analyze_relative_opalgebra_extraordinary_transformation(
    witness: RelativeOpalgebraExtraordinaryTransformation,
) -> PendingReport:
    monad, opalgebra = witness.presentation.monad, witness.presentation.opalgebra
    issues: List[str] = []

    loose_monoid_report = analyze_loose_monoid_shape(monad.equipment, witness.loose_monoid)
    collect_report_issues("Loose monoid", loose_monoid_report, issues)
    if witness.loose_monoid.loose_cell is not monad.loose_cell:
        issues.append("Extraordinary transformation must act on the relative monad loose arrow.")
    ensure_boundary_reuse(
        witness.action.boundaries.left, opalgebra.carrier, "Extraordinary transformation action left boundary", issues
    )
    ensure_boundary_reuse(
        witness.action.boundaries.right, monad.carrier, "Extraordinary transformation action right boundary", issues
    )

    logger.debug(f"relative opalgebra extraordinary transformation: {len(issues)} issue(s)")
    return pending_report(
        issues,
        "Opalgebra action presents an extraordinary transformation over the loose monoid; naturality remains pending.",
        "Relative opalgebra extraordinary transformation",
        witness=witness,
        loose_monoid_report=loose_monoid_report,
    )


# ----------------------------------------------------------------------
# Identity root and transport
# ----------------------------------------------------------------------


def describe_relative_algebra_identity_root_witness(
    presentation: RelativeAlgebraPresentation,
) -> RelativeAlgebraIdentityRootWitness:
    algebra = presentation.algebra
    return RelativeAlgebraIdentityRootWitness(
        presentation=presentation,
        ordinary=OrdinaryAlgebraData(carrier=algebra.carrier, action=algebra.action),
    )


def analyze_relative_algebra_identity_root_equivalence(witness: RelativeAlgebraIdentityRootWitness) -> PendingReport:
    algebra = witness.presentation.algebra
    issues: List[str] = []

    reduction = analyze_relative_monad_identity_reduction(witness.presentation.monad)
    collect_report_issues("Identity-root reduction", reduction, issues)
    ensure_boundary_reuse(witness.ordinary.carrier, algebra.carrier, "Ordinary algebra carrier boundary", issues)
    ensure_same_witness(
        witness.ordinary.action,
        algebra.action,
        "Ordinary algebra action must reuse the relative algebra action.",
        issues,
    )

    logger.debug(f"relative algebra identity root equivalence: {len(issues)} issue(s)")
    return pending_report(
        issues,
        "Over the identity root the relative algebra is an ordinary algebra; the equivalence of categories is pending.",
        "Identity-root algebra equivalence",
        witness=witness,
        reduction_report=reduction,
    )


def analyze_relative_algebra_transport(
    adjunction: RelativeAdjunctionData, presentation: RelativeAlgebraPresentation
) -> PendingReport:
    """Proposition 6.27: algebras transport along an adjunction resolving the monad."""
    issues: List[str] = []
    resolution = analyze_relative_monad_resolution(presentation.monad, adjunction)
    collect_report_issues("Resolution", resolution, issues)
    collect_report_issues("Algebra framing", analyze_relative_algebra_framing(presentation), issues)

    logger.debug(f"relative algebra transport: {len(issues)} issue(s)")
    return pending_report(
        issues,
        "Relative algebra transports along the resolving adjunction; the induced action's coherence is pending.",
        "Relative algebra transport",
        witness=presentation,
        resolution_report=resolution,
    )


def analyze_relative_opalgebra_transport(
    adjunction: RelativeAdjunctionData, presentation: RelativeOpalgebraPresentation
) -> PendingReport:
    issues: List[str] = []
    resolution = analyze_relative_monad_resolution(presentation.monad, adjunction)
    collect_report_issues("Resolution", resolution, issues)
    collect_report_issues("Opalgebra framing", analyze_relative_opalgebra_framing(presentation), issues)

    logger.debug(f"relative opalgebra transport: {len(issues)} issue(s)")
    return pending_report(
        issues,
        "Relative opalgebra transports along the resolving adjunction; the induced action's coherence is pending.",
        "Relative opalgebra transport",
        witness=presentation,
        resolution_report=resolution,
    )


# ----------------------------------------------------------------------
# Partial adjoints and opalgebra resolutions (Lemma 6.47, Theorem 6.49)
# ----------------------------------------------------------------------


@dataclass(frozen=True)
class RelativeTightComparison:
    tight: TightFunctor
    domain: Any
    codomain: Any


@dataclass(frozen=True)
class RelativePartialRightAdjointWitness:
    """
    Partial right adjoint to the comparison into the Eilenberg–Moore object.

    Attributes:
        presentation: The Eilenberg–Moore presentation
        section: Section of the comparison; must be the recorded mediating cell
        comparison: Tight 1-cell the partial adjoint is taken along; must be j
        fixed_objects: j-objects the partial adjoint fixes, each given by the root
    """

    presentation: RelativeEilenbergMoorePresentation
    section: Optional[RelativeAlgebraMediatingTightCell]
    comparison: RelativeTightComparison
    fixed_objects: Tuple[VerticalBoundary, ...]


@dataclass(frozen=True)
class RelativeOpalgebraKappaWitness:
    """κ_t together with the identities its triangle composites must reduce to."""

    kappa: Equipment2Cell
    left_identity: Equipment2Cell
    right_identity: Equipment2Cell


@dataclass(frozen=True)
class RelativeOpalgebraResolutionWitness:
    presentation: RelativeOpalgebraPresentation
    adjunction: RelativeAdjunctionData
    kappa_witness: RelativeOpalgebraKappaWitness


@dataclass(frozen=True)
class RelativePartialLeftAdjointWitness:
    opalgebra_resolution: RelativeOpalgebraResolutionWitness
    transpose_identity: Equipment2Cell


def describe_relative_partial_right_adjoint(
    presentation: RelativeEilenbergMoorePresentation,
) -> RelativePartialRightAdjointWitness:
    monad = presentation.monad
    root = monad.root
    return RelativePartialRightAdjointWitness(
        presentation=presentation,
        section=presentation.mediating,
        comparison=RelativeTightComparison(tight=root.tight, domain=root.from_obj, codomain=monad.carrier.to_obj),
        fixed_objects=(root,),
    )


def analyze_relative_partial_right_adjoint_functor(witness: RelativePartialRightAdjointWitness) -> PendingReport:
    presentation = witness.presentation
    monad = presentation.monad
    equality = equality_for(monad.equipment)
    comparison = witness.comparison
    issues: List[str] = []

    section_report = None
    if witness.section is None:
        issues.append("Partial right adjoint requires a section of the Eilenberg–Moore comparison.")
    else:
        ensure_same_witness(
            witness.section,
            presentation.mediating,
            "Partial right adjoint section must reuse the recorded mediating tight cell.",
            issues,
        )
        section_report = analyze_relative_algebra_mediating_tight_cell(replace(presentation, mediating=witness.section))
        collect_report_issues("Section", section_report, issues)

    if comparison.tight is not monad.root.tight:
        issues.append("Partial right adjoint comparison must reuse the root j tight 1-cell.")
    if not equality(comparison.domain, monad.root.from_obj):
        issues.append("Partial right adjoint comparison must start at dom(j).")
    if not equality(comparison.codomain, monad.carrier.to_obj):
        issues.append("Partial right adjoint comparison must land where the relative monad carrier lands.")

    if not witness.fixed_objects:
        issues.append("Partial right adjoint should record the j-objects it fixes.")
    for index, boundary in enumerate(witness.fixed_objects):
        if boundary is not monad.root:
            issues.append(
                f"Partial right adjoint should fix each j-object; "
                f"witness {index} deviates from the relative monad root."
            )

    logger.debug(f"relative partial right adjoint functor: {len(issues)} issue(s)")
    return structural_report(
        issues,
        "Eilenberg–Moore comparison has a partial right adjoint fixing the j-objects.",
        "Partial right adjoint functor",
        witness=witness,
        section_report=section_report,
    )


def describe_relative_opalgebra_kappa(presentation: RelativeOpalgebraPresentation) -> RelativeOpalgebraKappaWitness:
    monad, opalgebra = presentation.monad, presentation.opalgebra
    kappa = opalgebra.action
    return RelativeOpalgebraKappaWitness(
        kappa=kappa,
        left_identity=_identity_cell_on(kappa.source, opalgebra.carrier, opalgebra.carrier, monad),
        right_identity=_identity_cell_on(kappa.target, monad.carrier, monad.carrier, monad),
    )


def analyze_relative_opalgebra_kappa(
    presentation: RelativeOpalgebraPresentation, witness: RelativeOpalgebraKappaWitness
) -> PendingReport:
    """κ_t must be the opalgebra action and paste with identities on either side."""
    monad, opalgebra = presentation.monad, presentation.opalgebra
    issues: List[str] = []

    ensure_same_witness(witness.kappa, opalgebra.action, "κ_t must reuse the recorded opalgebra action.", issues)
    ensure_boundary_reuse(witness.left_identity.boundaries.left, opalgebra.carrier, "κ_t left identity", issues)
    ensure_boundary_reuse(witness.left_identity.boundaries.right, opalgebra.carrier, "κ_t left identity", issues)
    ensure_boundary_reuse(witness.right_identity.boundaries.left, monad.carrier, "κ_t right identity", issues)
    ensure_boundary_reuse(witness.right_identity.boundaries.right, monad.carrier, "κ_t right identity", issues)
    if vertical_compose_cells(monad.equipment, witness.kappa, witness.left_identity) is None:
        issues.append("κ_t left triangle composite must coincide with the supplied identity witness.")
    if vertical_compose_cells(monad.equipment, witness.right_identity, witness.kappa) is None:
        issues.append("κ_t right triangle composite must coincide with the supplied identity witness.")

    logger.debug(f"relative opalgebra κ_t: {len(issues)} issue(s)")
    return structural_report(
        issues,
        "κ_t pastes with the identity witnesses on both sides.",
        "Opalgebra κ_t",
        witness=witness,
    )


def describe_relative_opalgebra_resolution(
    presentation: RelativeOpalgebraPresentation,
) -> RelativeOpalgebraResolutionWitness:
    return RelativeOpalgebraResolutionWitness(
        presentation=presentation,
        adjunction=describe_relative_monad_resolution(presentation.monad),
        kappa_witness=describe_relative_opalgebra_kappa(presentation),
    )


def analyze_relative_opalgebra_resolution(witness: RelativeOpalgebraResolutionWitness) -> PendingReport:
    """Theorem 6.49: the opalgebra object resolves the monad; initiality stays pending."""
    presentation = witness.presentation
    issues: List[str] = []

    collect_report_issues("Opalgebra framing", analyze_relative_opalgebra_framing(presentation), issues)
    resolution_report = analyze_relative_monad_resolution(presentation.monad, witness.adjunction)
    collect_report_issues("Resolution", resolution_report, issues)
    kappa_report = analyze_relative_opalgebra_kappa(presentation, witness.kappa_witness)
    collect_report_issues("κ_t", kappa_report, issues)

    logger.debug(f"relative opalgebra resolution: {len(issues)} issue(s)")
    return pending_report(
        issues,
        "Opalgebra object resolves the relative monad through κ_t; initiality among resolutions remains pending.",
        "Relative opalgebra resolution",
        witness=witness,
        kappa_report=kappa_report,
        resolution_report=resolution_report,
    )


def describe_relative_partial_left_adjoint(
    presentation: RelativeOpalgebraPresentation,
) -> RelativePartialLeftAdjointWitness:
    monad = presentation.monad
    return RelativePartialLeftAdjointWitness(
        opalgebra_resolution=describe_relative_opalgebra_resolution(presentation),
        transpose_identity=_identity_cell_on(frame_from_proarrow(monad.loose_cell), monad.root, monad.root, monad),
    )


def analyze_relative_partial_left_adjoint_section(witness: RelativePartialLeftAdjointWitness) -> PendingReport:
    monad = witness.opalgebra_resolution.presentation.monad
    equality = equality_for(monad.equipment)
    transpose = witness.transpose_identity
    issues: List[str] = []

    resolution_report = analyze_relative_opalgebra_resolution(witness.opalgebra_resolution)
    collect_report_issues("Opalgebra resolution", resolution_report, issues)
    if transpose.boundaries.left is not monad.root or transpose.boundaries.right is not monad.root:
        issues.append("Partial left adjoint transpose must match the supplied identity on j-objects.")
    frame_matches_loose_cell(equality, transpose.source, monad.loose_cell, "Partial left adjoint transpose", issues)

    logger.debug(f"relative partial left adjoint section: {len(issues)} issue(s)")
    return pending_report(
        issues,
        "Partial left adjoint is a section on j-objects; its universality remains pending.",
        "Partial left adjoint section",
        witness=witness,
        resolution_report=resolution_report,
    )
