"""
Relative monads.

A j-relative monad over a virtual equipment is presented by a root j : A → E,
a carrier t : A → E, the loose arrow E(j,t) and two 2-cells (extension and
unit) framed on it. The analyzers below check that wiring:

- analyze_relative_monad_framing: boundary and frame layout
- analyze_relative_monad_unit_compatibility / extension_associativity /
  root_identity: law components whose coherence stays pending
- analyze_relative_monad_representability / identity_reduction
- relative_monad_from_equipment: framing plus the restrictions B(j,1), B(1,t)

Classical monads embed along the identity root via from_monad and collapse
back via to_monad_if_identity.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

from equipment.core import (
    CellBoundaries,
    Equipment2Cell,
    Frame,
    ObjectEquality,
    Proarrow,
    RepresentabilityWitness,
    RestrictionResult,
    VerticalBoundary,
    VirtualEquipment,
    default_object_equality,
    equality_for,
    frame_from_proarrow,
    identity_proarrow,
    identity_vertical_boundary,
    is_identity_vertical_boundary,
    vertical_boundaries_equal,
)
from equipment.framing import (
    boundaries_match,
    collect_report_issues,
    frame_matches_loose_cell,
    single_arrow,
)
from equipment.loose import LooseMonoidData, analyze_loose_monoid_shape
from equipment.reports import FramingReport, PendingReport, framing_report, pending_report
from equipment.tight import FiniteCategory, NaturalTransformation, TightFunctor, TightLayer
from equipment.virtualise import TightEvidence, virtualise_tight_category, virtualize_category

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RelativeMonadData:
    """
    Presentation of a j-relative monad.

    Attributes:
        equipment: Ambient virtual equipment
        root: Root j : A → E
        carrier: Carrier t : A → E
        loose_cell: Loose arrow E(j,t) from dom(j) to cod(t)
        extension: Extension 2-cell framed on E(j,t)
        unit: Unit 2-cell framed on E(j,t)
    """

    equipment: VirtualEquipment
    root: VerticalBoundary
    carrier: VerticalBoundary
    loose_cell: Proarrow
    extension: Equipment2Cell
    unit: Equipment2Cell


@dataclass(frozen=True)
class CategoryMonad:
    """Classical monad on a finite category."""

    category: FiniteCategory
    endofunctor: TightFunctor
    unit: NaturalTransformation
    multiplication: NaturalTransformation


@dataclass(frozen=True)
class UnitCompatibilityWitness:
    extension_source_arrows: Tuple[Proarrow, ...]
    unit_arrow: Optional[Proarrow] = None
    extension_composite: Optional[Proarrow] = None


@dataclass(frozen=True)
class ExtensionAssociativityWitness:
    extension_source_arrows: Tuple[Proarrow, ...]
    extension_composite: Optional[Proarrow] = None


@dataclass(frozen=True)
class RootIdentityWitness:
    restriction: Optional[RestrictionResult] = None
    unit_source_arrow: Optional[Proarrow] = None


@dataclass(frozen=True)
class RelativeMonadLawAnalysis:
    """Framing plus the three law components for one presentation."""

    monad: RelativeMonadData
    framing: FramingReport
    unit_compatibility: PendingReport
    extension_associativity: PendingReport
    root_identity: PendingReport

    def to_dict(self) -> Dict[str, Any]:
        return {
            "framing": self.framing.to_dict(),
            "unit_compatibility": self.unit_compatibility.to_dict(),
            "extension_associativity": self.extension_associativity.to_dict(),
            "root_identity": self.root_identity.to_dict(),
        }


@dataclass(frozen=True)
class RelativeMonadRepresentabilityReport:
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


@dataclass(frozen=True)
class RelativeMonadConstructionReport:
    """
    Outcome of assembling a relative monad from equipment data.

    Attributes:
        holds: True when framing, loose-monoid shape and both restrictions check out
        issues: Every recorded defect
        details: Summary line
        monad: The presentation, present only when the construction holds
        framing: Framing report for the scaffold
        loose_monoid: Loose monoid view of the presentation
        loose_monoid_report: Shape report for the loose monoid
        left_restriction: Result of B(j,1), when the equipment produced one
        right_restriction: Result of B(1,t), when the equipment produced one
        representability: Left representability witness, when available
    """

    holds: bool
    issues: List[str]
    details: str
    framing: FramingReport
    loose_monoid: LooseMonoidData
    loose_monoid_report: FramingReport
    monad: Optional[RelativeMonadData] = None
    left_restriction: Optional[RestrictionResult] = None
    right_restriction: Optional[RestrictionResult] = None
    representability: Optional[RepresentabilityWitness] = None
    extras: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "holds": self.holds,
            "issues": list(self.issues),
            "details": self.details,
            "framing": self.framing.to_dict(),
            "loose_monoid": self.loose_monoid_report.to_dict(),
            "has_left_restriction": self.left_restriction is not None,
            "has_right_restriction": self.right_restriction is not None,
        }
        for key, value in self.extras.items():
            data[key] = value.to_dict() if hasattr(value, "to_dict") else value
        return data


@dataclass(frozen=True)
class IdentityCollapseResult:
    holds: bool
    issues: List[str]
    details: str
    monad: Optional[CategoryMonad] = None


def analyze_relative_monad_framing(data: RelativeMonadData) -> FramingReport:
    equality = equality_for(data.equipment)
    root, carrier, loose_cell = data.root, data.carrier, data.loose_cell
    extension, unit = data.extension, data.unit
    issues: List[str] = []

    if not equality(root.from_obj, carrier.from_obj) or not equality(root.to_obj, carrier.to_obj):
        issues.append("Root j and carrier t must share domain and codomain.")
    if not equality(loose_cell.from_obj, root.from_obj) or not equality(loose_cell.to_obj, carrier.to_obj):
        issues.append("Underlying loose cell E(j,t) must run from dom(j) to cod(t).")

    frame_matches_loose_cell(equality, extension.target, loose_cell, "Extension target", issues)
    frame_matches_loose_cell(equality, unit.target, loose_cell, "Unit target", issues)

    if not equality(extension.source.left_boundary, root.from_obj):
        issues.append("Extension source left boundary must equal dom(j).")
    if not equality(extension.source.right_boundary, carrier.to_obj):
        issues.append("Extension source right boundary must equal cod(t).")
    if not equality(unit.source.left_boundary, root.from_obj):
        issues.append("Unit source left boundary must equal dom(j).")
    if not equality(unit.source.right_boundary, root.to_obj):
        issues.append("Unit source right boundary must equal cod(j) = cod(t).")

    boundaries_match(equality, extension.boundaries.left, root, "Extension left boundary", issues)
    boundaries_match(equality, extension.boundaries.right, carrier, "Extension right boundary", issues)
    boundaries_match(equality, unit.boundaries.left, root, "Unit left boundary", issues)
    boundaries_match(equality, unit.boundaries.right, carrier, "Unit right boundary", issues)

    logger.debug(f"relative monad framing: {len(issues)} issue(s)")
    return framing_report(
        issues,
        "Relative monad unit and extension 2-cells have compatible framing with the chosen root and carrier.",
        "Relative monad framing",
    )


def _compose_extension_source(
    equipment: VirtualEquipment, frame: Frame, issues: List[str]
) -> Optional[Proarrow]:
    if not frame.arrows:
        issues.append("Extension source must contain at least one loose arrow to compose with the unit action.")
        return None
    composite = equipment.horizontal_compose_many(frame.arrows)
    if composite is None:
        issues.append("Extension source arrows must be horizontally composable inside the equipment.")
    return composite


def analyze_relative_monad_unit_compatibility(data: RelativeMonadData) -> PendingReport:
    """Structural prerequisites for extend(unit) = id."""
    equality = equality_for(data.equipment)
    loose_cell, extension = data.loose_cell, data.extension
    issues: List[str] = []

    unit_arrow = single_arrow(data.unit.target)
    if unit_arrow is None:
        issues.append("Unit target should provide the loose arrow used for Kleisli identities.")
    else:
        if not equality(unit_arrow.from_obj, loose_cell.from_obj):
            issues.append("Unit target arrow should start at dom(j) so extend(unit) composes.")
        if not equality(unit_arrow.to_obj, loose_cell.to_obj):
            issues.append("Unit target arrow should land at cod(t) for the extension composite.")

    composite = _compose_extension_source(data.equipment, extension.source, issues)
    arrows = extension.source.arrows
    if arrows and not equality(arrows[0].from_obj, loose_cell.from_obj):
        issues.append("Extension source should begin at dom(j) so the unit comparison is defined.")
    if arrows and not equality(arrows[-1].to_obj, loose_cell.to_obj):
        issues.append("Extension source should end at cod(t) to reuse the loose arrow boundaries.")
    if composite is not None and not equality(composite.from_obj, data.root.from_obj):
        issues.append("Composite of extension source arrows should start at dom(j).")
    if composite is not None and not equality(composite.to_obj, loose_cell.to_obj):
        issues.append("Composite of extension source arrows should land at cod(t).")

    logger.debug(f"relative monad unit compatibility: {len(issues)} issue(s)")
    return pending_report(
        issues,
        "Structural prerequisites for extend(unit) hold; Street-level equality remains pending.",
        "Relative monad unit compatibility",
        witness=UnitCompatibilityWitness(
            extension_source_arrows=tuple(arrows),
            unit_arrow=unit_arrow,
            extension_composite=composite,
        ),
    )


def analyze_relative_monad_extension_associativity(data: RelativeMonadData) -> PendingReport:
    equality = equality_for(data.equipment)
    extension, loose_cell = data.extension, data.loose_cell
    issues: List[str] = []

    if len(extension.source.arrows) < 2:
        issues.append(
            "Extension source should exhibit at least two composable loose arrows to witness associativity."
        )

    composite = _compose_extension_source(data.equipment, extension.source, issues)
    if composite is not None and not equality(composite.from_obj, loose_cell.from_obj):
        issues.append("Composite of extension source arrows should start at dom(j) for associativity pastings.")
    if composite is not None and not equality(composite.to_obj, loose_cell.to_obj):
        issues.append("Composite of extension source arrows should end at cod(t) to compare both pastings.")

    logger.debug(f"relative monad extension associativity: {len(issues)} issue(s)")
    return pending_report(
        issues,
        "Extension source arrows compose; associativity equality awaits Street pasting witnesses.",
        "Relative monad associativity",
        witness=ExtensionAssociativityWitness(
            extension_source_arrows=tuple(extension.source.arrows),
            extension_composite=composite,
        ),
    )


def analyze_relative_monad_root_identity(data: RelativeMonadData) -> PendingReport:
    equality = equality_for(data.equipment)
    root = data.root
    issues: List[str] = []

    restriction = data.equipment.restrict_left(root.tight, data.loose_cell)
    if restriction is None:
        issues.append("Left restriction B(j,1) should exist so the unit preserves identities along the root.")

    unit_source_arrow = single_arrow(data.unit.source)
    if unit_source_arrow is None:
        issues.append("Unit source should consist of the identity loose arrow on dom(j).")
    else:
        if not equality(unit_source_arrow.from_obj, root.from_obj):
            issues.append("Unit source arrow should start at dom(j).")
        if not equality(unit_source_arrow.to_obj, root.from_obj):
            issues.append("Unit source arrow should end at dom(j) to represent the identity along the root.")

    logger.debug(f"relative monad root identity: {len(issues)} issue(s)")
    return pending_report(
        issues,
        "Restriction and unit framing preserve the root identity; comparison with Street calculus remains pending.",
        "Relative monad root-identity",
        witness=RootIdentityWitness(restriction=restriction, unit_source_arrow=unit_source_arrow),
    )


def analyze_relative_monad_laws(data: RelativeMonadData) -> RelativeMonadLawAnalysis:
    return RelativeMonadLawAnalysis(
        monad=data,
        framing=analyze_relative_monad_framing(data),
        unit_compatibility=analyze_relative_monad_unit_compatibility(data),
        extension_associativity=analyze_relative_monad_extension_associativity(data),
        root_identity=analyze_relative_monad_root_identity(data),
    )


def analyze_relative_monad_representability(
    data: RelativeMonadData, witness: RepresentabilityWitness
) -> RelativeMonadRepresentabilityReport:
    """Theorem 4.16: E(j,t) is presented by the left restriction of the identity along j."""
    framing = analyze_relative_monad_framing(data)
    equality = equality_for(data.equipment)
    issues = list(framing.issues)

    if witness.orientation != "left":
        issues.append("Representability witness must arise from a left restriction B(j,1) to align with Theorem 4.16.")
    if not equality(witness.object, data.root.from_obj):
        issues.append("Representability witness object must match the domain of the root j.")
    if witness.tight is not data.root.tight:
        issues.append("Representability witness must reuse the root tight 1-cell when restricting the identity.")
    if not equality(data.loose_cell.from_obj, data.root.from_obj):
        issues.append(
            "Relative monad loose arrow should start at the domain certified by the representability witness."
        )

    holds = not issues
    logger.debug(f"relative monad representability: {len(issues)} issue(s)")
    return RelativeMonadRepresentabilityReport(
        holds=holds,
        issues=issues,
        details=(
            "Relative monad admits a representable loose presentation via the left restriction of the identity along j."
            if holds
            else f"Relative monad representability issues: {'; '.join(issues)}. Framing details: {framing.details}"
        ),
        framing=framing,
        representability=witness,
    )


def analyze_relative_monad_identity_reduction(data: RelativeMonadData) -> FramingReport:
    """Corollary 4.20: over the identity root a relative monad is an ordinary monad."""
    equipment = data.equipment
    equality = equality_for(equipment)
    root, carrier, loose_cell = data.root, data.carrier, data.loose_cell
    issues: List[str] = []

    if not vertical_boundaries_equal(equality, root, carrier):
        issues.append("Root j and carrier t must coincide to model an ordinary monad.")
    if not is_identity_vertical_boundary(equipment, root.from_obj, root):
        issues.append("Root j should be the identity tight 1-cell to recover a classical monad.")
    if not is_identity_vertical_boundary(equipment, carrier.from_obj, carrier):
        issues.append("Carrier t should equal the identity tight 1-cell when j = id.")
    if not equality(loose_cell.from_obj, root.from_obj) or not equality(loose_cell.to_obj, root.to_obj):
        issues.append("Underlying loose cell must be an endoarrow on the shared object.")

    boundaries_match(equality, data.extension.boundaries.left, root, "Extension left boundary", issues)
    boundaries_match(equality, data.extension.boundaries.right, carrier, "Extension right boundary", issues)
    boundaries_match(equality, data.unit.boundaries.left, root, "Unit left boundary", issues)
    boundaries_match(equality, data.unit.boundaries.right, carrier, "Unit right boundary", issues)
    frame_matches_loose_cell(equality, data.extension.target, loose_cell, "Extension target", issues)
    frame_matches_loose_cell(equality, data.unit.target, loose_cell, "Unit target", issues)

    logger.debug(f"relative monad identity reduction: {len(issues)} issue(s)")
    return framing_report(
        issues,
        "Relative monad data over the identity root collapses to an ordinary monad as in Corollary 4.20.",
        "Identity-root reduction",
    )


def describe_trivial_relative_monad(equipment: VirtualEquipment, obj: Any) -> RelativeMonadData:
    """Identity root and carrier on obj; the unit is the extension cell itself."""
    root = identity_vertical_boundary(
        equipment, obj, "Trivial relative monad root chosen as the identity tight 1-cell."
    )
    carrier = identity_vertical_boundary(
        equipment, obj, "Trivial relative monad carrier equals the identity tight 1-cell."
    )
    loose_cell = identity_proarrow(equipment, obj)
    framed = frame_from_proarrow(loose_cell)
    boundaries = CellBoundaries(left=root, right=carrier)
    extension = Equipment2Cell(
        source=framed,
        target=framed,
        boundaries=boundaries,
        evidence=equipment.identity_evidence(framed, boundaries),
    )
    logger.debug(f"described trivial relative monad on {obj!r}")
    return RelativeMonadData(
        equipment=equipment,
        root=root,
        carrier=carrier,
        loose_cell=loose_cell,
        extension=extension,
        unit=extension,
    )


def from_monad(
    monad: CategoryMonad,
    root_object: Any,
    objects: Optional[Sequence[Any]] = None,
    equals_objects: Optional[ObjectEquality] = None,
    tight: Optional[TightLayer] = None,
) -> RelativeMonadData:
    """
    Embed a classical monad as a relative monad over the identity root.

    Pass the tight layer the endofunctor was built against when the monad
    should collapse back through to_monad_if_identity; a fresh layer carries
    its own identity handle.
    """
    equality = equals_objects or default_object_equality
    known = list(objects or ())
    if not any(equality(obj, root_object) for obj in known):
        known = [root_object] + known
    carrier_target = monad.endofunctor.on_obj(root_object)
    if not any(equality(obj, carrier_target) for obj in known):
        known.append(carrier_target)

    if tight is None:
        equipment = virtualize_category(monad.category, objects=known, equals_objects=equals_objects)
    else:
        equipment = virtualise_tight_category(tight, known, equals_objects)
    root = identity_vertical_boundary(
        equipment, root_object, "Identity root induced by embedding a classical monad into the relative layer."
    )
    carrier = VerticalBoundary(
        from_obj=root_object,
        to_obj=carrier_target,
        tight=monad.endofunctor,
        details="Carrier boundary arises from the monad endofunctor applied to the chosen root object.",
    )
    loose_cell = Proarrow(from_obj=root_object, to_obj=carrier_target, payload=monad.endofunctor)
    framed = frame_from_proarrow(loose_cell)
    boundaries = CellBoundaries(left=root, right=carrier)
    return RelativeMonadData(
        equipment=equipment,
        root=root,
        carrier=carrier,
        loose_cell=loose_cell,
        extension=Equipment2Cell(
            source=framed, target=framed, boundaries=boundaries, evidence=TightEvidence(cell=monad.multiplication)
        ),
        unit=Equipment2Cell(
            source=framed, target=framed, boundaries=boundaries, evidence=TightEvidence(cell=monad.unit)
        ),
    )


def to_monad_if_identity(data: RelativeMonadData) -> IdentityCollapseResult:
    """Recover the classical monad when the presentation sits over the identity root."""
    reduction = analyze_relative_monad_identity_reduction(data)
    if not reduction.holds:
        return IdentityCollapseResult(holds=False, issues=list(reduction.issues), details=reduction.details)

    issues: List[str] = []
    unit_evidence = data.unit.evidence if isinstance(data.unit.evidence, TightEvidence) else None
    if unit_evidence is None:
        issues.append("Relative monad unit evidence must be a tight 2-cell to recover the classical monad unit.")
    extension_evidence = data.extension.evidence if isinstance(data.extension.evidence, TightEvidence) else None
    if extension_evidence is None:
        issues.append(
            "Relative monad extension evidence must be a tight 2-cell to recover the classical monad multiplication."
        )

    if unit_evidence is None or extension_evidence is None:
        return IdentityCollapseResult(
            holds=False,
            issues=issues,
            details=f"Relative monad cannot collapse to an ordinary monad: {'; '.join(issues)}",
        )

    return IdentityCollapseResult(
        holds=True,
        issues=[],
        details=f"{reduction.details} Recovered the classical monad data from the identity-root presentation.",
        monad=CategoryMonad(
            category=data.equipment.tight.category,
            endofunctor=data.carrier.tight,
            unit=unit_evidence.cell,
            multiplication=extension_evidence.cell,
        ),
    )


def relative_monad_from_equipment(
    scaffold: RelativeMonadData, loose_monoid: Optional[LooseMonoidData] = None
) -> RelativeMonadConstructionReport:
    """
    Validate a scaffold against the equipment it lives in.

    Runs the framing analyzer, the loose-monoid shape check and both
    restrictions B(j,1) and B(1,t). The restricted arrows must be the
    supplied loose cell itself so later analyzers keep aliasing it.
    """
    equipment = scaffold.equipment
    equality = equality_for(equipment)
    framing = analyze_relative_monad_framing(scaffold)
    issues = list(framing.issues)

    loose_monoid = loose_monoid or LooseMonoidData(
        object=scaffold.root.from_obj,
        loose_cell=scaffold.loose_cell,
        multiplication=scaffold.extension,
        unit=scaffold.unit,
    )
    loose_monoid_report = analyze_loose_monoid_shape(equipment, loose_monoid)
    collect_report_issues("Loose monoid framing", loose_monoid_report, issues)

    representability: Optional[RepresentabilityWitness] = None
    left_restriction = equipment.restrict_left(scaffold.root.tight, scaffold.loose_cell)
    if left_restriction is None:
        issues.append("Left restriction B(j,1) failed: equipment could not restrict the loose arrow along the root.")
    else:
        restricted = left_restriction.restricted
        if not equality(restricted.from_obj, scaffold.loose_cell.from_obj) or not equality(
            restricted.to_obj, scaffold.loose_cell.to_obj
        ):
            issues.append("Left restriction B(j,1) must return a loose arrow matching E(j,t).")
        if restricted is not scaffold.loose_cell:
            issues.append(
                "Left restriction B(j,1) should recover the supplied loose arrow; "
                "use the restricted arrow when wiring future analyzers."
            )
        witness = left_restriction.representability
        if witness is None:
            issues.append(
                "Left restriction along j currently lacks representability; loose adjunction analyzers "
                f"will only certify a map. Details: {left_restriction.details}"
            )
        else:
            representability = witness
            if witness.orientation != "left":
                issues.append("Representability witness must arise from a left restriction B(j,1).")
            if not equality(witness.object, scaffold.root.from_obj):
                issues.append("Representability witness object must match dom(j).")
            if witness.tight is not scaffold.root.tight:
                issues.append("Representability witness must reuse the root tight 1-cell.")

    right_restriction = equipment.restrict_right(scaffold.loose_cell, scaffold.carrier.tight)
    if right_restriction is None:
        issues.append(
            "Right restriction B(1,t) failed: equipment could not align the loose arrow with the carrier boundary."
        )
    else:
        restricted = right_restriction.restricted
        if not equality(restricted.from_obj, scaffold.loose_cell.from_obj) or not equality(
            restricted.to_obj, scaffold.loose_cell.to_obj
        ):
            issues.append("Right restriction B(1,t) must return a loose arrow matching E(j,t).")
        if restricted is not scaffold.loose_cell:
            issues.append(
                "Right restriction B(1,t) should coincide with the supplied loose arrow "
                "so future Street actions reuse the same data."
            )
        witness = right_restriction.representability
        if witness is None:
            issues.append(
                "Right restriction along t currently lacks representability; record companion/conjoint "
                f"witnesses so adjunction scaffolding can proceed. Details: {right_restriction.details}"
            )
        elif witness.orientation != "right":
            issues.append("Right restriction representability must be oriented as B(1,t).")

    holds = not issues
    logger.debug(f"relative monad construction from equipment: {len(issues)} issue(s)")
    return RelativeMonadConstructionReport(
        holds=holds,
        issues=issues,
        details=(
            "Constructed relative monad from equipment: framing and restriction checks succeeded."
            if holds
            else f"Relative monad construction issues: {'; '.join(issues)}"
        ),
        framing=framing,
        loose_monoid=loose_monoid,
        loose_monoid_report=loose_monoid_report,
        monad=scaffold if holds else None,
        left_restriction=left_restriction,
        right_restriction=right_restriction,
        representability=representability,
    )
