"""
Resolutions as objects: the category Res(T) of resolutions of a relative
monad (Definition 5.25) and the loose adjunction each one induces.

A resolution packages the inclusion j, an apex loose arrow and a comparison
isomorphism with E(j,t). Resolutions carry witness metadata for the
constructions that produce new resolutions from old ones:
- precomposition along a tight cell (Proposition 5.29)
- pasting of triangles (Proposition 5.30)
- fully faithful postcomposition (Example 5.31, Corollary 5.32)
- resolute composites (Remark 5.33, Corollary 5.34)
- left-adjoint transport (Proposition 5.37)

The witnesses are validated against the resolution they are attached to;
the loose monad comparison (Corollary 5.28) reuses the checks from
relative.resolution.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from equipment.core import (
    CellBoundaries,
    Equipment2Cell,
    Proarrow,
    VerticalBoundary,
    VirtualEquipment,
    equality_for,
    frame_from_proarrow,
    vertical_boundaries_equal,
)
from equipment.framing import frames_coincide
from equipment.loose import LooseAdjunctionData, analyze_loose_adjunction
from equipment.reports import FramingReport, PendingReport, structural_report

from .monads import RelativeMonadData
from .resolution import LooseMonadComparisonReport

logger = logging.getLogger(__name__)

WITNESS_KINDS = ("precompositions", "pastings", "fully_faithful", "resolute", "transports")


# ----------------------------------------------------------------------
# Witness metadata
# ----------------------------------------------------------------------


@dataclass(frozen=True)
class ResolutionComparison:
    forward: Equipment2Cell
    backward: Equipment2Cell
    details: str = ""


@dataclass(frozen=True)
class ResolutionPrecompositionWitness:
    tight_cell: VerticalBoundary
    comparison: Equipment2Cell
    details: str = ""


@dataclass(frozen=True)
class ResolutionPastingWitness:
    inner: Equipment2Cell
    outer: Equipment2Cell
    details: str = ""


@dataclass(frozen=True)
class ResolutionFullyFaithfulWitness:
    right_leg: VerticalBoundary
    summary: str = ""


@dataclass(frozen=True)
class ResolutionResoluteWitness:
    left_leg: VerticalBoundary
    right_adjoint: VerticalBoundary
    details: str = ""


@dataclass(frozen=True)
class ResolutionTransportWitness:
    """
    Transport along a left relative adjoint.

    Attributes:
        left_adjoint: The left adjoint ℓ' transported along
        transported: Monad induced on the far side; its root should be the inclusion
        monad_morphism: The (ℓ'!, r') monad morphism into E(j,t)
        details: Free-form provenance
    """

    left_adjoint: VerticalBoundary
    transported: RelativeMonadData
    monad_morphism: Equipment2Cell
    details: str = ""


@dataclass(frozen=True)
class ResolutionMetadata:
    """Witnesses threaded through a resolution, grouped by construction."""

    precompositions: Tuple[ResolutionPrecompositionWitness, ...] = ()
    pastings: Tuple[ResolutionPastingWitness, ...] = ()
    fully_faithful: Tuple[ResolutionFullyFaithfulWitness, ...] = ()
    resolute: Tuple[ResolutionResoluteWitness, ...] = ()
    transports: Tuple[ResolutionTransportWitness, ...] = ()
    details: str = ""

    def extend(self, details: Optional[str] = None, **additions: Iterable[Any]) -> ResolutionMetadata:
        """Append witnesses by kind; unknown kinds raise ValueError."""
        unknown = sorted(set(additions) - set(WITNESS_KINDS))
        if unknown:
            raise ValueError(f"unknown resolution witness kind(s): {', '.join(unknown)}")
        merged = {kind: getattr(self, kind) + tuple(additions.get(kind, ())) for kind in WITNESS_KINDS}
        return ResolutionMetadata(details=self.details if details is None else details, **merged)

    def counts(self) -> Dict[str, int]:
        return {kind: len(getattr(self, kind)) for kind in WITNESS_KINDS}

    def summary(self) -> str:
        counts = self.counts()
        text = (
            f"Resolution metadata threads {counts['precompositions']} precomposition witness(es), "
            f"{counts['pastings']} pasting witness(es), "
            f"{counts['fully_faithful']} fully faithful postcomposition witness(es), "
            f"{counts['resolute']} resolute composite witness(es) and "
            f"{counts['transports']} left-adjoint transport witness(es)."
        )
        return f"{text} {self.details}".strip()


@dataclass(frozen=True)
class ResolutionData:
    """
    A resolution of a relative monad.

    Attributes:
        equipment: Ambient virtual equipment
        monad: The resolved relative monad
        inclusion: Root j the resolution is taken along
        apex: Loose arrow C(ℓ,r) out of dom(j)
        comparison: Isomorphism between the apex and E(j,t)
        metadata: Witnesses for constructions on the resolution
    """

    equipment: VirtualEquipment
    monad: RelativeMonadData
    inclusion: VerticalBoundary
    apex: Proarrow
    comparison: ResolutionComparison
    metadata: ResolutionMetadata = field(default_factory=ResolutionMetadata)


@dataclass(frozen=True)
class ResolutionMorphism:
    source: ResolutionData
    target: ResolutionData
    tight: VerticalBoundary
    loose: Proarrow
    comparison: ResolutionComparison
    metadata: ResolutionMetadata = field(default_factory=ResolutionMetadata)


def describe_identity_resolution(monad: RelativeMonadData) -> ResolutionData:
    """
    The resolution of a monad by itself: apex E(j,t), identity comparison,
    and one identity witness of each construction.
    """
    equipment = monad.equipment
    apex = monad.loose_cell
    apex_frame = frame_from_proarrow(apex)
    boundaries = CellBoundaries(left=monad.root, right=monad.carrier)
    forward = Equipment2Cell(
        source=apex_frame,
        target=frame_from_proarrow(monad.loose_cell),
        boundaries=boundaries,
        evidence=equipment.identity_evidence(apex_frame, boundaries),
    )
    metadata = ResolutionMetadata(
        precompositions=(ResolutionPrecompositionWitness(monad.root, forward, "Identity precomposition."),),
        pastings=(ResolutionPastingWitness(forward, forward, "Identity triangles paste to themselves."),),
        fully_faithful=(ResolutionFullyFaithfulWitness(monad.root, "Identity right leg is fully faithful."),),
        resolute=(ResolutionResoluteWitness(monad.root, monad.root, "Identity adjunction is resolute."),),
        transports=(
            ResolutionTransportWitness(monad.root, monad, forward, "Transport along the identity keeps the monad."),
        ),
    )
    logger.debug("described identity resolution")
    return ResolutionData(
        equipment=equipment,
        monad=monad,
        inclusion=monad.root,
        apex=apex,
        comparison=ResolutionComparison(
            forward=forward, backward=forward, details="Identity comparison exhibits the trivial resolution."
        ),
        metadata=metadata,
    )


# ----------------------------------------------------------------------
# Resolution checks
# ----------------------------------------------------------------------


def _metadata_witness_issues(resolution: ResolutionData, issues: List[str]) -> None:
    equality = equality_for(resolution.equipment)
    metadata, inclusion, apex = resolution.metadata, resolution.inclusion, resolution.apex

    for index, witness in enumerate(metadata.precompositions):
        if not equality(witness.tight_cell.from_obj, inclusion.from_obj):
            issues.append(f"Precomposition witness {index} expects a tight cell starting at the resolution domain.")
        if not equality(witness.tight_cell.to_obj, inclusion.to_obj):
            issues.append(
                f"Precomposition witness {index} tight cell must land in the codomain of the resolution inclusion."
            )
        if not vertical_boundaries_equal(equality, witness.tight_cell, inclusion):
            issues.append(f"Precomposition witness {index} should reuse the resolution inclusion as its boundary.")

    for index, witness in enumerate(metadata.pastings):
        if not vertical_boundaries_equal(equality, witness.inner.boundaries.left, inclusion):
            issues.append(f"Pasting witness {index} inner triangle should start along the resolution inclusion.")
        if not vertical_boundaries_equal(equality, witness.outer.boundaries.left, inclusion):
            issues.append(f"Pasting witness {index} outer triangle should start along the resolution inclusion.")

    for index, witness in enumerate(metadata.fully_faithful):
        if not equality(witness.right_leg.from_obj, apex.to_obj):
            issues.append(f"Fully faithful postcomposition witness {index} should begin at the resolution apex.")

    for index, witness in enumerate(metadata.resolute):
        if not equality(witness.left_leg.from_obj, apex.to_obj):
            issues.append(f"Resolute-composite witness {index} should start from the resolution apex.")

    for index, witness in enumerate(metadata.transports):
        if witness.transported.equipment is not resolution.equipment:
            issues.append(f"Left-adjoint transport witness {index} should stay inside the ambient equipment.")
        if not vertical_boundaries_equal(equality, witness.transported.root, inclusion):
            issues.append(
                f"Left-adjoint transport witness {index} must reuse the resolution inclusion as the transported root."
            )


def check_resolution_of_relative_monad(
    resolution: ResolutionData, monad: Optional[RelativeMonadData] = None
) -> PendingReport:
    monad = monad or resolution.monad
    equality = equality_for(resolution.equipment)
    comparison = resolution.comparison
    issues: List[str] = []

    if resolution.equipment is not monad.equipment:
        issues.append("Resolution and relative monad must inhabit the same virtual equipment.")
    if not vertical_boundaries_equal(equality, resolution.inclusion, monad.root):
        issues.append("Resolution inclusion must coincide with the relative monad root j.")
    if not equality(resolution.apex.from_obj, resolution.inclusion.from_obj):
        issues.append("Resolution apex loose morphism must originate at the root domain A.")

    apex_frame = frame_from_proarrow(resolution.apex)
    monad_frame = frame_from_proarrow(monad.loose_cell)
    frames_coincide(equality, comparison.forward.source, apex_frame, "Forward comparison source", issues)
    frames_coincide(equality, comparison.forward.target, monad_frame, "Forward comparison target", issues)
    frames_coincide(equality, comparison.backward.source, monad_frame, "Backward comparison source", issues)
    frames_coincide(equality, comparison.backward.target, apex_frame, "Backward comparison target", issues)

    if not vertical_boundaries_equal(equality, comparison.forward.boundaries.left, resolution.inclusion):
        issues.append("Forward comparison must use the resolution inclusion as its left boundary.")
    if not vertical_boundaries_equal(equality, comparison.forward.boundaries.right, monad.carrier):
        issues.append("Forward comparison must land in the relative monad carrier boundary.")
    if not vertical_boundaries_equal(equality, comparison.backward.boundaries.left, monad.root):
        issues.append("Backward comparison must start at the relative monad root boundary.")
    if not vertical_boundaries_equal(equality, comparison.backward.boundaries.right, resolution.inclusion):
        issues.append("Backward comparison must return to the resolution inclusion boundary.")

    _metadata_witness_issues(resolution, issues)

    logger.debug(f"resolution of relative monad: {len(issues)} issue(s)")
    return structural_report(
        issues,
        f"Resolution recovers the relative monad. {resolution.metadata.summary()}",
        "Resolution",
        witness=resolution,
        metadata=resolution.metadata,
        comparison=comparison,
    )


# ----------------------------------------------------------------------
# Induced loose adjunctions
# ----------------------------------------------------------------------


@dataclass(frozen=True)
class ResolutionLooseAdjunction:
    """
    Loose adjunction C(ℓ,r) ⊣ E(j,t) induced by a resolution.

    Attributes:
        adjunction: Legs, unit and counit
        analysis: Framing verdict on the adjunction
        metadata: Resolution metadata, extended by the construction that built it
        details: Summary line
        witness: Witness the construction registered, if any
    """

    adjunction: LooseAdjunctionData
    analysis: FramingReport
    metadata: ResolutionMetadata
    details: str
    witness: Any = None


def loose_adjunction_from_resolution(resolution: ResolutionData) -> ResolutionLooseAdjunction:
    monad = resolution.monad
    adjunction = LooseAdjunctionData(
        left=resolution.apex,
        right=monad.loose_cell,
        unit=monad.unit,
        counit=monad.extension,
    )
    analysis = analyze_loose_adjunction(resolution.equipment, adjunction)
    return ResolutionLooseAdjunction(
        adjunction=adjunction,
        analysis=analysis,
        metadata=resolution.metadata,
        details=f"{analysis.details} {resolution.metadata.summary()}".strip(),
    )


def _register(resolution: ResolutionData, kind: str, witness: Any) -> ResolutionLooseAdjunction:
    base = loose_adjunction_from_resolution(resolution)
    metadata = base.metadata.extend(**{kind: (witness,)})
    return replace(
        base,
        metadata=metadata,
        details=f"{base.analysis.details} {metadata.summary()}".strip(),
        witness=witness,
    )


def precompose_loose_adjunction(
    resolution: ResolutionData,
    tight_cell: VerticalBoundary,
    comparison: Optional[Equipment2Cell] = None,
    details: str = "Precomposition along the supplied tight cell.",
) -> ResolutionLooseAdjunction:
    witness = ResolutionPrecompositionWitness(
        tight_cell=tight_cell,
        comparison=comparison or resolution.comparison.forward,
        details=details,
    )
    return _register(resolution, "precompositions", witness)


def paste_loose_adjunction_along_resolution(
    resolution: ResolutionData,
    inner: Equipment2Cell,
    outer: Equipment2Cell,
    details: str = "Pasting of the supplied inner and outer triangles.",
) -> ResolutionLooseAdjunction:
    return _register(resolution, "pastings", ResolutionPastingWitness(inner=inner, outer=outer, details=details))


def postcompose_loose_adjunction_along_fully_faithful(
    resolution: ResolutionData,
    right_leg: VerticalBoundary,
    summary: str = "Fully faithful right leg postcomposition.",
) -> ResolutionLooseAdjunction:
    return _register(resolution, "fully_faithful", ResolutionFullyFaithfulWitness(right_leg=right_leg, summary=summary))


def compose_loose_adjunction_resolutely(
    resolution: ResolutionData,
    left_leg: VerticalBoundary,
    right_adjoint: VerticalBoundary,
    details: str = "Resolute pair.",
) -> ResolutionLooseAdjunction:
    witness = ResolutionResoluteWitness(left_leg=left_leg, right_adjoint=right_adjoint, details=details)
    return _register(resolution, "resolute", witness)


def transport_loose_adjunction_along_left_adjoint(
    resolution: ResolutionData,
    left_adjoint: VerticalBoundary,
    transported: Optional[RelativeMonadData] = None,
    monad_morphism: Optional[Equipment2Cell] = None,
    details: str = "Transport along a left relative adjoint.",
) -> ResolutionLooseAdjunction:
    witness = ResolutionTransportWitness(
        left_adjoint=left_adjoint,
        transported=transported or resolution.monad,
        monad_morphism=monad_morphism or resolution.comparison.forward,
        details=details,
    )
    return _register(resolution, "transports", witness)


# ----------------------------------------------------------------------
# Loose monad identification (Corollary 5.28)
# ----------------------------------------------------------------------


def loose_monad_from_resolution(resolution: ResolutionData) -> LooseMonadComparisonReport:
    equality = equality_for(resolution.equipment)
    loose_cell, apex = resolution.monad.loose_cell, resolution.apex
    issues: List[str] = []

    if not equality(apex.from_obj, resolution.inclusion.from_obj):
        issues.append("Loose monad arrow should start at the resolution domain.")
    if not equality(loose_cell.from_obj, apex.from_obj):
        issues.append("Relative monad loose arrow should originate where the resolution apex does.")
    if not equality(loose_cell.to_obj, apex.to_obj):
        issues.append("Relative monad loose arrow should land where the resolution apex does.")

    if issues:
        return LooseMonadComparisonReport(
            holds=False, issues=issues, details=f"Loose monad extraction issues: {'; '.join(issues)}"
        )
    return LooseMonadComparisonReport(
        holds=True,
        issues=[],
        details=f"Loose monad induced from the resolution coincides with E(j,t). {resolution.metadata.summary()}",
        induced=loose_cell,
    )


def _frame_and_boundary_issues(
    resolution: ResolutionData, monad: RelativeMonadData, metadata: ResolutionMetadata, issues: List[str]
) -> None:
    equality = equality_for(resolution.equipment)
    apex_frame = frame_from_proarrow(resolution.apex)
    monad_frame = frame_from_proarrow(monad.loose_cell)

    for index, witness in enumerate(metadata.precompositions):
        label = f"Precomposition comparison {index}"
        frames_coincide(equality, witness.comparison.source, apex_frame, f"{label} source", issues)
        frames_coincide(equality, witness.comparison.target, monad_frame, f"{label} target", issues)
        if not vertical_boundaries_equal(equality, witness.comparison.boundaries.left, resolution.inclusion):
            issues.append(f"{label} must start along the resolution inclusion boundary.")
        if not vertical_boundaries_equal(equality, witness.comparison.boundaries.right, monad.carrier):
            issues.append(f"{label} must land in the relative monad carrier boundary.")

    for index, witness in enumerate(metadata.pastings):
        label = f"Pasting witness {index}"
        frames_coincide(equality, witness.inner.source, apex_frame, f"{label} inner source", issues)
        frames_coincide(equality, witness.outer.target, monad_frame, f"{label} outer target", issues)
        if not vertical_boundaries_equal(equality, witness.inner.boundaries.right, monad.carrier):
            issues.append(f"{label} inner triangle must land in the relative monad carrier boundary.")
        if not vertical_boundaries_equal(equality, witness.outer.boundaries.right, monad.carrier):
            issues.append(f"{label} outer triangle must land in the relative monad carrier boundary.")
        if not vertical_boundaries_equal(equality, witness.inner.boundaries.right, witness.outer.boundaries.left):
            issues.append(f"{label} requires the inner right boundary to match the outer left boundary.")

    for index, witness in enumerate(metadata.fully_faithful):
        if not equality(witness.right_leg.to_obj, monad.carrier.to_obj):
            issues.append(
                f"Fully faithful postcomposition witness {index} should land where the relative monad carrier does."
            )

    for index, witness in enumerate(metadata.resolute):
        if not equality(witness.left_leg.to_obj, witness.right_adjoint.from_obj):
            issues.append(f"Resolute-composite witness {index} must feed the left leg into the right adjoint.")

    for index, witness in enumerate(metadata.transports):
        label = f"Left-adjoint transport witness {index}"
        transported_frame = frame_from_proarrow(witness.transported.loose_cell)
        morphism = witness.monad_morphism
        frames_coincide(equality, morphism.source, transported_frame, f"{label} monad morphism source", issues)
        frames_coincide(equality, morphism.target, monad_frame, f"{label} monad morphism target", issues)
        if not vertical_boundaries_equal(equality, morphism.boundaries.left, witness.transported.root):
            issues.append(f"{label} monad morphism must begin at the transported monad root.")
        if not vertical_boundaries_equal(equality, morphism.boundaries.right, monad.carrier):
            issues.append(f"{label} monad morphism must land in the relative monad carrier boundary.")
        if not equality(witness.transported.loose_cell.to_obj, resolution.apex.to_obj):
            issues.append(f"{label} transported loose arrow must target the resolution apex codomain.")


def check_loose_monad_isomorphism(
    resolution: ResolutionData, monad: Optional[RelativeMonadData] = None
) -> PendingReport:
    """Compare the loose monad induced by the resolution with E(j,-)T through every recorded witness."""
    monad = monad or resolution.monad
    base = check_resolution_of_relative_monad(resolution, monad)
    adjunction = loose_adjunction_from_resolution(resolution)
    loose_monad = loose_monad_from_resolution(resolution)
    metadata = adjunction.metadata

    issues = list(base.issues) + list(loose_monad.issues)
    if not adjunction.analysis.holds:
        issues.append("Loose adjunction derived from the resolution must satisfy its triangle identities.")
    _frame_and_boundary_issues(resolution, monad, metadata, issues)

    coherence = metadata.counts()
    validated = ", ".join(f"{count} {kind}" for kind, count in coherence.items() if count)
    logger.debug(f"loose monad isomorphism: {len(issues)} issue(s)")
    return structural_report(
        issues,
        (
            "Loose monad induced by the resolution is isomorphic to E(j,-)T via the recorded comparison witnesses."
            + (f" Validated witnesses: {validated}." if validated else "")
        ),
        "Loose monad comparison",
        witness=resolution,
        comparison=resolution.comparison,
        loose_monad=loose_monad,
        adjunction=adjunction,
        metadata=metadata,
        coherence=coherence,
    )


def identify_loose_monad_from_resolution(
    resolution: ResolutionData, monad: Optional[RelativeMonadData] = None
) -> PendingReport:
    report = check_loose_monad_isomorphism(resolution, monad)
    return replace(report, details=f"Loose monad of the resolution identified with E(j,-)T. {report.details}")


def check_identity_unit_for_relative_adjunction(
    equipment: VirtualEquipment,
    left: VerticalBoundary,
    right: VerticalBoundary,
    unit: Equipment2Cell,
    details: str = "",
) -> PendingReport:
    """
    Identity-unit criterion (Corollary 5.32): the unit is framed between the
    legs; when the legs coincide the induced j-monads coincide too.
    """
    equality = equality_for(equipment)
    issues: List[str] = []

    if not vertical_boundaries_equal(equality, unit.boundaries.left, left):
        issues.append("Unit 2-cell must use the supplied left leg as its left boundary.")
    if not vertical_boundaries_equal(equality, unit.boundaries.right, right):
        issues.append("Unit 2-cell must use the supplied right leg as its right boundary.")
    if not equality(unit.source.left_boundary, left.from_obj):
        issues.append("Unit source frame must originate at the left leg domain.")
    if not equality(unit.source.right_boundary, left.to_obj):
        issues.append("Unit source frame must land at the left leg codomain.")
    if not equality(unit.target.left_boundary, right.from_obj):
        issues.append("Unit target frame must originate at the right leg domain.")
    if not equality(unit.target.right_boundary, right.to_obj):
        issues.append("Unit target frame must land at the right leg codomain.")

    coincide = not issues and vertical_boundaries_equal(equality, left, right)
    success = (
        "Identity-unit criterion holds; the induced j-monads coincide."
        if coincide
        else "Identity-unit criterion holds; the induced j-monads need comparison data to coincide."
    )
    return structural_report(
        issues,
        f"{success} {details}".strip(),
        "Identity-unit criterion",
        witness=unit,
        monads_coincide=coincide,
    )


# ----------------------------------------------------------------------
# The category of resolutions
# ----------------------------------------------------------------------


MorphismEquality = Callable[[ResolutionMorphism, ResolutionMorphism], bool]


class ResolutionCategory:
    """
    Res(T): resolutions of a relative monad and their morphisms.

    Identities are built once per object. Every composite is recorded, so
    hom() also lists composites formed after construction.
    """

    def __init__(
        self,
        objects: Sequence[ResolutionData],
        identity: Callable[[ResolutionData], ResolutionMorphism],
        compose: Callable[[ResolutionMorphism, ResolutionMorphism], ResolutionMorphism],
        morphisms: Sequence[ResolutionMorphism] = (),
        equal_morphisms: Optional[MorphismEquality] = None,
    ):
        self.objects = tuple(objects)
        self.morphisms: List[ResolutionMorphism] = list(morphisms)
        self.equal_morphisms: MorphismEquality = equal_morphisms or (lambda left, right: left is right)
        self._identity = identity
        self._compose = compose
        self._identities: Dict[int, ResolutionMorphism] = {}
        for obj in self.objects:
            self.id(obj)

    def id(self, obj: ResolutionData) -> ResolutionMorphism:
        existing = self._identities.get(id(obj))
        if existing is not None:
            return existing
        identity = self._identity(obj)
        if identity.source is not obj or identity.target is not obj:
            raise ValueError("Identity builder must produce a morphism from and to the supplied resolution.")
        self._identities[id(obj)] = identity
        self._record(identity)
        return identity

    def compose(self, g: ResolutionMorphism, f: ResolutionMorphism) -> ResolutionMorphism:
        if f.target is not g.source:
            raise ValueError("Resolution morphisms compose only when codomain and domain match.")
        composite = self._compose(g, f)
        if composite.source is not f.source or composite.target is not g.target:
            raise ValueError("Composite must map from the first domain to the second codomain.")
        self._record(composite)
        return composite

    def _record(self, morphism: ResolutionMorphism) -> None:
        if not any(existing is morphism for existing in self.morphisms):
            self.morphisms.append(morphism)

    def hom(self, source: ResolutionData, target: ResolutionData) -> List[ResolutionMorphism]:
        return [morphism for morphism in self.morphisms if morphism.source is source and morphism.target is target]

    def is_identity(self, morphism: ResolutionMorphism) -> bool:
        return self.equal_morphisms(morphism, self.id(morphism.source))

    @property
    def metadata(self) -> ResolutionMetadata:
        """Witnesses collected from every object and morphism, each listed once."""
        collected: Dict[str, List[Any]] = {kind: [] for kind in WITNESS_KINDS}
        seen: Dict[str, set] = {kind: set() for kind in WITNESS_KINDS}
        for owner in list(self.objects) + self.morphisms:
            for kind in WITNESS_KINDS:
                for witness in getattr(owner.metadata, kind):
                    if id(witness) not in seen[kind]:
                        seen[kind].add(id(witness))
                        collected[kind].append(witness)
        return ResolutionMetadata().extend(**collected)


def category_of_resolutions(
    objects: Sequence[ResolutionData],
    identity: Callable[[ResolutionData], ResolutionMorphism],
    compose: Callable[[ResolutionMorphism, ResolutionMorphism], ResolutionMorphism],
    morphisms: Sequence[ResolutionMorphism] = (),
    equal_morphisms: Optional[MorphismEquality] = None,
) -> ResolutionCategory:
    return ResolutionCategory(objects, identity, compose, morphisms, equal_morphisms)


def describe_identity_resolution_morphism(resolution: ResolutionData) -> ResolutionMorphism:
    return ResolutionMorphism(
        source=resolution,
        target=resolution,
        tight=resolution.inclusion,
        loose=resolution.apex,
        comparison=resolution.comparison,
        metadata=resolution.metadata,
    )


def describe_singleton_resolution_category(resolution: ResolutionData) -> ResolutionCategory:
    """Res(T) on one resolution whose only morphism is its identity."""
    identity = describe_identity_resolution_morphism(resolution)
    return category_of_resolutions(
        objects=[resolution],
        identity=lambda obj: identity,
        compose=lambda g, f: identity,
        morphisms=[identity],
    )


def check_resolution_category_laws(category: ResolutionCategory) -> PendingReport:
    issues: List[str] = []
    for index, morphism in enumerate(list(category.morphisms)):
        left = category.compose(category.id(morphism.target), morphism)
        right = category.compose(morphism, category.id(morphism.source))
        if not category.equal_morphisms(left, morphism):
            issues.append(f"Left identity law failed for morphism {index}.")
        if not category.equal_morphisms(right, morphism):
            issues.append(f"Right identity law failed for morphism {index}.")

    logger.debug(f"resolution category laws: {len(issues)} issue(s)")
    return structural_report(
        issues,
        "Resolution category satisfies identity laws for all registered morphisms.",
        "Resolution category",
        witness=category,
    )


@dataclass(frozen=True)
class ResolutionBranchReport:
    holds: bool
    count: int
    issues: List[str]
    details: str


_BRANCHES = (
    ("precomposition", "precompositions", "Precomposition"),
    ("pasting", "pastings", "Pasting"),
    ("resolute_composition", "resolute", "Resolute composition"),
    ("fully_faithful_postcomposition", "fully_faithful", "Fully faithful postcomposition"),
    ("left_adjoint_transport", "transports", "Left-adjoint transport"),
)


def check_relative_adjunction_precomposition(metadata: ResolutionMetadata) -> PendingReport:
    """Every construction on resolutions must be backed by at least one witness."""
    issues: List[str] = []
    branches: Dict[str, ResolutionBranchReport] = {}
    for name, kind, label in _BRANCHES:
        count = len(getattr(metadata, kind))
        branch_issues = [] if count else [f"{label} witnesses were not supplied."]
        branches[name] = ResolutionBranchReport(
            holds=not branch_issues,
            count=count,
            issues=branch_issues,
            details=f"{label} witnesses available: {count}." if count else branch_issues[0],
        )
        issues.extend(branch_issues)

    logger.debug(f"relative adjunction precomposition suite: {len(issues)} issue(s)")
    return structural_report(
        issues,
        "Precomposition, pasting, resolute composition, fully faithful postcomposition "
        "and left-adjoint transport witnesses are all available.",
        "Relative adjunction precomposition suite",
        witness=metadata,
        **branches,
    )
