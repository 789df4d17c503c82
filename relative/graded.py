"""
Graded morphisms of relative algebras, the restriction functor to Street
actions and indexed families of algebras.

Graded morphisms are recorded as red and green composites pasted from the
algebra actions and compared with compare_street_composites, exactly like
the Street action laws. Everything here stays pending once the structure
checks out: the graded coherence itself is beyond the evidence model.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from equipment.core import Equipment2Cell, RestrictionResult, equality_for
from equipment.framing import collect_report_issues, ensure_boundary_reuse
from equipment.reports import PendingReport, pending_report

from .algebras import (
    RelativeAlgebraMorphismPresentation,
    RelativeAlgebraPresentation,
    analyze_relative_algebra_framing,
    analyze_relative_algebra_morphism_compatibility,
    describe_identity_relative_algebra_morphism,
)
from .monads import RelativeMonadData
from .street import (
    RelativeStreetActionData,
    analyze_relative_algebra_street_action_bridge,
    compare_street_composites,
    describe_relative_algebra_street_action_bridge,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RelativeAlgebraGradedMorphismWitness:
    presentation: RelativeAlgebraMorphismPresentation
    red_composite: Equipment2Cell
    green_composite: Equipment2Cell


@dataclass(frozen=True)
class RelativeAlgebraGradedExtensionWitness:
    presentation: RelativeAlgebraPresentation
    red_composite: Equipment2Cell
    green_composite: Equipment2Cell


@dataclass(frozen=True)
class RelativeAlgebraRestrictionFunctorWitness:
    """
    Restriction of algebras to Street actions along j.

    Attributes:
        presentation: Algebra being restricted
        street_action: Street action the algebra restricts to
        restriction: Left restriction of E(j,t) along j, when the equipment has it
    """

    presentation: RelativeAlgebraPresentation
    street_action: RelativeStreetActionData
    restriction: Optional[RestrictionResult]


@dataclass(frozen=True)
class RelativeAlgebraIndexedFamilyWitness:
    """
    Algebras indexed over a base, one fibre per index.

    Attributes:
        monad: Monad every fibre is an algebra for
        fibres: One presentation per index
        restriction_morphisms: Reindexing maps between recorded fibres
    """

    monad: RelativeMonadData
    fibres: Tuple[RelativeAlgebraPresentation, ...]
    restriction_morphisms: Tuple[RelativeAlgebraMorphismPresentation, ...] = ()


# ----------------------------------------------------------------------
# Graded morphisms
# ----------------------------------------------------------------------


def describe_relative_algebra_graded_morphism(
    presentation: RelativeAlgebraMorphismPresentation,
) -> RelativeAlgebraGradedMorphismWitness:
    return RelativeAlgebraGradedMorphismWitness(
        presentation=presentation,
        red_composite=presentation.morphism,
        green_composite=presentation.morphism,
    )


def analyze_relative_algebra_graded_morphism(witness: RelativeAlgebraGradedMorphismWitness) -> PendingReport:
    presentation = witness.presentation
    morphism = presentation.morphism
    equality = equality_for(presentation.source.monad.equipment)
    issues: List[str] = []

    compatibility = analyze_relative_algebra_morphism_compatibility(presentation)
    collect_report_issues("Algebra morphism", compatibility, issues)
    if witness.red_composite.boundaries.left is not morphism.boundaries.left:
        issues.append(
            "Graded morphism red composite left boundary must reuse the supplied algebra morphism presentation."
        )
    if witness.green_composite.boundaries.right is not morphism.boundaries.right:
        issues.append(
            "Graded morphism green composite right boundary must reuse the supplied algebra morphism presentation."
        )
    comparison = compare_street_composites(
        equality, witness.red_composite, witness.green_composite, "Graded morphism"
    )
    issues.extend(comparison.issues)

    logger.debug(f"relative algebra graded morphism: {len(issues)} issue(s)")
    return pending_report(
        issues,
        "Graded morphism composites share their frames; graded coherence remains pending.",
        "Graded algebra morphism",
        witness=witness,
        comparison=comparison,
        compatibility=compatibility,
    )


def describe_relative_algebra_graded_extension(
    presentation: RelativeAlgebraPresentation,
) -> RelativeAlgebraGradedExtensionWitness:
    identity = describe_identity_relative_algebra_morphism(presentation).morphism
    return RelativeAlgebraGradedExtensionWitness(
        presentation=presentation, red_composite=identity, green_composite=identity
    )


def analyze_relative_algebra_graded_extension(witness: RelativeAlgebraGradedExtensionWitness) -> PendingReport:
    presentation = witness.presentation
    carrier = presentation.algebra.carrier
    equality = equality_for(presentation.monad.equipment)
    issues: List[str] = []

    collect_report_issues("Algebra framing", analyze_relative_algebra_framing(presentation), issues)
    ensure_boundary_reuse(
        witness.red_composite.boundaries.left, carrier, "Graded extension red composite left boundary", issues
    )
    ensure_boundary_reuse(
        witness.green_composite.boundaries.right, carrier, "Graded extension green composite right boundary", issues
    )
    comparison = compare_street_composites(
        equality, witness.red_composite, witness.green_composite, "Graded extension"
    )
    issues.extend(comparison.issues)

    logger.debug(f"relative algebra graded extension: {len(issues)} issue(s)")
    return pending_report(
        issues,
        "Graded extension composites are framed on the algebra carrier; graded coherence remains pending.",
        "Graded extension morphism",
        witness=witness,
        comparison=comparison,
    )


# ----------------------------------------------------------------------
# Restriction functor and indexed families
# ----------------------------------------------------------------------


def describe_relative_algebra_restriction_functor(
    presentation: RelativeAlgebraPresentation,
) -> RelativeAlgebraRestrictionFunctorWitness:
    monad = presentation.monad
    return RelativeAlgebraRestrictionFunctorWitness(
        presentation=presentation,
        street_action=describe_relative_algebra_street_action_bridge(presentation),
        restriction=monad.equipment.restrict_left(monad.root.tight, monad.loose_cell),
    )


def analyze_relative_algebra_restriction_functor(
    presentation: RelativeAlgebraPresentation, witness: RelativeAlgebraRestrictionFunctorWitness
) -> PendingReport:
    issues: List[str] = []

    if witness.presentation is not presentation:
        issues.append("Restriction functor witness must reuse the supplied algebra presentation.")
    bridge = analyze_relative_algebra_street_action_bridge(presentation, witness.street_action)
    collect_report_issues("Street action bridge", bridge, issues)
    if witness.street_action.carrier is not presentation.algebra.carrier:
        issues.append("Restriction functor Street action carrier must reuse the recorded relative algebra carrier.")
    if witness.restriction is None:
        issues.append("Restriction functor requires the equipment to restrict E(j,t) along the root j.")

    logger.debug(f"relative algebra restriction functor: {len(issues)} issue(s)")
    return pending_report(
        issues,
        "Algebra restricts to a Street action along j; functoriality on morphisms remains pending.",
        "Restriction functor",
        witness=witness,
        bridge=bridge,
    )


def describe_relative_algebra_indexed_family_witness(
    monad: RelativeMonadData, presentation: RelativeAlgebraPresentation
) -> RelativeAlgebraIndexedFamilyWitness:
    """Constant family: one fibre reindexed along its identity morphism."""
    return RelativeAlgebraIndexedFamilyWitness(
        monad=monad,
        fibres=(presentation,),
        restriction_morphisms=(describe_identity_relative_algebra_morphism(presentation),),
    )


def analyze_relative_algebra_indexed_family(witness: RelativeAlgebraIndexedFamilyWitness) -> PendingReport:
    issues: List[str] = []

    if not witness.fibres:
        issues.append("Indexed family witness must include at least one fibre presentation.")
    for index, fibre in enumerate(witness.fibres):
        if fibre.monad is not witness.monad:
            issues.append(f"Indexed family fibre #{index} must be built over the supplied relative monad.")
        collect_report_issues(f"Fibre #{index} framing", analyze_relative_algebra_framing(fibre), issues)

    for index, morphism in enumerate(witness.restriction_morphisms):
        source_known = any(fibre is morphism.source for fibre in witness.fibres)
        target_known = any(fibre is morphism.target for fibre in witness.fibres)
        if not (source_known and target_known):
            issues.append(f"Indexed family restriction morphism #{index} must relate recorded fibres.")
        collect_report_issues(
            f"Restriction morphism #{index}", analyze_relative_algebra_morphism_compatibility(morphism), issues
        )

    logger.debug(f"relative algebra indexed family: {len(issues)} issue(s)")
    return pending_report(
        issues,
        "Indexed family fibres are algebras for the same monad; reindexing coherence remains pending.",
        "Indexed algebra family",
        witness=witness,
    )
