"""
Oracle catalogues for the relative layer.

Each catalogue loads its YAML law registry (relative/laws/*.yaml, or the
directory named by EQUIPMENT_LAW_REGISTRY_DIR) and pairs every registered law
with the verdict of the analyzer that checks it. Laws with no analyzer yet
produce a pending oracle so the catalogue always covers the whole registry.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, List, Optional

from equipment.config import EquipmentConfig, get_config
from equipment.core import identity_vertical_boundary
from equipment.laws import LawRegistry, load_law_registry
from equipment.oracles import OracleResult, oracle_from_report, pending_oracle
from equipment.reports import FramingReport

from .adjunctions import (
    RelativeAdjunctionData,
    analyze_relative_adjunction_colimit_preservation,
    analyze_relative_adjunction_framing,
    analyze_relative_adjunction_hom_isomorphism,
    analyze_relative_adjunction_left_morphism,
    analyze_relative_adjunction_pointwise_left_lift,
    analyze_relative_adjunction_precomposition,
    analyze_relative_adjunction_right_extension,
    analyze_relative_adjunction_right_morphism,
    analyze_relative_adjunction_strict_morphism,
    analyze_relative_adjunction_unit_counit,
    describe_identity_relative_adjunction_left_morphism,
    describe_identity_relative_adjunction_right_morphism,
    describe_identity_relative_adjunction_strict_morphism,
    describe_trivial_relative_adjunction_colimit_preservation,
    describe_trivial_relative_adjunction_left_extension,
    describe_trivial_relative_adjunction_pointwise_left_lift,
    describe_trivial_relative_adjunction_unit_counit,
)
from .algebras import (
    RelativeEilenbergMoorePresentation,
    RelativeKleisliPresentation,
    analyze_relative_adjunction_left_opalgebra,
    analyze_relative_adjunction_right_algebra,
    analyze_relative_algebra_canonical_action,
    analyze_relative_algebra_framing,
    analyze_relative_algebra_identity_root_equivalence,
    analyze_relative_algebra_mediating_tight_cell,
    analyze_relative_algebra_morphism_compatibility,
    analyze_relative_algebra_resolution,
    analyze_relative_algebra_transport,
    analyze_relative_eilenberg_moore_universal_property,
    analyze_relative_kleisli_universal_property,
    analyze_relative_opalgebra_canonical_action,
    analyze_relative_opalgebra_carrier_triangle,
    analyze_relative_opalgebra_extension_rectangle,
    analyze_relative_opalgebra_extraordinary_transformation,
    analyze_relative_opalgebra_framing,
    analyze_relative_opalgebra_morphism_compatibility,
    analyze_relative_opalgebra_resolution,
    analyze_relative_opalgebra_transport,
    analyze_relative_partial_left_adjoint_section,
    analyze_relative_partial_right_adjoint_functor,
    describe_identity_relative_algebra_morphism,
    describe_identity_relative_opalgebra_morphism,
    describe_relative_adjunction_left_opalgebra,
    describe_relative_adjunction_right_algebra,
    describe_relative_algebra_canonical_action,
    describe_relative_algebra_identity_root_witness,
    describe_relative_algebra_resolution_witness,
    describe_relative_opalgebra_canonical_action,
    describe_relative_opalgebra_diagrams,
    describe_relative_opalgebra_extraordinary_transformation,
    describe_relative_opalgebra_resolution,
    describe_relative_partial_left_adjoint,
    describe_relative_partial_right_adjoint,
)
from .comonads import (
    RelativeComonadData,
    analyze_relative_comonad_corepresentability,
    analyze_relative_comonad_framing,
    analyze_relative_comonad_identity_reduction,
)
from .composition import (
    analyze_relative_adjunction_composition,
    analyze_relative_monad_composition,
    relative_monad_from_loose_monoid,
    relative_monad_to_loose_monoid,
)
from .graded import (
    analyze_relative_algebra_graded_extension,
    analyze_relative_algebra_graded_morphism,
    analyze_relative_algebra_indexed_family,
    analyze_relative_algebra_restriction_functor,
    describe_relative_algebra_graded_extension,
    describe_relative_algebra_graded_morphism,
    describe_relative_algebra_indexed_family_witness,
    describe_relative_algebra_restriction_functor,
)
from .monads import (
    RelativeMonadData,
    analyze_relative_monad_extension_associativity,
    analyze_relative_monad_framing,
    analyze_relative_monad_identity_reduction,
    analyze_relative_monad_representability,
    analyze_relative_monad_root_identity,
    analyze_relative_monad_unit_compatibility,
    relative_monad_from_equipment,
)
from .representable import (
    analyze_relative_monad_representable_recovery,
    analyze_relative_monad_skew_monoid_bridge,
    describe_relative_monad_skew_monoid_bridge,
)
from .resolution import (
    analyze_relative_monad_resolution,
    describe_relative_monad_resolution,
    relative_monad_from_adjunction,
)
from .resolution_category import (
    ResolutionCategory,
    ResolutionData,
    check_identity_unit_for_relative_adjunction,
    check_loose_monad_isomorphism,
    check_relative_adjunction_precomposition,
    check_resolution_category_laws,
    check_resolution_of_relative_monad,
)
from .street import (
    analyze_relative_algebra_street_action_bridge,
    analyze_relative_algebra_street_action_equivalence,
    analyze_relative_canonical_street_action,
    analyze_relative_loose_adjunction_action,
    analyze_relative_loose_adjunction_right_action,
    analyze_relative_opalgebra_representable_action_bridge,
    analyze_relative_opalgebra_right_action,
    analyze_relative_opalgebra_street_action_equivalence,
    analyze_relative_street_action,
    analyze_relative_street_action_coherence,
    analyze_relative_street_action_from_monoid,
    analyze_relative_street_action_homomorphism,
    analyze_relative_street_hom_category,
    analyze_relative_street_representability_upgrade,
    analyze_relative_street_representable_restriction,
    analyze_relative_street_representable_submulticategory,
    describe_identity_relative_street_action_homomorphism,
    describe_relative_algebra_street_action_bridge,
    describe_relative_algebra_street_action_equivalence,
    describe_relative_canonical_street_action,
    describe_relative_loose_adjunction_action,
    describe_relative_loose_adjunction_right_action,
    describe_relative_opalgebra_representable_action_bridge,
    describe_relative_opalgebra_right_action,
    describe_relative_opalgebra_street_action_equivalence,
    describe_relative_street_action,
    describe_relative_street_action_coherence,
    describe_relative_street_action_from_monoid,
    describe_relative_street_hom_category,
    describe_relative_street_representability_upgrade,
    describe_relative_street_representable_restriction,
    describe_relative_street_representable_submulticategory,
)

logger = logging.getLogger(__name__)

LAW_DIR = Path(__file__).parent / "laws"

MONAD_LAWS = "relative_monad"
COMONAD_LAWS = "relative_comonad"
ADJUNCTION_LAWS = "relative_adjunction"
COMPOSITION_LAWS = "relative_composition"
ALGEBRA_LAWS = "relative_algebra"
RESOLUTION_LAWS = "relative_resolution"


def load_relative_laws(name: str, config: Optional[EquipmentConfig] = None) -> LawRegistry:
    """Load one of the relative law registries, honouring the configured override directory."""
    config = config or get_config()
    return load_law_registry(config.registry_dir(LAW_DIR) / f"{name}.yaml")


def _guarded(laws: LawRegistry, key: str, build: Callable[[], Any]) -> OracleResult:
    """Run an analyzer whose witness builder may refuse the supplied equipment."""
    descriptor = laws[key]
    try:
        report = build()
    except ValueError as exc:
        logger.warning(f"{descriptor.registry_path}: witness construction failed: {exc}")
        return OracleResult(
            holds=False,
            pending=False,
            registry_path=descriptor.registry_path,
            details=f"{descriptor.name} witness could not be constructed: {exc}",
            issues=[str(exc)],
        )
    return oracle_from_report(descriptor, report)


def _pending(laws: LawRegistry, covered: List[OracleResult]) -> List[OracleResult]:
    seen = {result.registry_path for result in covered}
    return [pending_oracle(descriptor) for descriptor in laws if descriptor.registry_path not in seen]


# ----------------------------------------------------------------------
# Relative monads
# ----------------------------------------------------------------------


def relative_monad_representability_oracle(
    monad: RelativeMonadData, laws: Optional[LawRegistry] = None
) -> OracleResult:
    if laws is None:
        laws = load_relative_laws(MONAD_LAWS)
    descriptor = laws["representable_loose_monoid"]
    construction = relative_monad_from_equipment(monad)
    if construction.representability is None:
        return oracle_from_report(descriptor, construction)
    return oracle_from_report(descriptor, analyze_relative_monad_representability(monad, construction.representability))


def relative_monad_representable_recovery_oracles(
    monad: RelativeMonadData, laws: Optional[LawRegistry] = None
) -> List[OracleResult]:
    """Skew-monoid bridge and representable recovery, which share one bridge witness."""
    if laws is None:
        laws = load_relative_laws(MONAD_LAWS)
    bridge = describe_relative_monad_skew_monoid_bridge(monad)
    results = [oracle_from_report(laws["skew_monoid_bridge"], analyze_relative_monad_skew_monoid_bridge(bridge))]
    descriptor = laws["representable_recovery"]
    if bridge.representability is None:
        results.append(oracle_from_report(descriptor, relative_monad_from_equipment(monad)))
    else:
        results.append(
            oracle_from_report(
                descriptor, analyze_relative_monad_representable_recovery(monad, bridge.representability, bridge)
            )
        )
    return results


def enumerate_relative_monad_oracles(monad: RelativeMonadData) -> List[OracleResult]:
    laws = load_relative_laws(MONAD_LAWS)
    framing = analyze_relative_monad_framing(monad)
    results = [
        oracle_from_report(laws["unit_framing"], framing),
        oracle_from_report(laws["extension_framing"], framing),
        oracle_from_report(laws["unit_compatibility"], analyze_relative_monad_unit_compatibility(monad)),
        oracle_from_report(laws["extension_associativity"], analyze_relative_monad_extension_associativity(monad)),
        oracle_from_report(laws["root_identity"], analyze_relative_monad_root_identity(monad)),
        relative_monad_representability_oracle(monad, laws),
        oracle_from_report(laws["identity_reduction"], analyze_relative_monad_identity_reduction(monad)),
    ]
    results.extend(relative_monad_representable_recovery_oracles(monad, laws))
    results.extend(_pending(laws, results))

    composition = load_relative_laws(COMPOSITION_LAWS)
    results.append(relative_monad_loose_monoid_oracle(monad, composition))
    results.append(relative_monad_resolution_oracle(monad, composition))

    logger.debug(f"relative monad oracles: {len(results)} result(s)")
    return results


# ----------------------------------------------------------------------
# Relative comonads
# ----------------------------------------------------------------------


def enumerate_relative_comonad_oracles(comonad: RelativeComonadData) -> List[OracleResult]:
    laws = load_relative_laws(COMONAD_LAWS)
    framing = analyze_relative_comonad_framing(comonad)
    results = [
        oracle_from_report(laws["counit_framing"], framing),
        oracle_from_report(laws["coextension_framing"], framing),
        oracle_from_report(laws["identity_reduction"], analyze_relative_comonad_identity_reduction(comonad)),
    ]

    descriptor = laws["corepresentable_loose_comonoid"]
    restriction = comonad.equipment.restrict_right(comonad.loose_cell, comonad.root.tight)
    if restriction is None or restriction.representability is None:
        message = "Right restriction B(1,j) did not produce a corepresentability witness for C(t,j)."
        results.append(
            oracle_from_report(
                descriptor,
                FramingReport(
                    holds=False,
                    issues=[message],
                    details=f"Relative comonad corepresentability issues: {message}",
                ),
            )
        )
    else:
        results.append(
            oracle_from_report(
                descriptor, analyze_relative_comonad_corepresentability(comonad, restriction.representability)
            )
        )

    results.extend(_pending(laws, results))
    logger.debug(f"relative comonad oracles: {len(results)} result(s)")
    return results


# ----------------------------------------------------------------------
# Composition and resolutions
# ----------------------------------------------------------------------


def relative_adjunction_composition_oracle(
    first: RelativeAdjunctionData, second: RelativeAdjunctionData, laws: Optional[LawRegistry] = None
) -> OracleResult:
    if laws is None:
        laws = load_relative_laws(COMPOSITION_LAWS)
    return oracle_from_report(laws["adjunction_composition"], analyze_relative_adjunction_composition(first, second))


def relative_monad_composition_oracle(
    first: RelativeMonadData, second: RelativeMonadData, laws: Optional[LawRegistry] = None
) -> OracleResult:
    if laws is None:
        laws = load_relative_laws(COMPOSITION_LAWS)
    return oracle_from_report(laws["monad_composition"], analyze_relative_monad_composition(first, second))


def relative_monad_loose_monoid_oracle(monad: RelativeMonadData, laws: Optional[LawRegistry] = None) -> OracleResult:
    if laws is None:
        laws = load_relative_laws(COMPOSITION_LAWS)
    report = relative_monad_from_loose_monoid(
        monad.equipment, monad.root, monad.carrier, relative_monad_to_loose_monoid(monad)
    )
    return oracle_from_report(laws["loose_monoid_representation"], report)


def relative_monad_resolution_oracle(monad: RelativeMonadData, laws: Optional[LawRegistry] = None) -> OracleResult:
    if laws is None:
        laws = load_relative_laws(COMPOSITION_LAWS)
    report = analyze_relative_monad_resolution(monad, describe_relative_monad_resolution(monad))
    return oracle_from_report(laws["resolution_definition"], report)


# ----------------------------------------------------------------------
# Relative adjunctions
# ----------------------------------------------------------------------


def enumerate_relative_adjunction_oracles(adjunction: RelativeAdjunctionData) -> List[OracleResult]:
    laws = load_relative_laws(ADJUNCTION_LAWS)
    equipment = adjunction.equipment

    induced = relative_monad_from_adjunction(adjunction)
    monad = induced.monad
    left_opalgebra = describe_relative_adjunction_left_opalgebra(adjunction, monad)
    right_algebra = describe_relative_adjunction_right_algebra(adjunction, monad)
    precomposition = identity_vertical_boundary(
        equipment, adjunction.root.from_obj, "Identity precomposition on the domain of the root."
    )

    results = [
        oracle_from_report(laws["framing"], analyze_relative_adjunction_framing(adjunction)),
        oracle_from_report(laws["hom_isomorphism_framing"], analyze_relative_adjunction_hom_isomorphism(adjunction)),
        oracle_from_report(
            laws["unit_counit_presentation"],
            analyze_relative_adjunction_unit_counit(
                adjunction, describe_trivial_relative_adjunction_unit_counit(adjunction)
            ),
        ),
        oracle_from_report(
            laws["left_morphism"],
            analyze_relative_adjunction_left_morphism(
                describe_identity_relative_adjunction_left_morphism(adjunction)
            ),
        ),
        oracle_from_report(
            laws["right_morphism"],
            analyze_relative_adjunction_right_morphism(
                describe_identity_relative_adjunction_right_morphism(adjunction)
            ),
        ),
        oracle_from_report(
            laws["strict_morphism"],
            analyze_relative_adjunction_strict_morphism(
                describe_identity_relative_adjunction_strict_morphism(adjunction)
            ),
        ),
        oracle_from_report(
            laws["precomposition"], analyze_relative_adjunction_precomposition(adjunction, precomposition)
        ),
        oracle_from_report(laws["resolution"], induced),
        oracle_from_report(
            laws["left_opalgebra"], analyze_relative_adjunction_left_opalgebra(adjunction, left_opalgebra)
        ),
        oracle_from_report(laws["right_algebra"], analyze_relative_adjunction_right_algebra(adjunction, right_algebra)),
        oracle_from_report(
            laws["opalgebra_transport"], analyze_relative_opalgebra_transport(adjunction, left_opalgebra)
        ),
        oracle_from_report(laws["algebra_transport"], analyze_relative_algebra_transport(adjunction, right_algebra)),
        oracle_from_report(
            laws["pointwise_left_lift"],
            analyze_relative_adjunction_pointwise_left_lift(
                adjunction, describe_trivial_relative_adjunction_pointwise_left_lift(adjunction)
            ),
        ),
        oracle_from_report(
            laws["right_extension"],
            analyze_relative_adjunction_right_extension(
                adjunction, describe_trivial_relative_adjunction_left_extension(adjunction)
            ),
        ),
        oracle_from_report(
            laws["colimit_preservation"],
            analyze_relative_adjunction_colimit_preservation(
                adjunction, describe_trivial_relative_adjunction_colimit_preservation(adjunction)
            ),
        ),
    ]
    results.extend(_pending(laws, results))

    logger.debug(f"relative adjunction oracles: {len(results)} result(s)")
    return results


# ----------------------------------------------------------------------
# Algebras, opalgebras and Street actions
# ----------------------------------------------------------------------


def enumerate_relative_algebra_oracles(
    kleisli: RelativeKleisliPresentation, eilenberg_moore: RelativeEilenbergMoorePresentation
) -> List[OracleResult]:
    """Every algebra, opalgebra and Street action law for the monad both presentations share."""
    laws = load_relative_laws(ALGEBRA_LAWS)
    monad = eilenberg_moore.monad
    if kleisli.monad is not monad:
        logger.warning("Kleisli and Eilenberg–Moore presentations are built over different relative monads")

    diagrams = describe_relative_opalgebra_diagrams(kleisli)
    resolution = describe_relative_monad_resolution(monad)

    results = [
        oracle_from_report(laws["algebra_framing"], analyze_relative_algebra_framing(eilenberg_moore)),
        oracle_from_report(
            laws["algebra_morphism"],
            analyze_relative_algebra_morphism_compatibility(
                describe_identity_relative_algebra_morphism(eilenberg_moore)
            ),
        ),
        oracle_from_report(laws["opalgebra_framing"], analyze_relative_opalgebra_framing(kleisli)),
        oracle_from_report(
            laws["opalgebra_morphism"],
            analyze_relative_opalgebra_morphism_compatibility(describe_identity_relative_opalgebra_morphism(kleisli)),
        ),
        oracle_from_report(
            laws["opalgebra_carrier_triangle"],
            analyze_relative_opalgebra_carrier_triangle(kleisli, diagrams.carrier_triangle),
        ),
        oracle_from_report(
            laws["opalgebra_extension_rectangle"],
            analyze_relative_opalgebra_extension_rectangle(kleisli, diagrams.extension_rectangle),
        ),
        oracle_from_report(laws["kleisli_universal"], analyze_relative_kleisli_universal_property(kleisli)),
        oracle_from_report(
            laws["eilenberg_moore_universal"], analyze_relative_eilenberg_moore_universal_property(eilenberg_moore)
        ),
        oracle_from_report(
            laws["mediating_tight_cell"], analyze_relative_algebra_mediating_tight_cell(eilenberg_moore)
        ),
        oracle_from_report(
            laws["algebra_resolution"],
            analyze_relative_algebra_resolution(describe_relative_algebra_resolution_witness(monad, eilenberg_moore)),
        ),
        oracle_from_report(
            laws["algebra_canonical_action"],
            analyze_relative_algebra_canonical_action(describe_relative_algebra_canonical_action(monad)),
        ),
        oracle_from_report(
            laws["opalgebra_canonical_action"],
            analyze_relative_opalgebra_canonical_action(describe_relative_opalgebra_canonical_action(monad)),
        ),
        oracle_from_report(
            laws["opalgebra_extraordinary_transformation"],
            analyze_relative_opalgebra_extraordinary_transformation(
                describe_relative_opalgebra_extraordinary_transformation(kleisli)
            ),
        ),
        oracle_from_report(
            laws["algebra_identity_root"],
            analyze_relative_algebra_identity_root_equivalence(
                describe_relative_algebra_identity_root_witness(eilenberg_moore)
            ),
        ),
        oracle_from_report(laws["algebra_transport"], analyze_relative_algebra_transport(resolution, eilenberg_moore)),
        oracle_from_report(laws["opalgebra_transport"], analyze_relative_opalgebra_transport(resolution, kleisli)),
        oracle_from_report(
            laws["street_action_data"], analyze_relative_street_action(monad, describe_relative_street_action(monad))
        ),
        _guarded(
            laws,
            "street_action_coherence",
            lambda: analyze_relative_street_action_coherence(monad, describe_relative_street_action_coherence(monad)),
        ),
        _guarded(
            laws,
            "street_action_homomorphism",
            lambda: analyze_relative_street_action_homomorphism(
                monad, describe_identity_relative_street_action_homomorphism(monad)
            ),
        ),
        _guarded(
            laws,
            "street_hom_category",
            lambda: analyze_relative_street_hom_category(monad, describe_relative_street_hom_category(monad)),
        ),
        oracle_from_report(
            laws["canonical_street_action"],
            analyze_relative_canonical_street_action(monad, describe_relative_canonical_street_action(monad)),
        ),
        oracle_from_report(
            laws["street_action_from_monoid"],
            analyze_relative_street_action_from_monoid(monad, describe_relative_street_action_from_monoid(monad)),
        ),
        oracle_from_report(
            laws["opalgebra_right_action"],
            analyze_relative_opalgebra_right_action(kleisli, describe_relative_opalgebra_right_action(kleisli)),
        ),
        oracle_from_report(
            laws["loose_adjunction_action"],
            analyze_relative_loose_adjunction_right_action(
                monad, describe_relative_loose_adjunction_right_action(monad)
            ),
        ),
        oracle_from_report(
            laws["loose_adjunction_street_action"],
            analyze_relative_loose_adjunction_action(monad, describe_relative_loose_adjunction_action(monad)),
        ),
        oracle_from_report(
            laws["representable_restriction"],
            analyze_relative_street_representable_restriction(
                monad, describe_relative_street_representable_restriction(monad)
            ),
        ),
        oracle_from_report(
            laws["algebra_street_bridge"],
            analyze_relative_algebra_street_action_bridge(
                eilenberg_moore, describe_relative_algebra_street_action_bridge(eilenberg_moore)
            ),
        ),
        oracle_from_report(
            laws["algebra_street_equivalence"],
            analyze_relative_algebra_street_action_equivalence(
                eilenberg_moore, describe_relative_algebra_street_action_equivalence(eilenberg_moore)
            ),
        ),
        oracle_from_report(
            laws["opalgebra_street_equivalence"],
            analyze_relative_opalgebra_street_action_equivalence(
                kleisli, describe_relative_opalgebra_street_action_equivalence(kleisli)
            ),
        ),
        oracle_from_report(
            laws["representability_upgrade"],
            analyze_relative_street_representability_upgrade(
                monad, describe_relative_street_representability_upgrade(monad)
            ),
        ),
        oracle_from_report(
            laws["representable_submulticategory"],
            analyze_relative_street_representable_submulticategory(
                monad, describe_relative_street_representable_submulticategory(monad)
            ),
        ),
        oracle_from_report(
            laws["representable_action_bridge"],
            analyze_relative_opalgebra_representable_action_bridge(
                kleisli, describe_relative_opalgebra_representable_action_bridge(kleisli)
            ),
        ),
        oracle_from_report(
            laws["graded_morphisms"],
            analyze_relative_algebra_graded_morphism(
                describe_relative_algebra_graded_morphism(describe_identity_relative_algebra_morphism(eilenberg_moore))
            ),
        ),
        oracle_from_report(
            laws["graded_extension_morphisms"],
            analyze_relative_algebra_graded_extension(describe_relative_algebra_graded_extension(eilenberg_moore)),
        ),
        oracle_from_report(
            laws["restriction_functor"],
            analyze_relative_algebra_restriction_functor(
                eilenberg_moore, describe_relative_algebra_restriction_functor(eilenberg_moore)
            ),
        ),
        oracle_from_report(
            laws["indexed_family"],
            analyze_relative_algebra_indexed_family(
                describe_relative_algebra_indexed_family_witness(monad, eilenberg_moore)
            ),
        ),
        oracle_from_report(
            laws["partial_right_adjoint_functor"],
            analyze_relative_partial_right_adjoint_functor(describe_relative_partial_right_adjoint(eilenberg_moore)),
        ),
        oracle_from_report(
            laws["opalgebra_resolution"],
            analyze_relative_opalgebra_resolution(describe_relative_opalgebra_resolution(kleisli)),
        ),
        oracle_from_report(
            laws["partial_left_adjoint_section"],
            analyze_relative_partial_left_adjoint_section(describe_relative_partial_left_adjoint(kleisli)),
        ),
    ]
    results.extend(_pending(laws, results))

    logger.debug(f"relative algebra oracles: {len(results)} result(s)")
    return results


# ----------------------------------------------------------------------
# The category of resolutions
# ----------------------------------------------------------------------


def enumerate_resolution_oracles(resolution: ResolutionData, category: ResolutionCategory) -> List[OracleResult]:
    """Resolution, loose monad, Res(T) and construction-suite laws for one resolution."""
    laws = load_relative_laws(RESOLUTION_LAWS)
    monad = resolution.monad
    results = [
        oracle_from_report(laws["resolution_witness"], check_resolution_of_relative_monad(resolution)),
        oracle_from_report(laws["loose_monad_identification"], check_loose_monad_isomorphism(resolution)),
        _guarded(laws, "category_identities", lambda: check_resolution_category_laws(category)),
        oracle_from_report(
            laws["precomposition_suite"], check_relative_adjunction_precomposition(category.metadata)
        ),
        oracle_from_report(
            laws["identity_unit_criterion"],
            check_identity_unit_for_relative_adjunction(
                resolution.equipment, monad.root, monad.carrier, monad.unit
            ),
        ),
    ]
    results.extend(_pending(laws, results))

    logger.debug(f"resolution oracles: {len(results)} result(s)")
    return results
