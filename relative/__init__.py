"""
Relative monads, comonads and adjunctions over a virtual equipment.

Re-exports the framing analyzers, the composite and universal-property
analyzers, the canonical witness builders and the oracle catalogues.
"""

from .adjunctions import (
    RelativeAdjunctionColimitPreservationData,
    RelativeAdjunctionData,
    RelativeAdjunctionHomIsomorphism,
    RelativeAdjunctionLeftMorphismData,
    RelativeAdjunctionPrecompositionReport,
    RelativeAdjunctionRightMorphismData,
    RelativeAdjunctionStrictMorphismData,
    RelativeAdjunctionStrictMorphismReport,
    RelativeAdjunctionUnitCounitPresentation,
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
    describe_trivial_relative_adjunction,
    describe_trivial_relative_adjunction_colimit_preservation,
    describe_trivial_relative_adjunction_left_extension,
    describe_trivial_relative_adjunction_pointwise_left_lift,
    describe_trivial_relative_adjunction_unit_counit,
)
from .algebras import (
    OrdinaryAlgebraData,
    RelativeAlgebraData,
    RelativeAlgebraIdentityRootWitness,
    RelativeAlgebraMediatingTightCell,
    RelativeAlgebraMorphismPresentation,
    RelativeAlgebraPresentation,
    RelativeAlgebraResolutionWitness,
    RelativeEilenbergMoorePresentation,
    RelativeKleisliPresentation,
    RelativeOpalgebraCarrierTriangle,
    RelativeOpalgebraData,
    RelativeOpalgebraDiagrams,
    RelativeOpalgebraExtensionRectangle,
    RelativeOpalgebraExtraordinaryTransformation,
    RelativeOpalgebraKappaWitness,
    RelativeOpalgebraMorphismPresentation,
    RelativeOpalgebraPresentation,
    RelativeOpalgebraResolutionWitness,
    RelativePartialLeftAdjointWitness,
    RelativePartialRightAdjointWitness,
    RelativeTightComparison,
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
    analyze_relative_opalgebra_kappa,
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
    describe_relative_algebra_mediating_tight_cell,
    describe_relative_algebra_resolution_witness,
    describe_relative_opalgebra_canonical_action,
    describe_relative_opalgebra_diagrams,
    describe_relative_opalgebra_extraordinary_transformation,
    describe_relative_opalgebra_kappa,
    describe_relative_opalgebra_resolution,
    describe_relative_partial_left_adjoint,
    describe_relative_partial_right_adjoint,
    describe_trivial_relative_eilenberg_moore,
    describe_trivial_relative_kleisli,
)
from .comonads import (
    RelativeComonadCorepresentabilityReport,
    RelativeComonadData,
    analyze_relative_comonad_corepresentability,
    analyze_relative_comonad_framing,
    analyze_relative_comonad_identity_reduction,
    describe_trivial_relative_comonad,
)
from .composition import (
    RelativeAdjunctionCompositionReport,
    RelativeMonadLooseMonoidBridgeReport,
    analyze_relative_adjunction_composition,
    analyze_relative_monad_composition,
    relative_monad_from_loose_monoid,
    relative_monad_to_loose_monoid,
)
from .graded import (
    RelativeAlgebraGradedExtensionWitness,
    RelativeAlgebraGradedMorphismWitness,
    RelativeAlgebraIndexedFamilyWitness,
    RelativeAlgebraRestrictionFunctorWitness,
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
    CategoryMonad,
    ExtensionAssociativityWitness,
    IdentityCollapseResult,
    RelativeMonadConstructionReport,
    RelativeMonadData,
    RelativeMonadLawAnalysis,
    RelativeMonadRepresentabilityReport,
    RootIdentityWitness,
    UnitCompatibilityWitness,
    analyze_relative_monad_extension_associativity,
    analyze_relative_monad_framing,
    analyze_relative_monad_identity_reduction,
    analyze_relative_monad_laws,
    analyze_relative_monad_representability,
    analyze_relative_monad_root_identity,
    analyze_relative_monad_unit_compatibility,
    describe_trivial_relative_monad,
    from_monad,
    relative_monad_from_equipment,
    to_monad_if_identity,
)
from .oracles import (
    enumerate_relative_adjunction_oracles,
    enumerate_relative_algebra_oracles,
    enumerate_relative_comonad_oracles,
    enumerate_relative_monad_oracles,
    enumerate_resolution_oracles,
    load_relative_laws,
    relative_adjunction_composition_oracle,
    relative_monad_composition_oracle,
    relative_monad_loose_monoid_oracle,
    relative_monad_representability_oracle,
    relative_monad_representable_recovery_oracles,
    relative_monad_resolution_oracle,
)
from .representable import (
    RelativeMonadSkewMonoidBridgeInput,
    analyze_relative_monad_representable_recovery,
    analyze_relative_monad_skew_monoid_bridge,
    describe_relative_monad_skew_monoid_bridge,
)
from .resolution import (
    LooseMonadComparisonReport,
    RelativeMonadResolutionReport,
    analyze_relative_monad_resolution,
    describe_relative_monad_resolution,
    relative_monad_from_adjunction,
)
from .resolution_category import (
    ResolutionBranchReport,
    ResolutionCategory,
    ResolutionComparison,
    ResolutionData,
    ResolutionFullyFaithfulWitness,
    ResolutionLooseAdjunction,
    ResolutionMetadata,
    ResolutionMorphism,
    ResolutionPastingWitness,
    ResolutionPrecompositionWitness,
    ResolutionResoluteWitness,
    ResolutionTransportWitness,
    category_of_resolutions,
    check_identity_unit_for_relative_adjunction,
    check_loose_monad_isomorphism,
    check_relative_adjunction_precomposition,
    check_resolution_category_laws,
    check_resolution_of_relative_monad,
    compose_loose_adjunction_resolutely,
    describe_identity_resolution,
    describe_identity_resolution_morphism,
    describe_singleton_resolution_category,
    identify_loose_monad_from_resolution,
    loose_adjunction_from_resolution,
    loose_monad_from_resolution,
    paste_loose_adjunction_along_resolution,
    postcompose_loose_adjunction_along_fully_faithful,
    precompose_loose_adjunction,
    transport_loose_adjunction_along_left_adjoint,
)
from .street import (
    RelativeAlgebraStreetActionEquivalenceWitness,
    RelativeOpalgebraStreetActionEquivalenceWitness,
    RelativeStreetActionCoherenceWitness,
    RelativeStreetActionData,
    RelativeStreetActionHomomorphismWitness,
    RelativeStreetHomCategoryWitness,
    RelativeStreetLooseAdjunctionRightActionWitness,
    RelativeStreetLooseAdjunctionWitness,
    RelativeStreetRepresentabilityUpgradeWitness,
    RelativeStreetRepresentableRestrictionWitness,
    RelativeStreetRepresentableSubmulticategoryWitness,
    StreetPasting,
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
    compare_street_composites,
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

__all__ = [
    "CategoryMonad",
    "ExtensionAssociativityWitness",
    "IdentityCollapseResult",
    "LooseMonadComparisonReport",
    "OrdinaryAlgebraData",
    "RelativeAdjunctionColimitPreservationData",
    "RelativeAdjunctionCompositionReport",
    "RelativeAdjunctionData",
    "RelativeAdjunctionHomIsomorphism",
    "RelativeAdjunctionLeftMorphismData",
    "RelativeAdjunctionPrecompositionReport",
    "RelativeAdjunctionRightMorphismData",
    "RelativeAdjunctionStrictMorphismData",
    "RelativeAdjunctionStrictMorphismReport",
    "RelativeAdjunctionUnitCounitPresentation",
    "RelativeAlgebraData",
    "RelativeAlgebraGradedExtensionWitness",
    "RelativeAlgebraGradedMorphismWitness",
    "RelativeAlgebraIdentityRootWitness",
    "RelativeAlgebraIndexedFamilyWitness",
    "RelativeAlgebraMediatingTightCell",
    "RelativeAlgebraMorphismPresentation",
    "RelativeAlgebraPresentation",
    "RelativeAlgebraResolutionWitness",
    "RelativeAlgebraRestrictionFunctorWitness",
    "RelativeAlgebraStreetActionEquivalenceWitness",
    "RelativeComonadCorepresentabilityReport",
    "RelativeComonadData",
    "RelativeEilenbergMoorePresentation",
    "RelativeKleisliPresentation",
    "RelativeMonadConstructionReport",
    "RelativeMonadData",
    "RelativeMonadLawAnalysis",
    "RelativeMonadLooseMonoidBridgeReport",
    "RelativeMonadRepresentabilityReport",
    "RelativeMonadResolutionReport",
    "RelativeMonadSkewMonoidBridgeInput",
    "RelativeOpalgebraCarrierTriangle",
    "RelativeOpalgebraData",
    "RelativeOpalgebraDiagrams",
    "RelativeOpalgebraExtensionRectangle",
    "RelativeOpalgebraExtraordinaryTransformation",
    "RelativeOpalgebraKappaWitness",
    "RelativeOpalgebraMorphismPresentation",
    "RelativeOpalgebraPresentation",
    "RelativeOpalgebraResolutionWitness",
    "RelativeOpalgebraStreetActionEquivalenceWitness",
    "RelativePartialLeftAdjointWitness",
    "RelativePartialRightAdjointWitness",
    "RelativeStreetActionCoherenceWitness",
    "RelativeStreetActionData",
    "RelativeStreetActionHomomorphismWitness",
    "RelativeStreetHomCategoryWitness",
    "RelativeStreetLooseAdjunctionRightActionWitness",
    "RelativeStreetLooseAdjunctionWitness",
    "RelativeStreetRepresentabilityUpgradeWitness",
    "RelativeStreetRepresentableRestrictionWitness",
    "RelativeStreetRepresentableSubmulticategoryWitness",
    "RelativeTightComparison",
    "ResolutionBranchReport",
    "ResolutionCategory",
    "ResolutionComparison",
    "ResolutionData",
    "ResolutionFullyFaithfulWitness",
    "ResolutionLooseAdjunction",
    "ResolutionMetadata",
    "ResolutionMorphism",
    "ResolutionPastingWitness",
    "ResolutionPrecompositionWitness",
    "ResolutionResoluteWitness",
    "ResolutionTransportWitness",
    "RootIdentityWitness",
    "StreetPasting",
    "UnitCompatibilityWitness",
    "analyze_relative_adjunction_colimit_preservation",
    "analyze_relative_adjunction_composition",
    "analyze_relative_adjunction_framing",
    "analyze_relative_adjunction_hom_isomorphism",
    "analyze_relative_adjunction_left_morphism",
    "analyze_relative_adjunction_left_opalgebra",
    "analyze_relative_adjunction_pointwise_left_lift",
    "analyze_relative_adjunction_precomposition",
    "analyze_relative_adjunction_right_algebra",
    "analyze_relative_adjunction_right_extension",
    "analyze_relative_adjunction_right_morphism",
    "analyze_relative_adjunction_strict_morphism",
    "analyze_relative_adjunction_unit_counit",
    "analyze_relative_algebra_canonical_action",
    "analyze_relative_algebra_framing",
    "analyze_relative_algebra_graded_extension",
    "analyze_relative_algebra_graded_morphism",
    "analyze_relative_algebra_identity_root_equivalence",
    "analyze_relative_algebra_indexed_family",
    "analyze_relative_algebra_mediating_tight_cell",
    "analyze_relative_algebra_morphism_compatibility",
    "analyze_relative_algebra_resolution",
    "analyze_relative_algebra_restriction_functor",
    "analyze_relative_algebra_street_action_bridge",
    "analyze_relative_algebra_street_action_equivalence",
    "analyze_relative_algebra_transport",
    "analyze_relative_canonical_street_action",
    "analyze_relative_comonad_corepresentability",
    "analyze_relative_comonad_framing",
    "analyze_relative_comonad_identity_reduction",
    "analyze_relative_eilenberg_moore_universal_property",
    "analyze_relative_kleisli_universal_property",
    "analyze_relative_loose_adjunction_action",
    "analyze_relative_loose_adjunction_right_action",
    "analyze_relative_monad_composition",
    "analyze_relative_monad_extension_associativity",
    "analyze_relative_monad_framing",
    "analyze_relative_monad_identity_reduction",
    "analyze_relative_monad_laws",
    "analyze_relative_monad_representability",
    "analyze_relative_monad_representable_recovery",
    "analyze_relative_monad_resolution",
    "analyze_relative_monad_root_identity",
    "analyze_relative_monad_skew_monoid_bridge",
    "analyze_relative_monad_unit_compatibility",
    "analyze_relative_opalgebra_canonical_action",
    "analyze_relative_opalgebra_carrier_triangle",
    "analyze_relative_opalgebra_extension_rectangle",
    "analyze_relative_opalgebra_extraordinary_transformation",
    "analyze_relative_opalgebra_framing",
    "analyze_relative_opalgebra_kappa",
    "analyze_relative_opalgebra_morphism_compatibility",
    "analyze_relative_opalgebra_representable_action_bridge",
    "analyze_relative_opalgebra_resolution",
    "analyze_relative_opalgebra_right_action",
    "analyze_relative_opalgebra_street_action_equivalence",
    "analyze_relative_opalgebra_transport",
    "analyze_relative_partial_left_adjoint_section",
    "analyze_relative_partial_right_adjoint_functor",
    "analyze_relative_street_action",
    "analyze_relative_street_action_coherence",
    "analyze_relative_street_action_from_monoid",
    "analyze_relative_street_action_homomorphism",
    "analyze_relative_street_hom_category",
    "analyze_relative_street_representability_upgrade",
    "analyze_relative_street_representable_restriction",
    "analyze_relative_street_representable_submulticategory",
    "category_of_resolutions",
    "check_identity_unit_for_relative_adjunction",
    "check_loose_monad_isomorphism",
    "check_relative_adjunction_precomposition",
    "check_resolution_category_laws",
    "check_resolution_of_relative_monad",
    "compare_street_composites",
    "compose_loose_adjunction_resolutely",
    "describe_identity_relative_adjunction_left_morphism",
    "describe_identity_relative_adjunction_right_morphism",
    "describe_identity_relative_adjunction_strict_morphism",
    "describe_identity_relative_algebra_morphism",
    "describe_identity_relative_opalgebra_morphism",
    "describe_identity_relative_street_action_homomorphism",
    "describe_identity_resolution",
    "describe_identity_resolution_morphism",
    "describe_relative_adjunction_left_opalgebra",
    "describe_relative_adjunction_right_algebra",
    "describe_relative_algebra_canonical_action",
    "describe_relative_algebra_graded_extension",
    "describe_relative_algebra_graded_morphism",
    "describe_relative_algebra_identity_root_witness",
    "describe_relative_algebra_indexed_family_witness",
    "describe_relative_algebra_mediating_tight_cell",
    "describe_relative_algebra_resolution_witness",
    "describe_relative_algebra_restriction_functor",
    "describe_relative_algebra_street_action_bridge",
    "describe_relative_algebra_street_action_equivalence",
    "describe_relative_canonical_street_action",
    "describe_relative_loose_adjunction_action",
    "describe_relative_loose_adjunction_right_action",
    "describe_relative_monad_resolution",
    "describe_relative_monad_skew_monoid_bridge",
    "describe_relative_opalgebra_canonical_action",
    "describe_relative_opalgebra_diagrams",
    "describe_relative_opalgebra_extraordinary_transformation",
    "describe_relative_opalgebra_kappa",
    "describe_relative_opalgebra_representable_action_bridge",
    "describe_relative_opalgebra_resolution",
    "describe_relative_opalgebra_right_action",
    "describe_relative_opalgebra_street_action_equivalence",
    "describe_relative_partial_left_adjoint",
    "describe_relative_partial_right_adjoint",
    "describe_relative_street_action",
    "describe_relative_street_action_coherence",
    "describe_relative_street_action_from_monoid",
    "describe_relative_street_hom_category",
    "describe_relative_street_representability_upgrade",
    "describe_relative_street_representable_restriction",
    "describe_relative_street_representable_submulticategory",
    "describe_singleton_resolution_category",
    "describe_trivial_relative_adjunction",
    "describe_trivial_relative_adjunction_colimit_preservation",
    "describe_trivial_relative_adjunction_left_extension",
    "describe_trivial_relative_adjunction_pointwise_left_lift",
    "describe_trivial_relative_adjunction_unit_counit",
    "describe_trivial_relative_comonad",
    "describe_trivial_relative_eilenberg_moore",
    "describe_trivial_relative_kleisli",
    "describe_trivial_relative_monad",
    "enumerate_relative_adjunction_oracles",
    "enumerate_relative_algebra_oracles",
    "enumerate_relative_comonad_oracles",
    "enumerate_relative_monad_oracles",
    "enumerate_resolution_oracles",
    "from_monad",
    "identify_loose_monad_from_resolution",
    "load_relative_laws",
    "loose_adjunction_from_resolution",
    "loose_monad_from_resolution",
    "paste_loose_adjunction_along_resolution",
    "postcompose_loose_adjunction_along_fully_faithful",
    "precompose_loose_adjunction",
    "relative_adjunction_composition_oracle",
    "relative_monad_composition_oracle",
    "relative_monad_from_adjunction",
    "relative_monad_from_equipment",
    "relative_monad_from_loose_monoid",
    "relative_monad_loose_monoid_oracle",
    "relative_monad_representability_oracle",
    "relative_monad_representable_recovery_oracles",
    "relative_monad_resolution_oracle",
    "relative_monad_to_loose_monoid",
    "to_monad_if_identity",
    "transport_loose_adjunction_along_left_adjoint",
]
