"""
Virtual equipment core.

Re-exports the equipment data model, the shared framing utilities, report
shapes and the configuration/oracle plumbing used by the relative layer.
"""

from .config import EquipmentConfig, get_config, set_config
from .core import (
    CartesianBoundary,
    CartesianCell,
    CellBoundaries,
    Equipment2Cell,
    Frame,
    ObjectEquality,
    Proarrow,
    RepresentabilityWitness,
    RestrictionResult,
    VerticalBoundary,
    VirtualEquipment,
    compose_vertical_boundaries,
    default_object_equality,
    equality_for,
    frame_from_proarrow,
    frame_from_sequence,
    horizontal_compose_cells,
    identity_cell,
    identity_proarrow,
    identity_vertical_boundary,
    is_identity_vertical_boundary,
    juxtapose_identity_proarrows,
    vertical_boundaries_equal,
    vertical_compose_cells,
    whisker_left_cell,
    whisker_right_cell,
)
from .extensions import (
    LeftExtensionFromColimitData,
    PointwiseLeftLiftData,
    RightExtensionData,
    RightLiftData,
    WeightedCoconeData,
    analyze_left_extension_from_weighted_colimit,
    analyze_pointwise_left_lift,
    analyze_right_extension,
    analyze_right_lift,
    describe_identity_left_extension,
    describe_identity_right_lift,
)
from .framing import (
    boundaries_match,
    collect_report_issues,
    ensure_boundary_reuse,
    ensure_frame_alignment,
    ensure_same_witness,
    frame_matches_loose_cell,
    frames_coincide,
    single_arrow,
)
from .laws import LawDescriptor, LawRegistry, load_law_registry
from .logging_setup import configure_logging
from .loose import LooseAdjunctionData, LooseMonoidData, analyze_loose_adjunction, analyze_loose_monoid_shape
from .oracles import OracleResult, OracleSummary, oracle_from_report, pending_oracle, summarize_oracles
from .reports import FramingReport, PendingReport, pending_report, render_details, structural_report
from .tight import (
    Arrow,
    FiniteCategory,
    FunctorLawReport,
    NaturalTransformation,
    TightFunctor,
    TightLayer,
    check_functor_laws,
    default_tight_layer,
    identity_functor,
    two_object_category,
)
from .virtualise import (
    CartesianEvidence,
    TightCategoryEquipment,
    TightEvidence,
    virtualise_tight_category,
    virtualize_category,
)

__all__ = [
    "Arrow",
    "CartesianBoundary",
    "CartesianCell",
    "CartesianEvidence",
    "CellBoundaries",
    "Equipment2Cell",
    "EquipmentConfig",
    "FiniteCategory",
    "Frame",
    "FramingReport",
    "FunctorLawReport",
    "LawDescriptor",
    "LawRegistry",
    "LeftExtensionFromColimitData",
    "LooseAdjunctionData",
    "LooseMonoidData",
    "NaturalTransformation",
    "ObjectEquality",
    "OracleResult",
    "OracleSummary",
    "PendingReport",
    "PointwiseLeftLiftData",
    "Proarrow",
    "RepresentabilityWitness",
    "RestrictionResult",
    "RightExtensionData",
    "RightLiftData",
    "TightCategoryEquipment",
    "TightEvidence",
    "TightFunctor",
    "TightLayer",
    "VerticalBoundary",
    "VirtualEquipment",
    "WeightedCoconeData",
    "analyze_left_extension_from_weighted_colimit",
    "analyze_loose_adjunction",
    "analyze_loose_monoid_shape",
    "analyze_pointwise_left_lift",
    "analyze_right_extension",
    "analyze_right_lift",
    "boundaries_match",
    "check_functor_laws",
    "collect_report_issues",
    "compose_vertical_boundaries",
    "configure_logging",
    "default_object_equality",
    "default_tight_layer",
    "describe_identity_left_extension",
    "describe_identity_right_lift",
    "ensure_boundary_reuse",
    "ensure_frame_alignment",
    "ensure_same_witness",
    "equality_for",
    "frame_from_proarrow",
    "frame_from_sequence",
    "frame_matches_loose_cell",
    "frames_coincide",
    "get_config",
    "horizontal_compose_cells",
    "identity_cell",
    "identity_functor",
    "identity_proarrow",
    "identity_vertical_boundary",
    "is_identity_vertical_boundary",
    "juxtapose_identity_proarrows",
    "load_law_registry",
    "oracle_from_report",
    "pending_oracle",
    "pending_report",
    "render_details",
    "set_config",
    "single_arrow",
    "structural_report",
    "summarize_oracles",
    "two_object_category",
    "vertical_boundaries_equal",
    "vertical_compose_cells",
    "virtualise_tight_category",
    "virtualize_category",
    "whisker_left_cell",
    "whisker_right_cell",
]
