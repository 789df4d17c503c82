"""
Tests for relative adjunction framing, morphisms and precomposition.
"""

from dataclasses import replace

from equipment import PointwiseLeftLiftData, identity_functor, identity_vertical_boundary
from relative import (
    RelativeAdjunctionColimitPreservationData,
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

BULLET = "•"
STAR = "★"


class TestRelativeAdjunctionFraming:
    """Tests for the leg and hom-isomorphism framing analyzers."""

    def test_trivial_adjunction_is_framed(self, adjunction):
        assert analyze_relative_adjunction_framing(adjunction).holds
        assert analyze_relative_adjunction_hom_isomorphism(adjunction).holds

    def test_right_leg_on_other_object(self, adjunction, equipment):
        moved = replace(adjunction, right=identity_vertical_boundary(equipment, STAR))
        report = analyze_relative_adjunction_framing(moved)
        assert not report.holds
        assert "Root j and right r must land in the same codomain E." in report.issues
        assert "Forward hom isomorphism right boundary must coincide with the designated tight boundary." in (
            report.issues
        )

    def test_hom_isomorphism_frames_must_end_at_cod_r(self, adjunction, equipment):
        moved = replace(adjunction, right=identity_vertical_boundary(equipment, STAR))
        report = analyze_relative_adjunction_hom_isomorphism(moved)
        assert "Forward hom isomorphism source frame should end at the codomain shared by r and j." in report.issues


class TestUnitCounit:
    def test_trivial_unit_counit(self, adjunction):
        presentation = describe_trivial_relative_adjunction_unit_counit(adjunction)
        assert analyze_relative_adjunction_unit_counit(adjunction, presentation).holds

    def test_swapped_cells_are_reported(self, adjunction, equipment):
        presentation = describe_trivial_relative_adjunction_unit_counit(adjunction)
        composite = equipment.tight.compose(equipment.tight.identity, equipment.tight.identity)
        other = replace(adjunction.right, tight=composite)
        unit = replace(presentation.unit, boundaries=replace(presentation.unit.boundaries, right=other))
        report = analyze_relative_adjunction_unit_counit(
            adjunction, RelativeAdjunctionUnitCounitPresentation(unit=unit, counit=presentation.counit)
        )
        assert report.issues == ["Unit 2-cell must reuse the right leg r as its right boundary."]


class TestMorphisms:
    """Identity morphisms satisfy Definitions 5.14 and 5.18."""

    def test_identity_left_morphism(self, adjunction):
        report = analyze_relative_adjunction_left_morphism(
            describe_identity_relative_adjunction_left_morphism(adjunction)
        )
        assert report.holds, report.details

    def test_identity_right_morphism(self, adjunction):
        report = analyze_relative_adjunction_right_morphism(
            describe_identity_relative_adjunction_right_morphism(adjunction)
        )
        assert report.holds, report.details

    def test_identity_strict_morphism(self, adjunction):
        report = analyze_relative_adjunction_strict_morphism(
            describe_identity_relative_adjunction_strict_morphism(adjunction)
        )
        assert report.holds, report.details
        assert report.left.holds and report.right.holds

    def test_morphism_across_equipment_is_reported(self, adjunction):
        from equipment import two_object_category, virtualize_category

        elsewhere = describe_trivial_relative_adjunction(virtualize_category(two_object_category()), BULLET)
        data = replace(describe_identity_relative_adjunction_left_morphism(adjunction), target=elsewhere)
        report = analyze_relative_adjunction_left_morphism(data)
        assert not report.holds
        assert "Source and target relative adjunctions must live in the same virtual equipment." in report.issues

    def test_strict_morphism_needs_matching_pairs(self, adjunction, equipment):
        other = describe_trivial_relative_adjunction(equipment, BULLET)
        strict = describe_identity_relative_adjunction_strict_morphism(adjunction)
        strict = replace(strict, right=describe_identity_relative_adjunction_right_morphism(other))
        report = analyze_relative_adjunction_strict_morphism(strict)
        assert not report.holds
        assert any("same pair of relative adjunctions" in issue for issue in report.issues)


class TestPrecomposition:
    """Tests for Proposition 5.29 precomposition."""

    def test_identity_precomposition(self, adjunction, equipment):
        report = analyze_relative_adjunction_precomposition(adjunction, identity_vertical_boundary(equipment, BULLET))
        assert report.holds
        assert report.right is adjunction.right
        assert report.root.from_obj == BULLET
        assert report.left.tight is not adjunction.left.tight

    def test_precomposition_into_wrong_object_stops_early(self, adjunction, equipment):
        report = analyze_relative_adjunction_precomposition(adjunction, identity_vertical_boundary(equipment, STAR))
        assert not report.holds
        assert report.root is None
        assert report.issues == [
            "Precomposition tight cell must target the adjunction root domain A.",
            "Precomposition tight cell must also target the left leg domain A.",
        ]


class TestLiftsAndExtensions:
    """Right legs recovered as pointwise lifts and left extensions."""

    def test_pointwise_left_lift_recovers_right_leg(self, adjunction):
        report = analyze_relative_adjunction_pointwise_left_lift(
            adjunction, describe_trivial_relative_adjunction_pointwise_left_lift(adjunction)
        )
        assert report.holds
        assert report.lift_report.holds

    def test_lift_along_other_functor_is_reported(self, adjunction, category):
        lift = describe_trivial_relative_adjunction_pointwise_left_lift(adjunction)
        moved = PointwiseLeftLiftData(lift=lift.lift, along=identity_functor(category))
        report = analyze_relative_adjunction_pointwise_left_lift(adjunction, moved)
        assert not report.holds
        assert (
            "Pointwise left lift should be computed along the root j to recover the right leg." in report.issues
        )

    def test_left_extension_recovers_right_leg(self, adjunction):
        report = analyze_relative_adjunction_right_extension(
            adjunction, describe_trivial_relative_adjunction_left_extension(adjunction)
        )
        assert report.holds
        assert report.colimit_report.holds
        assert report.extension_report.holds

    def test_extension_from_other_object_is_reported(self, adjunction, equipment):
        elsewhere = describe_trivial_relative_adjunction(equipment, STAR)
        report = analyze_relative_adjunction_right_extension(
            adjunction, describe_trivial_relative_adjunction_left_extension(elsewhere)
        )
        assert "Left extension loose arrow should start at ℓ's domain." in report.issues
        assert "Resulting extension arrow should land at r's codomain." in report.issues


class TestColimitPreservation:
    def test_left_adjoint_preserves_shared_colimit(self, adjunction):
        report = analyze_relative_adjunction_colimit_preservation(
            adjunction, describe_trivial_relative_adjunction_colimit_preservation(adjunction)
        )
        assert report.holds
        assert report.root_report.holds and report.left_report.holds

    def test_weights_must_be_shared(self, adjunction, equipment):
        root = describe_trivial_relative_adjunction_left_extension(adjunction)
        elsewhere = describe_trivial_relative_adjunction(equipment, STAR)
        left = describe_trivial_relative_adjunction_left_extension(elsewhere)
        report = analyze_relative_adjunction_colimit_preservation(
            adjunction, RelativeAdjunctionColimitPreservationData(root=root, left=left)
        )
        assert report.issues == [
            "Shared weighted colimit left boundary should match '•'.",
            "Shared weighted colimit right boundary should match '•'.",
            "Shared weighted colimit arrow 0 must reuse the anticipated endpoints.",
        ]

    def test_root_extension_must_be_along_j(self, adjunction, category):
        data = describe_trivial_relative_adjunction_colimit_preservation(adjunction)
        moved_extension = replace(data.root.extension, along=identity_functor(category))
        moved = replace(data, root=replace(data.root, extension=moved_extension))
        report = analyze_relative_adjunction_colimit_preservation(adjunction, moved)
        assert report.issues == ["Root preservation data should exhibit a left extension along j."]
