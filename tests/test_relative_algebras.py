"""
Tests for relative algebras, opalgebras and the Kleisli / Eilenberg–Moore
presentations.
"""

from dataclasses import replace

from equipment import identity_functor
from relative import (
    analyze_relative_adjunction_left_opalgebra,
    analyze_relative_adjunction_right_algebra,
    analyze_relative_algebra_canonical_action,
    analyze_relative_algebra_framing,
    analyze_relative_algebra_graded_extension,
    analyze_relative_algebra_graded_morphism,
    analyze_relative_algebra_identity_root_equivalence,
    analyze_relative_algebra_indexed_family,
    analyze_relative_algebra_mediating_tight_cell,
    analyze_relative_algebra_morphism_compatibility,
    analyze_relative_algebra_resolution,
    analyze_relative_algebra_restriction_functor,
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
    analyze_relative_partial_left_adjoint_section,
    analyze_relative_partial_right_adjoint_functor,
    describe_identity_relative_algebra_morphism,
    describe_identity_relative_opalgebra_morphism,
    describe_relative_adjunction_left_opalgebra,
    describe_relative_adjunction_right_algebra,
    describe_relative_algebra_canonical_action,
    describe_relative_algebra_graded_extension,
    describe_relative_algebra_graded_morphism,
    describe_relative_algebra_identity_root_witness,
    describe_relative_algebra_indexed_family_witness,
    describe_relative_algebra_resolution_witness,
    describe_relative_algebra_restriction_functor,
    describe_relative_monad_resolution,
    describe_relative_opalgebra_canonical_action,
    describe_relative_opalgebra_diagrams,
    describe_relative_opalgebra_extraordinary_transformation,
    describe_relative_opalgebra_kappa,
    describe_relative_opalgebra_resolution,
    describe_relative_partial_left_adjoint,
    describe_relative_partial_right_adjoint,
    describe_trivial_relative_eilenberg_moore,
    describe_trivial_relative_kleisli,
    describe_trivial_relative_monad,
)

BULLET = "•"
STAR = "★"


def _assert_pending(report):
    assert not report.holds
    assert report.pending, report.details
    assert report.issues == []


class TestFraming:
    """Kleisli and Eilenberg–Moore presentations are framed structurally."""

    def test_eilenberg_moore_algebra_is_framed(self, eilenberg_moore):
        report = analyze_relative_algebra_framing(eilenberg_moore)
        assert report.holds
        assert not report.pending

    def test_kleisli_opalgebra_is_framed(self, kleisli):
        assert analyze_relative_opalgebra_framing(kleisli).holds

    def test_copied_carrier_breaks_reuse(self, eilenberg_moore):
        algebra = replace(eilenberg_moore.algebra, carrier=replace(eilenberg_moore.algebra.carrier))
        report = analyze_relative_algebra_framing(replace(eilenberg_moore, algebra=algebra))
        assert report.issues == ["Relative algebra action right boundary must reuse the specified tight boundary."]


class TestMorphisms:
    def test_identity_algebra_morphism_is_pending(self, eilenberg_moore):
        morphism = describe_identity_relative_algebra_morphism(eilenberg_moore)
        _assert_pending(analyze_relative_algebra_morphism_compatibility(morphism))

    def test_identity_opalgebra_morphism_is_pending(self, kleisli):
        _assert_pending(
            analyze_relative_opalgebra_morphism_compatibility(describe_identity_relative_opalgebra_morphism(kleisli))
        )

    def test_morphism_between_monads_is_reported(self, kleisli, equipment):
        other = describe_trivial_relative_kleisli(describe_trivial_relative_monad(equipment, BULLET))
        presentation = replace(describe_identity_relative_opalgebra_morphism(kleisli), target=other)
        report = analyze_relative_opalgebra_morphism_compatibility(presentation)
        assert not report.pending
        assert "Relative opalgebra morphism must relate opalgebras over the same relative monad." in report.issues


class TestUniversalProperties:
    def test_kleisli_universal_property(self, kleisli):
        assert analyze_relative_kleisli_universal_property(kleisli).holds

    def test_eilenberg_moore_universal_property(self, eilenberg_moore):
        report = analyze_relative_eilenberg_moore_universal_property(eilenberg_moore)
        assert report.holds, report.details
        assert report.mediating_tight_cell_report.holds

    def test_missing_mediating_cell(self, eilenberg_moore):
        report = analyze_relative_algebra_mediating_tight_cell(replace(eilenberg_moore, mediating=None))
        assert report.issues == ["Eilenberg–Moore presentation should record a mediating tight cell."]

    def test_mediating_cell_must_target_recorded_algebra(self, eilenberg_moore):
        mediating = replace(eilenberg_moore.mediating, target=replace(eilenberg_moore.algebra))
        report = analyze_relative_algebra_mediating_tight_cell(replace(eilenberg_moore, mediating=mediating))
        assert report.issues == ["Mediating tight cell target must coincide with the recorded algebra presentation."]


class TestResolution:
    def test_algebra_object_resolution_is_pending(self, monad, eilenberg_moore):
        witness = describe_relative_algebra_resolution_witness(monad, eilenberg_moore)
        report = analyze_relative_algebra_resolution(witness)
        _assert_pending(report)
        assert report.resolution_report.holds

    def test_resolution_over_other_monad(self, monad, equipment):
        other = describe_trivial_relative_eilenberg_moore(describe_trivial_relative_monad(equipment, BULLET))
        report = analyze_relative_algebra_resolution(describe_relative_algebra_resolution_witness(monad, other))
        assert not report.pending
        assert "Eilenberg–Moore presentation must be built over the resolved relative monad." in report.issues

    def test_transport_along_canonical_resolution(self, monad, eilenberg_moore):
        report = analyze_relative_algebra_transport(describe_relative_monad_resolution(monad), eilenberg_moore)
        _assert_pending(report)


class TestCanonicalActions:
    def test_extension_is_canonical_action(self, monad):
        _assert_pending(analyze_relative_algebra_canonical_action(describe_relative_algebra_canonical_action(monad)))

    def test_unit_is_canonical_opalgebra_action(self, monad):
        _assert_pending(
            analyze_relative_opalgebra_canonical_action(describe_relative_opalgebra_canonical_action(monad))
        )

    def test_copied_extension_is_not_reused(self, monad):
        presentation = describe_relative_algebra_canonical_action(monad)
        copied = replace(presentation.algebra, action=replace(monad.extension))
        report = analyze_relative_algebra_canonical_action(replace(presentation, algebra=copied))
        assert not report.pending
        assert report.issues == ["Relative canonical algebra action must reuse the monad extension 2-cell."]


class TestAdjunctionLegs:
    """Left and right legs of a resolving adjunction carry (op)algebras."""

    def test_left_leg_opalgebra(self, monad):
        adjunction = describe_relative_monad_resolution(monad)
        presentation = describe_relative_adjunction_left_opalgebra(adjunction, monad)
        _assert_pending(analyze_relative_adjunction_left_opalgebra(adjunction, presentation))

    def test_right_leg_algebra(self, monad):
        adjunction = describe_relative_monad_resolution(monad)
        presentation = describe_relative_adjunction_right_algebra(adjunction, monad)
        _assert_pending(analyze_relative_adjunction_right_algebra(adjunction, presentation))


class TestOpalgebraDiagrams:
    def test_carrier_triangle_and_extension_rectangle(self, kleisli):
        diagrams = describe_relative_opalgebra_diagrams(kleisli)
        _assert_pending(analyze_relative_opalgebra_carrier_triangle(kleisli, diagrams.carrier_triangle))
        _assert_pending(analyze_relative_opalgebra_extension_rectangle(kleisli, diagrams.extension_rectangle))

    def test_triangle_with_foreign_unit(self, kleisli, monad):
        diagrams = describe_relative_opalgebra_diagrams(kleisli)
        triangle = replace(diagrams.carrier_triangle, unit=replace(monad.unit))
        report = analyze_relative_opalgebra_carrier_triangle(kleisli, triangle)
        assert report.issues == ["Relative opalgebra carrier triangle must reuse the relative monad unit 2-cell."]

    def test_extraordinary_transformation(self, kleisli):
        witness = describe_relative_opalgebra_extraordinary_transformation(kleisli)
        report = analyze_relative_opalgebra_extraordinary_transformation(witness)
        _assert_pending(report)
        assert report.loose_monoid_report.holds


class TestIdentityRoot:
    def test_identity_root_algebra_equivalence(self, eilenberg_moore):
        report = analyze_relative_algebra_identity_root_equivalence(
            describe_relative_algebra_identity_root_witness(eilenberg_moore)
        )
        _assert_pending(report)
        assert report.reduction_report.holds


class TestPartialAdjoints:
    def test_partial_right_adjoint_holds(self, eilenberg_moore):
        witness = describe_relative_partial_right_adjoint(eilenberg_moore)
        report = analyze_relative_partial_right_adjoint_functor(witness)
        assert report.holds
        assert report.section_report is not None

    def test_partial_right_adjoint_needs_a_section(self, eilenberg_moore):
        witness = replace(describe_relative_partial_right_adjoint(eilenberg_moore), section=None)
        report = analyze_relative_partial_right_adjoint_functor(witness)
        assert report.issues == ["Partial right adjoint requires a section of the Eilenberg–Moore comparison."]
        assert report.section_report is None

    def test_partial_right_adjoint_fixes_j_objects(self, eilenberg_moore, monad):
        witness = describe_relative_partial_right_adjoint(eilenberg_moore)
        unrecorded = analyze_relative_partial_right_adjoint_functor(replace(witness, fixed_objects=()))
        assert unrecorded.issues == ["Partial right adjoint should record the j-objects it fixes."]
        deviating = analyze_relative_partial_right_adjoint_functor(replace(witness, fixed_objects=(monad.carrier,)))
        assert deviating.issues == [
            "Partial right adjoint should fix each j-object; witness 0 deviates from the relative monad root."
        ]

    def test_partial_right_adjoint_comparison_reuses_root(self, eilenberg_moore, category):
        witness = describe_relative_partial_right_adjoint(eilenberg_moore)
        moved = replace(witness, comparison=replace(witness.comparison, tight=identity_functor(category)))
        report = analyze_relative_partial_right_adjoint_functor(moved)
        assert report.issues == ["Partial right adjoint comparison must reuse the root j tight 1-cell."]

    def test_kappa_pastes_with_identities(self, kleisli):
        assert analyze_relative_opalgebra_kappa(kleisli, describe_relative_opalgebra_kappa(kleisli)).holds

    def test_kappa_must_reuse_the_action(self, kleisli):
        witness = describe_relative_opalgebra_kappa(kleisli)
        report = analyze_relative_opalgebra_kappa(kleisli, replace(witness, kappa=replace(kleisli.opalgebra.action)))
        assert "κ_t must reuse the recorded opalgebra action." in report.issues

    def test_opalgebra_resolution_is_pending(self, kleisli):
        report = analyze_relative_opalgebra_resolution(describe_relative_opalgebra_resolution(kleisli))
        _assert_pending(report)
        assert report.kappa_report.holds

    def test_partial_left_adjoint_section(self, kleisli):
        witness = describe_relative_partial_left_adjoint(kleisli)
        _assert_pending(analyze_relative_partial_left_adjoint_section(witness))
        moved = replace(witness, transpose_identity=kleisli.monad.extension)
        report = analyze_relative_partial_left_adjoint_section(moved)
        assert report.issues == ["Partial left adjoint transpose must match the supplied identity on j-objects."]


class TestGradedAndIndexed:
    def test_graded_morphism_is_pending(self, eilenberg_moore):
        morphism = describe_identity_relative_algebra_morphism(eilenberg_moore)
        report = analyze_relative_algebra_graded_morphism(describe_relative_algebra_graded_morphism(morphism))
        _assert_pending(report)
        assert report.compatibility.pending

    def test_graded_morphism_red_composite_must_reuse_boundary(self, eilenberg_moore):
        morphism = describe_identity_relative_algebra_morphism(eilenberg_moore)
        witness = describe_relative_algebra_graded_morphism(morphism)
        red = witness.red_composite
        copied = replace(red, boundaries=replace(red.boundaries, left=replace(red.boundaries.left)))
        report = analyze_relative_algebra_graded_morphism(replace(witness, red_composite=copied))
        assert not report.pending
        assert (
            "Graded morphism red composite left boundary must reuse the supplied algebra morphism presentation."
            in report.issues
        )

    def test_graded_extension_is_pending(self, eilenberg_moore):
        _assert_pending(
            analyze_relative_algebra_graded_extension(describe_relative_algebra_graded_extension(eilenberg_moore))
        )

    def test_restriction_functor(self, eilenberg_moore):
        witness = describe_relative_algebra_restriction_functor(eilenberg_moore)
        report = analyze_relative_algebra_restriction_functor(eilenberg_moore, witness)
        _assert_pending(report)
        assert report.bridge is not None

    def test_restriction_functor_requires_restriction(self, eilenberg_moore):
        witness = replace(describe_relative_algebra_restriction_functor(eilenberg_moore), restriction=None)
        report = analyze_relative_algebra_restriction_functor(eilenberg_moore, witness)
        assert report.issues == ["Restriction functor requires the equipment to restrict E(j,t) along the root j."]

    def test_restriction_functor_reuses_presentation(self, eilenberg_moore):
        witness = describe_relative_algebra_restriction_functor(replace(eilenberg_moore))
        report = analyze_relative_algebra_restriction_functor(eilenberg_moore, witness)
        assert "Restriction functor witness must reuse the supplied algebra presentation." in report.issues

    def test_indexed_family_is_pending(self, monad, eilenberg_moore):
        _assert_pending(
            analyze_relative_algebra_indexed_family(
                describe_relative_algebra_indexed_family_witness(monad, eilenberg_moore)
            )
        )

    def test_indexed_family_without_fibres(self, monad, eilenberg_moore):
        witness = replace(describe_relative_algebra_indexed_family_witness(monad, eilenberg_moore), fibres=())
        report = analyze_relative_algebra_indexed_family(witness)
        assert "Indexed family witness must include at least one fibre presentation." in report.issues
        assert "Indexed family restriction morphism #0 must relate recorded fibres." in report.issues

    def test_indexed_family_over_other_monad(self, equipment, eilenberg_moore):
        other = describe_trivial_relative_monad(equipment, STAR)
        witness = describe_relative_algebra_indexed_family_witness(other, eilenberg_moore)
        report = analyze_relative_algebra_indexed_family(witness)
        assert report.issues == ["Indexed family fibre #0 must be built over the supplied relative monad."]
