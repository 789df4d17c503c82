"""
Tests for Street actions: coherence pastings, homomorphisms, representability
and the bridges to algebras and opalgebras.
"""

from dataclasses import replace

import pytest

from equipment import frame_from_proarrow, identity_cell, identity_proarrow
from equipment.core import default_object_equality
from relative import (
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
from relative.street import RelativeStreetActionData, compare_street_composites

BULLET = "•"
STAR = "★"


class TestStreetActionData:
    def test_action_data_is_pending(self, monad):
        report = analyze_relative_street_action(monad, describe_relative_street_action(monad))
        assert not report.holds
        assert report.pending

    def test_foreign_carrier_is_reported(self, monad):
        street_action = replace(describe_relative_street_action(monad), carrier=replace(monad.carrier))
        report = analyze_relative_street_action(monad, street_action)
        assert report.issues == ["Street action 2-cell right boundary must reuse the specified tight boundary."]


class TestCoherence:
    """Identity and composition pastings compare equal for the trivial monad."""

    def test_coherence_holds(self, monad):
        witness = describe_relative_street_action_coherence(monad)
        report = analyze_relative_street_action_coherence(monad, witness)
        assert report.holds, report.details
        assert not report.pending
        assert report.comparisons["identity"].holds
        assert report.comparisons["composition"].holds

    def test_homomorphism_holds(self, monad):
        witness = describe_identity_relative_street_action_homomorphism(monad)
        assert witness.source is witness.target
        report = analyze_relative_street_action_homomorphism(monad, witness)
        assert report.holds, report.details

    def test_hom_category_holds(self, monad):
        report = analyze_relative_street_hom_category(monad, describe_relative_street_hom_category(monad))
        assert report.holds, report.details


class TestCompareComposites:
    def test_matching_composites(self, equipment):
        cell = identity_cell(equipment, frame_from_proarrow(identity_proarrow(equipment, BULLET)))
        assert compare_street_composites(default_object_equality, cell, cell, "Pasting").holds

    def test_mismatched_composites_name_each_defect(self, equipment):
        red = identity_cell(equipment, frame_from_proarrow(identity_proarrow(equipment, BULLET)))
        green = identity_cell(equipment, frame_from_proarrow(identity_proarrow(equipment, STAR)))
        report = compare_street_composites(default_object_equality, red, green, "Pasting")
        assert not report.holds
        assert "Pasting source frame arrow 0 endpoints differ." in report.issues
        assert "Pasting target frame boundaries differ." in report.issues
        assert "Pasting left boundary endpoints differ." in report.issues


class TestCanonicalActions:
    def test_canonical_action_holds(self, monad):
        report = analyze_relative_canonical_street_action(monad, describe_relative_canonical_street_action(monad))
        assert report.holds

    def test_copied_extension_is_reported(self, monad):
        street_action = replace(describe_relative_canonical_street_action(monad), action=replace(monad.extension))
        report = analyze_relative_canonical_street_action(monad, street_action)
        assert report.issues == ["Canonical Street action must reuse the relative monad extension 2-cell."]

    def test_action_from_loose_monoid(self, monad):
        report = analyze_relative_street_action_from_monoid(monad, describe_relative_street_action_from_monoid(monad))
        assert report.holds, report.details
        assert report.loose_monoid_report.holds

    def test_opalgebra_right_action_is_pending(self, kleisli):
        report = analyze_relative_opalgebra_right_action(kleisli, describe_relative_opalgebra_right_action(kleisli))
        assert report.pending
        assert report.issues == []


class TestRepresentability:
    def test_loose_adjunction_action(self, monad):
        report = analyze_relative_loose_adjunction_action(monad, describe_relative_loose_adjunction_action(monad))
        assert report.holds, report.details

    def test_representable_restriction(self, monad):
        witness = describe_relative_street_representable_restriction(monad)
        assert witness.restriction is not None
        assert analyze_relative_street_representable_restriction(monad, witness).holds

    def test_unmarked_carrier_is_reported(self, monad):
        street_action = RelativeStreetActionData(carrier=monad.carrier, action=monad.extension)
        witness = describe_relative_street_representable_restriction(monad, street_action)
        report = analyze_relative_street_representable_restriction(monad, witness)
        assert report.issues == [
            "Representable Street restriction must mark the Street action carrier as representable."
        ]

    def test_upgrade_holds(self, monad):
        report = analyze_relative_street_representability_upgrade(
            monad, describe_relative_street_representability_upgrade(monad)
        )
        assert report.holds, report.details
        assert not report.pending
        assert report.representability_report.holds


class TestBridges:
    """Algebras and opalgebras determine Street actions and back."""

    def test_algebra_bridge(self, eilenberg_moore):
        street_action = describe_relative_algebra_street_action_bridge(eilenberg_moore)
        report = analyze_relative_algebra_street_action_bridge(eilenberg_moore, street_action)
        assert report.holds, report.details
        assert not report.pending
        assert report.action_report.holds

    def test_algebra_equivalence(self, eilenberg_moore):
        witness = describe_relative_algebra_street_action_equivalence(eilenberg_moore)
        report = analyze_relative_algebra_street_action_equivalence(eilenberg_moore, witness)
        assert report.holds, report.details
        assert not report.pending
        assert report.recovery.holds

    def test_opalgebra_equivalence(self, kleisli):
        witness = describe_relative_opalgebra_street_action_equivalence(kleisli)
        report = analyze_relative_opalgebra_street_action_equivalence(kleisli, witness)
        assert report.holds, report.details
        assert report.right_action.pending

    @pytest.mark.parametrize("field", ["carrier", "action"])
    def test_recovered_algebra_must_reuse_data(self, eilenberg_moore, field):
        witness = describe_relative_algebra_street_action_equivalence(eilenberg_moore)
        recovered = replace(witness.recovered, **{field: replace(getattr(witness.recovered, field))})
        witness = replace(witness, recovered=recovered)
        report = analyze_relative_algebra_street_action_equivalence(eilenberg_moore, witness)
        assert not report.holds
        assert not report.pending

    def test_equivalence_witness_must_match_presentation(self, eilenberg_moore):
        witness = describe_relative_algebra_street_action_equivalence(eilenberg_moore)
        report = analyze_relative_algebra_street_action_equivalence(replace(eilenberg_moore), witness)
        assert not report.holds
        assert (
            "Algebra/Street action equivalence witness must reuse the supplied algebra presentation."
            in report.issues
        )

    def test_opalgebra_equivalence_witness_must_match_presentation(self, kleisli):
        witness = describe_relative_opalgebra_street_action_equivalence(kleisli)
        report = analyze_relative_opalgebra_street_action_equivalence(replace(kleisli), witness)
        assert report.issues[0] == (
            "Opalgebra/Street action equivalence witness must reuse the supplied opalgebra presentation."
        )


class TestLooseAdjunctionRightAction:
    def test_extension_acts_through_the_counit(self, monad):
        report = analyze_relative_loose_adjunction_right_action(
            monad, describe_relative_loose_adjunction_right_action(monad)
        )
        assert report.holds
        assert report.adjunction_report.holds

    def test_counit_must_be_the_action(self, monad):
        witness = describe_relative_loose_adjunction_right_action(monad)
        moved = replace(witness, adjunction=replace(witness.adjunction, counit=replace(monad.extension)))
        report = analyze_relative_loose_adjunction_right_action(monad, moved)
        assert "Loose adjunction counit must be the Street action 2-cell." in report.issues

    def test_left_leg_must_be_the_loose_arrow(self, monad, equipment):
        witness = describe_relative_loose_adjunction_right_action(monad)
        moved = replace(witness, adjunction=replace(witness.adjunction, left=identity_proarrow(equipment, STAR)))
        report = analyze_relative_loose_adjunction_right_action(monad, moved)
        assert "Loose adjunction left leg must reuse the loose arrow E(j,t)." in report.issues


class TestRepresentableSubmulticategory:
    def test_action_cell_spans_the_submulticategory(self, monad):
        report = analyze_relative_street_representable_submulticategory(
            monad, describe_relative_street_representable_submulticategory(monad)
        )
        assert report.holds
        assert report.restriction_report.holds

    def test_empty_submulticategory_is_reported(self, monad):
        witness = replace(describe_relative_street_representable_submulticategory(monad), representable_cells=())
        report = analyze_relative_street_representable_submulticategory(monad, witness)
        assert report.issues == ["Representable submulticategory should contain at least the Street action 2-cell."]

    def test_cells_are_numbered_from_one(self, monad, equipment):
        witness = describe_relative_street_representable_submulticategory(monad)
        foreign = identity_cell(equipment, frame_from_proarrow(identity_proarrow(equipment, STAR)))
        moved = replace(witness, representable_cells=witness.representable_cells + (foreign,))
        report = analyze_relative_street_representable_submulticategory(monad, moved)
        assert report.issues == [
            "Representable Street cell #2 left boundary must reuse the specified tight boundary.",
            "Representable Street cell #2 right boundary must reuse the specified tight boundary.",
        ]

    def test_restriction_must_share_the_action(self, monad):
        witness = describe_relative_street_representable_submulticategory(monad)
        moved = replace(witness, street_action=replace(witness.street_action))
        report = analyze_relative_street_representable_submulticategory(monad, moved)
        assert "Representable submulticategory must reuse the recorded Street action witness." in report.issues


class TestRepresentableOpalgebraBridge:
    def test_kleisli_opalgebra_is_a_representable_action(self, kleisli):
        report = analyze_relative_opalgebra_representable_action_bridge(
            kleisli, describe_relative_opalgebra_representable_action_bridge(kleisli)
        )
        assert report.holds
        assert report.right_action.holds or report.right_action.pending

    def test_missing_restriction_is_reported(self, kleisli):
        report = analyze_relative_opalgebra_representable_action_bridge(kleisli, None)
        assert not report.holds
        assert (
            "Representable opalgebra action requires the equipment to restrict E(j,t) along the root j."
            in report.issues
        )
