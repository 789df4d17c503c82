"""
Tests for relative monad framing, law components and the classical-monad
embedding.
"""

from dataclasses import replace

from equipment import default_tight_layer, identity_vertical_boundary, two_object_category
from relative import (
    CategoryMonad,
    analyze_relative_monad_extension_associativity,
    analyze_relative_monad_framing,
    analyze_relative_monad_identity_reduction,
    analyze_relative_monad_laws,
    analyze_relative_monad_representability,
    analyze_relative_monad_representable_recovery,
    analyze_relative_monad_root_identity,
    analyze_relative_monad_skew_monoid_bridge,
    analyze_relative_monad_unit_compatibility,
    describe_relative_monad_skew_monoid_bridge,
    from_monad,
    relative_monad_from_equipment,
    to_monad_if_identity,
)

BULLET = "•"
STAR = "★"


def _identity_category_monad(tight):
    return CategoryMonad(
        category=tight.category,
        endofunctor=tight.identity,
        unit=tight.identity2(tight.identity),
        multiplication=tight.identity2(tight.identity),
    )


class TestRelativeMonadFraming:
    """Tests for analyze_relative_monad_framing."""

    def test_trivial_monad_is_framed(self, monad):
        report = analyze_relative_monad_framing(monad)
        assert report.holds
        assert report.issues == []

    def test_framing_is_referentially_transparent(self, monad):
        assert analyze_relative_monad_framing(monad) == analyze_relative_monad_framing(monad)

    def test_carrier_on_other_object_is_reported(self, monad, equipment):
        moved = replace(monad, carrier=identity_vertical_boundary(equipment, STAR))
        report = analyze_relative_monad_framing(moved)
        assert not report.holds
        assert "Root j and carrier t must share domain and codomain." in report.issues
        assert "Extension right boundary must equal the designated tight boundary." in report.issues
        assert report.details.startswith("Relative monad framing issues: ")

    def test_loose_cell_endpoints_are_checked(self, monad, equipment):
        from equipment import identity_proarrow

        moved = replace(monad, loose_cell=identity_proarrow(equipment, STAR))
        report = analyze_relative_monad_framing(moved)
        assert "Underlying loose cell E(j,t) must run from dom(j) to cod(t)." in report.issues
        assert "Extension target arrow must share the loose cell's endpoints." in report.issues


class TestRelativeMonadLaws:
    """Law components report a three-valued verdict."""

    def test_unit_compatibility_is_pending(self, monad):
        report = analyze_relative_monad_unit_compatibility(monad)
        assert not report.holds
        assert report.pending
        assert report.witness.unit_arrow is monad.loose_cell

    def test_associativity_needs_two_arrows(self, monad):
        report = analyze_relative_monad_extension_associativity(monad)
        assert not report.holds
        assert not report.pending
        assert any("at least two composable loose arrows" in issue for issue in report.issues)

    def test_root_identity_is_pending(self, monad):
        report = analyze_relative_monad_root_identity(monad)
        assert report.pending
        assert report.witness.restriction is not None

    def test_law_analysis_bundles_components(self, monad):
        analysis = analyze_relative_monad_laws(monad)
        assert analysis.framing.holds
        assert analysis.unit_compatibility.pending
        assert analysis.root_identity.pending
        assert set(analysis.to_dict()) >= {"framing", "unit_compatibility", "root_identity"}


class TestRelativeMonadConstruction:
    """Tests for relative_monad_from_equipment and representability."""

    def test_trivial_monad_constructs(self, monad):
        report = relative_monad_from_equipment(monad)
        assert report.holds, report.details
        assert report.monad is monad
        assert report.representability.orientation == "left"
        assert report.right_restriction.representability.orientation == "right"

    def test_representability_against_constructed_witness(self, monad):
        witness = relative_monad_from_equipment(monad).representability
        report = analyze_relative_monad_representability(monad, witness)
        assert report.holds, report.details

    def test_representability_rejects_right_witness(self, monad):
        witness = relative_monad_from_equipment(monad).representability
        report = analyze_relative_monad_representability(monad, replace(witness, orientation="right"))
        assert not report.holds
        assert any("left restriction B(j,1)" in issue for issue in report.issues)

    def test_construction_refuses_misframed_scaffold(self, monad, equipment):
        moved = replace(monad, carrier=identity_vertical_boundary(equipment, STAR))
        report = relative_monad_from_equipment(moved)
        assert not report.holds
        assert report.monad is None


class TestIdentityReduction:
    """Classical monads embed along the identity root and collapse back."""

    def test_trivial_monad_reduces(self, monad):
        assert analyze_relative_monad_identity_reduction(monad).holds

    def test_round_trip_through_shared_tight_layer(self):
        tight = default_tight_layer(two_object_category())
        classical = _identity_category_monad(tight)
        embedded = from_monad(classical, BULLET, tight=tight)

        assert analyze_relative_monad_framing(embedded).holds
        collapsed = to_monad_if_identity(embedded)
        assert collapsed.holds, collapsed.details
        assert collapsed.monad.endofunctor is tight.identity
        assert collapsed.monad.unit is classical.unit
        assert collapsed.monad.multiplication is classical.multiplication

    def test_fresh_tight_layer_does_not_collapse(self):
        tight = default_tight_layer(two_object_category())
        embedded = from_monad(_identity_category_monad(tight), BULLET)
        collapsed = to_monad_if_identity(embedded)
        assert not collapsed.holds
        assert collapsed.monad is None

    def test_opaque_evidence_blocks_collapse(self, monad):
        opaque = replace(monad.unit, evidence="opaque")
        collapsed = to_monad_if_identity(replace(monad, unit=opaque))
        assert not collapsed.holds
        assert any("unit evidence must be a tight 2-cell" in issue for issue in collapsed.issues)


class TestSkewMonoidBridge:
    """Relative monads over a representable root as skew monoids."""

    def test_trivial_monad_is_a_skew_monoid(self, monad):
        report = analyze_relative_monad_skew_monoid_bridge(describe_relative_monad_skew_monoid_bridge(monad))
        assert report.holds
        assert report.representability_report is not None
        assert report.loose_monoid_report.holds
        assert report.left_extension_report.holds

    def test_monoid_must_reuse_extension(self, monad):
        bridge = describe_relative_monad_skew_monoid_bridge(monad)
        moved = replace(bridge, monoid=replace(bridge.monoid, multiplication=replace(monad.extension)))
        report = analyze_relative_monad_skew_monoid_bridge(moved)
        assert "Loose monoid multiplication must reuse the relative monad's extension 2-cell." in report.issues

    def test_bridge_requires_representability(self, monad):
        bridge = replace(describe_relative_monad_skew_monoid_bridge(monad), representability=None)
        report = analyze_relative_monad_skew_monoid_bridge(bridge)
        assert report.issues == ["Skew-monoid bridge requires a representability witness for B(j,1)."]
        assert report.representability_report is None

    def test_recovery_stays_pending(self, monad):
        bridge = describe_relative_monad_skew_monoid_bridge(monad)
        report = analyze_relative_monad_representable_recovery(monad, bridge.representability, bridge)
        assert not report.holds and report.pending
        assert report.skew_monoid.holds
        assert report.details.startswith("Representable root aligns with the Levy and ACU presentations")

    def test_recovery_without_bridge(self, monad):
        witness = describe_relative_monad_skew_monoid_bridge(monad).representability
        report = analyze_relative_monad_representable_recovery(monad, witness)
        assert report.pending
        assert report.skew_monoid is None
        assert report.details.startswith("Representable root prerequisites satisfied")
