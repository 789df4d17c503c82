"""
Tests for law registries, oracle catalogues and oracle summaries.
"""

import pytest

from equipment import (
    EquipmentConfig,
    LawDescriptor,
    LawRegistry,
    load_law_registry,
    pending_oracle,
    set_config,
    summarize_oracles,
)
from relative import (
    describe_identity_resolution,
    describe_singleton_resolution_category,
    describe_trivial_relative_adjunction,
    enumerate_relative_adjunction_oracles,
    enumerate_relative_algebra_oracles,
    enumerate_relative_comonad_oracles,
    enumerate_relative_monad_oracles,
    enumerate_resolution_oracles,
    load_relative_laws,
    relative_adjunction_composition_oracle,
    relative_monad_composition_oracle,
)
from relative.oracles import (
    ADJUNCTION_LAWS,
    ALGEBRA_LAWS,
    COMONAD_LAWS,
    COMPOSITION_LAWS,
    MONAD_LAWS,
    RESOLUTION_LAWS,
)

BULLET = "•"
STAR = "★"

REGISTRY_SIZES = {
    MONAD_LAWS: 12,
    COMONAD_LAWS: 6,
    COMPOSITION_LAWS: 4,
    ADJUNCTION_LAWS: 21,
    ALGEBRA_LAWS: 45,
    RESOLUTION_LAWS: 5,
}


class TestLawRegistries:
    """Packaged registries load and index cleanly."""

    @pytest.mark.parametrize("name,size", sorted(REGISTRY_SIZES.items()))
    def test_packaged_registry_sizes(self, name, size):
        laws = load_relative_laws(name)
        assert len(laws) == size
        assert laws.title == name

    @pytest.mark.parametrize("name", sorted(REGISTRY_SIZES))
    def test_registry_paths_are_unique(self, name):
        laws = load_relative_laws(name)
        paths = [descriptor.registry_path for descriptor in laws]
        assert len(paths) == len(set(paths))

    def test_lookup_by_key_and_path(self):
        laws = load_relative_laws(MONAD_LAWS)
        descriptor = laws["unit_framing"]
        assert descriptor.registry_path == "relativeMonad.unit.framing"
        assert laws.by_path("relativeMonad.unit.framing") is descriptor
        assert "unit_framing" in laws
        assert "missing" not in laws

    def test_summary_whitespace_is_folded(self):
        descriptor = load_relative_laws(MONAD_LAWS)["unit_framing"]
        assert "\n" not in descriptor.summary
        assert "  " not in descriptor.summary

    def test_missing_field_is_rejected(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("law:\n  name: Broken\n  registry_path: broken.law\n", encoding="utf-8")
        with pytest.raises(ValueError, match="missing: summary"):
            load_law_registry(path)

    def test_non_mapping_registry_is_rejected(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- one\n- two\n", encoding="utf-8")
        with pytest.raises(ValueError, match="must be a mapping"):
            load_law_registry(path)

    def test_duplicate_registry_path_is_rejected(self):
        first = LawDescriptor(key="a", name="A", registry_path="shared.path", summary="First.")
        second = LawDescriptor(key="b", name="B", registry_path="shared.path", summary="Second.")
        with pytest.raises(ValueError, match="Duplicate registry path 'shared.path'"):
            LawRegistry("dupes", [first, second])

    def test_registry_directory_override(self, tmp_path):
        (tmp_path / f"{MONAD_LAWS}.yaml").write_text(
            "only:\n  name: Only law\n  registry_path: custom.only\n  summary: A single custom law.\n",
            encoding="utf-8",
        )
        laws = load_relative_laws(MONAD_LAWS, EquipmentConfig(law_registry_dir=str(tmp_path)))
        assert [descriptor.registry_path for descriptor in laws] == ["custom.only"]


class TestCatalogues:
    """Every registered law yields exactly one oracle."""

    def test_monad_catalogue(self, monad):
        results = enumerate_relative_monad_oracles(monad)
        by_path = {result.registry_path: result for result in results}
        assert len(results) == REGISTRY_SIZES[MONAD_LAWS] + 2
        assert by_path["relativeMonad.unit.framing"].holds
        assert by_path["relativeMonad.unit.compatibility"].pending
        assert not by_path["relativeMonad.extension.associativity"].pending
        assert by_path["relativeMonad.lanExtension"].pending
        assert by_path["relativeResolution.definition"].holds
        assert by_path["relativeMonad.skewMonoid.bridge"].holds
        assert by_path["relativeMonad.representableRecovery"].pending

    def test_comonad_catalogue(self, comonad):
        results = enumerate_relative_comonad_oracles(comonad)
        assert len(results) == REGISTRY_SIZES[COMONAD_LAWS]
        assert len({result.registry_path for result in results}) == len(results)

    def test_adjunction_catalogue(self, adjunction):
        results = enumerate_relative_adjunction_oracles(adjunction)
        assert len(results) == REGISTRY_SIZES[ADJUNCTION_LAWS]
        by_path = {result.registry_path: result for result in results}
        assert by_path["relativeAdjunction.pointwiseLeftLift"].holds
        assert by_path["relativeAdjunction.rightExtension"].holds
        assert by_path["relativeAdjunction.colimitPreservation"].holds
        assert not [result for result in results if not result.holds and not result.pending]

    def test_algebra_catalogue(self, kleisli, eilenberg_moore):
        results = enumerate_relative_algebra_oracles(kleisli, eilenberg_moore)
        assert len(results) == REGISTRY_SIZES[ALGEBRA_LAWS]
        assert len(results) > 30
        assert not [result.registry_path for result in results if not result.holds and not result.pending]

    def test_algebra_catalogue_analyzes_partial_adjoints_and_graded_laws(self, kleisli, eilenberg_moore):
        results = enumerate_relative_algebra_oracles(kleisli, eilenberg_moore)
        by_path = {result.registry_path: result for result in results}
        assert by_path["relativeMonad.algebra.partialRightAdjointFunctor"].holds
        assert by_path["relativeMonad.actions.representableStreetSubmulticategory"].holds
        assert by_path["relativeMonad.actions.looseAdjunctionRightAction"].holds
        assert by_path["relativeMonad.opalgebra.representableActionBridge"].holds
        for path in (
            "relativeMonad.algebra.gradedMorphisms",
            "relativeMonad.algebra.restrictionFunctor",
            "relativeMonad.opalgebra.resolution",
            "relativeMonad.opalgebra.partialLeftAdjointSection",
        ):
            assert by_path[path].pending
            assert by_path[path].analysis is not None

    def test_resolution_catalogue(self, monad):
        resolution = describe_identity_resolution(monad)
        results = enumerate_resolution_oracles(resolution, describe_singleton_resolution_category(resolution))
        assert len(results) == REGISTRY_SIZES[RESOLUTION_LAWS]
        assert all(result.holds for result in results), [result.details for result in results]

    def test_composition_oracles(self, equipment, monad):
        first = describe_trivial_relative_adjunction(equipment, BULLET)
        assert relative_adjunction_composition_oracle(first, first).holds
        refused = relative_adjunction_composition_oracle(first, describe_trivial_relative_adjunction(equipment, STAR))
        assert not refused.holds
        assert refused.registry_path == "relativeAdjunction.composition.compatibility"
        assert relative_monad_composition_oracle(monad, monad).holds


class TestSummaries:
    def test_monad_summary_defers_pending(self, monad):
        summary = summarize_oracles(enumerate_relative_monad_oracles(monad))
        assert summary.total == 14
        assert summary.passed == 7
        assert summary.pending == 6
        assert summary.failed_paths == ["relativeMonad.extension.associativity"]
        assert not summary.holds

    def test_strict_summary_counts_pending(self, monad):
        results = enumerate_relative_monad_oracles(monad)
        summary = summarize_oracles(results, EquipmentConfig(pending_counts_as_failure=True))
        assert summary.failed == 7
        assert summary.pending == 6

    def test_summary_uses_active_config(self):
        descriptor = LawDescriptor(key="a", name="A", registry_path="only.pending", summary="Later.")
        results = [pending_oracle(descriptor)]
        assert summarize_oracles(results).holds

        set_config(EquipmentConfig(pending_counts_as_failure=True))
        assert summarize_oracles(results).failed_paths == ["only.pending"]

    def test_pending_oracle_carries_summary(self):
        descriptor = LawDescriptor(key="a", name="Deferred law", registry_path="deferred", summary="Later.")
        result = pending_oracle(descriptor)
        assert not result.holds and result.pending
        assert result.details == "Deferred law oracle is pending. Summary: Later."
        assert result.to_dict()["issues"] == []
