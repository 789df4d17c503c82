"""
Tests for resolutions of relative monads, their witness metadata and the
category of resolutions.
"""

from dataclasses import replace

import pytest

from equipment import frame_from_proarrow, identity_cell, identity_proarrow, identity_vertical_boundary
from relative import (
    ResolutionMetadata,
    ResolutionMorphism,
    ResolutionPrecompositionWitness,
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
    describe_trivial_relative_monad,
    identify_loose_monad_from_resolution,
    loose_adjunction_from_resolution,
    loose_monad_from_resolution,
    paste_loose_adjunction_along_resolution,
    postcompose_loose_adjunction_along_fully_faithful,
    precompose_loose_adjunction,
    transport_loose_adjunction_along_left_adjoint,
)

BULLET = "•"
STAR = "★"


@pytest.fixture
def resolution(monad):
    return describe_identity_resolution(monad)


def _star_cell(equipment):
    return identity_cell(equipment, frame_from_proarrow(identity_proarrow(equipment, STAR)))


class TestResolutionMetadata:
    def test_identity_resolution_threads_one_witness_per_kind(self, resolution):
        assert resolution.metadata.counts() == {
            "precompositions": 1,
            "pastings": 1,
            "fully_faithful": 1,
            "resolute": 1,
            "transports": 1,
        }
        assert resolution.metadata.summary().startswith(
            "Resolution metadata threads 1 precomposition witness(es), 1 pasting witness(es)"
        )

    def test_extend_appends_without_mutating(self, resolution, monad):
        witness = ResolutionPrecompositionWitness(monad.root, resolution.comparison.forward)
        extended = resolution.metadata.extend(details="Extended.", precompositions=[witness])
        assert extended.precompositions[-1] is witness
        assert extended.counts()["precompositions"] == 2
        assert resolution.metadata.counts()["precompositions"] == 1
        assert extended.summary().endswith("Extended.")

    def test_extend_rejects_unknown_kinds(self):
        with pytest.raises(ValueError, match="unknown resolution witness kind"):
            ResolutionMetadata().extend(triangles=())


class TestResolutionOfRelativeMonad:
    def test_identity_resolution_holds(self, resolution):
        report = check_resolution_of_relative_monad(resolution)
        assert report.holds
        assert not report.pending
        assert report.metadata is resolution.metadata
        assert report.details.startswith("Resolution recovers the relative monad.")

    def test_inclusion_must_be_the_root(self, resolution, equipment):
        moved = replace(resolution, inclusion=identity_vertical_boundary(equipment, STAR))
        report = check_resolution_of_relative_monad(moved)
        assert not report.holds
        assert "Resolution inclusion must coincide with the relative monad root j." in report.issues
        assert "Precomposition witness 0 should reuse the resolution inclusion as its boundary." in report.issues

    def test_apex_must_start_at_the_root_domain(self, resolution, equipment):
        moved = replace(resolution, apex=identity_proarrow(equipment, STAR))
        report = check_resolution_of_relative_monad(moved)
        assert "Resolution apex loose morphism must originate at the root domain A." in report.issues
        assert "Forward comparison source left boundary should match '★'." in report.issues

    def test_monad_from_other_equipment_is_rejected(self, resolution):
        from equipment import two_object_category, virtualize_category

        other = describe_trivial_relative_monad(virtualize_category(two_object_category()), BULLET)
        report = check_resolution_of_relative_monad(resolution, other)
        assert "Resolution and relative monad must inhabit the same virtual equipment." in report.issues

    def test_transport_witness_must_keep_the_root(self, resolution, equipment, monad):
        elsewhere = describe_trivial_relative_monad(equipment, STAR)
        built = transport_loose_adjunction_along_left_adjoint(resolution, monad.root, transported=elsewhere)
        report = check_resolution_of_relative_monad(replace(resolution, metadata=built.metadata))
        assert (
            "Left-adjoint transport witness 1 must reuse the resolution inclusion as the transported root."
            in report.issues
        )


class TestLooseAdjunctions:
    def test_resolution_induces_loose_adjunction(self, resolution, monad):
        result = loose_adjunction_from_resolution(resolution)
        assert result.analysis.holds
        assert result.adjunction.left is resolution.apex
        assert result.adjunction.counit is monad.extension
        assert result.witness is None

    def test_constructions_register_their_witness(self, resolution, monad):
        forward = resolution.comparison.forward
        built = [
            ("precompositions", precompose_loose_adjunction(resolution, monad.root)),
            ("pastings", paste_loose_adjunction_along_resolution(resolution, forward, forward)),
            ("fully_faithful", postcompose_loose_adjunction_along_fully_faithful(resolution, monad.carrier)),
            ("resolute", compose_loose_adjunction_resolutely(resolution, monad.root, monad.carrier)),
            ("transports", transport_loose_adjunction_along_left_adjoint(resolution, monad.root)),
        ]
        for kind, result in built:
            assert result.analysis.holds
            assert result.metadata.counts()[kind] == 2
            assert getattr(result.metadata, kind)[-1] is result.witness
        assert resolution.metadata.counts()["pastings"] == 1

    def test_precomposition_defaults_to_forward_comparison(self, resolution, monad):
        result = precompose_loose_adjunction(resolution, monad.root)
        assert result.witness.comparison is resolution.comparison.forward
        assert result.witness.tight_cell is monad.root

    def test_transport_defaults_to_the_resolved_monad(self, resolution, monad):
        result = transport_loose_adjunction_along_left_adjoint(resolution, monad.root)
        assert result.witness.transported is monad
        assert result.witness.monad_morphism is resolution.comparison.forward


class TestLooseMonad:
    def test_loose_monad_is_extracted(self, resolution, monad):
        report = loose_monad_from_resolution(resolution)
        assert report.holds
        assert report.induced is monad.loose_cell
        assert report.details.startswith("Loose monad induced from the resolution coincides with E(j,t).")

    def test_loose_monad_extraction_rejects_moved_apex(self, resolution, equipment):
        report = loose_monad_from_resolution(replace(resolution, apex=identity_proarrow(equipment, STAR)))
        assert not report.holds
        assert "Loose monad arrow should start at the resolution domain." in report.issues
        assert report.details.startswith("Loose monad extraction issues: ")

    def test_isomorphism_validates_every_witness(self, resolution):
        report = check_loose_monad_isomorphism(resolution)
        assert report.holds
        assert report.coherence["transports"] == 1
        assert report.loose_monad.holds
        assert report.adjunction.analysis.holds
        assert "Validated witnesses: 1 precompositions" in report.details

    def test_misframed_precomposition_comparison_is_reported(self, resolution, equipment, monad):
        witness = ResolutionPrecompositionWitness(monad.root, _star_cell(equipment))
        moved = replace(resolution, metadata=resolution.metadata.extend(precompositions=[witness]))
        report = check_loose_monad_isomorphism(moved)
        assert not report.holds
        assert "Precomposition comparison 1 source left boundary should match '•'." in report.issues
        assert "Precomposition comparison 1 must start along the resolution inclusion boundary." in report.issues

    def test_misframed_pasting_is_reported(self, resolution, equipment):
        forward = resolution.comparison.forward
        built = paste_loose_adjunction_along_resolution(resolution, forward, _star_cell(equipment))
        report = check_loose_monad_isomorphism(replace(resolution, metadata=built.metadata))
        assert "Pasting witness 1 outer triangle must land in the relative monad carrier boundary." in report.issues
        assert (
            "Pasting witness 1 requires the inner right boundary to match the outer left boundary." in report.issues
        )

    def test_identification_prefixes_details(self, resolution):
        report = identify_loose_monad_from_resolution(resolution)
        assert report.holds
        assert report.details.startswith("Loose monad of the resolution identified with E(j,-)T. ")


class TestIdentityUnitCriterion:
    def test_identity_legs_make_monads_coincide(self, equipment, monad):
        report = check_identity_unit_for_relative_adjunction(equipment, monad.root, monad.carrier, monad.unit)
        assert report.holds
        assert report.monads_coincide
        assert report.details == "Identity-unit criterion holds; the induced j-monads coincide."

    def test_unit_must_sit_on_the_legs(self, equipment, monad):
        star = identity_vertical_boundary(equipment, STAR)
        report = check_identity_unit_for_relative_adjunction(equipment, star, monad.carrier, monad.unit)
        assert not report.holds
        assert not report.monads_coincide
        assert report.issues[0] == "Unit 2-cell must use the supplied left leg as its left boundary."
        assert "Unit source frame must originate at the left leg domain." in report.issues


class TestResolutionCategory:
    def test_singleton_category_satisfies_identity_laws(self, resolution):
        category = describe_singleton_resolution_category(resolution)
        identity = category.id(resolution)
        assert category.hom(resolution, resolution) == [identity]
        assert category.is_identity(identity)
        assert check_resolution_category_laws(category).holds
        assert len(category.morphisms) == 1

    def test_category_metadata_lists_each_witness_once(self, resolution):
        category = describe_singleton_resolution_category(resolution)
        assert category.metadata.counts() == resolution.metadata.counts()

    def test_identities_are_memoised(self, monad):
        first, second = describe_identity_resolution(monad), describe_identity_resolution(monad)
        category = category_of_resolutions(
            objects=[first, second],
            identity=describe_identity_resolution_morphism,
            compose=lambda g, f: f,
        )
        assert category.id(first) is category.id(first)
        assert category.hom(first, second) == []
        assert len(category.morphisms) == 2

    def test_mismatched_composition_raises(self, monad):
        first, second = describe_identity_resolution(monad), describe_identity_resolution(monad)
        category = category_of_resolutions(
            objects=[first, second],
            identity=describe_identity_resolution_morphism,
            compose=lambda g, f: f,
        )
        with pytest.raises(ValueError, match="compose only when codomain and domain match"):
            category.compose(category.id(second), category.id(first))

    def test_composite_with_wrong_endpoints_raises(self, monad):
        first, second = describe_identity_resolution(monad), describe_identity_resolution(monad)
        arrow = ResolutionMorphism(
            source=first, target=second, tight=monad.root, loose=first.apex, comparison=first.comparison
        )
        category = category_of_resolutions(
            objects=[first, second],
            identity=describe_identity_resolution_morphism,
            compose=lambda g, f: f,
            morphisms=[arrow],
        )
        assert category.hom(first, second) == [arrow]
        with pytest.raises(ValueError, match="Composite must map from the first domain"):
            category.compose(arrow, category.id(first))

    def test_identity_builder_must_return_an_endomorphism(self, monad):
        first, second = describe_identity_resolution(monad), describe_identity_resolution(monad)
        with pytest.raises(ValueError, match="Identity builder must produce"):
            category_of_resolutions(
                objects=[first],
                identity=lambda obj: describe_identity_resolution_morphism(second),
                compose=lambda g, f: f,
            )

    def test_fresh_composites_break_identity_laws(self, resolution):
        category = category_of_resolutions(
            objects=[resolution],
            identity=describe_identity_resolution_morphism,
            compose=lambda g, f: describe_identity_resolution_morphism(f.source),
        )
        report = check_resolution_category_laws(category)
        assert report.issues == [
            "Left identity law failed for morphism 0.",
            "Right identity law failed for morphism 0.",
        ]


class TestPrecompositionSuite:
    def test_identity_metadata_covers_every_branch(self, resolution):
        report = check_relative_adjunction_precomposition(resolution.metadata)
        assert report.holds
        assert report.precomposition.count == 1
        assert report.left_adjoint_transport.holds

    def test_missing_witnesses_are_reported_per_branch(self):
        report = check_relative_adjunction_precomposition(ResolutionMetadata())
        assert not report.holds
        assert report.issues == [
            "Precomposition witnesses were not supplied.",
            "Pasting witnesses were not supplied.",
            "Resolute composition witnesses were not supplied.",
            "Fully faithful postcomposition witnesses were not supplied.",
            "Left-adjoint transport witnesses were not supplied.",
        ]
        assert report.pasting.details == "Pasting witnesses were not supplied."
