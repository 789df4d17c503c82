"""
Tests for the equipment core: tight layer, virtualised equipment, restrictions
and the cell composition helpers.
"""

import pytest

from equipment import (
    Arrow,
    CellBoundaries,
    Equipment2Cell,
    FiniteCategory,
    TightFunctor,
    check_functor_laws,
    compose_vertical_boundaries,
    frame_from_proarrow,
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
from equipment.core import default_object_equality

BULLET = "•"
STAR = "★"


class TestFiniteCategory:
    """Tests for the finite tight category."""

    def test_rejects_arrow_on_unknown_object(self):
        """Arrows must stay inside the declared objects."""
        with pytest.raises(ValueError, match="unknown object"):
            FiniteCategory(objects=("a",), arrows=(Arrow(name="f", source="a", target="b"),))

    def test_rejects_composition_on_unknown_arrow(self):
        with pytest.raises(ValueError, match="unknown arrow"):
            FiniteCategory(
                objects=("a",),
                arrows=(Arrow(name="f", source="a", target="a"),),
                composition={("f", "g"): "f"},
            )

    def test_rejects_composition_that_does_not_chain(self):
        """Both f and g start at a, so g ∘ f has no meaning."""
        with pytest.raises(ValueError, match="does not chain"):
            FiniteCategory(
                objects=("a", "b"),
                arrows=(Arrow(name="f", source="a", target="b"), Arrow(name="g", source="a", target="b")),
                composition={("g", "f"): "f"},
            )

    def test_rejects_composite_with_wrong_endpoints(self):
        with pytest.raises(ValueError, match="wrong endpoints"):
            FiniteCategory(
                objects=("a", "b", "c"),
                arrows=(
                    Arrow(name="f", source="a", target="b"),
                    Arrow(name="g", source="b", target="c"),
                    Arrow(name="h", source="b", target="c"),
                ),
                composition={("g", "f"): "h"},
            )

    def test_accepts_chained_composition(self):
        category = FiniteCategory(
            objects=("a", "b", "c"),
            arrows=(
                Arrow(name="f", source="a", target="b"),
                Arrow(name="g", source="b", target="c"),
                Arrow(name="gf", source="a", target="c"),
            ),
            composition={("g", "f"): "gf"},
        )
        f, g = category.arrows[0], category.arrows[1]
        assert category.compose(g, f).name == "gf"

    def test_identities_are_units(self, category):
        f = category.arrows[0]
        assert category.compose(f, category.id(BULLET)) == f
        assert category.compose(category.id(STAR), f) == f

    def test_non_composable_pair_returns_none(self, category):
        f = category.arrows[0]
        assert category.compose(f, f) is None

    def test_hom_lists_identity_and_arrow(self, category):
        assert [arrow.name for arrow in category.hom(BULLET, STAR)] == ["f"]
        assert category.hom(BULLET, BULLET) == [category.id(BULLET)]


class TestFunctorLaws:
    """Tests for check_functor_laws."""

    def test_identity_functor_holds(self, equipment, category):
        report = check_functor_laws(equipment.tight.identity, category)
        assert report.holds
        assert report.issues == []

    def test_functor_leaving_category_fails(self, category):
        escaping = TightFunctor(on_obj=lambda obj: "elsewhere", on_mor=lambda arrow: arrow, label="E")
        report = check_functor_laws(escaping, category)
        assert not report.holds
        assert any("outside the category" in issue for issue in report.issues)


class TestIdentities:
    """Tests for identity proarrows and boundaries."""

    def test_identity_proarrow_is_memoised(self, equipment):
        assert identity_proarrow(equipment, BULLET) is identity_proarrow(equipment, BULLET)

    def test_identity_boundary_reuses_tight_identity(self, equipment):
        boundary = identity_vertical_boundary(equipment, BULLET)
        assert boundary.tight is equipment.tight.identity
        assert is_identity_vertical_boundary(equipment, BULLET, boundary)
        assert not is_identity_vertical_boundary(equipment, STAR, boundary)

    def test_juxtapose_identity_proarrows(self, equipment):
        arrows = juxtapose_identity_proarrows(equipment, [BULLET, STAR])
        assert [(arrow.from_obj, arrow.to_obj) for arrow in arrows] == [(BULLET, BULLET), (STAR, STAR)]

    def test_default_object_equality_falls_back_to_value(self):
        assert default_object_equality((1, 2), (1, 2))
        assert not default_object_equality(BULLET, STAR)


class TestVerticalBoundaries:
    """Composite boundaries are compared by tight handle, not by action."""

    def test_composite_is_new_tight_cell(self, equipment):
        boundary = identity_vertical_boundary(equipment, BULLET)
        composite = compose_vertical_boundaries(equipment, boundary, boundary)
        assert composite.from_obj == BULLET
        assert composite.to_obj == BULLET
        assert not vertical_boundaries_equal(default_object_equality, composite, boundary)

    def test_distinct_boundaries_with_same_handle_are_equal(self, equipment):
        first = identity_vertical_boundary(equipment, BULLET, "first")
        second = identity_vertical_boundary(equipment, BULLET, "second")
        assert first is not second
        assert vertical_boundaries_equal(default_object_equality, first, second)


class TestCellComposition:
    """Composition helpers return None instead of raising when cells do not chain."""

    def test_vertical_composite_of_identity_cells(self, equipment):
        cell = identity_cell(equipment, frame_from_proarrow(identity_proarrow(equipment, BULLET)))
        composite = vertical_compose_cells(equipment, cell, cell)
        assert composite is not None
        assert composite.source is cell.source
        assert composite.target is cell.target

    def test_vertical_composite_refuses_mismatched_frames(self, equipment):
        on_bullet = identity_cell(equipment, frame_from_proarrow(identity_proarrow(equipment, BULLET)))
        on_star = identity_cell(equipment, frame_from_proarrow(identity_proarrow(equipment, STAR)))
        assert vertical_compose_cells(equipment, on_star, on_bullet) is None

    def test_vertical_composite_refuses_opaque_evidence(self, equipment):
        cell = identity_cell(equipment, frame_from_proarrow(identity_proarrow(equipment, BULLET)))
        opaque = Equipment2Cell(
            source=cell.source, target=cell.target, boundaries=cell.boundaries, evidence="opaque"
        )
        assert vertical_compose_cells(equipment, opaque, cell) is None

    def test_horizontal_composite_concatenates_frames(self, equipment):
        cell = identity_cell(equipment, frame_from_proarrow(identity_proarrow(equipment, BULLET)))
        composite = horizontal_compose_cells(equipment, cell, cell)
        assert composite is not None
        assert len(composite.source.arrows) == 2
        assert composite.boundaries.left is cell.boundaries.left
        assert composite.boundaries.right is cell.boundaries.right

    def test_horizontal_composite_refuses_gap(self, equipment):
        on_bullet = identity_cell(equipment, frame_from_proarrow(identity_proarrow(equipment, BULLET)))
        on_star = identity_cell(equipment, frame_from_proarrow(identity_proarrow(equipment, STAR)))
        assert horizontal_compose_cells(equipment, on_star, on_bullet) is None

    def test_whisker_left_prepends_frame(self, equipment):
        frame = frame_from_proarrow(identity_proarrow(equipment, BULLET))
        cell = identity_cell(equipment, frame)
        whiskered = whisker_left_cell(equipment, frame, cell)
        assert whiskered is not None
        assert len(whiskered.source.arrows) == 2
        assert whiskered.boundaries is cell.boundaries

    def test_whisker_right_appends_frame(self, equipment):
        cell = identity_cell(equipment, frame_from_proarrow(identity_proarrow(equipment, BULLET)))
        whiskered = whisker_right_cell(equipment, cell, frame_from_proarrow(identity_proarrow(equipment, BULLET)))
        assert whiskered is not None
        assert len(whiskered.target.arrows) == 2
        assert whisker_right_cell(equipment, cell, frame_from_proarrow(identity_proarrow(equipment, STAR))) is None


class TestRestrictions:
    """Tests for left and right restrictions in the virtualised equipment."""

    def test_left_restriction_along_identity_keeps_proarrow(self, equipment):
        proarrow = identity_proarrow(equipment, BULLET)
        result = equipment.restrict_left(equipment.tight.identity, proarrow)
        assert result is not None
        assert result.restricted is proarrow
        assert result.representability is not None
        assert result.representability.orientation == "left"
        assert result.representability.object == BULLET

    def test_right_restriction_records_conjoint(self, equipment):
        proarrow = identity_proarrow(equipment, STAR)
        result = equipment.restrict_right(proarrow, equipment.tight.identity)
        assert result is not None
        assert result.restricted is proarrow
        assert result.representability.orientation == "right"
        assert result.representability.object == STAR
        assert result.cartesian.boundary.direction == "right"

    def test_left_restriction_along_constant_functor(self, equipment):
        constant = TightFunctor(
            on_obj=lambda obj: STAR,
            on_mor=lambda arrow: Arrow(name=f"id_{STAR}", source=STAR, target=STAR),
            label="const★",
        )
        proarrow = identity_proarrow(equipment, STAR)
        result = equipment.restrict_left(constant, proarrow)
        assert result is not None
        assert result.restricted is not proarrow
        assert result.restricted.from_obj == BULLET
        assert result.restricted.to_obj == STAR
        assert result.cartesian.boundaries.left.tight is constant
        assert result.representability.tight is constant

    def test_restriction_refused_when_payload_ignores_boundary(self, equipment):
        broken = identity_proarrow(equipment, BULLET)
        broken = type(broken)(from_obj=BULLET, to_obj=STAR, payload=equipment.tight.identity)
        assert equipment.restrict_left(equipment.tight.identity, broken) is None
        assert equipment.restrict_right(broken, equipment.tight.identity) is None

    def test_non_identity_payload_is_not_representable(self, equipment):
        constant = TightFunctor(on_obj=lambda obj: STAR, on_mor=lambda arrow: arrow, label="const★")
        proarrow = type(identity_proarrow(equipment, BULLET))(from_obj=BULLET, to_obj=STAR, payload=constant)
        result = equipment.restrict_right(proarrow, equipment.tight.identity)
        assert result is not None
        assert result.representability is None


class TestCellBoundaries:
    def test_identity_cell_uses_identity_boundaries(self, equipment):
        cell = identity_cell(equipment, frame_from_proarrow(identity_proarrow(equipment, BULLET)))
        assert isinstance(cell.boundaries, CellBoundaries)
        assert cell.boundaries.left.tight is equipment.tight.identity
        assert cell.boundaries.right.tight is equipment.tight.identity
