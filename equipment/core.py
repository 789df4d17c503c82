"""
Virtual equipment core model.

Objects, tight 1-cells (vertical boundaries), loose proarrows, frames and
2-cells, together with the identity and composition operations every
analyzer builds on.

Composition helpers return None when frames or boundaries fail to chain;
callers translate "no composite" into a diagnostic string.
"""

from __future__ import annotations

import abc
from dataclasses import dataclass, replace
from typing import Any, Callable, Optional, Sequence, Tuple

from .tight import TightFunctor, TightLayer

ObjectEquality = Callable[[Any, Any], bool]


@dataclass(frozen=True)
class Proarrow:
    """Loose arrow from_obj ⇸ to_obj carrying an equipment-specific payload."""

    from_obj: Any
    to_obj: Any
    payload: Any


@dataclass(frozen=True)
class Frame:
    """
    Ordered sequence of loose arrows with overall boundary objects.

    Attributes:
        arrows: The composable chain of proarrows
        left_boundary: Object the chain starts at
        right_boundary: Object the chain ends at
    """

    arrows: Tuple[Proarrow, ...]
    left_boundary: Any
    right_boundary: Any


@dataclass(frozen=True)
class VerticalBoundary:
    """Tight 1-cell from_obj → to_obj used as the side of a 2-cell."""

    from_obj: Any
    to_obj: Any
    tight: TightFunctor
    details: str = ""


@dataclass(frozen=True)
class CellBoundaries:
    left: VerticalBoundary
    right: VerticalBoundary


@dataclass(frozen=True)
class Equipment2Cell:
    """
    2-cell bounded by a source frame, a target frame and two vertical boundaries.

    The evidence is opaque; analyzers only ever compare it by reference.
    """

    source: Frame
    target: Frame
    boundaries: CellBoundaries
    evidence: Any


@dataclass(frozen=True)
class CartesianBoundary:
    direction: str
    vertical: VerticalBoundary
    details: str


@dataclass(frozen=True)
class CartesianCell(Equipment2Cell):
    """2-cell exhibiting a restriction as a cartesian filler."""

    boundary: Optional[CartesianBoundary] = None


@dataclass(frozen=True)
class RepresentabilityWitness:
    """Records that a restriction of the identity loose arrow is representable."""

    orientation: str  # "left" for companions B(-,f), "right" for conjoints B(f,-)
    object: Any
    tight: TightFunctor
    details: str


@dataclass(frozen=True)
class RestrictionResult:
    restricted: Proarrow
    cartesian: CartesianCell
    representability: Optional[RepresentabilityWitness]
    details: str


class VirtualEquipment(abc.ABC):
    """
    Ambient virtual double category with restrictions.

    Subclasses supply the loose and 2-cell structure; every operation returns
    None when the inputs do not chain.
    """

    objects: Tuple[Any, ...]
    equals_objects: Optional[ObjectEquality]
    tight: TightLayer

    @abc.abstractmethod
    def identity_proarrow_on(self, obj: Any) -> Proarrow:
        ...

    @abc.abstractmethod
    def horizontal_compose(self, g: Proarrow, f: Proarrow) -> Optional[Proarrow]:
        """Loose composite f ; g (f first)."""

    @abc.abstractmethod
    def horizontal_compose_many(self, chain: Sequence[Proarrow]) -> Optional[Proarrow]:
        ...

    @abc.abstractmethod
    def identity_evidence(self, frame: Frame, boundaries: CellBoundaries) -> Any:
        ...

    @abc.abstractmethod
    def vertical_compose_evidence(self, beta: Equipment2Cell, alpha: Equipment2Cell) -> Any:
        """Evidence for beta after alpha, or None."""

    @abc.abstractmethod
    def horizontal_compose_evidence(self, beta: Equipment2Cell, alpha: Equipment2Cell) -> Any:
        """Evidence for alpha placed to the left of beta, or None."""

    @abc.abstractmethod
    def whisker_left_evidence(self, frame: Frame, cell: Equipment2Cell) -> Any:
        ...

    @abc.abstractmethod
    def whisker_right_evidence(self, cell: Equipment2Cell, frame: Frame) -> Any:
        ...

    @abc.abstractmethod
    def restrict_left(self, tight: TightFunctor, proarrow: Proarrow) -> Optional[RestrictionResult]:
        """Left restriction B(f,1)."""

    @abc.abstractmethod
    def restrict_right(self, proarrow: Proarrow, tight: TightFunctor) -> Optional[RestrictionResult]:
        """Right restriction B(1,g)."""


def default_object_equality(left: Any, right: Any) -> bool:
    """Identity comparison with a structural fallback for value objects."""
    return left is right or left == right


def equality_for(equipment: VirtualEquipment) -> ObjectEquality:
    return equipment.equals_objects or default_object_equality


def identity_proarrow(equipment: VirtualEquipment, obj: Any) -> Proarrow:
    """The equipment identity on obj; endpoints are forced to obj when they differ."""
    identity = equipment.identity_proarrow_on(obj)
    if identity.from_obj is obj and identity.to_obj is obj:
        return identity
    return replace(identity, from_obj=obj, to_obj=obj)


def identity_vertical_boundary(
    equipment: VirtualEquipment,
    obj: Any,
    details: str = "Identity vertical boundary supplied by the tight layer.",
) -> VerticalBoundary:
    return VerticalBoundary(from_obj=obj, to_obj=obj, tight=equipment.tight.identity, details=details)


def vertical_boundaries_equal(
    equality: ObjectEquality, left: VerticalBoundary, right: VerticalBoundary
) -> bool:
    """Endpoints agree under the equality and the tight cells are the same handle."""
    return (
        equality(left.from_obj, right.from_obj)
        and equality(left.to_obj, right.to_obj)
        and left.tight is right.tight
    )


def is_identity_vertical_boundary(
    equipment: VirtualEquipment, obj: Any, boundary: VerticalBoundary
) -> bool:
    equality = equality_for(equipment)
    return (
        equality(boundary.from_obj, obj)
        and equality(boundary.to_obj, obj)
        and boundary.tight is equipment.tight.identity
    )


def frame_from_proarrow(proarrow: Proarrow) -> Frame:
    return Frame(arrows=(proarrow,), left_boundary=proarrow.from_obj, right_boundary=proarrow.to_obj)


def frame_from_sequence(arrows: Sequence[Proarrow], left_boundary: Any, right_boundary: Any) -> Frame:
    return Frame(arrows=tuple(arrows), left_boundary=left_boundary, right_boundary=right_boundary)


def juxtapose_identity_proarrows(equipment: VirtualEquipment, objects: Sequence[Any]) -> Tuple[Proarrow, ...]:
    return tuple(identity_proarrow(equipment, obj) for obj in objects)


def compose_vertical_boundaries(
    equipment: VirtualEquipment,
    upper: VerticalBoundary,
    lower: VerticalBoundary,
    details: str = "Vertical composite boundary induced by stacked 2-cells.",
) -> VerticalBoundary:
    """Stack lower then upper; lower.to_obj must already equal upper.from_obj."""
    return VerticalBoundary(
        from_obj=lower.from_obj,
        to_obj=upper.to_obj,
        tight=equipment.tight.compose(upper.tight, lower.tight),
        details=details,
    )


def identity_cell(equipment: VirtualEquipment, frame: Frame) -> Equipment2Cell:
    boundaries = CellBoundaries(
        left=identity_vertical_boundary(
            equipment, frame.left_boundary, "Identity left boundary induced by the proarrow domain."
        ),
        right=identity_vertical_boundary(
            equipment, frame.right_boundary, "Identity right boundary induced by the proarrow codomain."
        ),
    )
    return Equipment2Cell(
        source=frame,
        target=frame,
        boundaries=boundaries,
        evidence=equipment.identity_evidence(frame, boundaries),
    )


def _frames_share_boundaries(equality: ObjectEquality, left: Frame, right: Frame) -> bool:
    return equality(left.left_boundary, right.left_boundary) and equality(
        left.right_boundary, right.right_boundary
    )


def vertical_compose_cells(
    equipment: VirtualEquipment, beta: Equipment2Cell, alpha: Equipment2Cell
) -> Optional[Equipment2Cell]:
    """Paste beta below alpha (alpha first), or None when they do not chain."""
    equality = equality_for(equipment)
    if not _frames_share_boundaries(equality, alpha.target, beta.source):
        return None
    if not equality(alpha.boundaries.left.to_obj, beta.boundaries.left.from_obj):
        return None
    if not equality(alpha.boundaries.right.to_obj, beta.boundaries.right.from_obj):
        return None
    evidence = equipment.vertical_compose_evidence(beta, alpha)
    if evidence is None:
        return None
    boundaries = CellBoundaries(
        left=compose_vertical_boundaries(equipment, beta.boundaries.left, alpha.boundaries.left),
        right=compose_vertical_boundaries(equipment, beta.boundaries.right, alpha.boundaries.right),
    )
    return Equipment2Cell(source=alpha.source, target=beta.target, boundaries=boundaries, evidence=evidence)


def horizontal_compose_cells(
    equipment: VirtualEquipment, beta: Equipment2Cell, alpha: Equipment2Cell
) -> Optional[Equipment2Cell]:
    """Place alpha to the left of beta, or None when they do not chain."""
    equality = equality_for(equipment)
    if not equality(alpha.source.right_boundary, beta.source.left_boundary):
        return None
    if not equality(alpha.target.right_boundary, beta.target.left_boundary):
        return None
    if not vertical_boundaries_equal(equality, alpha.boundaries.right, beta.boundaries.left):
        return None
    if equipment.horizontal_compose_many(alpha.source.arrows + beta.source.arrows) is None:
        return None
    if equipment.horizontal_compose_many(alpha.target.arrows + beta.target.arrows) is None:
        return None
    evidence = equipment.horizontal_compose_evidence(beta, alpha)
    if evidence is None:
        return None
    return Equipment2Cell(
        source=frame_from_sequence(
            alpha.source.arrows + beta.source.arrows,
            alpha.source.left_boundary,
            beta.source.right_boundary,
        ),
        target=frame_from_sequence(
            alpha.target.arrows + beta.target.arrows,
            alpha.target.left_boundary,
            beta.target.right_boundary,
        ),
        boundaries=CellBoundaries(left=alpha.boundaries.left, right=beta.boundaries.right),
        evidence=evidence,
    )


def whisker_left_cell(
    equipment: VirtualEquipment, frame: Frame, cell: Equipment2Cell
) -> Optional[Equipment2Cell]:
    """Prepend a loose frame to both sides of the cell."""
    equality = equality_for(equipment)
    if not equality(frame.right_boundary, cell.source.left_boundary):
        return None
    if not equality(frame.right_boundary, cell.target.left_boundary):
        return None
    evidence = equipment.whisker_left_evidence(frame, cell)
    if evidence is None:
        return None
    return Equipment2Cell(
        source=frame_from_sequence(
            frame.arrows + cell.source.arrows, frame.left_boundary, cell.source.right_boundary
        ),
        target=frame_from_sequence(
            frame.arrows + cell.target.arrows, frame.left_boundary, cell.target.right_boundary
        ),
        boundaries=cell.boundaries,
        evidence=evidence,
    )


def whisker_right_cell(
    equipment: VirtualEquipment, cell: Equipment2Cell, frame: Frame
) -> Optional[Equipment2Cell]:
    """Append a loose frame to both sides of the cell."""
    equality = equality_for(equipment)
    if not equality(cell.source.right_boundary, frame.left_boundary):
        return None
    if not equality(cell.target.right_boundary, frame.left_boundary):
        return None
    evidence = equipment.whisker_right_evidence(cell, frame)
    if evidence is None:
        return None
    return Equipment2Cell(
        source=frame_from_sequence(
            cell.source.arrows + frame.arrows, cell.source.left_boundary, frame.right_boundary
        ),
        target=frame_from_sequence(
            cell.target.arrows + frame.arrows, cell.target.left_boundary, frame.right_boundary
        ),
        boundaries=cell.boundaries,
        evidence=evidence,
    )
