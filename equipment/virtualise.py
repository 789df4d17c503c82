"""
Virtualise an ordinary category as a degenerate equipment.

Proarrows carry tight functors as payload and 2-cells carry natural
transformations as evidence. Endpoint checks happen here; all diagrammatic
structure is forwarded to the tight layer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence, Tuple

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
    default_object_equality,
    frame_from_proarrow,
)
from .tight import FiniteCategory, NaturalTransformation, TightFunctor, TightLayer, default_tight_layer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TightEvidence:
    """Evidence that a 2-cell is an honest natural transformation."""

    cell: NaturalTransformation
    kind: str = "tight"


@dataclass(frozen=True)
class CartesianEvidence:
    """Evidence attached to the cartesian filler of a restriction."""

    direction: str
    tight: TightFunctor
    details: str
    boundary: VerticalBoundary
    cell: NaturalTransformation
    kind: str = "cartesian"


def _is_tight(evidence: Any) -> bool:
    return isinstance(evidence, TightEvidence)


class TightCategoryEquipment(VirtualEquipment):
    """VirtualEquipment realised by a tight layer over a finite category."""

    def __init__(
        self,
        tight: TightLayer,
        objects: Sequence[Any] = (),
        equals_objects: Optional[ObjectEquality] = None,
    ) -> None:
        self.tight = tight
        self.objects: Tuple[Any, ...] = tuple(objects)
        self.equals_objects = equals_objects or default_object_equality
        self._identities: List[Tuple[Any, Proarrow]] = []

    def __repr__(self) -> str:
        return f"TightCategoryEquipment({self.tight.category.label}, objects={self.objects!r})"

    # ------------------------------------------------------------------
    # Loose structure
    # ------------------------------------------------------------------

    def identity_proarrow_on(self, obj: Any) -> Proarrow:
        # Identity loose arrows are memoised per object.
        for known, identity in self._identities:
            if self.equals_objects(known, obj):
                return identity
        identity = Proarrow(from_obj=obj, to_obj=obj, payload=self.tight.identity)
        self._identities.append((obj, identity))
        return identity

    def horizontal_compose(self, g: Proarrow, f: Proarrow) -> Optional[Proarrow]:
        if not self.equals_objects(f.to_obj, g.from_obj):
            return None
        return Proarrow(from_obj=f.from_obj, to_obj=g.to_obj, payload=self.tight.compose(g.payload, f.payload))

    def horizontal_compose_many(self, chain: Sequence[Proarrow]) -> Optional[Proarrow]:
        if not chain:
            return None
        first = chain[0]
        accumulator = Proarrow(from_obj=first.from_obj, to_obj=first.to_obj, payload=first.payload)
        for following in chain[1:]:
            composite = self.horizontal_compose(following, accumulator)
            if composite is None:
                return None
            accumulator = composite
        return accumulator

    def _frame_payload(self, arrows: Sequence[Proarrow]) -> TightFunctor:
        payload = self.tight.identity
        for arrow in arrows:
            payload = arrow.payload if payload is self.tight.identity else self.tight.compose(arrow.payload, payload)
        return payload

    # ------------------------------------------------------------------
    # 2-cell evidence
    # ------------------------------------------------------------------

    def identity_evidence(self, frame: Frame, boundaries: CellBoundaries) -> TightEvidence:
        return TightEvidence(cell=self.tight.identity2(self._frame_payload(frame.arrows)))

    def vertical_compose_evidence(self, beta: Equipment2Cell, alpha: Equipment2Cell) -> Optional[TightEvidence]:
        eq = self.equals_objects
        if not (_is_tight(beta.evidence) and _is_tight(alpha.evidence)):
            return None
        if not (
            eq(alpha.target.left_boundary, beta.source.left_boundary)
            and eq(alpha.target.right_boundary, beta.source.right_boundary)
            and eq(alpha.boundaries.left.to_obj, beta.boundaries.left.from_obj)
            and eq(alpha.boundaries.right.to_obj, beta.boundaries.right.from_obj)
        ):
            return None
        return TightEvidence(cell=self.tight.vertical_compose2(alpha.evidence.cell, beta.evidence.cell))

    def horizontal_compose_evidence(self, beta: Equipment2Cell, alpha: Equipment2Cell) -> Optional[TightEvidence]:
        eq = self.equals_objects
        if not (_is_tight(beta.evidence) and _is_tight(alpha.evidence)):
            return None
        if not (
            eq(alpha.source.right_boundary, beta.source.left_boundary)
            and eq(alpha.target.right_boundary, beta.target.left_boundary)
            and eq(alpha.boundaries.right.from_obj, beta.boundaries.left.from_obj)
            and eq(alpha.boundaries.right.to_obj, beta.boundaries.left.to_obj)
        ):
            return None
        return TightEvidence(cell=self.tight.horizontal_compose2(alpha.evidence.cell, beta.evidence.cell))

    def whisker_left_evidence(self, frame: Frame, cell: Equipment2Cell) -> Optional[TightEvidence]:
        eq = self.equals_objects
        if not _is_tight(cell.evidence):
            return None
        if not (
            eq(frame.right_boundary, cell.source.left_boundary) and eq(frame.right_boundary, cell.target.left_boundary)
        ):
            return None
        return TightEvidence(cell=self.tight.whisker_left(self._frame_payload(frame.arrows), cell.evidence.cell))

    def whisker_right_evidence(self, cell: Equipment2Cell, frame: Frame) -> Optional[TightEvidence]:
        eq = self.equals_objects
        if not _is_tight(cell.evidence):
            return None
        if not (
            eq(cell.source.right_boundary, frame.left_boundary) and eq(cell.target.right_boundary, frame.left_boundary)
        ):
            return None
        return TightEvidence(cell=self.tight.whisker_right(cell.evidence.cell, self._frame_payload(frame.arrows)))

    # ------------------------------------------------------------------
    # Restrictions
    # ------------------------------------------------------------------

    def _respects_boundary(self, proarrow: Proarrow) -> bool:
        return self.equals_objects(proarrow.payload.on_obj(proarrow.from_obj), proarrow.to_obj)

    def restrict_left(self, tight: TightFunctor, proarrow: Proarrow) -> Optional[RestrictionResult]:
        eq = self.equals_objects
        if not self._respects_boundary(proarrow):
            logger.debug("left restriction refused: payload does not respect the proarrow boundary")
            return None

        preimage = next((obj for obj in self.objects if eq(tight.on_obj(obj), proarrow.from_obj)), None)
        if preimage is None:
            logger.debug("left restriction refused: no preimage for the proarrow domain")
            return None

        if tight is self.tight.identity:
            # Restricting along the identity keeps the loose arrow itself.
            restricted = proarrow
        else:
            payload = self.tight.compose(proarrow.payload, tight)
            restricted_to = payload.on_obj(preimage)
            if not eq(restricted_to, proarrow.to_obj):
                return None
            restricted = Proarrow(from_obj=preimage, to_obj=restricted_to, payload=payload)

        left = VerticalBoundary(
            from_obj=preimage,
            to_obj=proarrow.from_obj,
            tight=tight,
            details="Left restriction boundary induced by the supplied tight 1-cell.",
        )
        right = VerticalBoundary(
            from_obj=restricted.to_obj,
            to_obj=proarrow.to_obj,
            tight=self.tight.identity,
            details="Right boundary remains the identity because the codomain is unchanged.",
        )
        evidence = CartesianEvidence(
            direction="left",
            tight=tight,
            details=(
                "Cartesian witness for the left restriction B(f,1) obtained by precomposing "
                "the loose arrow with the tight 1-cell."
            ),
            boundary=left,
            cell=self.tight.identity2(restricted.payload),
        )
        representability = None
        if proarrow.payload is self.tight.identity:
            representability = RepresentabilityWitness(
                orientation="left",
                object=proarrow.from_obj,
                tight=tight,
                details="Restriction of the identity loose arrow exhibits the representable companion B(-,f).",
            )
        cartesian = CartesianCell(
            source=frame_from_proarrow(restricted),
            target=frame_from_proarrow(proarrow),
            boundaries=CellBoundaries(left=left, right=right),
            evidence=evidence,
            boundary=CartesianBoundary(
                direction="left",
                vertical=left,
                details="Left restriction reuses the supplied tight 1-cell as the cartesian boundary witness.",
            ),
        )
        return RestrictionResult(
            restricted=restricted,
            cartesian=cartesian,
            representability=representability,
            details=(
                "Successfully computed the left restriction by precomposing the proarrow "
                "payload with the supplied tight 1-cell."
            ),
        )

    def restrict_right(self, proarrow: Proarrow, tight: TightFunctor) -> Optional[RestrictionResult]:
        if not self._respects_boundary(proarrow):
            logger.debug("right restriction refused: payload does not respect the proarrow boundary")
            return None

        if tight is self.tight.identity:
            restricted = proarrow
        else:
            payload = self.tight.compose(tight, proarrow.payload)
            restricted = Proarrow(
                from_obj=proarrow.from_obj,
                to_obj=payload.on_obj(proarrow.from_obj),
                payload=payload,
            )

        left = VerticalBoundary(
            from_obj=proarrow.from_obj,
            to_obj=proarrow.from_obj,
            tight=self.tight.identity,
            details="Left boundary remains the identity because the domain is unchanged.",
        )
        right = VerticalBoundary(
            from_obj=proarrow.to_obj,
            to_obj=restricted.to_obj,
            tight=tight,
            details="Right restriction boundary induced by the supplied tight 1-cell.",
        )
        evidence = CartesianEvidence(
            direction="right",
            tight=tight,
            details=(
                "Cartesian witness for the right restriction B(1,g) obtained by postcomposing "
                "the loose arrow with the tight 1-cell."
            ),
            boundary=right,
            cell=self.tight.identity2(restricted.payload),
        )
        representability = None
        if proarrow.payload is self.tight.identity:
            representability = RepresentabilityWitness(
                orientation="right",
                object=proarrow.to_obj,
                tight=tight,
                details="Restriction of the identity loose arrow exhibits the representable conjoint B(f,-).",
            )
        cartesian = CartesianCell(
            source=frame_from_proarrow(restricted),
            target=frame_from_proarrow(proarrow),
            boundaries=CellBoundaries(left=left, right=right),
            evidence=evidence,
            boundary=CartesianBoundary(
                direction="right",
                vertical=right,
                details="Right restriction reuses the supplied tight 1-cell as the cartesian boundary witness.",
            ),
        )
        return RestrictionResult(
            restricted=restricted,
            cartesian=cartesian,
            representability=representability,
            details=(
                "Successfully computed the right restriction by postcomposing the proarrow "
                "payload with the supplied tight 1-cell."
            ),
        )


def virtualise_tight_category(
    tight: TightLayer,
    objects: Sequence[Any] = (),
    equals_objects: Optional[ObjectEquality] = None,
) -> TightCategoryEquipment:
    return TightCategoryEquipment(tight, objects, equals_objects)


def virtualize_category(
    category: FiniteCategory,
    objects: Optional[Sequence[Any]] = None,
    equals_objects: Optional[ObjectEquality] = None,
) -> TightCategoryEquipment:
    """Build the equipment of a finite category over its default tight layer."""
    equipment = virtualise_tight_category(
        default_tight_layer(category),
        category.objects if objects is None else objects,
        equals_objects,
    )
    logger.debug(f"virtualised category {category.label} with {len(equipment.objects)} object(s)")
    return equipment
