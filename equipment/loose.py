"""Loose monoids and loose adjunctions in the loose hom of an equipment."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List

from .core import Equipment2Cell, Proarrow, VirtualEquipment, equality_for, identity_proarrow
from .framing import ensure_frame_alignment, frame_matches_loose_cell, single_arrow
from .reports import FramingReport, framing_report

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LooseMonoidData:
    """
    Monoid in the loose hom on a single object.

    Attributes:
        object: Object the loose arrow is an endomorphism of
        loose_cell: The carrier loose arrow
        multiplication: 2-cell from a composable chain into the carrier
        unit: 2-cell from the identity loose arrow into the carrier
    """

    object: Any
    loose_cell: Proarrow
    multiplication: Equipment2Cell
    unit: Equipment2Cell


@dataclass(frozen=True)
class LooseAdjunctionData:
    """
    Adjunction ℓ ⊣ r between loose arrows ℓ : X ⇸ Y and r : Y ⇸ X.

    Attributes:
        left: The left adjoint ℓ
        right: The right adjoint r
        unit: 2-cell framed on X
        counit: 2-cell framed on Y
    """

    left: Proarrow
    right: Proarrow
    unit: Equipment2Cell
    counit: Equipment2Cell


def analyze_loose_monoid_shape(equipment: VirtualEquipment, data: LooseMonoidData) -> FramingReport:
    equality = equality_for(equipment)
    issues: List[str] = []

    if not equality(data.loose_cell.from_obj, data.object) or not equality(data.loose_cell.to_obj, data.object):
        issues.append("Loose monoid carrier must be an endo loose arrow on the chosen object.")

    frame_matches_loose_cell(
        equality, data.multiplication.target, data.loose_cell, "Multiplication target", issues, "the carrier"
    )
    frame_matches_loose_cell(equality, data.unit.target, data.loose_cell, "Unit target", issues, "the carrier")
    ensure_frame_alignment(
        equality, data.multiplication.source, data.object, data.object, "Multiplication source", issues
    )
    ensure_frame_alignment(equality, data.unit.source, data.object, data.object, "Unit source", issues)

    identity = identity_proarrow(equipment, data.object)
    unit_arrow = single_arrow(data.unit.source)
    if unit_arrow is None or not (unit_arrow is identity or unit_arrow == identity):
        issues.append("Unit source should be the identity loose arrow on the chosen object.")

    for label, cell in (("Multiplication", data.multiplication), ("Unit", data.unit)):
        for side, boundary in (("left", cell.boundaries.left), ("right", cell.boundaries.right)):
            if not equality(boundary.from_obj, data.object) or not equality(boundary.to_obj, data.object):
                issues.append(f"{label} {side} boundary must start and end at the chosen object.")

    logger.debug(f"loose monoid shape on {data.object!r}: {len(issues)} issue(s)")
    return framing_report(
        issues,
        "Loose monoid multiplication and unit are framed on the chosen endo loose arrow.",
        "Loose monoid",
    )


def analyze_loose_adjunction(equipment: VirtualEquipment, data: LooseAdjunctionData) -> FramingReport:
    """
    Check that ℓ and r compose both ways and that the unit and counit are
    framed on the domain and codomain of ℓ respectively.
    """
    equality = equality_for(equipment)
    left, right = data.left, data.right
    issues: List[str] = []

    if not equality(right.from_obj, left.to_obj):
        issues.append("Loose adjunction right adjoint should start where the left adjoint ends.")
    if not equality(right.to_obj, left.from_obj):
        issues.append("Loose adjunction right adjoint should end where the left adjoint starts.")

    ensure_frame_alignment(
        equality, data.unit.source, left.from_obj, left.from_obj, "Loose adjunction unit source", issues
    )
    ensure_frame_alignment(
        equality, data.unit.target, left.from_obj, left.from_obj, "Loose adjunction unit target", issues
    )
    ensure_frame_alignment(
        equality, data.counit.source, left.to_obj, left.to_obj, "Loose adjunction counit source", issues
    )
    ensure_frame_alignment(
        equality, data.counit.target, left.to_obj, left.to_obj, "Loose adjunction counit target", issues
    )

    logger.debug(f"loose adjunction: {len(issues)} issue(s)")
    return framing_report(
        issues,
        "Loose adjunction legs compose both ways and the unit and counit are framed on their endpoints.",
        "Loose adjunction",
    )
