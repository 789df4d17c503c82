"""
Right lifts, right extensions and left extensions computed from weighted
colimits.

Only the framing of the universal cells is checked: which loose arrows the
unit and counit expose and which objects their vertical boundaries sit on.
The universal property itself is carried by the opaque evidence.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List

from .core import (
    Equipment2Cell,
    Frame,
    ObjectEquality,
    Proarrow,
    VerticalBoundary,
    VirtualEquipment,
    equality_for,
    frame_from_proarrow,
)
from .framing import frames_coincide
from .reports import FramingReport, framing_report
from .tight import TightFunctor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RightLiftData:
    """
    Right lift of a loose arrow p through a tight 1-cell f.

    Attributes:
        loose: The loose arrow p being lifted
        along: Tight 1-cell the lift is computed along
        lift: The lift arrow, starting at f applied to dom(p)
        unit: Universal 2-cell into p
    """

    loose: Proarrow
    along: TightFunctor
    lift: Proarrow
    unit: Equipment2Cell


@dataclass(frozen=True)
class PointwiseLeftLiftData:
    lift: RightLiftData
    along: TightFunctor


@dataclass(frozen=True)
class RightExtensionData:
    """
    Right extension of a loose arrow p along a tight 1-cell f.

    Attributes:
        loose: The loose arrow p being extended
        along: Tight 1-cell the extension is computed along
        extension: The extension arrow, starting at f applied to dom(p)
        counit: Universal 2-cell out of p
    """

    loose: Proarrow
    along: TightFunctor
    extension: Proarrow
    counit: Equipment2Cell


@dataclass(frozen=True)
class WeightedCoconeData:
    weight: Frame
    diagram: TightFunctor
    apex: Proarrow
    cocone: Equipment2Cell


@dataclass(frozen=True)
class LeftExtensionFromColimitData:
    colimit: WeightedCoconeData
    extension: RightExtensionData


def _boundary_on_object(
    equality: ObjectEquality, boundary: VerticalBoundary, obj: Any, label: str, issues: List[str]
) -> None:
    if not equality(boundary.from_obj, obj) or not equality(boundary.to_obj, obj):
        issues.append(f"{label} should be the identity vertical boundary on {obj!r}.")


def _last_arrow_lands(
    equality: ObjectEquality, frame: Frame, arrow: Proarrow, label: str, missing: str, issues: List[str]
) -> None:
    if not frame.arrows:
        issues.append(missing)
        return
    last = frame.arrows[-1]
    if not equality(last.from_obj, arrow.from_obj) or not equality(last.to_obj, arrow.to_obj):
        issues.append(f"{label} should end with an arrow {arrow.from_obj!r} ⇸ {arrow.to_obj!r}.")


def analyze_right_lift(equipment: VirtualEquipment, data: RightLiftData) -> FramingReport:
    equality = equality_for(equipment)
    issues: List[str] = []

    expected_domain = data.along.on_obj(data.loose.from_obj)
    if not equality(expected_domain, data.lift.from_obj):
        issues.append(f"Right lift should originate at {expected_domain!r}, the tight leg applied to dom(p).")
    if not equality(data.loose.to_obj, data.lift.to_obj):
        issues.append("Right lift codomain should equal the loose arrow codomain.")

    frames_coincide(equality, data.unit.target, frame_from_proarrow(data.loose), "Right lift unit target", issues)
    _last_arrow_lands(
        equality,
        data.unit.source,
        data.lift,
        "Right lift unit source",
        "Right lift unit source should contain the lift arrow.",
        issues,
    )
    _boundary_on_object(
        equality, data.unit.boundaries.left, data.loose.from_obj, "Right lift left vertical boundary", issues
    )
    _boundary_on_object(
        equality, data.unit.boundaries.right, data.loose.to_obj, "Right lift right vertical boundary", issues
    )

    logger.debug(f"right lift: {len(issues)} issue(s)")
    return framing_report(issues, "Right lift unit passes the framing checks.", "Right lift")


def analyze_pointwise_left_lift(equipment: VirtualEquipment, data: PointwiseLeftLiftData) -> FramingReport:
    issues: List[str] = []
    if data.lift.along is not data.along:
        issues.append("Pointwise left lift should be computed along the supplied tight 1-cell.")
    lift_report = analyze_right_lift(equipment, data.lift)
    issues.extend(lift_report.issues)

    logger.debug(f"pointwise left lift: {len(issues)} issue(s)")
    return framing_report(
        issues,
        "Right lift framing aligns with the designated tight 1-cell, giving a pointwise left lift.",
        "Pointwise left lift",
    )


def analyze_right_extension(equipment: VirtualEquipment, data: RightExtensionData) -> FramingReport:
    equality = equality_for(equipment)
    issues: List[str] = []

    expected_domain = data.along.on_obj(data.loose.from_obj)
    if not equality(expected_domain, data.extension.from_obj):
        issues.append(f"Right extension should originate at {expected_domain!r}, the tight leg applied to dom(p).")
    if not equality(data.loose.to_obj, data.extension.to_obj):
        issues.append("Right extension codomain should equal the loose arrow codomain.")

    frames_coincide(
        equality, data.counit.source, frame_from_proarrow(data.loose), "Right extension counit source", issues
    )
    _last_arrow_lands(
        equality,
        data.counit.target,
        data.extension,
        "Right extension counit target",
        "Right extension counit target should contain at least the extension arrow.",
        issues,
    )
    _boundary_on_object(
        equality, data.counit.boundaries.left, data.loose.from_obj, "Right extension left vertical boundary", issues
    )
    _boundary_on_object(
        equality, data.counit.boundaries.right, data.loose.to_obj, "Right extension right vertical boundary", issues
    )

    logger.debug(f"right extension: {len(issues)} issue(s)")
    return framing_report(issues, "Right extension counit passes the framing checks.", "Right extension")


def analyze_left_extension_from_weighted_colimit(
    equipment: VirtualEquipment, data: LeftExtensionFromColimitData
) -> FramingReport:
    """The extension counit must be framed by the weight and the cocone of the colimit."""
    equality = equality_for(equipment)
    weight, extension = data.colimit.weight, data.extension
    issues: List[str] = []

    if not equality(extension.loose.from_obj, weight.left_boundary):
        issues.append("Left extension loose arrow should originate at the weight domain.")
    if not equality(extension.loose.to_obj, weight.right_boundary):
        issues.append("Left extension loose arrow should land at the weight codomain.")
    frames_coincide(equality, extension.counit.source, weight, "Left extension counit source", issues)
    frames_coincide(
        equality, extension.counit.target, data.colimit.cocone.target, "Left extension counit target", issues
    )
    if extension.counit.boundaries.left.tight is not data.colimit.diagram:
        issues.append("Left extension counit should reuse the diagram tight 1-cell from the weighted cocone.")

    logger.debug(f"left extension from weighted colimit: {len(issues)} issue(s)")
    return framing_report(
        issues,
        "Left extension inherits its counit framing from the weighted colimit.",
        "Left extension",
    )


def describe_identity_right_lift(equipment: VirtualEquipment, loose: Proarrow, unit: Equipment2Cell) -> RightLiftData:
    """Lift of p along the identity: p itself, with the supplied unit."""
    return RightLiftData(loose=loose, along=equipment.tight.identity, lift=loose, unit=unit)


def describe_identity_left_extension(
    equipment: VirtualEquipment, loose: Proarrow, counit: Equipment2Cell
) -> LeftExtensionFromColimitData:
    """Extension of p along the identity computed from the colimit weighted by p itself."""
    identity = equipment.tight.identity
    weight = frame_from_proarrow(loose)
    return LeftExtensionFromColimitData(
        colimit=WeightedCoconeData(weight=weight, diagram=identity, apex=loose, cocone=counit),
        extension=RightExtensionData(loose=loose, along=identity, extension=loose, counit=counit),
    )
