"""
Resolutions of relative monads by relative adjunctions (Theorem 5.24).

An adjunction ℓ ⊣_j r resolves a j-relative monad T when the roots agree,
the carrier is the right leg and the forward hom-isomorphism target exposes
exactly the loose arrow E(j,r) the monad was built on.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Dict, List, Optional

from equipment.core import (
    CellBoundaries,
    Equipment2Cell,
    Proarrow,
    equality_for,
    frame_from_proarrow,
    identity_proarrow,
    identity_vertical_boundary,
    vertical_boundaries_equal,
)
from equipment.reports import FramingReport

from .adjunctions import (
    RelativeAdjunctionData,
    RelativeAdjunctionHomIsomorphism,
    analyze_relative_adjunction_hom_isomorphism,
)
from .monads import (
    RelativeMonadConstructionReport,
    RelativeMonadData,
    analyze_relative_monad_framing,
    relative_monad_from_equipment,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LooseMonadComparisonReport:
    """
    Comparison of the forward hom-isomorphism target with E(j,r).

    Attributes:
        holds: True when a unique matching arrow is the monad's loose cell
        issues: Comparison defects
        details: Summary line
        induced: First arrow of the target matching the loose cell's endpoints
    """

    holds: bool
    issues: List[str]
    details: str
    induced: Optional[Proarrow] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "holds": self.holds,
            "issues": list(self.issues),
            "details": self.details,
            "has_induced": self.induced is not None,
        }


@dataclass(frozen=True)
class RelativeMonadResolutionReport:
    holds: bool
    issues: List[str]
    details: str
    monad_framing: FramingReport
    hom_isomorphism: FramingReport
    loose_monad: LooseMonadComparisonReport

    def to_dict(self) -> Dict[str, Any]:
        return {
            "holds": self.holds,
            "issues": list(self.issues),
            "details": self.details,
            "monad_framing": self.monad_framing.to_dict(),
            "hom_isomorphism": self.hom_isomorphism.to_dict(),
            "loose_monad": self.loose_monad.to_dict(),
        }


def _compare_loose_monad(monad: RelativeMonadData, adjunction: RelativeAdjunctionData) -> LooseMonadComparisonReport:
    equality = equality_for(adjunction.equipment)
    loose_cell = monad.loose_cell
    target = adjunction.hom_isomorphism.forward.target
    issues: List[str] = []

    if not equality(target.left_boundary, loose_cell.from_obj):
        issues.append("Hom-isomorphism target should start at dom(j) to expose E(j,r).")
    if not equality(target.right_boundary, loose_cell.to_obj):
        issues.append("Hom-isomorphism target should end at cod(r) to expose E(j,r).")

    matching = [
        arrow
        for arrow in target.arrows
        if equality(arrow.from_obj, loose_cell.from_obj) and equality(arrow.to_obj, loose_cell.to_obj)
    ]
    induced: Optional[Proarrow] = None
    if not matching:
        issues.append("Hom-isomorphism target should contain a loose arrow matching E(j,r).")
    else:
        if len(matching) > 1:
            issues.append("Hom-isomorphism target should identify a unique loose arrow matching E(j,r).")
        induced = matching[0]
        if induced is not loose_cell:
            issues.append("Loose monad arrow C(ℓ,r) must coincide with the supplied E(j,r) witness.")

    holds = not issues
    return LooseMonadComparisonReport(
        holds=holds,
        issues=issues,
        details=(
            "Hom-isomorphism target realises the loose arrow E(j,r) as promised by Lemma 5.27 and Corollary 5.28."
            if holds
            else f"Loose monad comparison issues: {'; '.join(issues)}"
        ),
        induced=induced,
    )


def analyze_relative_monad_resolution(
    monad: RelativeMonadData, adjunction: RelativeAdjunctionData
) -> RelativeMonadResolutionReport:
    issues: List[str] = []
    if monad.equipment is not adjunction.equipment:
        issues.append("Relative adjunction and monad must share the same virtual equipment.")

    equality = equality_for(adjunction.equipment)
    if not vertical_boundaries_equal(equality, monad.root, adjunction.root):
        issues.append("Relative adjunction root j must match the monad root.")
    if not vertical_boundaries_equal(equality, monad.carrier, adjunction.right):
        issues.append("Relative monad carrier should match the right leg r.")
    if not equality(monad.loose_cell.from_obj, adjunction.root.from_obj):
        issues.append("Loose arrow E(j,r) should originate at the domain of j.")
    if not equality(monad.loose_cell.to_obj, adjunction.right.to_obj):
        issues.append("Loose arrow E(j,r) should land at the codomain of r.")

    monad_framing = analyze_relative_monad_framing(monad)
    hom_isomorphism = analyze_relative_adjunction_hom_isomorphism(adjunction)
    loose_monad = _compare_loose_monad(monad, adjunction)

    combined = issues + monad_framing.issues + hom_isomorphism.issues + loose_monad.issues
    holds = not combined
    logger.debug(f"relative monad resolution: {len(combined)} issue(s)")
    return RelativeMonadResolutionReport(
        holds=holds,
        issues=combined,
        details=(
            "Relative adjunction resolves the monad: root, carrier, and loose arrow agree with Theorem 5.24."
            if holds
            else f"Relative adjunction resolution issues: {'; '.join(combined)}"
        ),
        monad_framing=monad_framing,
        hom_isomorphism=hom_isomorphism,
        loose_monad=loose_monad,
    )


def _extract_loose_cell(adjunction: RelativeAdjunctionData, issues: List[str]) -> Proarrow:
    equality = equality_for(adjunction.equipment)
    root, right = adjunction.root, adjunction.right
    target = adjunction.hom_isomorphism.forward.target

    matching = [
        arrow
        for arrow in target.arrows
        if equality(arrow.from_obj, root.from_obj) and equality(arrow.to_obj, right.to_obj)
    ]
    if len(matching) == 1:
        return matching[0]
    if matching:
        issues.append(
            "Hom-isomorphism target contains multiple arrows matching dom(j) and cod(r); defaulted to the first."
        )
        return matching[0]
    if target.arrows:
        issues.append("Hom-isomorphism target lacks an arrow with dom(j) and cod(r); defaulted to its first arrow.")
        return target.arrows[0]
    issues.append("Hom-isomorphism target does not expose any loose arrows; defaulted to the identity on dom(j).")
    return identity_proarrow(adjunction.equipment, root.from_obj)


def relative_monad_from_adjunction(
    adjunction: RelativeAdjunctionData,
    loose_cell: Optional[Proarrow] = None,
    unit: Optional[Equipment2Cell] = None,
    extension: Optional[Equipment2Cell] = None,
) -> RelativeMonadConstructionReport:
    """
    Derive the j-relative monad induced by ℓ ⊣_j r.

    The loose arrow is read off the forward hom-isomorphism target unless one
    is supplied; unit and extension default to identity cells on it. The
    result carries `adjunction_hom_isomorphism` and `resolution` in extras.
    """
    equipment = adjunction.equipment
    root, right = adjunction.root, adjunction.right
    hom_isomorphism = analyze_relative_adjunction_hom_isomorphism(adjunction)

    extraction_issues: List[str] = []
    if loose_cell is None:
        loose_cell = _extract_loose_cell(adjunction, extraction_issues)

    frame = frame_from_proarrow(loose_cell)
    boundaries = CellBoundaries(left=root, right=right)
    evidence = equipment.identity_evidence(frame, boundaries)
    if unit is None:
        unit = Equipment2Cell(source=frame, target=frame, boundaries=boundaries, evidence=evidence)
    if extension is None:
        extension = Equipment2Cell(source=frame, target=frame, boundaries=boundaries, evidence=evidence)

    monad = RelativeMonadData(
        equipment=equipment,
        root=root,
        carrier=right,
        loose_cell=loose_cell,
        extension=extension,
        unit=unit,
    )
    base = relative_monad_from_equipment(monad)
    resolution = analyze_relative_monad_resolution(monad, adjunction)

    combined = list(base.issues) + extraction_issues
    if not hom_isomorphism.holds:
        combined.extend(f"Hom-isomorphism: {issue}" for issue in hom_isomorphism.issues)
    if not resolution.holds:
        combined.extend(resolution.issues)

    holds = base.holds and not extraction_issues and hom_isomorphism.holds and resolution.holds
    if holds:
        details = f"Relative adjunction induced monad: {base.details} {resolution.details}"
    else:
        fragments = []
        if extraction_issues:
            fragments.append(f"Loose arrow extraction issues: {'; '.join(extraction_issues)}")
        for report in (base, hom_isomorphism, resolution):
            if not report.holds:
                fragments.append(report.details)
        details = " ".join(fragments)

    logger.debug(f"relative monad from adjunction: {len(combined)} issue(s)")
    return replace(
        base,
        holds=holds,
        issues=[] if holds else combined,
        details=details,
        monad=monad,
        extras={"adjunction_hom_isomorphism": hom_isomorphism, "resolution": resolution},
    )


def describe_relative_monad_resolution(monad: RelativeMonadData) -> RelativeAdjunctionData:
    """Canonical resolution: root j, identity left leg on dom(j), right leg t, hom cells on E(j,t)."""
    equipment = monad.equipment
    left = identity_vertical_boundary(
        equipment, monad.root.from_obj, "Resolution left leg chosen as the identity on dom(j)."
    )
    frame = frame_from_proarrow(monad.loose_cell)
    boundaries = CellBoundaries(left=left, right=monad.carrier)
    evidence = equipment.identity_evidence(frame, boundaries)
    logger.debug("described canonical relative monad resolution")
    return RelativeAdjunctionData(
        equipment=equipment,
        root=monad.root,
        left=left,
        right=monad.carrier,
        hom_isomorphism=RelativeAdjunctionHomIsomorphism(
            forward=Equipment2Cell(source=frame, target=frame, boundaries=boundaries, evidence=evidence),
            backward=Equipment2Cell(source=frame, target=frame, boundaries=boundaries, evidence=evidence),
            details="Hom-set isomorphism framed on the loose arrow E(j,t) of the resolved monad.",
        ),
    )
