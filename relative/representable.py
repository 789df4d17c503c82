"""
Relative monads over a representable root.

When the left restriction B(j,1) is representable, a j-relative monad is a
monoid in the skew-monoidal loose hom on dom(j) whose tensor is computed by
left extension along j. The bridge analyzer checks that the loose monoid,
the representability witness and the left extension all describe the same
monad; representable recovery layers the comparison with the monoids of
Levy and Altenkirch–Chapman–Uustalu on top of it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from equipment.core import RepresentabilityWitness, equality_for
from equipment.extensions import (
    LeftExtensionFromColimitData,
    analyze_left_extension_from_weighted_colimit,
    analyze_right_extension,
    describe_identity_left_extension,
)
from equipment.framing import collect_report_issues
from equipment.loose import LooseMonoidData, analyze_loose_monoid_shape
from equipment.reports import PendingReport, pending_report, structural_report

from .monads import RelativeMonadData, analyze_relative_monad_representability, relative_monad_from_equipment

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RelativeMonadSkewMonoidBridgeInput:
    """
    Data comparing a relative monad with a skew monoid.

    Attributes:
        relative: The relative monad
        monoid: Loose monoid on dom(j); must reuse the extension and unit
        representability: Witness that B(j,1) is representable, when known
        left_extension: Left extension along j computing the skew tensor
    """

    relative: RelativeMonadData
    monoid: LooseMonoidData
    representability: Optional[RepresentabilityWitness]
    left_extension: LeftExtensionFromColimitData


def describe_relative_monad_skew_monoid_bridge(monad: RelativeMonadData) -> RelativeMonadSkewMonoidBridgeInput:
    equipment = monad.equipment
    monoid = LooseMonoidData(
        object=monad.root.from_obj,
        loose_cell=monad.loose_cell,
        multiplication=monad.extension,
        unit=monad.unit,
    )
    return RelativeMonadSkewMonoidBridgeInput(
        relative=monad,
        monoid=monoid,
        representability=relative_monad_from_equipment(monad, monoid).representability,
        left_extension=describe_identity_left_extension(equipment, monad.loose_cell, monad.extension),
    )


def analyze_relative_monad_skew_monoid_bridge(bridge: RelativeMonadSkewMonoidBridgeInput) -> PendingReport:
    relative, monoid = bridge.relative, bridge.monoid
    equipment = relative.equipment
    equality = equality_for(equipment)
    issues: List[str] = []

    if not equality(monoid.loose_cell.from_obj, relative.loose_cell.from_obj):
        issues.append("Loose monoid object should share the relative monad's source endpoint.")
    if not equality(monoid.loose_cell.to_obj, relative.loose_cell.to_obj):
        issues.append("Loose monoid object should share the relative monad's target endpoint.")
    if monoid.multiplication is not relative.extension:
        issues.append("Loose monoid multiplication must reuse the relative monad's extension 2-cell.")
    if monoid.unit is not relative.unit:
        issues.append("Loose monoid unit must reuse the relative monad's unit 2-cell.")

    representability_report = None
    if bridge.representability is None:
        issues.append("Skew-monoid bridge requires a representability witness for B(j,1).")
    else:
        representability_report = analyze_relative_monad_representability(relative, bridge.representability)
        collect_report_issues("Representability", representability_report, issues)

    shape_report = analyze_loose_monoid_shape(equipment, monoid)
    collect_report_issues("Loose monoid framing", shape_report, issues)
    existence_report = analyze_left_extension_from_weighted_colimit(equipment, bridge.left_extension)
    collect_report_issues("Left extension existence", existence_report, issues)
    counit_report = analyze_right_extension(equipment, bridge.left_extension.extension)
    collect_report_issues("Left extension counit", counit_report, issues)
    if bridge.left_extension.extension.along is not relative.root.tight:
        issues.append("Skew tensor should be computed by left extension along the root j.")

    logger.debug(f"relative monad skew-monoid bridge: {len(issues)} issue(s)")
    return structural_report(
        issues,
        "Relative monad is a monoid in the skew-monoidal loose hom on dom(j).",
        "Relative monad skew-monoid",
        witness=bridge,
        representability_report=representability_report,
        loose_monoid_report=shape_report,
        left_extension_report=existence_report,
    )


def analyze_relative_monad_representable_recovery(
    monad: RelativeMonadData,
    witness: RepresentabilityWitness,
    bridge: Optional[RelativeMonadSkewMonoidBridgeInput] = None,
) -> PendingReport:
    """
    Recover the classical presentations of a monad over a representable root.

    The embedding into the fibre over dom(j) is checked through the
    representability report; the equivalence with the Levy and ACU monoids
    stays pending. Supplying bridge data adds the skew-monoid comparison.
    """
    issues: List[str] = []
    embedding = analyze_relative_monad_representability(monad, witness)
    issues.extend(embedding.issues)

    skew_monoid = None
    if bridge is not None:
        skew_monoid = analyze_relative_monad_skew_monoid_bridge(bridge)
        collect_report_issues("Skew-monoid comparison", skew_monoid, issues)

    logger.debug(f"relative monad representable recovery: {len(issues)} issue(s)")
    return pending_report(
        issues,
        (
            "Representable root aligns with the Levy and ACU presentations; "
            "explicit equivalence witnesses remain pending."
            if bridge is not None
            else "Representable root prerequisites satisfied; supply skew-monoid bridge data to compare presentations."
        ),
        "Representable recovery",
        witness=witness,
        embedding=embedding,
        skew_monoid=skew_monoid,
    )
