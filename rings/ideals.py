"""
Ideal and prime-ideal checks over finite ring samples.

An ideal is given by a membership predicate. Closure is tested on the ideal
elements that can be seen: declared generators plus any ring sample the
predicate accepts. Prime checks add properness and the product condition
ab ∈ I ⇒ a ∈ I or b ∈ I over every ordered pair of deduplicated samples.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from equipment.config import get_config

from .structures import Ring, unique_with

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RingIdeal:
    """
    Attributes:
        name: Display name, e.g. "(4)"
        ring: Ambient ring
        contains: Membership predicate
        generators: Elements asserted to lie in the ideal
    """

    name: str
    ring: Ring
    contains: Callable[[Any], bool]
    generators: Tuple[Any, ...] = ()


@dataclass(frozen=True)
class IdealViolation:
    kind: str
    value: Any = None
    pair: Optional[Tuple[Any, Any]] = None
    factors: Optional[Tuple[Any, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"kind": self.kind}
        if self.value is not None:
            payload["value"] = self.value
        if self.pair is not None:
            payload["pair"] = list(self.pair)
        if self.factors is not None:
            payload["factors"] = list(self.factors)
        return payload


@dataclass(frozen=True)
class PrimeIdealWitness:
    """A product landing in the ideal although neither factor does."""

    factors: Tuple[Any, Any]
    product: Any

    def to_dict(self) -> Dict[str, Any]:
        return {"factors": list(self.factors), "product": self.product}


@dataclass(frozen=True)
class IdealCheckResult:
    holds: bool
    violations: List[IdealViolation]
    details: str
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "holds": self.holds,
            "violations": [violation.to_dict() for violation in self.violations],
            "details": self.details,
            "metadata": dict(self.metadata),
        }


@dataclass(frozen=True)
class PrimeIdealCheckResult:
    holds: bool
    violations: List[IdealViolation]
    witnesses: List[PrimeIdealWitness]
    details: str
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "holds": self.holds,
            "violations": [violation.to_dict() for violation in self.violations],
            "witnesses": [witness.to_dict() for witness in self.witnesses],
            "details": self.details,
            "metadata": dict(self.metadata),
        }


def _ideal_violations(ideal: RingIdeal, samples: Sequence[Any]) -> Tuple[List[IdealViolation], int]:
    ring = ideal.ring
    candidates = list(ideal.generators) + [value for value in samples if ideal.contains(value)]
    ideal_samples = unique_with(candidates, ring.eq)
    violations: List[IdealViolation] = []

    if not ideal.contains(ring.zero):
        violations.append(IdealViolation(kind="zero"))

    for value in ideal.generators:
        if not ideal.contains(value):
            violations.append(IdealViolation(kind="membership", value=value))

    for value in ideal_samples:
        if not ideal.contains(ring.neg(value)):
            violations.append(IdealViolation(kind="negation", value=value))

    for left in ideal_samples:
        for right in ideal_samples:
            if not ideal.contains(ring.add(left, right)):
                violations.append(IdealViolation(kind="additive", pair=(left, right)))

    for r in samples:
        for a in ideal_samples:
            if not ideal.contains(ring.mul(r, a)):
                violations.append(IdealViolation(kind="leftAbsorption", pair=(r, a)))
            if not ideal.contains(ring.mul(a, r)):
                violations.append(IdealViolation(kind="rightAbsorption", pair=(a, r)))

    return violations, len(ideal_samples)


def check_ideal(ideal: RingIdeal, samples: Sequence[Any] = ()) -> IdealCheckResult:
    """
    Check zero membership, generator membership and closure of an ideal.

    Args:
        ideal: Ideal under test
        samples: Ring elements used for absorption and to discover ideal members

    Returns:
        IdealCheckResult with one violation per failing instance
    """
    violations, ideal_count = _ideal_violations(ideal, samples)
    holds = not violations
    logger.debug(f"ideal check on {ideal.name}: {len(violations)} violation(s)")
    return IdealCheckResult(
        holds=holds,
        violations=violations,
        details=(
            f"Ideal {ideal.name} closed over {ideal_count} ideal elements and {len(samples)} ring samples."
            if holds
            else f"{len(violations)} ideal closure checks failed for {ideal.name}."
        ),
        metadata={"checked_ideal_elements": ideal_count, "checked_ring_elements": len(samples)},
    )


def check_prime_ideal(
    ideal: RingIdeal,
    samples: Sequence[Any] = (),
    require_proper: bool = True,
    witness_limit: Optional[int] = None,
) -> PrimeIdealCheckResult:
    """
    Check that an ideal is prime on the supplied samples.

    Every ideal violation is carried over. When require_proper is set, an
    ideal containing one is reported as `proper`. Each ordered pair (a, b)
    of deduplicated samples with ab ∈ I but a, b ∉ I is an `absorbsProduct`
    violation; the first `witness_limit` of them are also kept as witnesses.

    Args:
        ideal: Ideal under test
        samples: Ring samples, deduplicated with the ring equality
        require_proper: Report ideals containing the unit
        witness_limit: Witness cap, defaults to the configured prime witness limit

    Returns:
        PrimeIdealCheckResult
    """
    if witness_limit is None:
        witness_limit = get_config().prime_witness_limit

    ring = ideal.ring
    distinct = unique_with(list(samples), ring.eq)
    violations, ideal_count = _ideal_violations(ideal, distinct)

    if require_proper and ideal.contains(ring.one):
        violations.append(IdealViolation(kind="proper", value=ring.one))

    witnesses: List[PrimeIdealWitness] = []
    for a in distinct:
        if ideal.contains(a):
            continue
        for b in distinct:
            if ideal.contains(b):
                continue
            product = ring.mul(a, b)
            if not ideal.contains(product):
                continue
            violations.append(IdealViolation(kind="absorbsProduct", factors=(a, b)))
            if len(witnesses) < witness_limit:
                witnesses.append(PrimeIdealWitness(factors=(a, b), product=product))

    holds = not violations
    logger.debug(
        f"prime ideal check on {ideal.name}: {len(violations)} violation(s), {len(witnesses)} witness(es)"
    )
    return PrimeIdealCheckResult(
        holds=holds,
        violations=violations,
        witnesses=witnesses,
        details=(
            f"Ideal {ideal.name} is prime on {len(distinct)} distinct ring samples."
            if holds
            else f"Ideal {ideal.name} has {len(violations)} prime ideal violations."
        ),
        metadata={
            "distinct_ring_samples": len(distinct),
            "ring_sample_candidates": len(samples),
            "checked_ideal_elements": ideal_count,
            "require_proper": require_proper,
            "witness_limit": witness_limit,
            "witnesses_recorded": len(witnesses),
        },
    )
