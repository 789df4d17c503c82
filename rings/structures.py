"""
Sample-driven ring structures.

A Ring bundles its operations as plain callables. Nothing here attempts to
prove the ring axioms; `check_ring` evaluates them on a finite sample set
and reports every counterexample it meets.
"""

from __future__ import annotations

import logging
import operator
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

Equality = Callable[[Any, Any], bool]


@dataclass(frozen=True)
class Ring:
    """
    A ring presented by its operations.

    Attributes:
        name: Display name used in details strings
        zero: Additive identity
        one: Multiplicative identity
        add: Addition
        mul: Multiplication
        neg: Additive inverse
        eq: Element equality, defaults to ==
        sub: Subtraction; when omitted it is derived as a + (-b)
    """

    name: str
    zero: Any
    one: Any
    add: Callable[[Any, Any], Any]
    mul: Callable[[Any, Any], Any]
    neg: Callable[[Any], Any]
    eq: Equality = operator.eq
    sub: Optional[Callable[[Any, Any], Any]] = None

    def subtract(self, left: Any, right: Any) -> Any:
        if self.sub is not None:
            return self.sub(left, right)
        return self.add(left, self.neg(right))


def normalize_mod(value: int, modulus: int) -> int:
    """Representative of value in [0, modulus)."""
    return value % modulus


RING_INTEGER = Ring(
    name="Z",
    zero=0,
    one=1,
    add=operator.add,
    mul=operator.mul,
    neg=operator.neg,
    sub=operator.sub,
)


def create_modulo_ring(modulus: int) -> Ring:
    """
    Build Z/nZ with canonical representatives in [0, n).

    Raises:
        ValueError: If modulus <= 1
    """
    if modulus <= 1:
        raise ValueError(f"modulus must be greater than 1, got {modulus}")

    return Ring(
        name=f"Z/{modulus}Z",
        zero=0,
        one=1,
        add=lambda left, right: normalize_mod(left + right, modulus),
        mul=lambda left, right: normalize_mod(left * right, modulus),
        neg=lambda value: normalize_mod(-value, modulus),
        eq=lambda left, right: normalize_mod(left, modulus) == normalize_mod(right, modulus),
        sub=lambda left, right: normalize_mod(left - right, modulus),
    )


def unique_with(values: Sequence[Any], eq: Equality) -> List[Any]:
    """Drop later values equal (under eq) to an earlier one, preserving order."""
    result: List[Any] = []
    for value in values:
        if not any(eq(existing, value) for existing in result):
            result.append(value)
    return result


@dataclass(frozen=True)
class RingViolation:
    kind: str
    value: Any = None
    side: Optional[str] = None
    pair: Optional[Tuple[Any, Any]] = None
    triple: Optional[Tuple[Any, Any, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"kind": self.kind}
        if self.value is not None:
            payload["value"] = self.value
        if self.side is not None:
            payload["side"] = self.side
        if self.pair is not None:
            payload["pair"] = list(self.pair)
        if self.triple is not None:
            payload["triple"] = list(self.triple)
        return payload


@dataclass(frozen=True)
class RingCheckResult:
    holds: bool
    violations: List[RingViolation]
    details: str
    metadata: Dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "holds": self.holds,
            "violations": [violation.to_dict() for violation in self.violations],
            "details": self.details,
            "metadata": dict(self.metadata),
        }


def _check_pointwise(ring: Ring, samples: Sequence[Any], violations: List[RingViolation]) -> int:
    eq = ring.eq
    zero_checks = 0
    for value in samples:
        if not eq(ring.add(value, ring.zero), value):
            violations.append(RingViolation(kind="addIdentity", value=value, side="right"))
        if not eq(ring.add(ring.zero, value), value):
            violations.append(RingViolation(kind="addIdentity", value=value, side="left"))
        if not eq(ring.add(value, ring.neg(value)), ring.zero):
            violations.append(RingViolation(kind="addInverse", value=value))
        if not eq(ring.mul(value, ring.one), value):
            violations.append(RingViolation(kind="mulIdentity", value=value, side="right"))
        if not eq(ring.mul(ring.one, value), value):
            violations.append(RingViolation(kind="mulIdentity", value=value, side="left"))

        zero_checks += 2
        if not eq(ring.mul(value, ring.zero), ring.zero):
            violations.append(RingViolation(kind="zeroAnnihilation", value=value, side="right"))
        if not eq(ring.mul(ring.zero, value), ring.zero):
            violations.append(RingViolation(kind="zeroAnnihilation", value=value, side="left"))
    return zero_checks


def check_ring(ring: Ring, samples: Sequence[Any] = ()) -> RingCheckResult:
    """
    Evaluate the ring axioms on every sample, pair and triple.

    Args:
        ring: Ring under test
        samples: Finite element sample

    Returns:
        RingCheckResult listing each failing instance
    """
    eq = ring.eq
    violations: List[RingViolation] = []
    zero_checks = _check_pointwise(ring, samples, violations)

    pairs = 0
    for left in samples:
        for right in samples:
            pairs += 1
            if not eq(ring.add(left, right), ring.add(right, left)):
                violations.append(RingViolation(kind="addCommutative", pair=(left, right)))
            if not eq(ring.subtract(left, right), ring.add(left, ring.neg(right))):
                violations.append(RingViolation(kind="subConsistent", pair=(left, right)))

    triples = 0
    for a in samples:
        for b in samples:
            for c in samples:
                triples += 1
                if not eq(ring.add(ring.add(a, b), c), ring.add(a, ring.add(b, c))):
                    violations.append(RingViolation(kind="addAssociative", triple=(a, b, c)))
                if not eq(ring.mul(ring.mul(a, b), c), ring.mul(a, ring.mul(b, c))):
                    violations.append(RingViolation(kind="mulAssociative", triple=(a, b, c)))
                if not eq(ring.mul(a, ring.add(b, c)), ring.add(ring.mul(a, b), ring.mul(a, c))):
                    violations.append(RingViolation(kind="leftDistributive", triple=(a, b, c)))
                if not eq(ring.mul(ring.add(a, b), c), ring.add(ring.mul(a, c), ring.mul(b, c))):
                    violations.append(RingViolation(kind="rightDistributive", triple=(a, b, c)))

    holds = not violations
    logger.debug(f"ring check on {ring.name}: {len(violations)} violation(s)")
    return RingCheckResult(
        holds=holds,
        violations=violations,
        details=(
            f"Ring laws validated on {len(samples)} elements."
            if holds
            else f"{len(violations)} ring constraints failed."
        ),
        metadata={
            "sample_count": len(samples),
            "additive_pairs_checked": pairs,
            "sub_consistency_checks": pairs,
            "additive_triples_checked": triples,
            "multiplicative_triples_checked": triples,
            "left_distributive_triples_checked": triples,
            "right_distributive_triples_checked": triples,
            "zero_annihilation_checks": zero_checks,
        },
    )


@dataclass(frozen=True)
class RingHomomorphism:
    source: Ring
    target: Ring
    map: Callable[[Any], Any]
    label: str = ""


def check_ring_homomorphism(
    hom: RingHomomorphism, samples: Sequence[Any] = (), include_negation: bool = True
) -> RingCheckResult:
    """Check that hom preserves zero, one, addition, multiplication and (optionally) negation."""
    source, target = hom.source, hom.target
    eq = target.eq
    violations: List[RingViolation] = []

    if not eq(hom.map(source.zero), target.zero):
        violations.append(RingViolation(kind="zero"))
    if not eq(hom.map(source.one), target.one):
        violations.append(RingViolation(kind="one"))

    pairs = 0
    for left in samples:
        if include_negation and not eq(hom.map(source.neg(left)), target.neg(hom.map(left))):
            violations.append(RingViolation(kind="negation", value=left))
        for right in samples:
            pairs += 1
            if not eq(hom.map(source.add(left, right)), target.add(hom.map(left), hom.map(right))):
                violations.append(RingViolation(kind="addition", pair=(left, right)))
            if not eq(hom.map(source.mul(left, right)), target.mul(hom.map(left), hom.map(right))):
                violations.append(RingViolation(kind="multiplication", pair=(left, right)))

    holds = not violations
    label = hom.label or f"{source.name} -> {target.name}"
    logger.debug(f"ring homomorphism check on {label}: {len(violations)} violation(s)")
    return RingCheckResult(
        holds=holds,
        violations=violations,
        details=(
            f"Ring homomorphism {label} preserved structure on {len(samples)} samples."
            if holds
            else f"Ring homomorphism {label} failed {len(violations)} checks."
        ),
        metadata={
            "samples_tested": len(samples),
            "additive_pairs_checked": pairs,
            "multiplicative_pairs_checked": pairs,
        },
    )
