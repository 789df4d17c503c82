"""
Ring collaborator: sample-driven ring, homomorphism, ideal and prime-ideal
checks sharing the holds/violations/details/metadata report shape.
"""

from .ideals import (
    IdealCheckResult,
    IdealViolation,
    PrimeIdealCheckResult,
    PrimeIdealWitness,
    RingIdeal,
    check_ideal,
    check_prime_ideal,
)
from .structures import (
    RING_INTEGER,
    Ring,
    RingCheckResult,
    RingHomomorphism,
    RingViolation,
    check_ring,
    check_ring_homomorphism,
    create_modulo_ring,
    normalize_mod,
    unique_with,
)

__all__ = [
    "IdealCheckResult",
    "IdealViolation",
    "PrimeIdealCheckResult",
    "PrimeIdealWitness",
    "RING_INTEGER",
    "Ring",
    "RingCheckResult",
    "RingHomomorphism",
    "RingIdeal",
    "RingViolation",
    "check_ideal",
    "check_prime_ideal",
    "check_ring",
    "check_ring_homomorphism",
    "create_modulo_ring",
    "normalize_mod",
    "unique_with",
]
