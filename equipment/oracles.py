"""
Oracle results.

An oracle pairs a registered law with the verdict of the analyzer that checks
it. Laws without an analyzer produce a pending oracle carrying the law summary.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from .config import EquipmentConfig, get_config
from .laws import LawDescriptor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OracleResult:
    """
    Verdict for a single registered law.

    Attributes:
        holds: Analyzer verdict
        pending: True when the law is structurally consistent but unverified
        registry_path: Dotted path identifying the law
        details: Human-readable summary line
        issues: Structural failures reported by the analyzer
        witness: Witness data the analyzer inspected
        analysis: Full analyzer report
    """

    holds: bool
    pending: bool
    registry_path: str
    details: str
    issues: List[str] = field(default_factory=list)
    witness: Any = None
    analysis: Any = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "holds": self.holds,
            "pending": self.pending,
            "registry_path": self.registry_path,
            "details": self.details,
            "issues": list(self.issues),
        }


def oracle_from_report(descriptor: LawDescriptor, report: Any, witness: Any = None) -> OracleResult:
    return OracleResult(
        holds=report.holds,
        pending=getattr(report, "pending", False),
        registry_path=descriptor.registry_path,
        details=report.details,
        issues=list(report.issues),
        witness=witness if witness is not None else getattr(report, "witness", None),
        analysis=report,
    )


def pending_oracle(descriptor: LawDescriptor) -> OracleResult:
    return OracleResult(
        holds=False,
        pending=True,
        registry_path=descriptor.registry_path,
        details=f"{descriptor.name} oracle is pending. Summary: {descriptor.summary}",
    )


@dataclass(frozen=True)
class OracleSummary:
    total: int
    passed: int
    pending: int
    failed: int
    holds: bool
    failed_paths: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total": self.total,
            "passed": self.passed,
            "pending": self.pending,
            "failed": self.failed,
            "holds": self.holds,
            "failed_paths": list(self.failed_paths),
        }


def summarize_oracles(
    results: Sequence[OracleResult], config: Optional[EquipmentConfig] = None
) -> OracleSummary:
    """
    Aggregate oracle verdicts.

    A pending oracle counts as deferred unless the configuration asks for
    pending laws to be treated as failures.
    """
    config = config or get_config()
    passed = sum(1 for result in results if result.holds)
    pending = sum(1 for result in results if not result.holds and result.pending)
    failed_paths = [
        result.registry_path
        for result in results
        if not result.holds and (not result.pending or config.pending_counts_as_failure)
    ]
    summary = OracleSummary(
        total=len(results),
        passed=passed,
        pending=pending,
        failed=len(failed_paths),
        holds=not failed_paths,
        failed_paths=failed_paths,
    )
    logger.info(
        f"Oracle summary: {summary.passed} passed, {summary.pending} pending, {summary.failed} failed"
    )
    return summary
