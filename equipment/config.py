"""
Equipment checker configuration.

Settings come from dataclass defaults, a YAML file or the environment:
    EQUIPMENT_LOG_LEVEL            (default WARNING)
    EQUIPMENT_LAW_REGISTRY_DIR     (default: registries shipped with the package)
    EQUIPMENT_PRIME_WITNESS_LIMIT  (default 10)
    EQUIPMENT_PENDING_STRICT       (default false)
"""

from __future__ import annotations

import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class EquipmentConfig:
    """Configuration for analyzers, oracle summaries and the ring collaborator."""

    log_level: str = "WARNING"
    law_registry_dir: Optional[str] = None
    prime_witness_limit: int = 10
    pending_counts_as_failure: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_env(cls) -> "EquipmentConfig":
        return cls(
            log_level=os.getenv("EQUIPMENT_LOG_LEVEL", "WARNING").upper(),
            law_registry_dir=os.getenv("EQUIPMENT_LAW_REGISTRY_DIR") or None,
            prime_witness_limit=int(os.getenv("EQUIPMENT_PRIME_WITNESS_LIMIT", "10")),
            pending_counts_as_failure=os.getenv("EQUIPMENT_PENDING_STRICT", "false").lower() == "true",
        )

    @classmethod
    def from_yaml(cls, filepath: str) -> "EquipmentConfig":
        """Load configuration from a YAML mapping; unknown keys are rejected."""
        with open(filepath, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"equipment config at {filepath} must be a mapping")
        known = set(cls.__dataclass_fields__)
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown equipment config keys in {filepath}: {', '.join(unknown)}")
        return cls(**data)

    def registry_dir(self, default: Path) -> Path:
        """Override directory for law registries, falling back to the packaged one."""
        return Path(self.law_registry_dir) if self.law_registry_dir else default

    def validate(self) -> None:
        errors = []

        if self.log_level.upper() not in VALID_LOG_LEVELS:
            errors.append(f"log_level must be one of {', '.join(VALID_LOG_LEVELS)}, got {self.log_level}")

        if self.prime_witness_limit < 1:
            errors.append(f"prime_witness_limit must be ≥1, got {self.prime_witness_limit}")

        if self.law_registry_dir and not Path(self.law_registry_dir).is_dir():
            errors.append(f"law_registry_dir does not exist: {self.law_registry_dir}")

        if errors:
            raise ValueError("Invalid equipment configuration:\n" + "\n".join(f"  - {e}" for e in errors))


_active_config: Optional[EquipmentConfig] = None


def get_config() -> EquipmentConfig:
    """Process-wide configuration, read from the environment on first use."""
    global _active_config
    if _active_config is None:
        _active_config = EquipmentConfig.from_env()
    return _active_config


def set_config(config: Optional[EquipmentConfig]) -> None:
    """Install a configuration (None resets to environment defaults)."""
    global _active_config
    if config is not None:
        config.validate()
    _active_config = config
