"""
Law registries.

Each registry is a YAML mapping from a short key to a descriptor:

    unit_framing:
      name: Relative monad unit framing
      registry_path: relativeMonad.unit.framing
      summary: The unit 2-cell must inherit j on the left and t on the right.

Registries are loaded with yaml.safe_load and validated eagerly.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterator, List, Union

import yaml

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "registry_path", "summary")


@dataclass(frozen=True)
class LawDescriptor:
    key: str
    name: str
    registry_path: str
    summary: str

    def to_dict(self) -> Dict[str, Any]:
        return {"key": self.key, "name": self.name, "registry_path": self.registry_path, "summary": self.summary}


class LawRegistry:
    """Ordered collection of law descriptors addressable by key or registry path."""

    def __init__(self, title: str, descriptors: List[LawDescriptor]) -> None:
        self.title = title
        self._by_key: Dict[str, LawDescriptor] = {}
        self._by_path: Dict[str, LawDescriptor] = {}
        for descriptor in descriptors:
            if descriptor.registry_path in self._by_path:
                raise ValueError(f"Duplicate registry path '{descriptor.registry_path}' in {title}")
            self._by_key[descriptor.key] = descriptor
            self._by_path[descriptor.registry_path] = descriptor

    def __getitem__(self, key: str) -> LawDescriptor:
        return self._by_key[key]

    def __contains__(self, key: object) -> bool:
        return key in self._by_key

    def __iter__(self) -> Iterator[LawDescriptor]:
        return iter(self._by_key.values())

    def __len__(self) -> int:
        return len(self._by_key)

    def by_path(self, registry_path: str) -> LawDescriptor:
        return self._by_path[registry_path]

    def list_laws(self) -> List[LawDescriptor]:
        return list(self._by_key.values())


def load_law_registry(path: Union[str, Path]) -> LawRegistry:
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"Law registry {path} must be a mapping of law keys to descriptors")

    descriptors: List[LawDescriptor] = []
    for key, entry in raw.items():
        if not isinstance(entry, dict):
            raise ValueError(f"Law '{key}' in {path} must be a mapping")
        missing = [name for name in REQUIRED_FIELDS if not entry.get(name)]
        if missing:
            raise ValueError(f"Law '{key}' in {path} is missing: {', '.join(missing)}")
        descriptors.append(
            LawDescriptor(
                key=str(key),
                name=str(entry["name"]),
                registry_path=str(entry["registry_path"]),
                summary=" ".join(str(entry["summary"]).split()),
            )
        )

    registry = LawRegistry(path.stem, descriptors)
    logger.info(f"Loaded {len(registry)} law(s) from {path}")
    return registry
