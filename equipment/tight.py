"""
Tight layer primitives.

Provides the ordinary category data underneath a virtual equipment:
- FiniteCategory with explicit arrows and a composition table
- TightFunctor / NaturalTransformation handles (compared by identity)
- TightLayer bundling identity, composition and the 2-cell operations
- check_functor_laws for sanity-checking user supplied functors

Tight cells are opaque: two functors built independently are never
considered equal, even when they act identically on objects and arrows.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Arrow:
    """A named arrow between two objects of a finite category."""

    name: str
    source: Any
    target: Any


@dataclass(frozen=True)
class FiniteCategory:
    """
    Finite category given by objects, non-identity arrows and a composition table.

    Attributes:
        objects: Objects of the category
        arrows: Non-identity arrows
        composition: Maps (g.name, f.name) to the name of g ∘ f for every
                     composable pair of non-identity arrows
        label: Human-readable name used in log lines
    """

    objects: Tuple[Any, ...]
    arrows: Tuple[Arrow, ...] = ()
    composition: Dict[Tuple[str, str], str] = field(default_factory=dict)
    label: str = "C"

    def __post_init__(self) -> None:
        by_name = {arrow.name: arrow for arrow in self.arrows}
        for arrow in self.arrows:
            if arrow.source not in self.objects or arrow.target not in self.objects:
                raise ValueError(
                    f"arrow '{arrow.name}' in category '{self.label}' references an unknown object"
                )
        for (g, f), result in self.composition.items():
            if g not in by_name or f not in by_name or result not in by_name:
                raise ValueError(
                    f"composition entry ({g}, {f}) -> {result} in category "
                    f"'{self.label}' references an unknown arrow"
                )
            first, second, composite = by_name[f], by_name[g], by_name[result]
            if first.target != second.source:
                raise ValueError(
                    f"composition entry ({g}, {f}) in category '{self.label}' does not chain: "
                    f"{f} ends at {first.target!r} but {g} starts at {second.source!r}"
                )
            if composite.source != first.source or composite.target != second.target:
                raise ValueError(
                    f"composition entry ({g}, {f}) -> {result} in category '{self.label}' "
                    f"has the wrong endpoints"
                )

    def id(self, obj: Any) -> Arrow:
        return Arrow(name=f"id_{obj}", source=obj, target=obj)

    def is_identity(self, arrow: Arrow) -> bool:
        return arrow == self.id(arrow.source)

    def dom(self, arrow: Arrow) -> Any:
        return arrow.source

    def cod(self, arrow: Arrow) -> Any:
        return arrow.target

    def all_arrows(self) -> List[Arrow]:
        return [self.id(obj) for obj in self.objects] + list(self.arrows)

    def hom(self, source: Any, target: Any) -> List[Arrow]:
        return [a for a in self.all_arrows() if a.source == source and a.target == target]

    def _by_name(self, name: str) -> Arrow:
        for arrow in self.arrows:
            if arrow.name == name:
                return arrow
        raise KeyError(name)

    def compose(self, g: Arrow, f: Arrow) -> Optional[Arrow]:
        """Return g ∘ f, or None when cod(f) differs from dom(g)."""
        if f.target != g.source:
            return None
        if self.is_identity(f):
            return g
        if self.is_identity(g):
            return f
        name = self.composition.get((g.name, f.name))
        if name is None:
            return None
        return self._by_name(name)


def two_object_category() -> FiniteCategory:
    """The walking arrow: objects • and ★ with a single arrow f : • → ★."""
    return FiniteCategory(
        objects=("•", "★"),
        arrows=(Arrow(name="f", source="•", target="★"),),
        label="TwoObject",
    )


@dataclass(frozen=True, eq=False)
class TightFunctor:
    """
    Endofunctor on the tight category, used as a tight 1-cell.

    Compared by identity: the handle, not its action, names the cell.
    """

    on_obj: Callable[[Any], Any]
    on_mor: Callable[[Any], Any]
    label: str = "F"


@dataclass(frozen=True, eq=False)
class NaturalTransformation:
    """Tight 2-cell between two tight functors, compared by identity."""

    source: TightFunctor
    target: TightFunctor
    component: Callable[[Any], Any]
    label: str = "α"


def identity_functor(category: FiniteCategory) -> TightFunctor:
    return TightFunctor(on_obj=lambda obj: obj, on_mor=lambda arrow: arrow, label=f"id_{category.label}")


@dataclass(frozen=True, eq=False)
class TightLayer:
    """
    Tight category together with its identity functor and composition.

    Attributes:
        category: Underlying finite category
        identity: The identity tight 1-cell (every identity boundary reuses it)
    """

    category: FiniteCategory
    identity: TightFunctor

    def compose(self, upper: TightFunctor, lower: TightFunctor) -> TightFunctor:
        """Return upper ∘ lower; endpoints are the caller's responsibility."""
        return TightFunctor(
            on_obj=lambda obj: upper.on_obj(lower.on_obj(obj)),
            on_mor=lambda arrow: upper.on_mor(lower.on_mor(arrow)),
            label=f"{upper.label} ∘ {lower.label}",
        )

    def identity2(self, functor: TightFunctor) -> NaturalTransformation:
        category = self.category
        return NaturalTransformation(
            source=functor,
            target=functor,
            component=lambda obj: category.id(functor.on_obj(obj)),
            label=f"1_{functor.label}",
        )

    def vertical_compose2(
        self, alpha: NaturalTransformation, beta: NaturalTransformation
    ) -> NaturalTransformation:
        """beta · alpha, applying alpha first."""
        category = self.category
        return NaturalTransformation(
            source=alpha.source,
            target=beta.target,
            component=lambda obj: category.compose(beta.component(obj), alpha.component(obj)),
            label=f"{beta.label} · {alpha.label}",
        )

    def horizontal_compose2(
        self, alpha: NaturalTransformation, beta: NaturalTransformation
    ) -> NaturalTransformation:
        """Godement product beta ∗ alpha."""
        category = self.category
        return NaturalTransformation(
            source=self.compose(beta.source, alpha.source),
            target=self.compose(beta.target, alpha.target),
            component=lambda obj: category.compose(
                beta.component(alpha.target.on_obj(obj)),
                beta.source.on_mor(alpha.component(obj)),
            ),
            label=f"{beta.label} ∗ {alpha.label}",
        )

    def whisker_left(self, functor: TightFunctor, alpha: NaturalTransformation) -> NaturalTransformation:
        """F alpha."""
        return NaturalTransformation(
            source=self.compose(functor, alpha.source),
            target=self.compose(functor, alpha.target),
            component=lambda obj: functor.on_mor(alpha.component(obj)),
            label=f"{functor.label}{alpha.label}",
        )

    def whisker_right(self, alpha: NaturalTransformation, functor: TightFunctor) -> NaturalTransformation:
        """alpha F."""
        return NaturalTransformation(
            source=self.compose(alpha.source, functor),
            target=self.compose(alpha.target, functor),
            component=lambda obj: alpha.component(functor.on_obj(obj)),
            label=f"{alpha.label}{functor.label}",
        )


def default_tight_layer(category: FiniteCategory) -> TightLayer:
    return TightLayer(category=category, identity=identity_functor(category))


@dataclass(frozen=True)
class FunctorLawReport:
    """Outcome of checking a tight functor against its category."""

    holds: bool
    issues: List[str]
    details: str

    def to_dict(self) -> Dict[str, Any]:
        return {"holds": self.holds, "issues": list(self.issues), "details": self.details}


def check_functor_laws(functor: TightFunctor, category: FiniteCategory) -> FunctorLawReport:
    """
    Check that an endofunctor preserves identities and composition.

    Every object and every composable pair of arrows is inspected.
    """
    issues: List[str] = []

    for obj in category.objects:
        image = functor.on_obj(obj)
        if image not in category.objects:
            issues.append(f"{functor.label} sends object {obj} outside the category.")
            continue
        if functor.on_mor(category.id(obj)) != category.id(image):
            issues.append(f"{functor.label} does not preserve the identity on {obj}.")

    arrows: Sequence[Arrow] = category.all_arrows()
    for f in arrows:
        mapped = functor.on_mor(f)
        if mapped.source != functor.on_obj(f.source) or mapped.target != functor.on_obj(f.target):
            issues.append(f"{functor.label} does not respect the endpoints of {f.name}.")
        for g in arrows:
            composite = category.compose(g, f)
            if composite is None:
                continue
            expected = category.compose(functor.on_mor(g), functor.on_mor(f))
            if functor.on_mor(composite) != expected:
                issues.append(
                    f"{functor.label} does not preserve the composite {g.name} ∘ {f.name}."
                )

    holds = not issues
    logger.debug(f"functor law check for {functor.label}: {len(issues)} issue(s)")
    return FunctorLawReport(
        holds=holds,
        issues=issues,
        details=(
            f"{functor.label} preserves identities and composition in {category.label}."
            if holds
            else f"Functor law issues: {'; '.join(issues)}"
        ),
    )
