"""
Fluid scale component input/output models.

All models are frozen. A FluidSystem is built once per request and
rendered once; token groups are exposed as read-only mappings.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

PIXELS_PER_REM = 16


# --- Core Models ---


@dataclass(frozen=True)
class Viewport:
    """One end of the fluid range (narrowest or widest viewport)."""

    width: float
    font_size: float
    type_scale: str | None


@dataclass(frozen=True)
class FluidToken:
    """A single fluid value: bounds in px, its clamp() expression and px per rem."""

    min: float
    max: float
    clamp: str
    pixels_per_rem: float = PIXELS_PER_REM

    @property
    def min_rem(self) -> float:
        return self.min / self.pixels_per_rem

    @property
    def max_rem(self) -> float:
        return self.max / self.pixels_per_rem


def _frozen(mapping: Mapping | None = None) -> Mapping:
    return MappingProxyType(dict(mapping or {}))


@dataclass(frozen=True)
class FluidSystem:
    """The four token groups of a fluid design system."""

    type_scale: Mapping[int, FluidToken] = field(default_factory=_frozen)
    space_steps: Mapping[str, FluidToken] = field(default_factory=_frozen)
    space_pairs: Mapping[str, FluidToken] = field(default_factory=_frozen)
    custom_pairs: Mapping[str, FluidToken] = field(default_factory=_frozen)

    def token_count(self) -> int:
        return (
            len(self.type_scale)
            + len(self.space_steps)
            + len(self.space_pairs)
            + len(self.custom_pairs)
        )


# --- Input Models ---


@dataclass(frozen=True)
class BuildSystemInput:
    """Input for building a fluid system from two viewports."""

    min_viewport: Viewport
    max_viewport: Viewport


@dataclass(frozen=True)
class RenderCssInput:
    """Input for rendering an already built system as a stylesheet."""

    system: FluidSystem
    selector: str | None = None


# --- Output Models ---


@dataclass(frozen=True)
class BuildSystemOutput:
    """Output containing the built system."""

    system: FluidSystem
    has_invalid_values: bool = False
    warnings: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class RenderCssOutput:
    """Output containing the stylesheet body."""

    css: str
    declaration_count: int
