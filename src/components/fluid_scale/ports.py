"""
Fluid scale component port definitions.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol


class FluidRulesPort(Protocol):
    """Port for the fixed token configuration (step range, spacing, pairs)."""

    def get_pixels_per_rem(self) -> float:
        """Get the px to rem conversion factor."""
        ...

    def get_type_scale_steps(self) -> tuple[int, int]:
        """Get the inclusive (first, last) type scale step range."""
        ...

    def get_space_steps(self) -> Mapping[str, float]:
        """Get named spacing steps and their multipliers of step 0."""
        ...

    def get_space_pairs(self) -> Mapping[str, str]:
        """Get space pairs as min-step name -> max-step name."""
        ...

    def get_custom_pairs(self) -> Mapping[str, str]:
        """Get custom pairs as min-step name -> max-step name."""
        ...
