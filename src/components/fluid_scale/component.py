"""
Fluid scale component - fluid type and spacing tokens.

Turns a min/max viewport pair into clamp() based custom properties.

Invariants:
- I1: Every token interpolates between the same two viewport widths
- I2: Spacing steps are multiples of type scale step 0
- I3: A pair takes its min from the first step and its max from the second
- I4: Malformed input yields NaN/Infinity values, never an exception
"""

from __future__ import annotations

import logging

from ._impl import (
    DEFAULT_SELECTOR,
    FluidConfig,
    build_fluid_system,
    has_invalid_values,
    iter_declarations,
    render_stylesheet,
)
from .models import (
    BuildSystemInput,
    BuildSystemOutput,
    RenderCssInput,
    RenderCssOutput,
)
from .ports import FluidRulesPort

logger = logging.getLogger(__name__)


def _build_config(rules: FluidRulesPort | None) -> FluidConfig:
    """Build fluid config from rules port."""
    if rules is None:
        return FluidConfig()

    return FluidConfig(
        pixels_per_rem=rules.get_pixels_per_rem(),
        type_scale_steps=rules.get_type_scale_steps(),
        space_steps=rules.get_space_steps(),
        space_pairs=rules.get_space_pairs(),
        custom_pairs=rules.get_custom_pairs(),
    )


# --- Component Entry Points ---


def run_build(
    inp: BuildSystemInput,
    *,
    rules: FluidRulesPort | None = None,
) -> BuildSystemOutput:
    """
    Build the four token groups for a viewport pair.

    Args:
        inp: Input containing the min and max viewports.
        rules: Optional rules port for the token layout.

    Returns:
        BuildSystemOutput with the system and any warnings.
    """
    config = _build_config(rules)
    system = build_fluid_system(inp.min_viewport, inp.max_viewport, config)

    warnings: list[str] = []
    invalid = has_invalid_values(system)
    if invalid:
        warnings.append("System contains NaN or infinite values")
        logger.warning(
            "Fluid system has invalid values (min=%s, max=%s)",
            inp.min_viewport,
            inp.max_viewport,
        )

    return BuildSystemOutput(system=system, has_invalid_values=invalid, warnings=warnings)


def run_render(inp: RenderCssInput) -> RenderCssOutput:
    """
    Render a built system as a stylesheet body.

    Args:
        inp: Input containing the system and an optional selector.

    Returns:
        RenderCssOutput with the CSS text and declaration count.
    """
    css = render_stylesheet(inp.system, inp.selector or DEFAULT_SELECTOR)
    return RenderCssOutput(css=css, declaration_count=len(iter_declarations(inp.system)))


def run(
    inp: BuildSystemInput,
    *,
    rules: FluidRulesPort | None = None,
    selector: str | None = None,
) -> RenderCssOutput:
    """Build and render in one call."""
    built = run_build(inp, rules=rules)
    return run_render(RenderCssInput(system=built.system, selector=selector))
