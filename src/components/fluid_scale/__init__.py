"""
Fluid scale component - fluid type and spacing tokens as CSS clamp().
"""

from ._impl import (
    DEFAULT_CUSTOM_PAIRS,
    DEFAULT_SELECTOR,
    DEFAULT_SPACE_PAIRS,
    DEFAULT_SPACE_STEPS,
    DEFAULT_TYPE_SCALE_STEPS,
    TYPE_SCALES,
    FluidConfig,
    build_clamp,
    build_fluid_system,
    divide,
    format_number,
    generate_css,
    generate_step,
    get_scale_ratio,
    has_invalid_values,
    iter_declarations,
    parse_int,
    render_stylesheet,
    resolve_scale_ratio,
    round_2,
)
from .component import run, run_build, run_render
from .models import (
    PIXELS_PER_REM,
    BuildSystemInput,
    BuildSystemOutput,
    FluidSystem,
    FluidToken,
    RenderCssInput,
    RenderCssOutput,
    Viewport,
)
from .ports import FluidRulesPort

__all__ = [
    # Entry points
    "run",
    "run_build",
    "run_render",
    # Models
    "BuildSystemInput",
    "BuildSystemOutput",
    "FluidSystem",
    "FluidToken",
    "RenderCssInput",
    "RenderCssOutput",
    "Viewport",
    # Ports
    "FluidRulesPort",
    # _impl re-exports
    "DEFAULT_CUSTOM_PAIRS",
    "DEFAULT_SELECTOR",
    "DEFAULT_SPACE_PAIRS",
    "DEFAULT_SPACE_STEPS",
    "DEFAULT_TYPE_SCALE_STEPS",
    "PIXELS_PER_REM",
    "TYPE_SCALES",
    "FluidConfig",
    "build_clamp",
    "build_fluid_system",
    "divide",
    "format_number",
    "generate_css",
    "generate_step",
    "get_scale_ratio",
    "has_invalid_values",
    "iter_declarations",
    "parse_int",
    "render_stylesheet",
    "resolve_scale_ratio",
    "round_2",
]
