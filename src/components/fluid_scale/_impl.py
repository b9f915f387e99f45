"""
Fluid scale functional core.

Builds fluid type and spacing tokens as CSS clamp() expressions from a
min/max viewport pair. Pure functions only: no I/O, no shared state apart
from the read-only scale table.

Key behaviors:
- Type scale steps follow a geometric progression per viewport
- Every token interpolates linearly between the two viewport widths
- Bad input never raises: it surfaces as NaN/Infinity in the output
- Numbers are formatted the way browsers print them (1, 0.65, NaN)
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from .models import PIXELS_PER_REM, FluidSystem, FluidToken, Viewport

# --- Scale Table ---


TYPE_SCALES: Mapping[str, float] = MappingProxyType(
    {
        "minor-second": 1.067,
        "major-second": 1.125,
        "minor-third": 1.2,
        "major-third": 1.25,
        "perfect-fourth": 1.333,
        "augmented-fourth": 1.414,
        "perfect-fifth": 1.5,
        "golden-ratio": 1.618,
        "major-sixth": 1.667,
        "minor-seventh": 1.778,
        "major-seventh": 1.875,
        "octave": 2,
    }
)


def get_scale_ratio(name: str | None) -> float | None:
    """Look up a named ratio. Returns None when the name is unknown."""
    if name is None:
        return None
    return TYPE_SCALES.get(name)


def resolve_scale_ratio(name: str | None) -> float:
    """Look up a named ratio, degrading unknown names to NaN."""
    ratio = get_scale_ratio(name)
    if ratio is None:
        return math.nan
    return float(ratio)


# --- Default Configuration ---


DEFAULT_TYPE_SCALE_STEPS = (-2, 5)

DEFAULT_SPACE_STEPS: Mapping[str, float] = MappingProxyType(
    {
        "-3XS": 0.25,
        "-2XS": 0.5,
        "-XS": 0.75,
        "-S": 1,
        "-M": 1.5,
        "-L": 2,
        "-XL": 3,
        "-2XL": 4,
        "-3XL": 6,
        "-4XL": 8,
    }
)

DEFAULT_SPACE_PAIRS: Mapping[str, str] = MappingProxyType(
    {
        "-3XS": "-2XS",
        "-2XS": "-XS",
        "-XS": "-S",
        "-S": "-M",
        "-M": "-L",
        "-L": "-XL",
        "-XL": "-2XL",
        "-2XL": "-3XL",
    }
)

DEFAULT_CUSTOM_PAIRS: Mapping[str, str] = MappingProxyType({"-S": "-L"})

DEFAULT_SELECTOR = ":where(html)"


@dataclass(frozen=True)
class FluidConfig:
    """Token layout used when assembling a system."""

    pixels_per_rem: float = PIXELS_PER_REM
    type_scale_steps: tuple[int, int] = DEFAULT_TYPE_SCALE_STEPS
    space_steps: Mapping[str, float] = field(default_factory=lambda: DEFAULT_SPACE_STEPS)
    space_pairs: Mapping[str, str] = field(default_factory=lambda: DEFAULT_SPACE_PAIRS)
    custom_pairs: Mapping[str, str] = field(default_factory=lambda: DEFAULT_CUSTOM_PAIRS)


# --- Numeric Helpers ---


# browser whitespace: Zs separators, line terminators and the BOM
_JS_WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
)
_INT_PREFIX = re.compile(
    rf"^[{_JS_WHITESPACE}]*([+-]?)(?:0[xX]([0-9a-fA-F]*)|([0-9]+))",
    re.ASCII,
)
_MAX_FLOAT_DIGITS = 400


def parse_int(raw: str | None) -> float:
    """
    Parse the leading integer of a string, browser parseInt style.

    "320" -> 320, "320px" -> 320, "12.9" -> 12, "0x10" -> 16.
    Returns NaN when there are no leading ASCII digits ("0x" alone included).
    """
    if raw is None:
        return math.nan

    match = _INT_PREFIX.match(raw)
    if match is None:
        return math.nan

    sign, hex_digits, dec_digits = match.groups()
    if hex_digits is not None:
        if not hex_digits:
            return math.nan
        digits, base = hex_digits, 16
    else:
        digits, base = dec_digits, 10

    # far beyond float range; also avoids the int() digit limit
    if len(digits.lstrip("0")) > _MAX_FLOAT_DIGITS:
        result = math.inf
    else:
        value = int(digits, base)
        try:
            result = float(value)
        except OverflowError:
            result = math.inf
    return -result if sign == "-" else result


def round_2(value: float) -> float:
    """Round half-up to 2 decimals. NaN and infinities pass through."""
    scaled = value * 100
    if not math.isfinite(scaled):
        return value
    # compare the fraction instead of adding 0.5, which can itself round
    whole = math.floor(scaled)
    if scaled - whole >= 0.5:
        whole += 1
    return whole / 100


def divide(numerator: float, denominator: float) -> float:
    """IEEE division: x/0 gives a signed infinity, 0/0 gives NaN."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def format_number(value: float) -> str:
    """Format a number as a browser would print it."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    if float(value).is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(float(value))


# --- Scale Generator ---


def generate_step(base_font_size_px: float, ratio: float, step_index: int) -> float:
    """
    Font size at a step of the geometric type scale.

    Args:
        base_font_size_px: Size at step 0
        ratio: Scale ratio (NaN for unknown scales)
        step_index: Step, negative steps shrink

    Returns:
        base * ratio ** step, rounded to 2 decimals
    """
    try:
        factor = float(ratio) ** step_index
    except OverflowError:
        factor = math.inf
    return round_2(base_font_size_px * factor)


# --- Clamp Expression Builder ---


def build_clamp(
    min_width_px: float,
    max_width_px: float,
    min_value_px: float,
    max_value_px: float,
    pixels_per_rem: float = PIXELS_PER_REM,
) -> str:
    """
    Build a clamp() expression interpolating between two viewport widths.

    The preferred value is the line through (min_width, min_value) and
    (max_width, max_value), written as an intercept in rem plus a vw slope.
    """
    min_width = min_width_px / pixels_per_rem
    max_width = max_width_px / pixels_per_rem
    min_value = min_value_px / pixels_per_rem
    max_value = max_value_px / pixels_per_rem

    slope = divide(max_value - min_value, max_width - min_width)
    intercept = -min_width * slope + min_value

    low = f"{format_number(round_2(min_value))}rem"
    preferred = (
        f"{format_number(round_2(intercept))}rem + "
        f"{format_number(round_2(slope * 100))}vw"
    )
    high = f"{format_number(round_2(max_value))}rem"

    return f"clamp({low}, {preferred}, {high})"


# --- Token Assembler ---


def _make_token(
    min_viewport: Viewport,
    max_viewport: Viewport,
    value_min: float,
    value_max: float,
    pixels_per_rem: float,
) -> FluidToken:
    return FluidToken(
        min=value_min,
        max=value_max,
        clamp=build_clamp(
            min_viewport.width,
            max_viewport.width,
            value_min,
            value_max,
            pixels_per_rem,
        ),
        pixels_per_rem=pixels_per_rem,
    )


def _build_pairs(
    pairs: Mapping[str, str],
    space_steps: Mapping[str, FluidToken],
    min_viewport: Viewport,
    max_viewport: Viewport,
    pixels_per_rem: float,
) -> dict[str, FluidToken]:
    tokens: dict[str, FluidToken] = {}
    for low_name, high_name in pairs.items():
        low = space_steps.get(low_name)
        high = space_steps.get(high_name)
        value_min = low.min if low is not None else math.nan
        value_max = high.max if high is not None else math.nan
        tokens[f"{low_name}{high_name}"] = _make_token(
            min_viewport, max_viewport, value_min, value_max, pixels_per_rem
        )
    return tokens


def build_fluid_system(
    min_viewport: Viewport,
    max_viewport: Viewport,
    config: FluidConfig | None = None,
) -> FluidSystem:
    """
    Assemble all four token groups.

    Groups are built in dependency order: type scale, then spacing steps
    (multiples of type step 0), then pairs of spacing steps.
    """
    config = config or FluidConfig()
    ppr = config.pixels_per_rem

    min_ratio = resolve_scale_ratio(min_viewport.type_scale)
    max_ratio = resolve_scale_ratio(max_viewport.type_scale)

    first_step, last_step = config.type_scale_steps
    type_scale: dict[int, FluidToken] = {}
    for step in range(first_step, last_step + 1):
        value_min = generate_step(min_viewport.font_size, min_ratio, step)
        value_max = generate_step(max_viewport.font_size, max_ratio, step)
        type_scale[step] = _make_token(min_viewport, max_viewport, value_min, value_max, ppr)

    base = type_scale.get(0)
    base_min = base.min if base is not None else math.nan
    base_max = base.max if base is not None else math.nan

    space_steps: dict[str, FluidToken] = {}
    for name, multiplier in config.space_steps.items():
        value_min = round_2(base_min * multiplier)
        value_max = round_2(base_max * multiplier)
        space_steps[name] = _make_token(min_viewport, max_viewport, value_min, value_max, ppr)

    space_pairs = _build_pairs(config.space_pairs, space_steps, min_viewport, max_viewport, ppr)
    custom_pairs = _build_pairs(config.custom_pairs, space_steps, min_viewport, max_viewport, ppr)

    return FluidSystem(
        type_scale=MappingProxyType(type_scale),
        space_steps=MappingProxyType(space_steps),
        space_pairs=MappingProxyType(space_pairs),
        custom_pairs=MappingProxyType(custom_pairs),
    )


def has_invalid_values(system: FluidSystem) -> bool:
    """True if any token bound is NaN or infinite."""
    groups = (system.type_scale, system.space_steps, system.space_pairs, system.custom_pairs)
    return any(
        not (math.isfinite(token.min) and math.isfinite(token.max))
        for group in groups
        for token in group.values()
    )


# --- Serialization ---


def iter_declarations(system: FluidSystem) -> list[tuple[str, str]]:
    """(property, value) pairs in output order."""
    declarations = [(f"--step-{step}", token.clamp) for step, token in system.type_scale.items()]
    for group in (system.space_steps, system.space_pairs, system.custom_pairs):
        declarations.extend((f"--space{name.lower()}", token.clamp) for name, token in group.items())
    return declarations


def generate_css(system: FluidSystem) -> str:
    """Concatenate one custom property declaration per token."""
    return "".join(f"{prop}: {value};" for prop, value in iter_declarations(system))


def render_stylesheet(system: FluidSystem, selector: str = DEFAULT_SELECTOR) -> str:
    """Wrap the declarations in a rule block for the given selector."""
    return f"\n      {selector} {{\n        {generate_css(system)}\n      }}\n    "
