"""
Fluid design system stylesheet route.

Endpoint: GET /build-fluid-design-system/{minWidth}/{minFontSize}/{minTypeScale}/
          {maxWidth}/{maxFontSize}/{maxTypeScale}

Key behaviors:
- Configuration is read positionally from the path, after the first two segments
- Widths and font sizes are parsed leniently ("320px" -> 320, "abc" -> NaN)
- Unknown scale names and bad numbers are not rejected: the CSS carries NaN
- Always 200 with a text/css body
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from src.api.deps import get_rules
from src.components.fluid_scale import (
    BuildSystemInput,
    RenderCssInput,
    Viewport,
    parse_int,
    run_build,
    run_render,
)
from src.rules.models import Rules

logger = logging.getLogger(__name__)

router = APIRouter()

# leading empty segment + function name
PATH_PREFIX_SEGMENTS = 2
CONFIG_SEGMENTS = 6


# --- Helper Functions ---


def parse_request_path(path: str) -> BuildSystemInput:
    """
    Read the six positional config values from a request path.

    Missing segments behave like absent values: NaN for numbers, an unknown
    scale for names.
    """
    raw: list[str | None] = list(path.split("/")[PATH_PREFIX_SEGMENTS:])
    raw.extend([None] * (CONFIG_SEGMENTS - len(raw)))

    return BuildSystemInput(
        min_viewport=Viewport(
            width=parse_int(raw[0]),
            font_size=parse_int(raw[1]),
            type_scale=raw[2],
        ),
        max_viewport=Viewport(
            width=parse_int(raw[3]),
            font_size=parse_int(raw[4]),
            type_scale=raw[5],
        ),
    )


# --- Endpoint ---


@router.get(
    "/{system_config:path}",
    response_class=Response,
    responses={200: {"content": {"text/css": {}}, "description": "Fluid design system CSS"}},
    summary="Build fluid design system",
    description="Generate fluid type scale and spacing custom properties for a viewport pair.",
)
def build_fluid_design_system(
    request: Request,
    system_config: str,
    rules: Rules = Depends(get_rules),
) -> Response:
    """
    Render the fluid design system stylesheet.

    - **minWidth / maxWidth**: viewport widths in px
    - **minFontSize / maxFontSize**: step 0 font size in px at each width
    - **minTypeScale / maxTypeScale**: scale names, e.g. major-third
    """
    inp = parse_request_path(request.url.path)

    built = run_build(inp, rules=rules.fluid)
    rendered = run_render(RenderCssInput(system=built.system, selector=rules.css.selector))

    logger.debug(
        "Rendered %d declarations for %s", rendered.declaration_count, system_config
    )

    return Response(content=rendered.css, media_type=rules.css.media_type)
