"""Aspect matching between positions on the 360 degree ring."""
from __future__ import annotations

from .aspects import (
    Aspect360,
    AspectAngle,
    calc_aspect,
    find_aspect,
    find_aspects,
    find_best_aspect,
    is_aspected,
    to_aspect_angle,
)
from .catalog import aspect_orbs, get_aspect, identify_aspect, load_aspect_pack
from .config import AspectConfigError, cfg, get_config, reset_config
from .models import AspectDefinition, AspectOrb, AspectResult, to_aspect_orbs
from .ring import FULL_TURN, HALF_TURN, Ring360, angle_360, signed_difference, to_360

__all__ = [
    "Aspect360",
    "AspectConfigError",
    "AspectAngle",
    "AspectDefinition",
    "AspectOrb",
    "AspectResult",
    "FULL_TURN",
    "HALF_TURN",
    "Ring360",
    "angle_360",
    "aspect_orbs",
    "calc_aspect",
    "cfg",
    "find_aspect",
    "find_aspects",
    "find_best_aspect",
    "get_aspect",
    "get_config",
    "identify_aspect",
    "is_aspected",
    "load_aspect_pack",
    "reset_config",
    "signed_difference",
    "to_360",
    "to_aspect_angle",
    "to_aspect_orbs",
]
