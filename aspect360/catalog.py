"""Named aspect packs loaded from YAML."""
from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, List, Optional, Tuple

from .aspects import AspectAngle
from .config import AspectConfigError, cfg, load_yaml
from .models import AspectDefinition, AspectOrb, AspectResult
from .ring import Ring360

logger = logging.getLogger(__name__)


def pack_path(pack: str) -> Path:
    return Path(__file__).with_name(f"aspects_{pack}.yaml")


def _default_pack() -> str:
    return getattr(getattr(cfg(), "aspects", None), "pack", "ptolemaic")


def _default_orb() -> float:
    return float(getattr(getattr(cfg(), "aspects", None), "default_orb", 8.0))


def _numeric(value: Any) -> bool:
    return not isinstance(value, bool) and isinstance(value, (int, float))


def _parse_entry(
    pack: str, index: int, entry: Any, default_orb: float
) -> AspectDefinition:
    if not isinstance(entry, dict):
        raise AspectConfigError(f"Aspect #{index} in pack '{pack}' must be a mapping")
    target = entry.get("target")
    if not _numeric(target):
        raise AspectConfigError(
            f"Aspect #{index} in pack '{pack}' lacks a numeric target"
        )
    key = str(entry.get("key") or f"aspect_{index}")
    name = str(entry.get("name") or key.replace("_", " ").title())
    orb = entry.get("orb")
    if orb is None:
        orb = default_orb
        logger.warning(f"Orb not found for {key} in pack '{pack}', using default {orb}")
    elif not _numeric(orb):
        raise AspectConfigError(f"Aspect '{key}' in pack '{pack}' has a non-numeric orb")
    return AspectDefinition(key=key, name=name, target=float(target), orb=float(orb))


@lru_cache(maxsize=None)
def _load_pack(pack: str, default_orb: float) -> Tuple[AspectDefinition, ...]:
    path = pack_path(pack)
    if not path.exists():
        raise AspectConfigError(f"Unknown aspect pack: {pack}")
    data = load_yaml(path)
    entries = data.get("aspects", [])
    if not isinstance(entries, list):
        raise AspectConfigError(f"'aspects' in pack '{pack}' must be a list")
    logger.info(f"Loaded {len(entries)} aspects from pack '{pack}'")
    return tuple(
        _parse_entry(pack, i, entry, default_orb) for i, entry in enumerate(entries)
    )


def load_aspect_pack(pack: Optional[str] = None) -> List[AspectDefinition]:
    """Load aspect definitions from ``aspects_<pack>.yaml``.

    Without ``pack`` the configured default pack is used. Packs are cached
    per configured default orb, so ``reset_config()`` is enough to pick up a
    changed ``aspects.default_orb``.
    """
    return list(_load_pack(pack or _default_pack(), _default_orb()))


def aspect_orbs(pack: Optional[str] = None) -> List[AspectOrb]:
    """Targets and orbs of a pack, in pack order."""
    return [definition.as_orb() for definition in load_aspect_pack(pack)]


def get_aspect(key: str, pack: Optional[str] = None) -> AspectDefinition:
    """Return the definition named ``key``."""
    for definition in load_aspect_pack(pack):
        if definition.key == key:
            return definition
    raise KeyError(f"Unknown aspect: {key}")


def identify_aspect(
    angle: AspectAngle,
    other: Ring360,
    pack: Optional[str] = None,
    best: bool = True,
) -> Optional[Tuple[AspectDefinition, AspectResult]]:
    """Name the aspect formed between ``angle`` and ``other``.

    With ``best`` the matched definition nearest its exact target wins,
    otherwise the first matched definition in pack order.
    """
    definitions = load_aspect_pack(pack)
    if best:
        found = angle.find_best_aspect(other, definitions)
    else:
        found = angle.find_aspect(other, definitions)
    if found is None:
        return None
    definition = next(
        d for d in definitions if d.target == found.target and d.orb == found.orb
    )
    return definition, found
