"""Parse "m-if-t" guarantee levels."""

from __future__ import annotations

import re

from lottowheel.engine.wheels import GuaranteeSpec
from lottowheel.errors import WheelValidationError

CUSTOM_LEVEL = "custom"
DEFAULT_CUSTOM_GUARANTEE = GuaranteeSpec(must_match=5, guaranteed=4)

SMALL_GAME_PRESETS = ("3-if-4", "4-if-5", "3-if-5", "5-if-6", "4-if-6", "3-if-6")
LARGE_GAME_PRESETS = ("3-if-5", "4-if-5", "3-if-4")

_LEVEL_PATTERN = re.compile(r"^\s*(\d+)\s*-\s*if\s*-\s*(\d+)\s*$", re.IGNORECASE)


def parse_guarantee(level: str, custom: GuaranteeSpec | None = None) -> GuaranteeSpec:
    """Turn ``"m-if-t"`` (or ``"custom"``) into a GuaranteeSpec."""
    if level.strip().lower() == CUSTOM_LEVEL:
        return custom or DEFAULT_CUSTOM_GUARANTEE

    match = _LEVEL_PATTERN.match(level)
    if match is None:
        raise WheelValidationError(
            f"Invalid guarantee level '{level}'. Expected 'm-if-t' (e.g. 3-if-4) or 'custom'."
        )
    guaranteed, must_match = (int(group) for group in match.groups())
    return GuaranteeSpec(must_match=must_match, guaranteed=guaranteed)


def available_presets(game_size: int) -> tuple[str, ...]:
    """Preset guarantee levels offered for a ticket size."""
    if game_size <= 6:
        return SMALL_GAME_PRESETS
    return LARGE_GAME_PRESETS
