"""Mode domain configuration: initial mode, detection timing, notifications."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from DualSearch.config.common import (
    expect_choice,
    expect_float,
    get_optional_value,
    get_section,
)
from DualSearch.core.models import Mode
from DualSearch.services.controller import DEFAULT_NOTIFICATION_SECONDS, Detection

_MODES = {mode.value for mode in Mode}
_DETECTIONS = {detection.value for detection in Detection}


@dataclass(frozen=True, slots=True)
class ModeConfig:
    """Store validated mode controller settings.

    Attributes:
        default: Mode the controller starts in.
        detection: Whether classification runs per keystroke or on submit.
        notification_seconds: How long a "switched to" notification stays visible.
    """

    default: Mode
    detection: Detection
    notification_seconds: float


def load_mode(raw: Mapping[str, Any]) -> ModeConfig:
    """Load mode configuration from raw mapping.

    Every key is optional; missing keys fall back to keyword mode,
    per-keystroke detection and a three second notification.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If a value is not an allowed choice.
    """
    section = get_section(raw, "mode", required=False)
    default = expect_choice(get_optional_value(section, "default", Mode.KEYWORD.value), "mode.default", _MODES)
    detection = expect_choice(
        get_optional_value(section, "detection", Detection.KEYSTROKE.value),
        "mode.detection",
        _DETECTIONS,
    )
    return ModeConfig(
        default=Mode(default),
        detection=Detection(detection),
        notification_seconds=expect_float(
            get_optional_value(section, "notification_seconds", DEFAULT_NOTIFICATION_SECONDS),
            "mode.notification_seconds",
        ),
    )


def check_mode(config: ModeConfig) -> None:
    """Validate mode domain constraints.

    Raises:
        ValueError: If values violate mode constraints.
    """
    if config.notification_seconds <= 0:
        raise ValueError("mode.notification_seconds must be positive")
