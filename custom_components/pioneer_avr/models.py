"""Data models for Pioneer AVR status."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from .commands import INPUTS_BY_CODE, InputSelector
from .const import VOLUME_MAX, VOLUME_MIN
from .exceptions import MalformedResponse

# StatusHandler.asp zone keys
ZONE_POWER = "P"
ZONE_VOLUME = "V"
ZONE_MUTE = "M"
ZONE_INPUTS = "I"
STATUS_ZONES = "Z"


def _int_field(zone: Mapping[str, Any], key: str, index: int) -> int:
    if key not in zone:
        raise MalformedResponse(f"Zone {index} is missing field {key!r}")
    value = zone[key]
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedResponse(
            f"Zone {index} field {key!r} must be an integer, got {value!r}"
        )
    return value


def _volume_field(zone: Mapping[str, Any], index: int) -> int:
    volume = _int_field(zone, ZONE_VOLUME, index)
    if not VOLUME_MIN <= volume <= VOLUME_MAX:
        raise MalformedResponse(
            f"Zone {index} volume must be {VOLUME_MIN}-{VOLUME_MAX}, got {volume}"
        )
    return volume


@dataclass(frozen=True, slots=True)
class ZoneStatus:
    """State of one zone as reported by a poll."""

    power: bool
    volume: int  # 0-185
    mute: bool
    inputs: tuple[int, ...] = ()
    extra: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def input_code(self) -> int | None:
        """Code of the active input."""
        return self.inputs[0] if self.inputs else None

    @property
    def input(self) -> InputSelector | None:
        """Active input, or None when the code is not a known selector."""
        code = self.input_code
        return None if code is None else INPUTS_BY_CODE.get(code)

    @classmethod
    def from_json(cls, zone: Any, index: int = 0) -> ZoneStatus:
        if not isinstance(zone, Mapping):
            raise MalformedResponse(f"Zone {index} must be an object, got {zone!r}")

        inputs = zone.get(ZONE_INPUTS, [])
        if not isinstance(inputs, list) or any(
            isinstance(code, bool) or not isinstance(code, int) for code in inputs
        ):
            raise MalformedResponse(
                f"Zone {index} field {ZONE_INPUTS!r} must be a list of integers"
            )

        known = (ZONE_POWER, ZONE_VOLUME, ZONE_MUTE, ZONE_INPUTS)
        return cls(
            power=_int_field(zone, ZONE_POWER, index) == 1,
            volume=_volume_field(zone, index),
            mute=_int_field(zone, ZONE_MUTE, index) == 1,
            inputs=tuple(inputs),
            extra=MappingProxyType({k: v for k, v in zone.items() if k not in known}),
        )


@dataclass(frozen=True, slots=True)
class DeviceStatus:
    """Snapshot of the receiver returned by StatusHandler.asp.

    Zone 0 is the main zone. Top-level fields other than the zone list
    (balance, display, listening mode, ...) are kept untouched in ``raw``.
    """

    zones: tuple[ZoneStatus, ...]
    raw: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def main(self) -> ZoneStatus:
        return self.zones[0]

    @property
    def power(self) -> bool:
        return self.main.power

    @property
    def volume(self) -> int:
        return self.main.volume

    @property
    def mute(self) -> bool:
        return self.main.mute

    @property
    def input_code(self) -> int | None:
        return self.main.input_code

    @property
    def input(self) -> InputSelector | None:
        return self.main.input

    @classmethod
    def from_json(cls, data: Any) -> DeviceStatus:
        """Build a status from the decoded JSON body.

        Raises MalformedResponse when the document does not have the
        expected shape.
        """
        if not isinstance(data, Mapping):
            raise MalformedResponse(f"Status must be an object, got {type(data).__name__}")

        zones = data.get(STATUS_ZONES)
        if not isinstance(zones, list) or not zones:
            raise MalformedResponse(f"Status field {STATUS_ZONES!r} must be a non-empty list")

        return cls(
            zones=tuple(ZoneStatus.from_json(zone, i) for i, zone in enumerate(zones)),
            raw=MappingProxyType(dict(data)),
        )
