"""Pioneer AVR web control command definitions.

Command Format:
- Commands are sent as the WebToHostItem query value of EventHandler.asp
- Parameterized commands put the operand before the suffix
- Volume: 000-185 (three digits, zero-padded), 0.5 dB per step
- Inputs: two-digit function code followed by FN

Examples: PO (power on), 007VL (volume 7), 20FN (HDMI 2), 3ATH (dialog up2)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from .const import VOLUME_MAX, VOLUME_MIN
from .exceptions import OutOfRange, UnknownInput, UnknownMode, ValidationError


@dataclass(frozen=True, slots=True)
class Command:
    """One unit of wire vocabulary."""

    suffix: str
    operand: str = ""

    @property
    def token(self) -> str:
        """Return the string sent to the receiver."""
        return f"{self.operand}{self.suffix}"

    def __str__(self) -> str:
        return self.token


class Direction(str, Enum):
    """Step direction for volume and tone commands."""

    UP = "up"
    DOWN = "down"


class InputSelector(str, Enum):
    """Input sources understood by the receiver."""

    PHONO = "phono"
    CD = "cd"
    TUNER = "tuner"
    CD_TAPE = "cd-tape"
    DVD = "dvd"
    TV_SAT = "tv/sat"
    VIDEO_1 = "video-1"
    MULTI_CHANNEL_IN = "multi-channel-in"
    VIDEO_2 = "video-2"
    DVD_BDR = "dvd/bdr"
    IPOD_USB = "ipod-usb"
    XM_RADIO = "xm-radio"
    HDMI_1 = "hdmi-1"
    HDMI_2 = "hdmi-2"
    HDMI_3 = "hdmi-3"
    HDMI_4 = "hdmi-4"
    HDMI_5 = "hdmi-5"
    BD = "bd"
    SIRIUS = "sirius"
    ADAPTER_PORT = "adapter-port"


class SoundSetting(str, Enum):
    """Sound settings that take a single mode value."""

    DIALOG_ENHANCEMENT = "dialog_enhancement"
    PQLS = "pqls"
    EQ = "eq"
    STANDING_WAVE = "standing_wave"
    PHASE_CONTROL = "phase_control"
    TONE = "tone"
    AUTO_SOUND_RETRIEVER = "auto_sound_retriever"
    DIGITAL_NOISE_REDUCTION = "digital_noise_reduction"


@dataclass(frozen=True, slots=True)
class ModeTable:
    """Mode names of a sound setting; a mode's digit is its position."""

    suffix: str
    modes: tuple[str, ...]

    def digit(self, mode: str) -> int:
        try:
            return self.modes.index(mode)
        except ValueError:
            raise UnknownMode(
                f"Mode must be one of {', '.join(self.modes)}, got {mode!r}"
            ) from None


INPUT_CODES: Mapping[InputSelector, str] = MappingProxyType(
    {
        InputSelector.PHONO: "00",
        InputSelector.CD: "01",
        InputSelector.TUNER: "02",
        InputSelector.CD_TAPE: "03",
        InputSelector.DVD: "04",
        InputSelector.TV_SAT: "05",
        InputSelector.VIDEO_1: "10",
        InputSelector.MULTI_CHANNEL_IN: "12",
        InputSelector.VIDEO_2: "14",
        InputSelector.DVD_BDR: "15",
        InputSelector.IPOD_USB: "17",
        InputSelector.XM_RADIO: "18",
        InputSelector.HDMI_1: "19",
        InputSelector.HDMI_2: "20",
        InputSelector.HDMI_3: "21",
        InputSelector.HDMI_4: "22",
        InputSelector.HDMI_5: "23",
        InputSelector.BD: "25",
        InputSelector.SIRIUS: "27",
        InputSelector.ADAPTER_PORT: "33",
    }
)

MODE_TABLES: Mapping[SoundSetting, ModeTable] = MappingProxyType(
    {
        SoundSetting.DIALOG_ENHANCEMENT: ModeTable(
            "ATH", ("off", "flat", "up1", "up2", "up3", "up4")
        ),
        SoundSetting.PQLS: ModeTable("PQ", ("off", "auto")),
        SoundSetting.EQ: ModeTable("ATC", ("off", "on")),
        SoundSetting.STANDING_WAVE: ModeTable("ATD", ("off", "on")),
        SoundSetting.PHASE_CONTROL: ModeTable("IS", ("off", "on")),
        SoundSetting.TONE: ModeTable("TO", ("bypass", "on")),
        SoundSetting.AUTO_SOUND_RETRIEVER: ModeTable("ATA", ("off", "on")),
        SoundSetting.DIGITAL_NOISE_REDUCTION: ModeTable("ATG", ("off", "on")),
    }
)


def _check_tables() -> None:
    """Fail at import if a lookup table does not cover its enumeration."""
    if set(INPUT_CODES) != set(InputSelector):
        raise RuntimeError("INPUT_CODES does not cover every InputSelector")
    if len(set(INPUT_CODES.values())) != len(INPUT_CODES):
        raise RuntimeError("INPUT_CODES maps two inputs to the same code")
    if set(MODE_TABLES) != set(SoundSetting):
        raise RuntimeError("MODE_TABLES does not cover every SoundSetting")
    for setting, table in MODE_TABLES.items():
        if len(set(table.modes)) != len(table.modes):
            raise RuntimeError(f"Duplicate mode name for {setting.value}")


_check_tables()

# code -> selector, for decoding the active input of a status poll
INPUTS_BY_CODE: Mapping[int, InputSelector] = MappingProxyType(
    {int(code): selector for selector, code in INPUT_CODES.items()}
)


def _direction(direction: Direction | str) -> Direction:
    try:
        return Direction(direction)
    except ValueError:
        raise ValidationError(
            f"Direction must be 'up' or 'down', got {direction!r}"
        ) from None


# ============================================================================
# POWER / VOLUME / MUTE
# ============================================================================


def encode_power(on: bool) -> Command:
    """Power on (PO) or standby (PF)."""
    return Command("PO" if on else "PF")


def validate_volume(raw: int) -> None:
    """Validate raw volume is an integer in 0-185."""
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise OutOfRange(f"Volume must be an integer, got {raw!r}")
    if not VOLUME_MIN <= raw <= VOLUME_MAX:
        raise OutOfRange(f"Volume must be {VOLUME_MIN}-{VOLUME_MAX}, got {raw}")


def encode_volume_set(raw: int) -> Command:
    """Set absolute volume.

    Command: xxxVL
    - xxx = raw volume (000-185, three digits, zero-padded)

    Example: 007VL = volume 7 (-77.0 dB)
    """
    validate_volume(raw)
    return Command("VL", f"{raw:03d}")


def encode_volume_step(direction: Direction | str) -> Command:
    """Step volume by one device unit (VU / VD).

    There is no step-count form; send the token once per unit.
    """
    return Command("VU" if _direction(direction) is Direction.UP else "VD")


def encode_mute(on: bool) -> Command:
    """Mute on (MO) or off (MF)."""
    return Command("MO" if on else "MF")


# ============================================================================
# INPUTS
# ============================================================================


def input_selector(selector: InputSelector | str) -> InputSelector:
    """Resolve an input name to its selector."""
    try:
        return InputSelector(selector)
    except ValueError:
        raise UnknownInput(f"Unknown input {selector!r}") from None


def encode_input(selector: InputSelector | str) -> Command:
    """Select input source.

    Command: nnFN
    - nn = function code from INPUT_CODES

    Example: 20FN = HDMI 2
    """
    return Command("FN", INPUT_CODES[input_selector(selector)])


def encode_input_next() -> Command:
    """Cycle to the next input (FU)."""
    return Command("FU")


def encode_input_prev() -> Command:
    """Cycle to the previous input (FD)."""
    return Command("FD")


# ============================================================================
# TONE CONTROLS
# ============================================================================


def encode_bass(direction: Direction | str) -> Command:
    return Command("BI" if _direction(direction) is Direction.UP else "BD")


def encode_treble(direction: Direction | str) -> Command:
    return Command("TI" if _direction(direction) is Direction.UP else "TD")


# ============================================================================
# SOUND MODES
# ============================================================================


def sound_setting(setting: SoundSetting | str) -> SoundSetting:
    """Resolve a setting name to its SoundSetting."""
    try:
        return SoundSetting(setting)
    except ValueError:
        raise ValidationError(f"Unknown sound setting {setting!r}") from None


def encode_mode(setting: SoundSetting | str, mode: str) -> Command:
    """Set a sound setting mode.

    Command: nSUFFIX
    - n = position of the mode in the setting's table
    """
    table = MODE_TABLES[sound_setting(setting)]
    return Command(table.suffix, str(table.digit(mode)))


def encode_dialog_enhancement(mode: str) -> Command:
    """off | flat | up1 | up2 | up3 | up4 (0-5ATH)."""
    return encode_mode(SoundSetting.DIALOG_ENHANCEMENT, mode)


def encode_pqls(mode: str) -> Command:
    """off | auto (0-1PQ)."""
    return encode_mode(SoundSetting.PQLS, mode)


def encode_eq(mode: str) -> Command:
    return encode_mode(SoundSetting.EQ, mode)


def encode_standing_wave(mode: str) -> Command:
    return encode_mode(SoundSetting.STANDING_WAVE, mode)


def encode_phase_control(mode: str) -> Command:
    return encode_mode(SoundSetting.PHASE_CONTROL, mode)


def encode_tone(mode: str) -> Command:
    """bypass | on (0-1TO)."""
    return encode_mode(SoundSetting.TONE, mode)


def encode_auto_sound_retriever(mode: str) -> Command:
    return encode_mode(SoundSetting.AUTO_SOUND_RETRIEVER, mode)


def encode_digital_noise_reduction(mode: str) -> Command:
    return encode_mode(SoundSetting.DIGITAL_NOISE_REDUCTION, mode)
