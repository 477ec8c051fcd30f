"""Wire format of device requests and responses.

Every request is a 16-byte little-endian header (command id, body length,
command index) followed by the body. Responses carry the same header.
"""

from __future__ import annotations

import struct
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .commands import Command, CommandKind
from .states import Buttons, ButtonStates, CurrentButtonStates, DCPCategory
from .types import (
    ChannelName,
    EffectKey,
    FirmwareVersions,
    MicrophoneParamKey,
    MicrophoneType,
    VersionNumber,
)

VID_GOXLR = 0x1220
PID_GOXLR_MINI = 0x8FE4
PID_GOXLR_FULL = 0x8FE0

HEADER_SIZE = 16
_HEADER = struct.Struct("<IHH8x")
_MAX_INDEX = 0xFFFF
_BUTTON_STATE_COUNT = 24


class CommandError(Exception):
    """A request to the device failed."""


class MalformedResponseError(CommandError):
    """The device answered with data that does not have the expected shape."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"Malformed response from GoXLR: {detail}")
        self.detail = detail


@dataclass
class CommandCounter:
    """Tracks the index the device expects on each request.

    When the counter is exhausted (``count == 0xFFFF``) the caller must send a
    reset request before the next one; ``next_index`` then starts over from 1.
    """

    count: int = 0

    def next_index(self, command: Command) -> int:
        """Advance the counter for ``command`` and return the index to send."""
        if command.kind is CommandKind.ResetCommandIndex:
            self.count = 0
            return self.count
        if self.count >= _MAX_INDEX:
            self.count = 0
        self.count += 1
        return self.count


@dataclass(frozen=True)
class Response:
    """A decoded response: header fields and body."""

    command_id: int
    command_index: int
    body: bytes


def encode_request(command: Command, body: bytes, index: int) -> bytes:
    """The full request packet for ``command`` with ``body`` at ``index``."""
    body = bytes(body)
    if len(body) > 0xFFFF:
        raise ValueError(f"request body too long: {len(body)} bytes")
    if not 0 <= index <= _MAX_INDEX:
        raise ValueError(f"command index out of range: {index}")
    return _HEADER.pack(command.command_id(), len(body), index) + body


def decode_response(data: bytes) -> Response:
    """Split a response into its header fields and body."""
    data = bytes(data)
    if len(data) < HEADER_SIZE:
        raise MalformedResponseError(f"response shorter than header ({len(data)} bytes)")
    command_id, length, index = _HEADER.unpack_from(data)
    body = data[HEADER_SIZE:]
    if len(body) != length:
        raise MalformedResponseError(
            f"header announces {length} body bytes, {len(body)} received"
        )
    return Response(command_id=command_id, command_index=index, body=body)


def _unpack(fmt: str, data: bytes, what: str) -> tuple:
    size = struct.calcsize(fmt)
    if len(data) < size:
        raise MalformedResponseError(f"{what} needs {size} bytes, got {len(data)}")
    return struct.unpack_from(fmt, data)


def encode_dcp_category(category: DCPCategory) -> bytes:
    """Body of a request asking whether a DCP category is supported."""
    return struct.pack("<H", int(category))


def parse_supports_dcp(data: bytes) -> bool:
    """Whether a DCP support query was answered positively."""
    (value,) = _unpack("<H", data, "DCP support")
    return value == 1


def parse_firmware_version(data: bytes) -> FirmwareVersions:
    """Firmware, FPGA and DICE versions from a hardware info response."""
    (
        firmware_packed,
        firmware_build,
        _unknown,
        fpga_count,
        dice_build,
        dice_packed,
    ) = _unpack("<6I", data, "firmware version")
    firmware = VersionNumber(
        firmware_packed >> 12,
        (firmware_packed >> 8) & 0xF,
        firmware_packed & 0xFF,
        firmware_build,
    )
    dice = VersionNumber(
        (dice_packed >> 20) & 0xF,
        (dice_packed >> 12) & 0xFF,
        dice_packed & 0xFFF,
        dice_build,
    )
    return FirmwareVersions(firmware=firmware, fpga_count=fpga_count, dice=dice)


def _c_string(data: bytes) -> str:
    end = data.find(0)
    if end != -1:
        data = data[:end]
    return data.decode("utf-8", errors="replace")


def parse_serial_number(data: bytes) -> tuple[str, str]:
    """The (serial number, manufacture date) pair from a hardware info response."""
    data = bytes(data)
    if len(data) < 24:
        raise MalformedResponseError(f"serial number needs 24 bytes, got {len(data)}")
    return _c_string(data[:24]), _c_string(data[24:])


def parse_microphone_level(data: bytes) -> int:
    """The current microphone level."""
    (level,) = _unpack("<H", data, "microphone level")
    return level


def parse_button_states(data: bytes) -> CurrentButtonStates:
    """Pressed buttons, encoder positions and fader volumes."""
    button_bits, *rest = _unpack("<I4b4B", data, "button states")
    encoders, volumes = rest[:4], rest[4:]
    pressed = frozenset(button for button in Buttons if button_bits & (1 << button.value))
    return CurrentButtonStates(pressed=pressed, volumes=tuple(volumes), encoders=tuple(encoders))


def encode_fader(channel: ChannelName) -> bytes:
    """Body assigning ``channel`` to a fader."""
    return bytes([int(channel), 0x00, 0x00, 0x00])


def encode_button_states(states: Sequence[ButtonStates]) -> bytes:
    """Body setting the lighting state of all 24 buttons."""
    states = list(states)
    if len(states) != _BUTTON_STATE_COUNT:
        raise ValueError(f"expected {_BUTTON_STATE_COUNT} button states, got {len(states)}")
    return bytes(int(ButtonStates(state)) for state in states)


def encode_fader_display_mode(gradient: bool, meter: bool) -> bytes:
    """Body selecting a fader's gradient and meter display."""
    return bytes([0x01 if gradient else 0x00, 0x01 if meter else 0x00])


def encode_effect_values(effects: Iterable[tuple[EffectKey, int]]) -> bytes:
    """Body setting effect parameters: a u32 key and i32 value per entry."""
    chunks = []
    for key, value in effects:
        try:
            chunks.append(struct.pack("<Ii", int(key), value))
        except struct.error as exc:
            raise ValueError(f"effect value out of range for {key}: {value}") from exc
    return b"".join(chunks)


def encode_mic_params(params: Iterable[tuple[MicrophoneParamKey, bytes]]) -> bytes:
    """Body setting microphone parameters: a u32 key and 4 raw bytes per entry."""
    chunks = []
    for key, value in params:
        value = bytes(value)
        if len(value) != 4:
            raise ValueError(f"microphone parameter {key} needs 4 bytes, got {len(value)}")
        chunks.append(struct.pack("<I", int(key)) + value)
    return b"".join(chunks)


def microphone_gain_params(
    microphone_type: MicrophoneType, gain: int
) -> list[tuple[MicrophoneParamKey, bytes]]:
    """Parameters selecting the microphone type and setting its gain."""
    if not 0 <= gain <= 0xFFFF:
        raise ValueError(f"gain must be in 0..65535: {gain}")
    mic_type = b"\x01\x00\x00\x00" if microphone_type.has_phantom_power() else b"\x00" * 4
    gain_value = b"\x00\x00" + struct.pack("<H", gain)
    return [
        (MicrophoneParamKey.MicType, mic_type),
        (microphone_type.gain_param(), gain_value),
    ]