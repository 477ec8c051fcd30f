# goxlr

Tools for working with GoXLR and GoXLR Mini audio mixers, in plain Python
with no third-party dependencies.

The package provides:

- **Shared types** (`goxlr.types`): channels, faders, encoders, effect and
  microphone parameter keys, compressor and gate lookup tables, sample
  buttons, and the `VersionNumber` and `FirmwareVersions` records.
- **Routing** (`goxlr.routing`): the left and right sides of each input and
  output (`InputDevice`, `OutputDevice`), their identifiers and positions in
  a routing row, and `from_basic` to turn a device from `goxlr.types` into
  its (left, right) pair.
- **States** (`goxlr.states`): `ButtonStates`, `Buttons`,
  `CurrentButtonStates`, `ChannelState` and `DCPCategory`.
- **Colour map layout** (`goxlr.colouring`): `ColourTargets` gives each lit
  element's colour count and the byte offset of each of its colours, in
  either the standard colour map or the larger one used by firmware 1.3.40
  and later.
- **Commands and packets** (`goxlr.commands`, `goxlr.protocol`): `Command`
  with its `CommandKind` and `command_id()`, `CommandCounter` for request
  indices, `encode_request` / `decode_response`, body encoders
  (`encode_fader`, `encode_button_states`, `encode_fader_display_mode`,
  `encode_effect_values`, `encode_mic_params`, `encode_dcp_category`,
  `microphone_gain_params`) and response parsers (`parse_firmware_version`,
  `parse_serial_number`, `parse_microphone_level`, `parse_button_states`,
  `parse_supports_dcp`). Malformed responses raise `MalformedResponseError`.
- **Microphone profiles** (`goxlr.mic_profile`): `MicProfileSettings` loads
  and writes microphone profile XML, holding an `Equalizer`, an
  `EqualizerMini`, a `Compressor`, a `Gate`, the de-esser amount, a
  `MicSetup` and a `UiSetup`. Bad attribute values raise
  `goxlr.errors.ParseError`; failures while saving raise
  `goxlr.errors.SaveError`.

## Installation

```
pip install goxlr
```

## Examples

Load a microphone profile, change it and write it back. `load` takes XML
bytes, a binary file object or a path:

```python
from goxlr.mic_profile import MicProfileSettings
from goxlr.types import EqFrequencies

settings = MicProfileSettings.load("Default.goxlrMicProfile")

settings.deess = 20
settings.gate.enabled = True
settings.equalizer.gains[EqFrequencies.Equalizer1KHz] = 3
print(settings.equalizer.frequency_as_goxlr(EqFrequencies.Equalizer1KHz))

settings.save("Tweaked.goxlrMicProfile")
```

Build a request packet and read a response:

```python
from goxlr.commands import Command, CommandKind
from goxlr.protocol import CommandCounter, decode_response, encode_fader, encode_request
from goxlr.types import ChannelName, FaderName

counter = CommandCounter()
command = Command(CommandKind.SetFader, FaderName.A)
packet = encode_request(command, encode_fader(ChannelName.Mic), counter.next_index(command))

# ... later, with the bytes the device sent back:
# response = decode_response(reply)
# response.command_index, response.body
```

Work out where a button's colours live in the colour map:

```python
from goxlr.colouring import ColourTargets

offset = ColourTargets.Bleep.position(0, format_1_3_40=True)
```

## What this package does not do

- It does not talk to a device. There is no USB access: the package builds
  request packets and decodes responses, and the caller sends and receives
  the bytes. `goxlr.protocol` only defines the vendor and product ids
  (`VID_GOXLR`, `PID_GOXLR_FULL`, `PID_GOXLR_MINI`) for finding one.
- It reads and writes microphone profiles only. Full device profiles (the
  zipped files with mixer, fader, effect, sampler and scribble settings) are
  not handled.
- It has no command-line tool or daemon.

## Running the tests

```
pip install -e ".[test]"
pytest
```