# orchestrion

Command-line option parsing for the Orchestrion score player, plus the
small building blocks used to describe external MIDI and audio devices.

## Modules

- `orchestrion.options` – the `CommandOptions` dataclass tree holding every
  setting the command line can set: `run_mode` (`RunMode`), UI, notation,
  project, image/audio/video export, MIDI and MusicXML import, Guitar Pro,
  app and startup options, plus `converter_task` (`ConverterTask` with a
  `ConvertType` and `ParamKey`-keyed `params`), `diagnostic`
  (`DiagnosticType`), `autobot` and `audio_plugin_registration`.
- `orchestrion.cli_spec` – `OptionSpec`, the table of all options,
  `build_parser(version)` which builds an `argparse` parser from it, and
  `prepare_arguments(argv)` which drops `-qmljsdebugger…` arguments.
- `orchestrion.cli` – `CommandLineParser`, which turns an argument list into
  `CommandOptions`; `from_user_input_path(path)`, which converts native path
  separators to `/`; and `main`, the `orchestrion` command.
- `orchestrion.devices` – `ExternalDeviceId` (compares equal to its string
  value), `DeviceDesc`, a payload-free `Notification` signal with
  `subscribe`, `unsubscribe` and `notify`, the `scoped_true` context manager,
  and the abstract `ExternalDeviceService` interface.

## Installation

```
pip install .
```

## Command line

```
orchestrion [options] [scorefile...]
```

The command parses its arguments and prints the resulting options as JSON
(enum values by name). If an option that needs an input score is given
without one (for example `--score-meta`), it prints the error to stderr and
exits with status 1. Unknown options are logged and ignored.

Show all options:

```
orchestrion --help
```

Print the version, or detailed version information:

```
orchestrion --version
orchestrion --long-version
```

## Library use

```python
from orchestrion.cli import CommandLineParser
from orchestrion.options import RunMode

parser = CommandLineParser(version="1.0.0", revision="0", unstable=False)
options = parser.parse(["-o", "out.pdf", "score.mscz"])
assert options.run_mode is RunMode.CONSOLE_APP
print(options.converter_task.input_file, options.converter_task.output_file)
print(parser.long_version())  # Orchestrion; Version 1.0.0; Build 0
```

`parse` takes the arguments without the program name. Values that do not
parse as numbers (for `-D`, `-T`, `-b`, `-r`) are logged and left unset.

Notifications and device identifiers:

```python
from orchestrion.devices import ExternalDeviceId, Notification

changed = Notification()
changed.subscribe(lambda: print("changed"))
changed.notify()

assert ExternalDeviceId("keyboard-1") == "keyboard-1"
```

## What this package does not do

The package only describes the options and the device interfaces. It does
not play, convert or export scores: the `orchestrion` command stops after
printing the parsed options. It has no concrete MIDI or audio device
service, no driver access, and no storage for the selected devices;
`ExternalDeviceService` is an abstract interface for such services to
implement.

## Tests

```
pip install .[test]
pytest
```