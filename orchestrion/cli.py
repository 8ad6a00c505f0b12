"""Turns the command line into the options the application starts with."""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import os
import re
import sys
from collections.abc import Sequence
from enum import Enum
from typing import Any

from .cli_spec import build_parser, prepare_arguments
from .options import (
    CommandOptions,
    ConvertType,
    DiagnosticType,
    LogLevel,
    ParamKey,
    RunMode,
)

logger = logging.getLogger(__name__)

_URL_WITH_SCHEME = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*://")


def from_user_input_path(path: str) -> str:
    """Convert native path separators to forward slashes."""
    if os.sep != "/":
        path = path.replace(os.sep, "/")
    if os.altsep and os.altsep != "/":
        path = path.replace(os.altsep, "/")
    return path


def _to_int(text: str) -> int | None:
    if "_" in text:
        return None
    try:
        return int(text.strip())
    except ValueError:
        return None


def _to_float(text: str) -> float | None:
    if "_" in text:
        return None
    try:
        return float(text.strip())
    except ValueError:
        return None


def _url_from_user_input(text: str) -> str:
    """A URL as typed, or a file URL for a path relative to the working directory."""
    if _URL_WITH_SCHEME.match(text):
        return text
    absolute = os.path.abspath(os.path.join(os.getcwd(), text))
    from pathlib import Path

    return Path(absolute).as_uri()


def _first_score(scorefiles: list[str], option: str) -> str:
    if not scorefiles:
        raise ValueError(f"Option: --{option} requires an input score file")
    return scorefiles[0]


class CommandLineParser:
    """Parses arguments into a CommandOptions value."""

    def __init__(
        self, version: str = "0.0.0", revision: str = "0", unstable: bool = True
    ) -> None:
        self.version = version
        self.revision = revision
        self.unstable = unstable
        self.options = CommandOptions()
        self._parser = build_parser(version)

    @property
    def run_mode(self) -> RunMode:
        return self.options.run_mode

    def long_version(self) -> str:
        """Detailed version text, as printed for --long-version."""
        if self.unstable:
            return (
                f"Orchestrion\nUnstable Prerelease for Version {self.version}; "
                f"Build {self.revision}"
            )
        return f"Orchestrion; Version {self.version}; Build {self.revision}"

    def parse(self, argv: Sequence[str]) -> CommandOptions:
        """Parse the arguments (without the program name) and return the options."""
        args = prepare_arguments(argv)
        ns, unknown = self._parser.parse_known_intermixed_args(args)
        for arg in unknown:
            logger.error("Unknown option: %s", arg)

        opts = self.options
        task = opts.converter_task
        positional: list[str] = list(ns.scorefiles)
        scorefiles = [from_user_input_path(arg) for arg in positional]

        if ns.long_version:
            print(self.long_version())
            raise SystemExit(0)

        if ns.debug:
            opts.app.logger_level = LogLevel.DEBUG

        if ns.monitor_resolution is not None:
            dpi = _to_float(ns.monitor_resolution)
            if dpi is not None:
                opts.ui.physical_dots_per_inch = dpi
            else:
                logger.error(
                    "Option: -D not recognized DPI value: %s", ns.monitor_resolution
                )

        if ns.trim_image is not None:
            margin = _to_int(ns.trim_image)
            if margin is not None:
                opts.export_image.trim_margin_pixel_size = margin
            else:
                logger.error("Option: -T not recognized trim value: %s", ns.trim_image)

        if ns.midi_operations is not None:
            opts.import_midi.operations_file = from_user_input_path(ns.midi_operations)

        if ns.bitrate is not None:
            bitrate = _to_int(ns.bitrate)
            if bitrate is not None:
                opts.export_audio.mp3_bitrate = bitrate
            else:
                logger.error("Option: -b not recognized bitrate value: %s", ns.bitrate)

        if ns.template_mode:
            opts.notation.template_mode_enabled = True

        if ns.test_mode:
            opts.notation.test_mode_enabled = True

        if ns.session_type is not None:
            opts.startup.type = ns.session_type

        registration = opts.audio_plugin_registration
        if ns.register_audio_plugin is not None:
            opts.run_mode = RunMode.AUDIO_PLUGIN_REGISTRATION
            registration.plugin_path = from_user_input_path(ns.register_audio_plugin)
            registration.failed_plugin = False

        if ns.register_failed_audio_plugin is not None:
            opts.run_mode = RunMode.AUDIO_PLUGIN_REGISTRATION
            registration.plugin_path = from_user_input_path(
                ns.register_failed_audio_plugin
            )
            registration.failed_plugin = True
            if positional:
                code = _to_int(positional[0])
                registration.fail_code = code if code is not None else 0
            else:
                registration.fail_code = -1

        # Converter mode
        if ns.image_resolution is not None:
            dpi = _to_float(ns.image_resolution)
            if dpi is not None:
                opts.export_image.png_dpi_resolution = dpi
            else:
                logger.error(
                    "Option: -r not recognized DPI value: %s", ns.image_resolution
                )

        if ns.export_to is not None:
            opts.run_mode = RunMode.CONSOLE_APP
            task.type = ConvertType.FILE
            if not scorefiles:
                logger.error("Option: -o no input file specified")
            else:
                if len(scorefiles) > 1:
                    logger.warning(
                        "Option: -o multiple input files specified; "
                        "processing only the first one"
                    )
                task.input_file = scorefiles[0]
                task.output_file = from_user_input_path(ns.export_to)

        if ns.export_score_parts:
            if not task.output_file:
                logger.error("Option: -P no output file specified")
            else:
                task.type = ConvertType.CONVERT_SCORE_PARTS

        if ns.job is not None:
            opts.run_mode = RunMode.CONSOLE_APP
            task.type = ConvertType.BATCH
            task.input_file = from_user_input_path(ns.job)

        if ns.score_media:
            opts.run_mode = RunMode.CONSOLE_APP
            task.type = ConvertType.EXPORT_SCORE_MEDIA
            task.input_file = _first_score(scorefiles, "score-media")
            if ns.highlight_config is not None:
                task.params[ParamKey.HIGHLIGHT_CONFIG_PATH] = from_user_input_path(
                    ns.highlight_config
                )

        if ns.score_meta:
            opts.run_mode = RunMode.CONSOLE_APP
            task.type = ConvertType.EXPORT_SCORE_META
            task.input_file = _first_score(scorefiles, "score-meta")

        if ns.score_parts:
            opts.run_mode = RunMode.CONSOLE_APP
            task.type = ConvertType.EXPORT_SCORE_PARTS
            task.input_file = _first_score(scorefiles, "score-parts")

        if ns.score_parts_pdf:
            opts.run_mode = RunMode.CONSOLE_APP
            task.type = ConvertType.EXPORT_SCORE_PARTS_PDF
            task.input_file = _first_score(scorefiles, "score-parts-pdf")

        if ns.score_transpose is not None:
            opts.run_mode = RunMode.CONSOLE_APP
            task.type = ConvertType.EXPORT_SCORE_TRANSPOSE
            task.input_file = _first_score(scorefiles, "score-transpose")
            task.params[ParamKey.SCORE_TRANSPOSE_OPTIONS] = ns.score_transpose

        if ns.source_update:
            opts.run_mode = RunMode.CONSOLE_APP
            task.type = ConvertType.SOURCE_UPDATE
            task.input_file = from_user_input_path(
                _first_score(positional, "source-update")
            )
            if len(positional) >= 2:
                task.params[ParamKey.SCORE_SOURCE] = positional[1]
            else:
                logger.warning("Option: --source-update no source specified")

        # MusicXML
        if ns.musicxml_use_default_font:
            opts.import_music_xml.use_default_font = True

        if ns.musicxml_infer_text_type:
            opts.import_music_xml.infer_text_type = True

        if ns.factory_settings or ns.revert_settings:
            opts.app.revert_to_factory_settings = True

        if ns.force:
            task.params[ParamKey.FORCE_MODE] = True

        if ns.style is not None:
            task.params[ParamKey.STYLE_PATH] = from_user_input_path(ns.style)

        if ns.sound_profile is not None:
            task.params[ParamKey.SOUND_PROFILE] = ns.sound_profile

        if ns.gp_linked:
            opts.guitar_pro.linked_tab_staff_created = True

        if ns.gp_experimental:
            opts.guitar_pro.experimental = True

        if opts.run_mode is RunMode.CONSOLE_APP and ns.migration is not None:
            opts.project.full_migration = ns.migration == "full"

        # Diagnostic
        diagnostic = opts.diagnostic
        if ns.diagnostic_output is not None:
            diagnostic.output = ns.diagnostic_output

        if ns.diagnostic_gen_drawdata is not None:
            opts.run_mode = RunMode.CONSOLE_APP
            diagnostic.type = DiagnosticType.GEN_DRAW_DATA
            diagnostic.input.append(ns.diagnostic_gen_drawdata)

        if ns.diagnostic_com_drawdata:
            opts.run_mode = RunMode.CONSOLE_APP
            diagnostic.type = DiagnosticType.COM_DRAW_DATA
            diagnostic.input = list(scorefiles)

        if ns.diagnostic_drawdata_to_png is not None:
            opts.run_mode = RunMode.CONSOLE_APP
            diagnostic.type = DiagnosticType.DRAW_DATA_TO_PNG
            diagnostic.input.append(ns.diagnostic_drawdata_to_png)

        if ns.diagnostic_drawdiff_to_png:
            opts.run_mode = RunMode.CONSOLE_APP
            diagnostic.type = DiagnosticType.DRAW_DIFF_TO_PNG
            diagnostic.input = list(scorefiles)

        # Autobot
        autobot = opts.autobot
        if ns.test_case is not None:
            opts.run_mode = RunMode.CONSOLE_APP
            autobot.test_case_name_or_file = from_user_input_path(ns.test_case)

        if ns.test_case_context is not None:
            autobot.test_case_context_name_or_file = from_user_input_path(
                ns.test_case_context
            )

        if ns.test_case_context_value is not None:
            autobot.test_case_context_value = ns.test_case_context_value

        if ns.test_case_func is not None:
            autobot.test_case_func = ns.test_case_func

        if ns.test_case_func_args is not None:
            autobot.test_case_func_args = ns.test_case_func_args

        # Startup
        if opts.run_mode is RunMode.GUI_APP:
            if scorefiles:
                opts.startup.score_url = _url_from_user_input(scorefiles[0])
            if ns.score_display_name_override is not None:
                opts.startup.score_display_name_override = (
                    ns.score_display_name_override
                )

        return opts


def _jsonable(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.name
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            f.name: _jsonable(getattr(value, f.name)) for f in dataclasses.fields(value)
        }
    if isinstance(value, dict):
        return {
            (k.name if isinstance(k, Enum) else str(k)): _jsonable(v)
            for k, v in value.items()
        }
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    return value


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the command line and print the resulting options as JSON."""
    if argv is None:
        argv = sys.argv[1:]
    parser = CommandLineParser()
    try:
        options = parser.parse(argv)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    print(json.dumps(_jsonable(options), indent=2, sort_keys=True))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())