"""Options gathered from the command line, grouped by the part of the app they affect."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any


class RunMode(Enum):
    """How the application runs."""

    GUI_APP = auto()
    CONSOLE_APP = auto()
    AUDIO_PLUGIN_REGISTRATION = auto()


class ConvertType(Enum):
    """Kind of conversion job requested in console mode."""

    FILE = auto()
    BATCH = auto()
    CONVERT_SCORE_PARTS = auto()
    EXPORT_SCORE_MEDIA = auto()
    EXPORT_SCORE_META = auto()
    EXPORT_SCORE_PARTS = auto()
    EXPORT_SCORE_PARTS_PDF = auto()
    EXPORT_SCORE_TRANSPOSE = auto()
    SOURCE_UPDATE = auto()
    EXPORT_SCORE_VIDEO = auto()


class DiagnosticType(Enum):
    """Kind of diagnostic task."""

    UNDEFINED = 0
    GEN_DRAW_DATA = 1
    COM_DRAW_DATA = 2
    DRAW_DATA_TO_PNG = 3
    DRAW_DIFF_TO_PNG = 4


class ParamKey(Enum):
    """Keys of the extra parameters attached to a converter task."""

    HIGHLIGHT_CONFIG_PATH = auto()
    STYLE_PATH = auto()
    SCORE_SOURCE = auto()
    SCORE_TRANSPOSE_OPTIONS = auto()
    FORCE_MODE = auto()
    SOUND_PROFILE = auto()


class LogLevel(Enum):
    """Logger verbosity."""

    OFF = 0
    NORMAL = 1
    DEBUG = 2
    FULL = 3


@dataclass
class UiOptions:
    physical_dots_per_inch: float | None = None


@dataclass
class NotationOptions:
    template_mode_enabled: bool | None = None
    test_mode_enabled: bool | None = None


@dataclass
class ProjectOptions:
    full_migration: bool | None = None


@dataclass
class ExportImageOptions:
    trim_margin_pixel_size: int | None = None
    png_dpi_resolution: float | None = None


@dataclass
class ExportAudioOptions:
    mp3_bitrate: int | None = None


@dataclass
class ExportVideoOptions:
    resolution: str | None = None
    fps: int | None = None
    leading_sec: float | None = None
    trailing_sec: float | None = None


@dataclass
class ImportMidiOptions:
    operations_file: str | None = None


@dataclass
class ImportMusicXmlOptions:
    use_default_font: bool | None = None
    infer_text_type: bool | None = None


@dataclass
class GuitarProOptions:
    linked_tab_staff_created: bool | None = None
    experimental: bool | None = None


@dataclass
class AppOptions:
    revert_to_factory_settings: bool | None = None
    logger_level: LogLevel | None = None


@dataclass
class StartupOptions:
    type: str | None = None
    score_url: str | None = None
    score_display_name_override: str | None = None


@dataclass
class ConverterTask:
    type: ConvertType = ConvertType.FILE
    input_file: str = ""
    output_file: str = ""
    params: dict[ParamKey, Any] = field(default_factory=dict)


@dataclass
class Diagnostic:
    type: DiagnosticType = DiagnosticType.UNDEFINED
    input: list[str] = field(default_factory=list)
    output: str = ""


@dataclass
class Autobot:
    test_case_name_or_file: str = ""
    test_case_context_name_or_file: str = ""
    test_case_context_value: str = ""
    test_case_func: str = ""
    test_case_func_args: str = ""


@dataclass
class AudioPluginRegistration:
    plugin_path: str = ""
    failed_plugin: bool = False
    fail_code: int = 0


@dataclass
class CommandOptions:
    """Everything the command line can set."""

    run_mode: RunMode = RunMode.GUI_APP
    ui: UiOptions = field(default_factory=UiOptions)
    notation: NotationOptions = field(default_factory=NotationOptions)
    project: ProjectOptions = field(default_factory=ProjectOptions)
    export_image: ExportImageOptions = field(default_factory=ExportImageOptions)
    export_audio: ExportAudioOptions = field(default_factory=ExportAudioOptions)
    export_video: ExportVideoOptions = field(default_factory=ExportVideoOptions)
    import_midi: ImportMidiOptions = field(default_factory=ImportMidiOptions)
    import_music_xml: ImportMusicXmlOptions = field(
        default_factory=ImportMusicXmlOptions
    )
    guitar_pro: GuitarProOptions = field(default_factory=GuitarProOptions)
    app: AppOptions = field(default_factory=AppOptions)
    startup: StartupOptions = field(default_factory=StartupOptions)
    converter_task: ConverterTask = field(default_factory=ConverterTask)
    diagnostic: Diagnostic = field(default_factory=Diagnostic)
    autobot: Autobot = field(default_factory=Autobot)
    audio_plugin_registration: AudioPluginRegistration = field(
        default_factory=AudioPluginRegistration
    )