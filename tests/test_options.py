from orchestrion.options import (
    AudioPluginRegistration,
    CommandOptions,
    ConvertType,
    ConverterTask,
    Diagnostic,
    DiagnosticType,
    LogLevel,
    ParamKey,
    RunMode,
)


def test_default_run_mode_is_gui():
    assert CommandOptions().run_mode is RunMode.GUI_APP


def test_converter_task_defaults():
    task = CommandOptions().converter_task
    assert task.type is ConvertType.FILE
    assert task.input_file == ""
    assert task.output_file == ""
    assert task.params == {}


def test_diagnostic_defaults():
    diag = Diagnostic()
    assert diag.type is DiagnosticType.UNDEFINED
    assert diag.type.value == 0
    assert diag.input == []
    assert diag.output == ""


def test_audio_plugin_registration_defaults():
    reg = AudioPluginRegistration()
    assert reg.plugin_path == ""
    assert reg.failed_plugin is False
    assert reg.fail_code == 0


def test_optional_fields_unset_by_default():
    opts = CommandOptions()
    assert opts.ui.physical_dots_per_inch is None
    assert opts.export_audio.mp3_bitrate is None
    assert opts.app.logger_level is None
    assert opts.startup.score_url is None
    assert opts.project.full_migration is None


def test_mutable_defaults_are_not_shared():
    first = CommandOptions()
    second = CommandOptions()
    first.diagnostic.input.append("scores")
    first.converter_task.params[ParamKey.FORCE_MODE] = True
    assert second.diagnostic.input == []
    assert second.converter_task.params == {}


def test_params_keyed_by_param_key():
    task = ConverterTask()
    task.params[ParamKey.STYLE_PATH] = "style.mss"
    assert task.params[ParamKey.STYLE_PATH] == "style.mss"
    assert ParamKey.SOUND_PROFILE not in task.params


def test_convert_type_order_starts_with_default():
    task = ConverterTask()
    members = list(ConvertType)
    assert members[0] is task.type
    assert [t.name for t in members] == [
        "FILE",
        "BATCH",
        "CONVERT_SCORE_PARTS",
        "EXPORT_SCORE_MEDIA",
        "EXPORT_SCORE_META",
        "EXPORT_SCORE_PARTS",
        "EXPORT_SCORE_PARTS_PDF",
        "EXPORT_SCORE_TRANSPOSE",
        "SOURCE_UPDATE",
        "EXPORT_SCORE_VIDEO",
    ]


def test_log_level_debug_is_distinct_from_normal():
    assert LogLevel.DEBUG != LogLevel.NORMAL
    opts = CommandOptions()
    opts.app.logger_level = LogLevel.DEBUG
    assert opts.app.logger_level is LogLevel.DEBUG


def test_equality_follows_field_values():
    default = CommandOptions()
    changed = CommandOptions()
    changed.notation.test_mode_enabled = True
    assert default == CommandOptions()
    assert (default == changed) is False
    assert default.notation.test_mode_enabled is None
    assert changed.notation.test_mode_enabled is True