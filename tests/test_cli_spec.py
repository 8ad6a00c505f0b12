import pytest

from orchestrion.cli_spec import OPTIONS, OptionSpec, build_parser, prepare_arguments


@pytest.fixture
def parser():
    return build_parser("1.0")


def test_option_spec_flags_and_dest():
    spec = OptionSpec(("D", "monitor-resolution"), "Specify monitor resolution", "DPI")
    assert spec.flags == ["-D", "--monitor-resolution"]
    assert spec.dest == "monitor_resolution"
    assert spec.takes_value


def test_flag_option_does_not_take_value():
    spec = OptionSpec(("d", "debug"), "Debug mode")
    assert not spec.takes_value
    assert spec.dest == "debug"


def test_every_option_has_its_own_dest_in_parser(parser):
    dests = [spec.dest for spec in OPTIONS]
    assert len(dests) == len(set(dests))
    parsed = vars(parser.parse_args([]))
    missing = [dest for dest in dests if dest not in parsed]
    assert missing == []


def test_positional_scorefiles(parser):
    ns = parser.parse_args(["a.mscz", "b.mscz"])
    assert ns.scorefiles == ["a.mscz", "b.mscz"]


def test_no_arguments_gives_defaults(parser):
    ns = parser.parse_args([])
    assert ns.scorefiles == []
    assert ns.debug is False
    assert ns.monitor_resolution is None


def test_short_and_long_names_share_dest(parser):
    assert parser.parse_args(["-D", "96"]).monitor_resolution == "96"
    assert parser.parse_args(["--monitor-resolution", "96"]).monitor_resolution == "96"


def test_flags_are_set(parser):
    ns = parser.parse_args(["-d", "--template-mode", "-t", "--gp-linked"])
    assert ns.debug is True
    assert ns.template_mode is True
    assert ns.test_mode is True
    assert ns.gp_linked is True
    assert ns.gp_experimental is False


def test_value_options(parser):
    ns = parser.parse_args(
        ["-o", "out.pdf", "--score-transpose", "opts", "in.mscz", "-S", "s.mss"]
    )
    assert ns.export_to == "out.pdf"
    assert ns.score_transpose == "opts"
    assert ns.style == "s.mss"
    assert ns.scorefiles == ["in.mscz"]


def test_last_value_wins(parser):
    ns = parser.parse_args(["-b", "128", "-b", "320"])
    assert ns.bitrate == "320"


def test_no_abbreviations(parser):
    with pytest.raises(SystemExit):
        parser.parse_args(["--score-par"])


def test_version_option(parser, capsys):
    with pytest.raises(SystemExit) as info:
        parser.parse_args(["--version"])
    assert info.value.code == 0
    assert "Orchestrion 1.0" in capsys.readouterr().out


def test_help_hides_internal_option(parser, capsys):
    with pytest.raises(SystemExit):
        parser.parse_args(["-?"])
    out = capsys.readouterr().out
    assert "--long-version" in out
    assert "score-display-name-override" not in out


def test_hidden_option_still_parses(parser):
    ns = parser.parse_args(["--score-display-name-override", "My Score"])
    assert ns.score_display_name_override == "My Score"


def test_prepare_arguments_drops_debugger_args():
    args = ["prog", "-qmljsdebugger=port:1234", "score.mscz", "-d"]
    assert prepare_arguments(args) == ["prog", "score.mscz", "-d"]


def test_prepare_arguments_keeps_others():
    args = ["prog", "-o", "x.pdf"]
    assert prepare_arguments(iter(args)) == args