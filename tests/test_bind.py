import dataclasses

import pytest

from backup_tool.config import ParsedConfig, bind
from backup_tool.cursor import TokenCursor
from backup_tool.errors import ArgumentError, MissingOperand, UnrecognizedOption
from backup_tool.tokens import LongOption, Positional, ShortOption


def test_defaults():
    cfg = ParsedConfig()
    assert cfg == ParsedConfig(filename="", show_help=False, truncate=False)


def test_config_is_frozen():
    cfg = ParsedConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.truncate = True


def test_short_truncate_with_filename():
    cfg = bind([ShortOption("t"), Positional("a.txt")])
    assert cfg == ParsedConfig(filename="a.txt", show_help=False, truncate=True)


@pytest.mark.parametrize("dashes", [2, 3])
def test_long_truncate_any_dash_count(dashes):
    cfg = bind([LongOption("truncate", dashes), Positional("a.txt")])
    assert cfg.truncate is True


def test_help_suppresses_unrecognized_option():
    cfg = bind([LongOption("help", 2), ShortOption("z")])
    assert cfg.show_help is True
    assert cfg.filename == ""


def test_help_after_unknown_option_still_wins():
    cfg = bind([LongOption("bogus", 2), LongOption("help", 2)])
    assert cfg.show_help is True


def test_help_keeps_filename_when_given():
    cfg = bind([Positional("a.txt"), LongOption("help", 2)])
    assert cfg == ParsedConfig(filename="a.txt", show_help=True, truncate=False)


def test_unknown_short_option():
    with pytest.raises(UnrecognizedOption) as exc:
        bind([ShortOption("z")])
    assert str(exc.value) == "invalid option -- z"
    assert exc.value.is_short is True
    assert exc.value.kind == "UnrecognizedOption"


def test_unknown_long_option():
    with pytest.raises(UnrecognizedOption) as exc:
        bind([LongOption("bogus", 2)])
    assert str(exc.value) == "unrecognized option 'bogus'"
    assert exc.value.is_short is False


def test_first_unknown_option_is_reported():
    with pytest.raises(UnrecognizedOption) as exc:
        bind([Positional("a"), ShortOption("x"), LongOption("bogus", 2), ShortOption("y")])
    assert exc.value.option == ShortOption("x")


def test_unknown_option_reported_before_missing_operand():
    with pytest.raises(UnrecognizedOption):
        bind([LongOption("bogus", 2)])


def test_help_short_form_is_not_recognized():
    with pytest.raises(UnrecognizedOption) as exc:
        bind([ShortOption("h"), Positional("a")])
    assert str(exc.value) == "invalid option -- h"


def test_missing_operand():
    with pytest.raises(MissingOperand) as exc:
        bind([])
    assert str(exc.value) == "missing file operand"
    assert isinstance(exc.value, ArgumentError)


def test_missing_operand_with_truncate_only():
    with pytest.raises(MissingOperand):
        bind([ShortOption("t")])


def test_extra_operands_ignored():
    cfg = bind([Positional("first"), Positional("second"), Positional("third")])
    assert cfg.filename == "first"


def test_bind_is_repeatable():
    tokens = [ShortOption("t"), Positional("a.txt"), Positional("b.txt")]
    assert bind(tokens) == bind(tokens)

    bad = [ShortOption("z")]
    msgs = []
    for _ in range(2):
        with pytest.raises(UnrecognizedOption) as exc:
            bind(bad)
        msgs.append(str(exc.value))
    assert msgs == ["invalid option -- z", "invalid option -- z"]


def test_bind_rewinds_a_consumed_cursor():
    cur = TokenCursor([ShortOption("t"), Positional("a.txt")])
    first = bind(cur)
    assert cur.position == 2
    assert bind(cur) == first


def test_unrecognized_option_requires_an_option():
    with pytest.raises(TypeError):
        UnrecognizedOption(Positional("a.txt"))
