import pytest

from voxutil.cli_args import (
    Argument,
    ArgumentParser,
    HelpRequested,
    VersionRequested,
)
from voxutil.cli_values import DefaultArguments


def make_parser():
    return ArgumentParser("test")


def test_positional_value():
    parser = make_parser()
    parser.add_argument("input")
    parser.parse_args(["test", "file.txt"])
    assert parser.get("input") == "file.txt"
    assert parser.is_used("input") is True


def test_optional_scanned_int():
    parser = make_parser()
    parser.add_argument("--count").scan("d", int)
    parser.parse_args(["test", "--count", "42"])
    assert parser.get("count", int) == 42


def test_default_value_unused():
    parser = make_parser()
    parser.add_argument("--level").default_value(3)
    parser.parse_args(["test"])
    assert parser.get("--level") == 3
    assert parser.is_used("--level") is False


def test_implicit_flag():
    parser = make_parser()
    parser.add_argument("--verbose").default_value(False).implicit_value(True)
    parser.parse_args(["test", "--verbose"])
    assert parser.get("verbose") is True


def test_compound_short_flags():
    parser = make_parser()
    parser.add_argument("-a").default_value(False).implicit_value(True)
    parser.add_argument("-b").default_value(False).implicit_value(True)
    parser.parse_args(["test", "-ab"])
    assert parser.get("-a") is True
    assert parser.get("-b") is True


def test_unknown_argument():
    parser = make_parser()
    with pytest.raises(RuntimeError, match="Unknown argument: --nope"):
        parser.parse_args(["test", "--nope"])


def test_unknown_in_compound():
    parser = make_parser()
    parser.add_argument("-a").default_value(False).implicit_value(True)
    with pytest.raises(RuntimeError, match="Unknown argument: -az"):
        parser.parse_args(["test", "-az"])


def test_too_many_positionals():
    parser = make_parser()
    parser.add_argument("one")
    with pytest.raises(RuntimeError, match="Maximum number of positional arguments exceeded"):
        parser.parse_args(["test", "a", "b"])


def test_required_missing():
    parser = make_parser()
    parser.add_argument("--name", "-n").required()
    with pytest.raises(RuntimeError, match="-n: required."):
        parser.parse_args(["test"])


def test_duplicate_argument():
    parser = make_parser()
    parser.add_argument("--name")
    with pytest.raises(RuntimeError, match="Duplicate argument"):
        parser.parse_args(["test", "--name", "a", "--name", "b"])


def test_append_collects():
    parser = make_parser()
    parser.add_argument("--file").append()
    parser.parse_args(["test", "--file", "a", "--file", "b"])
    assert parser.get("--file", list) == ["a", "b"]


def test_nargs_two_positional():
    parser = make_parser()
    parser.add_argument("pair").nargs(2)
    parser.parse_args(["test", "x", "y"])
    assert parser.get("pair", list) == ["x", "y"]


def test_too_few_arguments():
    parser = make_parser()
    parser.add_argument("--pair").nargs(2)
    with pytest.raises(RuntimeError, match="Too few arguments for '--pair'."):
        parser.parse_args(["test", "--pair", "x"])


def test_optional_in_parameter_sequence():
    parser = make_parser()
    parser.add_argument("--pair").nargs(2)
    with pytest.raises(RuntimeError, match="optional argument in parameter sequence"):
        parser.parse_args(["test", "--pair", "1", "--x"])


def test_remaining_takes_rest():
    parser = make_parser()
    parser.add_argument("--rest").remaining()
    parser.parse_args(["test", "--rest", "a", "b", "c"])
    assert parser.get("rest", list) == ["a", "b", "c"]


def test_negative_nargs():
    with pytest.raises(ValueError, match="non-negative"):
        Argument("--x").nargs(-1)


def test_negative_number_value_and_hex():
    parser = make_parser()
    parser.add_argument("--offset").scan("i", int)
    parser.add_argument("--mask").scan("i", int)
    parser.parse_args(["test", "--offset", "-5", "--mask", "0x1F"])
    assert parser.get("offset", int) == -5
    assert parser.get("mask", int) == 0x1F


def test_unsigned_rejects_negative():
    parser = make_parser()
    parser.add_argument("--n").scan("u", int)
    with pytest.raises(ValueError):
        parser.parse_args(["test", "--n", "-3"])


def test_float_scans():
    parser = make_parser()
    parser.add_argument("--g").scan("g", float)
    parser.parse_args(["test", "--g", "2.5"])
    assert parser.get("g", float) == 2.5

    strict = make_parser()
    strict.add_argument("--e").scan("e", float)
    with pytest.raises(ValueError, match="requires exponent part"):
        strict.parse_args(["test", "--e", "2.5"])


def test_scan_unsupported():
    with pytest.raises(TypeError):
        Argument("--x").scan("f", int)


def test_help_requested():
    parser = ArgumentParser("prog")
    with pytest.raises(HelpRequested) as info:
        parser.parse_args(["prog", "-h"])
    assert info.value.text.startswith("Usage: prog [options] ")
    assert "shows help message and exits" in info.value.text
    assert info.value.code == 0


def test_version_requested():
    parser = ArgumentParser("prog")
    with pytest.raises(VersionRequested) as info:
        parser.parse_args(["prog", "--version"])
    assert info.value.text == "1.0"


def test_no_default_arguments():
    parser = ArgumentParser("prog", "1.0", DefaultArguments.NONE)
    with pytest.raises(KeyError) as info:
        parser["--help"]
    assert "No such argument: --help" in str(info.value)
    with pytest.raises(RuntimeError, match="Unknown argument: -h"):
        parser.parse_args(["prog", "-h"])


def test_get_before_parse():
    parser = make_parser()
    parser.add_argument("--x").default_value(1)
    with pytest.raises(ValueError, match="Nothing parsed"):
        parser.get("--x")


def test_present():
    parser = make_parser()
    parser.add_argument("--opt")
    parser.add_argument("--dflt").default_value("d")
    parser.parse_args(["test"])
    assert parser.present("opt") is None
    with pytest.raises(ValueError, match="always presents"):
        parser.present("dflt")


def test_wrong_kind():
    parser = make_parser()
    parser.add_argument("--x")
    parser.parse_args(["test", "--x", "word"])
    with pytest.raises(TypeError):
        parser.get("--x", int)


def test_missing_argument_lookup():
    parser = make_parser()
    parser.add_argument("--foo").help("h")
    assert parser["foo"].format(0) == "--foo \th\n"
    with pytest.raises(KeyError) as info:
        parser["missing"]
    assert "No such argument: missing" in str(info.value)


def test_argument_format():
    assert Argument("--foo").help("bar").format(0) == "--foo \tbar\n"
    assert Argument("--n").default_value(True).format(0) == "--n \t[default: true]\n"
    assert Argument("--r").required().format(0) == "--r \t[required]\n"


def test_names_sorted_shortest_first():
    assert Argument("--verbose", "-v").format(0).startswith("-v --verbose ")


def test_arguments_length():
    assert Argument("-f", "--foo").get_arguments_length() == 9


def test_add_parents():
    parent = ArgumentParser("parent", "1.0", DefaultArguments.NONE)
    parent.add_argument("--shared").default_value("base")
    child = make_parser()
    child.add_parents(parent)
    child.parse_args(["test", "--shared", "over"])
    assert child.get("shared") == "over"
    assert parent["--shared"].is_used is False


def test_help_description_and_epilog():
    parser = ArgumentParser("prog")
    parser.add_argument("src")
    parser.add_description("DESC").add_epilog("EPI")
    text = str(parser)
    assert text.startswith("Usage: prog [options] src \n\nDESC\n\n")
    assert "Positional arguments:\n" in text
    assert "\nOptional arguments:\n" in text
    assert text.endswith("EPI\n\n")


def test_program_name_from_arguments():
    parser = ArgumentParser()
    parser.parse_args(["myprog"])
    assert parser.help().startswith("Usage: myprog [options] ")


def test_missing_positional():
    parser = make_parser()
    parser.add_argument("src")
    with pytest.raises(RuntimeError, match="1 argument\\(s\\) expected. 0 provided."):
        parser.parse_args(["test"])


def test_action_with_bound_argument():
    parser = make_parser()
    parser.add_argument("--x").action(lambda prefix, s: prefix + s, "pre-")
    parser.parse_args(["test", "--x", "val"])
    assert parser.get("x") == "pre-val"


def test_void_action():
    collected = []
    parser = make_parser()
    parser.add_argument("--tag").action(collected.append)
    parser.parse_args(["test", "--tag", "x"])
    assert collected == ["x"]
    assert parser.present("tag") is None