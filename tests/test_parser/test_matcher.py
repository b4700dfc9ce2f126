import pytest

from optable.exceptions import AmbiguousOptionError, ErrorKind, UnrecognizedOptionError
from optable.parser import OptionRegistry, match_long, match_short, opt_without_arg


def noop(*args):
    return None


@pytest.fixture
def registry():
    registry = OptionRegistry()
    registry.register_table(
        [
            opt_without_arg("foobar", "f", noop),
            opt_without_arg("foobaz", None, noop),
            opt_without_arg("verbose", "v", noop),
            opt_without_arg("ver", None, noop),
            opt_without_arg("quiet", "q", noop),
        ]
    )
    return registry


def test_exact_match(registry):
    assert match_long(registry, "quiet").long == "quiet"


def test_unique_prefix(registry):
    assert match_long(registry, "qu").long == "quiet"
    assert match_long(registry, "verb").long == "verbose"


def test_exact_match_beats_prefix(registry):
    assert match_long(registry, "ver").long == "ver"


@pytest.mark.parametrize("name", ["foo", "fooba", "f", "ve"])
def test_ambiguous_prefix(registry, name):
    with pytest.raises(AmbiguousOptionError) as exc_info:
        match_long(registry, name)
    error = exc_info.value
    assert error.kind is ErrorKind.AMBIGUOUS_OPTION
    assert error.option == f"--{name}"
    assert error.candidates == sorted(error.candidates)
    assert len(error.candidates) >= 2


def test_ambiguous_message_lists_candidates(registry):
    with pytest.raises(AmbiguousOptionError) as exc_info:
        match_long(registry, "foo")
    assert exc_info.value.candidates == ["--foobar", "--foobaz"]
    assert exc_info.value.message == (
        "option '--foo' is ambiguous; possibilities: '--foobar' '--foobaz'"
    )


def test_full_name_of_ambiguous_family(registry):
    assert match_long(registry, "foobar").long == "foobar"
    assert match_long(registry, "foobaz").long == "foobaz"


@pytest.mark.parametrize("name", ["nope", "quieter", ""])
def test_unrecognized_long(registry, name):
    with pytest.raises(UnrecognizedOptionError) as exc_info:
        match_long(registry, name)
    assert exc_info.value.kind is ErrorKind.UNRECOGNIZED_OPTION
    assert exc_info.value.message == f"unrecognized option '--{name}'"


def test_match_short(registry):
    assert match_short(registry, "v").long == "verbose"


def test_short_names_are_never_abbreviated(registry):
    with pytest.raises(UnrecognizedOptionError):
        match_short(registry, "b")


def test_unrecognized_short_message(registry):
    with pytest.raises(UnrecognizedOptionError) as exc_info:
        match_short(registry, "x")
    assert exc_info.value.message == "invalid option -- 'x'"
    assert exc_info.value.option == "-x"


def test_unrecognized_short_in_cluster_message(registry):
    with pytest.raises(UnrecognizedOptionError) as exc_info:
        match_short(registry, "x", "-vxq", 2)
    assert exc_info.value.message == "invalid option -- 'x' (character 2 of '-vxq')"
