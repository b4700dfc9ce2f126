import pytest

from optable.parser import Arity


@pytest.mark.parametrize(
    "value, expected",
    [
        ("noarg", Arity.NOARG),
        ("hasarg", Arity.HASARG),
        ("subtable", Arity.SUBTABLE),
        ("flag", Arity.NOARG),
        ("none", Arity.NOARG),
        ("arg", Arity.HASARG),
        ("value", Arity.HASARG),
        ("table", Arity.SUBTABLE),
        (" HasArg ", Arity.HASARG),
        ("no_arg", Arity.NOARG),
        ("has_arg", Arity.HASARG),
    ],
)
def test_arity_aliases(value, expected):
    assert Arity(value) is expected


@pytest.mark.parametrize("value", ["optional", "", 3, None])
def test_arity_invalid(value):
    with pytest.raises(ValueError):
        Arity(value)


def test_arity_properties():
    assert Arity.HASARG.takes_argument
    assert not Arity.NOARG.takes_argument
    assert not Arity.SUBTABLE.takes_argument
    assert str(Arity.NOARG) == "noarg"
    assert Arity.choices() == [Arity.NOARG, Arity.HASARG, Arity.SUBTABLE]
