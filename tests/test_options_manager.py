from argparse import Namespace

import pytest

from optable import OptionRef, OptionsManager


def test_ref_initialises_default():
    options = OptionsManager()
    ref = options.ref("count", 3)
    assert isinstance(ref, OptionRef)
    assert ref.get() == 3
    assert options.has_option("count")


def test_ref_keeps_existing_value():
    options = OptionsManager()
    options.set("count", 7)
    ref = options.ref("count", 3)
    assert ref.get() == 7


def test_ref_set_updates_manager():
    options = OptionsManager()
    ref = options.ref("name")
    ref.set("bob")
    assert options.get("name") == "bob"
    assert repr(ref) == "OptionRef(cli_args.name='bob')"


def test_namespaces_are_separate():
    options = OptionsManager()
    options.ref("level", "info", namespace_name="defaults")
    options.set("level", "debug")
    assert options.get("level", namespace_name="defaults") == "info"
    assert options.get("level") == "debug"
    assert options.get("missing", "fallback") == "fallback"


def test_from_namespace():
    options = OptionsManager([("cli_args", Namespace(verbose=True))])
    assert options.get("verbose") is True
    options.from_namespace(Namespace(verbose=False), "saved")
    assert options.get_namespace_dict("saved") == {"verbose": False}


def test_get_namespace_dict_unknown():
    with pytest.raises(ValueError, match="Namespace 'nope' not found"):
        OptionsManager().get_namespace_dict("nope")
