import pytest

from optable import HIDDEN, Arity, OptionParser, OptionsManager
from optable.config import import_callback, load_table
from optable.exceptions import OptionTableError
from optable.helpers import inc_int, set_str

YAML_TABLE = """
description: General options
options:
  - long: verbose
    short: v
    arity: flag
    callback: optable.helpers.inc_int
    target: verbose
    default: 0
    description: More output.
  - long: version
    callback: optable.helpers.show_version_and_exit
    context: "demo 1.0"
    description: Print the version and exit.
  - description: Network options
    options:
      - long: host
        arity: value
        callback: optable.helpers.set_str
        target: host
        default: localhost
        description: Server to connect to.
  - hidden: true
    options:
      - long: debug-protocol
        callback: optable.helpers.set_bool
        target: debug_protocol
        default: false
"""

TOML_TABLE = """
description = "Counting"

[[options]]
long = "count"
short = "c"
arity = "hasarg"
callback = "optable.helpers.set_int"
target = "count"
default = 1
description = "How many."
"""


def write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text, encoding="UTF-8")
    return path


def test_load_yaml_table(tmp_path):
    options = OptionsManager()
    table, heading = load_table(write(tmp_path, "table.yaml", YAML_TABLE), options)
    assert heading == "General options"
    assert [entry.long for entry in table] == ["verbose", "version", None, None]

    verbose, version, network, hidden = table
    assert verbose.arity is Arity.NOARG
    assert verbose.callback is inc_int
    assert verbose.context.get() == 0
    assert version.context == "demo 1.0"
    assert network.is_subtable
    assert network.description == "Network options"
    assert network.table[0].arity is Arity.HASARG
    assert network.table[0].callback is set_str
    assert hidden.is_subtable
    assert hidden.description is HIDDEN
    assert options.get("host") == "localhost"


def test_loaded_table_parses(tmp_path):
    options = OptionsManager()
    table, heading = load_table(write(tmp_path, "table.yml", YAML_TABLE), options)
    parser = OptionParser(program="demo")
    parser.register_table(table, heading)
    outcome = parser.parse(
        ["demo", "-vv", "--host", "example.com", "--debug-protocol", "file"],
        lambda message: None,
    )
    assert outcome.positional == ["file"]
    assert options.get_namespace_dict() == {
        "verbose": 2,
        "host": "example.com",
        "debug_protocol": True,
    }
    assert "--debug-protocol" not in parser.usage()
    assert "Network options:" in parser.usage()


def test_load_toml_table(tmp_path):
    options = OptionsManager()
    table, heading = load_table(write(tmp_path, "table.toml", TOML_TABLE), options)
    assert heading == "Counting"
    parser = OptionParser()
    parser.register_table(table, heading)
    assert parser.parse(["prog", "-c", "0x10"], lambda message: None).ok
    assert options.get("count") == 16


def test_top_level_list(tmp_path):
    text = "- long: quiet\n  callback: optable.helpers.set_bool\n  target: quiet\n"
    table, heading = load_table(write(tmp_path, "list.yaml", text))
    assert heading is None
    assert table[0].long == "quiet"


def test_empty_file(tmp_path):
    assert load_table(write(tmp_path, "empty.yaml", "")) == ([], None)


@pytest.mark.parametrize(
    "text",
    [
        "options:\n  - long: quiet\n",
        "options:\n  - long: quiet\n    callback: optable.helpers.set_bool\n"
        "    arity: sometimes\n",
        "options:\n  - long: quiet\n    short: qq\n    callback: optable.helpers.set_bool\n",
        "options:\n  - long: quiet\n    callback: optable.helpers.set_bool\n"
        "    target: quiet\n    context: 1\n",
        "options:\n  - long: group\n    options: []\n",
        "options:\n  - arity: subtable\n    description: Nothing inside\n",
        "options:\n  - long: quiet\n    callback: optable.helpers.no_such_helper\n",
        "options:\n  - long: quiet\n    callback: no_such_module.helper\n",
        "options:\n  - long: quiet\n    callback: set_bool\n",
        "options:\n  - long: quiet\n    callback: optable.helpers.INT_MAX\n",
        "options: [unclosed\n",
    ],
)
def test_invalid_tables(tmp_path, text):
    with pytest.raises(OptionTableError):
        load_table(write(tmp_path, "bad.yaml", text))


def test_unsupported_suffix(tmp_path):
    with pytest.raises(OptionTableError, match="Unsupported option table format"):
        load_table(write(tmp_path, "table.json", "{}"))


def test_missing_file(tmp_path):
    with pytest.raises(OptionTableError, match="Could not read option table"):
        load_table(tmp_path / "missing.yaml")


def test_invalid_toml(tmp_path):
    with pytest.raises(OptionTableError):
        load_table(write(tmp_path, "bad.toml", "options = [\n"))


def test_import_callback():
    assert import_callback("optable.helpers.set_str") is set_str
    with pytest.raises(OptionTableError, match="Invalid callback path"):
        import_callback("set_str")
