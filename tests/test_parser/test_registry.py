import pytest

from optable.exceptions import OptionTableError
from optable.parser import (
    HIDDEN,
    Arity,
    Option,
    OptionRegistry,
    opt_subtable,
    opt_with_arg,
    opt_without_arg,
)
from optable.parser.registry import MAX_TABLE_DEPTH


def noop(*args):
    return None


def test_register_table_keeps_declaration_order():
    registry = OptionRegistry()
    inner = [opt_with_arg("timeout", "t", noop), opt_without_arg("retry", None, noop)]
    registry.register_table(
        [
            opt_without_arg("verbose", "v", noop),
            opt_subtable(inner, "Network options"),
            opt_without_arg("quiet", "q", noop),
        ]
    )
    assert registry.long_names() == ["verbose", "timeout", "retry", "quiet"]
    assert registry.short_names() == ["v", "t", "q"]
    assert len(registry) == 4


def test_lookup_by_name():
    registry = OptionRegistry()
    option = opt_with_arg("output", "o", noop)
    registry.register_table([option])
    assert registry.find_long("output") is option
    assert registry.find_short("o") is option
    assert registry.find_long("out") is None
    assert registry.find_short("x") is None
    assert "--output" in registry
    assert "-o" in registry
    assert "--out" not in registry
    assert "output" not in registry


def test_register_single_option():
    registry = OptionRegistry()
    registry.register("count", "c", Arity.HASARG, noop, None, "How many.")
    option = registry.find_long("count")
    assert option.arity is Arity.HASARG
    assert option.description == "How many."


def test_register_rejects_subtable_arity():
    registry = OptionRegistry()
    with pytest.raises(OptionTableError):
        registry.register(None, None, Arity.SUBTABLE, noop)


def test_duplicate_long_within_table():
    registry = OptionRegistry()
    with pytest.raises(OptionTableError, match="'--name' is already registered"):
        registry.register_table(
            [opt_without_arg("name", None, noop), opt_with_arg("name", "n", noop)]
        )
    assert len(registry) == 0


def test_duplicate_across_registrations_leaves_registry_unchanged():
    registry = OptionRegistry()
    registry.register_table([opt_without_arg("verbose", "v", noop)])
    with pytest.raises(OptionTableError, match="'-v' is already registered"):
        registry.register_table(
            [opt_without_arg("quiet", "q", noop), opt_without_arg("version", "v", noop)]
        )
    assert registry.long_names() == ["verbose"]
    assert registry.find_long("quiet") is None
    assert registry.find_short("q") is None


def test_duplicate_inside_subtable():
    registry = OptionRegistry()
    inner = [opt_without_arg("verbose", None, noop)]
    with pytest.raises(OptionTableError):
        registry.register_table(
            [opt_without_arg("verbose", "v", noop), opt_subtable(inner, "Inner")]
        )


def test_table_including_itself():
    registry = OptionRegistry()
    table = [opt_without_arg("x", None, noop)]
    table.append(opt_subtable(table, "Loop"))
    with pytest.raises(OptionTableError, match="includes itself"):
        registry.register_table(table)
    assert len(registry) == 0


def test_same_subtable_included_twice_conflicts():
    registry = OptionRegistry()
    shared = [opt_without_arg("shared", None, noop)]
    with pytest.raises(OptionTableError, match="already registered"):
        registry.register_table([opt_subtable(shared, "A"), opt_subtable(shared, "B")])


@pytest.mark.parametrize(
    "entry",
    [
        Option(arity=Arity.NOARG, callback=noop),
        opt_without_arg("--verbose", None, noop),
        opt_with_arg("name=value", None, noop),
        opt_with_arg("two words", None, noop),
        opt_without_arg(None, "vv", noop),
        opt_without_arg(None, "-", noop),
        opt_without_arg("verbose", None, "not callable"),
        opt_without_arg("verbose", None, None),
        Option(arity=Arity.SUBTABLE, description="No table"),
        Option(long="x", arity=Arity.SUBTABLE, callback=noop, table=[]),
        Option(long="x", arity="hasarg", callback=noop),
    ],
)
def test_malformed_entries(entry):
    registry = OptionRegistry()
    with pytest.raises(OptionTableError):
        registry.register_table([entry])
    assert len(registry) == 0


@pytest.mark.parametrize("table", ["--verbose", None, 42, [("verbose", "v")]])
def test_malformed_tables(table):
    registry = OptionRegistry()
    with pytest.raises(OptionTableError):
        registry.register_table(table)


def test_empty_table_registers_nothing():
    registry = OptionRegistry()
    registry.register_table([])
    assert len(registry) == 0


def test_groups_track_nesting_and_visibility():
    registry = OptionRegistry()
    innermost = [opt_without_arg("deep", None, noop, None, "Deep.")]
    hidden = [
        opt_without_arg("secret", None, noop, None, "Secret."),
        opt_subtable(innermost, "Innermost"),
    ]
    registry.register_table(
        [
            opt_without_arg("plain", None, noop, None, "Plain."),
            opt_without_arg("quiet", None, noop, None, HIDDEN),
            opt_subtable(hidden, HIDDEN),
        ],
        "General",
    )
    entries = {entry.option.long: entry for entry in registry}
    assert entries["plain"].group.heading == "General"
    assert entries["plain"].group.depth == 0
    assert not entries["plain"].hidden
    assert entries["quiet"].hidden
    assert entries["secret"].hidden
    assert entries["secret"].group.depth == 1
    assert entries["deep"].hidden
    assert entries["deep"].group.depth == 2
    assert [group.heading for group in entries["deep"].group.lineage()] == [
        "General",
        HIDDEN,
        "Innermost",
    ]


def test_clear_and_str():
    registry = OptionRegistry()
    registry.register_table([opt_without_arg("verbose", "v", noop)])
    assert str(registry) == "OptionRegistry(options=1, long=1, short=1)"
    registry.clear()
    assert len(registry) == 0
    assert registry.find_long("verbose") is None
    registry.register_table([opt_without_arg("verbose", "v", noop)])
    assert len(registry) == 1


def nested_table(levels):
    table = [opt_without_arg("leaf", None, noop, None, "Leaf.")]
    for _ in range(levels):
        table = [opt_subtable(table, None)]
    return table


def test_deep_nesting_within_limit():
    registry = OptionRegistry()
    registry.register_table(nested_table(MAX_TABLE_DEPTH - 1))
    entry = next(iter(registry))
    assert entry.option.long == "leaf"
    assert entry.group.depth == MAX_TABLE_DEPTH - 1


@pytest.mark.parametrize("levels", [MAX_TABLE_DEPTH, 3000])
def test_nesting_beyond_limit(levels):
    registry = OptionRegistry()
    with pytest.raises(OptionTableError, match="nested more than"):
        registry.register_table(nested_table(levels))
    assert len(registry) == 0
