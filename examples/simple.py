"""
Minimal program using the process-wide option registry.

    python examples/simple.py -vv --name=World --count 3 extra args
"""
import sys

from optable import OptionsManager, api, opt_subtable, opt_with_arg, opt_without_arg
from optable.helpers import append, inc_int, set_int, set_str, show_version_and_exit

options = OptionsManager()
tags: list[str] = []

greeting_table = [
    opt_with_arg("name", "n", set_str, options.ref("name", "you"), "Who to greet."),
    opt_with_arg("count", "c", set_int, options.ref("count", 1), "How many times."),
    opt_with_arg("tag", "t", append, tags, "Add a tag (repeatable)."),
]

table = [
    opt_without_arg("verbose", "v", inc_int, options.ref("verbose", 0),
                    "More output (repeatable)."),
    opt_without_arg("version", None, show_version_and_exit, "simple 1.0",
                    "Print the version and exit."),
    opt_without_arg("help", "h", api.usage_and_exit,
                    "[options] [ARGS...]\nA silly greeting program.",
                    "Print this message."),
    opt_subtable(greeting_table, "Greeting options"),
]


def main() -> int:
    api.register_table(table)
    argv = list(sys.argv)
    if not api.parse_argv(argv):
        print(api.usage(), end="", file=sys.stderr)
        return 1

    for _ in range(options.get("count")):
        print(f"Hello, {options.get('name')}!")
    if options.get("verbose"):
        print(f"tags={tags} positional={argv[1:]}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
