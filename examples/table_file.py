"""
Load the option table from options.yaml and parse the command line with it.

    python examples/table_file.py --host example.com --time 2.5 file.txt
"""
import sys
from pathlib import Path

from optable import OptionParser, OptionsManager
from optable.config import load_table
from optable.utils import setup_logging


def main() -> int:
    setup_logging(mode="cli", log_filename=None)
    options = OptionsManager()
    table, heading = load_table(Path(__file__).parent / "options.yaml", options)

    parser = OptionParser(program="table-demo")
    parser.register_table(table, heading)

    outcome = parser.parse(sys.argv)
    if not outcome:
        parser.render_usage(extra="[options] FILE...")
        return 1

    print(options.get_namespace_dict())
    print(outcome.positional)
    return 0


if __name__ == "__main__":
    sys.exit(main())
