"""subcommands.py"""

import sys

from argwalk import ArgCursor, OptionParser, OptionTable
from argwalk.exceptions import ArgumentParseError

defines: dict[str, str] = {}


def define(argv: tuple[str, ...], cursor: ArgCursor) -> None:
    """Consume `NAME VALUE` after `--define`."""
    name, value = cursor.take(argv, 2)
    defines[name] = value


build = OptionTable()
build.add_option("o", "output", "store", arg="FILE", description="Output path.")
build.add_option(
    "j", "jobs", "store", type="uint", min=1, max=64, description="Parallel jobs."
)
build.add_option(
    "D", "define", "call_parse", callback=define, description="Define NAME VALUE."
)

clean = OptionTable()
clean.add_option("a", "all", "set_true", description="Remove everything.")

table = OptionTable()
table.add_option(
    "C", "directory", "store", arg="DIR", description="Change to DIR first."
)
table.add_subcommand("build", build, short_name="b", description="Build the project.")
table.add_subcommand("clean", clean, description="Remove build output.")

if __name__ == "__main__":
    parser = OptionParser(table)
    parser.help_init("usage: subcommands.py [-C DIR] COMMAND [options]")
    if len(sys.argv) == 1:
        parser.print_help()
        sys.exit(0)
    try:
        values = parser.parse_args()
    except ArgumentParseError:
        sys.exit(1)
    print(values, defines, sys.argv[1:])
