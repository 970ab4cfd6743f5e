"""step_loop.py

Drives the parser one event at a time, the way a program reacting to each
option as it is seen would.
"""

import sys

from argwalk import OptionParser, OptionTable, ParseStatus
from argwalk.signals import HelpSignal


def show_help() -> None:
    raise HelpSignal()


table = OptionTable()
table.add_option(
    "v", "verbose", "increment", dest="verbosity", description="Talk more."
)
table.add_option(
    "q", "quiet", "decrement", dest="verbosity", description="Talk less."
)
table.add_option(
    "c",
    "color",
    "store",
    arity=-1,
    default="auto",
    arg="WHEN",
    description="Colorize output.",
)
table.add_option(
    "h", "help", "call_void", callback=show_help, description="Show this help."
)


def main(argv: list[str]) -> int:
    parser = OptionParser(table, argv)
    try:
        for result in parser:
            if result.status == ParseStatus.MATCH:
                print(f"matched {result.identity}")
            elif result.status == ParseStatus.STDIO:
                print("reading from stdin")
    except HelpSignal:
        parser.print_help()
        return 0
    print(parser.values, argv[1:])
    return 1 if parser.failed else 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
