"""simple.py"""

import sys

from argwalk import OptionTable, registry

table = OptionTable()
table.add_option("f", "set-flag", "set_true", description="Set a flag.")
table.add_option(
    "s", "set-string", "store", arg="ARG", description="Store a string value."
)
table.add_option(
    "n",
    "numbers",
    "append",
    type="int",
    list_delim=",",
    length_dest="numbers_count",
    arg="N[,N...]",
    description="Append comma separated integers.",
)
table.add_option(
    "h",
    "help",
    "call_void",
    callback=lambda: registry.print_help(),
    description="Show this help.",
)

if __name__ == "__main__":
    registry.init(table)
    registry.help_init("usage: simple.py [options] FILE...", "Files are listed last.")
    if registry.parse(sys.argv):
        sys.exit(1)
    print(registry.get_values())
    print("operands:", sys.argv[1:])
