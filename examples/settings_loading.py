"""settings_loading.py"""

import sys

from argwalk import OptionParser, OptionTable, load_settings
from argwalk.utils import setup_logging

setup_logging(mode="cli", log_filename=None)
settings = load_settings("argwalk.yaml")

table = OptionTable()
table.add_option("c", None, "store", description="Store the next token.")
table.add_option("f", None, "set_true", description="Set a flag.")

if __name__ == "__main__":
    parser = OptionParser(table, settings=settings)
    for result in parser:
        pass
    parser.print_help()
    print(parser.values, sys.argv[1:])
