from argwalk.config import DOUBLE_DASH_DESCRIPTION, ParserSettings
from argwalk.parser import SUPPRESS_HELP, HelpFormatter, OptionParser, OptionTable
from argwalk.parser.help_formatter import wrap_text

NARROW = ParserSettings(
    help_max_line_length=40,
    help_min_description_width=10,
    help_max_left_width=20,
    help_show_double_dash=False,
)


def build_table():
    table = OptionTable()
    table.add_option("f", "set-flag", "set_true", description="Set a flag.")
    table.add_option(
        "s",
        "set-string",
        "store",
        arg="ARG",
        description="Store a string value in the destination slot.",
    )
    return table


def test_help_layout():
    text = HelpFormatter(build_table(), settings=NARROW).format_help()
    column = 22
    assert text.splitlines() == [
        "Options:",
        "  -f, --set-flag".ljust(column) + "Set a flag.",
        "  -s, --set-string ARG",
        " " * column + "Store a string",
        " " * column + "value in the",
        " " * column + "destination slot.",
    ]


def test_help_lines_respect_max_length():
    settings = ParserSettings(help_max_line_length=50, help_min_description_width=10)
    table = build_table()
    table.add_option(
        "l", "long", "store", description="word " * 40 + "end", arg="VALUE"
    )
    text = HelpFormatter(table, settings=settings).format_help()
    assert all(len(line) <= 50 for line in text.splitlines())


def test_help_min_description_width_wins():
    settings = ParserSettings(
        help_max_line_length=30,
        help_min_description_width=20,
        help_max_left_width=20,
        help_show_double_dash=False,
    )
    table = OptionTable()
    table.add_option(
        "x",
        "extremely-long-option",
        "set_true",
        description="one two three four five six seven eight nine ten",
    )
    lines = HelpFormatter(table, settings=settings).format_help().splitlines()
    description_lines = [line[22:] for line in lines[2:]]
    assert all(len(line) <= 20 for line in description_lines)
    assert max(len(line) for line in lines) > 30


def test_help_does_not_break_long_words():
    settings = ParserSettings(
        help_max_line_length=20,
        help_min_description_width=10,
        help_show_double_dash=False,
    )
    table = OptionTable()
    table.add_option(
        "w", None, "set_true", description="supercalifragilisticexpialidocious is long"
    )
    lines = HelpFormatter(table, settings=settings).format_help().splitlines()
    assert lines[1] == "  -w  supercalifragilisticexpialidocious"
    assert lines[2] == " " * 6 + "is long"


def test_help_explicit_newlines():
    table = OptionTable()
    table.add_option("m", None, "set_true", description="First.\nSecond.")
    lines = HelpFormatter(table, settings=NARROW).format_help().splitlines()
    assert lines[1].endswith("First.")
    assert lines[2].strip() == "Second."
    assert lines[2].index("Second.") == lines[1].index("First.")


def test_help_hides_suppressed_options():
    table = build_table()
    table.add_option("z", "secret", "set_true", description=SUPPRESS_HELP)
    text = HelpFormatter(table).format_help()
    assert "--secret" not in text
    assert "--set-flag" in text


def test_help_double_dash_entry():
    text = HelpFormatter(build_table()).format_help()
    lines = text.splitlines()
    assert lines[-1].startswith("  --")
    assert lines[-1].endswith(DOUBLE_DASH_DESCRIPTION)


def test_help_lists_subcommands():
    child = OptionTable()
    child.add_option("v", "verbose", "set_true", description="Talk more.")
    table = build_table()
    table.add_subcommand("build", child, description="Build the project.")

    text = HelpFormatter(table).format_help()
    options, commands = text.split("\n\n")
    assert options.startswith("Options:")
    command_lines = commands.splitlines()
    assert command_lines[0] == "Commands:"
    assert command_lines[1].startswith("  build")
    assert command_lines[1].endswith("Build the project.")
    assert command_lines[2].startswith("    -v, --verbose")
    assert command_lines[2].endswith("Talk more.")


def test_help_header_and_footer():
    parser = OptionParser(build_table(), ["prog"])
    parser.help_init("usage: prog [options] FILE", "See the manual.")
    text = parser.format_help()
    assert text.startswith("usage: prog [options] FILE\n\nOptions:\n")
    assert text.endswith("\n\nSee the manual.")


def test_print_help(capsys):
    parser = OptionParser(build_table(), ["prog"])
    parser.print_help()
    out = capsys.readouterr().out
    assert "-f, --set-flag" in out
    assert "Set a flag." in out


def test_empty_table_help():
    settings = ParserSettings(help_show_double_dash=False)
    assert HelpFormatter(OptionTable(), settings=settings).format_help() == ""


def test_wrap_text():
    assert wrap_text("a b c", 3) == ["a b", "c"]
    assert wrap_text("a\n\nb", 10) == ["a", "", "b"]
    assert wrap_text("unbreakable", 4) == ["unbreakable"]
