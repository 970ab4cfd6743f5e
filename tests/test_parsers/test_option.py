from argwalk.parser import SUPPRESS_HELP, Arity, Option, OptionAction, OptionTable


def test_option_defaults():
    option = Option("f", "set-flag")
    assert option.action is OptionAction.SET_TRUE
    assert option.arity is Arity.NONE
    assert option.dest == "set_flag"
    assert option.identity == "f"
    assert option.display_name == "--set-flag"
    assert not option.takes_argument


def test_option_arity_from_action():
    assert Option("s", None, "store").arity is Arity.REQUIRED
    assert Option("a", None, "append").arity is Arity.REQUIRED
    assert Option("c", None, "call", callback=print).arity is Arity.REQUIRED
    assert Option("v", None, "call_void", callback=print).arity is Arity.NONE
    assert Option("o", None, "store", arity=-1).arity is Arity.OPTIONAL


def test_option_names():
    short_only = Option("x", None, "store")
    assert short_only.dest == "x"
    assert short_only.display_name == "-x"
    long_only = Option(None, "dry-run")
    assert long_only.identity == "dry-run"
    assert long_only.dest == "dry_run"


def test_option_help_text():
    assert Option("f", "set-flag").get_help_text() == "-f, --set-flag"
    assert (
        Option("s", "set-string", "store", arg="ARG").get_help_text()
        == "-s, --set-string ARG"
    )
    assert Option(None, "output", "store").get_help_text() == "--output OUTPUT"
    assert (
        Option("c", "color", "store", arity=-1, arg="WHEN").get_help_text()
        == "-c, --color [WHEN]"
    )


def test_option_hidden():
    assert Option("x", description=SUPPRESS_HELP).hidden
    assert not Option("x", description="Shown.").hidden


def test_subcommand_option():
    option = Option("b", "build", subcommand=OptionTable())
    assert option.is_subcommand
    assert option.arity is Arity.NONE
    assert option.display_name == "build"
    assert option.get_help_text() == "b, build"


def test_option_dest_is_an_identifier():
    assert Option("1").dest == "_1"
    assert Option("?").dest == "_"
    assert Option(None, "log.level", "store").dest == "log_level"
    assert Option("1", dest="one").dest == "one"
