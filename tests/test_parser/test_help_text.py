from io import StringIO

from rich.console import Console

from cliopts.parser import CliOptionParser


def build_parser() -> CliOptionParser:
    parser = CliOptionParser(header="usage: tool [options]", footer="Report bugs.")
    parser.register_option("-c", "--count", "Number of items", "count")
    parser.register_option("-q", None, "Quiet mode", "quiet")
    parser.register_option(None, "--format", "Output format.\nOne of: json, text", "format")
    return parser


def test_help_text_layout():
    help_text = build_parser().help_text()

    assert help_text == (
        "usage: tool [options]\n"
        "\n"
        "\t-c --count  Number of items\n"
        "\t-q          Quiet mode\n"
        "\t   --format Output format.\n"
        "\t            One of: json, text\n"
        "\n"
        "Report bugs.\n"
        "\n"
    )


def test_help_text_contains_every_option():
    help_text = build_parser().help_text()
    lines = help_text.splitlines()

    assert lines[0] == "usage: tool [options]"
    assert "Report bugs." in lines
    assert any("-c" in line and "--count" in line and "Number of items" in line for line in lines)
    assert any("-q" in line and "Quiet mode" in line for line in lines)
    assert any("--format" in line and "Output format." in line for line in lines)


def test_help_text_continuation_indent():
    parser = CliOptionParser(header="h", footer="f")
    parser.register_option("-x", "--extra", "first\nsecond\nthird", "extra")
    help_text = parser.help_text()

    indent = "\n\t" + " " * len("-x --extra ")
    assert f"first{indent}second{indent}third" in help_text


def test_help_text_without_options():
    parser = CliOptionParser(header="Header", footer="Footer")
    assert parser.help_text() == "Header\n\n\nFooter\n\n"


def test_render_help_prints_to_console():
    output = StringIO()
    parser = CliOptionParser(
        header="usage: tool [-h]",
        footer="[done]",
        console=Console(file=output, width=120),
    )
    parser.register_option("-h", "--help", "Show [this] help", "help")
    parser.render_help()

    printed = output.getvalue()
    assert printed.startswith("usage: tool [-h]\n")
    assert "Show [this] help" in printed
    assert "--help" in printed
    assert "[done]" in printed
    assert parser.header == "usage: tool [-h]"
    assert parser.footer == "[done]"


def test_help_text_without_short_forms():
    parser = CliOptionParser(header="h", footer="f")
    parser.register_option(None, "--all", "Everything", "all")
    parser.register_option(None, "--format", "Output format.\nOne of: json, text", "format")

    assert parser.help_text() == (
        "h\n"
        "\n"
        "\t--all    Everything\n"
        "\t--format Output format.\n"
        "\t         One of: json, text\n"
        "\n"
        "f\n"
        "\n"
    )


def test_help_text_without_long_forms():
    parser = CliOptionParser(header="h", footer="f")
    parser.register_option("-a", None, "All", "all")

    assert "\n\t-a All\n" in parser.help_text()


def test_render_help_expands_tabs():
    output = StringIO()
    parser = build_parser()
    parser.console = Console(file=output, width=200)
    parser.render_help()

    assert output.getvalue() == parser.help_text().expandtabs(parser.console.tab_size)
