from pathlib import Path

import pytest

from cliopts.config import OptionsConfig, RawOption, loader
from cliopts.exceptions import OptionConfigError, ShortFormConflictError
from cliopts.parser import CliOptionParser

YAML_CONFIG = """
header: "usage: tool [options] files..."
footer: "Report bugs to the tracker."
options:
  - name: count
    short_form: "-c"
    long_form: "--count"
    help_text: "Number of items"
  - name: verbose
    short_form: "-v"
  - name: output
    long_form: "--output"
    help_text: |-
      Output file.
      Defaults to stdout.
"""

TOML_CONFIG = """
header = "usage: tool"

[[options]]
name = "count"
short_form = "-c"
long_form = "--count"
help_text = "Number of items"
"""


def write(tmp_path: Path, name: str, content: str) -> Path:
    path = tmp_path / name
    path.write_text(content, encoding="UTF-8")
    return path


@pytest.mark.parametrize("suffix", [".yaml", ".yml"])
def test_load_yaml(tmp_path, suffix):
    parser = loader(write(tmp_path, f"options{suffix}", YAML_CONFIG))

    assert isinstance(parser, CliOptionParser)
    assert parser.header == "usage: tool [options] files..."
    assert parser.footer == "Report bugs to the tracker."
    assert [d["name"] for d in parser.to_definition_list()] == [
        "count",
        "verbose",
        "output",
    ]
    assert parser.get_option("verbose").long_form is None
    assert parser.get_option("output").help_text == "Output file.\nDefaults to stdout."

    positional = parser.parse_from(["-c1", "--count=2", "--output=out.txt", "in.txt"])
    assert positional == ["in.txt"]
    assert parser["count"] == ["1", "2"]
    assert parser["output"] == ["out.txt"]


def test_load_toml_from_str_path(tmp_path):
    parser = loader(str(write(tmp_path, "options.toml", TOML_CONFIG)))

    assert parser.header == "usage: tool"
    assert parser.footer == ""
    assert parser.get_option("count").short_form == "-c"


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        loader(tmp_path / "missing.yaml")


def test_invalid_path_type():
    with pytest.raises(TypeError):
        loader(42)  # type: ignore[arg-type]


def test_unsupported_suffix(tmp_path):
    with pytest.raises(OptionConfigError, match="Unsupported config format: .json"):
        loader(write(tmp_path, "options.json", "{}"))


def test_non_mapping_document(tmp_path):
    with pytest.raises(OptionConfigError, match="must contain a mapping"):
        loader(write(tmp_path, "options.yaml", "- just\n- a list\n"))


def test_invalid_option_entry(tmp_path):
    content = "options:\n  - short_form: '-c'\n"
    with pytest.raises(OptionConfigError, match="name"):
        loader(write(tmp_path, "options.yaml", content))


def test_form_without_dash(tmp_path):
    content = "options:\n  - name: count\n    short_form: 'c'\n"
    with pytest.raises(OptionConfigError, match="must start with '-'"):
        loader(write(tmp_path, "options.yaml", content))


def test_conflicting_options_propagate(tmp_path):
    content = (
        "options:\n"
        "  - name: verbose\n    short_form: '-v'\n"
        "  - name: version\n    short_form: '-v'\n"
    )
    with pytest.raises(ShortFormConflictError):
        loader(write(tmp_path, "options.yaml", content))


def test_options_config_round_trip_definitions():
    config = OptionsConfig(
        header="h",
        options=[RawOption(name="count", short_form="-c", long_form="--count")],
    )
    parser = config.to_parser()

    assert [RawOption(**d) for d in parser.to_definition_list()] == config.options


@pytest.mark.parametrize(
    ("name", "content"),
    [
        ("options.yaml", "options: [\n  - name: x\n"),
        ("options.toml", "[[options]\nname = "),
    ],
)
def test_malformed_syntax(tmp_path, name, content):
    with pytest.raises(OptionConfigError, match="Could not parse"):
        loader(write(tmp_path, name, content))


def test_undecodable_file(tmp_path):
    path = tmp_path / "options.yaml"
    path.write_bytes(b"options:\n  - name: \xff\xfe\n")

    with pytest.raises(OptionConfigError, match="Could not parse"):
        loader(path)
