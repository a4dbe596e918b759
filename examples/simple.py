import logging

from cliopts import CliOptionParser
from cliopts.utils import setup_logging

setup_logging(mode="cli", console_log_level=logging.DEBUG)

parser = CliOptionParser(
    header="usage: simple.py [options] FILE...",
    footer="Unknown flags are ignored.",
)
parser.register_option("-h", "--help", "Show this help message.", "help")
parser.register_option("-n", "--count", "How many times to greet.", "count")
parser.register_option(
    None,
    "--greeting",
    "Greeting to use.\nRepeat to use several greetings in turn.",
    "greeting",
)

# Entry point
if __name__ == "__main__":
    files = parser.parse()[1:]
    if parser.is_enabled("help"):
        parser.render_help()
    else:
        greetings = parser["greeting"] or ["Hello"]
        count = int((parser["count"] or ["1"])[-1] or 1)
        for index in range(count):
            for name in files or ["world"]:
                print(f"{greetings[index % len(greetings)]}, {name}!")
