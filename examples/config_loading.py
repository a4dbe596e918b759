from pathlib import Path

from cliopts.config import loader

parser = loader(Path(__file__).parent / "options.yaml")

if __name__ == "__main__":
    files = parser.parse()[1:]
    if parser.is_enabled("help"):
        parser.render_help()
    else:
        print(f"output:   {parser['output']}")
        print(f"excluded: {parser['exclude']}")
        print(f"verbose:  {parser.is_enabled('verbose')}")
        print(f"files:    {files}")
