import argparse
import logging
import sys
from pathlib import Path

from .csharp import DEFAULT_CLASS_NAME, render_initialization
from .codegen import DEFAULT_TAB_STRING
from .types import load

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_NAME = "GeneratedInitialization.cs"


def _non_negative_int(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be zero or greater, got {value}")
    return value


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def cmd_generate(args: argparse.Namespace) -> int:
    source: str | None = args.source
    if not source or not source.strip():
        print("The '--from' option is required.", file=sys.stderr)
        return 1

    src = Path(source)
    if not src.is_file():
        print(f"The file '{source}' does not exist.", file=sys.stderr)
        return 1

    try:
        value = load(src)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Could not read '{source}': {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"The file '{source}' is not valid JSON: {e}", file=sys.stderr)
        return 1

    indent = " " * args.indent_width if args.indent_width else DEFAULT_TAB_STRING
    code: str = render_initialization(value, args.class_name, indent=indent)

    print("Generating C# code for initialization...")

    out_dir = Path(args.target) if args.target else src.parent
    out_dir.mkdir(parents=True, exist_ok=True)
    out_file = out_dir / args.output_name
    out_file.write_text(code, encoding="utf-8")
    logger.debug("Wrote %d characters to %s", len(code), out_file)

    print(f"Generated code written to: {out_file}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser("codi", description="Generate a C# object initializer from a JSON file")
    p.add_argument("-f", "--from", dest="source", help="Path to the JSON file to generate code from")
    p.add_argument("-t", "--to", dest="target", help="Output directory (default: next to the input file)")
    p.add_argument("--class-name", dest="class_name", default=DEFAULT_CLASS_NAME)
    p.add_argument("--output-name", dest="output_name", default=DEFAULT_OUTPUT_NAME)
    p.add_argument("--indent-width", dest="indent_width", type=_non_negative_int, default=0,
                   help="Indent with this many spaces instead of a tab")
    p.add_argument("-v", "--verbose", action="store_true")
    p.set_defaults(func=cmd_generate)
    return p


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
