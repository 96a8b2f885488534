import argparse
import json
import logging
import os
import sys

from hdllang import Dialect, UnsupportedDialectError, create_parser
from hdllang.renderers import renderer_registry

logger = logging.getLogger(__name__)

EXTENSION_DIALECTS = {
    ".v": Dialect.VERILOG,
    ".vh": Dialect.VERILOG,
    ".sv": Dialect.VERILOG,
    ".vhd": Dialect.VHDL,
    ".vhdl": Dialect.VHDL,
}


def load_parser(args: argparse.Namespace):
    """Read ``args.file`` and build the parser for its dialect.

    The dialect comes from ``--dialect`` or, failing that, from the file
    extension.
    """
    if not getattr(args, "file", None):
        sys.exit("Error: No file provided.")

    if not os.path.isfile(args.file):
        sys.exit(f"Error: File not found: {args.file}")

    dialect = args.dialect
    if dialect is None:
        ext = os.path.splitext(args.file)[1].lower()
        if ext not in EXTENSION_DIALECTS:
            sys.exit(f"Error: Cannot infer HDL dialect from '{args.file}'; use --dialect.")
        dialect = EXTENSION_DIALECTS[ext]

    with open(args.file, "r", encoding="utf-8", errors="ignore") as fh:
        source = fh.read()

    try:
        return create_parser(dialect, source)
    except UnsupportedDialectError as exc:
        sys.exit(f"Error: {exc}")


def emit(args: argparse.Namespace, text: str) -> None:
    """Write ``text`` to ``--output`` or stdout."""
    if args.output:
        with open(args.output, "w", encoding="utf-8") as fh:
            fh.write(text if text.endswith("\n") else text + "\n")
        logger.info("wrote %s", args.output)
    else:
        print(text.rstrip("\n"))


def cmd_info(args: argparse.Namespace) -> int:
    """Print the extracted module descriptor as JSON."""
    parser = load_parser(args)
    emit(args, json.dumps(parser.describe().to_dict(), indent=2))
    return 0


def cmd_usage(args: argparse.Namespace) -> int:
    """Print an instantiation template for the module."""
    parser = load_parser(args)
    emit(args, parser.generate_sample_usage())
    return 0


def cmd_testbench(args: argparse.Namespace) -> int:
    """Print a stimulus testbench for the module."""
    parser = load_parser(args)
    emit(args, parser.generate_testbench())
    return 0


def cmd_doc(args: argparse.Namespace) -> int:
    """Render a whole document in the format selected by ``--format``."""
    parser = load_parser(args)
    if args.format == "svg":
        renderer = renderer_registry.create("svg", dark_mode=args.dark)
    else:
        renderer = renderer_registry.create(args.format, description=args.description)
    emit(args, renderer.render(parser))
    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hdldoc.py",
        description="Document Verilog modules and VHDL entities.",
    )

    # Global options
    parser.add_argument(
        "--dialect",
        choices=[d.value for d in Dialect],
        default=None,
        help="HDL dialect (default: inferred from the file extension).",
    )
    parser.add_argument(
        "-o",
        "--output",
        metavar="PATH",
        default=None,
        help="Write the result to PATH instead of stdout.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log extraction details to stderr.",
    )

    subparsers = parser.add_subparsers(dest="command")

    info = subparsers.add_parser("info", help="Print module name, ports and generics as JSON.")
    info.add_argument("file", metavar="FILE", help="HDL file to parse.")
    info.set_defaults(func=cmd_info)

    usage = subparsers.add_parser("usage", help="Print an instantiation template.")
    usage.add_argument("file", metavar="FILE", help="HDL file to parse.")
    usage.set_defaults(func=cmd_usage)

    testbench = subparsers.add_parser("testbench", help="Print a stimulus testbench.")
    testbench.add_argument("file", metavar="FILE", help="HDL file to parse.")
    testbench.set_defaults(func=cmd_testbench)

    doc = subparsers.add_parser("doc", help="Render a documentation page or block diagram.")
    doc.add_argument("file", metavar="FILE", help="HDL file to parse.")
    doc.add_argument(
        "--format",
        choices=renderer_registry.keys(),
        default="markdown",
        help="Output format (default: markdown).",
    )
    doc.add_argument(
        "--dark",
        action="store_true",
        help="Use the dark palette for SVG output.",
    )
    doc.add_argument(
        "--description",
        default=None,
        help="Text for the Markdown description section.",
    )
    doc.set_defaults(func=cmd_doc)

    return parser


def main(argv=None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    parser = build_arg_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
