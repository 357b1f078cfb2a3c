"""Main entry point for the Objective-C type-encoding decoder."""

import argparse
import json
import sys
from pathlib import Path
from typing import NoReturn

from .domain.models.objc import ClassInfo, PropertyAttributeKind
from .domain.services.generation import DeclarationPrinter, HeaderGenerator, encode
from .domain.services.parsing import (
    decode,
    decode_with_remainder,
    encode_property_attributes,
    parse_method_signature,
    parse_property_attributes,
)
from .infrastructure.config import Config
from .infrastructure.logging import LoggerSetup, ProgressTracker, get_logger, log_timing

logger = get_logger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Decode Objective-C runtime type encodings into C-like declarations",
        epilog="""
Examples:
  # Decode a struct encoding
  objc-type-encoding '{CGRect={CGPoint=dd}{CGSize=dd}}'

  # Split a method type encoding into return value and arguments
  objc-type-encoding --method 'v24@0:8@16'

  # Decode a property attribute string
  objc-type-encoding --property 'T@"NSString",C,N,V_title'

  # Render an @interface from a JSON class description
  objc-type-encoding --class-file MyView.json -o MyView.h

  # Decode encodings listed in a file and check that they re-encode identically
  objc-type-encoding --encodings-file encodings.txt --encode --verbose
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "encodings",
        nargs="*",
        help="Type encodings to decode",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Write rendered output to this file instead of stdout",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output with debug logs",
    )
    parser.add_argument(
        "--method",
        action="store_true",
        help="Treat inputs as method type encodings such as 'v24@0:8@16'",
    )
    parser.add_argument(
        "--property",
        action="store_true",
        help="Treat inputs as property attribute strings such as 'T@,R,N'",
    )
    parser.add_argument(
        "--class-file",
        type=Path,
        metavar="FILE",
        help="Render an @interface from a JSON class description",
    )
    parser.add_argument(
        "--encodings-file",
        type=Path,
        metavar="FILE",
        help="Read inputs from file (one per line, '#' starts a comment line)",
    )
    parser.add_argument(
        "--encode",
        action="store_true",
        help="Re-encode each decoded input and report round-trip mismatches",
    )
    parser.add_argument(
        "--indent",
        type=int,
        metavar="N",
        help="Spaces per nesting level in rendered declarations (default: 4)",
    )
    return parser.parse_args(argv)


def read_encodings_file(path: Path) -> list[str]:
    """Read one input per line, skipping blank lines and '#' comments."""
    encodings = []
    with open(path, encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith("#"):
                encodings.append(line)
    return encodings


def render_type(encoding: str, printer: DeclarationPrinter, check_round_trip: bool) -> str | None:
    """Decode a single type encoding and render its declaration."""
    result = decode_with_remainder(encoding)
    if result is None:
        logger.error(f"[FAILED] {encoding}: not a recognizable type encoding")
        return None

    node, remainder = result
    if remainder:
        logger.warning(f"{encoding}: ignoring trailing text {remainder!r}")

    lines = [encoding, printer.type_declaration(node)]
    if check_round_trip:
        consumed = encoding[: len(encoding) - len(remainder)]
        re_encoded = encode(node)
        lines.append(f"encoded: {re_encoded}")
        if re_encoded != consumed:
            logger.warning(f"{encoding}: re-encodes as {re_encoded!r}")
    return "\n".join(lines)


def render_method(encoding: str, printer: DeclarationPrinter, check_round_trip: bool) -> str | None:
    """Split a method type encoding and render its return value and arguments."""
    signature = parse_method_signature(encoding)
    values = [signature.return_value, *signature.arguments]
    undecodable = [value.type_encoding for value in values if decode(value.type_encoding) is None]
    if undecodable:
        logger.error(f"[FAILED] {encoding}: cannot decode {', '.join(map(repr, undecodable))}")
        return None

    lines = [encoding, f"return: {printer.argument_declaration(signature.return_type)}"]
    if signature.stack_size is not None:
        lines.append(f"stack size: {signature.stack_size}")
    for index, argument in enumerate(signature.arguments):
        offset = "" if argument.offset is None else f" (offset {argument.offset})"
        lines.append(f"arg {index}{offset}: {printer.argument_declaration(argument.type)}")

    if check_round_trip and signature.encoded() != encoding:
        logger.warning(f"{encoding}: re-encodes as {signature.encoded()!r}")
    return "\n".join(lines)


def render_property(encoding: str, printer: DeclarationPrinter, check_round_trip: bool) -> str | None:
    """Parse a property attribute string and render one line per attribute."""
    attributes = parse_property_attributes(encoding)
    if not attributes:
        logger.error(f"[FAILED] {encoding}: no property attributes")
        return None

    lines = [encoding]
    for attribute in attributes:
        if attribute.kind is PropertyAttributeKind.TYPE:
            decoded_type = attribute.type
            if decoded_type is None:
                logger.error(f"[FAILED] {encoding}: cannot decode type {attribute.value!r}")
                return None
            lines.append(f"type: {printer.argument_declaration(decoded_type)}")
        elif attribute.kind is PropertyAttributeKind.OTHER:
            lines.append(f"other: {attribute.value}")
        elif attribute.kind.takes_value:
            lines.append(f"{attribute.kind.name.lower()}: {attribute.value}")
        else:
            lines.append(attribute.kind.name.lower())

    if check_round_trip and encode_property_attributes(attributes) != encoding:
        logger.warning(f"{encoding}: re-encodes as {encode_property_attributes(attributes)!r}")
    return "\n".join(lines)


def render_class_file(path: Path, generator: HeaderGenerator) -> str | None:
    """Render an @interface from a JSON class description."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        class_info = ClassInfo.from_dict(data)
    except FileNotFoundError:
        logger.error(f"Class file not found: {path}")
        return None
    except (OSError, json.JSONDecodeError, ValueError, TypeError) as e:
        logger.error(f"Invalid class file {path}: {e}")
        return None

    return generator.generate_interface(class_info)


@log_timing
def main(argv: list[str] | None = None) -> NoReturn:
    """Main entry point for decoding type encodings from the command line."""
    args = parse_args(argv)

    # Load configuration
    try:
        config = Config.from_args(
            output_path=args.output,
            verbose=args.verbose or None,
            indent_width=args.indent,
        )
        config.validate()
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    # Initialize logging
    config.ensure_log_dir()
    LoggerSetup.initialize(config.log_dir, verbose=config.verbose)

    if args.method and args.property:
        logger.error("Cannot use both --method and --property options")
        sys.exit(1)

    encodings = list(args.encodings)
    if args.encodings_file:
        try:
            from_file = read_encodings_file(args.encodings_file)
        except FileNotFoundError:
            logger.error(f"Encodings file not found: {args.encodings_file}")
            sys.exit(1)
        except OSError as e:
            logger.error(f"Error reading encodings file: {e}")
            sys.exit(1)
        logger.info(f"Read {len(from_file)} encoding(s) from {args.encodings_file}")
        encodings.extend(from_file)

    if not encodings and args.class_file is None:
        logger.error("Must provide encodings, --encodings-file or --class-file")
        sys.exit(1)

    if args.method:
        render, mode = render_method, "method"
    elif args.property:
        render, mode = render_property, "property"
    else:
        render, mode = render_type, "type"

    printer = DeclarationPrinter(config.indent)
    tracker = ProgressTracker(logger)
    blocks: list[str] = []

    with tracker.track_operation(f"decode {len(encodings)} {mode} encoding(s)"):
        for i, encoding in enumerate(encodings, 1):
            logger.debug(f"[{i}/{len(encodings)}] Processing: {encoding}")
            block = render(encoding, printer, args.encode)
            tracker.count_item(succeeded=block is not None)
            if block is not None:
                blocks.append(block)

    if args.class_file is not None:
        with tracker.track_operation(f"render {args.class_file}"):
            interface = render_class_file(args.class_file, HeaderGenerator(config.indent))
            tracker.count_item(succeeded=interface is not None)
            if interface is not None:
                blocks.append(interface)

    output = "\n\n".join(blocks)
    if config.output_path is not None:
        config.ensure_output_dir()
        config.output_path.write_text(output + "\n", encoding="utf-8")
        logger.info(f"Wrote {len(blocks)} block(s) to {config.output_path}")
    elif blocks:
        print(output)

    if config.verbose:
        tracker.log_memory_usage()
    tracker.report_summary()

    sys.exit(0 if tracker.failure_count == 0 else 1)


if __name__ == "__main__":
    main()
