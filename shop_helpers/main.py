import argparse
import logging
import sys
from typing import List, Optional

from .core.config import Config
from .core.errors import HelperError
from .core.strings import to_camel_case
from .core.units import LENGTH_UNITS, WEIGHT_UNITS, convert_length, convert_weight
from .core.validation import VALIDATORS, validate
from .services.slugs import get_slug, resolve_slugifier


def configure_logging() -> None:
    logging.basicConfig(
        level=Config.log_level(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(),
        ]
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="shop-helpers", description="Storefront conversion and validation helpers")
    commands = parser.add_subparsers(dest="command", required=True)

    weight = commands.add_parser("convert-weight", help=f"Convert between {', '.join(WEIGHT_UNITS)}")
    weight.add_argument("from_unit")
    weight.add_argument("to_unit")
    weight.add_argument("value", type=float)

    length = commands.add_parser("convert-length", help=f"Convert between {', '.join(LENGTH_UNITS)}")
    length.add_argument("from_unit")
    length.add_argument("to_unit")
    length.add_argument("value", type=float)

    check = commands.add_parser("validate", help="Check a payment field or email address")
    check.add_argument("kind", choices=sorted(VALIDATORS))
    check.add_argument("value")

    slug = commands.add_parser("slug", help="Slugify text for the given shop language")
    slug.add_argument("text")
    slug.add_argument("--lang", default=Config.SHOP_LANGUAGE)

    camel = commands.add_parser("camel", help="camelCase a label for i18n keys")
    camel.add_argument("text")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        Config.validate()
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1
    configure_logging()

    try:
        if args.command == "convert-weight":
            print(convert_weight(args.from_unit, args.to_unit, args.value))
        elif args.command == "convert-length":
            print(convert_length(args.from_unit, args.to_unit, args.value))
        elif args.command == "validate":
            is_valid = validate(args.kind, args.value)
            print("valid" if is_valid else "invalid")
            return 0 if is_valid else 1
        elif args.command == "slug":
            print(get_slug(args.text, resolve_slugifier(args.lang)))
        elif args.command == "camel":
            print(to_camel_case(args.text))
    except HelperError as e:
        print(e.message, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
