import argparse
import logging
import re
import sys

from numeral_converter import _get_version, decode, encode, is_valid
from numeral_converter import __name__ as numeral_converter_name
from numeral_converter.constants import MAX_VALUE
from numeral_converter.exceptions import NumeralError, OutOfRangeError

logger = logging.getLogger(numeral_converter_name)


def command_line_parser():
    parser = argparse.ArgumentParser(
        description="Convert between integers and Roman numerals"
    )
    parser.add_argument(
        "-b",
        "--brief",
        action="store_true",
        default=False,
        help="Don't prefix results with the value converted (default: false)",
    )
    parser.add_argument(
        "-c",
        "--check",
        action="store_true",
        help="Report whether each numeral is valid instead of converting it",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Only accept numerals in canonical form",
    )
    parser.add_argument("-V", "--version", action="store_true")
    parser.add_argument(
        "value", nargs="*", help="Integers to encode or Roman numerals to decode"
    )
    parser.add_argument(
        "--debug", default=False, action="store_true", help="Enable debug logging"
    )
    return parser


def convert(args, value: str) -> str:
    if re.fullmatch(r"[0-9]+", value):
        # Too long for the range; skip int() and its digit limit
        if len(value.lstrip("0")) > len(str(MAX_VALUE)):
            raise OutOfRangeError(value)
        return encode(int(value))
    else:
        return str(decode(value, strict=args.strict))


def print_result(args, value: str, result: str):
    if args.brief:
        print(result)
    else:
        print(f"{value}: {result}")


def main():
    parser = command_line_parser()
    args = parser.parse_args()

    if args.version:
        print(_get_version())
    elif len(args.value) == 0:
        parser.print_help()
    else:
        hdlr = logging.StreamHandler()
        hdlr.setFormatter(logging.Formatter("%(levelname)s:%(name)s:%(message)s"))
        logger.addHandler(hdlr)
        if args.debug:
            logger.setLevel("DEBUG")
        else:
            logger.setLevel("ERROR")

        failed = False
        for value in args.value:
            if args.check:
                valid = is_valid(value, strict=args.strict)
                print_result(args, value, "valid" if valid else "invalid")
                failed = failed or not valid
                continue
            try:
                print_result(args, value, convert(args, value))
            except NumeralError as e:
                print(f"{value}:", str(e), file=sys.stderr)
                failed = True
        if failed:
            sys.exit(1)


if __name__ == "__main__":
    # execute only if run as a script
    main()  # pragma: no cover
