import argparse
import asyncio
import logging
import sys

from .app import run_hashes, run_json, run_parse
from .protocol.errors import MagnetError


def make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="magnetlink.main", description="Magnet link parser")
    parser.add_argument("-v", "--verbose", action="store_true", help="show debug messages")
    subparsers = parser.add_subparsers(title="command", description="valid commands", required=True)

    parser_parse = subparsers.add_parser(
        "parse",
        description="parse magnet link and show its fields",
        help="parse magnet link and show its fields",
    )
    parser_parse.add_argument("magnet_link", type=str, help="magnet link")
    parser_parse.set_defaults(command_cb=run_parse)

    parser_hashes = subparsers.add_parser(
        "hashes",
        description="show the exact topic hashes of a magnet link",
        help="show the exact topic hashes of a magnet link",
    )
    parser_hashes.add_argument("magnet_link", type=str, help="magnet link")
    parser_hashes.set_defaults(command_cb=run_hashes)

    parser_json = subparsers.add_parser(
        "json",
        description="parse magnet link and print it as json",
        help="parse magnet link and print it as json",
    )
    parser_json.add_argument("magnet_link", type=str, help="magnet link")
    parser_json.set_defaults(command_cb=run_json)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = make_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    command_cb = args.command_cb

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        asyncio.run(command_cb(**{k: v for k, v in vars(args).items() if k not in ("command_cb", "verbose")}))
    except MagnetError as err:
        parser.exit(1, f"error: {err.kind}: {err}\n")


if __name__ == "__main__":
    main()
