import argparse
import logging
import sys

from cli.inputs import hand_input
from mjcodec.codec import DecodeError, decode, encode
from mjcodec.tiles import NumberedTile, all_tiles, code_of, hand_to_names, name_to_tile, tile_to_name, tile_to_unicode


def set_verbosity(verbose: int) -> None:
    if verbose == 2:
        logging.basicConfig(level=logging.DEBUG)
    elif verbose == 1:
        logging.basicConfig(level=logging.INFO)
    elif verbose == 0:
        logging.basicConfig(level=logging.WARNING)
    else:
        raise ValueError("verbose level can only be 0, 1 or 2")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Convert mahjong hands to and from compact text")
    parser.add_argument("-v", "--verbose", help="Logging level, 0 (default), 1 or 2",
                        type=int, choices=[0, 1, 2], default=0)
    subparsers = parser.add_subparsers(dest="command", required=True)

    enc = subparsers.add_parser("encode", help="Encode tile names into a hand string")
    enc.add_argument("tiles", help="Tile names, e.g. 2m 3m 4m 5pr E C", nargs="*")
    enc.add_argument("--retry", help="Retries for interactive input", type=int, default=2)

    dec = subparsers.add_parser("decode", help="Decode a hand string into tile names")
    dec.add_argument("text", help="Encoded hand")
    dec.add_argument("-u", "--unicode", help="Print unicode tiles instead of names", action="store_true")

    table = subparsers.add_parser("table", help="Print every tile with its code and character")
    table.add_argument("-r", "--red-fives", help="Include red fives", action="store_true")
    return parser


def run_encode(args: argparse.Namespace) -> int:
    if args.tiles:
        tiles = [name_to_tile(name) for name in args.tiles]
    else:
        tiles = hand_input("Hand", retry=args.retry)
    logging.debug(f"Encoding {len(tiles)} tiles: {hand_to_names(tiles)}")
    print(encode(tiles))
    return 0


def run_decode(args: argparse.Namespace) -> int:
    tiles = decode(args.text)
    logging.info(f"Decoded {len(tiles)} tiles")
    if args.unicode:
        # rank 0 has no glyph
        print(" ".join(tile_to_name(tile) if isinstance(tile, NumberedTile) and tile.rank == 0
                       else tile_to_unicode(tile) for tile in tiles))
    else:
        print(hand_to_names(tiles))
    return 0


def run_table(args: argparse.Namespace) -> int:
    tiles = all_tiles(red_fives=args.red_fives)
    print(encode(tiles))
    for tile in tiles:
        print(f"{code_of(tile):08b} -> {encode([tile])} {tile_to_name(tile)}")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    set_verbosity(args.verbose)
    commands = {"encode": run_encode, "decode": run_decode, "table": run_table}
    try:
        return commands[args.command](args)
    except DecodeError as e:
        logging.error(f"Cannot decode hand: {e}")
    except ValueError as e:
        logging.error(f"Invalid tile: {e}")
    return 1


if __name__ == "__main__":
    sys.exit(main())
