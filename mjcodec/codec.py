"""Text codec for hands of tiles.
Each tile is written as the character ALPHABET[code_of(tile)], so a hand of
N tiles becomes a string of N Base64-alphabet characters. Decoding reads the
input byte by byte and stops at the first byte that does not stand for a tile.
"""
from typing import Iterable

import numpy as np

from mjcodec.constants import ALPHABET
from mjcodec.tiles import CODE_TO_TILE, Tile, code_of


class DecodeError(ValueError):
    pass


class InvalidCharacterError(DecodeError):
    def __init__(self, byte: int, position: int) -> None:
        self.byte = byte
        self.char = chr(byte)
        self.position = position
        super().__init__(f"Invalid character {self.char!r} (byte {byte:#04x}) at position {position}")


def _build_reverse_table(codes: Iterable[int]) -> np.ndarray:
    keep = set(codes)
    table = np.full(256, -1, dtype=np.int8)
    for code, char in enumerate(ALPHABET):
        if code in keep:
            table[ord(char)] = code
    table.setflags(write=False)
    return table


# byte value -> code, -1 where the byte does not stand for a tile
REVERSE_TABLE = _build_reverse_table(CODE_TO_TILE)


def _to_bytes(text: str | bytes) -> bytes:
    if isinstance(text, str):
        # lone surrogates become bytes outside the alphabet
        return text.encode("utf-8", errors="surrogatepass")
    if isinstance(text, (bytes, bytearray, memoryview)):
        return bytes(text)
    raise TypeError(f"Expected str or bytes, got {type(text).__name__}")


def encode(tiles: Iterable[Tile]) -> str:
    """Return the text form of the hand, one character per tile."""
    return "".join(ALPHABET[code_of(tile)] for tile in tiles)


def decode_codes(text: str | bytes) -> np.ndarray:
    """Return the 6-bit codes of the characters in text as a uint8 array.
    Raises InvalidCharacterError on the first byte that does not stand for a tile.
    """
    data = np.frombuffer(_to_bytes(text), dtype=np.uint8)
    codes = REVERSE_TABLE[data]
    invalid = np.flatnonzero(codes < 0)
    if invalid.size > 0:
        position = int(invalid[0])
        raise InvalidCharacterError(int(data[position]), position)
    return codes.astype(np.uint8)


def decode(text: str | bytes) -> list[Tile]:
    """Return the hand written in text.
    Every byte must be an alphabet character whose code belongs to a tile,
    otherwise InvalidCharacterError is raised for the first offending byte.
    """
    tiles = []
    for position, byte in enumerate(_to_bytes(text)):
        code = int(REVERSE_TABLE[byte])
        if code < 0:
            raise InvalidCharacterError(byte, position)
        tiles.append(CODE_TO_TILE[code])
    return tiles


def encode_codes(tiles: Iterable[Tile]) -> np.ndarray:
    return np.fromiter((code_of(tile) for tile in tiles), dtype=np.uint8)


def is_valid(text: str | bytes) -> bool:
    try:
        decode(text)
    except DecodeError:
        return False
    return True
