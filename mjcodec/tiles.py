"""This file defines the tile representation for this module
A tile is one of three frozen value types:
NumberedTile(suit, rank) - Dots/Bamboo/Characters, rank 0-9 or RED_FIVE (0xA)
WindTile(wind) - South, East, North, West
DragonTile(dragon) - White, Red, Green
Every tile has a unique 6-bit code (0x00-0x3F), which is what the codec
writes on the wire. For numbered tiles the high bits hold the suit base
(0x10, 0x20, 0x30) and the low nibble holds the rank. Honors use fixed codes
in the otherwise unused 0xC and 0xD columns.
The naming (string representation) of tiles follows the mjai convention:
"2m", "5s", "9p" for numbered tiles (m/p/s for Characters/Dots/Bamboo),
"5mr", "5pr", "5sr" for red fives, E/S/W/N for winds and P/F/C for the
White/Green/Red dragons.
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable

from mjcodec.constants import (
    CODE_MASK, DRAGON_NAMES, MAX_RANK, RANK_MASK, RED_FIVE, RED_FIVE_SUFFIX, SUIT_NAMES, WIND_NAMES,
    Dragon, Suit, Wind
)


@dataclass(frozen=True)
class NumberedTile:
    suit: Suit
    rank: int

    def __post_init__(self):
        if not isinstance(self.suit, Suit):
            raise ValueError(f"Invalid suit: {self.suit!r}")
        # ranks 0-9 and RED_FIVE only
        if isinstance(self.rank, bool) or not isinstance(self.rank, int) or not 0 <= self.rank <= MAX_RANK:
            raise ValueError(f"Rank must be in 0-{MAX_RANK}, got {self.rank!r}")

    @property
    def is_red_five(self) -> bool:
        return self.rank == RED_FIVE

    @property
    def code(self) -> int:
        return code_of(self)

    def __str__(self) -> str:
        return tile_to_name(self)


@dataclass(frozen=True)
class WindTile:
    wind: Wind

    def __post_init__(self):
        if not isinstance(self.wind, Wind):
            raise ValueError(f"Invalid wind: {self.wind!r}")

    @property
    def code(self) -> int:
        return code_of(self)

    def __str__(self) -> str:
        return tile_to_name(self)


@dataclass(frozen=True)
class DragonTile:
    dragon: Dragon

    def __post_init__(self):
        if not isinstance(self.dragon, Dragon):
            raise ValueError(f"Invalid dragon: {self.dragon!r}")

    @property
    def code(self) -> int:
        return code_of(self)

    def __str__(self) -> str:
        return tile_to_name(self)


Tile = NumberedTile | WindTile | DragonTile


def dots(rank: int) -> NumberedTile:
    return NumberedTile(Suit.DOTS, rank)


def bamboo(rank: int) -> NumberedTile:
    return NumberedTile(Suit.BAMBOO, rank)


def characters(rank: int) -> NumberedTile:
    return NumberedTile(Suit.CHARACTERS, rank)


def wind(w: Wind) -> WindTile:
    return WindTile(w)


def dragon(d: Dragon) -> DragonTile:
    return DragonTile(d)


def code_of(tile: Tile) -> int:
    """Return the 6-bit code of the given tile.
    Numbered tiles combine the suit base with the low nibble of the rank,
    honors map to the fixed value of their enum member.
    """
    if isinstance(tile, NumberedTile):
        return (tile.suit | (tile.rank & RANK_MASK)) & CODE_MASK
    if isinstance(tile, WindTile):
        return int(tile.wind)
    if isinstance(tile, DragonTile):
        return int(tile.dragon)
    raise TypeError(f"Not a tile: {tile!r}")


def all_tiles(red_fives: bool = False) -> list[Tile]:
    """Return every enumerable tile: ranks 0-9 of each suit, then winds and
    dragons. Red fives are appended at the end when requested.
    """
    tiles: list[Tile] = [NumberedTile(suit, rank) for suit in Suit for rank in range(10)]
    tiles.extend(WindTile(w) for w in Wind)
    tiles.extend(DragonTile(d) for d in Dragon)
    if red_fives:
        tiles.extend(NumberedTile(suit, RED_FIVE) for suit in Suit)
    return tiles


# code -> tile, only for codes that have a tile
CODE_TO_TILE = MappingProxyType({code_of(tile): tile for tile in all_tiles(red_fives=True)})


def tile_from_code(code: int) -> Tile:
    """Return the tile with the given 6-bit code."""
    if code not in CODE_TO_TILE:
        raise ValueError(f"No tile has code {code:#04x}")
    return CODE_TO_TILE[code]


_NAME_TO_SUIT = {name: suit for suit, name in SUIT_NAMES.items()}
_NAME_TO_WIND = {name: w for w, name in WIND_NAMES.items()}
_NAME_TO_DRAGON = {name: d for d, name in DRAGON_NAMES.items()}


def tile_to_name(tile: Tile) -> str:
    """Return the name of the given tile, e.g. "3m", "5pr", "E", "C"."""
    if isinstance(tile, NumberedTile):
        if tile.is_red_five:
            return "5" + SUIT_NAMES[tile.suit] + RED_FIVE_SUFFIX
        return str(tile.rank) + SUIT_NAMES[tile.suit]
    if isinstance(tile, WindTile):
        return WIND_NAMES[tile.wind]
    if isinstance(tile, DragonTile):
        return DRAGON_NAMES[tile.dragon]
    raise TypeError(f"Not a tile: {tile!r}")


def name_to_tile(name: str) -> Tile:
    """Return the tile with the given name.
    Numbered tiles are written as rank digit followed by the suit letter
    (m/p/s), with a trailing "r" for red fives ("5mr"). Honors are single
    letters: E/S/W/N for winds and P/F/C for the White/Green/Red dragons.
    """
    if name in _NAME_TO_WIND:
        return WindTile(_NAME_TO_WIND[name])
    if name in _NAME_TO_DRAGON:
        return DragonTile(_NAME_TO_DRAGON[name])
    red = name.endswith(RED_FIVE_SUFFIX)
    body = name[:-1] if red else name
    if len(body) != 2 or not body[0].isdigit() or body[1] not in _NAME_TO_SUIT:
        raise ValueError(f"Unknown tile name: {name!r}")
    rank = int(body[0])
    if red:
        if rank != 5:
            raise ValueError(f"Only fives can be red, got {name!r}")
        rank = RED_FIVE
    return NumberedTile(_NAME_TO_SUIT[body[1]], rank)


def hand_to_names(tiles: Iterable[Tile]) -> str:
    return " ".join(tile_to_name(tile) for tile in tiles)


def names_to_hand(text: str) -> list[Tile]:
    return [name_to_tile(name) for name in text.split()]


_SUIT_UNICODE_START = {Suit.CHARACTERS: 0x1f007, Suit.BAMBOO: 0x1f010, Suit.DOTS: 0x1f019}
_WIND_UNICODE = {Wind.EAST: 0x1f000, Wind.SOUTH: 0x1f001, Wind.WEST: 0x1f002, Wind.NORTH: 0x1f003}
_DRAGON_UNICODE = {Dragon.RED: 0x1f004, Dragon.GREEN: 0x1f005, Dragon.WHITE: 0x1f006}


def tile_to_unicode(tile: Tile) -> str:
    """Return the unicode character of the given tile.
    Red fives share the glyph of the plain five. Rank 0 has no glyph.
    """
    if isinstance(tile, NumberedTile):
        rank = 5 if tile.is_red_five else tile.rank
        if rank == 0:
            raise ValueError(f"No unicode character for {tile_to_name(tile)}")
        return chr(_SUIT_UNICODE_START[tile.suit] + rank - 1)
    if isinstance(tile, WindTile):
        return chr(_WIND_UNICODE[tile.wind])
    if isinstance(tile, DragonTile):
        return chr(_DRAGON_UNICODE[tile.dragon])
    raise TypeError(f"Not a tile: {tile!r}")
