from enum import IntEnum


class Suit(IntEnum):
    """Numbered suits, valued by their base in the 6-bit code space"""
    DOTS = 0x10
    BAMBOO = 0x20
    CHARACTERS = 0x30


class Wind(IntEnum):
    SOUTH = 0x0C
    EAST = 0x1C
    NORTH = 0x2C
    WEST = 0x3C


class Dragon(IntEnum):
    WHITE = 0x0D
    RED = 0x1D
    GREEN = 0x2D


RED_FIVE = 0xA  # rank value of the red-five variant
MAX_RANK = RED_FIVE
RANK_MASK = 0xF
CODE_MASK = 0x3F

# standard Base64 alphabet, indexed by code value
ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"

SUIT_NAMES = {Suit.CHARACTERS: "m", Suit.DOTS: "p", Suit.BAMBOO: "s"}
WIND_NAMES = {Wind.EAST: "E", Wind.SOUTH: "S", Wind.WEST: "W", Wind.NORTH: "N"}
DRAGON_NAMES = {Dragon.WHITE: "P", Dragon.GREEN: "F", Dragon.RED: "C"}
RED_FIVE_SUFFIX = "r"
