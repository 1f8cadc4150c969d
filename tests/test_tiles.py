from pytest import fixture, raises

from mjcodec.constants import RED_FIVE, Dragon, Suit, Wind
from mjcodec.tiles import (
    DragonTile, NumberedTile, WindTile, all_tiles, bamboo, characters, code_of, dots, dragon, hand_to_names,
    name_to_tile, names_to_hand, tile_from_code, tile_to_name, tile_to_unicode, wind
)


@fixture
def tiles():
    return all_tiles()


@fixture
def names():
    return tuple([str(i) + suit for suit in ["p", "s", "m"] for i in range(10)] +
                 ["S", "E", "N", "W", "P", "C", "F"])


def test_all_tiles_count(tiles):
    assert len(tiles) == 37
    assert len(all_tiles(red_fives=True)) == 40


def test_no_value_above_0x3f():
    for tile in all_tiles(red_fives=True):
        assert 0 <= code_of(tile) <= 0x3F


def test_no_duplicate_values():
    codes = [code_of(tile) for tile in all_tiles(red_fives=True)]
    assert len(codes) == len(set(codes))


def test_code_of_numbered():
    assert code_of(dots(0)) == 0x10
    assert code_of(dots(9)) == 0x19
    assert code_of(bamboo(1)) == 0x21
    assert code_of(characters(7)) == 0x37
    assert code_of(dots(10)) == 0x1A
    assert code_of(bamboo(RED_FIVE)) == 0x2A
    assert code_of(characters(RED_FIVE)) == 0x3A


def test_code_of_honors():
    assert code_of(wind(Wind.SOUTH)) == 0x0C
    assert code_of(wind(Wind.EAST)) == 0x1C
    assert code_of(wind(Wind.NORTH)) == 0x2C
    assert code_of(wind(Wind.WEST)) == 0x3C
    assert code_of(dragon(Dragon.WHITE)) == 0x0D
    assert code_of(dragon(Dragon.RED)) == 0x1D
    assert code_of(dragon(Dragon.GREEN)) == 0x2D


def test_code_property():
    assert dots(4).code == 0x14
    assert WindTile(Wind.WEST).code == 0x3C
    assert DragonTile(Dragon.GREEN).code == 0x2D


def test_code_of_rejects_non_tile():
    with raises(TypeError):
        code_of(0x14)


def test_rank_out_of_range():
    with raises(ValueError):
        dots(0x1A)
    with raises(ValueError):
        bamboo(11)
    with raises(ValueError):
        characters(-1)
    with raises(ValueError):
        NumberedTile(Suit.DOTS, "5")
    with raises(ValueError):
        dots(True)
    with raises(ValueError):
        NumberedTile(Suit.BAMBOO, 0xB)


def test_invalid_variant():
    with raises(ValueError):
        NumberedTile(0x10, 1)
    with raises(ValueError):
        WindTile(Dragon.RED)
    with raises(ValueError):
        DragonTile(Wind.EAST)


def test_tiles_are_values():
    assert dots(5) == NumberedTile(Suit.DOTS, 5)
    assert dots(5) != dots(RED_FIVE)
    assert len({wind(Wind.EAST), WindTile(Wind.EAST)}) == 1


def test_tile_from_code(tiles):
    assert [tile_from_code(code_of(tile)) for tile in tiles] == tiles
    assert tile_from_code(0x1A) == dots(RED_FIVE)
    with raises(ValueError):
        tile_from_code(0x00)
    with raises(ValueError):
        tile_from_code(0x1B)


def test_tile_to_name(tiles, names):
    assert tuple(tile_to_name(tile) for tile in tiles) == names
    assert tile_to_name(dots(RED_FIVE)) == "5pr"
    assert str(characters(3)) == "3m"


def test_name_to_tile(tiles, names):
    assert [name_to_tile(name) for name in names] == tiles
    assert name_to_tile("5sr") == bamboo(RED_FIVE)


def test_name_to_tile_invalid():
    for name in ["", "5", "5x", "10m", "4mr", "Z", "mm", "5m "]:
        with raises(ValueError):
            name_to_tile(name)


def test_hand_names():
    hand = [characters(1), dots(RED_FIVE), wind(Wind.EAST), dragon(Dragon.WHITE)]
    assert hand_to_names(hand) == "1m 5pr E P"
    assert names_to_hand("1m  5pr E\tP") == hand
    assert names_to_hand("") == []


def test_tile_to_unicode():
    assert tile_to_unicode(characters(1)) == chr(0x1f007)
    assert tile_to_unicode(bamboo(9)) == chr(0x1f018)
    assert tile_to_unicode(dots(1)) == chr(0x1f019)
    assert tile_to_unicode(dots(RED_FIVE)) == tile_to_unicode(dots(5))
    assert tile_to_unicode(wind(Wind.EAST)) == chr(0x1f000)
    assert tile_to_unicode(wind(Wind.NORTH)) == chr(0x1f003)
    assert tile_to_unicode(dragon(Dragon.RED)) == chr(0x1f004)
    assert tile_to_unicode(dragon(Dragon.WHITE)) == chr(0x1f006)
    with raises(ValueError):
        tile_to_unicode(dots(0))
