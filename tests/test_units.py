import pygame
import pytest

from parallelrts.player import Player
from parallelrts.resources import IRON_ORE, WHEAT
from parallelrts.tilemap import TileMap
from parallelrts.units import Knight, Merchant, Peasant


@pytest.fixture
def tile_map(tmp_path):
    tiles = [[0, 0, 0], [0, TileMap.NUM_TILES, 0], [0, 0, TileMap.NUM_TILES + 2]]
    lines = ["3", "3"] + [" ".join(map(str, row)) for row in tiles] + ["0 0 0"] * 3
    path = tmp_path / "map.ptm"
    path.write_text("\n".join(lines) + "\n")
    result = TileMap(64, 32)
    result.load_tile_map(path)
    return result


def test_unit_names_and_health():
    peasant = Peasant(None, None, 20, 0, 0, 0, 0)
    knight = Knight(None, 20, 0, 0, 0, 0)
    merchant = Merchant(None, 20, 0, 0, 0, 0)
    assert [u.type_name for u in (peasant, knight, merchant)] == ["Peasant", "Knight", "Merchant"]
    for unit in (peasant, knight, merchant):
        assert unit.current_hp == unit.max_hp
    assert knight.max_hp == 100
    assert knight.atk == 15
    assert knight.atk > peasant.atk and knight.defense > peasant.defense
    assert (merchant.max_hp, merchant.atk, merchant.defense) == (
        peasant.max_hp, peasant.atk, peasant.defense)


def test_peasant_harvests_general_resource_once_per_second(tile_map):
    player = Player()
    peasant = Peasant(tile_map, player, 20, 0, 0, 0, 0)
    assert peasant.set_position(1, 1)
    for _ in range(59):
        peasant.update()
    assert player.food == 0
    peasant.update()
    assert player.food == WHEAT.yield_amount
    for _ in range(60):
        peasant.update()
    assert player.food == 2 * WHEAT.yield_amount


def test_peasant_harvests_misc_item(tile_map):
    player = Player()
    peasant = Peasant(tile_map, player, 20, 0, 0, 0, 0)
    peasant.set_position(2, 2)
    for _ in range(60):
        peasant.update()
    assert player.inventory.has_item(IRON_ORE.name)


def test_peasant_on_plain_tile_harvests_nothing(tile_map):
    player = Player()
    peasant = Peasant(tile_map, player, 20, 0, 0, 0, 0)
    peasant.set_position(0, 0)
    for _ in range(120):
        peasant.update()
    assert (player.food, player.gold, player.stone, player.wood) == (0, 0, 0, 0)
    assert not player.inventory.has_items()


def test_clone_keeps_type_and_player(tile_map):
    player = Player()
    peasant = Peasant(tile_map, player, 20, 1, 2, 3, 4)
    duplicate = peasant.clone()
    assert isinstance(duplicate, Peasant)
    assert duplicate is not peasant
    assert duplicate.player is player
    assert duplicate.food_cost == peasant.food_cost
    knight = Knight(tile_map, 20, 0, 0, 0, 0).clone()
    assert isinstance(knight, Knight)


def test_peasant_render_offsets_sprite(tile_map):
    image = pygame.Surface((4, 4))
    image.fill((255, 0, 0))
    peasant = Peasant(tile_map, None, 20, 0, 0, 0, 0, 0, 20, image)
    surface = pygame.Surface((200, 200))
    surface.fill((255, 255, 255))
    peasant.render(surface, None)
    offset = tile_map.tile_width // 3
    assert tuple(surface.get_at((offset, 20)))[:3] == (255, 0, 0)
    assert tuple(surface.get_at((0, 20)))[:3] == (255, 255, 255)


def test_knight_render_draws_at_position(tile_map):
    image = pygame.Surface((4, 4))
    image.fill((0, 0, 255))
    knight = Knight(tile_map, 20, 0, 0, 0, 0, 5, 20, image)
    surface = pygame.Surface((200, 200))
    surface.fill((255, 255, 255))
    knight.render(surface, None)
    assert tuple(surface.get_at((5, 20)))[:3] == (0, 0, 255)