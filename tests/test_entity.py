import pygame
import pytest

from parallelrts.assets import AssetManager
from parallelrts.entity import Entity
from parallelrts.tilemap import TileMap


def make_map(tmp_path, tiles, collision):
    lines = [str(len(tiles[0])), str(len(tiles))]
    lines += [" ".join(map(str, row)) for row in tiles]
    lines += [" ".join(map(str, row)) for row in collision]
    path = tmp_path / "map.ptm"
    path.write_text("\n".join(lines) + "\n")
    tile_map = TileMap(64, 32)
    tile_map.load_tile_map(path)
    return tile_map


@pytest.fixture
def tile_map(tmp_path):
    return make_map(tmp_path, [[0] * 5 for _ in range(5)], [[0] * 5 for _ in range(5)])


def make_entity(tile_map):
    return Entity(tile_map, 20, 0, 0, 0, 0, None, 0, 0)


def test_set_position_on_free_tile(tile_map):
    entity = make_entity(tile_map)
    assert entity.set_position(3, 1)
    assert (entity.row, entity.col) == (3, 1)
    assert tile_map.check_occupied(3, 1)
    screen = tile_map.iso_to_screen(3, 1)
    assert (entity.x, entity.y) == (screen.x, screen.y)


def test_occupied_tile_sends_entity_to_neighbour(tile_map):
    tile_map.set_occupy_status(2, 2, TileMap.BLOCKED)
    entity = make_entity(tile_map)
    assert entity.find_nearest_unoccupied_pos(2, 2) == (2, 3)


def test_out_of_map_neighbours_are_skipped(tile_map):
    tile_map.set_occupy_status(0, 4, TileMap.BLOCKED)
    entity = make_entity(tile_map)
    assert entity.find_nearest_unoccupied_pos(0, 4) == (1, 4)


def test_occupied_resource_tile_counts_as_free(tmp_path):
    tiles = [[0] * 3 for _ in range(3)]
    tiles[0][0] = TileMap.NUM_TILES
    tile_map = make_map(tmp_path, tiles, [[0] * 3 for _ in range(3)])
    tile_map.set_occupy_status(0, 0, TileMap.BLOCKED)
    assert make_entity(tile_map).find_nearest_unoccupied_pos(0, 0) == (0, 0)


def test_no_free_tile_leaves_entity_in_place(tmp_path):
    tile_map = make_map(tmp_path, [[0] * 3 for _ in range(3)], [[1] * 3 for _ in range(3)])
    entity = make_entity(tile_map)
    assert entity.find_nearest_unoccupied_pos(1, 1) is None
    assert entity.set_position(1, 1) is False
    assert not tile_map.check_occupied(1, 1)


def test_move_frees_previous_tile(tile_map):
    entity = make_entity(tile_map)
    entity.set_position(1, 1)
    entity.move_to(3, 3)
    assert not tile_map.check_occupied(1, 1)
    assert tile_map.check_occupied(3, 3)
    assert (entity.row, entity.col) == (3, 3)


def test_tile_lookups_follow_position(tmp_path):
    tiles = [[0, 0], [0, TileMap.NUM_TILES + 1]]
    tile_map = make_map(tmp_path, tiles, [[0, 0], [0, 0]])
    entity = make_entity(tile_map)
    entity.set_position(1, 1)
    assert entity.tile_id() == TileMap.NUM_TILES + 1
    assert entity.tile_type() == TileMap.NORMAL


def test_lose_hp(tile_map):
    entity = make_entity(tile_map)
    entity.current_hp = entity.max_hp = 30
    entity.lose_hp(12)
    assert entity.current_hp == 30 - 12


def test_clone_is_independent(tile_map):
    entity = make_entity(tile_map)
    entity.required_items.append("item")
    entity.set_position(1, 1)
    duplicate = entity.clone()
    assert duplicate is not entity
    assert duplicate.tile_cost == entity.tile_cost
    duplicate.required_items.append("other")
    assert entity.required_items == ["item"]
    duplicate.set_position(4, 4)
    assert tile_map.check_occupied(1, 1)


def test_draw_hp_bar(tile_map):
    entity = make_entity(tile_map)
    entity.y = 10
    entity.current_hp = entity.max_hp = 10
    surface = pygame.Surface((100, 40))
    surface.fill((255, 255, 255))
    entity.draw_hp(surface)
    left = tile_map.tile_width // 4
    assert tuple(surface.get_at((left, 4)))[:3] == (0, 0, 0)
    assert tuple(surface.get_at((left + 4, 5)))[:3] == (0, 255, 0)


def test_entity_window_draws_hp_box(tmp_path, tile_map):
    from parallelrts.geometry import HEIGHT, WIDTH

    entity = make_entity(tile_map)
    entity.type_name = "Unit"
    entity.current_hp = entity.max_hp = 10
    surface = pygame.Surface((WIDTH, HEIGHT))
    surface.fill((255, 255, 255))
    entity.draw_entity_window(surface, AssetManager(tmp_path))
    assert tuple(surface.get_at((WIDTH - 100, 268)))[:3] == (0, 0, 0)