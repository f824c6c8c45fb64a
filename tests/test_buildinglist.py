import pygame
import pytest

from parallelrts.assets import AssetManager
from parallelrts.buildinglist import BuildingList
from parallelrts.buildings import Market
from parallelrts.player import Player
from parallelrts.tilemap import TileMap
from parallelrts.units import Knight

SIZE = 12


def _write_map(path, tiles=None, collision=None):
    tiles = tiles or {}
    collision = collision or {}
    lines = [str(SIZE), str(SIZE)]
    for grid in (tiles, collision):
        for row in range(SIZE):
            lines.append(" ".join(str(grid.get((row, col), 0)) for col in range(SIZE)))
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def _make_map(tmp_path, **grids):
    tile_map = TileMap(64, 32)
    tile_map.load_tile_map(_write_map(tmp_path / "map.ptm", **grids))
    return tile_map


@pytest.fixture
def assets(tmp_path):
    manager = AssetManager(tmp_path)
    image = pygame.Surface((240, 195))
    image.fill((255, 255, 255))
    manager.add_image("market", image)
    return manager


@pytest.fixture
def ticks():
    return [0]


@pytest.fixture
def template(assets, ticks):
    return Market(-1, assets, lambda: ticks[0])


def _at(building_list, row, col):
    building_list.row = row
    building_list.col = col
    return building_list


def test_placing_too_close_to_the_edge_is_blocked(tmp_path, assets, template):
    building_list = _at(BuildingList(_make_map(tmp_path), assets), 0, 0)
    assert building_list.check_placing_bounds(template) is True
    assert (template.row, template.col) == (0, 0)


def test_free_spot_can_be_placed(tmp_path, assets, template):
    building_list = _at(BuildingList(_make_map(tmp_path), assets), 8, 8)
    assert building_list.check_placing_bounds(template) is False


def test_blocked_tile_in_footprint(tmp_path, assets, template):
    building_list = _at(BuildingList(_make_map(tmp_path, collision={(6, 6): 1}), assets), 8, 8)
    assert building_list.check_placing_bounds(template) is True


def test_resource_tile_in_footprint(tmp_path, assets, template):
    building_list = _at(BuildingList(_make_map(tmp_path, tiles={(5, 5): 5}), assets), 8, 8)
    assert building_list.check_placing_bounds(template) is True


def test_update_places_a_new_building_and_occupies_tiles(tmp_path, assets, template):
    tile_map = _make_map(tmp_path)
    building_list = _at(BuildingList(tile_map, assets), 8, 8)
    player = Player()
    placed = building_list.update(template, player)
    assert placed is not template
    assert isinstance(placed, Market)
    assert placed.player is player
    assert len(building_list) == 1
    assert building_list.current_building is placed
    assert all(
        tile_map.check_occupied(row, col)
        for row in range(placed.top_row, placed.row + 1)
        for col in range(placed.top_col, placed.col + 1)
    )
    assert tile_map.check_occupied(placed.row + 1, placed.col) is False
    assert building_list.check_placing_bounds(template) is True


def test_ids_follow_insertion(tmp_path, assets, template):
    building_list = BuildingList(_make_map(tmp_path), assets)
    first = _at(building_list, 8, 8).update(template, Player())
    second = _at(building_list, 4, 11).update(template, Player())
    assert (first.building_id, second.building_id) == (0, 1)


def test_building_in_front(tmp_path, assets, ticks):
    building_list = BuildingList(_make_map(tmp_path), assets)
    front = Market(0, assets, lambda: ticks[0])
    back = Market(1, assets, lambda: ticks[0])
    front.row, front.col = 10, 5
    back.row, back.col = 3, 5
    assert building_list.is_building1_in_front(front, back) is True
    assert building_list.is_building1_in_front(back, front) is False


def test_add_building_keeps_drawing_order(tmp_path, assets, ticks):
    building_list = BuildingList(_make_map(tmp_path), assets)
    front = Market(0, assets, lambda: ticks[0])
    back = Market(1, assets, lambda: ticks[0])
    front.row, front.col = 10, 5
    back.row, back.col = 3, 5
    building_list.add_building(front)
    building_list.add_building(back)
    assert building_list.buildings == [back, front]


def test_building_at(tmp_path, assets, template):
    building_list = _at(BuildingList(_make_map(tmp_path), assets), 8, 8)
    placed = building_list.update(template, Player())
    assert building_list.building_at(placed.col, placed.row) is placed
    assert building_list.building_at(placed.top_col, placed.top_row) is placed
    assert building_list.building_at(0, 0) is None


def test_pop_and_clear(tmp_path, assets, template):
    building_list = BuildingList(_make_map(tmp_path), assets)
    _at(building_list, 8, 8).update(template, Player())
    _at(building_list, 4, 11).update(template, Player())
    building_list.pop_building(0)
    assert len(building_list) == 1
    building_list.clear()
    assert building_list.buildings == []


def test_pop_missing_index(tmp_path, assets):
    with pytest.raises(IndexError):
        BuildingList(_make_map(tmp_path), assets).pop_building(0)


def test_render_draws_buildings(tmp_path, assets, template):
    building_list = _at(BuildingList(_make_map(tmp_path), assets), 8, 8)
    building_list.x, building_list.y = 5, 7
    building_list.update(template, Player())
    surface = pygame.Surface((600, 600))
    building_list.render(surface)
    assert tuple(surface.get_at((5, 7)))[:3] == (255, 255, 255)
    assert tuple(surface.get_at((4, 7)))[:3] == (0, 0, 0)


def test_placing_building_plain_when_free(tmp_path, assets, template):
    building_list = _at(BuildingList(_make_map(tmp_path), assets), 8, 8)
    surface = pygame.Surface((300, 300))
    assert building_list.placing_building(surface, template, 0, 0) is False
    assert tuple(surface.get_at((1, 1)))[:3] == (255, 255, 255)


def test_placing_building_tinted_when_blocked(tmp_path, assets, template):
    building_list = _at(BuildingList(_make_map(tmp_path), assets), 0, 0)
    surface = pygame.Surface((300, 300))
    assert building_list.placing_building(surface, template, 0, 0) is True
    red, green, blue = tuple(surface.get_at((1, 1)))[:3]
    assert red > green
    assert green == blue


def test_produce_units_spawns_next_to_building(tmp_path, assets, template, ticks):
    tile_map = _make_map(tmp_path)
    building_list = _at(BuildingList(tile_map, assets), 8, 8)
    player = Player()
    placed = building_list.update(template, player)
    knight = Knight(tile_map, 20, 0, 0, 0, 0)
    placed.add_unit(knight)
    ticks[0] = 1000
    building_list.produce_units()
    assert placed.unit_queue == []
    assert player.entity_in_tile(knight.row, knight.col) is knight
    assert building_list.building_at(knight.col, knight.row) is None