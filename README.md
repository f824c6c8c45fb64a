# parallelrts

An isometric real-time strategy game built on pygame. You place buildings
on a tile map, queue units for training, move them about, fight with them,
and harvest the resource tiles they stand on.

## Installing

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Playing

```
parallelrts
```

The window is 1280 × 720 and runs at 60 frames per second. Options:

- `--assets DIR`: directory holding `images/`, `data/` and the font
  `basicfont.ttf` (default: the current directory). Without the font file
  pygame's default font is used.
- `--map PATH`: tile map file, relative to the asset directory unless
  absolute (default: `data/tilemap.ptm`).
- `--frames N`: stop after `N` frames.

Every image listed in `parallelrts.assets.DEFAULT_IMAGES` must be present
under the asset directory; a missing one raises `FileNotFoundError`.

### Controls

- `W`, `A`, `S`, `D`: move the camera. It slides along the edges of the
  diamond-shaped map instead of leaving it.
- Left click: press menu buttons, select a building or unit, place a building.
  A click registers when the button is released.
- Right click with a unit selected: move it to the nearest free tile around
  the one clicked, or attack the unit on that tile. Both units lose hit
  points (the attacker's attack and the defender's defence); a unit that
  drops to zero is removed.
- `Esc`: stop placing a building.

### Gameplay

- The button below the flag (top left) opens the production window, which
  offers a Castle (500 stone, 200 gold), a Towncenter (300 stone, 300 wood)
  and a Market (300 stone, 300 wood). Each cost is taken from the inventory
  when the player holds enough of it; a cost the player cannot cover is
  skipped. The chosen building follows the cursor, tinted red where it cannot
  stand (off the map, on blocked, occupied or resource tiles); click to place it.
- Clicking a placed building opens its window on the right. A Towncenter
  trains Peasants, a Castle Knights and a Market Merchants. The queue holds
  up to eleven units; each takes ten seconds and then appears on the nearest
  free tile. Clicking a queued unit cancels it.
- A Peasant standing on a resource tile harvests it once a second: wheat and
  rice add food, iron adds an iron item.
- The button at the top right opens the inventory of special items. A new
  game starts with three iron and one cloth.
- Hovering over a resource tile or a unit shows a popup describing it.

## What it does not do

There are no opponents or computer players, no victory or defeat, and no
saving or loading of games. The overview window (the flag button) is an empty
panel, and buildings do not take damage in play.

## Map files

A map is a plain-text file: the number of columns on the first line, the
number of rows on the second, then `rows × cols` tile ids, then
`rows × cols` collision values (`0` normal, `1` blocked), each grid row by
row and separated by whitespace. Tile ids below 5 are drawn from the tile
sheet; 5, 6 and 7 are wheat, rice and iron resource tiles.

## Using it as a library

The game rules can be used without opening a window:

```python
from parallelrts.tilemap import TileMap

tiles = TileMap(64, 32)
tiles.load_tile_map("data/tilemap.ptm")
print(tiles.screen_to_iso(300, 200))   # Vector2(x=col, y=row)
```

- `parallelrts.inventory.Inventory` holds food, gold, wood and stone and
  stacks of items; removing more than is held raises
  `InsufficientResourcesError`.
- `parallelrts.player.Player` holds an inventory and the units on the map.
- `parallelrts.buildinglist.BuildingList` places buildings and keeps them in
  drawing order.
- `parallelrts.camera.Camera` scrolls over a `TileMap`.
- `parallelrts.gsm.StateManager` keeps a stack of `State` objects;
  `parallelrts.playstate.PlayState` is the play screen and
  `parallelrts.display.run` the main loop.