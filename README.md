# dronefarm

`dronefarm` models a small crop-spraying simulation. A field is a grid. Houses on the field are drone bases. Drones fly routes over the sick plants. Pesticides are kept as small fixed-size records.

The package is plain Python with no runtime dependencies.

## Modules

### `dronefarm.fieldgrid`

`FieldGrid` holds the 21 × 26 cell values of a field. Row 0 is the bottom row on screen. The cell codes are:

| Value | Meaning |
|-------|---------|
| 0 | empty |
| 1 | farmland |
| 2 | water |
| 3–6 | houses |
| 10–99 | crops |

A crop whose value is not a multiple of ten is sick.

- `FieldGrid.load(path)` reads a field file. The file holds the 546 cells row by row, each as a 16-bit little-endian signed integer. A missing file gives an all-zero grid. A short file leaves the remaining cells at 0.
- `FieldGrid.save(path)` writes the grid in that format.
- `cell_at_screen(x, y)` maps a screen point inside the drawing area to `(row, column)`. It raises `ValueError` for a point outside the area.
- `screen_origin(i, j)` returns the top-left screen corner of a cell.
- `houses()` returns the house positions in grid order.
- `place_house(i, j)` builds a house on farmland and numbers it 3, 4, 5 or 6. It returns `False` if the cell is not farmland or four houses already stand.
- `clear_houses()` turns every house back into farmland and returns where the houses stood.

### `dronefarm.planner`

These functions take screen points, as `Point(x, y)`, and a record: a sequence of rows of cell values, such as `FieldGrid.cells`.

- **Geometry:** `distance`, `relative_position` (which side of line AB a point lies on) and `projection` (the signed projection of AC onto AB).
- **Grid to screen:** `x_record_to_screen` and `y_record_to_screen` convert grid coordinates to screen coordinates for the drone sprite.
- **`interpolate(x1, y1, x2, y2)`** gives the frame positions of one drone flying between two points.
- **`hand_route_segments(route)`** splits a hand-drawn route into legs. It stops at a point whose x is -1.
- **`detect_route(record, start)`** builds an inspection flight. It goes from the start over every cell valued 10 or more, in grid order, and back to the start.
- **`spray_routes(record, count)`** plans routes for `count` drones, one per house:
  - Drones take turns claiming the sick plant nearest to where each one last stopped.
  - Each route then returns to its house.
  - Every sick cell in the record drops by one in place.
  - With nothing to spray, it returns `[]` and leaves the record untouched.
  - It raises `ValueError` when `count` is below 1 or above the number of houses.
- **`spray_frames(routes)`** yields animation frames of all drones flying at once. Each frame is a dict from drone index to its position.
- **`one_round_route(record, start)`** builds a single loop around the sick plants:
  - The farthest sick plant fixes a line from the start.
  - The loop sweeps the plants on one side of that line, then the plants on the other side.
  - It ends back at the start.

### `dronefarm.pesticide`

`Pesticide` has three fields: `name`, `period` and `pest_style`.

- **`to_bytes()` / `Pesticide.from_bytes(data)`** convert to and from a 40-byte record. The record holds three NUL-padded fields of 10, 10 and 20 bytes.
- **`is_complete()`** tells whether all three fields are filled.
- **`validate_period(period)`** accepts only decimal digits.
- **`PesticideStore(root, username)`** works in `root/username/PESTICIDE`. It creates that directory, but the user's directory must already exist.
  - `save(pesticide)` writes a complete pesticide to `<name>.dat`.
  - `load(filename)` reads a pesticide back from a file.
  - `list_files()` returns the file names, sorted, at most 20 of them.

### `dronefarm.widgets`

Geometry of the pixel-style interface elements, returned as lists of `Rect`:

- `printline` gives the blocks of a dashed line.
- `printbox` gives the blocks of a dashed frame.
- `dropdown_regions` gives the item hit areas of a drop-down menu. The menu opens upwards when it would reach the bottom of the screen.
- `Rect.contains(x, y)` tests whether a point lies strictly inside the rectangle.
- `truncate(text, length)` cuts text at `length` characters and marks the cut with `~`.

### `dronefarm.farewell`

`thank_you_frames(count=300)` yields the frames of the closing animation, as `(text, colour, clears_screen)`. The word "THANKYOU" grows one letter per frame. The colours cycle from 2 to 15.

### `dronefarm.constants`

Holds the shared enumerations `Page`, `Language`, `ButtonState`, `CropStage` and `Health`. It also holds the grid size and the fixed limits.

## Example

```python
from dronefarm.fieldgrid import FieldGrid
from dronefarm.planner import spray_routes

grid = FieldGrid()
grid.cells[0][0] = 1
grid.place_house(0, 0)         # cell becomes 3, the first house
grid.cells[5][5] = 11          # a sick rice plant

routes = spray_routes(grid.cells, 1)
print(routes[0])               # house (110, 450) -> plant (210, 350) -> house
print(grid.cells[5][5])        # 10: sprayed
```

## What it does not do

This package is a library only:

- It has no command to run.
- It opens no window and draws nothing. It computes positions, routes and frames that a front end could draw.
- It keeps no user accounts and renders no fonts.
- It offers no helpers for planting or removing crops. Change `FieldGrid.cells` directly.
- It does not browse stored pesticides page by page. `PesticideStore.list_files` is the only listing.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```