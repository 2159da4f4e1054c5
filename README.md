# aoc24

Solvers for twenty days of a 2024 programming puzzle calendar, plus the
small toolkit they share: a generic 2D `Grid`, line and grid readers, and
number helpers. Pure Python, no runtime dependencies, Python 3.10 or later.

## Install

```
pip install .
pip install ".[test]"   # with pytest
```

## Shared helpers

- `aoc24.grid`: `Coords` (a named `(x, y)` tuple), `WithCoords` (a value with
  its position, exposing `.x` and `.y`), and `Grid(width, height, items)`.
  A `Grid` iterates over its cells in row order as `WithCoords`, and offers
  `get(x, y, default)` (returns `default` outside the grid), `set(x, y, value)`
  (raises `IndexError` outside the grid), `in_bounds`, `clone`, `find`,
  `find_all`, `around(x, y, deltas)` and `render(charfunc)`, which returns the
  grid as text. `deltas4` and `deltas8` give the 4 or 8 neighbours of a cell.
- `aoc24.inputs`: `read_input(source, parse)` yields `parse(line)` for each
  line of a string or an open text file; `nums_line` splits a line into
  integers; `read_grid(source, make_value)` returns `(width, height, cells)`
  from the non-empty lines, ready for `Grid`, and raises `ValueError` when
  there are no rows.
- `aoc24.nums`: `abs_diff`, `must_parse` (strict integer parsing, raises
  `ValueError`), `num_digits`, `modulo`, `make_set`, `join_ints`
  (comma-separated).

## The days

| Module | What it offers |
|---|---|
| `aoc24.day01` | `diff_lists`, `diff_map` |
| `aoc24.day02` | `is_safe_damped(levels, errors)`, `pluck` |
| `aoc24.day03` | `parse_iter` yielding `Cmd`, `mul_sum`, `mul_sum_toggle` |
| `aoc24.day04` | `search_dir`, `find_words_dir`, `search_xmas` |
| `aoc24.day05` | `PrintQueue` with `validate` and `fix`, `tuples_to_rules` |
| `aoc24.day06` | `Dir`, `Walker.walk` returning the visited count and whether the guard left the map |
| `aoc24.day07` | `Task`, `Op`, `match_expr` |
| `aoc24.day08` | `permute`, `mirrors`, `propagate_signal` |
| `aoc24.day09` | `Fragment`, `checksum`, `file_iter`, `file_iter2`, `clear_file`, `find_hole`, `reverse_files` |
| `aoc24.day10` | `TrailPos`, `walk_trail`, `trail_rating` |
| `aoc24.day11` | `rule_zero`, `rule_even`, `rule_default`, `DEFAULT_RULES`, `apply_rules`, `apply_rule_steps`, `CountState`, `count_stones` |
| `aoc24.day12` | `Plot`, `Wall`, `flood_fill`, `calc_total_perimeter`, `calc_total_walls` |
| `aoc24.day13` | `Button`, `Target`, `Machine`, `cramers_rule`, `calc_tokens` |
| `aoc24.day14` | `Bot`, `Space.run`, `quadrant_count`, `signal_detect`, `render_space` |
| `aoc24.day15` | `Warehouse` with `move` and `render`, `move`, `next_positions`, `sum_gps` |
| `aoc24.day16` | `MazeRunner` with `run` and `affected_count` |
| `aoc24.day17` | `VM` with `run`, `combo` and `out`, `code_breaker` |
| `aoc24.day18` | `Finder.walk` |
| `aoc24.day19` | `count_arrangements` |
| `aoc24.day20` | `Solver` with `prepare` and `count_cheats` |

## Examples

```python
from aoc24.grid import Grid
from aoc24.inputs import read_grid
from aoc24.day04 import search_dir, search_xmas

with open("input.txt") as fh:
    width, height, cells = read_grid(fh, lambda c: c)
grid = Grid(width, height, cells)

print(search_dir(grid, "XMAS"))
print(search_xmas(grid))
```

```python
from aoc24.day11 import DEFAULT_RULES, CountState, count_stones

state = CountState(rules=DEFAULT_RULES, stride=1)
print(count_stones([125, 17], state, 25))  # 55312
```

```python
from aoc24.day17 import VM, code_breaker
from aoc24.nums import join_ints

vm = VM([0, 1, 5, 4, 3, 0], 2024, 0, 0)
vm.run()
print(join_ints(vm.out))

print(min(code_breaker(0, [0, 3, 5, 4, 3, 0], 1)))  # 117440
```

## What it does not do

There is no command-line program: everything is called from Python. The
package does not fetch puzzle inputs, and apart from the generic readers in
`aoc24.inputs` it does not parse each day's input format; you build the
`Task`, `Machine`, `Bot`, `Warehouse`, `Fragment` and other values yourself.

## Tests

```
pytest
```