# keylyze

Building blocks for working with keyboard layouts. The package uses only the
standard library.

## Modules

| Module | What it holds |
| --- | --- |
| `keylyze.geometry` | `PhysicalKey`, `minmax_x`, `minmax_y` |
| `keylyze.weights` | `FingerWeights`, `Weights` (with `from_mapping`, `to_dict`, `with_value`) |
| `keylyze.search` | `jaro`, `jaro_winkler`, `search`, `layout_names` |
| `keylyze.pages` | `HeatmapData`, `Paginator`, `tool_slug` |
| `keylyze.analysis_view` | `format_stat`, `swap_keys`, `layout_key_boxes`, `Pins` |
| `keylyze.metadata` | `MetadataPanel` |
| `keylyze.report` | `ReplStatus`, `UnknownLayoutError`, `TrigramStats`, `pin_positions`, `format_trigrams`, `rank_lines`, `format_finger_values` |
| `keylyze.corpus` | `CorpusInput`, `CorpusDataSettings`, `apply_chars_edit`, `total_bytes` |

## Examples

Key geometry and rendered key boxes:

```python
from keylyze.geometry import PhysicalKey, minmax_x
from keylyze.analysis_view import layout_key_boxes

keys = [PhysicalKey(0, 0), PhysicalKey(1, 0), PhysicalKey(0, 1, width=2)]
minmax_x(keys)               # (0, 2)
layout_key_boxes(keys)       # boxes in percent of the rendered board
```

`layout_key_boxes` raises `ValueError` when the keys span no width or no height.

Scoring weights:

```python
from keylyze.weights import Weights

weights = Weights.from_mapping({"sfbs": -9, "fingers": {"lp": 80}})
weights.with_value("inroll", "6").inroll   # 6
weights.with_value("inroll", "abc")        # unchanged: not a whole number
weights.to_dict()
```

Unknown weight names and non-integer values given to `from_mapping` raise `ValueError`.

Searching layout names:

```python
from keylyze.search import search, layout_names

search(["Dvorak", "Colemak", "Qwerty"], "colmak", 8)   # best matches first
layout_names(["layouts/Qwerty.dof", "layouts/colemak.dof"])  # ["colemak", "Qwerty"]
```

Names are compared case-insensitively with Jaro-Winkler similarity; only those
scoring at least 0.55 are returned.

Pagination, heatmap data and tool links:

```python
from keylyze.pages import HeatmapData, Paginator, tool_slug

pages = Paginator(names)         # 12 names per page by default
pages.page(0), pages.has_next(0)

data = HeatmapData.from_json('{"english": {"e": 12.7}}')
data.get("english", "e")         # 12.7

tool_slug("Generate corpus data")   # "generate-corpus-data"
```

Analysis view state:

```python
from keylyze.analysis_view import Pins, format_stat, swap_keys

pins = Pins()
pins.toggle(3)                   # True: position 3 is now pinned
swap_keys(["a", "b", "c"], 0, 2) # ["c", "b", "a"]
format_stat(2.5, "")             # "2.5"
```

Layout metadata, expanded to show missing entries as `Unknown`:

```python
from keylyze.metadata import MetadataPanel

panel = MetadataPanel(name="Qwerty", year=1878)
panel.rows()     # [("Name", "Qwerty"), ("Year", "1878"), ("Languages", "")]
panel.toggle()
panel.rows()     # every row, missing ones as "Unknown"
```

Text reports:

```python
from keylyze.report import TrigramStats, format_trigrams, pin_positions, rank_lines

pin_positions(list("qwerty"), "e")           # [2]
format_trigrams(TrigramStats(inroll=12.5))   # ["Inroll:       12.500%"]
rank_lines({"qwerty": 3, "dvorak": 7})       # lowest score first
```

Corpus settings:

```python
from keylyze.corpus import CorpusDataSettings, CorpusInput, apply_chars_edit, total_bytes

settings = CorpusDataSettings(include_tab=True)
settings.cleaner_chars()         # letters, then " \t"
apply_chars_edit("abc", "abcd")  # "abcd"
total_bytes([CorpusInput("a.txt", "héllo")])   # 6
```

## What the package does not do

The package holds data types, formatting and state helpers only. It does not
compute layout scores or statistics itself, does not clean corpora or count
their frequencies, has no interactive command loop or command-line program, does
not load configuration files, and renders no web pages or posts. `keylyze.report`
formats results that are produced elsewhere.

## Tests

The tests use pytest and live in `tests/`.