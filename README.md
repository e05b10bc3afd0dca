# catfarm

The window-independent core of a small cat-farm tower defense game:
save files, the leaderboard, sprite loading and animation, and the
choice of which screen to open.

## Modules

- `catfarm.user`: the `User` dataclass (name, password, score; the name
  defaults to `"guess"`).
- `catfarm.savegame`: the `SaveGame` dataclass and `Point`, the binary
  save format (`encode_save` / `decode_save`), the slot file for each map
  (`save_path`, giving `SaveMap1.catfam` … `SaveMap4.catfam` in a storage
  directory) and `write_map_save`, which replaces a slot's file.
  `encode_save` raises `ValueError` when the per-enemy, per-tower or
  per-phase lists do not agree in length; `decode_save` raises
  `ValueError` on truncated data.
- `catfarm.savestore`: reading saves back. `read_map` and
  `read_map_info` read one slot (a missing file gives a default
  `SaveGame`); `decode_save_stream` yields the saves stored back to back
  in one buffer; `SaveGameSupport` reads the combined file
  `AllSaveGame.catfam` and offers `load_four_latest_map_games` and
  `load_four_highest_score`.
- `catfarm.leaderboard`: `Leaderboard` reads and appends
  `LeaderBoard.catfarm`, keeps users sorted by score, and
  `top_entries(limit)` returns ranked lines such as `"1. name 100"`, or
  `["There are no user"]` when the file is absent.
- `catfarm.graphics` (Pillow): `load_bitmap_image` enlarges an image by
  repeating pixels, `glyph_filename` and `compose_text` build text from
  per-character glyph images, `bitmap_size` gives an image's size.
- `catfarm.animation`: `Animation` cycles frames on a timer, `VFX` plays
  its frames once, `AnimationManager` updates effects and drops finished
  ones.
- `catfarm.game`: `GameConfig` with the window defaults (1280×720,
  "Cat-farm Tower Defense") and `resolve_screen`, which maps a screen
  index to a `ScreenRequest`: 0 is the main menu, 1–4 start maps 1–4,
  5–8 continue maps 1–4 from their saves; other indexes raise
  `ValueError`.
- `catfarm.gamemanager`: `get_game_manager()` returns the shared
  `GameManager` holding the `first_start_game` flag.
- `catfarm.utils`: `create_file` and `create_folder`.

## Example

```python
from catfarm.game import resolve_screen
from catfarm.savegame import Point, SaveGame, write_map_save
from catfarm.savestore import read_map_info

request = resolve_screen(6)          # map 2, resumed
game = SaveGame(user_name="cat", point=120, map_code=2,
                tower_pos=[Point(3, 4)], tower_type=[1])
write_map_save(game, 2, "Storage")
assert read_map_info(2, "Storage").point == 120
```

## What this package does not do

It opens no window and has no game loop, no map screens, no enemies or
towers in play, no menu widgets, no sound and no font handling. It
provides no command to run. A program that shows the game builds those
parts on top of these modules.

## Tests

The test suite uses pytest and is installed with the `test` extra.