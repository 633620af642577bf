# omni_palette

This package holds the logic behind a keyboard-driven command palette and its
settings window. It has no user interface. A front end supplies the drawing and
calls these modules to decide what to show and what happens on a click or a key
press.

The package uses only the standard library.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `omni_palette.palette`

This module manages the result list.

- `FilteredCommand` is one result row. It holds the index into the full command list, a score, the match ranges (`MatchRange`), and prefix/span information.
- `cap_filtered_commands(commands)` keeps the first `MAX_FILTERED_COMMANDS` (18) rows.
- `wrapped_selection_index(current, visible_count, delta)` moves the selection and wraps at both ends. It returns 0 when no rows are visible.
- `fixed_action_for_index(selected_index, visible_command_count)` handles the rows after the commands. It maps them to `FixedPaletteAction.REFRESH_EXTENSIONS` and then `FixedPaletteAction.OPEN_SETTINGS`, and returns `None` for command rows. Each action has `label()` and `id()`.
- `highlight_segments(label, ranges)` splits a label into `(text, highlighted)` pieces. Ranges that are out of bounds or empty are skipped.

### `omni_palette.toggle`

This module covers the pill-shaped toggle switch.

- `toggle_size(interact_height)` returns the `(width, height)` the toggle takes.
- `toggle_geometry(left, top, width, height, how_on)` returns a `ToggleGeometry` with the track and the knob position. `how_on` runs from 0.0 (off) to 1.0 (on).
- `flip(on)` gives the state after a click.

### `omni_palette.models`

This module holds the data types:

- Enums: `Os`, `ExtensionKind`, `ThemeMode`, `CommandBehavior` and `Key`.
- `HotkeyModifiers`, and `KeyboardShortcut`, whose `str()` gives text such as `Ctrl+Shift+P`.
- The configuration types `RuntimeConfig`, `AppearanceConfig` and `GitHubExtensionSource`. `RuntimeConfig.default_activation_shortcut()` returns Ctrl+Shift+P.
- The catalog types `CatalogEntry` and `ExtensionCatalog`.
- The extension types `BundledExtension`, `InstalledExtension` and `InstalledState`. `InstalledState.enabled_for(extension_id, source_id)` returns `None` when the extension is not recorded.
- The label helpers `os_label`, `extension_kind_badge` and `extension_enabled_label`.
- The source ids `BUNDLED_SOURCE_ID` and `GITHUB_SOURCE_ID`.

### `omni_palette.catalog_view`

This module works with the remote extension catalog.

- `validate_catalog_source(source)` raises `CatalogSourceError` (a `ValueError`) if any of owner, repo, branch or catalog path is blank. The `missing` attribute lists the blank fields.
- `filter_catalog_entries(entries, query)` matches the query against the name, id, description and keywords, ignoring case. A blank query returns every entry. `catalog_entry_matches_query` tests a single entry.
- `platform_entries(catalog, os)` and `visible_catalog_entries(catalog, os, query)` return the entries for one platform, sorted by name.
- `installed_versions_by_id(extensions)` returns the versions of installed extensions that came from the remote catalog. Bundled ones are ignored.
- `catalog_action_label(entry, installed_version)` returns `"Install"`, `"Update"` or `"Reinstall"`, or `None` for entries that are not static.
- `catalog_refresh_message(catalog, os)` returns the status text shown after a refresh.
- `extension_busy_key(extension_id, source_id)` returns `"source/id"`.

### `omni_palette.settings_layout`

This module holds the settings window's layout arithmetic and theme choices.

- `Rect` describes a rectangle.
- `setting_help_label_left` and `setting_help_icon_rect` place a setting's label and its help icon.
- `setting_help_icon_visuals` returns the icon colours, normal or hovered.
- `extension_action_area_width_for_toggle(toggle_width)` returns the width of an extension row's action area.
- `SettingsTheme` holds the colours as RGBA tuples. Given a theme:
  - `settings_text_color` picks a colour for each `SettingsTextTone`.
  - `banner_colors` picks the colours for each `BannerTone`.
  - `save_bar_status` returns the text and colour of the save bar.
- `map_key(name)` turns a UI key name such as `"A"`, `"Num1"` or `"ArrowUp"` into a `Key`.
- `capture_shortcut(events)` returns the first `KeyboardShortcut` made by a fresh key press. Each event needs `key`, `pressed`, `repeat`, `ctrl`, `shift` and `alt` attributes. The Windows key is never recorded.

## Example

```python
from omni_palette.palette import wrapped_selection_index, fixed_action_for_index
from omni_palette.catalog_view import CatalogSourceError, validate_catalog_source
from omni_palette.models import GitHubExtensionSource

index = wrapped_selection_index(4, 7, 1)      # 5
action = fixed_action_for_index(index, 5)     # FixedPaletteAction.REFRESH_EXTENSIONS
print(action.label())                         # Refresh extensions

try:
    validate_catalog_source(GitHubExtensionSource(owner="", repo="tools"))
except CatalogSourceError as err:
    print(err.missing)                        # ['owner']
```

## What it does not do

This package does not provide the following:

- It draws nothing and opens no windows.
- It does not rank commands against a query. `FilteredCommand` rows must come from your own filtering.
- It does not read or write configuration files.
- It does not download catalogs and does not install or remove extensions.
- It does not model the settings window as a whole. There is no saving workflow, no status toasts, and no per-extension settings panels.