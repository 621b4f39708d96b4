# kwmonitor

This package holds the logic behind a keyword monitor for a wall of video
streams, with no GUI. It covers four areas:

- control identifiers
- keyword management and highlighting of recognised text
- grid layout and scale settings
- browsing and exporting warning records

It has no dependencies outside the standard library.

## Install

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Modules

### `kwmonitor.controls`

This module defines the enums `ControlType`, `ButtonId`, `ComboboxId`,
`CheckboxId` and `RtspProtocolType`.

- `enum_to_string(control_id)` returns a control's object name, for example
  `"start_inf"` for `ButtonId.START_INFERENCE`.
- `string_to_enum(enum_type, text)` maps an object name back to its
  identifier. It raises `ValueError` for an unknown name.
- `type_name(enum_type)` returns `"button"`, `"combobox"` or `"checkbox"`.

The lookup functions raise `TypeError` when given a type that is not a
control identifier type.

### `kwmonitor.highlight`

- `split_keywords(text)` splits on whitespace, including the ideographic
  space U+3000. It drops empty parts and repeats and keeps the first-seen order.
- `format_keywords_display(keywords)` returns `"No Keywords"` when the list
  is empty. Otherwise it returns `"Keywords: "` followed by the keywords
  joined with a red bullet.
- `highlight_text(origin, keywords)` HTML-escapes the text and turns newlines
  into `<br>`. It then wraps each case-insensitive keyword match in a styled
  `<span>`, taking the longest keywords first. With no keywords it returns
  the text unchanged.

### `kwmonitor.keywords`

`KeywordStore(path)` keeps an ordered keyword list in a JSON file. It loads
the file when it is created. When the file is missing or holds no keywords,
it writes an empty list.

- `load()` re-reads the file and returns the keywords.
- `save()` writes the keywords to the file.
- `add(text)` trims the keyword and appends it. An empty keyword, or one
  that is a case-insensitive duplicate, raises `KeywordError`.
- `remove(index)` removes and returns a keyword. It raises `IndexError` when
  the position is out of range.
- `set_keywords(keywords)` replaces the list and saves it.

`add` and `remove` do not save; call `save()` to persist the change. The
`keywords` property returns a copy of the list.

### `kwmonitor.settings`

- `stream_count_options()` returns `[4, 9, 25, 36, 49, 64]`.
- `scale_factor_options()` returns the `(label, factor)` pairs from 10% to
  100%. `default_scale_factor()` returns `0.5`.
- `page_ranges(total_cams, per_page)` splits the cameras into pages. Each
  page is a `(start, end)` pair with `end` exclusive.
- `target_group(cam_index, per_page)` returns the page that holds a camera.
- `grid_side(count)` returns the integer square root of the stream count.
  `layout_change_message(count)` returns the notice shown after the grid
  size is changed.
- `LayoutSettings(path)` stores the grid size in a JSON file.
  `load_grid_size()` returns the saved size, or 4 when none is saved.
  `save_grid_size(size)` writes the size and keeps the other settings in the
  file.

The constant `TOTAL_CAMERAS` is 48.

### `kwmonitor.records`

- `WarningRecord` is a dataclass holding one warning record.
  `WarningRecord.from_row(mapping)` builds one from a mapping of column
  names to values.
- `RecordFilter` holds the filter options: abnormal only, keyword, date
  range and camera id. A camera id of `ALL_CAMERAS` (-1) means all cameras.
- `build_count_query(record_filter)` returns the `SELECT COUNT(*)` SQL
  string and its named parameters.
- `day_range(start, end)` returns the span from 00:00:00 on the start day
  to 23:59:59 on the end day. An end date before the start date is moved
  up to the start date.
- `format_date_time(value)` formats a timestamp as `YYYY-MM-DD hh:mm:ss`.
- `status_text(record)` and `push_status_text(record)` return the status
  labels shown in the table.
- `export_csv(records, path)` writes a UTF-8 CSV file with a byte-order
  mark. It raises `ValueError` when there are no records.
  `default_export_name(now)` suggests a file name for the export.
- `render_details(record)` returns the details of a record as HTML.
- `RecordPager(page_size)` tracks the page position. Its methods are
  `update_total`, `next_page`, `previous_page`, `set_page_size`, `reset` and
  `page_info`. Its properties are `total_pages`, `offset`, `has_previous` and
  `has_next`.

## Example

    from kwmonitor.highlight import split_keywords, highlight_text
    from kwmonitor.records import RecordPager

    keywords = split_keywords("alarm  fire alarm")   # ["alarm", "fire"]
    html = highlight_text("Fire alarm raised", keywords)

    pager = RecordPager(20)
    pager.update_total(45)
    pager.next_page()
    print(pager.page_info())   # 2 页/ 3 页(45 记录数)

## What this package does not do

This package does not provide:

- windows or widgets
- video capture or RTSP stream playback
- text recognition
- HTTP alarm delivery
- a command-line program

It also does not connect to a database. `build_count_query` only builds the
SQL and its parameters; running the query and fetching records is up to the
caller.