import json

import pytest

from kwmonitor.settings import (
    DEFAULT_GRID_SIZE,
    TOTAL_CAMERAS,
    LayoutSettings,
    default_scale_factor,
    grid_side,
    layout_change_message,
    page_ranges,
    scale_factor_options,
    stream_count_options,
    target_group,
)


def test_stream_count_options_match_source():
    assert stream_count_options() == [4, 9, 25, 36, 49, 64]


def test_stream_count_options_are_perfect_squares():
    for count in stream_count_options():
        assert grid_side(count) ** 2 == count


def test_scale_factor_labels():
    labels = [label for label, _ in scale_factor_options()]
    assert labels == ["10%", "25%", "50%", "75%", "100%"]


def test_scale_factor_values_increasing():
    values = [value for _, value in scale_factor_options()]
    assert values == sorted(values)
    assert values[-1] == 1.0


def test_default_scale_factor():
    assert default_scale_factor() == 0.5
    assert ("50%", default_scale_factor()) in scale_factor_options()


@pytest.mark.parametrize("per_page", [4, 9, 25, 36, 49, 64, 5])
def test_page_ranges_cover_all_cameras(per_page):
    ranges = page_ranges(TOTAL_CAMERAS, per_page)
    assert ranges[0][0] == 0
    assert ranges[-1][1] == TOTAL_CAMERAS
    for (_, end), (start, _) in zip(ranges, ranges[1:]):
        assert end == start
    for start, end in ranges:
        assert 0 < end - start <= per_page


def test_page_ranges_empty_when_no_cameras():
    assert page_ranges(0, 4) == []


def test_page_ranges_single_page_when_larger():
    assert page_ranges(TOTAL_CAMERAS, 64) == [(0, TOTAL_CAMERAS)]


def test_page_ranges_rejects_bad_page_size():
    with pytest.raises(ValueError):
        page_ranges(TOTAL_CAMERAS, 0)


@pytest.mark.parametrize("per_page", [4, 9, 25])
def test_target_group_agrees_with_page_ranges(per_page):
    ranges = page_ranges(TOTAL_CAMERAS, per_page)
    for cam in range(TOTAL_CAMERAS):
        start, end = ranges[target_group(cam, per_page)]
        assert start <= cam < end


def test_target_group_errors():
    with pytest.raises(ValueError):
        target_group(1, 0)
    with pytest.raises(ValueError):
        target_group(-1, 4)


def test_grid_side_rejects_negative():
    with pytest.raises(ValueError):
        grid_side(-4)


def test_layout_change_message():
    message = layout_change_message(9)
    side = grid_side(9)
    assert f"{side}x{side}" in message
    assert message.startswith("视频网格布局已更改")
    assert message.endswith("请重新启动应用以应用新的布局设置")


def test_layout_settings_default(tmp_path):
    settings = LayoutSettings(tmp_path / "settings.json")
    assert settings.load_grid_size() == DEFAULT_GRID_SIZE == 4


def test_layout_settings_round_trip(tmp_path):
    path = tmp_path / "nested" / "settings.json"
    LayoutSettings(path).save_grid_size(25)
    assert LayoutSettings(path).load_grid_size() == 25


def test_layout_settings_keeps_other_keys(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"other": {"value": "kept"}}), encoding="utf-8")
    LayoutSettings(path).save_grid_size(36)
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["other"] == {"value": "kept"}
    assert data["layout"]["grid_size"] == 36


def test_layout_settings_corrupt_file_falls_back(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{not json", encoding="utf-8")
    settings = LayoutSettings(path)
    assert settings.load_grid_size() == DEFAULT_GRID_SIZE
    settings.save_grid_size(49)
    assert settings.load_grid_size() == 49