import pytest

from kwmonitor.controls import (
    ButtonId,
    CheckboxId,
    ComboboxId,
    RtspProtocolType,
    enum_to_string,
    string_to_enum,
    type_name,
)


def test_button_name():
    assert enum_to_string(ButtonId.START_INFERENCE) == "start_inf"


def test_combobox_lookup():
    assert string_to_enum(ComboboxId, "select_camera_index") is ComboboxId.CAMERA_INDEX


def test_checkbox_name():
    assert enum_to_string(CheckboxId.MULTI_CAMERAS) == "switch_multi_cameras"


@pytest.mark.parametrize("enum_type", [ButtonId, ComboboxId, CheckboxId])
def test_round_trip_all_members(enum_type):
    for member in enum_type:
        name = enum_to_string(member)
        assert name
        assert string_to_enum(enum_type, name) is member


@pytest.mark.parametrize("enum_type", [ButtonId, ComboboxId, CheckboxId])
def test_names_are_unique(enum_type):
    names = [enum_to_string(m) for m in enum_type]
    assert len(set(names)) == len(names)


def test_invalid_string_raises():
    with pytest.raises(ValueError, match="Invalid enum string"):
        string_to_enum(ButtonId, "select_camera_index")


def test_type_names():
    assert type_name(ButtonId) == "button"
    assert type_name(ComboboxId) == "combobox"
    assert type_name(CheckboxId) == "checkbox"


def test_non_control_enum_rejected():
    with pytest.raises(TypeError):
        type_name(RtspProtocolType)
    with pytest.raises(TypeError):
        enum_to_string(RtspProtocolType.HIKVISION)
    with pytest.raises(TypeError):
        string_to_enum(RtspProtocolType, "HIKVISION")