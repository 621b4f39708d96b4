"""Identifiers of the monitor's controls and their string names."""

from __future__ import annotations

from enum import Enum, auto


class ControlType(Enum):
    """Kinds of control widgets."""

    BUTTON = auto()
    COMBOBOX = auto()
    CHECKBOX = auto()


class ButtonId(Enum):
    START_INFERENCE = auto()
    SWITCH_CAMERA_STREAM = auto()
    SWITCH_AUTO_CROP = auto()
    SELECT_STORE_PATH = auto()
    CLEAR_ALL_CROPPEDS = auto()


class ComboboxId(Enum):
    ADJUST_INTERVAL = auto()
    CROPPED_COUNT = auto()
    CAMERA_INDEX = auto()


class CheckboxId(Enum):
    MULTI_CAMERAS = auto()


class RtspProtocolType(Enum):
    """Camera vendors whose RTSP URL layout is supported."""

    HIKVISION = auto()
    ALHUA = auto()


_TYPE_NAMES: dict[type[Enum], str] = {
    ButtonId: "button",
    ComboboxId: "combobox",
    CheckboxId: "checkbox",
}

_ENTRIES: dict[type[Enum], dict[Enum, str]] = {
    ButtonId: {
        ButtonId.START_INFERENCE: "start_inf",
        ButtonId.SWITCH_CAMERA_STREAM: "switch_camera_stream",
        ButtonId.SWITCH_AUTO_CROP: "switch_auto_crop",
        ButtonId.SELECT_STORE_PATH: "select_store_path",
        ButtonId.CLEAR_ALL_CROPPEDS: "clear_all_croppeds",
    },
    ComboboxId: {
        ComboboxId.ADJUST_INTERVAL: "adjust_inf_interval",
        ComboboxId.CROPPED_COUNT: "select_cropped_count",
        ComboboxId.CAMERA_INDEX: "select_camera_index",
    },
    CheckboxId: {
        CheckboxId.MULTI_CAMERAS: "switch_multi_cameras",
    },
}


def _entries_for(enum_type: type[Enum]) -> dict[Enum, str]:
    try:
        return _ENTRIES[enum_type]
    except KeyError:
        raise TypeError(f"{enum_type!r} is not a control identifier type") from None


def type_name(enum_type: type[Enum]) -> str:
    """Return the control kind name for an identifier enum type."""
    _entries_for(enum_type)
    return _TYPE_NAMES[enum_type]


def enum_to_string(control_id: Enum) -> str:
    """Return the object name of a control identifier, or "" if it has none."""
    return _entries_for(type(control_id)).get(control_id, "")


def string_to_enum(enum_type: type[Enum], text: str) -> Enum:
    """Return the identifier of ``enum_type`` whose object name is ``text``."""
    for key, value in _entries_for(enum_type).items():
        if value == text:
            return key
    raise ValueError("Invalid enum string")