"""Warning records: filtering, paging, CSV export and detail rendering."""

from __future__ import annotations

import datetime as dt
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

DEFAULT_PAGE_SIZE = 20
PAGE_SIZE_OPTIONS = (10, 20, 50, 100)
ALL_CAMERAS = -1

CSV_HEADER = (
    "ID,Camera ID,Camera Name,Status,Keyword(s),RTSP Name,RTSP URL,"
    "Inference Result,Timestamp\n"
)

_DATE_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

_STATUS_LABELS = {True: "正常", False: "异常"}


@dataclass
class WarningRecord:
    """One row of the warning_records table."""

    id: int
    cam_id: int
    cam_name: str = ""
    status: bool = True
    keywords: str = ""
    rtsp_name: str = ""
    rtsp_url: str = ""
    inf_res: str = ""
    record_time: dt.datetime | None = None
    push_status: bool = False
    push_message: str = ""

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> WarningRecord:
        """Build a record from a column-name mapping, filling missing columns."""
        return cls(
            id=int(row.get("id", 0)),
            cam_id=int(row.get("cam_id", 0)),
            cam_name=str(row.get("cam_name") or ""),
            status=bool(row.get("status", True)),
            keywords=str(row.get("keywords") or ""),
            rtsp_name=str(row.get("rtsp_name") or ""),
            rtsp_url=str(row.get("rtsp_url") or ""),
            inf_res=str(row.get("inf_res") or ""),
            record_time=row.get("record_time"),
            push_status=bool(row.get("push_status", False)),
            push_message=str(row.get("push_message") or ""),
        )


@dataclass
class RecordFilter:
    """Criteria for selecting warning records."""

    only_abnormal: bool = False
    keyword: str = ""
    start_date: dt.datetime | None = None
    end_date: dt.datetime | None = None
    camera_id: int = ALL_CAMERAS


def build_count_query(record_filter: RecordFilter) -> tuple[str, dict[str, Any]]:
    """Return the SQL counting matching records and its named parameters."""
    query = "SELECT COUNT(*) FROM warning_records WHERE 1=1"
    params: dict[str, Any] = {}

    if record_filter.only_abnormal:
        query += " AND status = false"

    if record_filter.keyword:
        query += " AND (keywords LIKE :keyword OR inf_res LIKE :keyword)"
        params[":keyword"] = f"%{record_filter.keyword}%"

    if record_filter.start_date is not None:
        query += " AND record_time >= :start_date"
        params[":start_date"] = record_filter.start_date

    if record_filter.end_date is not None:
        query += " AND record_time <= :end_date"
        params[":end_date"] = record_filter.end_date

    if record_filter.camera_id >= 0:
        query += " AND cam_id = :cam_id"
        params[":cam_id"] = record_filter.camera_id

    return query, params


def day_range(start: dt.date, end: dt.date) -> tuple[dt.datetime, dt.datetime]:
    """Return the span from the start of ``start`` to the end of ``end``.

    An end before the start is moved up to the start.
    """
    if start > end:
        end = start
    return (
        dt.datetime.combine(start, dt.time(0, 0, 0)),
        dt.datetime.combine(end, dt.time(23, 59, 59)),
    )


def format_date_time(value: dt.datetime | None) -> str:
    """Format a timestamp as ``YYYY-MM-DD hh:mm:ss``; a missing one gives ""."""
    if value is None:
        return ""
    return value.strftime(_DATE_TIME_FORMAT)


def status_text(record: WarningRecord) -> str:
    """Return the label of the record's status."""
    return _STATUS_LABELS[bool(record.status)]


def push_status_text(record: WarningRecord) -> str:
    """Return the label of the record's alarm push state."""
    if record.status:
        return "无需推送"
    return "成功" if record.push_status else "失败"


def _quoted(text: str) -> str:
    return '"' + text.replace('"', '""') + '"'


def export_csv(records: Iterable[WarningRecord], path: str | Path) -> Path:
    """Write the records to a UTF-8 CSV file with a byte-order mark."""
    records = list(records)
    if not records:
        raise ValueError("no records to export")

    lines = [CSV_HEADER]
    for record in records:
        fields = [
            str(record.id),
            str(record.cam_id),
            _quoted(record.cam_name),
            "Normal" if record.status else "Abnormal",
            _quoted(record.keywords),
            _quoted(record.rtsp_name),
            _quoted(record.rtsp_url),
            _quoted(record.inf_res),
            _quoted(format_date_time(record.record_time)),
        ]
        lines.append(",".join(fields) + "\n")

    target = Path(path)
    with target.open("w", encoding="utf-8", newline="") as handle:
        handle.write("\ufeff")
        handle.writelines(lines)
    return target


def render_details(record: WarningRecord) -> str:
    """Return the HTML shown in the record details dialog."""
    color = "green" if record.status else "red"
    parts = [
        "<h2>记录详情</h2>",
        f"<p><b>ID:</b> {record.id}</p>",
        f"<p><b>摄像头ID:</b> {record.cam_id}</p>",
        f"<p><b>摄像头名称:</b> {record.cam_name}</p>",
        f"<p><b>状态:</b> <span style='color: {color};'>{status_text(record)}</span></p>",
        f"<p><b>关键词:</b> {record.keywords}</p>",
        f"<p><b>RTSP名称:</b> {record.rtsp_name}</p>",
        f"<p><b>RTSP URL:</b> {record.rtsp_url}</p>",
        f"<p><b>时间:</b> {format_date_time(record.record_time)}</p>",
        "<p><b>识别内容:</b></p>",
        f"<div style='padding: 10px; border-radius: 5px;'>{record.inf_res}</div>",
    ]
    return "".join(parts)


def default_export_name(now: dt.datetime) -> str:
    """Return the suggested file name for an export made at ``now``."""
    return f"warning_records_{now:%Y%m%d_%H%M%S}.csv"


class RecordPager:
    """Page position over a result set of known size."""

    def __init__(self, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        self._check_size(page_size)
        self.page_size = page_size
        self.current_page = 1
        self.total_records = 0

    @staticmethod
    def _check_size(size: int) -> None:
        if size <= 0:
            raise ValueError(f"page size must be positive, got {size}")

    @property
    def total_pages(self) -> int:
        """Number of pages holding records; zero when there are none."""
        return -(-self.total_records // self.page_size)

    @property
    def offset(self) -> int:
        """Index of the first record on the current page."""
        return (self.current_page - 1) * self.page_size

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < max(self.total_pages, 1)

    def reset(self) -> None:
        """Go back to the first page."""
        self.current_page = 1

    def update_total(self, total: int) -> int:
        """Record the number of matches, clamp the page and return the offset."""
        if total < 0:
            raise ValueError(f"record count must not be negative, got {total}")
        self.total_records = total
        pages = self.total_pages
        if pages > 0 and self.current_page > pages:
            self.current_page = pages
        return self.offset

    def next_page(self) -> bool:
        """Advance one page; return whether the page changed."""
        if self.current_page < self.total_pages:
            self.current_page += 1
            return True
        return False

    def previous_page(self) -> bool:
        """Go back one page; return whether the page changed."""
        if self.current_page > 1:
            self.current_page -= 1
            return True
        return False

    def set_page_size(self, size: int) -> None:
        """Change the page size and return to the first page."""
        self._check_size(size)
        self.page_size = size
        self.current_page = 1

    def page_info(self) -> str:
        """Return the page position label."""
        pages = max(self.total_pages, 1)
        return f"{self.current_page} 页/ {pages} 页({self.total_records} 记录数)"