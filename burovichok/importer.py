"""Import of measurement blocks from XLSX workbooks."""

from __future__ import annotations

import posixpath
import re
import xml.etree.ElementTree as ET
import zipfile
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Callable, TypeVar

from .calc import calc_block_three, calc_table_one
from .converter import _parse_float, parse_flexible_time
from .models import OperationConfig, TableFour, TableOne, TableThree, TableTwo

T = TypeVar("T")

_BUILTIN_DATE_FORMATS = frozenset({14, 15, 16, 17, 18, 19, 20, 21, 22, 45, 46, 47})
_FORMAT_NOISE = re.compile(r'"[^"]*"|\[[^\]]*\]|\\.')
_CELL_DATE_EPOCH = datetime(1899, 12, 30, tzinfo=timezone.utc)

Row = tuple[int, list[str]]


class ImportFileError(Exception):
    """Raised when a workbook cannot be read or a cell cannot be parsed."""


def _local(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _children(element: ET.Element, name: str) -> list[ET.Element]:
    return [child for child in element if _local(child.tag) == name]


def _descendants(element: ET.Element, name: str) -> list[ET.Element]:
    return [el for el in element.iter() if _local(el.tag) == name]


def _first_sheet_path(archive: zipfile.ZipFile) -> str:
    workbook = ET.fromstring(archive.read("xl/workbook.xml"))
    sheets = _descendants(workbook, "sheet")
    if not sheets:
        raise ImportFileError("workbook has no sheets")
    rel_id = next(
        (value for key, value in sheets[0].attrib.items() if key.startswith("{") and _local(key) == "id"),
        None,
    )
    try:
        rels = ET.fromstring(archive.read("xl/_rels/workbook.xml.rels"))
    except KeyError:
        return "xl/worksheets/sheet1.xml"
    for rel in _descendants(rels, "Relationship"):
        if rel.get("Id") == rel_id:
            target = rel.get("Target", "")
            if target.startswith("/"):
                return target.lstrip("/")
            return posixpath.normpath(posixpath.join("xl", target))
    return "xl/worksheets/sheet1.xml"


def _shared_strings(archive: zipfile.ZipFile) -> list[str]:
    try:
        root = ET.fromstring(archive.read("xl/sharedStrings.xml"))
    except KeyError:
        return []
    return [
        "".join(t.text or "" for t in _descendants(item, "t"))
        for item in _children(root, "si")
    ]


def _is_date_format(code: str) -> bool:
    cleaned = _FORMAT_NOISE.sub("", code).lower()
    return any(ch in cleaned for ch in "ymdhs")


def _date_styles(archive: zipfile.ZipFile) -> set[int]:
    """Return the indices of cell styles that display dates or times."""
    try:
        root = ET.fromstring(archive.read("xl/styles.xml"))
    except KeyError:
        return set()
    custom = {
        int(fmt.get("numFmtId", "-1")): fmt.get("formatCode", "")
        for fmts in _children(root, "numFmts")
        for fmt in _children(fmts, "numFmt")
    }
    result: set[int] = set()
    for xfs in _children(root, "cellXfs"):
        for index, xf in enumerate(_children(xfs, "xf")):
            fmt_id = int(xf.get("numFmtId", "0"))
            if fmt_id in _BUILTIN_DATE_FORMATS or (
                fmt_id in custom and _is_date_format(custom[fmt_id])
            ):
                result.add(index)
    return result


def _serial_to_rfc3339(raw: str) -> str:
    try:
        serial = _parse_float(raw)
        moment = _CELL_DATE_EPOCH + timedelta(seconds=round(serial * 86400))
    except (ValueError, OverflowError):
        return raw
    return moment.strftime("%Y-%m-%dT%H:%M:%SZ")


def _cell_value(cell: ET.Element, shared: list[str], date_styles: set[int]) -> str | None:
    kind = cell.get("t")
    if kind == "inlineStr":
        inline = _children(cell, "is")
        if not inline:
            return None
        return "".join(t.text or "" for t in _descendants(inline[0], "t"))
    values = _children(cell, "v")
    if not values:
        return None
    raw = values[0].text or ""
    if kind == "s":
        try:
            return shared[int(raw)]
        except (ValueError, IndexError) as exc:
            raise ImportFileError(f"invalid shared string index {raw!r}") from exc
    if kind in (None, "n") and int(cell.get("s", "0")) in date_styles:
        return _serial_to_rfc3339(raw)
    return raw


def read_xlsx_rows(path: str | Path) -> list[Row]:
    """Read the first sheet of a workbook as (row number, cell values) pairs.

    Row numbers start at 1; only cells that hold a value are listed.
    """
    try:
        with zipfile.ZipFile(path) as archive:
            sheet_path = _first_sheet_path(archive)
            shared = _shared_strings(archive)
            date_styles = _date_styles(archive)
            sheet = ET.fromstring(archive.read(sheet_path))
    except OSError as exc:
        raise ImportFileError(f"read file {path}: {exc}") from exc
    except (zipfile.BadZipFile, KeyError, ET.ParseError, ValueError) as exc:
        raise ImportFileError(f"xlsx read {path}: {exc}") from exc

    rows: list[Row] = []
    previous = 0
    for row in _descendants(sheet, "row"):
        number = int(row.get("r", previous + 1))
        previous = number
        cells = [
            value
            for cell in _children(row, "c")
            if (value := _cell_value(cell, shared, date_styles)) is not None
        ]
        rows.append((number, cells))
    return rows


def _convert(parse: Callable[[str], T], raw: str, label: str, index: int) -> T:
    try:
        return parse(raw)
    except ValueError as exc:
        raise ImportFileError(f"parse {label} row {index}: {exc}") from exc


def parse_block_one_file(path: str | Path, cfg: OperationConfig) -> list[TableOne]:
    """Read block 1 (pressure and temperature) and apply the hydrostatic correction."""
    out: list[TableOne] = []
    for index, cells in read_xlsx_rows(path):
        if index == 1 or len(cells) < 3:
            continue
        rec = TableOne(
            timestamp=_convert(parse_flexible_time, cells[0], "timestamp block1", index),
            pressure_depth=_convert(_parse_float, cells[1], "pressure block1", index),
            temperature_depth=_convert(_parse_float, cells[2], "temperature block1", index),
        )
        out.append(calc_table_one(rec, cfg))
    return out


def parse_block_two_file(path: str | Path) -> list[TableTwo]:
    """Read block 2 (tubing, annulus and linear pressures)."""
    out: list[TableTwo] = []
    for index, cells in read_xlsx_rows(path):
        if index <= 2 or len(cells) < 6:
            continue
        out.append(
            TableTwo(
                timestamp_tubing=_convert(parse_flexible_time, cells[0], "tubing timestamp", index),
                pressure_tubing=_convert(_parse_float, cells[1], "tubing pressure", index),
                timestamp_annulus=_convert(parse_flexible_time, cells[2], "annulus timestamp", index),
                pressure_annulus=_convert(_parse_float, cells[3], "annulus pressure", index),
                timestamp_linear=_convert(parse_flexible_time, cells[4], "linear timestamp", index),
                pressure_linear=_convert(_parse_float, cells[5], "linear pressure", index),
            )
        )
    return out


def parse_block_three_file(path: str | Path) -> list[TableThree]:
    """Read block 3 (flow rates) and compute the derived rates."""
    out: list[TableThree] = []
    for index, cells in read_xlsx_rows(path):
        if index == 1 or len(cells) < 4:
            continue
        rec = TableThree(
            timestamp=_convert(parse_flexible_time, cells[0], "timestamp block3", index),
            flow_liquid=_convert(_parse_float, cells[1], "flow liquid", index),
            water_cut=_convert(_parse_float, cells[2], "water cut", index),
            flow_gas=_convert(_parse_float, cells[3], "flow gas", index),
        )
        out.append(calc_block_three(rec))
    return out


def parse_block_four_file(path: str | Path) -> list[TableFour]:
    """Read block 4 (inclinometry); the first four rows are headers."""
    out: list[TableFour] = []
    for index, cells in read_xlsx_rows(path):
        if index <= 4 or len(cells) < 3:
            continue
        out.append(
            TableFour(
                measured_depth=_convert(_parse_float, cells[0], "MeasuredDepth block4", index),
                true_vertical_depth=_convert(
                    _parse_float, cells[1], "TrueVerticalDepth block4", index
                ),
                true_vertical_depth_sub_sea=_convert(
                    _parse_float, cells[2], "TrueVerticalDepthSubSea block4", index
                ),
            )
        )
    return out