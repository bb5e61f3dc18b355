"""Interactive HTML chart of block 1 pressure readings."""

from __future__ import annotations

import html
import json
from datetime import datetime, timedelta
from pathlib import Path
from typing import Any, Iterable, Sequence

from .models import TableOne

CHART_HTML_FILENAME = "burovichok_chart.html"
# Chart library script, expected next to the generated page.
ECHARTS_SCRIPT = "echarts.min.js"

_TITLE = "Давление и Температура (Блок 1)"

_PAGE = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>{title}</title>
<script src="{script}"></script>
</head>
<body>
<div id="chart" style="width:900px;height:500px;"></div>
<script type="application/json" id="chart-option">{option}</script>
<script>
var chart = echarts.init(document.getElementById("chart"));
chart.setOption(JSON.parse(document.getElementById("chart-option").textContent));
</script>
</body>
</html>
"""


class ChartError(Exception):
    """Raised when a chart cannot be built or written."""


def _rfc3339(moment: datetime) -> str:
    text = moment.strftime("%Y-%m-%dT%H:%M:%S")
    offset = moment.utcoffset()
    if not offset:
        return text + "Z"
    sign = "-" if offset < timedelta(0) else "+"
    minutes = abs(int(offset.total_seconds())) // 60
    return f"{text}{sign}{minutes // 60:02d}:{minutes % 60:02d}"


def _pressure_series(data: Iterable[TableOne]) -> tuple[list[dict[str, Any]], list[str]]:
    items = []
    labels = []
    for point in data:
        items.append({"value": point.pressure_depth, "name": _rfc3339(point.timestamp)})
        labels.append(point.timestamp.strftime("%H:%M:%S"))
    return items, labels


def _option(data: Sequence[TableOne]) -> dict[str, Any]:
    items, labels = _pressure_series(data)
    return {
        "title": {"text": _TITLE, "subtext": "Интерактивный график"},
        "tooltip": {"show": True, "trigger": "axis", "triggerOn": "mousemove|click"},
        "legend": {"show": True},
        "dataZoom": [{"type": "slider", "start": 0, "end": 100, "xAxisIndex": [0]}],
        "toolbox": {
            "show": True,
            "feature": {
                "saveAsImage": {
                    "show": True,
                    "type": "png",
                    "name": "pressure_chart",
                    "title": "Сохранить PNG",
                },
                "dataZoom": {"show": True, "title": {"zoom": "Зум", "back": "Сброс"}},
                "restore": {"show": True, "title": "Сброс"},
            },
        },
        "xAxis": [{"name": "Время", "type": "category", "data": labels}],
        "yAxis": [{"name": "Давление (кгс/см2)", "type": "value"}],
        "series": [
            {
                "name": "Давление",
                "type": "line",
                "data": items,
                "smooth": False,
                "label": {"show": False},
                "lineStyle": {"color": "blue"},
            }
        ],
    }


def generate_pressure_temp_chart(
    data: Sequence[TableOne], path: str | Path = CHART_HTML_FILENAME
) -> str:
    """Write an HTML chart of the pressure readings to *path* and return the path."""
    if not data:
        raise ChartError("нет данных для построения графика")

    option = json.dumps(_option(data), ensure_ascii=False).replace("</", "<\\/")
    page = _PAGE.format(title=html.escape(_TITLE), script=ECHARTS_SCRIPT, option=option)
    try:
        Path(path).write_text(page, encoding="utf-8")
    except OSError as exc:
        raise ChartError(f"не удалось создать файл {path}: {exc}") from exc
    return str(path)