# burovichok

A library for processing well-test measurements. It reads the
spreadsheets produced during a well survey, applies the standard
engineering calculations and keeps the results in memory or in an SQL
database.

## Data blocks

| Block | Model        | Content                                                        |
|-------|--------------|----------------------------------------------------------------|
| 1     | `TableOne`   | Bottom-hole pressure and temperature at gauge depth            |
| 2     | `TableTwo`   | Tubing, annulus and flow-line pressure readings                |
| 3     | `TableThree` | Liquid and gas rates, water cut; oil/water rates and GOR       |
| 4     | `TableFour`  | Inclinometry: MD, TVD, TVDSS                                   |
| 5     | `TableFive`  | Report header: field, well, horizon, instrument, depths        |

Reference lists (`OilField`, `ProductiveHorizon`, `InstrumentType`) hold
the names offered when filling in a report header. Every model has
`to_map()`, returning a dictionary keyed by database column names, and
the class attributes `TABLE_NAME` and `COLUMNS`.

## Modules

- `burovichok.models`: the data models and `OperationConfig`, the
  hydrostatic settings used for block 1 (pressure unit, depth difference,
  working and idle periods with their densities).
- `burovichok.config`: `load(config_path)` reads a `.yaml`, `.yml` or
  `.json` file into a `Config` with `DBConf`, `LoggerConf` and `UIConf`
  sections. It raises `ConfigError` when the path is empty, the file is
  missing or unreadable, or a required field (`env`, `logger.env`,
  `ui.name`, `ui.width`, `ui.height`, `ui.icon_path`) is absent or empty.
  `PATH_CONFIG` is the conventional location, `config/config.yaml`.
- `burovichok.logger`: `new_logger(env)` returns a `Logger` with
  `infow`, `debugw` and `errorw`, each taking a message followed by
  alternating keys and values. `"prod"` gives JSON lines at info level;
  anything else gives tab-separated console lines at debug level. Output
  goes to standard error.
- `burovichok.converter`: `parse_flexible_time(raw)` accepts Excel serial
  numbers and the layouts `2024-11-09T17:21:21Z`, `2024-11-09T17:21:21`,
  `2024-11-09 17:21:21`, `2024-11-09`, `09/11/2024 17:21:21`,
  `09/11/2024`, `09.11.2024 17:21:21` and `09.11.2024`, returning a
  timezone-aware datetime (UTC unless an offset is given) and raising
  `ValueError` otherwise. `excel_date_to_time(serial, date1904)` converts
  Excel serial dates.
- `burovichok.calc`: `calc_table_one(rec, cfg)` recalculates bottom-hole
  pressure to the reference depth using ρ·g·Δh in the chosen pressure
  unit (`"kgf/cm2"`, `"bar"` or `"atm"`; any other unit is taken as
  pascals). The density is the working one inside `[work_start, work_end)`
  and the idle one inside `[idle_start, idle_end)`; a record outside both
  periods is returned unchanged. `calc_block_three(tbl)` derives water
  rate, oil rate and gas-oil ratio (left as `None` when the oil rate is not
  positive). `to_pa` and `from_pa` convert pressures.
- `burovichok.importer`: `parse_block_one_file(path, cfg)`,
  `parse_block_two_file(path)`, `parse_block_three_file(path)` and
  `parse_block_four_file(path)` read the first sheet of an `.xlsx` file.
  Header rows are skipped (row 1 for blocks 1 and 3, rows 1–2 for block 2,
  rows 1–4 for block 4), as are rows with too few filled cells. Blocks 1
  and 3 are passed through the calculations above. A malformed cell or an
  unreadable file raises `ImportFileError` naming the row or file.
  `read_xlsx_rows(path)` returns the raw `(row number, cell values)` pairs;
  cells formatted as dates come back as RFC 3339 text.
- `burovichok.chart`: `generate_pressure_temp_chart(data, path)` writes an
  HTML page with an interactive pressure chart for block 1 data (default
  file `burovichok_chart.html`) and returns the path; it raises
  `ChartError` when there is nothing to plot or the file cannot be
  written. The page loads `echarts.min.js` from its own directory, so that
  script has to be placed next to it.
- `burovichok.memstore`: `BlocksStorage`, a thread-safe in-memory store
  that accumulates imported blocks and hands out copies. `clear_all()`
  empties blocks 1–3; block 4 records are kept.
- `burovichok.sqlstore`: `connect(cfg, logger)` opens a `Database` from
  `cfg.dsn` (any SQLAlchemy URL), retrying up to `cfg.max_retries` times
  with exponential back-off starting at one second. `Database` reads and
  writes report headers and reference lists, can be used as a context
  manager, and raises `StorageError` on failure.
- `burovichok.database`: `ReportService`, the logged service layer over
  `Database`.

## Example

```python
from datetime import datetime, timezone

from burovichok.calc import calc_block_three
from burovichok.converter import parse_flexible_time
from burovichok.importer import parse_block_one_file
from burovichok.memstore import BlocksStorage
from burovichok.models import OperationConfig, TableThree

cfg = OperationConfig(
    pressure_unit="kgf/cm2",
    depth_diff=12.5,
    work_start=parse_flexible_time("2024-11-09"),
    work_end=parse_flexible_time("2024-11-12"),
    work_density=1050.0,
    idle_start=datetime(2024, 11, 12, tzinfo=timezone.utc),
    idle_end=datetime(2024, 11, 14, tzinfo=timezone.utc),
    idle_density=1020.0,
)

store = BlocksStorage()
store.add_block_one_data(parse_block_one_file("block1.xlsx", cfg))
print(store.count_block_one(), "records of block 1")

rates = calc_block_three(
    TableThree(
        timestamp=datetime(2024, 11, 9, 12, tzinfo=timezone.utc),
        flow_liquid=100.0,
        water_cut=20.0,
        flow_gas=8.0,
    )
)
print(rates.oil_flow_rate, rates.water_flow_rate, rates.gas_oil_ratio)
```

Timestamps read from files are timezone-aware, so the periods in
`OperationConfig` must be timezone-aware too.

## Configuration

```yaml
env: local
db:
  dsn: sqlite:///burovichok.db
  max_open_conns: 10
  max_Idle_conns: 5
  conn_max_lifetime: 300
  max_retries: 3
logger:
  env: dev
ui:
  name: Burovichok
  width: 800
  height: 600
  icon_path: assets/icon.png
```

`db.confmigration_path` is read into `DBConf.migrations_path` but nothing
in the package uses it.

## What the package does not do

- It has no window or command-line program; it is a library to call from
  your own code. The `ui` section of the configuration is only read.
- It does not create or migrate database tables. The tables `reports`
  (with a generated `id` column), `oilfield`, `instrument_type` and
  `productive_horizon` must already exist.
- It does not serve charts or open a browser; it only writes the HTML file.
- Block 5 values such as TVD at the reference depth or pressure
  differences are not calculated.