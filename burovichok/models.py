"""Records for imported well-test blocks and reference tables."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, ClassVar

TABLE_NAME_REPORTS = "reports"

# Zero value for timestamps that were not provided.
ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)


@dataclass(slots=True)
class ProductiveHorizon:
    """Productive horizon reference entry (Б1, Б2, Б3...)."""

    TABLE_NAME: ClassVar[str] = "productive_horizon"
    COLUMNS: ClassVar[tuple[str, ...]] = ("name",)

    name: str = ""

    def to_map(self) -> dict[str, Any]:
        """Return the record as a column-to-value mapping."""
        return {"name": self.name}


@dataclass(slots=True)
class OilField:
    """Oil field reference entry."""

    TABLE_NAME: ClassVar[str] = "oilfield"
    COLUMNS: ClassVar[tuple[str, ...]] = ("name",)

    name: str = ""

    def to_map(self) -> dict[str, Any]:
        """Return the record as a column-to-value mapping."""
        return {"name": self.name}


@dataclass(slots=True)
class InstrumentType:
    """Instrument type reference entry, e.g. ГС-АМТС, PPS 25, КАМА-2."""

    TABLE_NAME: ClassVar[str] = "instrument_type"
    COLUMNS: ClassVar[tuple[str, ...]] = ("name",)

    name: str = ""

    def to_map(self) -> dict[str, Any]:
        """Return the record as a column-to-value mapping."""
        return {"name": self.name}


@dataclass(slots=True)
class OperationConfig:
    """Hydrostatic parameters used when importing block 1."""

    pressure_unit: str = ""  # "kgf/cm2", "bar" or "atm"
    depth_diff: float = 0.0  # metres between gauge and reference depth

    work_start: datetime = ZERO_TIME
    work_end: datetime = ZERO_TIME
    work_density: float = 0.0

    idle_start: datetime = ZERO_TIME
    idle_end: datetime = ZERO_TIME
    idle_density: float = 0.0


@dataclass(slots=True)
class TableOne:
    """Block 1: bottom-hole pressure and temperature."""

    TABLE_NAME: ClassVar[str] = "table_one"
    COLUMNS: ClassVar[tuple[str, ...]] = (
        "timestamp",
        "pressure_depth",
        "temperature_depth",
        "pressure_at_vdp",
    )
    XLSX_HEADERS: ClassVar[dict[str, str]] = {
        "timestamp": "Дата, время",
        "pressure_depth": "Рзаб на глубине замера, кгс/см2",
        "temperature_depth": "Tзаб на глубине замера, °C",
    }

    timestamp: datetime = ZERO_TIME
    pressure_depth: float = 0.0
    temperature_depth: float = 0.0
    pressure_at_vdp: float | None = None

    def to_map(self) -> dict[str, Any]:
        """Return the record as a column-to-value mapping."""
        return {
            "timestamp": self.timestamp,
            "pressure_depth": self.pressure_depth,
            "temperature_depth": self.temperature_depth,
            "pressure_at_vdp": self.pressure_at_vdp,
        }


@dataclass(slots=True)
class TableTwo:
    """Block 2: tubing, annulus and linear pressure readings."""

    TABLE_NAME: ClassVar[str] = "table_two"
    COLUMNS: ClassVar[tuple[str, ...]] = (
        "timestamp_tubing",
        "pressure_tubing",
        "timestamp_annulus",
        "pressure_annulus",
        "timestamp_linear",
        "pressure_linear",
    )
    XLSX_HEADERS: ClassVar[dict[str, str]] = {
        "timestamp_tubing": "Дата трубного замера, Дата, время",
        "pressure_tubing": "Ртр, кгс/см2",
        "timestamp_annulus": "Дата затрубного замера, Дата, время",
        "pressure_annulus": "Рзтр, кгс/см2",
        "timestamp_linear": "Дата линейного замера, Дата, время",
        "pressure_linear": "Рлин, кгс/см2",
    }

    timestamp_tubing: datetime = ZERO_TIME
    pressure_tubing: float = 0.0
    timestamp_annulus: datetime = ZERO_TIME
    pressure_annulus: float = 0.0
    timestamp_linear: datetime = ZERO_TIME
    pressure_linear: float = 0.0

    def to_map(self) -> dict[str, Any]:
        """Return the record as a column-to-value mapping."""
        return {
            "timestamp_tubing": self.timestamp_tubing,
            "pressure_tubing": self.pressure_tubing,
            "timestamp_annulus": self.timestamp_annulus,
            "pressure_annulus": self.pressure_annulus,
            "timestamp_linear": self.timestamp_linear,
            "pressure_linear": self.pressure_linear,
        }


@dataclass(slots=True)
class TableThree:
    """Block 3: liquid, water and gas flow rates with derived values."""

    TABLE_NAME: ClassVar[str] = "table_three"
    COLUMNS: ClassVar[tuple[str, ...]] = (
        "timestamp",
        "flow_liquid",
        "water_cut",
        "flow_gas",
        "oil_flow_rate",
        "water_flow_rate",
        "gas_oil_ratio",
    )
    XLSX_HEADERS: ClassVar[dict[str, str]] = {
        "timestamp": "Дата, время",
        "flow_liquid": "Qж, м3/сут",
        "water_cut": "W, %",
        "flow_gas": "Qг, тыс.м3/сут",
    }

    timestamp: datetime = ZERO_TIME
    flow_liquid: float = 0.0
    water_cut: float = 0.0
    flow_gas: float = 0.0
    oil_flow_rate: float | None = None
    water_flow_rate: float | None = None
    gas_oil_ratio: float | None = None

    def to_map(self) -> dict[str, Any]:
        """Return the record as a column-to-value mapping."""
        return {
            "timestamp": self.timestamp,
            "flow_liquid": self.flow_liquid,
            "water_cut": self.water_cut,
            "flow_gas": self.flow_gas,
            "oil_flow_rate": self.oil_flow_rate,
            "water_flow_rate": self.water_flow_rate,
            "gas_oil_ratio": self.gas_oil_ratio,
        }


@dataclass(slots=True)
class TableFour:
    """Block 4: inclinometry (MD, TVD, TVDSS)."""

    TABLE_NAME: ClassVar[str] = "table_four"
    COLUMNS: ClassVar[tuple[str, ...]] = (
        "measure_depth",
        "true_vertical_depth",
        "true_vertical_depth_sub_sea",
    )
    XLSX_HEADERS: ClassVar[dict[str, str]] = {
        "measured_depth": "Глубина по стволу, м",
        "true_vertical_depth": "Глубина по вертикали, м",
        "true_vertical_depth_sub_sea": "Абсолютная глубина, м",
    }

    measured_depth: float = 0.0
    true_vertical_depth: float = 0.0
    true_vertical_depth_sub_sea: float = 0.0

    def to_map(self) -> dict[str, Any]:
        """Return the record as a column-to-value mapping."""
        return {
            "measure_depth": self.measured_depth,
            "true_vertical_depth": self.true_vertical_depth,
            "true_vertical_depth_sub_sea": self.true_vertical_depth_sub_sea,
        }


@dataclass(slots=True)
class TableFive:
    """Block 5: general information about a well test (report header)."""

    TABLE_NAME: ClassVar[str] = TABLE_NAME_REPORTS
    COLUMNS: ClassVar[tuple[str, ...]] = (
        "field_name",
        "field_number",
        "cluster_number",
        "horizon",
        "start_time",
        "end_time",
        "instrument_type",
        "instrument_number",
        "measure_depth",
        "true_vertical_depth",
        "true_vertical_depth_sub_sea",
        "vdp_measured_depth",
        "vdp_true_vertical_depth",
        "vdp_true_vertical_depth_sea",
        "diff_instrument_vdp",
        "density_oil",
        "density_liquid_stopped",
        "density_liquid_working",
        "pressure_diff_stopped",
        "pressure_diff_working",
    )
    # Attribute holding each column, in COLUMNS order.
    ATTRIBUTES: ClassVar[tuple[str, ...]] = (
        "field_name",
        "field_number",
        "cluster_number",
        "horizon",
        "start_time",
        "end_time",
        "instrument_type",
        "instrument_number",
        "measured_depth",
        "true_vertical_depth",
        "true_vertical_depth_sub_sea",
        "vdp_measured_depth",
        "vdp_true_vertical_depth",
        "vdp_true_vertical_depth_sea",
        "diff_instrument_vdp",
        "density_oil",
        "density_liquid_stopped",
        "density_liquid_working",
        "pressure_diff_stopped",
        "pressure_diff_working",
    )

    field_name: str = ""
    field_number: int = 0
    cluster_number: int | None = None
    horizon: str = ""
    start_time: datetime = ZERO_TIME
    end_time: datetime = ZERO_TIME
    instrument_type: str = ""
    instrument_number: int | None = None
    measured_depth: float = 0.0
    true_vertical_depth: float = 0.0
    true_vertical_depth_sub_sea: float = 0.0
    vdp_measured_depth: float = 0.0
    vdp_true_vertical_depth: float | None = None
    vdp_true_vertical_depth_sea: float | None = None
    diff_instrument_vdp: float | None = None
    density_oil: float = 0.0
    density_liquid_stopped: float = 0.0
    density_liquid_working: float = 0.0
    pressure_diff_stopped: float | None = None
    pressure_diff_working: float | None = None

    def to_map(self) -> dict[str, Any]:
        """Return the record as a column-to-value mapping."""
        return {
            column: getattr(self, attribute)
            for column, attribute in zip(self.COLUMNS, self.ATTRIBUTES)
        }