from datetime import datetime, timezone

import pytest

from burovichok.models import (
    TABLE_NAME_REPORTS,
    ZERO_TIME,
    InstrumentType,
    OilField,
    OperationConfig,
    ProductiveHorizon,
    TableFive,
    TableFour,
    TableOne,
    TableThree,
    TableTwo,
)

TS = datetime(2024, 11, 9, 17, 21, 21, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    "cls, table",
    [
        (ProductiveHorizon, "productive_horizon"),
        (OilField, "oilfield"),
        (InstrumentType, "instrument_type"),
    ],
)
def test_guidebook_records(cls, table):
    item = cls(name="Б1")
    assert cls.TABLE_NAME == table
    assert item.to_map() == {"name": "Б1"}
    assert list(item.to_map()) == list(cls.COLUMNS)


@pytest.mark.parametrize(
    "record",
    [
        TableOne(timestamp=TS, pressure_depth=1.5, temperature_depth=20.0),
        TableTwo(timestamp_tubing=TS, pressure_tubing=3.0),
        TableThree(timestamp=TS, flow_liquid=10.0, water_cut=5.0, flow_gas=1.0),
        TableFour(measured_depth=100.0, true_vertical_depth=90.0),
        TableFive(field_name="Field", field_number=7),
    ],
)
def test_map_keys_follow_columns(record):
    assert tuple(record.to_map()) == type(record).COLUMNS


def test_table_one_map_values():
    rec = TableOne(timestamp=TS, pressure_depth=1.5, temperature_depth=20.0)
    mapped = rec.to_map()
    assert mapped["timestamp"] == TS
    assert mapped["pressure_depth"] == 1.5
    assert mapped["temperature_depth"] == 20.0
    assert mapped["pressure_at_vdp"] is None
    assert TableOne.TABLE_NAME == "table_one"


def test_table_two_map_values():
    rec = TableTwo(
        timestamp_tubing=TS,
        pressure_tubing=1.0,
        timestamp_annulus=TS,
        pressure_annulus=2.0,
        timestamp_linear=TS,
        pressure_linear=3.0,
    )
    mapped = rec.to_map()
    assert mapped["pressure_tubing"] == 1.0
    assert mapped["pressure_annulus"] == 2.0
    assert mapped["pressure_linear"] == 3.0
    assert mapped["timestamp_linear"] == TS
    assert TableTwo.TABLE_NAME == "table_two"


def test_table_three_derived_fields_default_to_none():
    rec = TableThree(timestamp=TS, flow_liquid=10.0, water_cut=5.0, flow_gas=1.0)
    mapped = rec.to_map()
    assert mapped["oil_flow_rate"] is None
    assert mapped["water_flow_rate"] is None
    assert mapped["gas_oil_ratio"] is None
    assert mapped["flow_liquid"] == 10.0
    assert TableThree.TABLE_NAME == "table_three"


def test_table_four_uses_measure_depth_column():
    rec = TableFour(measured_depth=100.0, true_vertical_depth=90.0,
                    true_vertical_depth_sub_sea=-10.0)
    mapped = rec.to_map()
    assert mapped["measure_depth"] == 100.0
    assert mapped["true_vertical_depth_sub_sea"] == -10.0
    assert TableFour.TABLE_NAME == "table_four"


def test_table_five_map_matches_attributes():
    rec = TableFive(
        field_name="Field",
        field_number=7,
        cluster_number=3,
        horizon="Б2",
        start_time=TS,
        end_time=TS,
        instrument_type="PPS 25",
        measured_depth=1500.0,
        density_oil=850.0,
    )
    mapped = rec.to_map()
    assert mapped["measure_depth"] == 1500.0
    assert mapped["cluster_number"] == 3
    assert mapped["instrument_number"] is None
    assert mapped["density_oil"] == 850.0
    for column, attribute in zip(TableFive.COLUMNS, TableFive.ATTRIBUTES):
        assert mapped[column] == getattr(rec, attribute)


def test_table_five_table_name_is_reports():
    rec = TableFive(field_name="Field", field_number=7)
    mapped = rec.to_map()
    assert TableFive.TABLE_NAME == TABLE_NAME_REPORTS == "reports"
    assert len(mapped) == len(TableFive.ATTRIBUTES) == 20
    assert mapped["field_name"] == "Field"
    assert mapped["field_number"] == 7


def test_operation_config_defaults():
    cfg = OperationConfig()
    assert cfg.work_start == ZERO_TIME
    assert cfg.idle_end == ZERO_TIME
    assert cfg.depth_diff == 0.0
    assert cfg.pressure_unit == ""


def test_records_compare_by_value():
    assert TableOne(timestamp=TS, pressure_depth=1.0) == TableOne(
        timestamp=TS, pressure_depth=1.0
    )
    assert TableOne(timestamp=TS, pressure_depth=1.0) != TableOne(
        timestamp=TS, pressure_depth=2.0
    )