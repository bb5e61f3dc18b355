from datetime import datetime, timezone

import pytest

from burovichok.calc import calc_block_three, calc_table_one, from_pa, to_pa
from burovichok.models import OperationConfig, TableOne, TableThree

UTC = timezone.utc


def _cfg(**overrides):
    base = dict(
        pressure_unit="kgf/cm2",
        depth_diff=10.0,
        work_start=datetime(2024, 1, 1, tzinfo=UTC),
        work_end=datetime(2024, 1, 2, tzinfo=UTC),
        work_density=0.0,
        idle_start=datetime(2024, 1, 2, tzinfo=UTC),
        idle_end=datetime(2024, 1, 3, tzinfo=UTC),
        idle_density=1000.0,
    )
    base.update(overrides)
    return OperationConfig(**base)


def test_unit_factors():
    assert to_pa(1, "kgf/cm2") == 98066.5
    assert to_pa(1, "bar") == 1e5
    assert to_pa(1, "atm") == 101325


def test_unknown_unit_passes_through():
    assert to_pa(42.5, "psi") == 42.5
    assert from_pa(42.5, "") == 42.5


@pytest.mark.parametrize("unit", ["kgf/cm2", "bar", "atm", "other"])
def test_unit_round_trip(unit):
    assert from_pa(to_pa(123.4, unit), unit) == pytest.approx(123.4)


def test_idle_period_uses_idle_density():
    # 1000 kg/m3 over 10 m gives exactly one kgf/cm2
    rec = TableOne(timestamp=datetime(2024, 1, 2, 6, tzinfo=UTC), pressure_depth=150.0)
    out = calc_table_one(rec, _cfg())
    assert out.pressure_at_vdp == pytest.approx(151.0)


def test_work_period_uses_work_density():
    rec = TableOne(timestamp=datetime(2024, 1, 1, 6, tzinfo=UTC), pressure_depth=150.0)
    out = calc_table_one(rec, _cfg())
    assert out.pressure_at_vdp == pytest.approx(150.0)


def test_period_end_is_exclusive():
    rec = TableOne(timestamp=datetime(2024, 1, 2, tzinfo=UTC), pressure_depth=150.0)
    out = calc_table_one(rec, _cfg(idle_density=0.0, work_density=1000.0))
    assert out.pressure_at_vdp == pytest.approx(150.0)


def test_outside_periods_left_unchanged():
    rec = TableOne(timestamp=datetime(2024, 2, 1, tzinfo=UTC), pressure_depth=150.0)
    out = calc_table_one(rec, _cfg())
    assert out.pressure_at_vdp is None
    assert out == rec


def test_input_record_not_modified():
    rec = TableOne(timestamp=datetime(2024, 1, 2, 6, tzinfo=UTC), pressure_depth=150.0)
    calc_table_one(rec, _cfg())
    assert rec.pressure_at_vdp is None


def test_zero_depth_diff_keeps_pressure():
    rec = TableOne(timestamp=datetime(2024, 1, 1, 6, tzinfo=UTC), pressure_depth=77.0)
    out = calc_table_one(rec, _cfg(pressure_unit="bar", depth_diff=0.0, work_density=850.0))
    assert out.pressure_at_vdp == pytest.approx(77.0)


def test_block_three_rates_add_up():
    out = calc_block_three(TableThree(flow_liquid=120.0, water_cut=35.0, flow_gas=2.5))
    assert out.oil_flow_rate + out.water_flow_rate == pytest.approx(120.0)
    assert out.gas_oil_ratio * out.oil_flow_rate == pytest.approx(2.5 * 1000.0)
    assert out.water_flow_rate / 120.0 == pytest.approx(0.35)


def test_block_three_full_water_cut_has_no_ratio():
    out = calc_block_three(TableThree(flow_liquid=50.0, water_cut=100.0, flow_gas=1.0))
    assert out.oil_flow_rate == 0.0
    assert out.gas_oil_ratio is None


def test_block_three_keeps_measured_fields():
    src = TableThree(flow_liquid=10.0, water_cut=0.0, flow_gas=0.0)
    out = calc_block_three(src)
    assert (out.flow_liquid, out.water_cut, out.flow_gas) == (10.0, 0.0, 0.0)
    assert out.oil_flow_rate == 10.0
    assert src.oil_flow_rate is None