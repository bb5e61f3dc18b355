"""Derived values for imported blocks: hydrostatic correction and flow rates."""

from __future__ import annotations

from dataclasses import replace

from .models import OperationConfig, TableOne, TableThree

G = 9.80665  # m/s²

_PA_PER_UNIT = {
    "kgf/cm2": 98066.5,
    "bar": 1e5,
    "atm": 101325.0,
}


def to_pa(p: float, unit: str) -> float:
    """Convert pressure *p* in *unit* to pascals; unknown units pass through."""
    factor = _PA_PER_UNIT.get(unit)
    return p if factor is None else p * factor


def from_pa(pa: float, unit: str) -> float:
    """Convert pressure in pascals to *unit*; unknown units pass through."""
    factor = _PA_PER_UNIT.get(unit)
    return pa if factor is None else pa / factor


def calc_table_one(rec: TableOne, cfg: OperationConfig) -> TableOne:
    """Return *rec* with the pressure at the reference depth filled in.

    The density is chosen by the period the timestamp falls in; a record
    outside both periods is returned unchanged.
    """
    t = rec.timestamp
    if cfg.work_start <= t < cfg.work_end:
        rho = cfg.work_density
    elif cfg.idle_start <= t < cfg.idle_end:
        rho = cfg.idle_density
    else:
        return rec

    p_ref = to_pa(rec.pressure_depth, cfg.pressure_unit) + rho * G * cfg.depth_diff
    return replace(rec, pressure_at_vdp=from_pa(p_ref, cfg.pressure_unit))


def calc_block_three(tbl: TableThree) -> TableThree:
    """Return *tbl* with water rate, oil rate and gas-oil ratio filled in."""
    water_rate = tbl.flow_liquid * tbl.water_cut / 100.0
    oil_rate = tbl.flow_liquid - water_rate
    gas_oil_ratio = (tbl.flow_gas * 1000.0) / oil_rate if oil_rate > 0 else None
    return replace(
        tbl,
        water_flow_rate=water_rate,
        oil_flow_rate=oil_rate,
        gas_oil_ratio=gas_oil_ratio,
    )