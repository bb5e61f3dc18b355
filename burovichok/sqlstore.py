"""Relational storage of report headers and reference tables."""

from __future__ import annotations

import time
from datetime import datetime, timezone
from typing import Any, Iterable, TypeVar

from sqlalchemy import (
    DateTime,
    Float,
    Integer,
    String,
    create_engine,
    insert,
    literal_column,
    select,
)
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.sql import TableClause, column, table

from .config import DBConf
from .logger import Logger
from .models import InstrumentType, OilField, ProductiveHorizon, TableFive

M = TypeVar("M", OilField, InstrumentType, ProductiveHorizon)

_INITIAL_BACKOFF = 1.0

_REPORT_TYPES: dict[str, Any] = {
    "field_name": String(),
    "field_number": Integer(),
    "cluster_number": Integer(),
    "horizon": String(),
    "start_time": DateTime(timezone=True),
    "end_time": DateTime(timezone=True),
    "instrument_type": String(),
    "instrument_number": Integer(),
}

_REPORTS = table(
    TableFive.TABLE_NAME,
    *(column(name, _REPORT_TYPES.get(name, Float())) for name in TableFive.COLUMNS),
)


class StorageError(Exception):
    """Raised when the database cannot be reached or a query fails."""


def _reference_table(model: type) -> TableClause:
    return table(model.TABLE_NAME, *(column(name, String()) for name in model.COLUMNS))


def _to_utc(value: Any) -> Any:
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    return value


def _pool_options(cfg: DBConf) -> dict[str, Any]:
    options: dict[str, Any] = {}
    if cfg.max_idle_conns > 0:
        options["pool_size"] = cfg.max_idle_conns
    if cfg.max_open_conns > 0:
        idle = options.get("pool_size", 5)
        options["max_overflow"] = max(0, cfg.max_open_conns - idle)
    if cfg.conn_max_lifetime > 0:
        options["pool_recycle"] = cfg.conn_max_lifetime
    return options


class Database:
    """Queries against the reports and reference tables."""

    def __init__(self, engine: Engine, logger: Logger) -> None:
        self.engine = engine
        self._log = logger

    def __enter__(self) -> Database:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def get_all_table_five(self) -> list[TableFive]:
        """Return every report header."""
        stmt = select(*_REPORTS.c)
        try:
            with self.engine.connect() as conn:
                rows = conn.execute(stmt).all()
        except SQLAlchemyError as exc:
            raise StorageError(f"executing GetAllTableFive query: {exc}") from exc
        return [
            TableFive(**{attr: _to_utc(value) for attr, value in zip(TableFive.ATTRIBUTES, row)})
            for row in rows
        ]

    def add_block_five(self, data: TableFive) -> int:
        """Insert a report header and return its generated id."""
        values = {key: _to_utc(value) for key, value in data.to_map().items()}
        stmt = insert(_REPORTS).values(**values)
        try:
            with self.engine.begin() as conn:
                if self.engine.dialect.insert_returning:
                    return int(conn.execute(stmt.returning(literal_column("id"))).scalar_one())
                return int(conn.execute(stmt).lastrowid)
        except SQLAlchemyError as exc:
            raise StorageError(f"executing AddBlockFive query: {exc}") from exc

    def _get_names(self, model: type[M], label: str) -> list[M]:
        stmt = select(*_reference_table(model).c)
        try:
            with self.engine.connect() as conn:
                rows = conn.execute(stmt).all()
        except SQLAlchemyError as exc:
            raise StorageError(f"executing {label} query: {exc}") from exc
        return [model(name=row[0]) for row in rows]

    def _add_each(self, model: type, items: Iterable[Any], label: str) -> None:
        target = _reference_table(model)
        for item in items:
            try:
                with self.engine.begin() as conn:
                    conn.execute(insert(target).values(**item.to_map()))
            except SQLAlchemyError as exc:
                raise StorageError(f"executing {label} query: {exc}") from exc

    def get_all_oil_field(self) -> list[OilField]:
        """Return every oil field."""
        return self._get_names(OilField, "GetAllOilField")

    def get_all_instrument_type(self) -> list[InstrumentType]:
        """Return every instrument type."""
        return self._get_names(InstrumentType, "GetAllInstrumentType")

    def get_all_productive_horizon(self) -> list[ProductiveHorizon]:
        """Return every productive horizon."""
        return self._get_names(ProductiveHorizon, "GetAllProductiveHorizon")

    def add_oil_field(self, fields: Iterable[OilField]) -> None:
        """Insert oil fields one by one."""
        self._add_each(OilField, fields, "AddOilField")

    def add_instrument_type(self, items: Iterable[InstrumentType]) -> None:
        """Insert instrument types one by one."""
        self._add_each(InstrumentType, items, "AddInstrumentType")

    def add_productive_horizon(self, items: Iterable[ProductiveHorizon]) -> None:
        """Insert productive horizons one by one."""
        self._add_each(ProductiveHorizon, items, "AddProductiveHorizon")

    def close(self) -> None:
        """Release all pooled connections."""
        self.engine.dispose()


def connect(cfg: DBConf, logger: Logger) -> Database:
    """Connect to the database at ``cfg.dsn``, retrying with exponential backoff."""
    if cfg.max_retries < 1:
        raise StorageError("connect: no connection attempts configured (max_retries < 1)")

    backoff = _INITIAL_BACKOFF
    error: SQLAlchemyError | None = None
    for attempt in range(1, cfg.max_retries + 1):
        engine: Engine | None = None
        try:
            engine = create_engine(cfg.dsn, **_pool_options(cfg))
            with engine.connect():
                pass
        except SQLAlchemyError as exc:
            error = exc
            if engine is not None:
                engine.dispose()
            logger.infow(
                f"Postgres connect attempt {attempt} failed: {exc}; retrying in {backoff:g}s"
            )
            time.sleep(backoff)
            backoff *= 2
            continue
        return Database(engine, logger)
    raise StorageError(f"connect: {error}") from error