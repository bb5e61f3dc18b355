"""Report and reference-book service over the relational storage."""

from __future__ import annotations

from typing import Iterable

from .logger import Logger
from .models import InstrumentType, OilField, ProductiveHorizon, TableFive
from .sqlstore import Database, StorageError


class ReportService:
    """Reads and saves reports and reference books, logging each outcome."""

    def __init__(self, db: Database, logger: Logger) -> None:
        self._db = db
        self._log = logger
        logger.infow("Postgres repository initialized successfully")

    def get_all_reports(self) -> list[TableFive]:
        """Return every saved report header."""
        try:
            reports = self._db.get_all_table_five()
        except StorageError as exc:
            self._log.errorw("GetAllReports failed", "error", exc)
            raise
        self._log.debugw("GetAllReports succeeded", "count", len(reports))
        return reports

    def save_report(self, table_five: TableFive) -> int:
        """Save a report header and return its id."""
        try:
            report_id = self._db.add_block_five(table_five)
        except StorageError as exc:
            self._log.errorw("SaveReport failed", "error", exc)
            raise
        self._log.debugw("SaveReport succeeded", "id", report_id)
        return report_id

    def get_all_instrument_types(self) -> list[InstrumentType]:
        """Return every instrument type."""
        try:
            items = self._db.get_all_instrument_type()
        except StorageError as exc:
            self._log.errorw("GetAllInstrumentTypes failed", "error", exc)
            raise
        self._log.debugw("GetAllInstrumentTypes succeeded", "count", len(items))
        return items

    def get_all_productive_horizons(self) -> list[ProductiveHorizon]:
        """Return every productive horizon."""
        try:
            items = self._db.get_all_productive_horizon()
        except StorageError as exc:
            self._log.errorw("GetAllProductiveHorizons failed", "error", exc)
            raise
        self._log.debugw("GetAllProductiveHorizons succeeded", "count", len(items))
        return items

    def get_all_oil_fields(self) -> list[OilField]:
        """Return every oil field."""
        try:
            items = self._db.get_all_oil_field()
        except StorageError as exc:
            self._log.errorw("GetAllOilFields failed", "error", exc)
            raise
        self._log.debugw("GetAllOilFields succeeded", "count", len(items))
        return items

    def save_instrument_type(self, types: Iterable[InstrumentType]) -> None:
        """Save instrument types."""
        items = list(types)
        try:
            self._db.add_instrument_type(items)
        except StorageError as exc:
            self._log.errorw("SaveInstrumentType failed", "error", exc)
            raise
        self._log.debugw("SaveInstrumentType succeeded", "count", len(items))

    def save_oil_field(self, fields: Iterable[OilField]) -> None:
        """Save oil fields."""
        items = list(fields)
        try:
            self._db.add_oil_field(items)
        except StorageError as exc:
            self._log.errorw("SaveOilField failed", "error", exc)
            raise
        self._log.debugw("SaveOilField succeeded", "count", len(items))

    def save_productive_horizon(self, horizons: Iterable[ProductiveHorizon]) -> None:
        """Save productive horizons."""
        items = list(horizons)
        try:
            self._db.add_productive_horizon(items)
        except StorageError as exc:
            self._log.errorw("SaveProductiveHorizon failed", "error", exc)
            raise
        self._log.debugw("SaveProductiveHorizon succeeded", "count", len(items))