"""
Detection store — owns the database engine, seeds example rows, and answers
the single "list all detections" query.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError

from pothole_dashboard.database import init_db, make_engine, make_session_factory
from pothole_dashboard.errors import MalformedRecord, StorageUnavailable
from pothole_dashboard.models import DetectionRecord, DetectionRow, record_from_row
from pothole_dashboard.seed import SEED_ROWS

logger = logging.getLogger(__name__)

_SEED_COLUMNS = (
    "id", "image_name", "status", "type",
    "conf_a", "conf_b", "conf_c",
    "timestamp", "lat", "lng",
)


class DetectionStore:
    """Read-only access to detection records, seeded once when empty."""

    def __init__(self, database_url: str):
        self.database_url = database_url
        self._engine = None
        self._session_factory = None

    # ── Lifecycle ──────────────────────────────────────────────────────

    def open(self):
        """Create the engine and the detections table."""
        if self._engine is not None:
            return
        engine = make_engine(self.database_url)
        try:
            init_db(engine)
        except SQLAlchemyError as e:
            engine.dispose()
            raise StorageUnavailable(f"Cannot open {self.database_url}: {e}") from e
        self._engine = engine
        self._session_factory = make_session_factory(engine)
        logger.info("Detection store opened at %s", self.database_url)

    def close(self):
        if self._engine is None:
            return
        self._engine.dispose()
        self._engine = None
        self._session_factory = None
        logger.info("Detection store closed.")

    @property
    def is_open(self) -> bool:
        return self._engine is not None

    def __enter__(self):
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def _session(self):
        if self._session_factory is None:
            raise StorageUnavailable("Detection store is not open.")
        return self._session_factory()

    # ── Queries ────────────────────────────────────────────────────────

    def count(self) -> int:
        db = self._session()
        try:
            return db.query(DetectionRow).count()
        except SQLAlchemyError as e:
            raise StorageUnavailable(str(e)) from e
        finally:
            db.close()

    def seed_if_empty(self) -> int:
        """Insert the example rows if the table is empty. Returns rows inserted."""
        db = self._session()
        try:
            if db.query(DetectionRow).count() > 0:
                return 0
            db.add_all(DetectionRow(**dict(zip(_SEED_COLUMNS, row))) for row in SEED_ROWS)
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            raise StorageUnavailable(str(e)) from e
        finally:
            db.close()

        logger.info("Seeded %d example detections.", len(SEED_ROWS))
        return len(SEED_ROWS)

    def list_all(self) -> list[DetectionRecord]:
        """Return every well-formed record, newest capture first."""
        db = self._session()
        try:
            rows = (
                db.query(DetectionRow)
                .order_by(DetectionRow.timestamp.desc(), DetectionRow.id.asc())
                .all()
            )
        except SQLAlchemyError as e:
            raise StorageUnavailable(str(e)) from e
        finally:
            db.close()

        records = []
        for row in rows:
            try:
                records.append(record_from_row(row))
            except MalformedRecord as e:
                logger.warning("Skipping detection: %s", e)
        return records
