# canvas_app/services/bootstrap.py
# Database bootstrap: runs once at startup, before any request is served.

from flask import current_app
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from canvas_app import db
from canvas_app.errors import StorageError
from canvas_app.models import CanvasRecord, FIELD_COLUMNS, FIELD_DEFAULTS, utcnow


def ensure_ready():
    """
    Ensures the canvas table exists and holds exactly one seeded row.

    Safe to call any number of times: table creation is create-if-absent and
    the seed row is only inserted when the table is empty. Must be called
    inside an application context.

    Raises:
        StorageError: If schema creation or seeding fails. Startup is
            expected to abort; nothing is retried or partially repaired.
    """
    current_app.logger.info("Initializing database at: %s", db.engine.url)

    try:
        db.create_all()
        current_app.logger.info("Canvas table created/verified")

        row_count = db.session.query(func.count(CanvasRecord.id)).scalar()

        if row_count == 0:
            seed = CanvasRecord(id=CanvasRecord.SINGLETON_ID, last_updated=utcnow())
            for name, column in FIELD_COLUMNS.items():
                setattr(seed, column, FIELD_DEFAULTS[name])
            db.session.add(seed)
            db.session.commit()
            current_app.logger.info("Initial canvas record inserted")
        else:
            current_app.logger.info("Database already has data (%s row(s))", row_count)

    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error("Database bootstrap failed: %s", str(e), exc_info=True)
        raise StorageError() from e
