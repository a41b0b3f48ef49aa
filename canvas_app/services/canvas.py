# canvas_app/services/canvas.py
# This file holds the load/save logic for the singleton canvas record.

from flask import current_app
from sqlalchemy import update
from sqlalchemy.exc import SQLAlchemyError
from canvas_app import db, messages
from canvas_app.errors import NotFoundError, StorageError
from canvas_app.models import (
    CanvasRecord,
    FIELD_COLUMNS,
    FIELD_DEFAULTS,
    format_timestamp,
    utcnow,
)


def _field_value(data, name):
    """
    Returns the value to store for one field.

    Missing, null and empty values fall back to the field default, so a save
    always rewrites every column.
    """
    value = data.get(name)
    if not value:
        return FIELD_DEFAULTS[name]
    if not isinstance(value, str):
        return str(value)
    return value


def _error(exc):
    return exc.to_dict(), exc.status_code


def load_record():
    """
    Reads the singleton canvas row and converts it to the frontend format.
    Returns a dict on success, or a tuple (dict, status_code) on error.
    """
    try:
        record = db.session.get(CanvasRecord, CanvasRecord.SINGLETON_ID)
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error("Load error: %s", str(e), exc_info=True)
        return _error(StorageError(messages.LOAD_FAILED))

    if record is None:
        return _error(NotFoundError())

    data = record.to_dict()
    data['version'] = current_app.config['CANVAS_FORMAT_VERSION']

    return {"success": True, "data": data}


def save_record(data):
    """
    Overwrites every field of the singleton row with the supplied values.

    This is a full replace, not a patch: any field the caller omits is reset
    to its default ('Topping Courier' for companyName, '' for the rest).
    All columns and the timestamp are written by a single UPDATE statement.
    """
    data = data if isinstance(data, dict) else {}

    values = {column: _field_value(data, name) for name, column in FIELD_COLUMNS.items()}
    saved_at = utcnow()
    values['last_updated'] = saved_at

    try:
        db.session.execute(
            update(CanvasRecord)
            .where(CanvasRecord.id == CanvasRecord.SINGLETON_ID)
            .values(**values)
        )
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error("Save error: %s", str(e), exc_info=True)
        return _error(StorageError(messages.SAVE_FAILED))

    current_app.logger.info("Canvas saved for '%s'", values['company_name'])

    return {
        "success": True,
        "message": messages.SAVE_SUCCESS,
        "lastSaved": format_timestamp(saved_at),
    }
