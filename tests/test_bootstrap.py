import pytest
from sqlalchemy import func

from canvas_app import create_app, db
from canvas_app.errors import StorageError
from canvas_app.models import CanvasRecord
from canvas_app.services.bootstrap import ensure_ready
from canvas_app.services.canvas import save_record

from conftest import make_config


def _row_count():
    return db.session.query(func.count(CanvasRecord.id)).scalar()


def test_bootstrap_seeds_singleton_row(app_context):
    assert _row_count() == 1

    record = db.session.get(CanvasRecord, 1)
    assert record.company_name == 'Topping Courier'
    assert record.customer_segments == ''
    assert record.cost_structure == ''
    assert record.last_updated is not None


def test_bootstrap_is_idempotent(app_context):
    before = db.session.get(CanvasRecord, 1).to_dict()

    ensure_ready()
    ensure_ready()

    db.session.expire_all()
    assert _row_count() == 1
    assert db.session.get(CanvasRecord, 1).to_dict() == before


def test_bootstrap_keeps_saved_data(app_context):
    save_record({'companyName': 'Acme', 'channels': 'Web'})

    ensure_ready()

    db.session.expire_all()
    record = db.session.get(CanvasRecord, 1)
    assert _row_count() == 1
    assert record.company_name == 'Acme'
    assert record.channels == 'Web'


def test_second_app_on_same_database_does_not_reseed(tmp_path):
    config = make_config(tmp_path)
    first = create_app(config)
    with first.app_context():
        save_record({'companyName': 'Acme'})
        db.engine.dispose()

    second = create_app(config)
    with second.app_context():
        assert _row_count() == 1
        assert db.session.get(CanvasRecord, 1).company_name == 'Acme'
        db.session.remove()
        db.engine.dispose()


def test_bootstrap_failure_raises_storage_error(tmp_path):
    unreachable = tmp_path / 'missing-dir' / 'database.sqlite'
    config = make_config(tmp_path, SQLALCHEMY_DATABASE_URI='sqlite:///' + str(unreachable))

    with pytest.raises(StorageError) as excinfo:
        create_app(config)

    assert excinfo.value.status_code == 500


def test_run_entry_point_exits_non_zero_on_bootstrap_failure(monkeypatch):
    import sys
    import importlib
    import canvas_app

    def failing_create_app():
        raise StorageError()

    monkeypatch.setattr(canvas_app, 'create_app', failing_create_app)
    monkeypatch.delitem(sys.modules, 'run', raising=False)

    with pytest.raises(SystemExit) as excinfo:
        importlib.import_module('run')

    assert excinfo.value.code == 1
