import pytest

from canvas_app.access_gate import AccessGate, extract_access_key
from canvas_app.errors import AuthError


@pytest.fixture
def gate():
    return AccessGate('s3cret')


def test_authorize_accepts_exact_secret(gate):
    assert gate.authorize('s3cret') is True


@pytest.mark.parametrize('supplied', ['S3CRET', 's3cret ', ' s3cret', 's3cre', 'wrong'])
def test_authorize_rejects_other_strings(gate, supplied):
    assert gate.authorize(supplied) is False


@pytest.mark.parametrize('supplied', [None, '', 123, ['s3cret']])
def test_authorize_rejects_missing_or_non_string(gate, supplied):
    assert gate.authorize(supplied) is False


def test_empty_secret_never_authorizes():
    assert AccessGate('').authorize('') is False


def test_check_raises_auth_error(gate):
    gate.check('s3cret')

    with pytest.raises(AuthError) as excinfo:
        gate.check('nope')

    assert excinfo.value.status_code == 401
    assert excinfo.value.to_dict()['success'] is False


def test_header_takes_priority_over_body(app):
    with app.test_request_context(
        '/api/save', method='POST',
        headers={'x-access-key': 'from-header'},
        json={'accessKey': 'from-body'},
    ):
        assert extract_access_key() == 'from-header'


def test_body_used_when_header_missing(app):
    with app.test_request_context('/api/save', method='POST', json={'accessKey': 'from-body'}):
        assert extract_access_key() == 'from-body'


def test_body_used_when_header_empty(app):
    with app.test_request_context(
        '/api/save', method='POST',
        headers={'x-access-key': ''},
        json={'accessKey': 'from-body'},
    ):
        assert extract_access_key() == 'from-body'


def test_no_credential_anywhere(app):
    with app.test_request_context('/api/load', method='GET'):
        assert extract_access_key() is None


def test_non_json_body_yields_no_credential(app):
    with app.test_request_context('/api/save', method='POST', data='accessKey=x',
                                  content_type='text/plain'):
        assert extract_access_key() is None
