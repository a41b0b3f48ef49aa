"""
Shared-Secret Access Gate

This module protects the canvas endpoints with a single static access key.
There are no users and no sessions: a request is authorized when the key it
carries is exactly equal to the key configured at startup.
"""

from functools import wraps
from flask import request, jsonify, current_app
from canvas_app.errors import AuthError

ACCESS_KEY_HEADER = 'x-access-key'
ACCESS_KEY_FIELD = 'accessKey'


class AccessGate:
    """
    Validates caller-supplied keys against the configured secret.

    The secret is handed in once by create_app() and never changes for the
    lifetime of the process. The gate holds no other state.
    """

    def __init__(self, secret):
        self._secret = secret

    def authorize(self, supplied_key):
        """Returns True only for an exact, non-empty string match."""
        if not isinstance(supplied_key, str) or not supplied_key:
            return False
        return supplied_key == self._secret

    def check(self, supplied_key):
        """
        Same as authorize(), but raises instead of returning False.

        Raises:
            AuthError: If the key is missing or wrong
        """
        if not self.authorize(supplied_key):
            raise AuthError()


def extract_access_key():
    """
    Extracts the access key from the current request.

    The x-access-key header takes priority. When it is missing or empty,
    the accessKey field of the JSON body is used instead.

    Returns:
        str or None: The supplied key, or None if the request carries none
    """
    header_key = request.headers.get(ACCESS_KEY_HEADER)
    if header_key:
        return header_key

    body = request.get_json(silent=True)
    if isinstance(body, dict):
        return body.get(ACCESS_KEY_FIELD)
    return None


def get_access_gate():
    return current_app.extensions['access_gate']


def require_access_key(f):
    """
    Decorator to protect routes with the shared access key.

    Usage:
        @bp.route('/load')
        @require_access_key
        def load_route():
            ...

    Error Responses:
        401: Missing or wrong access key (the wrapped view is not called)
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        try:
            get_access_gate().check(extract_access_key())
        except AuthError as e:
            current_app.logger.warning(
                f"Rejected {request.method} {request.path}: invalid access key"
            )
            return jsonify(e.to_dict()), e.status_code

        return f(*args, **kwargs)

    return decorated_function
