# auth.py

from flask import Blueprint, request, jsonify, current_app
from canvas_app import messages
from canvas_app.access_gate import get_access_gate, ACCESS_KEY_FIELD

# Define the Blueprint
bp = Blueprint('auth', __name__)


@bp.route('/login', methods=['POST'])
def login():
    """
    Checks the access key typed into the frontend login form.

    Only the accessKey body field is considered here; the x-access-key header
    is what the frontend sends afterwards on /api/load and /api/save.

    Response:
        200: {success, message, accessKey} when the key matches
        401: {success: false, message} otherwise
    """
    data = request.get_json(silent=True) or {}
    access_key = data.get(ACCESS_KEY_FIELD) if isinstance(data, dict) else None

    if get_access_gate().authorize(access_key):
        return jsonify({
            "success": True,
            "message": messages.LOGIN_SUCCESS,
            "accessKey": access_key
        }), 200

    current_app.logger.warning("Failed login attempt")
    return jsonify({
        "success": False,
        "message": messages.LOGIN_FAILED
    }), 401
