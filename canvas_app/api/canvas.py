# canvas_app/api/canvas.py
# (This file holds the canvas load/save routes.)

from flask import Blueprint, request
from canvas_app.access_gate import require_access_key
from canvas_app.utils import _handle_service_result
from canvas_app.services.canvas import load_record, save_record

bp = Blueprint('canvas', __name__)


@bp.route('/save', methods=['POST'])
@require_access_key
def save_route():
    """
    Replaces the stored canvas with the request body.
    Fields missing from the body are reset to their defaults.
    """
    data = request.get_json(silent=True) or {}
    result = save_record(data)
    return _handle_service_result(result)


@bp.route('/load', methods=['GET'])
@require_access_key
def load_route():
    """Returns the stored canvas with its last save time and format version."""
    result = load_record()
    return _handle_service_result(result)
