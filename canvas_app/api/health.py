# canvas_app/api/health.py

from flask import Blueprint, jsonify
from canvas_app import messages
from canvas_app.utils import utc_timestamp

bp = Blueprint('health', __name__)


@bp.route('/health', methods=['GET'])
def health_route():
    """Liveness probe. Needs no access key and never touches the database."""
    return jsonify({
        "success": True,
        "message": messages.SERVER_ALIVE,
        "timestamp": utc_timestamp()
    }), 200
