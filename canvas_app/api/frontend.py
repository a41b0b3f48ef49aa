# canvas_app/api/frontend.py
# Serves the single-page canvas editor.

import os
from flask import Blueprint, current_app, send_from_directory
from werkzeug.exceptions import NotFound

bp = Blueprint('frontend', __name__)


@bp.route('/', methods=['GET'])
def index():
    static_root = current_app.config['STATIC_ROOT']
    index_file = current_app.config['INDEX_FILE']

    # Only the index page is exposed; the rest of the deployment root
    # (including the database file) must never be served.
    if not os.path.isfile(os.path.join(static_root, index_file)):
        raise NotFound()

    return send_from_directory(static_root, index_file)
