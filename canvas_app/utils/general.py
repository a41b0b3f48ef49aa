# canvas_app/utils/general.py
"""
General-purpose utility functions used by the route layer.
"""

from datetime import datetime, timezone
from flask import jsonify


def _handle_service_result(result, default_error_status=500):
    """
    Parses the result from a service function.
    If it's a tuple (error_dict, status_code), it uses the custom status code.
    Otherwise, it assumes success (status 200) or uses the default error status.

    Adds 'error_code' field to error responses for structured frontend handling.
    """
    # Check if the result is a tuple (error_dict, status_code)
    if isinstance(result, tuple) and len(result) == 2:
        error_dict, status_code = result
        # Add error_code for frontend contract
        if not error_dict.get("success", True):
            error_dict["error_code"] = error_dict.get("error_code", status_code)
        return jsonify(error_dict), status_code

    # If not a tuple, check the 'success' key in the dictionary
    if result.get("success"):
        return jsonify(result), 200
    else:
        result["error_code"] = result.get("error_code", default_error_status)
        return jsonify(result), default_error_status


def utc_timestamp():
    """Current time as an ISO-8601 UTC string with millisecond precision."""
    now = datetime.now(timezone.utc)
    return now.strftime('%Y-%m-%dT%H:%M:%S.') + f'{now.microsecond // 1000:03d}Z'
