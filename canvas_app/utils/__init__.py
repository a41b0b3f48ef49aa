# canvas_app/utils/__init__.py
"""
Utility functions package.

- general.py: helpers shared by the route layer (service result handling)
"""

from .general import _handle_service_result, utc_timestamp

__all__ = [
    '_handle_service_result',
    'utc_timestamp',
]
