# models.py

from . import db
from datetime import datetime, timezone

# This file defines the structure of the canvas table.
# SQLAlchemy translates the class into the actual database table.

DEFAULT_COMPANY_NAME = 'Topping Courier'

# Maps the camelCase names used by the frontend to the storage columns.
# Order matters: it is the order fields are shown in the canvas editor.
FIELD_COLUMNS = {
    'companyName': 'company_name',
    'customerSegments': 'customer_segments',
    'valuePropositions': 'value_propositions',
    'channels': 'channels',
    'customerRelationships': 'customer_relationships',
    'revenueStreams': 'revenue_streams',
    'keyResources': 'key_resources',
    'keyActivities': 'key_activities',
    'keyPartners': 'key_partners',
    'costStructure': 'cost_structure',
}

FIELD_DEFAULTS = {name: '' for name in FIELD_COLUMNS}
FIELD_DEFAULTS['companyName'] = DEFAULT_COMPANY_NAME


def utcnow():
    """Naive UTC timestamp, the form SQLite stores DateTime columns in."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def format_timestamp(value):
    """Renders a stored timestamp as ISO-8601 UTC (e.g. 2025-01-01T10:00:00.123456Z)."""
    if value is None:
        return None
    return value.isoformat(timespec='microseconds') + 'Z'


class CanvasRecord(db.Model):
    """
    The one business model canvas the whole application edits.
    Exactly one row (id=1) exists after bootstrap; it is never deleted.
    """
    __tablename__ = 'canvas'

    SINGLETON_ID = 1

    id = db.Column(db.Integer, primary_key=True)
    company_name = db.Column(db.Text, default=DEFAULT_COMPANY_NAME)
    customer_segments = db.Column(db.Text, default='')
    value_propositions = db.Column(db.Text, default='')
    channels = db.Column(db.Text, default='')
    customer_relationships = db.Column(db.Text, default='')
    revenue_streams = db.Column(db.Text, default='')
    key_resources = db.Column(db.Text, default='')
    key_activities = db.Column(db.Text, default='')
    key_partners = db.Column(db.Text, default='')
    cost_structure = db.Column(db.Text, default='')
    last_updated = db.Column(db.DateTime, default=utcnow)

    def to_dict(self):
        """Converts the row to the frontend's camelCase format."""
        data = {name: getattr(self, column) for name, column in FIELD_COLUMNS.items()}
        data['lastSaved'] = format_timestamp(self.last_updated)
        return data

    def __repr__(self):
        return f'<CanvasRecord {self.id} ({self.company_name})>'
