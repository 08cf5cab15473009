# cookie_shop/model/types.py
import json
import logging
from sqlalchemy.types import TypeDecorator, Text

logger = logging.getLogger(__name__)


class JSONText(TypeDecorator):
    """JSON document stored in a TEXT column.

    ``empty`` is the factory for the value that NULL, blank and unreadable
    column contents decode to (``dict`` or ``list``).
    """
    impl = Text
    cache_ok = True

    def __init__(self, empty=dict, *args, **kwargs):
        self.empty = empty
        super().__init__(*args, **kwargs)

    def process_bind_param(self, value, dialect):
        if value is None:
            value = self.empty()
        return json.dumps(value)

    def process_result_value(self, value, dialect):
        if value is None or not value.strip():
            return self.empty()
        try:
            return json.loads(value)
        except ValueError:
            logger.warning("Unreadable JSON column value %r, using empty default", value[:80])
            return self.empty()
