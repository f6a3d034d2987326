from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base for every request/response body: snake_case in Python, camelCase on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def as_utc(value):
    # SQLite hands back CURRENT_TIMESTAMP (UTC) without an offset
    if isinstance(value, datetime) and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
