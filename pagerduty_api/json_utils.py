import json
from dataclasses import asdict, is_dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any
from zoneinfo import ZoneInfo

from pydantic import BaseModel

from pagerduty_api.errors import SerializationError
from pagerduty_api.time_zones import encode_time_zone

JSON_COMPACT_SEPARATORS = (",", ":")


def pagerduty_encoder(obj: Any) -> Any:
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json", by_alias=True, exclude_none=True)

    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)

    if isinstance(obj, ZoneInfo):
        return encode_time_zone(obj)

    if isinstance(obj, datetime | date):
        return obj.isoformat()

    if isinstance(obj, Enum):
        return obj.value

    if isinstance(obj, Decimal):
        return float(obj)

    raise TypeError(
        f"Object of type '{obj.__class__.__name__}' is not JSON serializable"
    )


def json_dumps(data: Any) -> bytes:
    """Serialize a request body to JSON.

    Pydantic models are dumped by alias and ``None`` fields are left out, so
    unset optional attributes are never sent to PagerDuty.

    Args:
        data: Model, dataclass, mapping or list to serialize

    Returns:
        UTF-8 encoded JSON document

    Raises:
        SerializationError: If data (or anything nested in it) cannot be
            represented as JSON
    """
    try:
        if isinstance(data, BaseModel):
            data = pagerduty_encoder(data)
        text = json.dumps(
            data,
            separators=JSON_COMPACT_SEPARATORS,
            default=pagerduty_encoder,
            allow_nan=False,
        )
    except (TypeError, ValueError) as e:
        raise SerializationError(f"cannot encode request body: {e}") from e
    return text.encode("utf-8")
