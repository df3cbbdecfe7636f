from __future__ import annotations

from typing import Any, Optional

import httpx
from loguru import logger
from pydantic import ValidationError

from .config import INSPECT_API_URL
from .converter import convert, serialize_record
from .errors import InspectionContractError
from .schemas import ApiError, InspectionResult
from .transport import get_json, http_client


def _attempted_url(inspect_url: str) -> str:
    return f"{INSPECT_API_URL}?url={inspect_url}"


def api_error(payload: Any) -> Optional[ApiError]:
    """Return the API error carried by ``payload``, if any."""
    if not isinstance(payload, dict) or "error" not in payload:
        return None
    return ApiError.model_validate(payload)


def parse_item(payload: Any, name_tag: Optional[str] = None) -> str:
    """
    Turn a successful inspection payload into separator-terminated record text.

    A payload without a valid ``iteminfo`` means the API contract changed
    under us, not that one item is bad, so it raises.
    """
    if not isinstance(payload, dict) or "iteminfo" not in payload:
        raise InspectionContractError("Invalid item? (No iteminfo in inspection response)")
    try:
        result = InspectionResult.model_validate(payload)
    except ValidationError as e:
        raise InspectionContractError(f"Malformed iteminfo: {e}") from e

    return serialize_record(convert(result, name_tag))


def fetch_item(
    inspect_url: str,
    name_tag: Optional[str] = None,
    client: Optional[httpx.Client] = None,
) -> Optional[str]:
    """
    Fetch one item from the inspection API and return its record text.

    Returns None when the API rejects the item; that failure is local to
    this item. Transport and contract problems propagate as exceptions.
    """
    if client is None:
        with http_client() as own_client:
            return fetch_item(inspect_url, name_tag, client=own_client)

    payload = get_json(client, INSPECT_API_URL, params={"url": inspect_url})

    err = api_error(payload)
    if err is not None:
        logger.warning(
            "Api Error: {} ({}, Status: {}) [{}]",
            err.error,
            err.code,
            err.status,
            _attempted_url(inspect_url),
        )
        return None

    return parse_item(payload, name_tag)
