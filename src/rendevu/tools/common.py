"""Helpers shared by the Cal.com tool modules."""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from rendevu.client import CalcomClient
from rendevu.config import load_calcom_config
from rendevu.credentials import CREDENTIALS
from rendevu.result import ApiResult

TIME_PATTERN = r"^([0-1][0-9]|2[0-3]):[0-5][0-9]$"
DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"
EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class ToolParams(BaseModel):
    """Base for tool input models: snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )

    def body(self, exclude: set[str] | None = None) -> dict[str, Any]:
        """Request body with unset fields dropped."""
        return self.model_dump(by_alias=True, exclude_none=True, exclude=exclude, mode="json")


def check_url(value: str) -> str:
    parsed = urlparse(value)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError(f"Invalid URL: {value!r}")
    return value


def check_email(value: str) -> str:
    if not EMAIL_PATTERN.match(value):
        raise ValueError(f"Invalid email: {value!r}")
    return value


def client_resolver(
    client: CalcomClient | None,
) -> Callable[[], CalcomClient | dict[str, str]]:
    """Return a callable yielding the injected client, one built from env, or an error dict."""

    def _get_client() -> CalcomClient | dict[str, str]:
        if client is not None:
            return client
        config = load_calcom_config()
        if config is None:
            return {
                "error": "Cal.com API key not configured",
                "help": CREDENTIALS["calcom"].help,
            }
        return CalcomClient.from_config(config)

    return _get_client


def format_result(result: ApiResult, message: str | None = None) -> dict[str, Any]:
    """Shape an ApiResult for the MCP caller."""
    if not result.is_success:
        return {"error": result.error.message, "code": result.error.code}
    output: dict[str, Any] = {"data": result.data, **result.extra}
    if result.status != "success":
        output["status"] = result.status
    if message:
        output["message"] = message
    return output
