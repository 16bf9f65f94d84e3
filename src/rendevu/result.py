"""ApiResult: the success/error envelope returned by every Cal.com call.

The Cal.com v2 API already answers with ``{"status": ..., "data": ...}`` or
``{"status": "error", "error": {...}}``. The client normalizes transport and
parse failures into the same shape so callers handle one type.

Upstream envelopes are kept as-is: keys beyond ``status``/``data``/``error``
(e.g. ``pagination`` on list endpoints) are carried as extra fields, and only
``status == "error"`` marks a failure.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator

TIMEOUT = "TIMEOUT"
NETWORK_ERROR = "NETWORK_ERROR"
PARSE_ERROR = "PARSE_ERROR"
INVALID_RESPONSE = "INVALID_RESPONSE"
UNKNOWN_ERROR = "UNKNOWN_ERROR"

ENVELOPE_KEYS = ("status", "data", "error")


class ApiError(BaseModel):
    model_config = ConfigDict(frozen=True)

    message: str
    code: str = UNKNOWN_ERROR


class ApiResult(BaseModel):
    """``status="error"`` with ``error``, otherwise the upstream ``data``."""

    model_config = ConfigDict(frozen=True, extra="allow")

    status: str
    data: Any = None
    error: ApiError | None = None

    @model_validator(mode="after")
    def _one_variant(self) -> ApiResult:
        if self.status == "error" and self.error is None:
            raise ValueError("error result requires an error payload")
        if self.status == "success" and self.error is not None:
            raise ValueError("success result cannot carry an error payload")
        return self

    @classmethod
    def success(cls, data: Any = None) -> ApiResult:
        return cls(status="success", data=data)

    @classmethod
    def failure(cls, message: str, code: str = UNKNOWN_ERROR) -> ApiResult:
        return cls(status="error", error=ApiError(message=message, code=code))

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> ApiResult:
        """Wrap an upstream envelope, filling in a code when the upstream omits one."""
        fields = {k: v for k, v in payload.items() if k not in ENVELOPE_KEYS}
        status = str(payload.get("status"))
        error = payload.get("error")

        if status == "error":
            if not isinstance(error, dict):
                error = {}
            fields["error"] = ApiError(
                message=str(error.get("message") or "Unknown error"),
                code=str(error.get("code") or UNKNOWN_ERROR),
            )
        else:
            fields["data"] = payload.get("data")
            # Unrecognized tags keep whatever error detail came with them
            if status != "success" and isinstance(error, dict) and error.get("message"):
                fields["error"] = ApiError(
                    message=str(error["message"]),
                    code=str(error.get("code") or UNKNOWN_ERROR),
                )
        return cls(status=status, **fields)

    @property
    def is_success(self) -> bool:
        return self.status != "error"

    @property
    def extra(self) -> dict[str, Any]:
        """Upstream envelope keys other than status, data and error."""
        return dict(self.model_extra or {})

    def to_dict(self) -> dict[str, Any]:
        """Wire shape: omits whichever variant is absent."""
        result: dict[str, Any] = {"status": self.status}
        if self.is_success:
            result["data"] = self.data
        if self.error is not None:
            result["error"] = self.error.model_dump()
        result.update(self.extra)
        return result
