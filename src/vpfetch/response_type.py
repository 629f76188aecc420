"""Response types accepted in an authorization request."""

from collections.abc import Mapping
from enum import Enum
from typing import Any

from .models import UnvalidatedRequestObject

UNKNOWN_RESPONSE_TYPE = "unknown"


class UnsupportedResponseType(ValueError):
    """The request declared a response type outside the supported set."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"unsupported response type: {value}")


def _string_value(raw: Any) -> str | None:
    if isinstance(raw, str):
        return raw
    if isinstance(raw, bool):
        return "true" if raw else "false"
    if isinstance(raw, (int, float)):
        return str(raw)
    return None


class ResponseType(str, Enum):
    VP_TOKEN = "vp_token"
    ID_TOKEN = "id_token"
    VP_AND_ID_TOKEN = "vp_token id_token"
    CODE = "code"

    @classmethod
    def parse(cls, raw: str | None) -> "ResponseType":
        """Validate a raw response type.

        Raises:
            UnsupportedResponseType: carrying `raw`, or "unknown" when it is
                empty or missing.
        """
        try:
            return cls(raw)
        except ValueError:
            raise UnsupportedResponseType(raw or UNKNOWN_RESPONSE_TYPE) from None

    @classmethod
    def from_request_object(cls, request_object: Mapping[str, Any]) -> "ResponseType":
        """Read `response_type` from a decoded request object document.

        Scalars are read as their JSON text (`1` -> "1", `true` -> "true");
        arrays, objects and null count as absent.
        """
        return cls.parse(_string_value(request_object.get("response_type")))

    @classmethod
    def from_unvalidated(cls, request: UnvalidatedRequestObject) -> "ResponseType":
        return cls.parse(request.response_type)
