"""
Registration payload decoding.

Clients send credentials in several shapes: a `data` field holding
JSON-encoded text (form posts from app builders), plain JSON or form fields,
or a JSON string that itself encodes the object. Each decoder either returns
a RegistrationPayload or declines with None; PayloadDecoderChain returns the
first success.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Sequence
from urllib.parse import parse_qsl

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


@dataclass
class RawPayload:
    """Request body as received."""

    body: bytes = b""
    content_type: str = ""

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")

    @property
    def is_form(self) -> bool:
        return FORM_CONTENT_TYPE in (self.content_type or "").lower()


@dataclass
class RegistrationPayload:
    """Normalized registration credentials. Empty strings mean "not supplied"."""

    username: str = ""
    password: str = ""
    email: str = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "RegistrationPayload":
        def _text(key: str) -> str:
            value = data.get(key)
            return "" if value is None else str(value)

        return cls(
            username=_text("username").strip(),
            password=_text("password"),
            email=_text("email").strip(),
        )


Decoder = Callable[[RawPayload], Optional[RegistrationPayload]]


def parse_body(payload: RawPayload) -> Any:
    """Form bodies become a dict; anything else is read as JSON. Unparseable bodies give None."""
    text = payload.text.strip()
    if not text:
        return None
    if payload.is_form:
        return dict(parse_qsl(text, keep_blank_values=True))
    try:
        return json.loads(text)
    except ValueError:
        return None


def _has_credentials(data: Any) -> bool:
    return isinstance(data, dict) and bool(data.get("username") or data.get("password"))


def decode_nested_data(payload: RawPayload) -> Optional[RegistrationPayload]:
    """`{"data": "<json text>"}` or `{"data": {...}}`."""
    body = parse_body(payload)
    if not isinstance(body, dict) or not body.get("data"):
        return None
    data = body["data"]
    if isinstance(data, dict):
        return RegistrationPayload.from_mapping(data)
    if isinstance(data, str):
        try:
            parsed = json.loads(data)
        except ValueError:
            logger.debug("data field is not valid JSON")
            parsed = None
        if isinstance(parsed, dict):
            return RegistrationPayload.from_mapping(parsed)
        # Unparseable data: fall back to sibling fields
        if body.get("username"):
            return RegistrationPayload.from_mapping(body)
    return None


def decode_direct_fields(payload: RawPayload) -> Optional[RegistrationPayload]:
    """`{"username": ..., "password": ..., "email": ...}` as JSON or form fields."""
    body = parse_body(payload)
    if _has_credentials(body):
        return RegistrationPayload.from_mapping(body)
    return None


def decode_raw_string(payload: RawPayload) -> Optional[RegistrationPayload]:
    """A JSON string literal whose content is the JSON object."""
    body = parse_body(payload)
    if not isinstance(body, str):
        return None
    try:
        inner = json.loads(body)
    except ValueError:
        return None
    if _has_credentials(inner):
        return RegistrationPayload.from_mapping(inner)
    return None


DEFAULT_DECODERS: Sequence[Decoder] = (
    decode_nested_data,
    decode_direct_fields,
    decode_raw_string,
)


class PayloadDecoderChain:
    """Try decoders in priority order; the first non-None result wins."""

    def __init__(self, decoders: Sequence[Decoder] = DEFAULT_DECODERS):
        self._decoders = tuple(decoders)

    def decode(self, payload: RawPayload) -> RegistrationPayload:
        for decoder in self._decoders:
            result = decoder(payload)
            if result is not None:
                logger.debug("Registration payload decoded by %s", decoder.__name__)
                return result
        logger.debug("No decoder accepted the registration payload (content-type=%s)", payload.content_type)
        return RegistrationPayload()
