"""Tests for the registration payload decoder chain."""

import json
from urllib.parse import urlencode

from server.services import PayloadDecoderChain, RawPayload, RegistrationPayload

JSON = "application/json"
FORM = "application/x-www-form-urlencoded"

CREDENTIALS = {"username": "alice", "password": "secret1", "email": "alice@example.com"}


def _decode(body, content_type=JSON):
    if isinstance(body, str):
        body = body.encode("utf-8")
    return PayloadDecoderChain().decode(RawPayload(body=body, content_type=content_type))


class TestDecoderChain:
    def test_direct_json_fields(self):
        payload = _decode(json.dumps(CREDENTIALS))
        assert payload == RegistrationPayload(**CREDENTIALS)

    def test_direct_form_fields(self):
        payload = _decode(urlencode(CREDENTIALS), FORM)
        assert payload.username == "alice"
        assert payload.email == "alice@example.com"

    def test_nested_data_string_in_form(self):
        payload = _decode(urlencode({"data": json.dumps(CREDENTIALS)}), FORM)
        assert payload.username == "alice"
        assert payload.password == "secret1"

    def test_nested_data_object(self):
        payload = _decode(json.dumps({"data": CREDENTIALS}))
        assert payload.username == "alice"

    def test_nested_data_wins_over_direct_fields(self):
        body = {"data": json.dumps({"username": "nested", "password": "secret2"}), "username": "direct", "password": "x"}
        assert _decode(json.dumps(body)).username == "nested"

    def test_unparseable_data_falls_back_to_siblings(self):
        body = {"data": "{not json", "username": "bob", "password": "secret3"}
        payload = _decode(json.dumps(body))
        assert payload.username == "bob"
        assert payload.password == "secret3"

    def test_raw_json_string(self):
        payload = _decode(json.dumps(json.dumps(CREDENTIALS)), "text/plain")
        assert payload.username == "alice"

    def test_fields_are_trimmed(self):
        payload = _decode(json.dumps({"username": "  alice ", "password": " pw with spaces ", "email": " a@b.io "}))
        assert payload.username == "alice"
        assert payload.email == "a@b.io"
        assert payload.password == " pw with spaces "

    def test_nothing_decodes_to_empty(self):
        assert _decode(b"") == RegistrationPayload()
        assert _decode("not json at all") == RegistrationPayload()
        assert _decode(json.dumps({"other": 1})) == RegistrationPayload()

    def test_custom_decoder_order(self):
        calls = []

        def first(payload):
            calls.append("first")
            return None

        def second(payload):
            calls.append("second")
            return RegistrationPayload(username="fixed")

        def third(payload):
            calls.append("third")
            return RegistrationPayload(username="never")

        chain = PayloadDecoderChain([first, second, third])
        assert chain.decode(RawPayload()).username == "fixed"
        assert calls == ["first", "second"]
