import json

import pytest
from pydantic import ValidationError

from curlgen.parser.base import BasicAuth, RequestRecord


class TestRequestRecord:
    def test_defaults(self):
        req = RequestRecord()
        assert req.method == "GET"
        assert req.url == ""
        assert req.headers == {}
        assert req.body is None
        assert req.content_type is None
        assert req.auth is None
        assert req.follow_redirects is True
        assert req.insecure is False

    def test_method_is_uppercased(self):
        assert RequestRecord(method="post").method == "POST"

    def test_empty_method_falls_back_to_get(self):
        assert RequestRecord(method="  ").method == "GET"

    def test_accepts_serialized_names(self):
        req = RequestRecord(contentType="text/plain", followRedirects=False)
        assert req.content_type == "text/plain"
        assert req.follow_redirects is False

    def test_is_frozen(self):
        req = RequestRecord(url="https://x.com")
        with pytest.raises(ValidationError):
            req.url = "https://y.com"

    def test_has_options(self):
        assert RequestRecord(url="https://x.com").has_options() is False
        assert RequestRecord(method="DELETE").has_options() is True
        assert RequestRecord(headers={"A": "b"}).has_options() is True
        assert RequestRecord(body="x").has_options() is True
        assert RequestRecord(auth=BasicAuth(user="u")).has_options() is True


class TestBasicAuth:
    def test_password_defaults_to_empty(self):
        assert BasicAuth(user="alice").password == ""

    def test_pass_alias(self):
        auth = BasicAuth(user="alice", **{"pass": "secret"})
        assert auth.password == "secret"


class TestStructuredOutput:
    def test_json_key_order_and_omitted_fields(self):
        req = RequestRecord(url="https://x.com")
        data = json.loads(req.to_json())
        assert list(data) == ["method", "url", "headers", "followRedirects", "insecure"]
        assert data["method"] == "GET"
        assert data["headers"] == {}

    def test_json_uses_two_space_indent(self):
        assert '\n  "method": "GET"' in RequestRecord().to_json()

    def test_json_full_record(self):
        req = RequestRecord(
            method="POST",
            url="https://x.com",
            headers={"Content-Type": "application/json"},
            body='{"a":1}',
            content_type="application/json",
            auth=BasicAuth(user="u", password="p"),
        )
        data = json.loads(req.to_json())
        assert list(data) == [
            "method", "url", "headers", "body", "contentType", "auth", "followRedirects", "insecure",
        ]
        assert data["auth"] == {"user": "u", "pass": "p"}

    def test_yaml_output(self):
        text = RequestRecord(method="PUT", url="https://x.com").to_yaml()
        assert text.splitlines()[0] == "method: PUT"
        assert "url: https://x.com" in text
        assert "followRedirects: true" in text
