from curlgen.generator.curl import CurlGenerator, shell_quote
from curlgen.parser.base import BasicAuth, RequestRecord
from curlgen.parser.curl import parse_curl


class TestShellQuote:
    def test_plain(self):
        assert shell_quote("abc") == "'abc'"

    def test_embedded_single_quote(self):
        assert shell_quote("it's") == "'it'\\''s'"


class TestCurlGenerator:
    def test_simple_get(self):
        assert CurlGenerator().generate(RequestRecord(url="https://x.com")) == "curl \\\n  'https://x.com'"

    def test_default_record(self):
        assert CurlGenerator().generate(RequestRecord()) == "curl \\\n  ''"

    def test_full_request_order(self):
        req = RequestRecord(
            method="POST",
            url="https://x.com",
            headers={"Content-Type": "application/json", "X-Id": "1"},
            body='{"a":1}',
            auth=BasicAuth(user="alice", password="secret"),
            insecure=True,
        )
        lines = CurlGenerator().generate(req).split(" \\\n  ")
        assert lines == [
            "curl",
            "-X POST",
            "'https://x.com'",
            "-H 'Content-Type: application/json'",
            "-H 'X-Id: 1'",
            "-u 'alice:secret'",
            "-d '{\"a\":1}'",
            "-k",
        ]

    def test_does_not_mutate_record(self):
        req = RequestRecord(method="PUT", url="https://x.com", headers={"A": "1"})
        before = req.model_dump()
        CurlGenerator().generate(req)
        assert req.model_dump() == before


class TestCurlRoundTrip:
    def test_simple_get_round_trip(self):
        req = RequestRecord(url="https://x.com/a?b=1")
        parsed = parse_curl(CurlGenerator().generate(req))
        assert parsed.method == req.method
        assert parsed.url == req.url

    def test_full_round_trip(self):
        req = RequestRecord(
            method="PATCH",
            url="https://x.com",
            headers={"Content-Type": "text/plain"},
            body="it's here",
            content_type="text/plain",
            auth=BasicAuth(user="a", password="b:c"),
            insecure=True,
        )
        assert parse_curl(CurlGenerator().generate(req)).model_dump() == req.model_dump()
