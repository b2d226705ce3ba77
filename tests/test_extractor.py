from __future__ import annotations

import pytest
from thrift_tostring_parser import MalformedSpanError, convert, find_record_span, require_record_span


def test_span_from_log_line():
    line = '2024-05-01 INFO handled req=User(id=1, tags=[1, 2], m={"a": "x)"}) in 3ms'
    assert find_record_span(line) == 'User(id=1, tags=[1, 2], m={"a": "x)"})'


def test_span_includes_identifier():
    span = find_record_span("User(id=123, name=\"张三\", friends=[User(id=456)]), isActive=true)")
    assert span == 'User(id=123, name="张三", friends=[User(id=456)])'
    assert convert(span)["friends"][0]["id"] == 456


def test_first_record_wins():
    assert find_record_span("A(x=1) B(y=2)") == "A(x=1)"


@pytest.mark.parametrize("text", ["", "plain text", "User(id=1, name=\"x\"", "[1, 2]"])
def test_no_match(text):
    assert find_record_span(text) is None


def test_require_raises():
    with pytest.raises(MalformedSpanError, match="expected record format"):
        require_record_span("no record here")


def test_balanced_counts():
    text = "Outer(a=[Inner(b={c: (1)})], d=2) trailing )))"
    span = find_record_span(text)
    for opener, closer in ("()", "[]", "{}"):
        assert span.count(opener) == span.count(closer)
    assert span.endswith("d=2)")
