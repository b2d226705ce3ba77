from __future__ import annotations

from thrift_tostring_parser import MalformedSpanError, convert, dump_json, require_record_span

log_lines = [
    '2024-05-01 12:00:01 INFO [rpc] resp=GetOrderResp(code=0, order=Order(id=77, items=["a", "b"])) cost=12ms',
    "2024-05-01 12:00:02 WARN [rpc] upstream timeout, no payload",
]

for line in log_lines:
    try:
        span = require_record_span(line)
    except MalformedSpanError as e:
        print(f"skip: {e}")
        continue
    print(dump_json(convert(span)))
