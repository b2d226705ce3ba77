from __future__ import annotations

from thrift_tostring_parser import convert, dump_json

dump = (
    'User(id=123, name="张三", age=30, '
    'friends=[User(id=456, name="李四", age=28), User(id=789, name="王五", age=35)], '
    'isActive=true, extra={"source": "crm", "score": 0.87})'
)

print(dump_json(convert(dump)))

print("\n--- without _type ---")
print(dump_json(convert(dump, include_type=False)))
