# -*- coding: utf-8 -*-
from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import Optional

LOG_RAW_ENV = "THRIFT2JSON_LOG_RAW"
PREVIEW_CHARS_ENV = "THRIFT2JSON_LOG_PREVIEW_CHARS"

SENSITIVE_FIELD_WORDS = ("password", "passwd", "secret", "token", "apikey", "api_key", "credential", "email", "phone")

# name=value / name: value where name contains a sensitive word; the value is
# a quoted run or runs up to the next field/closing delimiter
_SENSITIVE_FIELD_RE = re.compile(
    r"(?P<key>\b\w*(?:%s)\w*\s*[=:]\s*)(?P<value>\"(?:\\.|[^\"\\])*\"|'(?:\\.|[^'\\])*'|[^,)\]}\s]+)"
    % "|".join(SENSITIVE_FIELD_WORDS),
    re.IGNORECASE,
)
_EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")


@dataclass(frozen=True)
class RawLogPolicy:
    """Whether raw record dumps may appear in log records (off unless opted in)."""
    enabled: bool
    preview_chars: int = 200

    @staticmethod
    def from_env() -> "RawLogPolicy":
        enabled = os.getenv(LOG_RAW_ENV, "false").lower() == "true"
        try:
            preview_chars = int(os.getenv(PREVIEW_CHARS_ENV, "200"))
        except ValueError:
            preview_chars = 200
        return RawLogPolicy(enabled=enabled, preview_chars=max(0, preview_chars))


def mask_sensitive_fields(text: str) -> str:
    """Blank out values of credential-like fields, then any stray email address.

    ``User(name="kim", password="hunter2")`` -> ``User(name="kim", password=***)``
    """
    text = _SENSITIVE_FIELD_RE.sub(lambda m: m.group("key") + "***", text)
    return _EMAIL_RE.sub("***@***", text)


def safe_raw_preview(text: str, policy: Optional[RawLogPolicy] = None) -> str:
    if policy is None:
        policy = RawLogPolicy.from_env()
    if not policy.enabled:
        return "REDACTED"
    # mask before cutting so a truncated value cannot leak its head
    return mask_sensitive_fields(text)[: policy.preview_chars]
