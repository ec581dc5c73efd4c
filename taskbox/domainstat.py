"""Count e-mail domains of user records given as JSON lines."""

from __future__ import annotations

import json
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

_FIELDS: dict[str, tuple[str, type]] = {
    "ID": ("id", int),
    "Name": ("name", str),
    "Username": ("username", str),
    "Email": ("email", str),
    "Phone": ("phone", str),
    "Password": ("password", str),
    "Address": ("address", str),
}


@dataclass
class User:
    """A user record."""

    id: int = 0
    name: str = ""
    username: str = ""
    email: str = ""
    phone: str = ""
    password: str = ""
    address: str = ""

    @classmethod
    def from_json(cls, line: str | bytes) -> User:
        """Parse a JSON object into a user; unknown keys and null values are ignored."""
        data: Any = json.loads(line)
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ValueError("user record must be a JSON object")

        values: dict[str, Any] = {}
        for key, value in data.items():
            spec = _FIELDS.get(key)
            if spec is None or value is None:
                continue
            attribute, kind = spec
            if kind is int:
                if isinstance(value, bool) or not isinstance(value, int):
                    raise ValueError(f"field {key!r} must be an integer")
            elif not isinstance(value, str):
                raise ValueError(f"field {key!r} must be a string")
            values[attribute] = value
        return cls(**values)


def get_domain_stat(stream: Iterable[str | bytes], domain: str) -> dict[str, int]:
    """Count, per lower-cased e-mail domain, users whose address ends with ``.domain``."""
    suffix = "." + domain
    stat: Counter[str] = Counter()
    for line in stream:
        if not line.strip():
            continue
        user = User.from_json(line)
        if not user.email.endswith(suffix):
            continue
        _, separator, host = user.email.partition("@")
        if not separator:
            raise ValueError(f"invalid e-mail address: {user.email!r}")
        stat[host.lower()] += 1
    return dict(stat)