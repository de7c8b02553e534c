"""Request context attached to client log events."""
from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional


@dataclass
class LogContext:
    """Fields shared by the events of one HTTP exchange.

    ``request_id`` is filled in once the response headers arrive. ``extra``
    carries ad-hoc keys; like the named fields, ``None`` values are dropped
    from :meth:`to_dict`.
    """

    method: Optional[str] = None
    endpoint: Optional[str] = None
    model: Optional[str] = None
    request_id: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        for f in fields(self):
            if f.name == "extra":
                continue
            value = getattr(self, f.name)
            if value is not None:
                out[f.name] = value
        out.update({k: v for k, v in self.extra.items() if v is not None})
        return out


__all__ = ["LogContext"]
