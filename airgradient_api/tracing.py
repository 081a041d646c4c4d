import logging
import time
import uuid
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class Span:
    """A request-scoped trace span.

    Spans are created by the handler and passed down explicitly; nothing is
    kept in module or thread-local state. A finished span is emitted as a
    single DEBUG record carrying the span as ``extra``.
    """

    def __init__(self, name: str, parent: Optional["Span"] = None):
        self.name = name
        self.trace_id = parent.trace_id if parent else uuid.uuid4().hex
        self.span_id = uuid.uuid4().hex[:16]
        self.parent_id = parent.span_id if parent else None
        self.tags: Dict[str, Any] = {}
        self.status = "unset"
        self.description: Optional[str] = None
        self._started = time.perf_counter()
        self.duration_ms: Optional[float] = None

    def child(self, name: str) -> "Span":
        return Span(name, parent=self)

    def set_tag(self, key: str, value: Any) -> None:
        self.tags[key] = value

    def set_status(self, status: str, description: Optional[str] = None) -> None:
        self.status = status
        self.description = description

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "trace_id": self.trace_id,
            "span_id": self.span_id,
            "parent_id": self.parent_id,
            "status": self.status,
            "description": self.description,
            "duration_ms": self.duration_ms,
            "tags": dict(self.tags),
        }

    def finish(self) -> None:
        if self.duration_ms is not None:
            return
        self.duration_ms = round((time.perf_counter() - self._started) * 1000, 3)
        logger.debug("span %s finished: %s", self.name, self.status, extra={"span": self.to_dict()})

    def __enter__(self) -> "Span":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is not None and self.status == "unset":
            self.set_status("error", str(exc_val))
            self.set_tag("error.type", exc_type.__name__)
        self.finish()
