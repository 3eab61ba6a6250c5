from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SubmissionResult:
    status_code: int
    body: str = ""
    document_id: Optional[str] = None  # value returned by the API, if any

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


@dataclass(frozen=True)
class BatchItemResult:
    """Outcome of one document in a batch submission: a result or an error."""

    index: int
    result: Optional[SubmissionResult] = None
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.result is not None and self.result.ok
