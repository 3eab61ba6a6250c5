from __future__ import annotations

from typing import Mapping, Protocol

import httpx


class DocumentTransportPort(Protocol):
    def post_json(self, url: str, payload: str, headers: Mapping[str, str]) -> httpx.Response:
        """POST an already serialized JSON body and return the raw response.

        Must not raise on non-2xx status; status interpretation is up to the caller.
        """
        ...
