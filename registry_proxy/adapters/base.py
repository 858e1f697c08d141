# registry_proxy/adapters/base.py
# Upstream result type shared by adapters

from dataclasses import dataclass
from typing import Any


@dataclass
class UpstreamResponse:
    status_code: int
    body: Any        # parsed JSON

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300
