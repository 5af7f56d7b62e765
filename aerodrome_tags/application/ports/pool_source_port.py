from __future__ import annotations

from typing import Protocol

from aerodrome_tags.domain.entities.contract_tag import Pool


class PoolSourcePort(Protocol):
    def fetch_pools(self, *, created_after: int, first: int) -> list[Pool]:
        ...


class PoolSourceFactory(Protocol):
    def __call__(self, api_key: str) -> PoolSourcePort:
        ...
