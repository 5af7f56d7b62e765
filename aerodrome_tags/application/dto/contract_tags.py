from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ListContractTagsInput:
    chain_id: int
    api_key: str


@dataclass
class PaginationState:
    cursor: int = 0
    pages: int = 0
    emitted: int = 0
    seen_addresses: set[str] = field(default_factory=set)
