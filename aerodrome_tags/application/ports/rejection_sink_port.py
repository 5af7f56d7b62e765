from __future__ import annotations

from typing import Protocol

from aerodrome_tags.domain.entities.contract_tag import Pool, Token


class RejectionSinkPort(Protocol):
    def pool_rejected(self, *, pool: Pool, invalid_tokens: list[Token]) -> None:
        ...
