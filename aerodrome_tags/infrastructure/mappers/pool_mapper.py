from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from aerodrome_tags.domain.entities.contract_tag import Pool, Tick, Token


def map_row_to_token(row: Mapping[str, Any]) -> Token:
    return Token(
        id=str(row["id"]),
        name=str(row.get("name") or ""),
        symbol=str(row.get("symbol") or ""),
    )


def map_row_to_pool(row: Mapping[str, Any]) -> Pool:
    return Pool(
        id=str(row["id"]),
        created_at_timestamp=int(row["createdAtTimestamp"]),
        token0=map_row_to_token(row["token0"]),
        token1=map_row_to_token(row["token1"]),
        ticks=tuple(Tick(tick_idx=str(tick["tickIdx"])) for tick in row.get("ticks") or []),
        fee_tier=str(row["feeTier"]),
    )
