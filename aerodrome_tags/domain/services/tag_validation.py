from __future__ import annotations

import re

from aerodrome_tags.domain.entities.contract_tag import Pool, Token

_MARKUP_TAG = re.compile(r"<[^>]*>")


def contains_markup(text: str) -> bool:
    return bool(_MARKUP_TAG.search(text))


def find_invalid_tokens(pool: Pool) -> list[Token]:
    return [
        token
        for token in (pool.token0, pool.token1)
        if contains_markup(token.name) or contains_markup(token.symbol)
    ]


def is_pool_valid(pool: Pool) -> bool:
    return not find_invalid_tokens(pool)
