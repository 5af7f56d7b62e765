from __future__ import annotations

import logging

from aerodrome_tags.domain.entities.contract_tag import Pool, Token


logger = logging.getLogger(__name__)


class LogRejectionSink:
    def pool_rejected(self, *, pool: Pool, invalid_tokens: list[Token]) -> None:
        logger.warning(
            "log_rejection_sink: pool_rejected pool=%s token0_name=%r token0_symbol=%r "
            "token1_name=%r token1_symbol=%r invalid_tokens=%s",
            pool.id,
            pool.token0.name,
            pool.token0.symbol,
            pool.token1.name,
            pool.token1.symbol,
            ",".join(token.id for token in invalid_tokens),
        )
