from __future__ import annotations

from aerodrome_tags.domain.entities.contract_tag import ContractTag, Pool
from aerodrome_tags.domain.services.tag_labels import (
    format_fee_percent,
    infer_tick_spacing,
    truncate_symbol_pair,
)

PROJECT_NAME = "Aerodrome"
WEBSITE_LINK = "https://aerodrome.finance"
UNKNOWN_SPACING_PREFIX = "CL?"
UNKNOWN_FEE_LABEL = "? %"


def build_contract_address(*, chain_id: int, pool_id: str) -> str:
    return f"eip155:{chain_id}:{pool_id}"


def pool_label_prefix(pool: Pool) -> str:
    spacing = infer_tick_spacing(tick.tick_idx for tick in pool.ticks)
    if spacing is None:
        return UNKNOWN_SPACING_PREFIX
    return f"CL{spacing}"


def map_pool_to_contract_tag(pool: Pool, *, chain_id: int) -> ContractTag:
    prefix = pool_label_prefix(pool)
    fee_label = format_fee_percent(pool.fee_tier) or UNKNOWN_FEE_LABEL
    symbol0 = pool.token0.symbol.strip()
    symbol1 = pool.token1.symbol.strip()
    pair = truncate_symbol_pair(symbol0, symbol1)

    return ContractTag(
        contract_address=build_contract_address(chain_id=chain_id, pool_id=pool.id),
        public_name_tag=f"{PROJECT_NAME}: {prefix} {pair} ({fee_label})",
        project_name=PROJECT_NAME,
        ui_website_link=WEBSITE_LINK,
        public_note=(
            f"The liquidity pool contract on {PROJECT_NAME} for the {prefix} "
            f"{symbol0}/{symbol1} pool with a {fee_label} fee tier."
        ),
    )
