from __future__ import annotations

from aerodrome_tags.application.dto.contract_tags import ListContractTagsInput
from aerodrome_tags.application.use_cases.list_contract_tags import ListContractTagsUseCase
from aerodrome_tags.infrastructure.clients.aerodrome_subgraph_client import (
    AerodromeSubgraphClient,
    AerodromeSubgraphClientSettings,
)
from aerodrome_tags.infrastructure.observers.log_rejection_sink import LogRejectionSink
from aerodrome_tags.shared.config import Settings, get_settings


def build_list_contract_tags_use_case(settings: Settings) -> ListContractTagsUseCase:
    client_settings = AerodromeSubgraphClientSettings(
        graph_gateway_base=settings.graph_gateway_base,
        subgraph_id=settings.aerodrome_subgraph_id,
        timeout_seconds=settings.aerodrome_subgraph_timeout_seconds,
    )
    return ListContractTagsUseCase(
        pool_source_factory=lambda api_key: AerodromeSubgraphClient(client_settings, api_key=api_key),
        rejection_sink=LogRejectionSink(),
        page_size=settings.aerodrome_page_size,
    )


def fetch_contract_tags(
    chain_id: int,
    api_key: str,
    *,
    settings: Settings | None = None,
) -> list[dict[str, str]]:
    """Return every Aerodrome pool on ``chain_id`` as a contract tag record."""
    use_case = build_list_contract_tags_use_case(settings or get_settings())
    tags = use_case.execute(ListContractTagsInput(chain_id=chain_id, api_key=api_key))
    return [tag.as_record() for tag in tags]
