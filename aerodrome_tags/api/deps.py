from __future__ import annotations

from aerodrome_tags.application.use_cases.list_contract_tags import ListContractTagsUseCase
from aerodrome_tags.shared.config import get_settings
from aerodrome_tags.tags import build_list_contract_tags_use_case


def get_graph_api_key() -> str:
    return get_settings().graph_api_key


def get_list_contract_tags_use_case() -> ListContractTagsUseCase:
    return build_list_contract_tags_use_case(get_settings())
