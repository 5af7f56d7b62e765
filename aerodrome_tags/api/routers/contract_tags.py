from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from aerodrome_tags.api.deps import get_graph_api_key, get_list_contract_tags_use_case
from aerodrome_tags.api.schemas.contract_tags import ContractTagResponse
from aerodrome_tags.application.dto.contract_tags import ListContractTagsInput
from aerodrome_tags.application.use_cases.list_contract_tags import (
    BASE_CHAIN_ID,
    ListContractTagsUseCase,
)
from aerodrome_tags.domain.exceptions import ContractTagsConfigError
from aerodrome_tags.infrastructure.clients.aerodrome_subgraph_client import SubgraphError

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/v1/contract-tags", response_model=list[ContractTagResponse])
def list_contract_tags(
    chain_id: int = BASE_CHAIN_ID,
    api_key: str = Depends(get_graph_api_key),
    use_case: ListContractTagsUseCase = Depends(get_list_contract_tags_use_case),
):
    try:
        tags = use_case.execute(ListContractTagsInput(chain_id=chain_id, api_key=api_key))
    except ContractTagsConfigError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except SubgraphError as exc:
        logger.warning("contract_tags_router: subgraph_failed chain_id=%s error=%s", chain_id, exc)
        raise HTTPException(status_code=502, detail=str(exc)) from exc

    return [ContractTagResponse(**tag.as_record()) for tag in tags]
