from __future__ import annotations

import logging
from collections.abc import Iterator

from aerodrome_tags.application.dto.contract_tags import ListContractTagsInput, PaginationState
from aerodrome_tags.application.ports.pool_source_port import PoolSourceFactory
from aerodrome_tags.application.ports.rejection_sink_port import RejectionSinkPort
from aerodrome_tags.domain.entities.contract_tag import ContractTag, Pool
from aerodrome_tags.domain.exceptions import MissingApiKeyError, UnsupportedChainError
from aerodrome_tags.domain.services.contract_tag import map_pool_to_contract_tag
from aerodrome_tags.domain.services.tag_validation import find_invalid_tokens


logger = logging.getLogger(__name__)


BASE_CHAIN_ID = 8453
DEFAULT_PAGE_SIZE = 1000


class ListContractTagsUseCase:
    def __init__(
        self,
        *,
        pool_source_factory: PoolSourceFactory,
        rejection_sink: RejectionSinkPort,
        page_size: int = DEFAULT_PAGE_SIZE,
    ):
        if page_size <= 0:
            raise ValueError("page_size must be a positive integer.")
        self._pool_source_factory = pool_source_factory
        self._rejection_sink = rejection_sink
        self._page_size = page_size

    def execute(self, command: ListContractTagsInput) -> list[ContractTag]:
        tags: list[ContractTag] = []
        for batch in self.iter_tag_batches(command):
            tags.extend(batch)
        return tags

    def iter_tag_batches(
        self,
        command: ListContractTagsInput,
        *,
        start_cursor: int = 0,
    ) -> Iterator[list[ContractTag]]:
        """Yield the new tags of each page, in page order.

        Every configuration check runs before the first fetch. A fetch failure
        propagates to the consumer and ends the iteration.
        """
        self._validate(command)
        pool_source = self._pool_source_factory(command.api_key)
        state = PaginationState(cursor=start_cursor)

        while True:
            pools = pool_source.fetch_pools(created_after=state.cursor, first=self._page_size)
            state.pages += 1
            batch = self._collect_page(pools, chain_id=command.chain_id, state=state)

            logger.info(
                "list_contract_tags: page=%s cursor=%s fetched=%s emitted=%s total=%s",
                state.pages,
                state.cursor,
                len(pools),
                len(batch),
                state.emitted,
            )
            yield batch

            if len(pools) != self._page_size:
                break
            state.cursor = pools[-1].created_at_timestamp

        logger.info(
            "list_contract_tags: done chain_id=%s pages=%s tags=%s",
            command.chain_id,
            state.pages,
            state.emitted,
        )

    def _validate(self, command: ListContractTagsInput) -> None:
        if command.chain_id != BASE_CHAIN_ID:
            raise UnsupportedChainError(
                f"Aerodrome subgraph only covers chain_id={BASE_CHAIN_ID}, got {command.chain_id}."
            )
        if not (command.api_key or "").strip():
            raise MissingApiKeyError("A subgraph API key is required.")

    def _collect_page(
        self,
        pools: list[Pool],
        *,
        chain_id: int,
        state: PaginationState,
    ) -> list[ContractTag]:
        batch: list[ContractTag] = []
        for pool in pools:
            invalid_tokens = find_invalid_tokens(pool)
            if invalid_tokens:
                self._rejection_sink.pool_rejected(pool=pool, invalid_tokens=invalid_tokens)
                continue

            tag = map_pool_to_contract_tag(pool, chain_id=chain_id)
            if tag.contract_address in state.seen_addresses:
                continue
            state.seen_addresses.add(tag.contract_address)
            state.emitted += 1
            batch.append(tag)
        return batch
