from __future__ import annotations

from dataclasses import dataclass
import logging

import httpx

from aerodrome_tags.domain.entities.contract_tag import Pool
from aerodrome_tags.infrastructure.mappers.pool_mapper import map_row_to_pool


logger = logging.getLogger(__name__)


POOLS_QUERY = """
query Pools($first: Int!, $createdAfter: BigInt!) {
  pools(
    first: $first,
    orderBy: createdAtTimestamp,
    orderDirection: asc,
    where: { createdAtTimestamp_gt: $createdAfter }
  ) {
    id
    createdAtTimestamp
    feeTier
    token0 {
      id
      name
      symbol
    }
    token1 {
      id
      name
      symbol
    }
    ticks {
      tickIdx
    }
  }
}
"""


class SubgraphError(RuntimeError):
    pass


class SubgraphTransportError(SubgraphError):
    pass


class SubgraphQueryError(SubgraphError):
    def __init__(self, messages: list[str]):
        super().__init__(" | ".join(messages))
        self.messages = messages


class SubgraphResponseError(SubgraphError):
    pass


@dataclass(frozen=True)
class AerodromeSubgraphClientSettings:
    graph_gateway_base: str
    subgraph_id: str
    timeout_seconds: float


class AerodromeSubgraphClient:
    def __init__(
        self,
        settings: AerodromeSubgraphClientSettings,
        *,
        api_key: str,
        transport: httpx.BaseTransport | None = None,
    ):
        self._settings = settings
        self._api_key = api_key
        self._transport = transport

    def fetch_pools(self, *, created_after: int, first: int) -> list[Pool]:
        payload = self._post_graphql(
            query=POOLS_QUERY,
            variables={"first": first, "createdAfter": str(created_after)},
        )
        data = payload.get("data")
        rows = data.get("pools") if isinstance(data, dict) else None
        if not isinstance(rows, list):
            raise SubgraphResponseError("Subgraph response is missing data.pools.")

        try:
            pools = [map_row_to_pool(row) for row in rows]
        except (KeyError, TypeError, ValueError) as exc:
            raise SubgraphResponseError(f"Malformed pool row in subgraph response: {exc!r}") from exc

        logger.info(
            "aerodrome_subgraph_client: fetched_pools count=%s created_after=%s first=%s",
            len(pools),
            created_after,
            first,
        )
        return pools

    def _post_graphql(self, *, query: str, variables: dict) -> dict:
        url = self._build_gateway_url()
        try:
            with httpx.Client(
                timeout=self._settings.timeout_seconds,
                transport=self._transport,
            ) as client:
                response = client.post(url, json={"query": query, "variables": variables})
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPStatusError as exc:
            raise SubgraphTransportError(
                f"Subgraph request failed with status {exc.response.status_code}."
            ) from exc
        except httpx.HTTPError as exc:
            raise SubgraphTransportError(f"Subgraph request failed: {exc}") from exc
        except ValueError as exc:
            raise SubgraphResponseError("Subgraph response is not valid JSON.") from exc

        if not isinstance(payload, dict):
            raise SubgraphResponseError("Subgraph response is not a JSON object.")

        errors = payload.get("errors") or []
        if not isinstance(errors, list):
            errors = [errors]
        if errors:
            messages = [
                str(err.get("message", err)) if isinstance(err, dict) else str(err)
                for err in errors
            ]
            for message in messages:
                logger.error("aerodrome_subgraph_client: graphql_error message=%s", message)
            raise SubgraphQueryError(messages)

        return payload

    def _build_gateway_url(self) -> str:
        subgraph_id = self._settings.subgraph_id.strip()
        if subgraph_id.startswith("http://") or subgraph_id.startswith("https://"):
            return subgraph_id.rstrip("/")
        base = self._settings.graph_gateway_base.rstrip("/")
        api_key = self._api_key.strip()
        return f"{base}/{api_key}/subgraphs/id/{subgraph_id}"
