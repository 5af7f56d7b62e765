from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


load_dotenv()


DEFAULT_AERODROME_SUBGRAPH_ID = "GENunSHWLBXm59mBSgPzQ8metBEp9YDfdqwFr91Av1UM"


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


@dataclass(frozen=True)
class Settings:
    graph_api_key: str
    graph_gateway_base: str
    aerodrome_subgraph_id: str
    aerodrome_subgraph_timeout_seconds: float
    aerodrome_page_size: int
    log_level: str


def get_settings() -> Settings:
    return Settings(
        graph_api_key=_env("GRAPH_API_KEY", ""),
        graph_gateway_base=_env("GRAPH_GATEWAY_BASE", "https://gateway.thegraph.com/api"),
        aerodrome_subgraph_id=_env("AERODROME_SUBGRAPH_ID", DEFAULT_AERODROME_SUBGRAPH_ID),
        aerodrome_subgraph_timeout_seconds=float(_env("AERODROME_SUBGRAPH_TIMEOUT_SECONDS", "30")),
        aerodrome_page_size=int(_env("AERODROME_PAGE_SIZE", "1000")),
        log_level=_env("LOG_LEVEL", "INFO").upper(),
    )
