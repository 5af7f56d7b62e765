from __future__ import annotations

import argparse
import json
import logging
import sys

from aerodrome_tags.application.use_cases.list_contract_tags import BASE_CHAIN_ID
from aerodrome_tags.domain.exceptions import ContractTagsConfigError
from aerodrome_tags.infrastructure.clients.aerodrome_subgraph_client import SubgraphError
from aerodrome_tags.shared.config import get_settings
from aerodrome_tags.tags import fetch_contract_tags


logger = logging.getLogger("aerodrome_tags")


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)-5s | %(name)s | %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aerodrome-tags",
        description="Export Aerodrome pools on Base as contract tag records (JSON).",
    )
    parser.add_argument("--chain-id", type=int, default=BASE_CHAIN_ID, help="EIP-155 chain id")
    parser.add_argument("--output", default=None, help="write JSON here instead of stdout")
    parser.add_argument("--log-level", default=None, help="overrides LOG_LEVEL")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    setup_logging(args.log_level or settings.log_level)

    try:
        records = fetch_contract_tags(args.chain_id, settings.graph_api_key, settings=settings)
    except ContractTagsConfigError as exc:
        logger.error("cli: configuration_error error=%s", exc)
        return 2
    except SubgraphError as exc:
        logger.error("cli: subgraph_error error=%s", exc)
        return 1

    rendered = json.dumps(records, indent=2, ensure_ascii=False)
    if args.output:
        with open(args.output, "w", encoding="utf-8") as fh:
            fh.write(rendered + "\n")
        logger.info("cli: wrote tags=%s path=%s", len(records), args.output)
    else:
        sys.stdout.write(rendered + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
