from __future__ import annotations

import logging

import pytest

from aerodrome_tags.application.dto.contract_tags import ListContractTagsInput, PaginationState
from aerodrome_tags.application.use_cases.list_contract_tags import ListContractTagsUseCase
from aerodrome_tags.domain.entities.contract_tag import Pool, Tick, Token
from aerodrome_tags.domain.exceptions import MissingApiKeyError, UnsupportedChainError
from aerodrome_tags.infrastructure.clients.aerodrome_subgraph_client import SubgraphTransportError


def _pool(index: int, *, timestamp: int | None = None, pool_id: str | None = None, name: str = "Token") -> Pool:
    return Pool(
        id=pool_id or f"0xpool{index}",
        created_at_timestamp=timestamp if timestamp is not None else index,
        token0=Token(id="0xt0", name=name, symbol="WETH"),
        token1=Token(id="0xt1", name="USD Coin", symbol="USDC"),
        ticks=(Tick(tick_idx="0"), Tick(tick_idx="100")),
        fee_tier="500",
    )


class FakePoolSource:
    def __init__(self, pages: list[list[Pool] | Exception]):
        self._pages = pages
        self.calls: list[tuple[int, int]] = []

    def fetch_pools(self, *, created_after: int, first: int) -> list[Pool]:
        self.calls.append((created_after, first))
        page = self._pages[len(self.calls) - 1]
        if isinstance(page, Exception):
            raise page
        return page


class FakeFactory:
    def __init__(self, source: FakePoolSource):
        self._source = source
        self.api_keys: list[str] = []

    def __call__(self, api_key: str) -> FakePoolSource:
        self.api_keys.append(api_key)
        return self._source


class RecordingRejectionSink:
    def __init__(self):
        self.rejected: list[tuple[Pool, list[Token]]] = []

    def pool_rejected(self, *, pool: Pool, invalid_tokens: list[Token]) -> None:
        self.rejected.append((pool, invalid_tokens))


def _use_case(source: FakePoolSource, sink: RecordingRejectionSink | None = None):
    factory = FakeFactory(source)
    use_case = ListContractTagsUseCase(
        pool_source_factory=factory,
        rejection_sink=sink or RecordingRejectionSink(),
    )
    return use_case, factory


def test_paginates_until_short_page_and_advances_cursor():
    page1 = [_pool(i, timestamp=1000 + i) for i in range(1000)]
    page2 = [_pool(i) for i in range(1000, 1400)]
    source = FakePoolSource([page1, page2])
    use_case, factory = _use_case(source)

    tags = use_case.execute(ListContractTagsInput(chain_id=8453, api_key="key"))

    assert source.calls == [(0, 1000), (1999, 1000)]
    assert factory.api_keys == ["key"]
    assert len(tags) == 1400
    assert tags[0].contract_address == "eip155:8453:0xpool0"
    assert tags[-1].contract_address == "eip155:8453:0xpool1399"


def test_empty_first_page_returns_empty_list():
    source = FakePoolSource([[]])
    use_case, _ = _use_case(source)

    assert use_case.execute(ListContractTagsInput(chain_id=8453, api_key="key")) == []
    assert source.calls == [(0, 1000)]


def test_duplicates_are_dropped_without_affecting_continuation():
    page1 = [_pool(i) for i in range(999)] + [_pool(999, pool_id="0xpool0")]
    page2 = [_pool(1000, pool_id="0xpool5"), _pool(1001)]
    source = FakePoolSource([page1, page2])
    use_case, _ = _use_case(source)

    tags = use_case.execute(ListContractTagsInput(chain_id=8453, api_key="key"))

    assert len(source.calls) == 2
    assert len(tags) == 1000
    addresses = [tag.contract_address for tag in tags]
    assert len(addresses) == len(set(addresses))
    assert addresses[-1] == "eip155:8453:0xpool1001"


def test_invalid_pools_are_reported_and_skipped():
    bad = _pool(1, name="<a href='https://scam'>claim</a>")
    source = FakePoolSource([[_pool(0), bad, _pool(2)]])
    sink = RecordingRejectionSink()
    use_case, _ = _use_case(source, sink)

    tags = use_case.execute(ListContractTagsInput(chain_id=8453, api_key="key"))

    assert [tag.contract_address for tag in tags] == ["eip155:8453:0xpool0", "eip155:8453:0xpool2"]
    assert len(sink.rejected) == 1
    assert sink.rejected[0][0] is bad
    assert sink.rejected[0][1] == [bad.token0]


def test_rejected_pools_still_count_towards_page_size():
    page1 = [_pool(i, name="<b>spam</b>") for i in range(1000)]
    source = FakePoolSource([page1, []])
    use_case, _ = _use_case(source)

    tags = use_case.execute(ListContractTagsInput(chain_id=8453, api_key="key"))

    assert tags == []
    assert source.calls == [(0, 1000), (999, 1000)]


def test_unsupported_chain_fails_before_any_fetch():
    source = FakePoolSource([])
    use_case, factory = _use_case(source)

    with pytest.raises(UnsupportedChainError):
        use_case.execute(ListContractTagsInput(chain_id=1, api_key="key"))

    assert factory.api_keys == []
    assert source.calls == []


@pytest.mark.parametrize("api_key", ["", "   "])
def test_missing_api_key_fails_before_any_fetch(api_key: str):
    source = FakePoolSource([])
    use_case, factory = _use_case(source)

    with pytest.raises(MissingApiKeyError):
        use_case.execute(ListContractTagsInput(chain_id=8453, api_key=api_key))

    assert factory.api_keys == []


def test_fetch_failure_aborts_the_whole_run():
    page1 = [_pool(i) for i in range(1000)]
    source = FakePoolSource([page1, SubgraphTransportError("boom")])
    use_case, _ = _use_case(source)

    with pytest.raises(SubgraphTransportError):
        use_case.execute(ListContractTagsInput(chain_id=8453, api_key="key"))

    assert len(source.calls) == 2


def test_iter_tag_batches_yields_one_batch_per_page():
    page1 = [_pool(i) for i in range(1000)]
    page2 = [_pool(1000)]
    source = FakePoolSource([page1, page2])
    use_case, _ = _use_case(source)

    batches = list(use_case.iter_tag_batches(ListContractTagsInput(chain_id=8453, api_key="key")))

    assert [len(batch) for batch in batches] == [1000, 1]


def test_iter_tag_batches_can_resume_from_cursor():
    source = FakePoolSource([[_pool(7, timestamp=50)]])
    use_case, _ = _use_case(source)

    batches = list(
        use_case.iter_tag_batches(
            ListContractTagsInput(chain_id=8453, api_key="key"),
            start_cursor=42,
        )
    )

    assert source.calls == [(42, 1000)]
    assert len(batches) == 1


def test_page_size_must_be_positive():
    with pytest.raises(ValueError):
        ListContractTagsUseCase(
            pool_source_factory=FakeFactory(FakePoolSource([])),
            rejection_sink=RecordingRejectionSink(),
            page_size=0,
        )


def test_unformattable_fee_does_not_abort_the_run():
    huge_fee = Pool(
        id="0xhuge",
        created_at_timestamp=1,
        token0=Token(id="0xt0", name="Token", symbol="WETH"),
        token1=Token(id="0xt1", name="USD Coin", symbol="USDC"),
        ticks=(Tick(tick_idx="0"), Tick(tick_idx="100")),
        fee_tier="1e30",
    )
    source = FakePoolSource([[huge_fee, _pool(2)]])
    use_case, _ = _use_case(source)

    tags = use_case.execute(ListContractTagsInput(chain_id=8453, api_key="key"))

    assert [tag.public_name_tag for tag in tags] == [
        "Aerodrome: CL100 WETH/USDC (? %)",
        "Aerodrome: CL100 WETH/USDC (5 %)",
    ]


def test_state_counts_emitted_tags_without_keeping_them(caplog: pytest.LogCaptureFixture):
    page1 = [_pool(i) for i in range(999)] + [_pool(999, pool_id="0xpool0")]
    source = FakePoolSource([page1, [_pool(1000)]])
    use_case, _ = _use_case(source)

    with caplog.at_level(logging.INFO):
        batches = list(use_case.iter_tag_batches(ListContractTagsInput(chain_id=8453, api_key="key")))

    assert [len(batch) for batch in batches] == [999, 1]
    assert not hasattr(PaginationState(), "tags")
    done = [
        record.getMessage()
        for record in caplog.records
        if record.getMessage().startswith("list_contract_tags: done")
    ]
    assert done == ["list_contract_tags: done chain_id=8453 pages=2 tags=1000"]
