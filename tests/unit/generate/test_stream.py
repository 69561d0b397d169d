from collections.abc import AsyncIterator

import pytest

from documind.generate.citation import Confidence, process_answer
from documind.generate.stream import collect_stream


async def fragments(*pieces: str) -> AsyncIterator[str]:
    for piece in pieces:
        yield piece


class TestCollectStream:
    @pytest.mark.asyncio
    async def test_concatenates_fragments(self) -> None:
        text = await collect_stream(fragments("Pods ", "run [", "1", "] here."))

        assert text == "Pods run [1] here."

    @pytest.mark.asyncio
    async def test_forwards_each_fragment(self) -> None:
        seen: list[str] = []

        await collect_stream(fragments("a", "b", "c"), seen.append)

        assert seen == ["a", "b", "c"]

    @pytest.mark.asyncio
    async def test_empty_stream(self) -> None:
        assert await collect_stream(fragments()) == ""

    @pytest.mark.asyncio
    async def test_marker_split_across_fragments_is_cited_once_assembled(self) -> None:
        text = await collect_stream(fragments("See [", "2", "] and [1", "]."))

        answer = process_answer(text, 2)

        assert answer.unique_citations == [1, 2]
        assert answer.confidence == Confidence.HIGH
