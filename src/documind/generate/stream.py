from collections.abc import AsyncIterable, Callable


async def collect_stream(
    fragments: AsyncIterable[str],
    on_fragment: Callable[[str], None] | None = None,
) -> str:
    """Concatenate streamed text, passing each piece to ``on_fragment`` as it arrives."""
    parts: list[str] = []
    async for fragment in fragments:
        parts.append(fragment)
        if on_fragment is not None:
            on_fragment(fragment)
    return "".join(parts)
