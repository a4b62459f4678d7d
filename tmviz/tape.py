"""The machine's tape."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


def _check_symbol(symbol: str) -> str:
    if not isinstance(symbol, str) or len(symbol) != 1:
        raise ValueError(f"tape symbols are single characters, got {symbol!r}")
    return symbol


class Tape:
    """A growable sequence of single-character cells."""

    def __init__(self, symbols: Iterable[str] = ()) -> None:
        self._cells: list[str] = [_check_symbol(s) for s in symbols]

    def append(self, symbol: str) -> None:
        """Add a cell at the right end of the tape."""
        self._cells.append(_check_symbol(symbol))

    def __iter__(self) -> Iterator[str]:
        return iter(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def __getitem__(self, index: int) -> str:
        return self._cells[index]

    def __setitem__(self, index: int, symbol: str) -> None:
        self._cells[index] = _check_symbol(symbol)

    def __repr__(self) -> str:
        return f"Tape({''.join(self._cells)!r})"

    def render(self, head: int) -> str:
        """Show every cell, bracketing the one under the head."""
        return "".join(
            f"[{symbol}]" if position == head else f" {symbol} "
            for position, symbol in enumerate(self._cells)
        )