"""Computer move selectors and the factory that builds them."""

from __future__ import annotations

from noughts.engine.minimax import MinimaxSelector
from noughts.engine.ordered import OrderedSelector
from noughts.engine.search import IMoveSelector, SearchResult, SelectorKind

DefaultSelector: type[IMoveSelector] = MinimaxSelector

_SELECTORS: dict[SelectorKind, type[IMoveSelector]] = {
    SelectorKind.ORDERED: OrderedSelector,
    SelectorKind.MINIMAX: MinimaxSelector,
}


def create_selector(kind: SelectorKind | str = SelectorKind.MINIMAX) -> IMoveSelector:
    """Instantiate the selector registered for *kind*."""
    try:
        selector_cls = _SELECTORS[SelectorKind(kind)]
    except ValueError:
        raise ValueError(f"Unknown selector kind: {kind!r}") from None
    return selector_cls()


__all__ = [
    "DefaultSelector",
    "IMoveSelector",
    "MinimaxSelector",
    "OrderedSelector",
    "SearchResult",
    "SelectorKind",
    "create_selector",
]
