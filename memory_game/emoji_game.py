# memory_game/emoji_game.py
from __future__ import annotations
from typing import Callable, List, Tuple

from .game import Card, MemoryGame

EMOJIS = [
    "🚕", "🚔", "🚁", "✈️", "🛺",
    "🚇", "🚀", "🛰", "🛳", "🏍",
    "🛸", "🚢", "🚙", "🦽", "🦼",
    "🛴", "🛵", "🚠", "🚂", "🛥",
    "🚚", "🚛", "🚜", "🚑", "🚒",
]

DEFAULT_PAIRS = 4

Listener = Callable[["EmojiMemoryGame"], None]


def create_memory_game(number_of_pairs: int = DEFAULT_PAIRS) -> MemoryGame[str]:
    number_of_pairs = min(max(0, number_of_pairs), len(EMOJIS))
    return MemoryGame(number_of_pairs, lambda index: EMOJIS[index])


class EmojiMemoryGame:
    """
    View model over a MemoryGame of emoji.

    Hosts read cards and forward taps to choose(); subscribed listeners are
    called after every intent so they can re-render.
    """

    def __init__(self, number_of_pairs: int = DEFAULT_PAIRS):
        self._model = create_memory_game(number_of_pairs)
        self._listeners: List[Listener] = []

    @property
    def cards(self) -> Tuple[Card[str], ...]:
        return self._model.cards

    @property
    def is_finished(self) -> bool:
        return self._model.is_finished

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ---- intents ----

    def choose(self, card: Card[str]) -> None:
        self._model.choose(card)
        for listener in list(self._listeners):
            listener(self)
