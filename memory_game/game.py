# memory_game/game.py
from __future__ import annotations
import logging
from dataclasses import dataclass, replace
from threading import RLock
from typing import Callable, Generic, List, Optional, Tuple, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Card(Generic[T]):
    content: T
    id: int
    is_face_up: bool = False
    is_matched: bool = False


class MemoryGame(Generic[T]):
    """
    Card-matching game over any content type with ==.

    Rep:
      - cards has 2 * number_of_pairs entries, fixed after construction
      - pair index i owns ids 2*i and 2*i + 1, both with the same content
      - matched => face_up
      - at most two unmatched cards are face up (two only after a mismatch)
    Pending card:
      - the one and only face-up unmatched card, found by scanning cards
    Safety:
      - choose() is guarded by an internal lock
    """

    def __init__(self, number_of_pairs: int, create_card_content: Callable[[int], T]):
        self._lock = RLock()
        self._cards: List[Card[T]] = []
        for index in range(max(0, number_of_pairs)):
            content = create_card_content(index)
            self._cards.append(Card(content=content, id=index * 2))
            self._cards.append(Card(content=content, id=index * 2 + 1))

        self._size = len(self._cards)
        self._check_rep()

    def _check_rep(self) -> None:
        assert len(self._cards) == self._size
        assert len({card.id for card in self._cards}) == self._size
        face_up_unmatched = 0
        for card in self._cards:
            if card.is_matched:
                assert card.is_face_up is True
            elif card.is_face_up:
                face_up_unmatched += 1
        assert face_up_unmatched <= 2

    @property
    def cards(self) -> Tuple[Card[T], ...]:
        with self._lock:
            return tuple(self._cards)

    @property
    def index_of_the_one_and_only_face_up_card(self) -> Optional[int]:
        with self._lock:
            face_up = [
                index for index, card in enumerate(self._cards)
                if card.is_face_up and not card.is_matched
            ]
            # two face-up cards after a mismatch means nothing is pending
            return face_up[0] if len(face_up) == 1 else None

    @property
    def is_finished(self) -> bool:
        with self._lock:
            return all(card.is_matched for card in self._cards)

    def choose(self, card: Card[T]) -> None:
        """Flip the card with card.id, judging it against the pending card if any.

        Unknown, face-up and matched cards are ignored.
        """
        with self._lock:
            chosen_index = self._index_of(card.id)
            if chosen_index is None:
                return
            chosen = self._cards[chosen_index]
            if chosen.is_face_up or chosen.is_matched:
                return

            potential_match_index = self.index_of_the_one_and_only_face_up_card
            if potential_match_index is not None:
                potential_match = self._cards[potential_match_index]
                if chosen.content == potential_match.content:
                    logger.debug("match: cards %d and %d", potential_match.id, chosen.id)
                    chosen = replace(chosen, is_matched=True)
                    self._cards[potential_match_index] = replace(
                        potential_match, is_face_up=True, is_matched=True
                    )
                else:
                    logger.debug("mismatch: cards %d and %d", potential_match.id, chosen.id)
            else:
                for index, other in enumerate(self._cards):
                    if other.is_face_up and not other.is_matched:
                        self._cards[index] = replace(other, is_face_up=False)

            self._cards[chosen_index] = replace(chosen, is_face_up=True)
            self._check_rep()

    def _index_of(self, card_id: int) -> Optional[int]:
        for index, card in enumerate(self._cards):
            if card.id == card_id:
                return index
        return None
