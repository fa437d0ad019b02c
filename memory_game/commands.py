# memory_game/commands.py
from __future__ import annotations
from typing import Dict, Optional

from .emoji_game import DEFAULT_PAIRS, EmojiMemoryGame
from .game import Card


def card_to_dict(card: Card) -> Dict:
    return {
        "id": card.id,
        "content": card.content,
        "face_up": card.is_face_up,
        "matched": card.is_matched,
    }


def new_game(number_of_pairs: int = DEFAULT_PAIRS) -> EmojiMemoryGame:
    return EmojiMemoryGame(number_of_pairs)


def look(game: EmojiMemoryGame) -> Dict:
    """Current board as a JSON-serializable dict."""
    return {
        "status": "ok",
        "cards": [card_to_dict(card) for card in game.cards],
        "finished": game.is_finished,
    }


def choose(game: EmojiMemoryGame, card_id: int) -> Dict:
    """
    Choose the card with card_id and return the resulting board.

    Stale picks (unknown id, face-up or matched card) leave the board as it
    was and report changed=False.
    """
    before = game.cards
    card: Optional[Card] = next((c for c in before if c.id == card_id), None)
    if card is not None:
        game.choose(card)

    result = look(game)
    result["chosen"] = card_id
    result["changed"] = game.cards != before
    return result
