from .game import Card, MemoryGame
from .emoji_game import EMOJIS, EmojiMemoryGame

__all__ = ["Card", "MemoryGame", "EMOJIS", "EmojiMemoryGame"]
