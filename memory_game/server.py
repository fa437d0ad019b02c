# memory_game/server.py
from __future__ import annotations
import logging
from typing import Optional

from flask import Flask, request, jsonify

from . import commands
from .config import get_config
from .emoji_game import EmojiMemoryGame

logger = logging.getLogger(__name__)

app = Flask(__name__)

# Single in-memory game, replaced by POST /new.
STATE: Optional[EmojiMemoryGame] = None


def _error(message: str, code: int = 400):
    return jsonify({"status": "error", "message": message}), code


def _json_body():
    data = request.get_json(force=True, silent=True)
    return {} if data is None else data


@app.get("/health")
def health():
    return jsonify({"status": "ok"})


@app.post("/new")
def api_new():
    global STATE
    data = _json_body()
    if not isinstance(data, dict):
        return _error("body must be a JSON object")

    if "pairs" not in data:
        # a bad MEMORY_GAME_PAIRS is a server fault, not the client's
        data = {"pairs": get_config().pairs}
    try:
        pairs = int(data["pairs"])
    except (TypeError, ValueError, OverflowError) as e:
        return _error(f"invalid pairs: {e}")

    STATE = commands.new_game(pairs)
    logger.info("new game with %d cards", len(STATE.cards))
    return jsonify(commands.look(STATE))


@app.get("/cards")
def api_cards():
    if STATE is None:
        return _error("game not created")
    return jsonify(commands.look(STATE))


@app.post("/choose")
def api_choose():
    if STATE is None:
        return _error("game not created")

    data = _json_body()
    if not isinstance(data, dict):
        return _error("body must be a JSON object")

    try:
        card_id = int(data["id"])
    except KeyError:
        return _error("missing id")
    except (TypeError, ValueError, OverflowError) as e:
        return _error(f"invalid id: {e}")

    return jsonify(commands.choose(STATE, card_id))


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    config = get_config()
    app.run(host=config.host, port=config.port, debug=config.debug)
