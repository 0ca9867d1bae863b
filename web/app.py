"""Daily Boggle web application: Flask backend."""
from __future__ import annotations

import sys
import uuid
from functools import lru_cache
from pathlib import Path

# Ensure project root is on sys.path so `daily_boggle.*` imports work
_project_root = str(Path(__file__).resolve().parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from flask import Flask, jsonify, request

from daily_boggle.dictionary import load_default_dictionary
from daily_boggle.puzzle import (
    GameSession,
    Puzzle,
    SessionClosedError,
    parse_puzzle_date,
    puzzle_id_for,
    today_puzzle_id,
)
from daily_boggle.solver import find_path

app = Flask(__name__)

# Load dictionary once at startup; an empty index keeps the game playable
DICTIONARY = load_default_dictionary()

# Game sessions keyed by UUID
GAMES: dict[str, GameSession] = {}


@lru_cache(maxsize=32)
def get_puzzle(puzzle_id: str) -> Puzzle:
    """Build (once) the puzzle for an id against the loaded dictionary."""
    return Puzzle.build(puzzle_id, DICTIONARY)


def _requested_puzzle_id(data: dict) -> str:
    """Puzzle id from a request: explicit id, a date, or today."""
    if data.get("puzzle_id"):
        return str(data["puzzle_id"])
    if data.get("date"):
        return puzzle_id_for(parse_puzzle_date(str(data["date"])))
    return today_puzzle_id()


def puzzle_to_json(puzzle: Puzzle) -> dict:
    """Serialize a Puzzle without giving away its solutions."""
    return {
        "puzzle_id": puzzle.puzzle_id,
        "tiles": puzzle.grid.to_list(),
        "rows": [[tile.value for tile in row] for row in puzzle.grid.rows()],
        "total_words": puzzle.total_words,
        "dictionary_loaded": DICTIONARY.loaded,
    }


def session_to_json(session_id: str, session: GameSession) -> dict:
    return {
        "session_id": session_id,
        "score": session.score,
        "found_words": list(session.found_words),
        "time_left": session.time_left(),
        "finished": session.is_finished(),
    }


@app.route("/puzzle", methods=["GET"])
def puzzle():
    try:
        puzzle_id = _requested_puzzle_id(request.args)
    except ValueError as e:
        return jsonify({"error": str(e)}), 400
    return jsonify(puzzle_to_json(get_puzzle(puzzle_id)))


@app.route("/start", methods=["POST"])
def start():
    data = request.get_json(silent=True) or {}
    try:
        puzzle_id = _requested_puzzle_id(data)
    except ValueError as e:
        return jsonify({"error": str(e)}), 400

    session = GameSession(get_puzzle(puzzle_id))
    session.start()
    session_id = str(uuid.uuid4())
    GAMES[session_id] = session
    app.logger.info("Started session %s on puzzle %s", session_id, puzzle_id)

    result = puzzle_to_json(session.puzzle)
    result.update(session_to_json(session_id, session))
    result["time_limit"] = session.time_limit
    return jsonify(result)


@app.route("/submit", methods=["POST"])
def submit():
    data = request.get_json(silent=True) or {}
    session_id = str(data.get("session_id", ""))
    session = GAMES.get(session_id)
    if session is None:
        return jsonify({"error": "Session not found"}), 404

    try:
        if "path" in data:
            path = data["path"]
            if not isinstance(path, list) or not all(isinstance(i, int) for i in path):
                return jsonify({"error": "Path must be a list of tile indices"}), 400
            submission = session.submit_path(path)
        else:
            submission = session.submit(str(data.get("word", "")))
    except ValueError as e:
        return jsonify({"error": str(e)}), 400
    except SessionClosedError:
        return jsonify({"error": "Game is over", "finished": True}), 409

    result = session_to_json(session_id, session)
    result["submission"] = submission.to_json()
    return jsonify(result)


@app.route("/finish", methods=["POST"])
def finish():
    data = request.get_json(silent=True) or {}
    session_id = str(data.get("session_id", ""))
    session = GAMES.get(session_id)
    if session is None:
        return jsonify({"error": "Session not found"}), 404

    session.finish()
    grid = session.puzzle.grid
    return jsonify({
        "session_id": session_id,
        "result": session.result(),
        "share": session.share_text(),
        "solutions": [
            {"word": w, "path": find_path(grid, w)}
            for w in session.puzzle.solutions
        ],
    })


if __name__ == "__main__":
    import logging

    logging.basicConfig(level=logging.INFO)
    print(f"Dictionary loaded: {DICTIONARY.word_count} words")
    app.run(debug=True, host="0.0.0.0", port=8080)
