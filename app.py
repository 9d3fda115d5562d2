from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Optional, Tuple

from flask import Flask, jsonify, request

from puzzle import Board, DEFAULT_SIZE, Place, find_galaxy, mark_galaxies, solved

logger = logging.getLogger(__name__)

DEFAULT_BOARD_SIZE = int(os.getenv("GALAXIES_DEFAULT_SIZE", str(DEFAULT_SIZE)))
MAX_BOARD_SIZE = int(os.getenv("GALAXIES_MAX_SIZE", "100"))

app = Flask(__name__)


def _place_from_json(obj: Any) -> Place:
    x, y = obj
    return (int(x), int(y))


def _sized_board(cols: int, rows: int) -> Board:
    if cols > MAX_BOARD_SIZE or rows > MAX_BOARD_SIZE:
        raise ValueError(f"board larger than {MAX_BOARD_SIZE}x{MAX_BOARD_SIZE}")
    return Board(cols=cols, rows=rows)


def board_to_json(b: Board) -> Dict[str, Any]:
    return {
        "cols": int(b.cols),
        "rows": int(b.rows),
        "boundaries": [[x, y] for (x, y) in sorted(b.boundaries)],
        "centers": [[x, y] for (x, y) in b.centers()],
        "marks": [[x, y, v] for (x, y, v) in b.marked_cells()],
    }


def board_from_json(obj: Dict[str, Any]) -> Board:
    """Rebuilds a board; boundaries listed replace the default periphery."""
    board = _sized_board(int(obj["cols"]), int(obj["rows"]))
    if "boundaries" in obj:
        wanted = {_place_from_json(p) for p in obj["boundaries"]}
        for edge in wanted.symmetric_difference(board.boundaries):
            board.toggle_boundary(*edge)
    for p in obj.get("centers", []):
        board.place_center(*_place_from_json(p))
    for x, y, v in obj.get("marks", []):
        board.set_mark(int(x), int(y), int(v))
    return board


def _board_from_body(body: Any) -> Tuple[Optional[Board], Optional[Any]]:
    """Returns (board, None) or (None, error response) for the request body."""
    if not isinstance(body, dict):
        return None, (jsonify({"ok": False, "error": "object required"}), 400)
    b_in = body.get("board")
    if not isinstance(b_in, dict):
        return None, (jsonify({"ok": False, "error": "board required"}), 400)
    try:
        return board_from_json(b_in), None
    except (KeyError, TypeError, ValueError) as e:
        return None, (jsonify({"ok": False, "error": f"bad board: {e}"}), 400)


def _cells_to_json(cells) -> List[List[int]]:
    return [[x, y] for (x, y) in sorted(cells)]


@app.post("/api/new")
def api_new() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    if not isinstance(body, dict):
        return jsonify({"ok": False, "error": "object required"}), 400
    try:
        board = _sized_board(
            int(body.get("cols", DEFAULT_BOARD_SIZE)),
            int(body.get("rows", DEFAULT_BOARD_SIZE)),
        )
    except (TypeError, ValueError) as e:
        return jsonify({"ok": False, "error": f"bad size: {e}"}), 400
    return jsonify({"ok": True, "board": board_to_json(board), "text": board.pretty()})


@app.post("/api/toggle")
def api_toggle() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    board, err = _board_from_body(body)
    if err:
        return err
    try:
        board.toggle_boundary(*_place_from_json(body["edge"]))
    except (KeyError, TypeError, ValueError) as e:
        return jsonify({"ok": False, "error": f"bad edge: {e}"}), 400
    return jsonify({"ok": True, "board": board_to_json(board)})


@app.post("/api/center")
def api_center() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    board, err = _board_from_body(body)
    if err:
        return err
    try:
        board.place_center(*_place_from_json(body["place"]))
    except (KeyError, TypeError, ValueError) as e:
        return jsonify({"ok": False, "error": f"bad place: {e}"}), 400
    return jsonify({"ok": True, "board": board_to_json(board)})


@app.post("/api/galaxy")
def api_galaxy() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    board, err = _board_from_body(body)
    if err:
        return err
    try:
        center = _place_from_json(body["center"])
    except (KeyError, TypeError, ValueError) as e:
        return jsonify({"ok": False, "error": f"bad center: {e}"}), 400
    galaxy = find_galaxy(board, center)
    logger.debug("galaxy for %s: %s", center, None if galaxy is None else len(galaxy))
    return jsonify({"ok": True, "galaxy": None if galaxy is None else _cells_to_json(galaxy.cells)})


@app.post("/api/solved")
def api_solved() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    board, err = _board_from_body(body)
    if err:
        return err
    return jsonify({"ok": True, "solved": solved(board)})


@app.post("/api/mark")
def api_mark() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    board, err = _board_from_body(body)
    if err:
        return err
    try:
        value = int(body.get("value", 1))
        mark_galaxies(board, value)
    except (TypeError, ValueError) as e:
        return jsonify({"ok": False, "error": f"bad value: {e}"}), 400
    return jsonify({"ok": True, "board": board_to_json(board), "text": board.pretty()})


@app.post("/api/render")
def api_render() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    board, err = _board_from_body(body)
    if err:
        return err
    return jsonify({"ok": True, "text": board.pretty()})


# Entrypoint for "python app.py"
if __name__ == "__main__":
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    verbose = debug or os.getenv("GALAXIES_DEBUG", "0").lower() in ("1", "true", "yes", "on")
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO)
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
