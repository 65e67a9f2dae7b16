from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, List, Mapping, Optional

from flask import Flask, jsonify, request

# Ensure project root is importable when running this file directly
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from engine import AIPlayer, Board, Evaluator, detect_player
from engine.game import InvalidBoardError, is_reachable

logger = logging.getLogger(__name__)

DEFAULT_PORT = 3000


def _read_board() -> Board:
    """Pull the board out of the query string (GET) or JSON body (POST)."""
    if request.method == "GET":
        raw = request.args.get("board")
        if not raw:
            raise InvalidBoardError("Missing board")
        values: List[Any] = []
        for part in raw.split(","):
            try:
                values.append(float(part.strip()))
            except ValueError:
                raise InvalidBoardError(f"Invalid cell value: {part!r}") from None
        return Board.from_values(values)

    data = request.get_json(silent=True) or {}
    values = data.get("board") if isinstance(data, dict) else None
    if not isinstance(values, list):
        raise InvalidBoardError("Missing board")
    return Board.from_values(values)


def create_app(config: Optional[Mapping[str, Any]] = None) -> Flask:
    app = Flask(__name__)
    app.config.from_mapping(STRICT_TURNS=False, LOG_BOARDS=True)
    app.config.from_prefixed_env("TATETI")
    if config:
        app.config.from_mapping(config)

    ai = AIPlayer()

    @app.get("/")
    def index():
        return "Tic-tac-toe server running. Use /move with GET or POST."

    @app.route("/move", methods=["GET", "POST"])
    def api_move():
        try:
            board = _read_board()
        except ValueError as exc:
            logger.warning("Rejected board: %s", exc)
            return jsonify({"error": str(exc)}), 400

        if app.config["STRICT_TURNS"] and not is_reachable(board):
            logger.warning("Rejected unreachable board: %s", board.cells)
            return jsonify({"error": "Board is not reachable by alternating turns"}), 400

        if Evaluator.outcome(board).is_terminal:
            return jsonify({"error": "Game is already over"}), 400

        player = detect_player(board)
        move = ai.choose_move(board, player)
        board.push(move, player)

        if app.config["LOG_BOARDS"]:
            logger.info("Player %s plays %s\n%s", player, move, board.render())

        return jsonify({"movimiento": move, "tablero": board.to_list(), "jugador": player})

    return app


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Tic-tac-toe move server")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument("--debug", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = create_app()
    logger.info("Tic-tac-toe server listening on http://%s:%s", args.host, args.port)
    app.run(host=args.host, port=args.port, debug=args.debug)


if __name__ == "__main__":
    main()
