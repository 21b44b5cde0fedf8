"""Routes for comparing two poker hands."""

from flask import Blueprint, current_app, jsonify, request

from showdown.core.errors import ShowdownError
from showdown.game.showdown import resolve_showdown

result_bp = Blueprint("result", __name__)


def _hand_arg(name: str) -> list[str]:
    """Read a hand from repeated or comma-separated query parameters."""
    cards = []
    for value in request.args.getlist(name):
        cards.extend(part.strip() for part in value.split(",") if part.strip())
    return cards


@result_bp.route("/result", methods=["GET"])
def result():
    """Compare two five card hands.

    Query parameters:
        player1Hand: Cards such as ``KH,QH,JH,10H,AH``
        player2Hand: Cards in the same notation

    Returns:
        JSON response with the winner and both evaluations
    """
    player1_hand = _hand_arg("player1Hand")
    player2_hand = _hand_arg("player2Hand")

    missing = [
        name
        for name, hand in (("player1Hand", player1_hand), ("player2Hand", player2_hand))
        if not hand
    ]
    if missing:
        return jsonify({"success": False, "error": f"Missing parameter(s): {', '.join(missing)}"}), 400

    try:
        showdown = resolve_showdown(
            player1_hand,
            player2_hand,
            reject_degenerate=current_app.config.get("REJECT_DEGENERATE_HANDS", True),
        )
    except ShowdownError as e:
        current_app.logger.warning(f"Rejected showdown request: {e}")
        return jsonify({"success": False, "error": str(e)}), 400

    return jsonify({"success": True, **showdown.to_json()})
