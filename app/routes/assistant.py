from flask import Blueprint, jsonify, request

from parking.intents import suggestions_for

from ..assistant import answer_query

assistant_bp = Blueprint("assistant", __name__, url_prefix="/api")


@assistant_bp.route("/health", methods=["GET"])
def health():
    return jsonify({"status": "ok"})


@assistant_bp.route("/assistant", methods=["POST"])
def ask():
    payload = request.get_json(silent=True) or {}
    query = payload.get("query")
    if not isinstance(query, str) or not query.strip():
        return jsonify({"error": "Query is required."}), 400

    query = query.strip()
    intent, reply = answer_query(query)
    return jsonify(
        {
            "query": query,
            "intent": intent,
            "response": reply,
            "suggestions": suggestions_for(intent),
        }
    )
