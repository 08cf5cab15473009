# --- cookie_shop/utils/api.py ---
from flask import jsonify, request


def json_body() -> dict:
    """Request JSON object; anything else (missing, invalid, array, scalar) is {}."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def api_ok(message=None, **data):
    body = {"success": True}
    if message is not None:
        body["message"] = message
    body.update(data)
    return jsonify(body)


def api_error(message, **data):
    return jsonify({"error": message, **data})
