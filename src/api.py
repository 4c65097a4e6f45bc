# src/api.py
import logging

from flask import Flask, jsonify, request
from flask_cors import CORS

from analyser import (
    CHECK_FAILED_MESSAGE, NOT_CONFIGURED_MESSAGE, PROMPT_MESSAGE,
    EmptyUrlError, check_url,
)
from safebrowsing import MissingApiKeyError, SafeBrowsingError
from settings import configure_logging

logger = logging.getLogger(__name__)

app = Flask(__name__)
CORS(app)  # allows calls from a browser extension during development; restrict in production


@app.route("/check", methods=["POST"])
def check():
    data = request.get_json(silent=True) or {}
    url = data.get("url") if isinstance(data, dict) else None
    try:
        res = check_url(url if isinstance(url, str) else "")
    except EmptyUrlError:
        return jsonify({"error": PROMPT_MESSAGE}), 400
    except MissingApiKeyError:
        return jsonify({"error": NOT_CONFIGURED_MESSAGE}), 503
    except SafeBrowsingError:
        logger.exception("URL check failed")
        return jsonify({"error": CHECK_FAILED_MESSAGE}), 502
    return jsonify(res.to_dict())


@app.route("/health")
def health():
    return jsonify({"status": "ok"})


if __name__ == "__main__":
    configure_logging()
    app.run(host="127.0.0.1", port=5000, debug=True)
