"""
HTTP transport for secret sharing.

  GET  /api/v1/splitSecret?k=2&n=4&secret=...  -> JSON array of shares
  POST /api/v1/recoverSecret  (JSON array)     -> secret as text/plain

Bad input and tampered shares map to 400 with the error message as the
body. Unusable key material maps to 500.
"""

import logging

from flask import Flask, Response, jsonify, request

from sealshare.config import SharingConfig, SharingContext
from sealshare.errors import CryptoConfigurationFailure, InvalidParameter, SecretSharingError
from sealshare.shamir import SecretSharing, Share


logger = logging.getLogger(__name__)

BASE_URL = "/api/v1"


def _int_arg(name: str) -> int:
    raw = request.args.get(name)
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise InvalidParameter("Invalid parameter(s) provided.") from None


def create_app(sharing: SecretSharing = None) -> Flask:
    """
    Build the Flask app around one SecretSharing instance.

    Args:
        sharing: The core service. Generated from the environment if omitted.
    """
    if sharing is None:
        sharing = SecretSharing(SharingContext.generate(SharingConfig.from_env()))

    app = Flask(__name__)
    app.extensions["sealshare"] = sharing

    @app.get(f"{BASE_URL}/splitSecret")
    def split_secret():
        k = _int_arg("k")
        n = _int_arg("n")
        secret = request.args.get("secret")
        shares = sharing.split_secret(k, n, secret)
        return jsonify([share.to_dict() for share in shares])

    @app.post(f"{BASE_URL}/recoverSecret")
    def recover_secret():
        body = request.get_json(silent=True)
        if not isinstance(body, list):
            raise InvalidParameter("Request body must be a JSON array of shares")
        shares = [Share.from_dict(item) for item in body]
        return Response(sharing.recover_secret(shares), mimetype="text/plain")

    @app.errorhandler(CryptoConfigurationFailure)
    def handle_configuration_failure(e):
        logger.error("Cryptographic configuration failure: %s", e, exc_info=e)
        return Response(str(e), status=500, mimetype="text/plain")

    @app.errorhandler(SecretSharingError)
    def handle_client_error(e):
        logger.warning("%s: %s", type(e).__name__, e)
        return Response(str(e), status=400, mimetype="text/plain")

    @app.after_request
    def allow_any_origin(response):
        response.headers["Access-Control-Allow-Origin"] = "*"
        return response

    return app
