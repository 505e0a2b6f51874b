"""
Flask application of the LL(1) analysis API.

    flask --app server run          # development
    python start_server.py prod     # gunicorn, see gunicorn.conf.py

Configuration defaults live in DEFAULT_CONFIG and can be overridden with
LL1_-prefixed environment variables, e.g. LL1_RATELIMIT_ENABLED=false.
"""
import ipaddress

from flask_cors import CORS
from flask import Flask, current_app, request, jsonify
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

from blueprints.ll1 import ll1_bp
from ll1.errors import GrammarError

DEFAULT_CONFIG = {
    "RATELIMIT_DEFAULT": "2000 per day;500 per hour",  # global limits
    "RATELIMIT_STORAGE_URI": "memory://",  # use redis:// when running several workers
    "RATELIMIT_STRATEGY": "fixed-window",
    "RATELIMIT_ENABLED": True,
    "RATELIMIT_HEADERS_ENABLED": True,
    "ANALYSIS_RATE_LIMIT": "1000/minute",
    "MAX_PRODUCTIONS": 200,
    "MAX_INPUT_LENGTH": 2000,
}


def _is_public(ip):
    try:
        return not ipaddress.ip_address(ip).is_private
    except ValueError:
        return False


def get_real_ip():
    """
    Client address behind a reverse proxy.
    Order: first public X-Forwarded-For entry -> X-Real-IP -> remote_address
    """
    forwarded = request.headers.get('X-Forwarded-For', '')
    if forwarded:
        forwarded_for = [ip.strip() for ip in forwarded.split(',') if ip.strip()]
        for ip in forwarded_for:
            if _is_public(ip):
                return ip
        if forwarded_for:
            return forwarded_for[0]
    return request.headers.get('X-Real-IP', get_remote_address())


limiter = Limiter(key_func=get_real_ip)
limiter.limit(lambda: current_app.config["ANALYSIS_RATE_LIMIT"])(ll1_bp)


def ratelimit_handler(e):
    return jsonify({
        "code": 429,
        "msg": "Too many requests, please try again later"
    }), 429


def grammar_error_handler(e):
    current_app.logger.info("rejected grammar: %s", e)
    return jsonify({
        "code": 1,
        "msg": str(e)
    }), 400


def server_error(e):
    return jsonify({
        "code": 500,
        "msg": "Internal server error"
    }), 500


def create_app(test_config=None):
    app = Flask(__name__)
    app.config.from_mapping(DEFAULT_CONFIG)
    app.config.from_prefixed_env("LL1")
    if test_config is not None:
        app.config.from_mapping(test_config)

    app.json.ensure_ascii = False  # keep ε readable in responses
    CORS(app)
    limiter.init_app(app)

    app.register_error_handler(429, ratelimit_handler)
    app.register_error_handler(GrammarError, grammar_error_handler)
    app.register_error_handler(500, server_error)

    app.register_blueprint(ll1_bp)
    app.logger.info("LL(1) analysis API ready")
    return app


if __name__ == '__main__':
    create_app().run(host='0.0.0.0')
