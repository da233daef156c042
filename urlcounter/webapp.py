from __future__ import annotations
import argparse
import logging
from flask import Flask, jsonify, request, Response
from .config import Config
from .logging_setup import setup_logging
from .counter import ON_INVALID_POLICIES, count_unique_urls, count_unique_urls_per_top_level_domain
from .normalize import InvalidURL

log = logging.getLogger(__name__)

def create_app(cfg: Config | None = None) -> Flask:
    """Create the Flask app serving the URL counters."""
    cfg = cfg or Config()
    app = Flask(__name__)
    basic_auth = cfg.section("web").get("basic_auth") or {"enabled": False}
    default_policy = cfg.on_invalid  # ValueError on a bad counting.on_invalid

    def _check_auth():
        if not basic_auth.get("enabled"):
            return True
        if not (basic_auth.get("username") and basic_auth.get("password")):
            # auth enabled without credentials configured: nobody gets in
            return False
        u = request.authorization.username if request.authorization else None
        p = request.authorization.password if request.authorization else None
        return (u == basic_auth.get("username") and p == basic_auth.get("password"))

    def _auth_required():
        return Response("Authentication required", 401, {"WWW-Authenticate": 'Basic realm="urlcounter"'})

    def _bad_request(message, **extra):
        return jsonify({"error": message, **extra}), 400

    def _run(counter, key):
        if not _check_auth():
            return _auth_required()
        body = request.get_json(silent=True)
        if not isinstance(body, dict):
            body = {}
        urls = body.get("urls")
        if not isinstance(urls, list) or not all(isinstance(u, str) for u in urls):
            return _bad_request("'urls' must be a list of strings")
        policy = body.get("on_invalid", default_policy)
        if policy not in ON_INVALID_POLICIES:
            return _bad_request(f"'on_invalid' must be one of {list(ON_INVALID_POLICIES)}")
        try:
            result = counter(urls, on_invalid=policy)
        except InvalidURL as e:
            log.info("Rejected batch of %d URLs: %s", len(urls), e)
            return _bad_request("invalid URL", url=e.url)
        return jsonify({key: result})

    @app.route("/api/health")
    def api_health():
        return jsonify({"status": "ok"})

    @app.route("/api/count", methods=["POST"])
    def api_count():
        return _run(count_unique_urls, "count")

    @app.route("/api/count/tld", methods=["POST"])
    def api_count_tld():
        return _run(count_unique_urls_per_top_level_domain, "domains")

    return app

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--config", help="Path to config.yaml")
    args = ap.parse_args()
    cfg = Config.load(args.config) if args.config else Config()
    setup_logging(cfg.data)
    web = cfg.section("web")
    create_app(cfg).run(host=web.get("host", "127.0.0.1"), port=int(web.get("port", 8090)))

if __name__ == "__main__":
    main()
