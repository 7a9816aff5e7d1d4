"""
PathFinder – Flask web application.

Routes:
  /api/opportunities     GET  – all opportunities (optional ?type=<category>)
  /api/categories        GET  – categories with blurb and opportunity count
  /api/resume/analyze    POST – career blueprint for a resume + preferences
  /<path>                GET  – compiled frontend, falling back to index.html
"""

from __future__ import annotations

import logging
import time

from flask import Flask, request, jsonify, send_from_directory, g
from flask_cors import CORS

import config
from pathfinder.analyzer import ResumeAnalyzer
from pathfinder.store import OpportunityStore
from pathfinder.validation import (
    RequestValidationError,
    parse_analyze_request,
    parse_opportunity_type,
)

API = config.API_PREFIX

# ── Logging ────────────────────────────────────────────────────
LOG_FORMAT = "%(asctime)s  %(levelname)-8s  %(message)s"
logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
logger = logging.getLogger(__name__)

# Silence werkzeug's per-request lines, _after_request logs them instead
logging.getLogger("werkzeug").setLevel(logging.WARNING)

# Also write WARNING and ERROR to error_log file
try:
    file_handler = logging.FileHandler(config.ERROR_LOG_FILE, encoding="utf-8")
    file_handler.setLevel(logging.WARNING)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logging.getLogger().addHandler(file_handler)
except OSError as e:
    logger.warning("Could not create error log file %s: %s", config.ERROR_LOG_FILE, e)

# ── App setup ──────────────────────────────────────────────────
app = Flask(__name__, static_folder=None)
app.secret_key = config.SECRET_KEY
CORS(app, resources={rf"{API}/*": {"origins": config.CORS_ORIGINS}})

store = OpportunityStore()
analyzer = ResumeAnalyzer(store)


# ── Request logging ────────────────────────────────────────────

@app.before_request
def _before_request():
    g.req_start = time.time()

@app.after_request
def _after_request(response):
    elapsed = round((time.time() - getattr(g, "req_start", time.time())) * 1000)
    status = response.status_code
    method = request.method
    path = request.path
    if status >= 400:
        logger.warning("%s %s → %d (%dms)", method, path, status, elapsed)
    else:
        logger.info("%s %s → %d (%dms)", method, path, status, elapsed)
    return response


# ── Error handlers ─────────────────────────────────────────────

@app.errorhandler(RequestValidationError)
def handle_validation_error(exc):
    """Report a malformed request back to the client."""
    return jsonify({"error": str(exc)}), 400


@app.errorhandler(404)
def handle_not_found(exc):
    return jsonify({"error": "Not found"}), 404


@app.errorhandler(405)
def handle_method_not_allowed(exc):
    return jsonify({"error": "Method not allowed"}), 405


@app.errorhandler(500)
def handle_internal_error(exc):
    """Generic body for unhandled faults; Flask has already logged the traceback."""
    return jsonify({"error": "An internal server error occurred."}), 500


# ╭──────────────────────────────────────────────────────────────╮
# │  API routes                                                  │
# ╰──────────────────────────────────────────────────────────────╯

@app.route(f"{API}/opportunities")
def api_opportunities():
    """All opportunities in store order, optionally narrowed to one category."""
    type_raw = request.args.get("type", "").strip()
    if type_raw:
        ops = store.by_type(parse_opportunity_type(type_raw))
    else:
        ops = store.list_opportunities()
    return jsonify([op.to_dict() for op in ops])


@app.route(f"{API}/categories")
def api_categories():
    """Categories for the browse screen, with how many opportunities each has."""
    counts = store.count_by_type()
    return jsonify([
        {"name": name, "description": description, "count": counts.get(name, 0)}
        for name, description in config.OPPORTUNITY_CATEGORIES.items()
    ])


@app.route(f"{API}/resume/analyze", methods=["POST"])
def api_analyze_resume():
    """
    Build the career blueprint for an uploaded resume.
    Body: {"resumeText": str, "userPreferences": {"dreamJob": str, "experienceLevel": str}}
    Missing fields are rejected before the analyzer runs.
    """
    data = request.get_json(silent=True)
    resume_text, preferences = parse_analyze_request(data)

    try:
        result = analyzer.analyze(resume_text, preferences)
        payload = result.to_dict()
    except Exception:
        logger.exception("Resume analysis failed")
        return jsonify({"error": "An internal server error occurred."}), 500

    logger.info(
        "Blueprint generated  dream_job=%r  level=%r  recommended=%s",
        preferences.dream_job or "(blank)",
        preferences.experience_level or "(blank)",
        [op.id for op in result.recommended_opportunities],
    )
    return jsonify(payload)


# ╭──────────────────────────────────────────────────────────────╮
# │  Frontend                                                    │
# ╰──────────────────────────────────────────────────────────────╯

# Registered after the API routes; unknown API paths still get a JSON 404.
@app.route("/", defaults={"path": ""})
@app.route("/<path:path>")
def frontend(path):
    """Serve a file from the frontend build, or index.html for client routes."""
    if f"/{path}".startswith(f"{API}/") or f"/{path}" == API:
        return jsonify({"error": "Not found"}), 404

    build_dir = config.BUILD_DIR
    if path and (build_dir / path).is_file():
        return send_from_directory(build_dir, path)
    if (build_dir / "index.html").is_file():
        return send_from_directory(build_dir, "index.html")
    return jsonify({"error": "Frontend build not found"}), 404


# ── Startup ────────────────────────────────────────────────────

def _print_startup_banner():
    """Log useful info on startup."""
    counts = store.count_by_type()
    has_build = (config.BUILD_DIR / "index.html").is_file()

    banner = [
        f"  Opportunities: {len(store)}  ("
        + ", ".join(f"{name}: {n}" for name, n in counts.items())
        + ")",
        f"  Frontend:      {config.BUILD_DIR if has_build else 'not built – API only'}",
        f"  API prefix:    {API}",
        "",
        f"  Server:        http://localhost:{config.PORT}",
        "",
    ]
    for line in banner:
        logger.info(line)


if __name__ == "__main__":
    import os
    # Only print banner in the reloader child process (avoids printing twice)
    if os.environ.get("WERKZEUG_RUN_MAIN") == "true" or not config.DEBUG:
        _print_startup_banner()
    app.run(debug=config.DEBUG, host=config.HOST, port=config.PORT)
