"""
HTTP interface for searching a loaded index.
Serves the search page and a JSON search API.
"""
import logging
import os

from flask import Flask, jsonify, request, send_from_directory

from DocSeeker.errors import QueryEncodingError
from DocSeeker.tfidf_search.tfidf_search import decode_query

logger = logging.getLogger(__name__)

STATIC_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "static")


def create_app(engine, top_k=10):
    """
    Create the Flask application.

    Args:
        engine: TFIDFSearchEngine answering the queries
        top_k: Number of results returned per query

    Returns:
        Flask application
    """
    app = Flask(__name__, static_folder=None)

    @app.before_request
    def log_request():
        logger.info("Incoming request: method: %s, url: %s", request.method, request.path)

    @app.route("/", methods=["GET"])
    @app.route("/index.html", methods=["GET"])
    def home():
        return send_from_directory(STATIC_DIR, "index.html", mimetype="text/html")

    @app.route("/index.js", methods=["GET"])
    def script():
        return send_from_directory(STATIC_DIR, "index.js", mimetype="text/javascript")

    @app.route("/api/search", methods=["POST"])
    def search_api():
        try:
            query = decode_query(request.get_data())
        except QueryEncodingError as e:
            logger.error("Could not interpret query: %s", e)
            return "Error 400: Query must be a valid utf-8", 400

        results = engine.search(query, top_k=top_k)
        return jsonify([[path, score] for path, score in results])

    @app.errorhandler(404)
    def not_found(e):
        return "Error 404", 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        return "Error 404", 404

    @app.errorhandler(500)
    def server_error(e):
        return "Error 500", 500

    return app


def serve(engine, host="127.0.0.1", port=6969, top_k=10):
    """Run the search server until interrupted."""
    app = create_app(engine, top_k=top_k)
    logger.info("Listening at http://%s:%d/", host, port)
    app.run(host=host, port=port)
