# -*- coding: utf-8 -*-
"""
Vercel Serverless Function - Catalog Enrichment Entry Point

This module handles:
1. Receive POST requests with {"catalog": [...], "rawData": "..."}
2. Delegate validation and enrichment to the request processor
3. Return {"enrichedCatalog": [...]} or {"error": "..."} with the status code
"""

import sys
from pathlib import Path

# Add project root to sys.path for local development
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import logging
from flask import Flask, request, jsonify

from catalog.config import LOG_LEVEL, PORT
from catalog.processor import process_enrich_request

# Configure logging
logging.basicConfig(
    level=LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Initialize Flask app
app = Flask(__name__)


@app.route("/api/enrich", methods=['GET'])
def enrich_health():
    """Health check endpoint for GET requests"""
    return 'Catalog enricher is running!', 200


@app.route("/api/enrich", methods=['POST'])
def enrich_catalog():
    """
    Catalog enrichment entry function

    Returns:
        JSON body and status code from the request processor
    """
    # Invalid or missing JSON is treated as an empty body
    payload = request.get_json(silent=True)
    if payload is None:
        logger.warning("Request body is not valid JSON")

    response = process_enrich_request(payload)
    return jsonify(response.body), response.status


# Local development entry point
if __name__ == "__main__":
    app.run(debug=True, port=PORT)
