#!/usr/bin/env python3
"""
Web Application for merging two images into one using Google Gemini API
Serves the JSON merge API consumed by the browser front end.
"""

import os
from flask import Flask, jsonify
from flask_cors import CORS
from dotenv import load_dotenv

# Load environment variables before importing modules that rely on them
load_dotenv()

# Import API blueprint
from api import api_bp
from api.models import create_error_response
from merger.config import get_api_key, get_max_upload_bytes


def create_app() -> Flask:
    """Build the Flask app with CORS and the merge API registered"""
    app = Flask(__name__)
    # Two images plus form fields
    app.config['MAX_CONTENT_LENGTH'] = 2 * get_max_upload_bytes() + 1024 * 1024

    # Configure CORS
    CORS(app, resources={
        r"/api/*": {
            "origins": "*",
            "methods": ["GET", "POST", "OPTIONS"],
            "allow_headers": ["Content-Type", "Authorization"],
        }
    })

    # Register API blueprint
    app.register_blueprint(api_bp)

    @app.route('/health')
    def health_check():
        return jsonify({
            'status': 'ok',
            'gemini_api_key': get_api_key() is not None,
        })

    @app.errorhandler(413)
    def request_too_large(error):
        return jsonify(create_error_response('VALIDATION_003', 'Upload too large.')), 413

    return app


app = create_app()


if __name__ == '__main__':
    port = int(os.getenv('PORT', '5000'))
    app.run(debug=True, host='0.0.0.0', port=port)
