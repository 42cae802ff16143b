from flask import Flask, request
from flask_compress import Compress
import logging

import config
from routes.api import ALL_BLUEPRINTS
from routes.pages import pages_bp

logger = logging.getLogger(__name__)


def create_app():
    app = Flask(__name__)

    # Gzip/Brotli compression for all responses
    Compress(app)
    app.config['COMPRESS_ALGORITHM'] = ['br', 'gzip']
    app.config['COMPRESS_MIMETYPES'] = [
        'text/html', 'text/css', 'text/javascript', 'application/javascript',
        'application/json', 'image/svg+xml'
    ]

    # Static asset cache headers (24 hours)
    app.config['SEND_FILE_MAX_AGE_DEFAULT'] = 86400

    app.register_blueprint(pages_bp)
    for bp in ALL_BLUEPRINTS:
        app.register_blueprint(bp)

    @app.after_request
    def add_cache_headers(response):
        """Status data is never cached; static assets are."""
        if request.path.startswith('/api/trail-statuses') or request.path == '/trailStatuses.json':
            response.headers['Cache-Control'] = 'no-store, no-cache, must-revalidate'
            response.headers['Pragma'] = 'no-cache'
        elif request.path.startswith('/static/'):
            response.headers['Cache-Control'] = 'public, max-age=86400'
        # Security headers
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['X-Frame-Options'] = 'SAMEORIGIN'
        return response

    return app


app = create_app()

if __name__ == '__main__':
    logging.basicConfig(level=config.LOG_LEVEL)
    app.run(host='0.0.0.0', port=8095, debug=False, threaded=True)
