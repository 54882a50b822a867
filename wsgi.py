# wsgi.py
"""WSGI entry point for production (Gunicorn)"""

import logging
from clansite import create_app

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = create_app('production')
logger.info("Clan site application started")

if __name__ == '__main__':
    app.run()
