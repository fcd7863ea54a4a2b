"""
Entry point for the Blog Posts API
"""

import logging
from dotenv import load_dotenv

# Load environment variables from .env file before settings are read
load_dotenv()

from blog_api.app import app
from blog_api.config.settings import PORT

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

if __name__ == "__main__":
    import uvicorn
    logger.info(f"Starting Blog Posts API on port {PORT}")
    uvicorn.run(app, host="0.0.0.0", port=PORT)
