# run.py
import sys
import os

import uvicorn

# Add the current directory to the Python path
sys.path.insert(0, os.path.abspath("."))

from app.core.logging import logger

if __name__ == "__main__":
    logger.info("Starting Team Discussions API...")
    try:
        uvicorn.run("app.main:app", host="0.0.0.0", port=int(os.getenv("PORT", "8000")), reload=True)
    except Exception as e:
        logger.error(f"Error starting server: {str(e)}")
        sys.exit(1)
