"""
Main entry point for the FastAPI application.
Run this file to start the FastAPI server.

Usage:
    python run_fastapi.py

Or with uvicorn directly:
    uvicorn branchchat.fastapi_app:app --host 0.0.0.0 --port 3001 --reload
"""

import os
import sys
import io

# Set UTF-8 encoding for stdout/stderr to handle Unicode characters on Windows
if sys.platform == "win32":
    sys.stdout = io.TextIOWrapper(
        sys.stdout.buffer, encoding="utf-8", errors="replace", line_buffering=True
    )
    sys.stderr = io.TextIOWrapper(
        sys.stderr.buffer, encoding="utf-8", errors="replace", line_buffering=True
    )

os.environ["PYTHONIOENCODING"] = "utf-8"

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

import uvicorn

from branchchat.config.settings import get_config

if __name__ == "__main__":
    env = os.getenv("APP_ENV", "development")
    config = get_config(env)
    debug = config.DEBUG

    print(f"Starting FastAPI application in {env} mode...")
    print(f"Server running on http://{config.HOST}:{config.PORT}")
    print(f"API docs available at http://{config.HOST}:{config.PORT}/docs")

    uvicorn.run(
        "branchchat.fastapi_app:app",
        host=config.HOST,
        port=config.PORT,
        reload=debug,
        log_level="info" if debug else "warning",
    )
