"""
Main entry point for the item store server.

Usage:
    python run_fastapi.py

Or with uvicorn directly:
    uvicorn itemstore.fastapi_app:app --host 0.0.0.0 --port 3005 --reload
"""

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

import uvicorn

from itemstore.config.settings import Config


def main() -> None:
    debug = Config.APP_ENV == "development"

    print(f"Starting item store in {Config.APP_ENV} mode...")
    print(f"Server running on http://{Config.HOST}:{Config.PORT}")
    print(f"Data directory: {Config.DATA_DIR}")

    uvicorn.run(
        "itemstore.fastapi_app:app",
        host=Config.HOST,
        port=Config.PORT,
        reload=debug,
        log_level="info" if debug else "warning",
    )


if __name__ == "__main__":
    main()
