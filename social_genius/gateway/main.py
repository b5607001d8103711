"""
Main entry point for the Gateway server.

Run locally with:
    python -m social_genius.gateway.main

Or with uvicorn:
    uvicorn social_genius.gateway.server:app --reload --port 8080
"""

import os

from social_genius.core.config import load_app_config

# Load .env / app.yaml before the app reads LOG_LEVEL and model settings
load_app_config()

from social_genius.gateway.server import app  # noqa: E402


def main() -> None:
    import uvicorn

    port = int(os.getenv("PORT", "8080"))
    log_level = os.getenv("LOG_LEVEL", "info").lower()

    print(f"Starting Social Genius Gateway on port {port}...")
    print(f"Log level: {log_level}")
    print(f"Model: {os.getenv('MODEL_PROVIDER')}/{os.getenv('MODEL_NAME')}")
    print()

    uvicorn.run(
        app,
        host="0.0.0.0",  # Listen on all interfaces
        port=port,
        log_level=log_level,
        access_log=True,
    )


if __name__ == "__main__":
    main()
