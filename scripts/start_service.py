"""
Service starter: runs the auditor app under uvicorn.
Used by Docker/Railway; PORT and LOG_LEVEL come from the environment.
"""
import os
import uvicorn

APP_PATH = "agents.auditor.main:app"
DEFAULT_PORT = 8004


def main():
    port = int(os.environ.get("PORT", DEFAULT_PORT))
    print(f"Starting auditor on port {port}...")
    uvicorn.run(
        APP_PATH,
        host="0.0.0.0",
        port=port,
        log_level=os.environ.get("LOG_LEVEL", "info").lower(),
    )


if __name__ == "__main__":
    main()
