"""Run the API with uvicorn: ``python -m feedback_api``."""

import uvicorn

from feedback_api.config import Settings, load_env_file_fallback


def main() -> None:
    load_env_file_fallback()
    settings = Settings.from_env()
    print(f"\n Server is running on http://localhost:{settings.port}")
    print(f" Contact form endpoint: http://localhost:{settings.port}/api/contact")
    print(f" Health check: http://localhost:{settings.port}/api/health\n")
    uvicorn.run(
        "feedback_api.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level="debug" if settings.debug else "info",
    )


if __name__ == "__main__":
    main()
