import uvicorn

from travel_planner.config import Settings
from travel_planner.main import create_app
from travel_planner.utils.logger import logger


def main():
    settings = Settings.from_env()
    if not settings.gemini_api_key:
        logger.warning("GEMINI_API_KEY is not set; model calls will fail until it is configured")

    app = create_app(settings)
    logger.info(f"Server is running on http://localhost:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level="info")


if __name__ == "__main__":
    main()
