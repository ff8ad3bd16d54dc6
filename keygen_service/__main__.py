"""
Run the service: python -m keygen_service
"""
import uvicorn

from .config import get_settings
from .main import create_app


def main():
    settings = get_settings()
    uvicorn.run(
        create_app(settings),
        host=settings.GENERATION_KEY_SERVICE_HOST,
        port=settings.GENERATION_KEY_SERVICE_PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
