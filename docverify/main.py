import uvicorn

from docverify.api.server import create_app
from docverify.config.settings import Settings
from docverify.logging.logger import Log
from docverify.processor.processor import build_processor


def main() -> None:
    """Entry point: settings -> logging -> build processor -> serve HTTP."""
    settings = Settings()
    Log.configure(settings.log_level)
    if not settings.plagcheck_api_key:
        Log.warning("PLAGCHECK_API_KEY is not set, verification requests will fail")

    app = create_app(build_processor(settings))
    Log.info(f"Starting docverify ({settings.app_env}) on {settings.host}:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
