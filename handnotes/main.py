import uvicorn

from handnotes.api.app import create_app
from handnotes.config.settings import Settings
from handnotes.logging.logger import Log


def main() -> None:
    """Entry point: load settings -> configure logging -> serve the API."""
    settings = Settings()
    Log.configure(settings.log_level)
    app = create_app(settings)
    # log_config=None keeps the handlers installed by Log.configure.
    uvicorn.run(
        app,
        host=settings.http_host,
        port=settings.http_port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
