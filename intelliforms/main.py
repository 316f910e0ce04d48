import uvicorn

from intelliforms.api.app import create_app
from intelliforms.config.settings import Settings
from intelliforms.logging.logger import Log
from intelliforms.services import build_services
from intelliforms.worker.worker import Worker


def main() -> None:
    """Worker entry point: build dependencies -> consume the queue."""
    settings = Settings()
    Log.configure(settings.log_level)
    services = build_services(settings)
    worker = Worker(services.message_handler, settings)
    worker.run()


def serve() -> None:
    """API entry point: build dependencies -> serve HTTP with uvicorn."""
    settings = Settings()
    Log.configure(settings.log_level)
    app = create_app(build_services(settings))
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
