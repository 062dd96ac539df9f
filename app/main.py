import uvicorn
from dotenv import load_dotenv

from infrastructure.logging import get_module_logger
from infrastructure.services import get_settings
from server import server

load_dotenv()

server_app = server.handler
logger = get_module_logger()


def main():
    """Main function to start the application."""
    settings = get_settings()
    logger.info(
        "application_starting",
        host=settings.server.HOST,
        port=settings.server.PORT,
    )
    uvicorn.run(server_app, host=settings.server.HOST, port=settings.server.PORT)


if __name__ == "__main__":
    main()
