import uvicorn
from dotenv import load_dotenv

from infrastructure.logging import get_module_logger
from server import server

server_app = server.handler
logger = get_module_logger()

load_dotenv()


def main():
    """Run the site with uvicorn."""
    logger.info("starting_server")
    uvicorn.run(server_app, host="0.0.0.0", port=8000)


if __name__ == "__main__":
    main()
