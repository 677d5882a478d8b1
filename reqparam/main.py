import logging

import uvicorn

from .app import app
from .core.config import Config


def main() -> None:
    Config.validate()

    # Configure logging
    logging.basicConfig(
        level=Config.log_level(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(),
        ]
    )
    uvicorn.run(app, host=Config.HOST, port=Config.port())


if __name__ == "__main__":
    main()
