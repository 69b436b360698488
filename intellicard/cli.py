"""Console entry point: serve the API with uvicorn"""

import uvicorn

from intellicard.config import settings

APP = "intellicard.api.main:app"


def main():
    uvicorn.run(APP, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
