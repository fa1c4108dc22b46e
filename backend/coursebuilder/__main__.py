import logging

import uvicorn

from coursebuilder.config import settings


def main() -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    uvicorn.run("coursebuilder.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
