# questionfeed/__main__.py
import uvicorn

from questionfeed.core.config import settings


def main():
    uvicorn.run("questionfeed.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
