"""Run the API with uvicorn: python -m langbuddy (listens on PORT)."""

import uvicorn

from langbuddy.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run("langbuddy.main:app", host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
