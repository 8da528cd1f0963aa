from __future__ import annotations

import uvicorn

from libs.core.settings import get_settings
from libs.logging import setup_logging


def main() -> None:
    settings = get_settings()
    # keep our JSON handler instead of uvicorn's default logging config
    uvicorn.run("apps.web.main:app", host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    setup_logging()
    main()
