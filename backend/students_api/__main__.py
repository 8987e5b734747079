"""Run the Students API with uvicorn on the configured listen address."""

import uvicorn

from students_api.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "students_api.main:app",
        host=settings.http_host,
        port=settings.http_port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
