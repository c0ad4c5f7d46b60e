"""Run the Chirpy API under uvicorn: python -m chirpy"""

import uvicorn

from chirpy.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "chirpy.main:app",
        host=settings.host,
        port=settings.port,
        timeout_keep_alive=settings.keep_alive_timeout_seconds,
        log_config=None,
    )


if __name__ == "__main__":
    main()
