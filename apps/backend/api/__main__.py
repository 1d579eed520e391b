"""
Serve the API with uvicorn.

Usage:
    python -m api
"""

import uvicorn

from api.dependencies import get_config


def main() -> None:
    config = get_config()
    uvicorn.run(
        "api.main:app",
        host=config.api_host,
        port=config.api_port,
        reload=config.api_debug,
    )


if __name__ == "__main__":
    main()
