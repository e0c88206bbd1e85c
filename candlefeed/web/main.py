"""
Web 服务启动脚本
"""

import os

import uvicorn


def main() -> None:
    """启动 FastAPI Web 服务"""

    host = os.getenv("CANDLEFEED_HOST", "0.0.0.0")
    port = int(os.getenv("CANDLEFEED_PORT", "8000"))
    reload = os.getenv("CANDLEFEED_RELOAD", "false").lower() == "true"

    uvicorn.run(
        "candlefeed.web.app:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        log_level="info",
    )


if __name__ == "__main__":
    main()
