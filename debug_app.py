"""
Local runner for the auto-assignment API

Serves src.main:app from a single in-process uvicorn worker, so debugger
breakpoints in the preview and commit handlers are hit. Run from the
repository root: `python debug_app.py`.
"""
import os

import uvicorn

from src.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "src.main:app",
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8000")),
        log_level=settings.LOG_LEVEL.lower(),
        reload=False,
    )


if __name__ == "__main__":
    main()
