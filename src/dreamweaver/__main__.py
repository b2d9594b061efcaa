"""Run with: python -m dreamweaver"""

import uvicorn

from dreamweaver.config import get_settings

if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "dreamweaver.main:app",
        host=settings.host,
        port=settings.port,
    )
