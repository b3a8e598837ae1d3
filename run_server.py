#!/usr/bin/env python
import uvicorn
import os
from dotenv import load_dotenv

if __name__ == "__main__":
    # Load environment variables before the app module reads them
    load_dotenv()

    host = os.getenv("HOST", "127.0.0.1")
    port = int(os.getenv("PORT", "7860"))
    log_level = os.getenv("LOG_LEVEL", "info").lower()
    reload = os.getenv("RELOAD", "false").lower() in ("1", "true", "yes", "on")

    uvicorn.run(
        "hqstreams.main:app",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
        access_log=True
    )
