"""Entry point for running the trivia board server."""

import logging
import os
from pathlib import Path

import uvicorn
from dotenv import load_dotenv

# Load .env from the backend directory first, then the project root
backend_dir = Path(__file__).parent
project_root = backend_dir.parent.parent

env_file = backend_dir / ".env"
if env_file.exists():
    load_dotenv(env_file)
    print(f"[ENV] loaded: {env_file}")
else:
    env_file = project_root / ".env"
    if env_file.exists():
        load_dotenv(env_file)
        print(f"[ENV] loaded: {env_file}")
    else:
        print("[ENV] warning: no .env file found")

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

if __name__ == "__main__":
    uvicorn.run(
        "jeopardy.backend.app:app",
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8000")),
        reload=os.getenv("RELOAD", "").lower() in ("1", "true", "yes"),
    )
