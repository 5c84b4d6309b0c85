import uvicorn
import os
import sys
from pathlib import Path

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

# Load .env before settings are imported (overrides existing environment)
env_file = Path(__file__).parent / ".env"
if env_file.exists():
    from dotenv import load_dotenv
    load_dotenv(env_file, override=True)
    print("Loaded environment from .env")

from pulseops.core.config import settings  # noqa: E402


if __name__ == "__main__":
    uvicorn.run(
        "pulseops.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        timeout_keep_alive=120,
    )
