"""
Development server launcher.

Loads .env, prints the active planner switches and runs the API with
uvicorn in reload mode.

Usage:
    python scripts/run_dev.py
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Load .env file
from dotenv import load_dotenv

load_dotenv()

import uvicorn

from app.core.config import settings


def print_banner() -> None:
    base_url = f"http://localhost:{settings.PORT}"
    print("=" * 60)
    print("Train Planner Development Server")
    print("=" * 60)
    print(f"API:   {base_url}/api/v1")
    print(f"Docs:  {base_url}/docs")
    print()
    print(f"Default plan length:  {settings.DEFAULT_PLAN_WEEKS} weeks (max {settings.MAX_PLAN_WEEKS})")
    print(f"Back-to-back check:   {'on' if settings.AVOID_BACK_TO_BACK else 'off'}")
    print(f"Movement variety:     {'on' if settings.ENFORCE_MOVEMENT_VARIETY else 'off'}")
    print(f"Equipment variety:    {'on' if settings.ENFORCE_EQUIPMENT_VARIETY else 'off'}")
    print()
    print("Press Ctrl+C to stop")
    print("=" * 60)


if __name__ == "__main__":
    print_banner()
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=True,
        log_level=settings.LOG_LEVEL.lower(),
    )
