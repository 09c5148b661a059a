import os

from dotenv import load_dotenv

# local | development | testing | staging | production
ENVIRONMENT = os.getenv("ENVIRONMENT", "local").lower()

# WORLD_CLOCK_ENV_FILE points at an explicit file, e.g. in containers
ENV_FILE = os.getenv("WORLD_CLOCK_ENV_FILE", f".env.{ENVIRONMENT}")

if os.path.exists(ENV_FILE):
    load_dotenv(dotenv_path=ENV_FILE)
    print(f"[ENV] Loaded {ENV_FILE}")

__all__ = ["ENVIRONMENT", "ENV_FILE"]
