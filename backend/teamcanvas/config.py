import os
from dotenv import load_dotenv

# Load .env from project root
load_dotenv()

DATABASE_URL = os.getenv("TEAMCANVAS_DATABASE_URL", "sqlite:///./teamcanvas.db")
TEAMS_STORAGE_KEY = os.getenv("TEAMCANVAS_STORAGE_KEY", "raven_teams_v1")
CUSTOM_ASSISTANTS_STORAGE_KEY = os.getenv(
    "TEAMCANVAS_CUSTOM_ASSISTANTS_KEY", "raven_custom_assistants_v1"
)
OWNER_NAME = os.getenv("TEAMCANVAS_OWNER_NAME", "")
