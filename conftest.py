# Root conftest.py - loads .env before test collection so EQUIPMENT_* settings
# are visible when equipment.config is first read.
from dotenv import load_dotenv
load_dotenv()

# Fixtures from tests/conftest.py are discovered automatically since tests/
# is a subdirectory. Do NOT use pytest_plugins here.
