# tenant_registry/cli/config.py
import os
from dotenv import load_dotenv
from pathlib import Path

# This cli/config.py file is at <project root>/tenant_registry/cli/config.py
project_root = Path(__file__).parent.parent.parent.resolve()

load_dotenv(dotenv_path=project_root / '.env', override=True)

# Base URL of the tenant registry API the CLI talks to
TENANT_REGISTRY_API_BASE_URL = os.getenv("TENANT_REGISTRY_API_BASE_URL", "http://127.0.0.1:8000")
