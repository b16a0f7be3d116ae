"""
Single source of truth for configuration.
Everything imports from here. The only secret is the logo lookup key.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# ─── External services ─────────────────────────────────────────────────────
# Optional: without a key the logo lookup is skipped silently.
LOGO_DEV_API_KEY = os.getenv("LOGO_DEV_API_KEY", "").strip()
LOGO_LOOKUP_BASE_URL = "https://img.logo.dev"
LOGO_LOOKUP_SIZE = 200
LOGO_DEBOUNCE_SECONDS = 1.5
LOGO_POLL_SECONDS = 0.5

# ─── Durable local store ───────────────────────────────────────────────────
PROJECT_ROOT = Path(__file__).resolve().parent
STORE_URL = f"sqlite:///{PROJECT_ROOT / 'proposal_state.db'}"
STORAGE_KEY = "proposalFormData"

# ─── Export pipeline ───────────────────────────────────────────────────────
EXPORT_SCALE = 2.0
EXPORT_BACKGROUND_COLOR = "#ffffff"
EXPORT_IMAGE_TIMEOUT = 15.0

# ─── Logging ───────────────────────────────────────────────────────────────
LOGS_DIR = PROJECT_ROOT / "logs"
APP_LOG = LOGS_DIR / "proposal_studio.log"


def configure_logging(level: int = logging.INFO) -> None:
    """Send application logs to stderr and ``logs/proposal_studio.log``."""
    LOGS_DIR.mkdir(exist_ok=True)
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.FileHandler(APP_LOG), logging.StreamHandler()],
    )
