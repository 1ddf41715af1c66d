"""Configuration loading and defaults.

Reads from config.toml at the project root, with environment variable overrides.
Provider API keys are never read here; the credential resolver looks them up
at call time.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path

from dotenv import load_dotenv

from modelhub import __version__

# Look for .env in the package's parent directory (project root)
_project_root = Path(__file__).resolve().parent.parent
load_dotenv(_project_root / ".env")
load_dotenv()  # also check cwd

# ---------------------------------------------------------------------------
# Load config.toml
# ---------------------------------------------------------------------------

_toml_path = Path(os.getenv("MODELHUB_CONFIG", str(_project_root / "config.toml")))
_cfg: dict = {}
if _toml_path.exists():
    with open(_toml_path, "rb") as f:
        _cfg = tomllib.load(f)

_server = _cfg.get("server", {})
_client = _cfg.get("client", {})

# ---------------------------------------------------------------------------
# Outbound client
# ---------------------------------------------------------------------------

USER_AGENT = os.getenv("MODELHUB_USER_AGENT", _client.get("user_agent", f"modelhub/{__version__}"))

# ---------------------------------------------------------------------------
# Server
# ---------------------------------------------------------------------------

SERVER_HOST = os.getenv("MODELHUB_HOST", _server.get("host", "127.0.0.1"))
SERVER_PORT = int(os.getenv("MODELHUB_PORT", _server.get("port", 8000)))

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

LOG_LEVEL = os.getenv("MODELHUB_LOG_LEVEL", _server.get("log_level", "INFO")).upper()
LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"
