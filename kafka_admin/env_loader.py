# kafka_admin/env_loader.py

import os
import logging
from pathlib import Path
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_BOOTSTRAP_SERVER = "localhost:9092"
DEFAULT_CLIENT_ID = "kafka-admin"
DEFAULT_TIMEOUT_MS = 30000


def load_environment(project_root=None):
    """
    Load configuration from .env files in the project root.

    Files are applied in order, later ones overriding earlier ones:
    .env, .env.<ENV>, .env.local. Variables already set in the process
    environment win over plain .env values.

    Returns:
        dict: Environment configuration details
    """
    # -----------------------------------
    # Step 1: Determine project root path
    # -----------------------------------
    if project_root is None:
        project_root = os.getenv("PROJECT_ROOT") or str(Path.cwd())
    if not os.path.isdir(project_root):
        logger.warning(f"Project root {project_root} does not exist. Using current directory")
        project_root = str(Path.cwd())

    # -----------------------------------
    # Step 2: Load environment variables
    # -----------------------------------
    env_files_loaded = []
    dotenv_path = Path(project_root) / ".env"
    if dotenv_path.exists():
        load_dotenv(dotenv_path)
        env_files_loaded.append(str(dotenv_path))

    env_name = os.getenv("ENV", "development")
    env_specific_path = Path(project_root) / f".env.{env_name}"
    if env_specific_path.exists():
        load_dotenv(env_specific_path, override=True)
        env_files_loaded.append(str(env_specific_path))

    local_dotenv_path = Path(project_root) / ".env.local"
    if local_dotenv_path.exists():
        load_dotenv(local_dotenv_path, override=True)
        env_files_loaded.append(str(local_dotenv_path))

    for path in env_files_loaded:
        logger.debug(f"Loaded environment from: {path}")

    return {
        "project_root": project_root,
        "env_files_loaded": env_files_loaded,
        "environment": env_name,
    }


def get_bootstrap_server():
    return os.getenv("KAFKA_BOOTSTRAP_SERVER", DEFAULT_BOOTSTRAP_SERVER)


def get_client_id():
    return os.getenv("KAFKA_CLIENT_ID", DEFAULT_CLIENT_ID)


def get_timeout_ms():
    value = os.getenv("KAFKA_ADMIN_TIMEOUT_MS")
    if not value:
        return DEFAULT_TIMEOUT_MS
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Invalid KAFKA_ADMIN_TIMEOUT_MS={value!r}, using {DEFAULT_TIMEOUT_MS}")
        return DEFAULT_TIMEOUT_MS


def get_log_level():
    return os.getenv("LOG_LEVEL", "INFO").upper()
