"""
Environment loader for .env files.
"""
import logging
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


def load_env(env_file: Optional[Union[str, Path]] = None) -> bool:
    """
    Load environment variables from a .env file.

    Values in the file override variables already set in the process.

    Args:
        env_file: Path to the .env file. Defaults to .env in the current directory.

    Returns:
        True if a file was found and loaded, False otherwise
    """
    env_path = Path(env_file) if env_file else Path.cwd() / ".env"
    if not env_path.is_file():
        logger.debug("No .env file at %s", env_path)
        return False

    load_dotenv(dotenv_path=env_path, override=True)
    logger.debug("Loaded environment from %s", env_path)
    return True
