"""
Locate the directory the launcher runs from
"""

import sys
from pathlib import Path
from typing import Optional

from crm_launcher.utils.logger import get_logger

logger = get_logger(__name__)


def executable_path() -> Path:
    """Path of the running executable (the bundle when frozen, else the script)"""
    if getattr(sys, "frozen", False):
        return Path(sys.executable)
    return Path(sys.argv[0])


def resolve_project_dir(override: Optional[str] = None, executable: Optional[str] = None) -> Path:
    """
    Resolve the directory holding docker-compose.yml

    Args:
        override: Explicit directory (CRM_PROJECT_DIR), used as-is when set
        executable: Executable path to resolve instead of the running one

    Returns:
        Directory of the executable, or "." when it cannot be resolved
    """
    if override:
        return Path(override)

    try:
        exe = Path(executable) if executable else executable_path()
        return exe.resolve().parent
    except (OSError, RuntimeError, ValueError) as e:
        logger.debug("project_dir_unresolved", error=str(e))
        return Path(".")
