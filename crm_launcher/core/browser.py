"""
Open a URL in the default browser with the host platform's opener command
"""

import platform
import subprocess
from enum import Enum
from typing import Callable, List, Optional

from crm_launcher.utils.logger import get_logger

logger = get_logger(__name__)


class Platform(Enum):
    """Host platforms with distinct opener commands"""
    WINDOWS = "windows"
    MACOS = "darwin"
    UNIX = "unix"

    @classmethod
    def detect(cls, system: Optional[str] = None) -> "Platform":
        """Map platform.system() output to a Platform"""
        name = (system if system is not None else platform.system()).lower()
        if name == "windows":
            return cls.WINDOWS
        if name == "darwin":
            return cls.MACOS
        return cls.UNIX

    def open_command(self, url: str) -> List[str]:
        if self is Platform.WINDOWS:
            # Empty title argument keeps `start` from treating the URL as one
            return ["cmd", "/c", "start", "", url]
        if self is Platform.MACOS:
            return ["open", url]
        return ["xdg-open", url]


class BrowserOpener:
    """Fire-and-forget browser launcher"""

    def __init__(
        self,
        host: Optional[Platform] = None,
        spawn: Callable[..., object] = subprocess.Popen,
    ):
        self.platform = host or Platform.detect()
        self._spawn = spawn

    def open(self, url: str) -> None:
        """
        Spawn the opener for url without waiting on it

        Launch errors are logged and discarded.
        """
        command = self.platform.open_command(url)
        try:
            self._spawn(command)
        except (OSError, subprocess.SubprocessError) as e:
            logger.debug("browser_open_failed", command=command[0], error=str(e))
            return
        logger.info("browser_open_dispatched", platform=self.platform.value, url=url)
