"""
Docker Compose runner
Brings the CRM services up with `docker compose`, falling back once to the
legacy `docker-compose` binary
"""

import subprocess
from pathlib import Path
from typing import Callable, Mapping, Optional, Sequence, Tuple

from crm_launcher.utils.exceptions import ServiceStartError
from crm_launcher.utils.logger import get_logger

logger = get_logger(__name__)

UP_ARGS: Tuple[str, ...] = ("up", "-d", "--build")
PRIMARY_COMMAND: Tuple[str, ...] = ("docker", "compose") + UP_ARGS
LEGACY_COMMAND: Tuple[str, ...] = ("docker-compose",) + UP_ARGS


class ComposeRunner:
    """
    Runs `compose up` in the project directory

    The command blocks until compose exits; its stdout and stderr are
    inherited so progress streams straight to the launcher's console.
    """

    def __init__(
        self,
        project_dir: Path,
        env: Optional[Mapping[str, str]] = None,
        run: Callable[..., subprocess.CompletedProcess] = subprocess.run,
    ):
        """
        Initialize compose runner

        Args:
            project_dir: Working directory for the compose command
            env: Environment for the child process (None inherits ours)
            run: Blocking process runner, subprocess.run signature
        """
        self.project_dir = project_dir
        self.env = dict(env) if env is not None else None
        self._run = run

    def _attempt(self, command: Sequence[str]) -> bool:
        """Run one command, True on a zero exit status"""
        logger.info("compose_up_attempt", command=" ".join(command), cwd=str(self.project_dir))
        try:
            result = self._run(list(command), cwd=str(self.project_dir), env=self.env, check=False)
        except (OSError, subprocess.SubprocessError) as e:
            logger.warning("compose_up_failed", command=command[0], error=str(e))
            return False

        if result.returncode != 0:
            logger.warning("compose_up_failed", command=command[0], returncode=result.returncode)
            return False
        return True

    def up(self) -> Tuple[str, ...]:
        """
        Start the services

        Returns:
            The command that succeeded

        Raises:
            ServiceStartError: If both the primary and legacy commands fail
        """
        for command in (PRIMARY_COMMAND, LEGACY_COMMAND):
            if self._attempt(command):
                logger.info("compose_up_succeeded", command=" ".join(command))
                return command

        raise ServiceStartError(commands=[PRIMARY_COMMAND, LEGACY_COMMAND])
