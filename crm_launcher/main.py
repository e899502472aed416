"""
CRM Launcher
Starts the Docker-based CRM and opens the app in the browser
"""

import os
import sys
import time
from pathlib import Path
from typing import Callable, Mapping, Optional

from pydantic import ValidationError

from crm_launcher.config import Settings, get_settings
from crm_launcher.core.browser import BrowserOpener
from crm_launcher.core.compose import ComposeRunner
from crm_launcher.core.paths import resolve_project_dir
from crm_launcher.utils.exceptions import ConfigurationError, LauncherError
from crm_launcher.utils.logger import get_logger, setup_logging

logger = get_logger(__name__)

READY_WAIT_SECONDS = 15
STOP_HINT = "To stop: run Stop-CRM.bat or: docker compose down"


def echo_line(line: str) -> None:
    # Flushed so the lines land ahead of output from the inherited compose process
    print(line, flush=True)


def launch(
    settings: Settings,
    project_dir: Path,
    environ: Optional[Mapping[str, str]] = None,
    compose: Optional[ComposeRunner] = None,
    browser: Optional[BrowserOpener] = None,
    sleep: Optional[Callable[[float], None]] = None,
    echo: Callable[[str], None] = echo_line,
) -> str:
    """
    Bring the services up, wait, and open the frontend

    Args:
        settings: Effective launcher settings
        project_dir: Directory holding docker-compose.yml
        environ: Base environment for the compose command
        compose: Compose runner (built from settings when omitted)
        browser: Browser opener (platform-detected when omitted)
        sleep: Sleep function (time.sleep when omitted)
        echo: Console output function

    Returns:
        The URL the browser was pointed at

    Raises:
        ServiceStartError: If the services could not be started
    """
    echo("CRM Launcher - starting services...")
    echo(f"Project dir: {project_dir}")

    if compose is None:
        env = settings.compose_environment(os.environ if environ is None else environ)
        compose = ComposeRunner(project_dir, env=env)
    compose.up()

    url = settings.frontend_url

    echo("Waiting for app to be ready...")
    logger.info("waiting_for_services", seconds=READY_WAIT_SECONDS)
    (sleep or time.sleep)(READY_WAIT_SECONDS)

    (browser or BrowserOpener()).open(url)

    echo(f"CRM is running at {url}")
    echo(STOP_HINT)
    return url


def main() -> int:
    """Console entry point, returns the process exit status"""
    try:
        settings = get_settings()
    except ValidationError as e:
        error = ConfigurationError(fields=[".".join(str(part) for part in err["loc"]) for err in e.errors()])
        print(error.message)
        return error.exit_code

    setup_logging(log_level=settings.LOG_LEVEL, enable_json=settings.LOG_JSON)

    project_dir = resolve_project_dir(override=settings.CRM_PROJECT_DIR)
    logger.info("launcher_start", project_dir=str(project_dir), **settings.port_environment())

    try:
        launch(settings, project_dir)
    except LauncherError as e:
        logger.error("launcher_failed", **e.to_dict())
        print(e.message)
        return e.exit_code

    return 0


if __name__ == "__main__":
    sys.exit(main())
