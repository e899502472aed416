"""
Custom exceptions for the CRM launcher
"""

from typing import Any, Dict, List, Optional, Sequence


class LauncherError(Exception):
    """
    Base exception for all launcher errors

    Attributes:
        message: Error message printed to the console
        exit_code: Process exit status to terminate with
        error_code: Internal error code
        details: Additional error details
    """

    def __init__(
        self,
        message: str,
        exit_code: int = 1,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.exit_code = exit_code
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for structured logging"""
        return {
            "error": self.error_code,
            "message": self.message,
            "exit_code": self.exit_code,
            "details": self.details,
        }


class ServiceStartError(LauncherError):
    """Raised when neither compose command could bring the services up"""

    def __init__(
        self,
        message: str = "Failed to start containers. Is Docker Desktop running?",
        commands: Optional[Sequence[Sequence[str]]] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        details = details or {}
        if commands:
            attempted: List[str] = [" ".join(cmd) for cmd in commands]
            details["attempted"] = attempted

        super().__init__(
            message=message,
            exit_code=1,
            error_code="SERVICE_START_ERROR",
            details=details,
        )


class ConfigurationError(LauncherError):
    """Raised when configuration is invalid"""

    def __init__(
        self,
        message: str = "Invalid configuration",
        fields: Optional[Sequence[str]] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        details = details or {}
        if fields:
            details["fields"] = list(fields)
            message = f"{message}: {', '.join(fields)}"

        super().__init__(
            message=message,
            exit_code=1,
            error_code="CONFIGURATION_ERROR",
            details=details,
        )
