"""Error types for setup-php helpers."""

import logging
from typing import Any, Dict, Optional


def log_error(
    error: Exception,
    context: Optional[Dict[str, Any]] = None,
    logger: Optional[logging.Logger] = None,
) -> None:
    """Log an error with context."""
    logger = logger or logging.getLogger(__name__)

    error_info = {
        "error_type": error.__class__.__name__,
        "error_message": str(error),
    }
    if context:
        error_info["context"] = context
    if isinstance(error, SetupPhpError):
        error_info["details"] = error.details

    logger.error("Setup error occurred", extra={"data": error_info})


class SetupPhpError(Exception):
    """Base error class for setup-php helpers."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.details = details or {}


class ScriptNotFoundError(SetupPhpError, FileNotFoundError):
    """Script template missing from the scripts directory."""

    def __init__(self, path: str):
        super().__init__(f"Script {path} not found", details={"path": path})


class ScriptWriteError(SetupPhpError, OSError):
    """Generated script could not be written to the tool cache."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            f"Failed to write script {path}: {reason}",
            details={"path": path, "reason": reason},
        )


class UnsupportedPlatformError(SetupPhpError):
    """A script was asked to run on a platform with no shell mapping."""

    def __init__(self, platform: str):
        super().__init__(
            f"Platform {platform} is not supported", details={"platform": platform}
        )


class ScriptRunError(SetupPhpError):
    """The shell for a built script could not be started."""

    def __init__(self, cmd: list[str], reason: str):
        super().__init__(
            f"Failed to run {cmd[0]}: {reason}", details={"cmd": cmd, "reason": reason}
        )
