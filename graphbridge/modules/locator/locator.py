"""
Executable discovery for the Microsoft Graph CLI.

Searches PATH first and then a fixed list of well-known install locations
for the current OS family. The first hit is cached and re-validated on every
lookup by checking the file still exists.
"""

import logging
import os
import sys
from typing import List, Mapping, Optional

logger = logging.getLogger("graphbridge.locator")


class ExecutableNotFoundError(FileNotFoundError):
    """Raised when the target executable is not in any search location."""

    def __init__(self, executable_name: str):
        self.executable_name = executable_name
        super().__init__(
            f"Microsoft Graph CLI executable '{executable_name}' not found in PATH or "
            "common installation locations. Please ensure Microsoft Graph CLI is installed."
        )


class ExecutableLocator:
    """
    Locates the target executable on the host filesystem.

    The cached path is the only state. Writes are not locked: concurrent
    callers that race on discovery all store the same value.
    """

    def __init__(
        self,
        name: str = "mgc",
        extra_dirs: Optional[List[str]] = None,
        default_dirs: Optional[List[str]] = None,
        platform: Optional[str] = None,
        environ: Optional[Mapping[str, str]] = None,
    ):
        """
        Initialize the locator.

        Args:
            name: Executable base name, without any platform suffix
            extra_dirs: Directories searched after PATH, before the defaults
            default_dirs: Overrides the OS-family install locations
            platform: sys.platform style string, defaults to the running one
            environ: Environment mapping, defaults to os.environ
        """
        self.name = name
        self.is_windows = (platform or sys.platform).startswith("win")
        self._environ = environ if environ is not None else os.environ
        self._extra_dirs = list(extra_dirs or [])
        self._default_dirs = default_dirs
        self._cached_path: Optional[str] = None

    @property
    def executable_name(self) -> str:
        return f"{self.name}.exe" if self.is_windows else self.name

    @property
    def cached_path(self) -> Optional[str]:
        return self._cached_path

    def default_dirs(self) -> List[str]:
        """Well-known install locations for the current OS family."""
        if self._default_dirs is not None:
            return list(self._default_dirs)

        if self.is_windows:
            profile = self._environ.get("USERPROFILE") or os.path.expanduser("~")
            local_app_data = self._environ.get("LOCALAPPDATA") or os.path.join(profile, "AppData", "Local")
            return [
                os.path.join(profile, ".local", "bin"),
                os.path.join(local_app_data, "Programs", "mgc"),
            ]

        home = self._environ.get("HOME") or os.path.expanduser("~")
        return [
            "/usr/local/bin",
            os.path.join(home, ".local", "bin"),
            "/opt/homebrew/bin",
        ]

    def search_dirs(self) -> List[str]:
        """PATH entries in order, then extra dirs, then the OS defaults."""
        separator = ";" if self.is_windows else ":"
        path_env = self._environ.get("PATH", "")
        dirs = [d for d in path_env.split(separator) if d]
        dirs.extend(self._extra_dirs)
        dirs.extend(self.default_dirs())
        return [d for d in dirs if d]

    def locate(self) -> Optional[str]:
        """
        Resolve the absolute path of the executable.

        Returns:
            Path to the executable, or None if it is not installed
        """
        cached = self._cached_path
        if cached and os.path.isfile(cached):
            return cached

        if cached:
            logger.info(f"Cached executable path no longer exists: {cached}, searching again")

        executable = self.executable_name
        for directory in self.search_dirs():
            candidate = os.path.join(directory, executable)
            if os.path.isfile(candidate):
                resolved = os.path.abspath(candidate)
                self._cached_path = resolved
                logger.debug(f"Found {executable} at {resolved}")
                return resolved

        logger.debug(f"{executable} not found in any search location")
        return None

    def require(self) -> str:
        """Same as locate() but raises ExecutableNotFoundError when missing."""
        path = self.locate()
        if path is None:
            raise ExecutableNotFoundError(self.executable_name)
        return path

    def invalidate(self) -> None:
        """Forget the cached path so the next lookup searches again."""
        self._cached_path = None
