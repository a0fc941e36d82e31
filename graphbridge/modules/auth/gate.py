"""
Service principal authentication for the Graph CLI.

The CLI picks up the AZURE_* environment variables itself when logging in
with "--strategy Environment". This module only decides whether and when that
login runs: lazily, at most once per gate, no matter how many threads ask.
"""

import logging
import os
import threading
from typing import Mapping, Optional

from ..locator import ExecutableLocator
from ..process import ProcessRunner

logger = logging.getLogger("graphbridge.auth")


class AuthenticationGate:
    """
    One-time login guard shared by every caller of a bridge.

    ensure_authenticated() is cheap after the first call: it reads a flag
    without locking. The login itself is serialized with a double-checked
    lock so concurrent first callers trigger a single login process.
    """

    def __init__(
        self,
        locator: ExecutableLocator,
        client_id_env: str = "AZURE_CLIENT_ID",
        login_command: str = "login --strategy Environment",
        login_timeout: int = 60,
        retry_when_skipped: bool = False,
        environ: Optional[Mapping[str, str]] = None,
    ):
        """
        Initialize the gate.

        Args:
            locator: Locator used to resolve the executable for the login call
            client_id_env: Variable whose presence enables service principal login
            login_command: Argument line for the login call
            login_timeout: Seconds to wait for the login process
            retry_when_skipped: Re-check the client id on later calls after a skip
            environ: Environment mapping, defaults to os.environ
        """
        if login_timeout <= 0:
            raise ValueError(f"login_timeout must be positive, got {login_timeout}")

        self.locator = locator
        self.client_id_env = client_id_env
        self.login_command = login_command
        self.login_timeout = login_timeout
        self.retry_when_skipped = retry_when_skipped
        self._environ = environ if environ is not None else os.environ

        self._lock = threading.Lock()
        self._authenticated = False
        self._settled = False

    @property
    def is_authenticated(self) -> bool:
        return self._authenticated

    @property
    def is_settled(self) -> bool:
        """True once the one-time sequence has finished, whatever its outcome."""
        return self._settled

    def ensure_authenticated(self, runner: ProcessRunner) -> bool:
        """
        Log in with the service principal if that has not happened yet.

        Args:
            runner: Process runner used for the login call

        Returns:
            True if the CLI is authenticated, False if login was skipped or failed
        """
        if self._authenticated:
            return True
        if self._settled:
            return False

        with self._lock:
            # Double-check after acquiring the lock
            if self._authenticated:
                return True
            if self._settled:
                return False

            skipped = False
            try:
                client_id = self._environ.get(self.client_id_env)
                if not client_id:
                    logger.info(
                        f"{self.client_id_env} environment variable not set. "
                        "Skipping service principal login for mgc."
                    )
                    skipped = True
                    return False

                mgc_path = self.locator.require()
                result = runner.run(mgc_path, self.login_command, self.login_timeout)

                if result.exit_code != 0:
                    logger.warning(
                        "Failed to authenticate with Microsoft Graph CLI using service principal. "
                        f"Exit Code: {result.exit_code}, Error: {result.error.strip()}"
                    )
                    return False

                self._authenticated = True
                logger.info("Successfully authenticated with Microsoft Graph CLI using service principal.")
                return True

            except Exception:
                logger.exception("Exception during service principal authentication for mgc.")
                return False

            finally:
                if not (skipped and self.retry_when_skipped):
                    self._settled = True
