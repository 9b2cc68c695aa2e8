"""
Credential record and its file-backed store.

A registration run produces one ``{email, password}`` record that later
login and checkout flows reuse. The store keeps at most one record: saving
replaces the file atomically, so concurrent writers resolve to the last
one.
"""

import json
import logging
import os
import tempfile
import uuid
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import CredentialsFileError

logger = logging.getLogger(__name__)


class Credentials(BaseModel):
    """Login credentials for a generated shop account."""

    model_config = ConfigDict(frozen=True)

    email: str = Field(..., min_length=3)
    password: str = Field(..., min_length=1)

    def __repr__(self) -> str:
        return f"Credentials(email={self.email!r}, password='***')"

    __str__ = __repr__


def generate_unique_email(prefix: str = "testuser", domain: str = "example.com") -> str:
    """Generate an email address no previous run has registered."""
    return f"{prefix}_{uuid.uuid4().hex[:12]}@{domain}"


class CredentialStore:
    """Reads and writes the single shared credential record."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.is_file()

    def load(self, strict: bool = False) -> Optional[Credentials]:
        """
        Load the stored record.

        A missing file always yields None: dependent flows treat that as a
        signal to skip or to register a fresh account.

        Args:
            strict: Raise instead of returning None when the file exists but
                is empty or malformed.

        Returns:
            The stored credentials, or None.

        Raises:
            CredentialsFileError: In strict mode, for an unusable file.
        """
        if not self.exists():
            logger.debug("No credentials file at %s", self.path)
            return None

        try:
            raw = self.path.read_text(encoding="utf-8")
            credentials = Credentials.model_validate(json.loads(raw))
        except (OSError, json.JSONDecodeError, ValidationError) as e:
            if strict:
                raise CredentialsFileError(self.path, str(e)) from e
            logger.warning("Ignoring unusable credentials file %s: %s", self.path, e)
            return None

        logger.info("Loaded credentials for %s from %s", credentials.email, self.path)
        return credentials

    def save(self, credentials: Credentials) -> None:
        """Write ``credentials``, replacing any existing record."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(credentials.model_dump(), f)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.info("Saved credentials for %s to %s", credentials.email, self.path)

    def clear(self) -> bool:
        """Remove the stored record. Returns True if a file was removed."""
        if not self.exists():
            return False
        self.path.unlink()
        logger.info("Removed credentials file %s", self.path)
        return True
