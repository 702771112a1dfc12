# backend/comingsoon/services/registry.py
import logging
import os
import threading
from pathlib import Path
from typing import List, Optional, Set

from ..models.submit_result import SubmitResult
from ..utils.helpers import is_valid_syntax, normalize_email

logger = logging.getLogger("comingsoon.registry")


class EmailRegistry:
    """
    Deduplicated set of normalized email addresses backed by a flat file.

    One lock serializes every operation (load, submit, list, count) so the
    membership check and the file rewrite in ``submit`` are atomic with
    respect to other callers. The file is rewritten in full on every new
    address, one address per line.
    """

    def __init__(self, path: str):
        self.path = Path(path)
        self._emails: Set[str] = set()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._emails)

    def load(self) -> int:
        """Read the backing file into memory. Returns the number of addresses loaded."""
        with self._lock:
            self._emails.clear()
            try:
                with open(self.path, "r", encoding="utf-8") as f:
                    for line in f:
                        email = line.strip()
                        if email:
                            self._emails.add(email.lower())
            except FileNotFoundError:
                # first run, nothing stored yet
                pass
            except (OSError, UnicodeDecodeError) as e:
                self._emails.clear()
                logger.warning(
                    "Could not load emails from %s: %s. Starting with an empty set.",
                    self.path, e,
                )
            return len(self._emails)

    def submit(self, raw_email: Optional[str]) -> SubmitResult:
        if not raw_email or not is_valid_syntax(raw_email):
            return SubmitResult.invalid

        email = normalize_email(raw_email)

        with self._lock:
            if email in self._emails:
                return SubmitResult.duplicate

            self._emails.add(email)
            try:
                self._save()
            except OSError as e:
                # roll back so memory never holds what the file lost
                self._emails.discard(email)
                logger.error("Failed to save email file %s: %s", self.path, e)
                return SubmitResult.persist_failed

        logger.info("Registered new email (%d total)", len(self))
        return SubmitResult.created

    def list_all(self) -> List[str]:
        with self._lock:
            return list(self._emails)

    def _save(self) -> None:
        # caller holds the lock
        with open(self.path, "w", encoding="utf-8") as f:
            for email in self._emails:
                f.write(email + "\n")
            f.flush()
            os.fsync(f.fileno())
