# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Download the php-cs-fixer artifact when no local executable is configured."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

import requests

from ..errors import FixerUnavailableError
from ..logging import StatusLogger


class _HttpResponse(Protocol):
    """Minimal subset of ``requests.Response`` used by downloads."""

    content: bytes

    def raise_for_status(self) -> None:
        """Raise an exception when the HTTP response indicates failure."""


HttpGet = Callable[..., _HttpResponse]


@dataclass(slots=True)
class FixerAcquirer:
    """Fetch the fixer artifact from a fixed URL to a fixed local path.

    The artifact is fetched again on every call; nothing is cached between
    runs and the payload is not verified.
    """

    url: str
    destination: Path
    timeout: float = 60.0
    http_get: HttpGet = field(default=requests.get, repr=False)
    logger: StatusLogger = field(default_factory=StatusLogger, repr=False)

    def fetch(self) -> Path:
        """Download the artifact and return its location.

        Returns:
            Path: Path the artifact was written to.

        Raises:
            FixerUnavailableError: If the download or the write fails.
        """

        self.logger.debug(f"downloading fixer url={self.url} destination={self.destination}")
        try:
            response = self.http_get(self.url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise FixerUnavailableError(f"Unable to download php-cs-fixer from {self.url}: {exc}") from exc
        try:
            self.destination.parent.mkdir(parents=True, exist_ok=True)
            self.destination.write_bytes(response.content)
        except OSError as exc:
            raise FixerUnavailableError(f"Unable to write php-cs-fixer to {self.destination}: {exc}") from exc
        return self.destination


__all__ = ["FixerAcquirer", "HttpGet"]
