"""Entropy source backed by the operating system's random device."""

from pathlib import Path
from typing import BinaryIO, Optional, Union

import structlog

from rangepass.core.domain.errors import EntropyUnavailableError
from rangepass.core.interfaces.entropy import EntropySource

DEFAULT_DEVICE = Path("/dev/urandom")


class DeviceEntropySource(EntropySource):
    """
    Reads raw bytes from a cryptographically secure entropy device.

    The device is opened on construction so that an unavailable device is
    detected before any generation starts. Reads are unbuffered; a short
    read or an I/O error is fatal for the call that triggered it.
    """

    def __init__(self, device: Union[str, Path] = DEFAULT_DEVICE):
        self.device = Path(device)
        self.logger = structlog.get_logger().bind(component="device_entropy", device=str(self.device))
        self._handle: Optional[BinaryIO] = None
        try:
            self._handle = open(self.device, "rb", buffering=0)
        except OSError as e:
            self.logger.warning("entropy.device.unavailable", error=str(e))
            raise EntropyUnavailableError(f"Cannot open entropy device {self.device}: {e}") from e
        self.logger.debug("entropy.device.opened")

    @property
    def name(self) -> str:
        return f"device:{self.device}"

    @property
    def is_secure(self) -> bool:
        return True

    def next_chunk(self, n: int) -> bytes:
        if self._handle is None:
            raise EntropyUnavailableError(f"Entropy device {self.device} is closed")
        try:
            data = self._handle.read(n)
        except OSError as e:
            self.logger.error("entropy.device.read_failed", requested=n, error=str(e))
            raise EntropyUnavailableError(f"Cannot read entropy device {self.device}: {e}") from e

        if data is None or len(data) != n:
            got = 0 if data is None else len(data)
            self.logger.error("entropy.device.short_read", requested=n, received=got)
            raise EntropyUnavailableError(
                f"Short read from entropy device {self.device}: wanted {n} bytes, got {got}"
            )
        return data

    def close(self) -> None:
        if self._handle is not None:
            self._handle.close()
            self._handle = None
