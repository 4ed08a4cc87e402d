"""Dependency inversion: a processor that depends only on the Writer abstraction."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path


class Writer(ABC):
    """Destination that accepts a block of bytes."""

    @abstractmethod
    def write(self, data: bytes) -> None:
        """Deliver ``data`` to the destination, raising on failure."""


@dataclass
class FileWriter(Writer):
    """Writes data to a file, replacing any previous contents."""

    file_name: str | Path

    def write(self, data: bytes) -> None:
        with open(self.file_name, "wb") as file:
            file.write(data)


@dataclass
class NetworkWriter(Writer):
    """Reports the data it would send to a network endpoint."""

    endpoint: str

    def write(self, data: bytes) -> None:
        text = data.decode("utf-8", errors="replace")
        print(f"Sending data {text} to {self.endpoint}")


@dataclass
class Processor:
    """High-level component that hands its data to whichever writer it holds."""

    writer: Writer

    def process_and_write(self, data: bytes) -> None:
        """Pass ``data`` to the current writer."""
        self.writer.write(data)