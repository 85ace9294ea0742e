"""Film record stored in the catalogues."""

from __future__ import annotations

import sys
from dataclasses import dataclass


@dataclass
class Peli:
    """A film: identifier, title, duration in minutes and rating."""

    peli_id: int = 0
    titol: str = ""
    durada: int = 0
    valoracio: float = 0.0

    def info(self) -> str:
        """Return the film's description as four lines of text."""
        return (
            f"Peli ID: {self.peli_id}\n"
            f"Títol: {self.titol}\n"
            f"Durada: {self.durada}\n"
            f"Valoració: {self.valoracio:g}"
        )

    def print_info(self) -> str:
        """Write the film's description to standard output and return it."""
        text = self.info()
        sys.stdout.write(text + "\n")
        sys.stdout.flush()
        return text