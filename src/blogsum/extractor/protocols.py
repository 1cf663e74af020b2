"""
Protocols for pluggable main-content strategies.
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from bs4 import BeautifulSoup


@runtime_checkable
class ContentStrategy(Protocol):
    """One way of locating the readable body inside a parsed document."""

    name: str

    def extract(self, soup: BeautifulSoup) -> Optional[str]:
        """Return cleaned body text, or None when the strategy does not apply.

        Strategies must leave ``soup`` unmodified; later strategies in a
        cascade read the same document.
        """
        ...
