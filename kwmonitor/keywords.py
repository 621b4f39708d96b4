"""Persistent list of monitored keywords."""

from __future__ import annotations

import json
from pathlib import Path


class KeywordError(ValueError):
    """Raised when a keyword cannot be added."""


class KeywordStore:
    """Keywords kept in order and saved to a JSON file."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._keywords: list[str] = []
        self.load()

    @property
    def keywords(self) -> list[str]:
        return list(self._keywords)

    def load(self) -> list[str]:
        """Reload the keywords from the file and return them."""
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (FileNotFoundError, json.JSONDecodeError):
            data = {}
        stored = data.get("keywords", []) if isinstance(data, dict) else []
        self._keywords = [str(item) for item in stored]
        if not self._keywords:
            self.set_keywords([])
        return self.keywords

    def save(self) -> None:
        """Write the current keywords to the file."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            json.dumps({"keywords": self._keywords}, ensure_ascii=False, indent=2),
            encoding="utf-8",
        )

    def add(self, text: str) -> str:
        """Add a trimmed keyword; duplicates are compared case-insensitively."""
        keyword = text.strip()
        if not keyword:
            raise KeywordError("keyword must not be empty")
        lowered = keyword.lower()
        if any(existing.lower() == lowered for existing in self._keywords):
            raise KeywordError(f"keyword '{keyword}' already exists")
        self._keywords.append(keyword)
        return keyword

    def remove(self, index: int) -> str:
        """Remove and return the keyword at ``index``."""
        if not 0 <= index < len(self._keywords):
            raise IndexError(f"no keyword at position {index}")
        return self._keywords.pop(index)

    def set_keywords(self, keywords: list[str]) -> None:
        """Replace all keywords and save them."""
        self._keywords = list(keywords)
        self.save()