from __future__ import annotations


class EngineError(Exception):
    """Raised when no engine is registered for a front matter language."""

    def __init__(self, language: str, message: str = "No engine registered for language") -> None:
        super().__init__(f"{message}: {language}")
        self.language = language
