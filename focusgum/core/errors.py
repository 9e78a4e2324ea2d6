# -*- coding: utf-8 -*-

from typing import Optional


class FocusGumError(Exception):
    """Base for every error the core reports to the presentation layer."""


class EmptyTagError(FocusGumError, ValueError):
    def __init__(self, message: str = "No tag given. A focus session needs a tag."):
        super().__init__(message)


class SessionStateError(FocusGumError, RuntimeError):
    pass


class ConfigError(FocusGumError, ValueError):
    pass


class LogUnavailableError(FocusGumError):
    """The log file could not be opened for reading or appending."""

    def __init__(self, path: str, reason: Optional[str] = None):
        self.path = str(path)
        self.reason = reason or "cannot be opened"
        super().__init__(f"Focus log {self.path} {self.reason}")
