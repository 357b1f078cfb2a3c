#!/usr/bin/env python3

"""Exceptions raised by the strict decoding entry points."""


class EncodingError(ValueError):
    """Raised when a type encoding cannot be decoded."""

    def __init__(self, encoding: str, reason: str = "not a recognizable type encoding") -> None:
        self.encoding = encoding
        self.reason = reason
        super().__init__(f"{reason}: {encoding!r}")
