#!/usr/bin/env python3

"""Domain models for Objective-C type encodings."""

from . import objc

__all__ = [
    "objc",
]
