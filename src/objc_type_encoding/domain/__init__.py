#!/usr/bin/env python3

"""Domain layer containing the type-encoding models and services."""

from . import exceptions, models, services

__all__ = [
    "exceptions",
    "models",
    "services",
]
