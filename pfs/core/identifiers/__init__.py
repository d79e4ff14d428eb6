"""Identifier utilities for Portfolio Service."""

from .generators import IdGenerator, SequentialIdGenerator, UuidIdGenerator

__all__ = [
    "IdGenerator",
    "SequentialIdGenerator",
    "UuidIdGenerator",
]
