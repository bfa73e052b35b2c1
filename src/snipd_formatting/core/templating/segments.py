"""Parsed template segments.

A template parses into an ordered tuple of segments:

- ``Literal(text)``: text copied verbatim
- ``Placeholder(name)``: ``{{name}}``, replaced by the variable value
- ``ConditionalHeader(name, header)``: ``{{name}}[[header]]``, emitted as
  header + separator + value only when the value is present and non-blank

Segments are frozen so parsed templates can be cached and shared.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Literal:
    text: str


@dataclass(frozen=True)
class Placeholder:
    name: str


@dataclass(frozen=True)
class ConditionalHeader:
    name: str
    header: str


Segment = Union[Literal, Placeholder, ConditionalHeader]


__all__ = ["Literal", "Placeholder", "ConditionalHeader", "Segment"]
