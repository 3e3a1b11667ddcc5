"""Configuration shared by every space handle."""

from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class SpaceConfig:
  # When False the arithmetic runs on trusted input with no checks at all.
  validate: bool = True


DEFAULT_CONFIG = SpaceConfig()
UNCHECKED = SpaceConfig(validate=False)
