"""Data models for zpick."""

from zpick.models.config import Config
from zpick.models.session import Session
from zpick.models.switch_target import SwitchTarget

__all__ = ["Config", "Session", "SwitchTarget"]
