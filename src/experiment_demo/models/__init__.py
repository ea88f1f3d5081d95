"""Data models for the demonstration."""

from experiment_demo.models.config import DemoConfig
from experiment_demo.models.point import LABEL_CAPACITY, PointRecord

__all__ = ["LABEL_CAPACITY", "DemoConfig", "PointRecord"]
