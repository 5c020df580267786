# File: floor_heating_planner/utils/__init__.py
"""Shared utilities for the floor heating planner."""

from .logging_config import PlannerLogger

__all__ = ["PlannerLogger"]
