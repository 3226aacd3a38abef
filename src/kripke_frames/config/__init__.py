"""Worksheet configuration."""

from kripke_frames.config.worksheet import WorksheetConfig

__all__ = ["WorksheetConfig"]
