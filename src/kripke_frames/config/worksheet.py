"""Worksheet Configuration for frame checks

Manages .kripke/config.json settings for required properties and reporting.
"""

import json
from pathlib import Path

from kripke_frames.core.systems import expand_requirements

REPORT_FORMATS = ("json", "yaml")


class WorksheetConfig:
    """Manages worksheet configuration for frame checks"""

    DEFAULT_CONFIG = {
        "required": [],
        "warn_unrequired": False,
        "report_format": "yaml",
    }

    def __init__(self, base_dir: Path | None = None):
        self.base_dir = base_dir or Path.cwd()
        self.kripke_dir = self.base_dir / ".kripke"
        self.config_file = self.kripke_dir / "config.json"

    def exists(self) -> bool:
        """Check if config file exists"""
        return self.config_file.exists()

    def load(self) -> dict:
        """Load config, returning defaults if not exists"""
        if not self.config_file.exists():
            return dict(self.DEFAULT_CONFIG, required=[])

        with open(self.config_file) as f:
            config = json.load(f)

        # Merge with defaults for missing keys
        merged = dict(self.DEFAULT_CONFIG, required=[])
        merged.update(config)
        return merged

    def save(self, config: dict) -> None:
        """Save config to file"""
        self.kripke_dir.mkdir(parents=True, exist_ok=True)
        with open(self.config_file, 'w') as f:
            json.dump(config, f, indent=2, ensure_ascii=False)

    def init(self, required: list[str] | None = None, warn_unrequired: bool = False,
             report_format: str = "yaml") -> dict:
        """Initialize worksheet config"""
        required = list(required or [])
        expand_requirements(required)
        if report_format not in REPORT_FORMATS:
            raise ValueError(f"Unknown report format '{report_format}' (expected one of: {', '.join(REPORT_FORMATS)})")

        config = {
            "required": required,
            "warn_unrequired": warn_unrequired,
            "report_format": report_format,
        }
        self.save(config)
        return config
