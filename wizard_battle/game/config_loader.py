"""
Run configuration loader.

Reads where the battle script comes from, where the report goes and how the
game log behaves from a YAML file. The battle rules themselves are fixed and
are not part of this configuration.
"""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

DEFAULT_CONFIG_PATH = "assets/config/game.yaml"


@dataclass
class RunConfig:
    """Settings for one run of the game."""
    input_file: str = "input.txt"
    output_file: str = "output.txt"
    debug: bool = False
    save_log: bool = False
    log_dir: str = "logs"
    max_log_messages: int = 1000

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RunConfig":
        io_section = data.get('io', {}) or {}
        log_section = data.get('logging', {}) or {}
        defaults = cls()
        return cls(
            input_file=str(io_section.get('input_file', defaults.input_file)),
            output_file=str(io_section.get('output_file', defaults.output_file)),
            debug=bool(log_section.get('debug', defaults.debug)),
            save_log=bool(log_section.get('save_log', defaults.save_log)),
            log_dir=str(log_section.get('log_dir', defaults.log_dir)),
            max_log_messages=int(log_section.get('max_messages', defaults.max_log_messages)),
        )


class ConfigLoader:
    """Loads a :class:`RunConfig` from YAML, falling back to defaults."""

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = config_path or DEFAULT_CONFIG_PATH
        self._config: dict[str, Any] = {}

    def resolve_path(self) -> Path:
        """Relative paths are taken from the project root."""
        if os.path.isabs(self.config_path):
            return Path(self.config_path)
        project_root = Path(__file__).parent.parent.parent
        return project_root / self.config_path

    def load(self) -> RunConfig:
        config_file = self.resolve_path()

        if not config_file.exists():
            print(f"Warning: Config file not found: {config_file}, using defaults")
            return RunConfig()

        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                self._config = yaml.safe_load(f) or {}
            return RunConfig.from_dict(self._config)
        except (OSError, yaml.YAMLError, TypeError, ValueError, AttributeError) as e:
            print(f"Error loading config {config_file}: {e}, using defaults")
            return RunConfig()
