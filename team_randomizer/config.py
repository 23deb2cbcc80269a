"""Configuration management for Team Randomizer."""

from pathlib import Path
from typing import Optional

import yaml


class Config:
    """Configuration class for roster and team randomization settings."""

    def __init__(self):
        """Initialize configuration with default values."""
        self.max_name_length: Optional[int] = 20
        self.default_team_count: int = 3
        self.min_team_count: int = 2
        self.max_team_count: int = 10
        self.storage_path: Path = Path("team_randomizer.db")
        self.storage_key: str = "soccer_members"

    def load_from_file(self, config_path: Path) -> None:
        """Load configuration from a YAML file.

        Args:
            config_path: Path to the YAML configuration file

        Raises:
            FileNotFoundError: If the config file doesn't exist
            yaml.YAMLError: If the YAML file is invalid
            ValueError: If the configuration structure is invalid
        """
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, 'r', encoding='utf-8') as f:
            config_data = yaml.safe_load(f)

        if not isinstance(config_data, dict):
            raise ValueError("Configuration file must contain a YAML dictionary")

        roster_config = config_data.get('roster', {}) or {}
        teams_config = config_data.get('teams', {}) or {}
        storage_config = config_data.get('storage', {}) or {}

        # Member name length limit; null disables it
        if 'max_name_length' in roster_config:
            max_length = roster_config['max_name_length']
            if max_length is not None and (
                not isinstance(max_length, int) or isinstance(max_length, bool) or max_length < 1
            ):
                raise ValueError("roster.max_name_length must be a positive integer or null")
            self.max_name_length = max_length

        for key, attr in (('min', 'min_team_count'), ('max', 'max_team_count'), ('default', 'default_team_count')):
            if key in teams_config:
                value = teams_config[key]
                if not isinstance(value, int) or isinstance(value, bool) or value < 1:
                    raise ValueError(f"teams.{key} must be a positive integer")
                setattr(self, attr, value)

        if self.max_team_count < self.min_team_count:
            raise ValueError("teams.max must not be smaller than teams.min")

        if not self.min_team_count <= self.default_team_count <= self.max_team_count:
            raise ValueError(
                f"teams.default must lie between {self.min_team_count} and {self.max_team_count}"
            )

        if 'path' in storage_config:
            self.storage_path = Path(str(storage_config['path']))

        if 'key' in storage_config:
            key = storage_config['key']
            if not isinstance(key, str) or not key.strip():
                raise ValueError("storage.key must be a non-empty string")
            self.storage_key = key

    def validate_team_count(self, team_count: int) -> None:
        """Validate a requested team count against the configured range.

        Args:
            team_count: Number of teams requested by the user

        Raises:
            ValueError: If the team count is outside the configured range
        """
        if not self.min_team_count <= team_count <= self.max_team_count:
            raise ValueError(
                f"Number of teams must be between {self.min_team_count} "
                f"and {self.max_team_count}, got {team_count}"
            )

    def to_dict(self) -> dict:
        """Convert configuration to dictionary format.

        Returns:
            Dictionary representation of the configuration
        """
        return {
            'roster': {
                'max_name_length': self.max_name_length,
            },
            'teams': {
                'default': self.default_team_count,
                'min': self.min_team_count,
                'max': self.max_team_count,
            },
            'storage': {
                'path': str(self.storage_path),
                'key': self.storage_key,
            },
        }

    def save_to_file(self, config_path: Path) -> None:
        """Save configuration to a YAML file.

        Args:
            config_path: Path where to save the configuration
        """
        config_dict = self.to_dict()

        with open(config_path, 'w', encoding='utf-8') as f:
            yaml.dump(config_dict, f, default_flow_style=False, sort_keys=True)
