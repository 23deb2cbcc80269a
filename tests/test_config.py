"""Tests for the config module."""

import tempfile
from pathlib import Path

import pytest
import yaml

from team_randomizer.config import Config


def write_config(config_data) -> Path:
    with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
        yaml.dump(config_data, f)
        return Path(f.name)


class TestConfig:
    """Test cases for the Config class."""

    def test_default_initialization(self):
        """Test that Config initializes with correct defaults."""
        config = Config()
        assert config.max_name_length == 20
        assert config.default_team_count == 3
        assert config.min_team_count == 2
        assert config.max_team_count == 10
        assert config.storage_path == Path('team_randomizer.db')
        assert config.storage_key == 'soccer_members'

    def test_load_team_range(self):
        """Test loading the team count range from YAML."""
        config_path = write_config({'teams': {'min': 1, 'max': 4, 'default': 2}})

        try:
            config = Config()
            config.load_from_file(config_path)
            assert config.min_team_count == 1
            assert config.max_team_count == 4
            assert config.default_team_count == 2
        finally:
            config_path.unlink()

    def test_load_name_length_and_storage(self):
        """Test loading roster and storage settings from YAML."""
        config_path = write_config({
            'roster': {'max_name_length': None},
            'storage': {'path': 'roster.db', 'key': 'club_members'},
        })

        try:
            config = Config()
            config.load_from_file(config_path)
            assert config.max_name_length is None
            assert config.storage_path == Path('roster.db')
            assert config.storage_key == 'club_members'
        finally:
            config_path.unlink()

    def test_default_outside_range(self):
        """Test that a default team count outside the range is rejected."""
        config_path = write_config({'teams': {'min': 2, 'max': 4, 'default': 6}})

        try:
            config = Config()
            with pytest.raises(ValueError, match="teams.default"):
                config.load_from_file(config_path)
        finally:
            config_path.unlink()

    def test_max_below_min(self):
        """Test that an inverted team count range is rejected."""
        config_path = write_config({'teams': {'min': 5, 'max': 3}})

        try:
            config = Config()
            with pytest.raises(ValueError, match="teams.max"):
                config.load_from_file(config_path)
        finally:
            config_path.unlink()

    def test_invalid_name_length(self):
        """Test that a non-positive name length is rejected."""
        config_path = write_config({'roster': {'max_name_length': 0}})

        try:
            config = Config()
            with pytest.raises(ValueError, match="max_name_length"):
                config.load_from_file(config_path)
        finally:
            config_path.unlink()

    def test_validate_team_count(self):
        """Test checking requested team counts against the range."""
        config = Config()
        config.validate_team_count(2)
        config.validate_team_count(10)

        with pytest.raises(ValueError, match="between 2 and 10"):
            config.validate_team_count(1)
        with pytest.raises(ValueError, match="between 2 and 10"):
            config.validate_team_count(11)

    def test_save_and_reload(self):
        """Test that a saved configuration loads back unchanged."""
        config = Config()
        config.max_name_length = 12
        config.default_team_count = 4
        config.storage_key = 'five_a_side'

        with tempfile.NamedTemporaryFile(suffix='.yaml', delete=False) as f:
            config_path = Path(f.name)

        try:
            config.save_to_file(config_path)
            reloaded = Config()
            reloaded.load_from_file(config_path)
            assert reloaded.to_dict() == config.to_dict()
        finally:
            config_path.unlink()

    def test_invalid_config_structure(self):
        """Test handling of invalid configuration structures."""
        with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
            f.write("invalid: yaml: structure: [")
            config_path = Path(f.name)

        try:
            config = Config()
            with pytest.raises(yaml.YAMLError):
                config.load_from_file(config_path)
        finally:
            config_path.unlink()

    def test_non_mapping_config(self):
        """Test that a YAML list is rejected."""
        config_path = write_config(['teams', 3])

        try:
            config = Config()
            with pytest.raises(ValueError, match="YAML dictionary"):
                config.load_from_file(config_path)
        finally:
            config_path.unlink()

    def test_nonexistent_config_file(self):
        """Test handling of nonexistent configuration file."""
        config = Config()
        nonexistent_path = Path('/nonexistent/config.yaml')

        with pytest.raises(FileNotFoundError):
            config.load_from_file(nonexistent_path)
