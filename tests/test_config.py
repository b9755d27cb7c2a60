"""
Tests for configuration management.
"""

import pytest
import tempfile
import yaml
from pathlib import Path
import sys

# Add the rr_scheduler package to the path
sys.path.append(str(Path(__file__).parent.parent))

from rr_scheduler.config import SchedulerConfig, load_config, save_config


def test_basic_config_creation():
    """Test creating a basic configuration."""
    config_data = {
        "divisions": [
            {"name": "North", "rosters": ["Team 1", "Team 2", "Team 3"]}
        ]
    }

    config = SchedulerConfig(**config_data)

    assert len(config.divisions) == 1
    assert len(config.divisions[0].rosters) == 3
    assert config.num_weeks is None
    assert config.max_rosters == 14


def test_config_validation():
    """Test configuration validation."""
    # Test duplicate roster across divisions
    with pytest.raises(ValueError, match="Duplicate rosters"):
        SchedulerConfig(divisions=[
            {"name": "North", "rosters": [1, 2]},
            {"name": "South", "rosters": [2, 3]},
        ])

    # Test duplicate division name
    with pytest.raises(ValueError, match="Duplicate division names"):
        SchedulerConfig(divisions=[
            {"name": "North", "rosters": [1, 2]},
            {"name": "North", "rosters": [3, 4]},
        ])

    # Test too few rosters in a division
    with pytest.raises(ValueError):
        SchedulerConfig(divisions=[{"name": "North", "rosters": [1]}])

    # Test negative week count
    with pytest.raises(ValueError):
        SchedulerConfig(divisions=[{"name": "North", "rosters": [1, 2]}], num_weeks=-1)


def test_roster_limit():
    """Test that oversized leagues are rejected before scheduling."""
    with pytest.raises(ValueError, match="exceeds the limit of 4"):
        SchedulerConfig(
            divisions=[
                {"name": "North", "rosters": [1, 2, 3]},
                {"name": "South", "rosters": [4, 5, 6]},
            ],
            max_rosters=4,
        )


def test_config_load_save():
    """Test loading and saving configuration."""
    config_data = {
        "num_weeks": 10,
        "divisions": [
            {"name": "North", "rosters": ["Team 1", "Team 2"]},
            {"name": "South", "rosters": ["Team 3", "Team 4"]},
        ]
    }

    # Create temporary file
    with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
        yaml.dump(config_data, f)
        temp_path = f.name

    save_path = temp_path.replace('.yaml', '_saved.yaml')
    try:
        # Load configuration
        loaded_config = load_config(temp_path)

        assert loaded_config.num_weeks == 10
        assert len(loaded_config.divisions) == len(config_data["divisions"])

        # Test saving configuration
        save_config(loaded_config, save_path)

        # Load saved configuration
        saved_config = load_config(save_path)
        assert saved_config == loaded_config

    finally:
        # Clean up
        import os
        if os.path.exists(temp_path):
            os.unlink(temp_path)
        if os.path.exists(save_path):
            os.unlink(save_path)


def test_get_all_rosters():
    """Test getting all rosters from configuration."""
    config = SchedulerConfig(divisions=[
        {"name": "North", "rosters": ["Team 1", "Team 2"]},
        {"name": "South", "rosters": ["Team 3", "Team 4", "Team 5"]},
    ])
    all_rosters = config.get_all_rosters()

    assert all_rosters == ["Team 1", "Team 2", "Team 3", "Team 4", "Team 5"]
    assert config.division_rosters() == {
        "North": ["Team 1", "Team 2"],
        "South": ["Team 3", "Team 4", "Team 5"],
    }


def test_get_roster_division():
    """Test getting roster division."""
    config = SchedulerConfig(divisions=[
        {"name": "North", "rosters": [1, 2]},
        {"name": "South", "rosters": [3, 4]},
    ])

    assert config.get_roster_division(1) == "North"
    assert config.get_roster_division(3) == "South"
    assert config.get_roster_division(99) is None


def test_config_save_mixed_rosters():
    """Test int and str rosters keep their types through a save and load."""
    config = SchedulerConfig(divisions=[
        {"name": "North", "rosters": [1, "2", "Hawks"]},
        {"name": "South", "rosters": [4, 5, 6]},
    ])

    with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
        save_path = f.name

    try:
        save_config(config, save_path)
        with open(save_path) as f:
            raw = yaml.safe_load(f)
        loaded = load_config(save_path)

        assert raw["divisions"][0]["rosters"] == [1, "2", "Hawks"]
        assert loaded.divisions[0].rosters == [1, "2", "Hawks"]
        assert loaded == config
    finally:
        import os
        if os.path.exists(save_path):
            os.unlink(save_path)
