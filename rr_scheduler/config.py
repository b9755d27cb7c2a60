"""
Configuration management for the round-robin scheduler.
"""

from collections import Counter
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, Field, field_validator, model_validator

from .errors import DuplicateRosterError, RosterLimitError

RosterId = Union[int, str]


class Division(BaseModel):
    """A division of rosters that play each other before inter-division weeks."""
    name: str
    rosters: List[RosterId] = Field(min_length=2, description="Rosters in this division")


class SchedulerConfig(BaseModel):
    """Main configuration for the round-robin scheduler."""
    divisions: List[Division] = Field(min_length=1, description="League divisions and rosters")
    num_weeks: Optional[int] = Field(default=None, ge=0, description="Cycle the season to this many weeks")

    # Matchings grow as a double factorial of the roster count
    max_rosters: int = Field(default=14, ge=2, description="Upper bound on total rosters")

    @field_validator('divisions')
    @classmethod
    def validate_division_names(cls, v):
        names = Counter(division.name for division in v)
        repeated = [name for name, count in names.items() if count > 1]
        if repeated:
            raise ValueError(f"Duplicate division names: {repeated}")
        return v

    @model_validator(mode='after')
    def validate_rosters(self):
        rosters = self.get_all_rosters()
        counts = Counter(rosters)
        duplicates = [roster for roster, count in counts.items() if count > 1]
        if duplicates:
            raise DuplicateRosterError(duplicates)
        if len(rosters) > self.max_rosters:
            raise RosterLimitError(len(rosters), self.max_rosters)
        return self

    def get_all_rosters(self) -> List[RosterId]:
        """Get all rosters from all divisions, in division order."""
        rosters = []
        for division in self.divisions:
            rosters.extend(division.rosters)
        return rosters

    def get_roster_division(self, roster: RosterId) -> Optional[str]:
        """Get the division name for a given roster."""
        for division in self.divisions:
            if roster in division.rosters:
                return division.name
        return None

    def division_rosters(self) -> Dict[str, List[RosterId]]:
        return {division.name: list(division.rosters) for division in self.divisions}


def load_config(config_path: str) -> SchedulerConfig:
    """Load configuration from YAML file."""
    import yaml

    with open(config_path, 'r') as f:
        config_data = yaml.safe_load(f)

    return SchedulerConfig(**config_data)


def save_config(config: SchedulerConfig, config_path: str) -> None:
    """Save configuration to YAML file."""
    import yaml

    with open(config_path, 'w') as f:
        yaml.dump(config.model_dump(mode="json"), f, default_flow_style=False, indent=2)
