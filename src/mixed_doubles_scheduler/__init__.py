"""Mixed doubles tournament schedule generator."""

from .candidates import CandidateRegistry
from .export import (
    export_schedule_tsv,
    export_sightings_table,
    schedule_to_tsv,
    sightings_table_to_tsv,
)
from .generator import generate_games, generate_schedule, make_players
from .metrics import ScheduleMetrics, calculate_metrics, max_possible_games
from .models import (
    Game,
    InvalidArgumentError,
    Player,
    Pool,
    RegistryError,
    Round,
    Schedule,
    SchedulerError,
    Team,
)
from .packer import pack_rounds
from .validator import ValidationReport, ValidationResult, validate_schedule

__all__ = [
    "Pool",
    "Player",
    "Team",
    "Game",
    "Round",
    "Schedule",
    "SchedulerError",
    "InvalidArgumentError",
    "RegistryError",
    "CandidateRegistry",
    "generate_games",
    "generate_schedule",
    "make_players",
    "pack_rounds",
    "validate_schedule",
    "ValidationReport",
    "ValidationResult",
    "ScheduleMetrics",
    "calculate_metrics",
    "max_possible_games",
    "export_schedule_tsv",
    "schedule_to_tsv",
    "export_sightings_table",
    "sightings_table_to_tsv",
]
