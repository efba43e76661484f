"""Gear use cases."""

from .add_gear import AddGearRequest, AddGearResponse, AddGearUseCase
from .assign_gear import AssignGearRequest, AssignGearResponse, AssignGearUseCase
from .unassign_gear import UnassignGearRequest, UnassignGearResponse, UnassignGearUseCase

__all__ = [
    "AddGearRequest",
    "AddGearResponse",
    "AddGearUseCase",
    "AssignGearRequest",
    "AssignGearResponse",
    "AssignGearUseCase",
    "UnassignGearRequest",
    "UnassignGearResponse",
    "UnassignGearUseCase",
]
