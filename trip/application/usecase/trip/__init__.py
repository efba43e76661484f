"""Trip use cases."""

from .create_trip import CreateTripRequest, CreateTripResponse, CreateTripUseCase
from .get_trip import GetTripRequest, GetTripResponse, GetTripUseCase

__all__ = [
    "CreateTripRequest",
    "CreateTripResponse",
    "CreateTripUseCase",
    "GetTripRequest",
    "GetTripResponse",
    "GetTripUseCase",
]
