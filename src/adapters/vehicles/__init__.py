"""Vehicles (concrete remote starter delegates).

Each module implements `core.interfaces.remote_starter.RemoteStarterDelegate`.
"""

from adapters.vehicles.car import Car
from adapters.vehicles.motorcycle import Motorcycle
from adapters.vehicles.rocketship import Rocketship

__all__ = [
	"Car",
	"Motorcycle",
	"Rocketship",
]
