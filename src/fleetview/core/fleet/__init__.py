"""Gateway for reading resources from a Fleet server."""

from fleetview.core.fleet.abc import Fleet
from fleetview.core.fleet.fake import FakeFleet
from fleetview.core.fleet.real import RealFleet

__all__ = [
    "Fleet",
    "FakeFleet",
    "RealFleet",
]
