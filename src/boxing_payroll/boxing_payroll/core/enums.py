from __future__ import annotations

from enum import Enum


class StaffKind(str, Enum):
    """Concrete staff variants a gym can put on payroll."""

    VETERAN = "veteran"
    ROOKIE = "rookie"
    TRAINER = "trainer"
    CUTMAN = "cutman"


class Capability(str, Enum):
    """Behavior sets used to filter the roster without inspecting classes."""

    STAFF = "staff"
    BOXER = "boxer"
    VETERAN = "veteran"
    ROOKIE = "rookie"
    TRAINER = "trainer"
    CUTMAN = "cutman"
