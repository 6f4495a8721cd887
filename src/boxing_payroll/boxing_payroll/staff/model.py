from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import ClassVar, FrozenSet

from ..core.constants import PERCENT_DIVISOR
from ..core.enums import Capability, StaffKind


@dataclass(eq=False)
class Staff(ABC):
    """Domain entity: one person on the gym payroll.

    Entries are mutable (``active`` flips on release) so equality is identity.
    ``active`` is not a constructor argument: every entry starts active.
    """

    kind: ClassVar[StaffKind]
    capabilities: ClassVar[FrozenSet[Capability]] = frozenset({Capability.STAFF})

    id: int
    name: str
    active: bool = field(default=True, init=False)

    @abstractmethod
    def payment(self) -> float:
        raise NotImplementedError

    def has_capability(self, capability: Capability) -> bool:
        return capability in self.capabilities

    def summary(self) -> str:
        return f"Staff [name={self.name}, id={self.id}, active={self.active}, salary={self.payment()}]"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "kind": self.kind.value,
            "active": self.active,
            "payment": self.payment(),
        }

    def __str__(self) -> str:
        return self.summary()


@dataclass(eq=False)
class Boxer(Staff):
    """Staff entry that fights and earns a bonus on top of its payment."""

    capabilities: ClassVar[FrozenSet[Capability]] = frozenset({Capability.STAFF, Capability.BOXER})

    time_played: int = field(default=0, init=False)

    @abstractmethod
    def bonus(self) -> float:
        raise NotImplementedError

    def add_time_played(self, minutes: int) -> None:
        # No floor: negative minutes are applied as given.
        self.time_played += minutes

    def summary(self) -> str:
        return f"{super().summary()}, timePlayed={self.time_played}"

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["time_played"] = self.time_played
        data["bonus"] = self.bonus()
        return data


@dataclass(eq=False)
class Veteran(Boxer):
    """Fixed monthly payment, bonus is a percentage of it."""

    kind: ClassVar[StaffKind] = StaffKind.VETERAN
    capabilities: ClassVar[FrozenSet[Capability]] = Boxer.capabilities | {Capability.VETERAN}

    monthly_payment: float
    bonus_percentage: float

    def payment(self) -> float:
        return float(self.monthly_payment)

    def bonus(self) -> float:
        return self.monthly_payment * self.bonus_percentage / PERCENT_DIVISOR


@dataclass(eq=False)
class Rookie(Boxer):
    """Paid per match; bonus grows with every minute spent in the ring.

    The first match is recorded on construction, so ``time_played`` starts at
    ``minutes_lasted``.
    """

    kind: ClassVar[StaffKind] = StaffKind.ROOKIE
    capabilities: ClassVar[FrozenSet[Capability]] = Boxer.capabilities | {Capability.ROOKIE}

    matches_played: int
    minutes_lasted: int
    performance_bonus_per_minute: int

    def __post_init__(self) -> None:
        self.add_time_played(self.minutes_lasted)

    def payment(self) -> float:
        return float(self.matches_played * self.minutes_lasted)

    def bonus(self) -> float:
        return float(self.time_played * self.performance_bonus_per_minute)


@dataclass(eq=False)
class Trainer(Staff):
    kind: ClassVar[StaffKind] = StaffKind.TRAINER
    capabilities: ClassVar[FrozenSet[Capability]] = Staff.capabilities | {Capability.TRAINER}

    hours_worked: int
    hourly_rate: float

    def payment(self) -> float:
        return float(self.hours_worked * self.hourly_rate)


@dataclass(eq=False)
class Cutman(Staff):
    kind: ClassVar[StaffKind] = StaffKind.CUTMAN
    capabilities: ClassVar[FrozenSet[Capability]] = Staff.capabilities | {Capability.CUTMAN}

    monthly_salary: float

    def payment(self) -> float:
        return float(self.monthly_salary)
