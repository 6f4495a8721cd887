from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Union

from ..common.validators import coerce_float, coerce_int, require_non_empty, require_non_negative
from ..core.enums import StaffKind
from ..core.exceptions import ValidationError
from .model import Cutman, Rookie, Staff, Trainer, Veteran

# kind -> (class, ((field, coercer), ...))
_FIELDS: dict[StaffKind, tuple[type, tuple[tuple[str, Callable[[Any, str], Any]], ...]]] = {
    StaffKind.VETERAN: (Veteran, (("monthly_payment", coerce_float), ("bonus_percentage", coerce_float))),
    StaffKind.ROOKIE: (
        Rookie,
        (
            ("matches_played", coerce_int),
            ("minutes_lasted", coerce_int),
            ("performance_bonus_per_minute", coerce_int),
        ),
    ),
    StaffKind.TRAINER: (Trainer, (("hours_worked", coerce_int), ("hourly_rate", coerce_float))),
    StaffKind.CUTMAN: (Cutman, (("monthly_salary", coerce_float),)),
}


def parse_kind(value: Union[str, StaffKind]) -> StaffKind:
    if isinstance(value, StaffKind):
        return value
    try:
        return StaffKind(str(value).strip().lower())
    except ValueError:
        raise ValidationError(f"Unknown staff kind: {value}") from None


@dataclass
class StaffFactory:
    """Factory Pattern: build the right staff variant from a kind and raw fields.

    The model itself accepts any numbers. ``strict`` layers extra checks on
    top (non-empty name, no negative amounts) for callers that want them.
    """

    strict: bool = False

    def create(self, kind: Union[str, StaffKind], *, staff_id: Any, name: Any, fields: Mapping[str, Any]) -> Staff:
        staff_kind = parse_kind(kind)
        cls, field_specs = _FIELDS[staff_kind]

        kwargs: dict[str, Any] = {}
        for field_name, coerce in field_specs:
            if field_name not in fields:
                raise ValidationError(f"Missing field: {field_name}")
            value = coerce(fields[field_name], field_name)
            if self.strict:
                require_non_negative(value, field_name)
            kwargs[field_name] = value

        staff_id = coerce_int(staff_id, "id")
        name = require_non_empty(name, "name") if self.strict else ("" if name is None else str(name))

        return cls(staff_id, name, **kwargs)

    def veteran(self, staff_id: int, name: str, monthly_payment: float, bonus_percentage: float) -> Veteran:
        return self.create(
            StaffKind.VETERAN,
            staff_id=staff_id,
            name=name,
            fields={"monthly_payment": monthly_payment, "bonus_percentage": bonus_percentage},
        )

    def rookie(
        self,
        staff_id: int,
        name: str,
        matches_played: int,
        minutes_lasted: int,
        performance_bonus_per_minute: int,
    ) -> Rookie:
        return self.create(
            StaffKind.ROOKIE,
            staff_id=staff_id,
            name=name,
            fields={
                "matches_played": matches_played,
                "minutes_lasted": minutes_lasted,
                "performance_bonus_per_minute": performance_bonus_per_minute,
            },
        )

    def trainer(self, staff_id: int, name: str, hours_worked: int, hourly_rate: float) -> Trainer:
        return self.create(
            StaffKind.TRAINER,
            staff_id=staff_id,
            name=name,
            fields={"hours_worked": hours_worked, "hourly_rate": hourly_rate},
        )

    def cutman(self, staff_id: int, name: str, monthly_salary: float) -> Cutman:
        return self.create(StaffKind.CUTMAN, staff_id=staff_id, name=name, fields={"monthly_salary": monthly_salary})
