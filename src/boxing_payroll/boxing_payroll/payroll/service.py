from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence, Union

from ..common.validators import coerce_int
from ..core.enums import Capability, StaffKind
from ..core.exceptions import StaffNotFoundError, ValidationError
from ..staff.factory import StaffFactory
from ..staff.model import Staff
from .registry import PayrollRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PayrollReport:
    rows: list[dict]
    total: float


class PayrollService:
    """Use cases over the roster: hiring, releasing, match time, reports."""

    def __init__(
        self,
        registry: PayrollRegistry,
        *,
        factory: Optional[StaffFactory] = None,
        unique_ids: bool = True,
    ):
        self._registry = registry
        self._factory = factory or StaffFactory()
        self._unique_ids = unique_ids

    def hire(
        self,
        kind: Union[str, StaffKind],
        *,
        staff_id: Any,
        name: Any,
        fields: Mapping[str, Any],
    ) -> Staff:
        staff = self._factory.create(kind, staff_id=staff_id, name=name, fields=fields)
        if self._unique_ids and self._registry.find(staff.id) is not None:
            raise ValidationError(f"Staff id {staff.id} already exists")

        self._registry.add(staff)
        logger.info("hired %s id=%s name=%s", staff.kind.value, staff.id, staff.name)
        return staff

    def release(self, staff_id: int) -> bool:
        released = self._registry.release(staff_id)
        if not released:
            logger.warning("release ignored: no staff with id=%s", staff_id)
        return released

    def get(self, staff_id: int) -> Staff:
        staff = self._registry.find(staff_id)
        if staff is None:
            raise StaffNotFoundError(f"Staff id {staff_id} not found")
        return staff

    def record_match_time(self, staff_id: int, minutes: Any) -> Staff:
        staff = self.get(staff_id)
        if not staff.has_capability(Capability.BOXER):
            raise ValidationError(f"Staff id {staff_id} is not a boxer")

        staff.add_time_played(coerce_int(minutes, "minutes"))
        return staff

    def roster(self, capability: Optional[Capability] = None) -> Sequence[Staff]:
        if capability is None:
            return self._registry.list_active()
        return self._registry.list_active_by_capability(capability)

    def total_payroll(self) -> float:
        return self._registry.total_payroll()

    def build_payroll_report(self) -> PayrollReport:
        rows = []
        for line in self._registry.payroll_breakdown():
            rows.append(
                {
                    "id": line.staff.id,
                    "name": line.staff.name,
                    "kind": line.staff.kind.value,
                    "payment": line.payment,
                    "bonus": line.bonus,
                    "total": line.total,
                }
            )
        return PayrollReport(rows=rows, total=self._registry.total_payroll())


def parse_capability(value: Union[str, Capability]) -> Capability:
    if isinstance(value, Capability):
        return value
    try:
        return Capability(str(value).strip().lower())
    except ValueError:
        raise ValidationError(f"Unknown capability: {value}") from None
