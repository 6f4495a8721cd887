from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence

from ..core.enums import Capability
from ..staff.model import Staff

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PayrollLine:
    """One active entry's contribution to the payroll total."""

    staff: Staff
    payment: float
    bonus: float

    @property
    def total(self) -> float:
        return self.payment + self.bonus


class PayrollRegistry:
    """Ordered, in-memory roster of staff entries.

    Entries are never removed; ``release`` only deactivates them. None of the
    operations raise: an unknown id on release is a no-op.
    """

    def __init__(self) -> None:
        self._staff: list[Staff] = []

    def __len__(self) -> int:
        return len(self._staff)

    def __iter__(self) -> Iterator[Staff]:
        return iter(self._staff)

    def add(self, staff: Staff) -> None:
        self._staff.append(staff)
        logger.debug("added staff id=%s kind=%s", staff.id, staff.kind.value)

    def find(self, staff_id: int) -> Optional[Staff]:
        for staff in self._staff:
            if staff.id == staff_id:
                return staff
        return None

    def release(self, staff_id: int) -> bool:
        staff = self.find(staff_id)
        if staff is None:
            return False
        staff.active = False
        logger.debug("released staff id=%s", staff_id)
        return True

    def list_active(self) -> Sequence[Staff]:
        return [s for s in self._staff if s.active]

    def list_active_by_capability(self, capability: Capability) -> Sequence[Staff]:
        return [s for s in self._staff if s.has_capability(capability) and s.active]

    def payroll_breakdown(self) -> Sequence[PayrollLine]:
        lines = []
        for staff in self.list_active():
            bonus = staff.bonus() if staff.has_capability(Capability.BOXER) else 0.0
            lines.append(PayrollLine(staff=staff, payment=staff.payment(), bonus=bonus))
        return lines

    def total_payroll(self) -> float:
        total = 0.0
        for staff in self._staff:
            if not staff.active:
                continue
            total += staff.payment()
            if staff.has_capability(Capability.BOXER):
                total += staff.bonus()
        return total
