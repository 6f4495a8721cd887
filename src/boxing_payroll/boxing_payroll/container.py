from __future__ import annotations

from dataclasses import dataclass

from .payroll.registry import PayrollRegistry
from .payroll.service import PayrollService
from .staff.factory import StaffFactory


@dataclass(frozen=True)
class Container:
    registry: PayrollRegistry
    staff_factory: StaffFactory

    payroll_service: PayrollService


def build_container(*, strict_validation: bool = False, unique_ids: bool = True) -> Container:
    registry = PayrollRegistry()
    staff_factory = StaffFactory(strict=strict_validation)
    payroll_service = PayrollService(registry, factory=staff_factory, unique_ids=unique_ids)

    return Container(
        registry=registry,
        staff_factory=staff_factory,
        payroll_service=payroll_service,
    )
