"""Example: drive the payroll service directly (no Flask).

Prints the gym roster, each capability group and the payroll total, then
releases one boxer and prints the roster again.
"""

from src.boxing_payroll.boxing_payroll.container import build_container
from src.boxing_payroll.boxing_payroll.core.constants import CURRENCY_SYMBOL
from src.boxing_payroll.boxing_payroll.core.enums import Capability
from src.boxing_payroll.boxing_payroll.payroll.demo_roster import load_demo_roster


def print_staff(staff_list):
    for staff in staff_list:
        print(staff)


def main():
    container = build_container()
    service = container.payroll_service
    load_demo_roster(service)

    print("All Active Staff:")
    print_staff(service.roster())

    for title, capability in (("Boxers", Capability.BOXER), ("Trainers", Capability.TRAINER), ("Cutmen", Capability.CUTMAN)):
        print(f"\nDisplaying Only {title}:")
        print_staff(service.roster(capability))

    print(f"\nTotal Payroll (including bonuses for boxers): {CURRENCY_SYMBOL}{service.total_payroll()}")

    print("\nReleasing Boxer with ID 2 (Ryan Barker):")
    service.release(2)
    print_staff(service.roster())


if __name__ == "__main__":
    main()
