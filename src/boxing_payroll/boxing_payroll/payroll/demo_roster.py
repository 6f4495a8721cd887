from __future__ import annotations

from .service import PayrollService

# (kind, id, name, fields)
DEMO_ROSTER = [
    ("veteran", 1, "Mike Tyson", {"monthly_payment": 30000, "bonus_percentage": 10}),
    ("rookie", 2, "Ryan Barker", {"matches_played": 10, "minutes_lasted": 200, "performance_bonus_per_minute": 5}),
    ("rookie", 3, "Henry Cejudo", {"matches_played": 15, "minutes_lasted": 300, "performance_bonus_per_minute": 8}),
    ("trainer", 4, "Freddie Roach", {"hours_worked": 40, "hourly_rate": 100}),
    ("trainer", 5, "Eddie Futch", {"hours_worked": 30, "hourly_rate": 120}),
    ("cutman", 6, "Mick", {"monthly_salary": 4000}),
    ("cutman", 7, "Charlie", {"monthly_salary": 3500}),
]


def load_demo_roster(service: PayrollService) -> int:
    """Hire the sample gym staff. Returns how many entries were added."""
    for kind, staff_id, name, fields in DEMO_ROSTER:
        service.hire(kind, staff_id=staff_id, name=name, fields=fields)
    return len(DEMO_ROSTER)
