from src.boxing_payroll.boxing_payroll.core.enums import Capability, StaffKind
from src.boxing_payroll.boxing_payroll.staff.model import Cutman, Rookie, Trainer, Veteran


def test_veteran_payment_and_percentage_bonus():
    veteran = Veteran(1, "Mike Tyson", 30000, 10)

    assert veteran.payment() == 30000
    assert veteran.bonus() == 3000


def test_veteran_time_played_starts_at_zero():
    veteran = Veteran(1, "Mike Tyson", 30000, 10)

    assert veteran.time_played == 0


def test_rookie_records_first_match_on_construction():
    rookie = Rookie(2, "Ryan Barker", matches_played=10, minutes_lasted=200, performance_bonus_per_minute=5)

    assert rookie.payment() == 2000
    assert rookie.time_played == 200
    assert rookie.bonus() == 1000


def test_rookie_bonus_grows_with_time_played():
    rookie = Rookie(2, "Ryan Barker", 10, 200, 5)
    rookie.add_time_played(30)

    assert rookie.time_played == 230
    assert rookie.bonus() == 230 * 5
    # payment only depends on matches and minutes lasted
    assert rookie.payment() == 2000


def test_add_time_played_accepts_negative_minutes():
    rookie = Rookie(2, "Ryan Barker", 10, 200, 5)
    rookie.add_time_played(-250)

    assert rookie.time_played == -50


def test_trainer_hourly_payment_has_no_bonus():
    trainer = Trainer(4, "Freddie Roach", hours_worked=40, hourly_rate=100)

    assert trainer.payment() == 4000
    assert not hasattr(trainer, "bonus")
    assert not trainer.has_capability(Capability.BOXER)


def test_cutman_flat_salary():
    cutman = Cutman(6, "Mick", 4000)

    assert cutman.payment() == 4000


def test_negative_inputs_propagate_without_validation():
    assert Cutman(7, "Charlie", -100).payment() == -100
    assert Trainer(5, "Eddie Futch", -2, 120).payment() == -240


def test_new_entries_are_always_active():
    for staff in (Veteran(1, "A", 1, 1), Rookie(2, "B", 1, 1, 1), Trainer(3, "C", 1, 1), Cutman(4, "D", 1)):
        assert staff.active is True


def test_capabilities_per_variant():
    veteran = Veteran(1, "A", 1, 1)
    rookie = Rookie(2, "B", 1, 1, 1)
    trainer = Trainer(3, "C", 1, 1)
    cutman = Cutman(4, "D", 1)

    assert veteran.has_capability(Capability.BOXER) and veteran.has_capability(Capability.VETERAN)
    assert rookie.has_capability(Capability.BOXER) and not rookie.has_capability(Capability.VETERAN)
    assert trainer.has_capability(Capability.TRAINER) and not trainer.has_capability(Capability.CUTMAN)
    assert cutman.has_capability(Capability.CUTMAN)
    assert all(s.has_capability(Capability.STAFF) for s in (veteran, rookie, trainer, cutman))


def test_summary_mentions_name_id_active_and_payment():
    text = str(Trainer(4, "Freddie Roach", 40, 100))

    assert "Freddie Roach" in text
    assert "id=4" in text
    assert "active=True" in text
    assert "4000" in text


def test_boxer_summary_includes_time_played():
    text = str(Rookie(2, "Ryan Barker", 10, 200, 5))

    assert "timePlayed=200" in text


def test_to_dict_for_boxer():
    data = Veteran(1, "Mike Tyson", 30000, 10).to_dict()

    assert data == {
        "id": 1,
        "name": "Mike Tyson",
        "kind": StaffKind.VETERAN.value,
        "active": True,
        "payment": 30000,
        "time_played": 0,
        "bonus": 3000,
    }


def test_equality_is_identity():
    assert Cutman(6, "Mick", 4000) != Cutman(6, "Mick", 4000)


def test_payment_is_float_for_int_inputs():
    for staff in (Veteran(1, "A", 30000, 10), Rookie(2, "B", 10, 200, 5), Trainer(3, "C", 40, 100), Cutman(4, "D", 4000)):
        assert isinstance(staff.payment(), float)


def test_summary_prints_float_salary():
    assert "salary=30000.0" in str(Veteran(1, "Mike Tyson", 30000, 10))
