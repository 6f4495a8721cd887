from examples.example_usage import main


def test_example_prints_roster_and_total(capsys):
    main()
    out = capsys.readouterr().out

    assert "All Active Staff:" in out
    assert "Total Payroll (including bonuses for boxers): $58000.0" in out
    # Ryan Barker is released at the end
    tail = out.split("Releasing Boxer with ID 2 (Ryan Barker):")[1]
    assert "Ryan Barker" not in tail
    assert "Mike Tyson" in tail
