import pytest

from philosophers.cli import main


@pytest.mark.parametrize("argv", [[], ["5", "800", "200"], ["5", "800", "200", "200", "7", "1"]])
def test_wrong_argument_count(argv, capsys):
    assert main(argv) == 1
    assert capsys.readouterr().err == "invalid arguments\n"


@pytest.mark.parametrize(
    "argv",
    [["0", "800", "200", "200"], ["5", "0", "200", "200"], ["5", "-800", "200", "200"], ["x", "800", "200", "200"]],
)
def test_invalid_values(argv, capsys):
    assert main(argv) == 1
    assert capsys.readouterr().err == "invalid argument values\n"


@pytest.mark.parametrize("eats", ["0", "abc"])
def test_invalid_number_of_eats(eats, capsys):
    assert main(["5", "800", "200", "200", eats]) == 1
    assert capsys.readouterr().err == "invalid number of eats\n"


def test_single_philosopher(capsys):
    assert main(["1", "20", "5", "5"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[-1] == "20 1 died"
    assert lines[0].endswith("1 has taken a fork")


def test_full_dinner(capsys):
    assert main(["3", "800", "10", "10", "2"]) == 0
    out = capsys.readouterr().out
    assert "died" not in out
    for seat in ("1", "2", "3"):
        eating = [l for l in out.splitlines() if l.split(" ", 1)[1] == f"{seat} is eating"]
        assert len(eating) >= 2