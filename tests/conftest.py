"""Shared test fixtures for chamber seating tests."""
import pytest
from chamber.rows import RowSpec
from chamber.members import Member, Role, sample_roster
from chamber.layout import compute_layout


def rep(i, party="Democrat"):
    """Representative R<i> with district i."""
    return Member(id=i, name=f"R{i}", role=Role.REPRESENTATIVE, party=party, district=i)


@pytest.fixture(scope="session")
def roster():
    """Sample roster: mayor, 50 aldermen, clerk."""
    return sample_roster()


@pytest.fixture(scope="session")
def layout(roster):
    """ChamberLayout of the sample roster on the default rows."""
    return compute_layout(roster)


@pytest.fixture
def example_row():
    """One row: radius 100, sections 2/3/2, 10-degree aisles, 180-degree span."""
    return RowSpec(radius=100.0, sections=(2, 3, 2), span=180.0, aisles=(10.0, 10.0))


@pytest.fixture
def seven_reps():
    return [rep(i) for i in range(1, 8)]
