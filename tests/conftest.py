import pytest

from occupation_match.models.career_profile import Occupation


def make_occupation(name, scores, description=""):
    return Occupation(name=name, scores=tuple(scores), description=description)


@pytest.fixture
def small_catalog():
    return [
        make_occupation("Electrician", [92, 48, 18, 30, 32, 50], "Wiring"),
        make_occupation("Graphic Designer", [30, 38, 94, 35, 45, 30], "Design"),
        make_occupation("Accountant", [12, 55, 10, 30, 48, 96], "Ledgers"),
        make_occupation("Nurse", [48, 60, 22, 90, 35, 55], "Care"),
        make_occupation("Sales Manager", [15, 30, 25, 60, 95, 55], "Sales"),
    ]
