# tests/conftest.py
import pytest

from equipment import set_config, two_object_category, virtualize_category
from relative import (
    describe_trivial_relative_adjunction,
    describe_trivial_relative_comonad,
    describe_trivial_relative_eilenberg_moore,
    describe_trivial_relative_kleisli,
    describe_trivial_relative_monad,
)

BULLET = "•"
STAR = "★"


@pytest.fixture(autouse=True)
def reset_config():
    """Every test starts from the environment-derived configuration."""
    set_config(None)
    yield
    set_config(None)


@pytest.fixture
def category():
    return two_object_category()


@pytest.fixture
def equipment(category):
    return virtualize_category(category)


@pytest.fixture
def monad(equipment):
    return describe_trivial_relative_monad(equipment, BULLET)


@pytest.fixture
def comonad(equipment):
    return describe_trivial_relative_comonad(equipment, BULLET)


@pytest.fixture
def adjunction(equipment):
    return describe_trivial_relative_adjunction(equipment, BULLET)


@pytest.fixture
def kleisli(monad):
    return describe_trivial_relative_kleisli(monad)


@pytest.fixture
def eilenberg_moore(monad):
    return describe_trivial_relative_eilenberg_moore(monad)
