import pytest

from tests.fakes import FakeComparator, FakeGit, FakeSpecQuery


@pytest.fixture
def comparator():
    return FakeComparator()


@pytest.fixture
def spec_query():
    return FakeSpecQuery()


@pytest.fixture
def fake_git():
    return FakeGit()
