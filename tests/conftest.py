# tests/conftest.py
import pytest

from miniparc.Parsec import Error, Ok, ParseResult


def assert_result_eq(res1: ParseResult, res2: ParseResult):
    """
    Deep comparison of two ParseResults.
    """
    if isinstance(res1, Ok):
        assert isinstance(res2, Ok), "Result mismatch: Ok vs Error"
        assert res1.value == res2.value
        assert res1.rest == res2.rest
    else:
        assert isinstance(res2, Error), "Result mismatch: Error vs Ok"
        assert res1.error == res2.error


# Session scoped so hypothesis tests can take it
@pytest.fixture(scope="session")
def same_result():
    return assert_result_eq
