import psycopg
import pytest
from pydantic import BaseModel, ValidationError


class _UserInput(BaseModel):
    email: str
    age: int


@pytest.fixture()
def validation_payload() -> dict[str, object]:
    """A raw error in the shape produced by record validation."""
    return {"ValidationError": {"email": [{"rule": "required"}]}}


@pytest.fixture()
def pydantic_validation_error() -> ValidationError:
    """A real pydantic error: ``email`` missing and ``age`` not an integer."""
    try:
        _UserInput.model_validate({"age": "not a number"})
    except ValidationError as exc:
        return exc
    raise AssertionError("model validation unexpectedly passed")


@pytest.fixture()
def unique_violation() -> psycopg.errors.UniqueViolation:
    return psycopg.errors.UniqueViolation('duplicate key value violates unique constraint "users_email_key"')


@pytest.fixture()
def operational_error() -> psycopg.OperationalError:
    return psycopg.OperationalError("connection to server at 10.0.0.5 failed")
