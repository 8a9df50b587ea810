import pytest
from pydantic import BaseModel, ValidationError

from api.schemas import NonBlankStr


class _Named(BaseModel):
    name: NonBlankStr


@pytest.mark.parametrize("value", ["", " ", "\t\n"])
def test_non_blank_rejects_blank(value):
    with pytest.raises(ValidationError):
        _Named(name=value)


def test_non_blank_keeps_value_as_sent():
    assert _Named(name=" Alien ").name == " Alien "
