from typing import Annotated

from pydantic import AfterValidator, BaseModel


def _require_non_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


# Rejects empty and whitespace-only strings; the value itself is kept as sent
NonBlankStr = Annotated[str, AfterValidator(_require_non_blank)]


class MessageResponse(BaseModel):
    message: str
