from pydantic import BaseModel


class ErrorResponse(BaseModel):
    error: str


def error_responses(*status_codes: int) -> dict[int | str, dict]:  # type: ignore[type-arg]
    """OpenAPI ``responses=`` entry documenting the JSON error envelope."""
    return {code: {"model": ErrorResponse} for code in status_codes}
