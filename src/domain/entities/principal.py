from dataclasses import dataclass


@dataclass(frozen=True)
class Principal:
    """The authenticated caller, as asserted by the auth provider's token."""

    email: str
    subject: str | None = None
