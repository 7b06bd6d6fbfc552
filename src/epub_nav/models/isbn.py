"""ISBN value model."""

import isbnlib
from pydantic import BaseModel, ConfigDict


class ISBN(BaseModel):
    """A checksum-valid ISBN-10 or ISBN-13."""

    model_config = ConfigDict(frozen=True)

    canonical_number: str  # digits only (plus a trailing X for some ISBN-10s)

    @property
    def isbn13(self) -> str:
        """The number in ISBN-13 form."""
        return isbnlib.to_isbn13(self.canonical_number)

    @classmethod
    def try_parse(cls, text: str) -> "ISBN | None":
        """Parse an ISBN-like string, returning None if it does not validate."""
        number = isbnlib.canonical(text)
        if isbnlib.is_isbn13(number) or isbnlib.is_isbn10(number):
            return cls(canonical_number=number)
        return None

    def __str__(self) -> str:
        return self.canonical_number
