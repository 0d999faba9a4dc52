"""
Exceptions raised by the numeral converters.

Decode: EmptyInputError, InvalidCharacterError, InvalidSequenceError
Encode: OutOfRangeError
"""
from typing import Iterable, Optional


class NumeralError(ValueError):
    """Base class for every conversion failure."""


class EmptyInputError(NumeralError):
    def __init__(self):
        super().__init__("Invalid empty string")


class InvalidCharacterError(NumeralError):
    def __init__(self, characters: Iterable[str] = ()):
        self.characters = "".join(sorted(set(characters)))
        super().__init__("Input contains invalid characters")


class InvalidSequenceError(NumeralError):
    def __init__(self, numeral: str = "", position: Optional[int] = None):
        self.numeral = numeral
        self.position = position
        super().__init__("Invalid sequence")


class OutOfRangeError(NumeralError):
    def __init__(self, value: int, low: int, high: int):
        self.value = value
        self.low = low
        self.high = high
        super().__init__(
            f"The value should be between {low} and {high} inclusive, not {value}"
        )
