"""Token types for the CallChain DSL."""
from enum import Enum
from dataclasses import dataclass


class TokenType(Enum):
    IDENTIFIER = "IDENTIFIER"
    STRING = "STRING"
    CALL = "CALL"              # ( )
    PROPERTY = "PROPERTY"      # . [ ]


CALL_CHARS = ("(", ")")
PROPERTY_CHARS = (".", "[", "]")


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: str

    def is_call(self, value: str) -> bool:
        """True for a CALL token carrying exactly `value`."""
        return self.type == TokenType.CALL and self.value == value

    def __repr__(self):
        return f"Token({self.type.name}, {self.value!r})"
