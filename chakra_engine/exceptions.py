"""Chakra engine errors"""


class ChakraEngineError(Exception):
    """Base error for the chakra engine"""


class UnknownChakraError(ChakraEngineError, KeyError):
    """Raised when a key outside the seven chakras is looked up"""

    def __init__(self, key: str):
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"Unknown chakra key: {self.key!r}"


class InvalidAnswerError(ChakraEngineError, ValueError):
    """Raised for an assessment answer that cannot be scored"""
