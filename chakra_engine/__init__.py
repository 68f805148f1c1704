"""Chakra scoring and recommendation engine"""
from .calculator import ChakraCalculator
from .coaching import ChakraCoach
from .exceptions import ChakraEngineError, UnknownChakraError
from .models import ChakraAnalysis, ChakraValues, CoachType, RecommendationBundle, StatusLevel
from .reference import CHAKRAS, CHAKRA_KEYS, get_chakra

__all__ = [
    'ChakraCalculator',
    'ChakraCoach',
    'ChakraEngineError',
    'UnknownChakraError',
    'ChakraAnalysis',
    'ChakraValues',
    'CoachType',
    'RecommendationBundle',
    'StatusLevel',
    'CHAKRAS',
    'CHAKRA_KEYS',
    'get_chakra',
]
