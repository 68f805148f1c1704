"""Data models for the chakra engine"""
from enum import Enum
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class StatusLevel(str, Enum):
    """Classification band of a single chakra value"""
    BLOCKED = "blocked"
    UNDERACTIVE = "underactive"
    BALANCED = "balanced"
    OVERACTIVE = "overactive"


class Direction(str, Enum):
    """Which way a chakra leans away from balance"""
    UNDERACTIVE = "underactive"
    BALANCED = "balanced"
    OVERACTIVE = "overactive"


class CoachType(str, Enum):
    """AI coach personas"""
    INNER_CHILD = "inner_child"
    SHADOW_SELF = "shadow_self"
    HIGHER_SELF = "higher_self"
    INTEGRATION = "integration"


class ChakraValues(BaseModel):
    """Self-assessment ratings for the seven chakras (1-10)"""
    model_config = ConfigDict(populate_by_name=True)

    root: int = Field(..., ge=1, le=10)
    sacral: int = Field(..., ge=1, le=10)
    solar_plexus: int = Field(..., ge=1, le=10, alias="solarPlexus")
    heart: int = Field(..., ge=1, le=10)
    throat: int = Field(..., ge=1, le=10)
    third_eye: int = Field(..., ge=1, le=10, alias="thirdEye")
    crown: int = Field(..., ge=1, le=10)

    @classmethod
    def default(cls, value: int = 5) -> "ChakraValues":
        """Mid-scale profile shown before an assessment is completed"""
        return cls(
            root=value, sacral=value, solar_plexus=value, heart=value,
            throat=value, third_eye=value, crown=value
        )

    def to_dict(self) -> Dict[str, int]:
        """Values keyed by chakra key (root ... crown)"""
        return self.model_dump(by_alias=True)


class ChakraStatus(BaseModel):
    """Status of one chakra value"""
    level: StatusLevel
    label: str
    description: str


class ChakraReading(BaseModel):
    """A chakra value together with its status"""
    key: str
    name: str
    value: int
    status: ChakraStatus


class OverallBalance(BaseModel):
    """Average of all values with a narrative band"""
    score: float
    status: str
    description: str


class ImbalanceEntry(BaseModel):
    """One chakra in the imbalance ranking"""
    key: str
    value: int
    status: ChakraStatus
    distance: int


class RecommendationBundle(BaseModel):
    """Focus areas, practices and insights for a profile"""
    model_config = ConfigDict(populate_by_name=True)

    focus_areas: List[str] = Field(default_factory=list, alias="focusAreas")
    practices: List[str] = Field(default_factory=list)
    insights: str = ""


class FocusChakra(BaseModel):
    """The chakra that needs the most attention"""
    model_config = ConfigDict(populate_by_name=True)

    key: str
    name: str
    sanskrit_name: Optional[str] = Field(default=None, alias="sanskritName")
    value: int
    direction: Direction
    description: str
    healing_practices: List[str] = Field(default_factory=list, alias="healingPractices")


class CoachRecommendation(BaseModel):
    """Which coach suits a profile and what to explore with them"""
    model_config = ConfigDict(populate_by_name=True)

    focus_chakra: FocusChakra = Field(alias="focusChakra")
    recommended_coach: CoachType = Field(alias="recommendedCoach")
    coaching_focus: List[str] = Field(alias="coachingFocus")
    general_recommendation: str = Field(alias="generalRecommendation")


class ChakraAnalysis(BaseModel):
    """Everything the engine derives from one profile"""
    model_config = ConfigDict(populate_by_name=True)

    values: Dict[str, int]
    readings: List[ChakraReading]
    overall_balance: OverallBalance = Field(alias="overallBalance")
    recommendations: RecommendationBundle
    focus_chakra: Optional[FocusChakra] = Field(default=None, alias="focusChakra")
    strongest_chakra: Optional[str] = Field(default=None, alias="strongestChakra")


class ChatMessage(BaseModel):
    """One prior turn of a coaching conversation"""
    role: Literal["user", "assistant"]
    content: str
