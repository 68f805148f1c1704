"""Chakra scoring and recommendation engine"""
import logging
import math
import random
from typing import Dict, List, Mapping, Optional, Union

from .models import (
    ChakraAnalysis,
    ChakraReading,
    ChakraStatus,
    ChakraValues,
    Direction,
    FocusChakra,
    ImbalanceEntry,
    OverallBalance,
    RecommendationBundle,
    StatusLevel,
)
from .reference import CHAKRA_KEYS, ChakraInfo, get_chakra

logger = logging.getLogger(__name__)

ValuesInput = Union[ChakraValues, Mapping[str, int], None]

ASSESSMENT_PROMPT = (
    "Complete your chakra assessment to receive your balance score "
    "and personalized recommendations."
)

STATUS_TEXT = {
    StatusLevel.BLOCKED: (
        "Blocked",
        "This energy center is significantly blocked. Energy is not flowing freely here, "
        "which may show up as physical tension or emotional difficulty in the areas it governs.",
    ),
    StatusLevel.UNDERACTIVE: (
        "Underactive",
        "This energy center is underactive. Its qualities are present but muted, "
        "and it would benefit from gentle activation.",
    ),
    StatusLevel.BALANCED: (
        "Balanced",
        "This energy center is balanced. Energy flows freely and its qualities "
        "are expressed in a healthy way.",
    ),
    StatusLevel.OVERACTIVE: (
        "Overactive",
        "This energy center is overactive. Its energy is dominant and may be "
        "compensating for other centers, so calming and grounding practices can help.",
    ),
}

# (status, description) per narrative band of the overall score
BALANCE_BANDS = {
    "significantly_underactive": (
        "Significantly Underactive",
        "Your energy system is running low overall. Focus on grounding, rest and "
        "activating practices to rebuild your vitality.",
    ),
    "mildly_underactive": (
        "Mildly Underactive",
        "Your energy is slightly below balance. Gentle, energizing practices can help "
        "bring your chakras into fuller expression.",
    ),
    "balanced": (
        "Relatively Balanced",
        "Your chakras are relatively balanced. Keep nurturing this harmony with "
        "regular meditation and self-care.",
    ),
    "mildly_overactive": (
        "Mildly Overactive",
        "Your energy is slightly above balance. Calming and grounding practices can "
        "help soften the areas that are working too hard.",
    ),
    "significantly_overactive": (
        "Significantly Overactive",
        "Your energy system is running high overall. Prioritize grounding, stillness "
        "and rest to bring your chakras back into balance.",
    ),
}

GENERAL_PRACTICES = (
    "Daily chakra-balancing meditation for all seven energy centers",
    "Mindful breathing exercises to keep energy flowing evenly",
)

INSIGHTS_PREAMBLE = "Your chakra assessment shows where your energy is asking for attention."
INSIGHTS_CLOSING = (
    "Working with the suggested practices regularly can help bring your "
    "energy centers back into harmony."
)
BALANCED_INSIGHTS = (
    "All of your chakras are within a healthy range. Keep nurturing this balance "
    "with regular meditation and mindful self-care."
)


class ChakraCalculator:
    """Derives statuses, balance and recommendations from chakra values"""

    MAX_FOCUS_AREAS = 3

    # Edges of the balanced window used to measure imbalance
    UNDERACTIVE_EDGE = 5
    OVERACTIVE_EDGE = 7

    def __init__(self, rng: Optional[random.Random] = None):
        """
        Args:
            rng: source for practice selection; anything with a ``choice`` method
        """
        self.rng = rng if rng is not None else random.Random()

    def normalize_values(self, values: ValuesInput) -> Dict[str, int]:
        """Returns the values keyed by chakra key, in canonical order"""
        if values is None:
            return {}
        if isinstance(values, ChakraValues):
            return values.to_dict()

        for key in values:
            get_chakra(key)
        return {key: values[key] for key in CHAKRA_KEYS if key in values}

    def classify(self, value: int) -> ChakraStatus:
        """Classifies a single chakra value"""
        if value <= 3:
            level = StatusLevel.BLOCKED
        elif value <= 5:
            level = StatusLevel.UNDERACTIVE
        elif value <= 7:
            level = StatusLevel.BALANCED
        else:
            level = StatusLevel.OVERACTIVE

        label, description = STATUS_TEXT[level]
        return ChakraStatus(level=level, label=label, description=description)

    def direction(self, value: int) -> Direction:
        """Collapses blocked/underactive into one direction"""
        level = self.classify(value).level
        if level in (StatusLevel.BLOCKED, StatusLevel.UNDERACTIVE):
            return Direction.UNDERACTIVE
        if level == StatusLevel.OVERACTIVE:
            return Direction.OVERACTIVE
        return Direction.BALANCED

    def imbalance_distance(self, value: int) -> int:
        """How far a value sits outside the balanced window"""
        if value <= self.UNDERACTIVE_EDGE:
            return self.UNDERACTIVE_EDGE - value
        return max(value - self.OVERACTIVE_EDGE, 0)

    def readings(self, values: ValuesInput) -> List[ChakraReading]:
        """Per-chakra value and status"""
        data = self.normalize_values(values)
        return [
            ChakraReading(
                key=key,
                name=get_chakra(key).name,
                value=value,
                status=self.classify(value)
            )
            for key, value in data.items()
        ]

    def overall_balance(self, values: ValuesInput) -> OverallBalance:
        """Average of all values with its narrative band"""
        data = self.normalize_values(values)
        if not data:
            return OverallBalance(score=0, status="Not assessed", description=ASSESSMENT_PROMPT)

        average = sum(data.values()) / len(data)
        # Round half up to one decimal
        score = math.floor(average * 10 + 0.5) / 10

        if score < 4:
            band = "significantly_underactive"
        elif score < 5.5:
            band = "mildly_underactive"
        elif score > 8:
            band = "significantly_overactive"
        elif score > 6.5:
            band = "mildly_overactive"
        else:
            band = "balanced"

        status, description = BALANCE_BANDS[band]
        return OverallBalance(score=score, status=status, description=description)

    def rank_imbalances(self, values: ValuesInput,
                        include_balanced: bool = False) -> List[ImbalanceEntry]:
        """Chakras ordered from most to least imbalanced.

        Ties keep canonical order; on equal distance an imbalanced chakra
        ranks ahead of a balanced one.
        """
        data = self.normalize_values(values)
        entries = []
        for key, value in data.items():
            status = self.classify(value)
            if status.level == StatusLevel.BALANCED and not include_balanced:
                continue
            entries.append(ImbalanceEntry(
                key=key,
                value=value,
                status=status,
                distance=self.imbalance_distance(value)
            ))

        return sorted(
            entries,
            key=lambda entry: (entry.distance, entry.status.level != StatusLevel.BALANCED),
            reverse=True
        )

    def recommendations(self, values: ValuesInput,
                        rng: Optional[random.Random] = None) -> RecommendationBundle:
        """Focus areas, practices and insights for a profile.

        ``rng`` overrides the calculator's random source for this call.
        """
        rng = rng if rng is not None else self.rng
        data = self.normalize_values(values)
        if not data:
            logger.info("No chakra values supplied, returning assessment prompt")
            return RecommendationBundle(focus_areas=[], practices=[], insights=ASSESSMENT_PROMPT)

        ranked = self.rank_imbalances(data)[:self.MAX_FOCUS_AREAS]

        focus_areas = []
        practices = []
        for entry in ranked:
            chakra = get_chakra(entry.key)
            focus_areas.append(f"{chakra.name} ({entry.status.label})")
            practices.append(self._practice_for(chakra, entry.status, rng))
        practices.extend(GENERAL_PRACTICES)

        return RecommendationBundle(
            focus_areas=focus_areas,
            practices=practices,
            insights=self._build_insights(ranked[0] if ranked else None)
        )

    def _practice_for(self, chakra: ChakraInfo, status: ChakraStatus, rng) -> str:
        """One practice suggestion for an imbalanced chakra"""
        if status.level == StatusLevel.OVERACTIVE:
            return f"Grounding meditation to balance your {chakra.name}"
        practice = rng.choice(chakra.healing_practices)
        return f"{practice} to activate your {chakra.name}"

    def _build_insights(self, top: Optional[ImbalanceEntry]) -> str:
        """Narrative about the most imbalanced chakra"""
        if top is None:
            return BALANCED_INSIGHTS

        chakra = get_chakra(top.key)
        if top.status.level == StatusLevel.OVERACTIVE:
            direction, symptoms = "overactive", chakra.overactive_symptoms[:2]
        else:
            direction, symptoms = "underactive", chakra.underactive_symptoms[:2]

        focus_sentence = (
            f"Your {chakra.name} shows the greatest imbalance and appears {direction}, "
            f"which may show up as {' and '.join(symptoms)}."
        )
        return " ".join([INSIGHTS_PREAMBLE, focus_sentence, INSIGHTS_CLOSING])

    def determine_focus_chakra(self, values: ValuesInput) -> Optional[FocusChakra]:
        """The single chakra that needs the most attention"""
        ranking = self.rank_imbalances(values, include_balanced=True)
        if not ranking:
            return None

        top = ranking[0]
        chakra = get_chakra(top.key)
        direction = self.direction(top.value)

        if direction == Direction.UNDERACTIVE:
            description = (
                f"Your {chakra.name} appears to be underactive. "
                f"This may manifest as {', '.join(chakra.underactive_symptoms)}."
            )
        elif direction == Direction.OVERACTIVE:
            description = (
                f"Your {chakra.name} appears to be overactive. "
                f"This may manifest as {', '.join(chakra.overactive_symptoms)}."
            )
        else:
            description = (
                f"Your {chakra.name} is well-balanced. "
                f"You're exhibiting traits such as {', '.join(chakra.balanced_traits)}."
            )

        return FocusChakra(
            key=chakra.key,
            name=chakra.name,
            sanskrit_name=chakra.sanskrit_name,
            value=top.value,
            direction=direction,
            description=description,
            healing_practices=list(chakra.healing_practices[:3])
        )

    def strongest_chakra(self, values: ValuesInput) -> Optional[str]:
        """Key of the highest value (first in canonical order on ties)"""
        data = self.normalize_values(values)
        if not data:
            return None
        return max(data, key=data.get)

    def weakest_chakra(self, values: ValuesInput) -> Optional[str]:
        """Key of the lowest value (first in canonical order on ties)"""
        data = self.normalize_values(values)
        if not data:
            return None
        return min(data, key=data.get)

    def analyze(self, values: ValuesInput, rng: Optional[random.Random] = None) -> ChakraAnalysis:
        """Full analysis of a profile"""
        data = self.normalize_values(values)
        return ChakraAnalysis(
            values=data,
            readings=self.readings(data),
            overall_balance=self.overall_balance(data),
            recommendations=self.recommendations(data, rng),
            focus_chakra=self.determine_focus_chakra(data),
            strongest_chakra=self.strongest_chakra(data)
        )
