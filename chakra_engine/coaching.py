"""Coach selection and coaching context for AI prompts"""
import logging
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict

from .calculator import ChakraCalculator, ValuesInput
from .emotions import emotion_chakra_links, find_emotion
from .models import ChatMessage, CoachRecommendation, CoachType
from .reference import get_chakra

logger = logging.getLogger(__name__)


class CoachProfile(BaseModel):
    """Persona settings for one coach"""
    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    greeting: str
    persona: str
    temperature: float


COACH_TYPE_BY_CHAKRA: Mapping[str, CoachType] = MappingProxyType({
    "root": CoachType.INNER_CHILD,
    "sacral": CoachType.INNER_CHILD,
    "solarPlexus": CoachType.SHADOW_SELF,
    "heart": CoachType.SHADOW_SELF,
    "throat": CoachType.HIGHER_SELF,
    "thirdEye": CoachType.HIGHER_SELF,
    "crown": CoachType.HIGHER_SELF,
})

# Life themes an imbalance in each chakra points to
FOCUS_THEMES: Mapping[str, str] = MappingProxyType({
    "root": "security, stability, and groundedness",
    "sacral": "creativity, emotions, and pleasure",
    "solarPlexus": "personal power, confidence, and self-esteem",
    "heart": "love, compassion, and relationships",
    "throat": "communication, expression, and truth",
    "thirdEye": "intuition, insight, and perception",
    "crown": "spirituality, purpose, and connection",
})

COACHES: Mapping[CoachType, CoachProfile] = MappingProxyType({
    CoachType.INNER_CHILD: CoachProfile(
        name="Inner Child Coach",
        description="Healing wounds from the past",
        greeting=(
            "Hello there! I'm your Inner Child Coach. I'm here to help you reconnect with "
            "your authentic self and heal childhood wounds. What would you like to explore today?"
        ),
        persona=(
            "You are a warm, nurturing Inner Child Coach. Help the user gently explore early "
            "memories, feelings of safety, and unmet needs. Encourage self-compassion and play."
        ),
        temperature=0.7,
    ),
    CoachType.SHADOW_SELF: CoachProfile(
        name="Shadow Self Coach",
        description="Embracing your whole self",
        greeting=(
            "Welcome. I'm your Shadow Self Coach. I'm here to help you identify and integrate "
            "the aspects of yourself you may have rejected or hidden. What patterns have you "
            "been noticing lately?"
        ),
        persona=(
            "You are a direct, grounded Shadow Self Coach. Help the user notice projections, "
            "triggers, and disowned parts of themselves, and guide them toward acceptance."
        ),
        temperature=0.5,
    ),
    CoachType.HIGHER_SELF: CoachProfile(
        name="Higher Self Coach",
        description="Connecting to your essence",
        greeting=(
            "Greetings! I'm your Higher Self Coach. I'm here to help you connect with your "
            "highest potential and purpose. What's on your mind today that you'd like guidance with?"
        ),
        persona=(
            "You are an expansive, insightful Higher Self Coach. Help the user connect with "
            "their intuition, purpose, and authentic expression."
        ),
        temperature=0.8,
    ),
    CoachType.INTEGRATION: CoachProfile(
        name="Integration Coach",
        description="Unifying your journey",
        greeting=(
            "Hi there! I'm your Integration Coach. I'm here to help you apply insights into "
            "practical actions and track your progress. What would you like to work on "
            "implementing today?"
        ),
        persona=(
            "You are a practical, encouraging Integration Coach. Help the user turn insights "
            "into small, sustainable daily actions and reflect on their progress."
        ),
        temperature=0.6,
    ),
})

COACHING_FOCUS_QUESTIONS: Mapping[CoachType, tuple] = MappingProxyType({
    CoachType.INNER_CHILD: (
        "What early memories do you have related to feeling safe and secure?",
        "How does your current sense of safety affect your daily life?",
        "What childhood patterns might be affecting your relationship with your body and physical needs?",
        "In what ways do you nurture your creative expression and sensuality?",
        "What would help you feel more grounded and present in your everyday experience?",
    ),
    CoachType.SHADOW_SELF: (
        "What aspects of yourself do you find difficult to accept or acknowledge?",
        "How comfortable are you with expressing and setting boundaries?",
        "In what situations do you find yourself feeling powerless or overly controlling?",
        "What emotions do you find most difficult to express or experience?",
        "How do you respond to criticism or rejection from others?",
    ),
    CoachType.HIGHER_SELF: (
        "What does authentic self-expression mean to you?",
        "How do you distinguish between your intuition and your fears?",
        "What is your relationship with the concept of purpose or meaning?",
        "How do you connect with your deeper wisdom or spiritual nature?",
        "What practices help you access your inner guidance system?",
    ),
    CoachType.INTEGRATION: (
        "How might you integrate the insights from your chakra assessment into daily practice?",
        "What small, sustainable changes could support your overall energy balance?",
        "How would addressing your chakra imbalances change your day-to-day experience?",
        "What support systems might help you maintain new practices for chakra healing?",
        "What would a more balanced version of yourself look and feel like?",
    ),
})


def coach_type_for(chakra_key: str) -> CoachType:
    """Coach best suited to work on a chakra"""
    # The table covers all seven chakras; INTEGRATION is only a lookup default
    return COACH_TYPE_BY_CHAKRA.get(chakra_key, CoachType.INTEGRATION)


def get_coach(coach_type: Union[CoachType, str, None]) -> CoachProfile:
    """Coach profile, falling back to the Integration Coach for unknown types"""
    try:
        return COACHES[CoachType(coach_type)]
    except ValueError:
        logger.warning(f"Unknown coach type {coach_type!r}, using integration coach")
        return COACHES[CoachType.INTEGRATION]


class ChakraCoach:
    """Turns a chakra profile into coaching guidance and prompt context"""

    def __init__(self, calculator: Optional[ChakraCalculator] = None):
        self.calculator = calculator or ChakraCalculator()

    def coach_recommendations(self, values: ValuesInput) -> Optional[CoachRecommendation]:
        """Recommended coach and focus questions for a profile"""
        focus = self.calculator.determine_focus_chakra(values)
        if focus is None:
            return None

        coach_type = coach_type_for(focus.key)
        coach = COACHES[coach_type]
        return CoachRecommendation(
            focus_chakra=focus,
            recommended_coach=coach_type,
            coaching_focus=list(COACHING_FOCUS_QUESTIONS[coach_type]),
            general_recommendation=(
                f"Based on your chakra assessment, working with the {coach.name} would be most "
                f"beneficial for addressing your {focus.name} imbalance."
            )
        )

    def coaching_context(self, values: ValuesInput,
                         recent_emotions: Optional[Iterable[str]] = None) -> str:
        """Plain-text profile summary to embed in a coaching prompt.

        Per-chakra lines carry the same four status labels as ``classify``
        (Blocked, Underactive, Balanced, Overactive), so the prompt agrees with
        the assessment screen. The focus line uses the three-way direction.
        """
        data = self.calculator.normalize_values(values)
        lines = ["CHAKRA ASSESSMENT CONTEXT:"]

        if not data:
            lines.append(
                "No chakra assessment has been completed yet. Encourage the user to take "
                "the assessment before focusing on specific energy centers."
            )
        else:
            lines.extend(self._profile_section(data))

        if recent_emotions is not None:
            lines.append("")
            lines.extend(self._emotion_section(list(recent_emotions)))

        return "\n".join(lines) + "\n"

    def _profile_section(self, data: Dict[str, int]) -> List[str]:
        recommendation = self.coach_recommendations(data)
        focus = recommendation.focus_chakra
        coach = COACHES[recommendation.recommended_coach]
        balance = self.calculator.overall_balance(data)

        lines = ["Overall Profile:"]
        for reading in self.calculator.readings(data):
            lines.append(f"{reading.name}: {reading.value}/10 ({reading.status.label})")
        lines.append(f"Overall Balance: {balance.score}/10 ({balance.status})")

        lines.append("")
        lines.append(f"Primary Focus: {focus.name} ({focus.value}/10, {focus.direction.value})")
        lines.append(focus.description)

        lines.append("")
        lines.append("Recommended healing practices:")
        lines.extend(focus.healing_practices)

        lines.append("")
        lines.append(f"Recommended coach: {coach.name}")

        lines.append("")
        lines.append("Coaching considerations:")
        lines.append(f"- This user would benefit from focusing on their {focus.name}.")
        lines.append(f"- The imbalance indicates possible issues with {FOCUS_THEMES[focus.key]}.")
        return lines

    def _emotion_section(self, emotions: List[str]) -> List[str]:
        lines = ["Recent emotional landscape:"]
        known = [label for label in emotions if find_emotion(label) is not None]
        if not known:
            lines.append("- No recognised emotions recorded recently.")
            return lines

        lines.append(f"- Recent emotions: {', '.join(known)}")
        links = emotion_chakra_links(known)
        connected = [
            f"{get_chakra(key).name} ({count})"
            for key, count in sorted(links.items(), key=lambda item: item[1], reverse=True)
        ]
        lines.append(f"- Connected chakras: {', '.join(connected)}")
        return lines

    def system_prompt(self, coach_type: Union[CoachType, str], values: ValuesInput = None,
                      recent_emotions: Optional[Iterable[str]] = None) -> str:
        """Coach persona, followed by the coaching context when there is one"""
        prompt = get_coach(coach_type).persona
        if values or recent_emotions:
            prompt += "\n\n" + self.coaching_context(values, recent_emotions)
        return prompt

    def build_coach_messages(self, coach_type: Union[CoachType, str], message: str,
                             values: ValuesInput = None,
                             recent_emotions: Optional[Iterable[str]] = None,
                             history: Optional[Iterable[Union[ChatMessage, Mapping]]] = None) -> List[Dict[str, str]]:
        """Chat-completion messages for a coaching turn.

        Prior system turns are dropped; every other history item must be a
        valid ``ChatMessage`` or pydantic.ValidationError is raised.
        """
        system_prompt = self.system_prompt(coach_type, values, recent_emotions)
        messages = [{"role": "system", "content": system_prompt}]
        for item in history or []:
            if isinstance(item, Mapping) and item.get("role") == "system":
                continue
            turn = ChatMessage.model_validate(item)
            messages.append({"role": turn.role, "content": turn.content})
        messages.append({"role": "user", "content": message})
        return messages
