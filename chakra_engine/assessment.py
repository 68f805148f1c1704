"""Chakra self-assessment questionnaire and answer scoring"""
import logging
import math
from enum import Enum
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from .exceptions import InvalidAnswerError
from .models import ChakraValues
from .reference import CHAKRA_KEYS

logger = logging.getLogger(__name__)

# Question target meaning "every chakra"
ALL_CHAKRAS = "all"

MIN_ANSWER = 1
MAX_ANSWER = 5
UNANSWERED_VALUE = 5


class QuestionCategory(str, Enum):
    MIND = "mind"
    EMOTIONAL = "emotional"
    PHYSICAL = "physical"
    SITUATIONAL = "situational"
    REFLECTION = "reflection"


class AssessmentQuestion(BaseModel):
    """One 1-5 scale question"""
    model_config = ConfigDict(frozen=True)

    id: str
    text: str
    chakra: str
    inverse_scoring: bool = False
    category: QuestionCategory


class AnswerOption(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: int
    label: str
    description: str


class AssessmentStep(BaseModel):
    """A page of the questionnaire"""
    model_config = ConfigDict(frozen=True)

    title: str
    description: str
    questions: Tuple[AssessmentQuestion, ...]


QUESTION_TEMPLATES: Dict[str, Dict[QuestionCategory, str]] = {
    "root": {
        QuestionCategory.MIND: "How often do you feel financially secure and stable?",
        QuestionCategory.EMOTIONAL: "How easily do you adjust to unexpected changes in your routine?",
        QuestionCategory.PHYSICAL: "How often do you feel physically safe and secure in your environment?",
        QuestionCategory.SITUATIONAL: "How comfortable would you feel if you had to completely relocate to a new area?",
    },
    "sacral": {
        QuestionCategory.MIND: "How comfortable are you expressing your emotions to others?",
        QuestionCategory.EMOTIONAL: "How often do you engage in creative activities that bring you joy?",
        QuestionCategory.PHYSICAL: "How connected do you feel to your body's needs and desires?",
        QuestionCategory.SITUATIONAL: "How comfortable would you feel trying a completely new form of creative expression?",
    },
    "solarPlexus": {
        QuestionCategory.MIND: "How confident do you feel when making important decisions?",
        QuestionCategory.EMOTIONAL: "How comfortable are you with asserting your needs and boundaries?",
        QuestionCategory.PHYSICAL: "How often do you feel energized and motivated to achieve your goals?",
        QuestionCategory.SITUATIONAL: "How comfortable would you feel taking a leadership role in a group project?",
    },
    "heart": {
        QuestionCategory.MIND: "How easily can you forgive others who have hurt you?",
        QuestionCategory.EMOTIONAL: "How comfortable are you receiving love and care from others?",
        QuestionCategory.PHYSICAL: "How often do you practice self-compassion when you make mistakes?",
        QuestionCategory.SITUATIONAL: "How comfortable would you feel supporting a friend through an emotional crisis?",
    },
    "throat": {
        QuestionCategory.MIND: "How comfortable are you speaking your truth, even when it might be unpopular?",
        QuestionCategory.EMOTIONAL: "How well do you communicate your needs and boundaries to others?",
        QuestionCategory.PHYSICAL: "How easily can you express yourself through writing, speaking, or other forms?",
        QuestionCategory.SITUATIONAL: "How comfortable would you feel giving a presentation to a large group?",
    },
    "thirdEye": {
        QuestionCategory.MIND: "How often do you trust your intuition when making decisions?",
        QuestionCategory.EMOTIONAL: "How easily can you visualize future possibilities and outcomes?",
        QuestionCategory.PHYSICAL: "How often do you notice subtle patterns and connections in your life?",
        QuestionCategory.SITUATIONAL: "How confident would you feel solving a complex problem with limited information?",
    },
    "crown": {
        QuestionCategory.MIND: "How connected do you feel to something greater than yourself?",
        QuestionCategory.EMOTIONAL: "How often do you experience a sense of peace and transcendence?",
        QuestionCategory.PHYSICAL: "How interested are you in exploring spiritual or philosophical questions?",
        QuestionCategory.SITUATIONAL: "How would you respond to a conversation about life's deeper meaning and purpose?",
    },
}

# Scored as 6 - answer
INVERSE_TEMPLATES: Dict[str, Dict[QuestionCategory, str]] = {
    "root": {
        QuestionCategory.MIND: "How often do you feel anxious about financial security?",
        QuestionCategory.EMOTIONAL: "How easily do you become destabilized by unexpected changes?",
    },
    "sacral": {
        QuestionCategory.MIND: "How difficult is it for you to express your emotions freely?",
        QuestionCategory.EMOTIONAL: "How often do you feel disconnected from joy and pleasure?",
    },
    "solarPlexus": {
        QuestionCategory.MIND: "How often do you doubt your abilities and decisions?",
        QuestionCategory.EMOTIONAL: "How difficult is it for you to assert your needs and boundaries?",
    },
    "heart": {
        QuestionCategory.MIND: "How difficult is it for you to open up emotionally to others?",
        QuestionCategory.EMOTIONAL: "How often do you hold grudges against those who have hurt you?",
    },
    "throat": {
        QuestionCategory.MIND: "How often do you hold back from expressing your true thoughts?",
        QuestionCategory.EMOTIONAL: "How difficult is it for you to speak up in group settings?",
    },
    "thirdEye": {
        QuestionCategory.MIND: "How often do you doubt your intuition and inner guidance?",
        QuestionCategory.EMOTIONAL: "How difficult is it for you to see multiple perspectives on an issue?",
    },
    "crown": {
        QuestionCategory.MIND: "How often do you feel disconnected from any higher purpose?",
        QuestionCategory.EMOTIONAL: "How difficult is it for you to find meaning in challenging situations?",
    },
}

REFLECTION_TEMPLATES: Dict[str, str] = {
    "root": "How balanced do you feel overall in your physical and material needs?",
    "sacral": "How would you rate your overall emotional and creative wellbeing?",
    "solarPlexus": "How empowered do you feel in your life choices and personal authority?",
    "heart": "How fulfilled do you feel in your relationships and capacity to give/receive love?",
    "throat": "How authentic do you feel in expressing yourself and your truth to the world?",
    "thirdEye": "How clear do you feel about your life purpose and direction?",
    "crown": "How connected do you feel to a sense of meaning and spiritual wholeness?",
}

STEP_TEXT = (
    ("Mind Level Assessment", "Explore your mental patterns and thought processes"),
    ("Emotional Awareness", "Assess your emotional responses and feelings"),
    ("Physical Experience", "Evaluate your physical sensations and experiences"),
    ("Situational Response", "Examine how you respond to specific situations"),
    ("Reflection & Integration", "Integrate insights from all dimensions of experience"),
)

FREQUENCY_OPTIONS = (
    AnswerOption(value=1, label="Never", description="This doesn't apply to me at all"),
    AnswerOption(value=2, label="Rarely", description="This applies to me occasionally"),
    AnswerOption(value=3, label="Sometimes", description="This applies to me about half the time"),
    AnswerOption(value=4, label="Often", description="This applies to me most of the time"),
    AnswerOption(value=5, label="Always", description="This applies to me consistently"),
)

SITUATIONAL_OPTIONS = (
    AnswerOption(value=1, label="Very uncomfortable", description="I would avoid this completely"),
    AnswerOption(value=2, label="Somewhat uncomfortable", description="I would feel anxious but try"),
    AnswerOption(value=3, label="Neutral", description="I could manage this situation"),
    AnswerOption(value=4, label="Somewhat comfortable", description="I would feel at ease"),
    AnswerOption(value=5, label="Very comfortable", description="I would thrive in this situation"),
)

REFLECTION_OPTIONS = (
    AnswerOption(value=1, label="Not at all", description="This is a significant challenge for me"),
    AnswerOption(value=2, label="Slightly", description="I struggle with this frequently"),
    AnswerOption(value=3, label="Moderately", description="I have mixed success with this"),
    AnswerOption(value=4, label="Considerably", description="I do this well most of the time"),
    AnswerOption(value=5, label="Completely", description="This is a consistent strength of mine"),
)


def _category_questions(category: QuestionCategory, with_inverse: bool) -> List[AssessmentQuestion]:
    questions = []
    for key in CHAKRA_KEYS:
        questions.append(AssessmentQuestion(
            id=f"{key}_{category.value}_1",
            text=QUESTION_TEMPLATES[key][category],
            chakra=key,
            category=category
        ))
        if with_inverse:
            questions.append(AssessmentQuestion(
                id=f"{key}_{category.value}_inverse_1",
                text=INVERSE_TEMPLATES[key][category],
                chakra=key,
                inverse_scoring=True,
                category=category
            ))
    return questions


def generate_questions() -> List[AssessmentStep]:
    """The five-step questionnaire, one question per chakra and category"""
    reflection = [
        AssessmentQuestion(
            id=f"reflection_{index}",
            text=REFLECTION_TEMPLATES[key],
            chakra=key,
            category=QuestionCategory.REFLECTION
        )
        for index, key in enumerate(CHAKRA_KEYS, start=1)
    ]
    groups = [
        _category_questions(QuestionCategory.MIND, with_inverse=True),
        _category_questions(QuestionCategory.EMOTIONAL, with_inverse=True),
        _category_questions(QuestionCategory.PHYSICAL, with_inverse=False),
        _category_questions(QuestionCategory.SITUATIONAL, with_inverse=False),
        reflection,
    ]
    return [
        AssessmentStep(title=title, description=description, questions=tuple(questions))
        for (title, description), questions in zip(STEP_TEXT, groups)
    ]


def all_questions() -> List[AssessmentQuestion]:
    return [question for step in generate_questions() for question in step.questions]


def options_for(question: AssessmentQuestion) -> Tuple[AnswerOption, ...]:
    """Answer scale shown for a question"""
    if question.category == QuestionCategory.SITUATIONAL:
        return SITUATIONAL_OPTIONS
    if question.category == QuestionCategory.REFLECTION:
        return REFLECTION_OPTIONS
    return FREQUENCY_OPTIONS


def _collect_scores(answers: Mapping[str, int],
                    questions: Optional[Iterable[AssessmentQuestion]]) -> Dict[str, List[int]]:
    by_id = {question.id: question for question in (questions if questions is not None else all_questions())}
    scores: Dict[str, List[int]] = {key: [] for key in CHAKRA_KEYS}

    for question_id, answer in answers.items():
        question = by_id.get(question_id)
        if question is None:
            raise InvalidAnswerError(f"Unknown question: {question_id!r}")
        if not MIN_ANSWER <= answer <= MAX_ANSWER:
            raise InvalidAnswerError(
                f"Answer to {question_id!r} must be between {MIN_ANSWER} and {MAX_ANSWER}, got {answer}"
            )

        score = MAX_ANSWER + 1 - answer if question.inverse_scoring else answer
        targets = CHAKRA_KEYS if question.chakra == ALL_CHAKRAS else (question.chakra,)
        for key in targets:
            scores[key].append(score)

    return scores


def chakra_scores(answers: Mapping[str, int],
                  questions: Optional[Iterable[AssessmentQuestion]] = None) -> Dict[str, float]:
    """Average answer per chakra scaled to 1-10, one decimal.

    Chakras without answers get the mid-scale default.
    """
    result = {}
    for key, scores in _collect_scores(answers, questions).items():
        if not scores:
            result[key] = float(UNANSWERED_VALUE)
            continue
        scaled = sum(scores) / len(scores) * 2
        result[key] = math.floor(scaled * 10 + 0.5) / 10
    return result


def score_answers(answers: Mapping[str, int],
                  questions: Optional[Iterable[AssessmentQuestion]] = None) -> ChakraValues:
    """Questionnaire answers as integer chakra values.

    The scaled average (2-10) is rounded half up to a whole number so the
    result fits ChakraValues.
    """
    values = {}
    for key, scores in _collect_scores(answers, questions).items():
        if not scores:
            values[key] = UNANSWERED_VALUE
            continue
        scaled = sum(scores) / len(scores) * 2
        values[key] = int(math.floor(scaled + 0.5))

    if not answers:
        logger.info("Empty questionnaire, returning the default profile")

    return ChakraValues(**values)
