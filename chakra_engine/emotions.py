"""Primary emotions and their chakra connections"""
from typing import Dict, Iterable, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from .reference import CHAKRA_KEYS


class EmotionInfo(BaseModel):
    """A primary emotion"""
    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    color: str
    related_emotions: Tuple[str, ...]
    chakra_connection: Tuple[str, ...]


EMOTIONS: Tuple[EmotionInfo, ...] = (
    EmotionInfo(
        name="Joy",
        description="A feeling of great pleasure and happiness",
        color="#FFC107",
        related_emotions=("Happiness", "Contentment", "Pleasure", "Excitement", "Gratitude"),
        chakra_connection=("heart", "sacral"),
    ),
    EmotionInfo(
        name="Sadness",
        description="Feeling or showing sorrow; unhappy",
        color="#2196F3",
        related_emotions=("Grief", "Disappointment", "Hopelessness", "Loneliness", "Despair"),
        chakra_connection=("heart", "throat"),
    ),
    EmotionInfo(
        name="Fear",
        description="An unpleasant emotion caused by the threat of danger, pain, or harm",
        color="#9C27B0",
        related_emotions=("Anxiety", "Worry", "Terror", "Panic", "Insecurity"),
        chakra_connection=("root", "solarPlexus"),
    ),
    EmotionInfo(
        name="Anger",
        description="A strong feeling of annoyance, displeasure, or hostility",
        color="#F44336",
        related_emotions=("Rage", "Frustration", "Irritation", "Resentment", "Bitterness"),
        chakra_connection=("solarPlexus", "sacral"),
    ),
    EmotionInfo(
        name="Disgust",
        description="A feeling of revulsion or strong disapproval aroused by something unpleasant",
        color="#4CAF50",
        related_emotions=("Revulsion", "Aversion", "Distaste", "Contempt", "Loathing"),
        chakra_connection=("sacral", "solarPlexus"),
    ),
    EmotionInfo(
        name="Surprise",
        description="A feeling of mild astonishment or shock caused by something unexpected",
        color="#FFEB3B",
        related_emotions=("Amazement", "Astonishment", "Wonder", "Shock", "Startled"),
        chakra_connection=("thirdEye", "throat"),
    ),
    EmotionInfo(
        name="Anticipation",
        description="Expectation or prediction of future events or experiences",
        color="#FF9800",
        related_emotions=("Hope", "Dread", "Curiosity"),
        chakra_connection=("sacral", "solarPlexus"),
    ),
    EmotionInfo(
        name="Trust",
        description="Firm belief in the reliability, truth, or ability of someone or something",
        color="#8BC34A",
        related_emotions=("Faith", "Confidence", "Security", "Acceptance", "Openness"),
        chakra_connection=("heart", "root"),
    ),
    EmotionInfo(
        name="Love",
        description="A deep feeling of affection, attachment, or devotion",
        color="#E91E63",
        related_emotions=("Affection", "Adoration", "Compassion", "Tenderness", "Longing"),
        chakra_connection=("heart",),
    ),
    EmotionInfo(
        name="Peace",
        description="A state of calm, quiet, tranquility and harmony",
        color="#00BCD4",
        related_emotions=("Calm", "Tranquility", "Serenity", "Stillness"),
        chakra_connection=("crown", "heart"),
    ),
    EmotionInfo(
        name="Guilt",
        description="A feeling of responsibility for wrongdoing",
        color="#607D8B",
        related_emotions=("Remorse", "Regret", "Self-blame", "Inadequacy"),
        chakra_connection=("heart", "sacral"),
    ),
    EmotionInfo(
        name="Shame",
        description="A painful feeling of humiliation caused by wrongdoing or foolishness",
        color="#795548",
        related_emotions=("Embarrassment", "Humiliation", "Self-consciousness", "Disgrace"),
        chakra_connection=("root", "sacral"),
    ),
)


def _build_lookup() -> Dict[str, EmotionInfo]:
    lookup = {}
    # Related names first so primary names always win
    for emotion in EMOTIONS:
        for related in emotion.related_emotions:
            lookup.setdefault(related.lower(), emotion)
    for emotion in EMOTIONS:
        lookup[emotion.name.lower()] = emotion
    return lookup


_EMOTION_LOOKUP = _build_lookup()


def find_emotion(label: str) -> Optional[EmotionInfo]:
    """Finds a primary emotion by its name or one of its related names"""
    if not label:
        return None
    return _EMOTION_LOOKUP.get(label.strip().lower())


def emotion_chakra_links(labels: Iterable[str]) -> Dict[str, int]:
    """Counts how many of the given emotions connect to each chakra"""
    counts = {key: 0 for key in CHAKRA_KEYS}
    for label in labels:
        emotion = find_emotion(label)
        if emotion is None:
            continue
        for key in emotion.chakra_connection:
            counts[key] += 1
    return {key: count for key, count in counts.items() if count}
