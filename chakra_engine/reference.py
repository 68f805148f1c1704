"""Static reference data for the seven chakras"""
from types import MappingProxyType
from typing import Dict, Mapping, Tuple

from pydantic import BaseModel, ConfigDict

from .exceptions import UnknownChakraError


class ChakraInfo(BaseModel):
    """Fixed metadata for one chakra"""
    model_config = ConfigDict(frozen=True)

    key: str
    name: str
    sanskrit_name: str
    color: str
    location: str
    element: str
    description: str
    balanced_traits: Tuple[str, ...]
    imbalanced_traits: Tuple[str, ...]
    underactive_symptoms: Tuple[str, ...]
    overactive_symptoms: Tuple[str, ...]
    healing_practices: Tuple[str, ...]
    affirmations: Tuple[str, ...]
    physical_associations: Tuple[str, ...]


# Canonical order: root -> crown
CHAKRAS: Tuple[ChakraInfo, ...] = (
    ChakraInfo(
        key="root",
        name="Root Chakra",
        sanskrit_name="Muladhara",
        color="#DC143C",  # Red
        location="Base of the spine",
        element="Earth",
        description="Grounding, stability, and basic needs",
        balanced_traits=("Stability", "Security", "Groundedness", "Vitality"),
        imbalanced_traits=("Fear", "Anxiety", "Insecurity", "Material obsession"),
        underactive_symptoms=(
            "fear and anxiety",
            "feeling disconnected from your body",
            "financial insecurity",
            "restlessness",
        ),
        overactive_symptoms=(
            "materialism and greed",
            "resistance to change",
            "sluggishness",
            "hoarding",
        ),
        healing_practices=(
            "Grounding exercises",
            "Walking barefoot in nature",
            "Gardening",
            "Eating root vegetables",
        ),
        affirmations=(
            "I am safe and secure.",
            "I am grounded in the present moment.",
            "I have everything I need.",
        ),
        physical_associations=("Legs", "Feet", "Spine", "Immune system"),
    ),
    ChakraInfo(
        key="sacral",
        name="Sacral Chakra",
        sanskrit_name="Svadhisthana",
        color="#FF7F50",  # Orange
        location="Lower abdomen",
        element="Water",
        description="Creativity, sexuality, and emotional flow",
        balanced_traits=("Creativity", "Emotional fluidity", "Healthy sexuality", "Joy"),
        imbalanced_traits=("Emotional numbness", "Sexual issues", "Creative blocks", "Addiction"),
        underactive_symptoms=(
            "emotional numbness",
            "creative blocks",
            "low libido",
            "fear of change",
        ),
        overactive_symptoms=(
            "emotional volatility",
            "addictive tendencies",
            "over-indulgence",
            "codependency",
        ),
        healing_practices=(
            "Dancing",
            "Creative arts",
            "Free movement",
            "Hip-opening yoga",
        ),
        affirmations=(
            "I embrace pleasure and joy.",
            "My creativity flows freely.",
            "I honor my emotions.",
        ),
        physical_associations=("Reproductive organs", "Kidneys", "Bladder", "Lower back"),
    ),
    ChakraInfo(
        key="solarPlexus",
        name="Solar Plexus Chakra",
        sanskrit_name="Manipura",
        color="#FFD700",  # Yellow
        location="Above the navel",
        element="Fire",
        description="Personal power, will, and transformation",
        balanced_traits=("Confidence", "Clear boundaries", "Self-discipline", "Personal power"),
        imbalanced_traits=("Control issues", "Low self-esteem", "Anger issues", "Passivity"),
        underactive_symptoms=(
            "low self-esteem",
            "indecisiveness",
            "passivity",
            "lack of direction",
        ),
        overactive_symptoms=(
            "controlling behaviour",
            "anger and aggression",
            "perfectionism",
            "stubbornness",
        ),
        healing_practices=(
            "Core strengthening",
            "Setting boundaries",
            "Empowering affirmations",
            "Sun salutations",
        ),
        affirmations=(
            "I am worthy of my own respect.",
            "I stand in my personal power.",
            "I make choices with confidence.",
        ),
        physical_associations=("Digestive system", "Liver", "Pancreas", "Stomach"),
    ),
    ChakraInfo(
        key="heart",
        name="Heart Chakra",
        sanskrit_name="Anahata",
        color="#3CB371",  # Green
        location="Center of the chest",
        element="Air",
        description="Love, compassion, and emotional balance",
        balanced_traits=("Compassion", "Self-love", "Empathy", "Forgiveness"),
        imbalanced_traits=("Jealousy", "Co-dependency", "Grief", "Fear of intimacy"),
        underactive_symptoms=(
            "difficulty trusting others",
            "loneliness and isolation",
            "holding grudges",
            "fear of intimacy",
        ),
        overactive_symptoms=(
            "people-pleasing",
            "jealousy",
            "codependency",
            "poor boundaries in relationships",
        ),
        healing_practices=(
            "Compassion meditation",
            "Heart-opening yoga",
            "Deep breathing",
            "Forgiveness work",
        ),
        affirmations=(
            "I give and receive love freely.",
            "I forgive myself and others.",
            "My heart is open.",
        ),
        physical_associations=("Heart", "Lungs", "Arms", "Circulatory system"),
    ),
    ChakraInfo(
        key="throat",
        name="Throat Chakra",
        sanskrit_name="Vishuddha",
        color="#1E90FF",  # Blue
        location="Throat area",
        element="Sound",
        description="Expression, communication, and truth",
        balanced_traits=("Clear communication", "Authenticity", "Creative expression", "Truth"),
        imbalanced_traits=("Fear of speaking", "Gossiping", "Inability to listen", "Lying"),
        underactive_symptoms=(
            "fear of speaking up",
            "difficulty expressing feelings",
            "shyness",
            "feeling unheard",
        ),
        overactive_symptoms=(
            "talking over others",
            "gossiping",
            "harsh or critical speech",
            "inability to listen",
        ),
        healing_practices=(
            "Singing",
            "Chanting",
            "Journaling",
            "Speaking your truth",
        ),
        affirmations=(
            "I express myself with clarity.",
            "My voice matters.",
            "I speak my truth with kindness.",
        ),
        physical_associations=("Throat", "Thyroid", "Neck", "Mouth and jaw"),
    ),
    ChakraInfo(
        key="thirdEye",
        name="Third Eye Chakra",
        sanskrit_name="Ajna",
        color="#483D8B",  # Indigo
        location="Center of the forehead",
        element="Light",
        description="Intuition, imagination, and clarity of thought",
        balanced_traits=("Intuition", "Clarity", "Wisdom", "Imagination"),
        imbalanced_traits=("Overthinking", "Confusion", "Hallucinations", "Poor memory"),
        underactive_symptoms=(
            "poor intuition",
            "difficulty visualizing",
            "confusion",
            "rigid thinking",
        ),
        overactive_symptoms=(
            "overthinking",
            "vivid or disturbing dreams",
            "difficulty concentrating",
            "detachment from reality",
        ),
        healing_practices=(
            "Visualization",
            "Dream journaling",
            "Meditation",
            "Star gazing",
        ),
        affirmations=(
            "I trust my intuition.",
            "I see clearly.",
            "I am open to inner wisdom.",
        ),
        physical_associations=("Eyes", "Brain", "Pituitary gland", "Forehead"),
    ),
    ChakraInfo(
        key="crown",
        name="Crown Chakra",
        sanskrit_name="Sahasrara",
        color="#9370DB",  # Violet
        location="Top of the head",
        element="Thought",
        description="Connection to universal consciousness and spirituality",
        balanced_traits=("Spiritual connection", "Higher awareness", "Unity", "Wisdom"),
        imbalanced_traits=("Disconnection", "Cynicism", "Over-intellectualization", "Spiritual obsession"),
        underactive_symptoms=(
            "spiritual disconnection",
            "cynicism",
            "lack of purpose",
            "closed-mindedness",
        ),
        overactive_symptoms=(
            "spiritual obsession",
            "disconnection from the body",
            "over-intellectualization",
            "escapism",
        ),
        healing_practices=(
            "Meditation",
            "Silent reflection",
            "Visualization",
            "Prayer",
        ),
        affirmations=(
            "I am connected to something greater.",
            "I trust the journey of my life.",
            "I am open to divine wisdom.",
        ),
        physical_associations=("Brain", "Nervous system", "Pineal gland", "Skin"),
    ),
)

CHAKRA_KEYS: Tuple[str, ...] = tuple(chakra.key for chakra in CHAKRAS)

CHAKRA_BY_KEY: Mapping[str, ChakraInfo] = MappingProxyType(
    {chakra.key: chakra for chakra in CHAKRAS}
)


def get_chakra(key: str) -> ChakraInfo:
    """Returns the reference entry for a chakra key"""
    try:
        return CHAKRA_BY_KEY[key]
    except KeyError:
        raise UnknownChakraError(key) from None


def reference_table() -> Dict[str, dict]:
    """Reference table as plain dicts, for serialization"""
    return {chakra.key: chakra.model_dump() for chakra in CHAKRAS}
