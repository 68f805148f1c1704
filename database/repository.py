"""Queries used by the API"""
from typing import List, Optional
import logging

from sqlalchemy.orm import Session

from chakra_engine.models import ChakraValues
from .models import User, ChakraProfile, EmotionTracking, JournalEntry, HealingRitual

logger = logging.getLogger(__name__)


def get_user(db: Session, user_id: int) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()


def get_user_by_username(db: Session, username: str) -> Optional[User]:
    return db.query(User).filter(User.username == username).first()


def create_user(db: Session, username: str, email: str, name: str) -> User:
    user = User(username=username, email=email, name=name)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def get_chakra_profile(db: Session, user_id: int) -> Optional[ChakraProfile]:
    return db.query(ChakraProfile).filter(ChakraProfile.user_id == user_id).first()


def get_or_create_chakra_profile(db: Session, user_id: int) -> ChakraProfile:
    """Stored profile, creating the mid-scale default when the user has none"""
    profile = get_chakra_profile(db, user_id)
    if profile is not None:
        return profile

    profile = ChakraProfile(user_id=user_id)
    profile.apply_values(ChakraValues.default())
    db.add(profile)
    db.commit()
    db.refresh(profile)
    logger.info(f"Created default chakra profile for user {user_id}")
    return profile


def save_chakra_profile(db: Session, user_id: int, values: ChakraValues) -> ChakraProfile:
    """Replaces the whole profile (or creates it)"""
    profile = get_chakra_profile(db, user_id)
    if profile is None:
        profile = ChakraProfile(user_id=user_id)
        db.add(profile)

    profile.apply_values(values)
    db.commit()
    db.refresh(profile)
    return profile


def add_emotion(db: Session, user_id: int, emotion: str, intensity: int,
                note: Optional[str] = None) -> EmotionTracking:
    entry = EmotionTracking(user_id=user_id, emotion=emotion, intensity=intensity, note=note)
    db.add(entry)
    db.commit()
    db.refresh(entry)
    return entry


def list_emotions(db: Session, user_id: int, limit: int = 50) -> List[EmotionTracking]:
    """Newest first"""
    return (
        db.query(EmotionTracking)
        .filter(EmotionTracking.user_id == user_id)
        .order_by(EmotionTracking.created_at.desc(), EmotionTracking.id.desc())
        .limit(limit)
        .all()
    )


def add_journal_entry(db: Session, user_id: int, content: str, sentiment_score: Optional[int] = None,
                      emotion_tags: Optional[List[str]] = None,
                      chakra_tags: Optional[List[str]] = None) -> JournalEntry:
    entry = JournalEntry(
        user_id=user_id,
        content=content,
        sentiment_score=sentiment_score,
        emotion_tags=list(emotion_tags or []),
        chakra_tags=list(chakra_tags or [])
    )
    db.add(entry)
    db.commit()
    db.refresh(entry)
    return entry


def list_journal_entries(db: Session, user_id: int, limit: int = 50) -> List[JournalEntry]:
    """Newest first"""
    return (
        db.query(JournalEntry)
        .filter(JournalEntry.user_id == user_id)
        .order_by(JournalEntry.created_at.desc(), JournalEntry.id.desc())
        .limit(limit)
        .all()
    )


def recent_emotions(db: Session, user_id: int, limit: int = 10) -> List[str]:
    """Latest emotion labels from the tracker and journal tags, newest first"""
    timeline = [(entry.created_at, entry.emotion) for entry in list_emotions(db, user_id, limit=limit)]
    for entry in list_journal_entries(db, user_id, limit=limit):
        timeline.extend((entry.created_at, tag) for tag in entry.emotion_tags or [])

    timeline.sort(key=lambda item: item[0], reverse=True)
    return [label for _, label in timeline[:limit]]


def list_rituals(db: Session, target_chakra: Optional[str] = None,
                 target_emotion: Optional[str] = None) -> List[HealingRitual]:
    query = db.query(HealingRitual)
    if target_chakra:
        query = query.filter(HealingRitual.target_chakra == target_chakra)
    if target_emotion:
        query = query.filter(HealingRitual.target_emotion == target_emotion)
    return query.order_by(HealingRitual.id).all()


def create_ritual(db: Session, **fields) -> HealingRitual:
    ritual = HealingRitual(**fields)
    db.add(ritual)
    db.commit()
    db.refresh(ritual)
    return ritual
