"""Database models"""
from sqlalchemy import Column, Integer, String, DateTime, Text, ForeignKey, JSON
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from chakra_engine.models import ChakraValues
from .database import Base


class User(Base):
    """Application user"""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, index=True, nullable=False)
    email = Column(String, unique=True, nullable=False)
    name = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    chakra_profile = relationship("ChakraProfile", back_populates="user", uselist=False)
    emotions = relationship("EmotionTracking", back_populates="user")
    journal_entries = relationship("JournalEntry", back_populates="user")


class ChakraProfile(Base):
    """Latest chakra self-assessment of a user"""
    __tablename__ = "chakra_profiles"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), unique=True, nullable=False)

    root_chakra = Column(Integer, nullable=False)
    sacral_chakra = Column(Integer, nullable=False)
    solar_plexus_chakra = Column(Integer, nullable=False)
    heart_chakra = Column(Integer, nullable=False)
    throat_chakra = Column(Integer, nullable=False)
    third_eye_chakra = Column(Integer, nullable=False)
    crown_chakra = Column(Integer, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    user = relationship("User", back_populates="chakra_profile")

    def to_values(self) -> ChakraValues:
        """Stored columns as engine input"""
        return ChakraValues(
            root=self.root_chakra,
            sacral=self.sacral_chakra,
            solar_plexus=self.solar_plexus_chakra,
            heart=self.heart_chakra,
            throat=self.throat_chakra,
            third_eye=self.third_eye_chakra,
            crown=self.crown_chakra
        )

    def apply_values(self, values: ChakraValues):
        """Replaces all seven columns"""
        self.root_chakra = values.root
        self.sacral_chakra = values.sacral
        self.solar_plexus_chakra = values.solar_plexus
        self.heart_chakra = values.heart
        self.throat_chakra = values.throat
        self.third_eye_chakra = values.third_eye
        self.crown_chakra = values.crown


class EmotionTracking(Base):
    """A logged emotion"""
    __tablename__ = "emotion_tracking"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    emotion = Column(String, nullable=False)

    # Intensity (1-10)
    intensity = Column(Integer, nullable=False)
    note = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    user = relationship("User", back_populates="emotions")


class JournalEntry(Base):
    """A journal entry with caller-supplied sentiment and tags"""
    __tablename__ = "journal_entries"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    content = Column(Text, nullable=False)

    # Sentiment (1-10)
    sentiment_score = Column(Integer, nullable=True)
    emotion_tags = Column(JSON, nullable=False, default=list)
    chakra_tags = Column(JSON, nullable=False, default=list)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    user = relationship("User", back_populates="journal_entries")


class HealingRitual(Base):
    """A healing practice from the ritual library"""
    __tablename__ = "healing_rituals"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    type = Column(String, nullable=False)
    target_chakra = Column(String, nullable=True, index=True)
    target_emotion = Column(String, nullable=True)
    instructions = Column(Text, nullable=False)
