"""Database"""
from .database import get_db, init_db
from .models import User, ChakraProfile, EmotionTracking, JournalEntry, HealingRitual

__all__ = ['get_db', 'init_db', 'User', 'ChakraProfile', 'EmotionTracking', 'JournalEntry', 'HealingRitual']
