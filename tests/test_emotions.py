"""
Tests for emotion lookup and chakra links
"""

from chakra_engine import CHAKRA_KEYS
from chakra_engine.emotions import EMOTIONS, emotion_chakra_links, find_emotion


class TestFindEmotion:

    def test_primary_name(self):
        assert find_emotion("Joy").name == "Joy"

    def test_case_and_whitespace_insensitive(self):
        assert find_emotion("  sadness ").name == "Sadness"

    def test_related_name_resolves_to_primary(self):
        assert find_emotion("anxiety").name == "Fear"
        assert find_emotion("Compassion").name == "Love"

    def test_unknown(self):
        assert find_emotion("meh") is None
        assert find_emotion("") is None


class TestEmotionChakraLinks:

    def test_counts(self):
        links = emotion_chakra_links(["Joy", "Love", "Fear"])
        assert links == {"root": 1, "sacral": 1, "solarPlexus": 1, "heart": 2}

    def test_canonical_order_and_no_zeros(self):
        links = emotion_chakra_links(["Peace", "Surprise"])
        assert list(links) == ["heart", "throat", "thirdEye", "crown"]

    def test_unknown_labels_skipped(self):
        assert emotion_chakra_links(["meh", "blah"]) == {}

    def test_connections_use_chakra_keys(self):
        for emotion in EMOTIONS:
            assert set(emotion.chakra_connection) <= set(CHAKRA_KEYS)
