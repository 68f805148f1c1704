"""
Tests for the assessment questionnaire and answer scoring
"""

import pytest

from chakra_engine import CHAKRA_KEYS, ChakraValues
from chakra_engine.assessment import (
    FREQUENCY_OPTIONS,
    REFLECTION_OPTIONS,
    SITUATIONAL_OPTIONS,
    AssessmentQuestion,
    QuestionCategory,
    all_questions,
    chakra_scores,
    generate_questions,
    options_for,
    score_answers,
)
from chakra_engine.exceptions import ChakraEngineError, InvalidAnswerError


class TestQuestionnaire:

    def test_five_steps(self):
        steps = generate_questions()
        assert [step.title for step in steps] == [
            "Mind Level Assessment",
            "Emotional Awareness",
            "Physical Experience",
            "Situational Response",
            "Reflection & Integration",
        ]
        assert [len(step.questions) for step in steps] == [14, 14, 7, 7, 7]

    def test_question_ids_are_unique(self):
        ids = [question.id for question in all_questions()]
        assert len(ids) == len(set(ids))
        assert "root_mind_1" in ids
        assert "thirdEye_emotional_inverse_1" in ids
        assert "reflection_7" in ids

    def test_every_chakra_has_seven_questions(self):
        questions = all_questions()
        for key in CHAKRA_KEYS:
            assert len([q for q in questions if q.chakra == key]) == 7

    def test_inverse_questions(self):
        inverse = [q for q in all_questions() if q.inverse_scoring]
        assert len(inverse) == 14
        assert all(q.id.endswith("_inverse_1") for q in inverse)

    def test_options_by_category(self):
        by_id = {q.id: q for q in all_questions()}
        assert options_for(by_id["root_situational_1"]) == SITUATIONAL_OPTIONS
        assert options_for(by_id["reflection_1"]) == REFLECTION_OPTIONS
        assert options_for(by_id["root_mind_inverse_1"]) == FREQUENCY_OPTIONS
        assert [option.value for option in FREQUENCY_OPTIONS] == [1, 2, 3, 4, 5]


class TestScoreAnswers:
    """Tests for score_answers(answers) and chakra_scores(answers)"""

    def test_empty_answers_give_default_profile(self):
        assert score_answers({}) == ChakraValues.default()

    def test_unanswered_chakras_stay_mid_scale(self):
        values = score_answers({"root_mind_1": 4})
        assert values.root == 8
        assert values.sacral == 5
        assert values.crown == 5

    def test_inverse_scoring(self):
        assert score_answers({"root_mind_inverse_1": 1}).root == 10
        assert score_answers({"root_mind_inverse_1": 5}).root == 2

    def test_average_scaled_to_ten(self):
        values = score_answers({"heart_mind_1": 3, "heart_emotional_1": 4})
        assert values.heart == 7

    def test_rounds_half_up_to_int(self):
        """(3 + 3 + 3 + 4) / 4 * 2 = 6.5"""
        answers = {
            "throat_mind_1": 3,
            "throat_emotional_1": 3,
            "throat_physical_1": 3,
            "throat_situational_1": 4,
        }
        assert chakra_scores(answers)["throat"] == 6.5
        assert score_answers(answers).throat == 7

    def test_one_decimal_scores(self):
        answers = {"crown_mind_1": 4, "crown_emotional_1": 4, "crown_physical_1": 3}
        assert chakra_scores(answers)["crown"] == 7.3
        assert score_answers(answers).crown == 7

    def test_lowest_answers(self):
        answers = {q.id: (5 if q.inverse_scoring else 1) for q in all_questions()}
        assert score_answers(answers) == ChakraValues.default(2)

    def test_highest_answers(self):
        answers = {q.id: (1 if q.inverse_scoring else 5) for q in all_questions()}
        assert score_answers(answers) == ChakraValues.default(10)

    def test_question_for_all_chakras(self):
        questions = [AssessmentQuestion(
            id="overall", text="How grounded do you feel overall?",
            chakra="all", category=QuestionCategory.REFLECTION
        )]
        assert score_answers({"overall": 2}, questions) == ChakraValues.default(4)

    def test_unknown_question(self):
        with pytest.raises(InvalidAnswerError):
            score_answers({"aura_mind_1": 3})

    @pytest.mark.parametrize("answer", [0, 6])
    def test_answer_out_of_range(self, answer):
        with pytest.raises(ChakraEngineError):
            score_answers({"root_mind_1": answer})

    def test_invalid_answer_is_value_error(self):
        with pytest.raises(ValueError):
            score_answers({"root_mind_1": 9})
