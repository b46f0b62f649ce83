"""
Unit tests for answer extraction.
"""

import random

from workbook_toolkit.builder.layout.answers import extract_answer
from workbook_toolkit.builder.layout.exercises import render_exercise
from workbook_toolkit.core.models import (
    BlankSentence,
    ChoiceQuestion,
    CorrectionSentence,
    ErrorCorrectionExercise,
    FillInBlankExercise,
    MatchingExercise,
    MatchingPair,
    MultipleChoiceExercise,
    OpenQuestion,
    PassageQuestion,
    ReadingPassageExercise,
    ReorderSentence,
    SentenceReorderExercise,
    ShortAnswerExercise,
    TrueFalseExercise,
    TrueFalseStatement,
    UnknownExercise,
)


class TestExtractAnswer:
    """Tests for extract_answer()."""

    def test_extract_when_every_variant_then_expected_text(self, all_exercises):
        answers = [extract_answer(e) for e in all_exercises]

        assert answers == [
            "1. went",
            "1. C",
            "1. cat -> meow  2. dog -> woof  3. cow -> moo  4. duck -> quack",
            "1. True",
            "1. I missed the train.",
            "1. She goes home. (verb agreement)",
            "1. At the station.",
            "1. I would like to go to Rome.",
            None,
        ]

    def test_extract_when_several_inline_items_then_double_space_joined(self):
        exercise = TrueFalseExercise(
            title="Facts",
            instructions="Decide.",
            statements=(
                TrueFalseStatement(statement="A", is_true=True),
                TrueFalseStatement(statement="B", is_true=False),
            ),
        )
        assert extract_answer(exercise) == "1. True  2. False"

    def test_extract_when_several_long_items_then_newline_joined(self):
        exercise = ErrorCorrectionExercise(
            title="Fix",
            instructions="Correct.",
            sentences=(
                CorrectionSentence(incorrect="a", correct="A.", error_type="capital"),
                CorrectionSentence(incorrect="b", correct="B.", error_type=None),
            ),
        )
        assert extract_answer(exercise) == "1. A. (capital)\n2. B."

    def test_extract_when_item_missing_answer_then_skipped_keeping_numbers(self):
        exercise = FillInBlankExercise(
            title="Blanks",
            instructions="Fill.",
            sentences=(
                BlankSentence(text="x ___", blank=None),
                BlankSentence(text="y ___", blank="yes"),
            ),
        )
        assert extract_answer(exercise) == "2. yes"

    def test_extract_when_correct_index_out_of_range_then_none(self):
        exercise = MultipleChoiceExercise(
            title="Pick",
            instructions="Choose.",
            questions=(ChoiceQuestion(question="?", options=("a", "b", "c", "d"), correct_index=4),),
        )
        assert extract_answer(exercise) is None

    def test_extract_when_no_items_then_none(self):
        assert extract_answer(MatchingExercise(title="Empty", instructions="Match.")) is None

    def test_extract_when_unknown_type_then_none(self):
        exercise = UnknownExercise(title="Crossword", instructions="Solve.", raw_type="crossword")
        assert extract_answer(exercise) is None

    def test_extract_when_matching_rendered_first_then_true_pairing(self, matching_exercise):
        before = extract_answer(matching_exercise)
        render_exercise(matching_exercise, 0, rng=random.Random(99))

        assert extract_answer(matching_exercise) == before
        assert before.startswith("1. cat -> meow")

    def test_extract_when_pair_incomplete_then_pair_skipped(self):
        exercise = MatchingExercise(
            title="Half",
            instructions="Match.",
            pairs=(MatchingPair(left="sun", right=None), MatchingPair(left="moon", right="night")),
        )
        assert extract_answer(exercise) == "2. moon -> night"


class TestUnprintedItems:
    """Items the renderer skips never reach the answer key."""

    @staticmethod
    def _body(exercise):
        return render_exercise(exercise, 0, rng=random.Random(0)).texts[3:]

    def test_fill_in_blank_when_text_missing_then_answer_omitted(self):
        exercise = FillInBlankExercise(
            title="Blanks",
            instructions="Fill.",
            sentences=(
                BlankSentence(text=None, blank="went"),
                BlankSentence(text="She ___ tea.", blank="drinks"),
            ),
        )

        assert self._body(exercise) == ("2. She ________ tea.",)
        assert extract_answer(exercise) == "2. drinks"

    def test_multiple_choice_when_options_missing_then_answer_omitted(self):
        exercise = MultipleChoiceExercise(
            title="Pick",
            instructions="Choose.",
            questions=(
                ChoiceQuestion(question="Broken?", options=("a", "b"), correct_index=0),
                ChoiceQuestion(question="Fine?", options=("a", "b", "c", "d"), correct_index=1),
            ),
        )

        assert extract_answer(exercise) == "2. B"

    def test_matching_when_left_missing_then_pair_omitted(self):
        exercise = MatchingExercise(
            title="Pairs",
            instructions="Match.",
            pairs=(MatchingPair(left=None, right="meow"), MatchingPair(left="dog", right="woof")),
        )

        assert [line.cells[0] for line in render_exercise(exercise, 0, rng=random.Random(0)).lines[3:]] == ["2. dog"]
        assert extract_answer(exercise) == "2. dog -> woof"

    def test_true_false_when_statement_missing_then_answer_omitted(self):
        exercise = TrueFalseExercise(
            title="Facts",
            instructions="Decide.",
            statements=(
                TrueFalseStatement(statement=None, is_true=True),
                TrueFalseStatement(statement="Ice is cold.", is_true=True),
            ),
        )

        assert self._body(exercise) == ("2. Ice is cold.   True / False",)
        assert extract_answer(exercise) == "2. True"

    def test_sentence_reorder_when_words_missing_then_none(self):
        exercise = SentenceReorderExercise(
            title="Order",
            instructions="Reorder.",
            sentences=(ReorderSentence(scrambled=(), correct="I missed the train."),),
        )

        assert self._body(exercise) == ()
        assert extract_answer(exercise) is None

    def test_error_correction_when_incorrect_missing_then_answer_omitted(self):
        exercise = ErrorCorrectionExercise(
            title="Fix",
            instructions="Correct.",
            sentences=(
                CorrectionSentence(incorrect=None, correct="She goes home.", error_type="agreement"),
                CorrectionSentence(incorrect="He go.", correct="He goes.", error_type=None),
            ),
        )

        assert extract_answer(exercise) == "2. He goes."

    def test_reading_passage_when_question_missing_then_answer_omitted(self):
        exercise = ReadingPassageExercise(
            title="Read",
            instructions="Answer.",
            passage="Tom took the bus.",
            questions=(
                PassageQuestion(question=None, answer="Tom."),
                PassageQuestion(question="How did he travel?", answer="By bus."),
            ),
        )

        assert extract_answer(exercise) == "2. By bus."

    def test_short_answer_when_question_missing_then_none(self):
        exercise = ShortAnswerExercise(
            title="Write",
            instructions="Answer.",
            questions=(OpenQuestion(question=None, sample_answer="I like Rome."),),
        )

        assert self._body(exercise) == ()
        assert extract_answer(exercise) is None
