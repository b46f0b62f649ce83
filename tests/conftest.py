import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import workbook_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from workbook_toolkit.core.models import (  # noqa: E402
    BlankSentence,
    BookConfig,
    BookSection,
    ChoiceQuestion,
    CorrectionSentence,
    ErrorCorrectionExercise,
    FillInBlankExercise,
    GeneratedBook,
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
    WordSearchExercise,
)


# Common test fixtures
@pytest.fixture
def make_config():
    """Factory for a valid BookConfig with overridable fields."""
    def _create(**overrides) -> BookConfig:
        fields = dict(
            title="English Grammar Practice",
            book_type="grammar_workbook",
            level="A2",
            topic="Travel",
            page_count=40,
            exercise_types=("fill_in_blank", "multiple_choice"),
            author_name="Jane Doe",
            trim_size="6x9",
            include_answer_key=True,
        )
        fields.update(overrides)
        return BookConfig(**fields)
    return _create


@pytest.fixture
def true_false_exercise() -> TrueFalseExercise:
    return TrueFalseExercise(
        title="Weather Facts",
        instructions="Circle True or False.",
        statements=(TrueFalseStatement(statement="The sky is blue.", is_true=True),),
    )


@pytest.fixture
def multiple_choice_exercise() -> MultipleChoiceExercise:
    return MultipleChoiceExercise(
        title="Pick One",
        instructions="Choose the correct answer.",
        questions=(
            ChoiceQuestion(question="Which letter?", options=("a", "b", "c", "d"), correct_index=2),
        ),
    )


@pytest.fixture
def matching_exercise() -> MatchingExercise:
    return MatchingExercise(
        title="Animals",
        instructions="Match each animal to its sound.",
        pairs=(
            MatchingPair(left="cat", right="meow"),
            MatchingPair(left="dog", right="woof"),
            MatchingPair(left="cow", right="moo"),
            MatchingPair(left="duck", right="quack"),
        ),
    )


@pytest.fixture
def word_search_exercise() -> WordSearchExercise:
    return WordSearchExercise(
        title="Find the Words",
        instructions="Find each word.",
        words=("train", "ticket", "platform", "luggage"),
    )


@pytest.fixture
def all_exercises(
    true_false_exercise,
    multiple_choice_exercise,
    matching_exercise,
    word_search_exercise,
):
    """One exercise of every variant."""
    return (
        FillInBlankExercise(
            title="Travel Verbs",
            instructions="Fill in the blank.",
            sentences=(BlankSentence(text="I ___ to Paris.", blank="went", hint="go"),),
        ),
        multiple_choice_exercise,
        matching_exercise,
        true_false_exercise,
        SentenceReorderExercise(
            title="Word Order",
            instructions="Put the words in order.",
            sentences=(ReorderSentence(scrambled=("train", "the", "missed", "I"), correct="I missed the train."),),
        ),
        ErrorCorrectionExercise(
            title="Spot the Mistake",
            instructions="Correct each sentence.",
            sentences=(CorrectionSentence(incorrect="She go home.", correct="She goes home.", error_type="verb agreement"),),
        ),
        ReadingPassageExercise(
            title="At the Station",
            instructions="Read and answer.",
            passage="Tom waited at the station for the late train.",
            questions=(PassageQuestion(question="Where did Tom wait?", answer="At the station."),),
        ),
        ShortAnswerExercise(
            title="Your Trip",
            instructions="Answer in full sentences.",
            questions=(OpenQuestion(question="Where would you like to go?", sample_answer="I would like to go to Rome."),),
        ),
        word_search_exercise,
    )


@pytest.fixture
def true_false_book(make_config, true_false_exercise) -> GeneratedBook:
    """One section with a single true/false exercise, answer key on."""
    return GeneratedBook(
        config=make_config(trim_size="6x9", include_answer_key=True),
        sections=(BookSection(title="Weather", exercises=(true_false_exercise,)),),
    )


@pytest.fixture
def book_json() -> dict:
    """Generated book in wire format."""
    return {
        "config": {
            "title": "English Grammar Practice",
            "bookType": "grammar_workbook",
            "level": "A2",
            "topic": "Travel",
            "pageCount": 40,
            "trimSize": "8.5x11",
            "exerciseTypes": ["fill_in_blank", "multiple_choice"],
            "includeAnswerKey": True,
            "authorName": "John Doe",
        },
        "sections": [
            {
                "title": "Verbs",
                "description": "Past tense practice.",
                "exercises": [
                    {
                        "type": "fill_in_blank",
                        "title": "Travel Verbs",
                        "instructions": "Fill in the blank.",
                        "content": {
                            "sentences": [{"text": "I ___ to Paris.", "blank": "went", "hint": "go"}],
                        },
                    },
                    {
                        "type": "multiple_choice",
                        "title": "Pick One",
                        "instructions": "Choose.",
                        "content": {
                            "questions": [
                                {"question": "Which?", "options": ["a", "b", "c", "d"], "correctIndex": 1},
                            ],
                        },
                    },
                ],
            },
        ],
    }
