"""
Unit Tests for BookConfig

Construction-time validation of the book configuration.
"""

import pytest

from workbook_toolkit.core.models import BookConfig, BookType, CEFRLevel, ExerciseType, TrimSize


class TestBookConfig:
    """Tests for BookConfig dataclass."""

    def test_init_when_valid_values_then_coerces_enums(self, make_config):
        """Wire strings should become enum members."""
        config = make_config()
        assert config.book_type is BookType.GRAMMAR_WORKBOOK
        assert config.level is CEFRLevel.A2
        assert config.trim_size is TrimSize.SIX_BY_NINE
        assert config.exercise_types == (ExerciseType.FILL_IN_BLANK, ExerciseType.MULTIPLE_CHOICE)

    def test_init_when_trim_size_omitted_then_defaults_to_letter(self):
        config = BookConfig(
            title="Valid Title",
            book_type="grammar_workbook",
            level="A2",
            topic="Travel",
            page_count=40,
            exercise_types=("fill_in_blank", "multiple_choice"),
            author_name="John",
        )
        assert config.trim_size is TrimSize.LETTER
        assert config.include_answer_key is True

    def test_init_when_title_too_short_then_raises_error(self, make_config):
        with pytest.raises(ValueError, match="title must be 3-100"):
            make_config(title="AB")

    def test_init_when_page_count_below_minimum_then_raises_error(self, make_config):
        with pytest.raises(ValueError, match="page_count"):
            make_config(page_count=5)

    def test_init_when_one_exercise_type_then_raises_error(self, make_config):
        with pytest.raises(ValueError, match="exercise_types"):
            make_config(exercise_types=("fill_in_blank",))

    def test_init_when_unknown_trim_size_then_raises_error(self, make_config):
        with pytest.raises(ValueError, match="Invalid trim_size"):
            make_config(trim_size="5x8")

    def test_init_when_unknown_level_then_raises_error(self, make_config):
        with pytest.raises(ValueError, match="Invalid level"):
            make_config(level="D1")

    def test_init_when_frozen_then_immutable(self, make_config):
        config = make_config()
        with pytest.raises(AttributeError):
            config.title = "Other"  # type: ignore


class TestEnums:
    """Tests for the closed enumerations."""

    def test_exercise_type_has_nine_members(self):
        assert len(ExerciseType) == 9

    def test_cefr_level_has_six_tiers(self):
        assert [level.value for level in CEFRLevel] == ["A1", "A2", "B1", "B2", "C1", "C2"]
