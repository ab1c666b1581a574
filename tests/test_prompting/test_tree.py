"""Tests for QuestionsBuilder and QuestionTree (stencil.prompting.tree)."""

from __future__ import annotations

import pytest

from stencil.errors import QuestionDefinitionError
from stencil.prompting.answers import Answers
from stencil.prompting.questions import ConfirmationQuestion, OptionsQuestion, PlainQuestion
from stencil.prompting.tree import QuestionsBuilder, QuestionTree

pytestmark = pytest.mark.unit


class TestBuild:
    def test_keeps_insertion_order(self):
        def setup(q: QuestionsBuilder) -> None:
            q.question("name", "Name")
            q.options("db", "Database", ["a", "b"])
            q.confirmation("ok", "Continue?")

        tree = QuestionTree.build(setup, name="project")
        assert tree.names == ["name", "db", "ok"]
        assert [type(q) for q in tree] == [PlainQuestion, OptionsQuestion, ConfirmationQuestion]
        assert tree.name == "project"
        assert len(tree) == 3
        assert tree[1].name == "db"

    def test_empty_tree_rejected(self):
        with pytest.raises(QuestionDefinitionError, match="empty"):
            QuestionsBuilder().build()

    def test_duplicate_name_reported(self):
        def setup(q: QuestionsBuilder) -> None:
            q.question("name", "Name")
            q.question("other", "Other")
            q.confirmation("name", "Again?")

        with pytest.raises(QuestionDefinitionError, match="Duplicated questions with name name"):
            QuestionTree.build(setup)

    def test_first_duplicate_reported(self):
        builder = QuestionsBuilder()
        for name in ["a", "b", "b", "a"]:
            builder.question(name, name)
        with pytest.raises(QuestionDefinitionError, match="name a$"):
            builder.build()

    def test_empty_name_rejected(self):
        builder = QuestionsBuilder()
        builder.question("", "Nameless")
        with pytest.raises(QuestionDefinitionError, match="name must not be empty"):
            builder.build()

    def test_empty_options_fail_whole_construction(self):
        def setup(q: QuestionsBuilder) -> None:
            q.question("name", "Name")
            q.options("db", "Database", [])

        with pytest.raises(QuestionDefinitionError):
            QuestionTree.build(setup)


class TestConfigure:
    def test_configuration_applied_before_append(self):
        seen: list[str] = []

        def configure(question: PlainQuestion) -> None:
            seen.append(question.name)
            question.set_default("demo")

        builder = QuestionsBuilder()
        builder.question("name", "Name", configure)
        tree = builder.build()
        assert seen == ["name"]
        assert tree[0].default_value(Answers()) == "demo"

    def test_double_validation_in_configure_fails_construction(self):
        def configure(question: PlainQuestion) -> None:
            question.validate_with(lambda value: None)
            question.validate_with(lambda value: None)

        with pytest.raises(QuestionDefinitionError):
            QuestionTree.build(lambda q: q.question("name", "Name", configure))


class TestLookup:
    def test_get(self):
        tree = QuestionTree.build(lambda q: q.question("name", "Name"))
        assert tree.get("name") is tree[0]
        assert tree.get("missing") is None

    def test_tree_is_read_only(self):
        tree = QuestionTree.build(lambda q: q.question("name", "Name"))
        assert not hasattr(tree, "append")
        with pytest.raises(TypeError):
            tree[0] = PlainQuestion("x", "X")  # type: ignore[index]

    def test_questions_frozen_after_build(self):
        tree = QuestionTree.build(lambda q: q.question("name", "Name"))
        assert tree[0].frozen
        with pytest.raises(QuestionDefinitionError, match="can no longer be changed"):
            tree[0].set_default("late")


class TestDirectConstruction:
    def test_same_checks_as_builder(self):
        with pytest.raises(QuestionDefinitionError, match="must not be empty"):
            QuestionTree([])
        with pytest.raises(QuestionDefinitionError, match="Duplicated questions with name a"):
            QuestionTree([PlainQuestion("a", "A"), PlainQuestion("a", "B")])

    def test_accepts_any_iterable(self):
        questions = (PlainQuestion(name, name.upper()) for name in ["a", "b"])
        tree = QuestionTree(questions, name="m")
        assert tree.names == ["a", "b"]
        assert all(q.frozen for q in tree)
