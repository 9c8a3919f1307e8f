"""Tests for accessor invocation and failure classification."""

from typing import Any

import pytest
from pydantic import BaseModel, ConfigDict, ValidationError

from conftest import Article, Tag
from strict_form.accessors import (
    AccessorOutcome,
    ArgumentTypeError,
    FailureKind,
    check_arguments,
    invoke_accessor,
)


class Profile(BaseModel):
    """A pydantic record validating assignments."""

    age: int = 0

    model_config = ConfigDict(validate_assignment=True)


def get_title(article: Article) -> str:
    return article.title


def set_title(title: str, article: Article) -> None:
    article.set_title(title)


def add_tag(tag: Tag, article: Article) -> None:
    article.add_tag(tag)


def set_score(score: float, record: dict) -> None:
    record["score"] = score


class TestCheckArguments:
    """Tests for annotation-based argument checks."""

    def test_matching_arguments_pass(self) -> None:
        check_arguments(set_title, ("Hello", Article()))

    def test_unannotated_accessor_accepts_anything(self) -> None:
        check_arguments(lambda value, record: None, (object(), None))

    def test_record_mismatch_reports_record_position(self) -> None:
        with pytest.raises(ArgumentTypeError) as exc_info:
            check_arguments(set_title, ("Hello", {"title": ""}))

        assert exc_info.value.argument == 1
        assert exc_info.value.expected is Article

    def test_value_mismatch_reports_value_position(self) -> None:
        with pytest.raises(ArgumentTypeError) as exc_info:
            check_arguments(add_tag, ("not a tag", Article()))

        assert exc_info.value.argument == 0

    def test_int_is_accepted_for_float(self) -> None:
        check_arguments(set_score, (3, {}))

    def test_bool_is_rejected_for_float(self) -> None:
        with pytest.raises(ArgumentTypeError):
            check_arguments(set_score, (True, {}))

    def test_generic_annotations_are_not_enforced(self) -> None:
        def reader(record: dict[str, Any] | None) -> Any:
            return record

        check_arguments(reader, (42,))

    def test_callable_object_annotations(self) -> None:
        class Setter:
            def __call__(self, value: int, record: dict) -> None:
                record["value"] = value

        with pytest.raises(ArgumentTypeError) as exc_info:
            check_arguments(Setter(), ("x", {}))

        assert exc_info.value.argument == 0


class TestInvokeAccessor:
    """Tests for invoke_accessor."""

    def test_success_returns_value(self) -> None:
        outcome = invoke_accessor(get_title, Article(title="News"), reading=True)

        assert isinstance(outcome, AccessorOutcome)
        assert outcome.ok
        assert outcome.value == "News"

    def test_reader_failure_is_read_kind(self) -> None:
        outcome = invoke_accessor(get_title, None, reading=True)

        assert not outcome.ok
        assert outcome.value is None
        assert outcome.failure.kind == FailureKind.READ

    def test_writer_record_mismatch_is_record_kind(self) -> None:
        outcome = invoke_accessor(set_title, "Hello", {"title": ""})

        assert outcome.failure.kind == FailureKind.RECORD
        assert outcome.failure.argument == 1

    def test_writer_value_mismatch_is_value_kind(self) -> None:
        outcome = invoke_accessor(add_tag, "not a tag", Article())

        assert outcome.failure.kind == FailureKind.VALUE
        assert outcome.failure.argument == 0
        assert isinstance(outcome.failure.error, ArgumentTypeError)

    def test_accessor_can_blame_the_record(self) -> None:
        def update(value: Any, record: Any) -> None:
            raise ArgumentTypeError(1, expected=Article)

        outcome = invoke_accessor(update, "x", {})

        assert outcome.failure.kind == FailureKind.RECORD

    def test_plain_type_error_is_value_kind(self) -> None:
        def update(value: Any, record: Any) -> None:
            record.total = value + 1

        outcome = invoke_accessor(update, "x", Article())

        assert outcome.failure.kind == FailureKind.VALUE
        assert outcome.failure.argument is None

    def test_pydantic_validation_error_is_value_kind(self) -> None:
        def update_age(value: Any, profile: Profile) -> None:
            profile.age = value

        profile = Profile()
        outcome = invoke_accessor(update_age, "not a number", profile)

        assert outcome.failure.kind == FailureKind.VALUE
        assert isinstance(outcome.failure.error, ValidationError)
        assert profile.age == 0

    def test_other_exceptions_propagate(self) -> None:
        def update(value: Any, record: Any) -> None:
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            invoke_accessor(update, "x", {})

    def test_accessor_not_called_when_check_fails(self) -> None:
        article = Article()
        invoke_accessor(add_tag, "not a tag", article)

        assert article.calls == []
