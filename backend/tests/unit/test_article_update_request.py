"""Unit tests for ArticleUpdateRequest and slug derivation."""

import dataclasses

import pytest

from conduit.domain.entities import ArticleUpdateRequest, slugify


def test_fields_default_to_absent():
    request = ArticleUpdateRequest()
    assert request.title_to_update is None
    assert request.description_to_update is None
    assert request.body_to_update is None
    assert request.is_empty()


def test_fields_are_independent():
    request = ArticleUpdateRequest(description_to_update="only this")
    assert request.description_to_update == "only this"
    assert request.title_to_update is None
    assert not request.is_empty()


def test_request_is_immutable():
    request = ArticleUpdateRequest(body_to_update="x")
    with pytest.raises(dataclasses.FrozenInstanceError):
        request.body_to_update = "y"


@pytest.mark.parametrize(
    ("title", "expected"),
    [
        ("How to train your dragon", "how-to-train-your-dragon"),
        ("  Spaces  around  ", "spaces-around"),
        ("What's new? v2.0", "what-s-new-v2-0"),
        ("snake_case_title", "snake-case-title"),
    ],
)
def test_slugify(title: str, expected: str):
    assert slugify(title) == expected
