from types import SimpleNamespace

import pytest

from problem_service.services.problem_service import is_valid_problem_answer, mask_problem


@pytest.mark.parametrize("answer", [
    {"fields": []},
    {"fields": [{"index": 0, "value": "a"}]},
    {"fields": [{"index": 1, "value": 42}, {"index": 2.5, "value": 3.14}]},
    {"fields": ({"index": 0, "value": ""},)},
])
def test_well_formed_answers_are_valid(answer):
    assert is_valid_problem_answer(answer) is True


@pytest.mark.parametrize("answer", [
    None,
    {},
    "fields",
    {"fields": "not-a-list"},
    {"fields": {"index": 0, "value": "a"}},
    {"fields": [None]},
    {"fields": [{"value": "a"}]},
    {"fields": [{"index": "0", "value": "a"}]},
    {"fields": [{"index": True, "value": "a"}]},
    {"fields": [{"index": 0}]},
    {"fields": [{"index": 0, "value": None}]},
    {"fields": [{"index": 0, "value": ["a"]}]},
    {"fields": [{"index": 0, "value": False}]},
    {"fields": [{"index": 0, "value": "a"}, {"index": 1}]},
])
def test_malformed_answers_are_rejected(answer):
    assert is_valid_problem_answer(answer) is False


def test_validator_accepts_attribute_objects():
    answer = SimpleNamespace(fields=[SimpleNamespace(index=0, value="x")])
    assert is_valid_problem_answer(answer) is True


def test_mask_problem_hides_values_and_keeps_indexes():
    problem = SimpleNamespace(
        id=7,
        order=2,
        topic_id=3,
        answer={"fields": [{"index": 0, "value": "secret"}, {"index": 4, "value": 12}]},
    )

    masked = mask_problem(problem)

    assert masked == {
        "id": 7,
        "order": 2,
        "topic_id": 3,
        "answer": {"fields": [
            {"index": 0, "value": "Student Input"},
            {"index": 4, "value": "Student Input"},
        ]},
    }
    # 元の問題は変更しない
    assert problem.answer["fields"][0]["value"] == "secret"


def test_mask_problem_custom_placeholder():
    problem = SimpleNamespace(id=1, order=1, topic_id=1, answer={"fields": [{"index": 0, "value": "a"}]})
    assert mask_problem(problem, placeholder="???")["answer"]["fields"][0]["value"] == "???"
