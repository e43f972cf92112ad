import pytest

from services.envelope import normalize_list


@pytest.mark.parametrize("body", [{}, {"unrelated": 1}, None, 42, "text", {"data": None}])
def test_unrecognised_bodies_are_empty(body):
    assert normalize_list(body) == []


def test_data_envelope():
    assert normalize_list({"data": [{"id": 1}], "result": [{"id": 2}]}) == [{"id": 1}]


def test_result_envelope():
    assert normalize_list({"result": [{"id": 2}], "count": 1}) == [{"id": 2}]


def test_bare_list():
    assert normalize_list([{"id": 3}]) == [{"id": 3}]


def test_null_data_falls_back_to_result():
    assert normalize_list({"data": None, "result": [{"id": 4}]}) == [{"id": 4}]


def test_non_list_data_is_empty():
    assert normalize_list({"data": {"id": 1}}) == []
