import pytest
from pydantic import ValidationError

from trackhub.domain.library.payloads import coerce_track_fields, coerce_user_fields


@pytest.mark.unit
def test_track_fields_keep_only_supplied_keys():
    assert coerce_track_fields({"genre": "Rock", "duration": None}) == {"genre": "Rock", "duration": None}
    assert coerce_track_fields(None) == {}


@pytest.mark.unit
def test_track_fields_reject_wrong_types():
    with pytest.raises(ValidationError):
        coerce_track_fields({"duration": "four"})
    with pytest.raises(ValidationError):
        coerce_track_fields("Raabta")


@pytest.mark.unit
def test_user_fields_pass_through_except_id():
    assert coerce_user_fields({"id": 3, "name": "Asha", "tags": ["a"]}) == {"name": "Asha", "tags": ["a"]}
    assert coerce_user_fields(None) == {}
