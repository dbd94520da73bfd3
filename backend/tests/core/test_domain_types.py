"""Domain Types: NewType wrappers are transparent at runtime."""

from userapi.core.domain_types import UserId, ValidatedName


def test_user_id_wraps_int():
    assert UserId(3) == 3


def test_validated_name_wraps_str():
    assert ValidatedName("Alice") == "Alice"
