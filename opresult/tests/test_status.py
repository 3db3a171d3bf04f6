"""Tests for StatusCode and the well-known statuses."""

from __future__ import annotations

import logging

import pytest

from opresult.core.status import (
    FAILED,
    FORBIDDEN,
    INVALID,
    NOT_FOUND,
    SUCCESS,
    UNAUTHORIZED,
    WARNING,
    WELL_KNOWN_STATUSES,
    StatusCode,
    define_custom,
)


class TestWellKnownStatuses:
    @pytest.mark.parametrize(
        ("status", "code", "name", "success"),
        [
            (SUCCESS, 200, "Success", True),
            (WARNING, 202, "Warning", True),
            (INVALID, 400, "Invalid", False),
            (UNAUTHORIZED, 401, "Unauthorized", False),
            (FORBIDDEN, 403, "Forbidden", False),
            (NOT_FOUND, 404, "NotFound", False),
            (FAILED, 500, "Failed", False),
        ],
    )
    def test_table(self, status: StatusCode, code: int, name: str, success: bool) -> None:
        assert status.code == code
        assert status.name == name
        assert status.is_success is success
        assert status.success_override is None

    def test_well_known_tuple_order(self) -> None:
        assert [s.code for s in WELL_KNOWN_STATUSES] == [200, 202, 400, 401, 403, 404, 500]

    def test_constants_are_singletons(self) -> None:
        from opresult import core

        assert core.SUCCESS is SUCCESS
        assert core.FAILED is FAILED


class TestSuccessClassification:
    @pytest.mark.parametrize("code", [-1, 0, 100, 199, 200, 201, 250, 299, 300, 404, 500, 99999])
    def test_derived_from_range(self, code: int) -> None:
        assert define_custom(code, "X").is_success is (200 <= code <= 299)

    def test_override_true_outside_range(self) -> None:
        assert define_custom(302, "Redirected", is_success=True).is_success is True

    def test_override_false_inside_range(self) -> None:
        assert define_custom(204, "NoContent", is_success=False).is_success is False


class TestEquality:
    def test_same_code_different_name(self) -> None:
        a = define_custom(5, "A")
        b = define_custom(5, "B")
        assert a == b
        assert hash(a) == hash(b)

    def test_same_code_different_override(self) -> None:
        a = define_custom(5, "A", is_success=True)
        b = define_custom(5, "A", is_success=False)
        assert a == b
        assert hash(a) == hash(b)
        assert a.is_success != b.is_success

    def test_custom_equals_well_known(self) -> None:
        assert define_custom(404, "Missing") == NOT_FOUND

    def test_different_codes(self) -> None:
        assert SUCCESS != WARNING
        assert define_custom(1, "Same") != define_custom(2, "Same")

    def test_not_equal_to_plain_int(self) -> None:
        assert SUCCESS != 200

    def test_set_dedupes_by_code(self) -> None:
        statuses = {SUCCESS, define_custom(200, "Ok"), FAILED}
        assert len(statuses) == 2

    def test_hash_depends_only_on_code(self) -> None:
        assert hash(define_custom(418, "Teapot")) == hash(418)


class TestCustomStatus:
    def test_round_trip(self) -> None:
        status = define_custom(418, "Teapot")
        assert status.code == 418
        assert status.name == "Teapot"
        assert str(status) == "Teapot"

    def test_classmethod_and_alias_agree(self) -> None:
        assert StatusCode.define_custom(1, "One") == define_custom(1, "One")

    def test_no_validation(self) -> None:
        status = define_custom(-42, "")
        assert status.code == -42
        assert str(status) == ""
        assert status.is_success is False

    def test_definition_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="opresult.core.status")
        define_custom(299, "Edge")
        assert "Edge" in caplog.text

    def test_immutable(self) -> None:
        status = define_custom(1, "One")
        with pytest.raises(AttributeError):
            status.code = 2  # type: ignore[misc]

    def test_repr(self) -> None:
        assert "418" in repr(define_custom(418, "Teapot"))
