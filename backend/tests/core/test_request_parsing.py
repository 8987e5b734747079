"""Request Parsing - body decoding, field rules, and path id parsing.

Tests cover:
    - Empty body is EmptyBodyError with the exact "empty body" message
    - Malformed JSON and non-object JSON are DecodeError
    - Required violations (missing or zero-valued) report one message per field
    - Wrong JSON types are "invalid", not "required"
    - Path ids accept signed base-10 integers only
"""

import pytest

from students_api.core.errors import (
    DecodeError, EmptyBodyError, PathParseError, StudentValidationError,
)
from students_api.core.request_parsing import decode_student_body, parse_student_id


def test_decodes_valid_body():
    student = decode_student_body(b'{"name": "Ada", "email": "ada@example.com", "age": 20}')
    assert student.name == "Ada"
    assert student.email == "ada@example.com"
    assert student.age == 20


def test_strips_surrounding_whitespace_from_text_fields():
    student = decode_student_body(b'{"name": "  Ada ", "email": " a@b.com", "age": 20}')
    assert student.name == "Ada"
    assert student.email == "a@b.com"


def test_ignores_client_supplied_id():
    student = decode_student_body(b'{"id": 7, "name": "Ada", "email": "a@b.com", "age": 20}')
    assert not hasattr(student, "id")


@pytest.mark.parametrize("body", [b"", b"   ", b"\n\t"])
def test_empty_body_is_empty_body_error(body):
    with pytest.raises(EmptyBodyError) as exc_info:
        decode_student_body(body)
    assert exc_info.value.message == "empty body"
    assert exc_info.value.http_status == 400


def test_malformed_json_is_decode_error():
    with pytest.raises(DecodeError) as exc_info:
        decode_student_body(b'{"name": "Ada",')
    assert exc_info.value.code == "DECODE_ERROR"
    assert exc_info.value.http_status == 400


@pytest.mark.parametrize("body", [b"[]", b"null", b"42", b'"student"'])
def test_non_object_json_is_decode_error(body):
    with pytest.raises(DecodeError):
        decode_student_body(body)


def test_empty_name_is_required_violation():
    with pytest.raises(StudentValidationError) as exc_info:
        decode_student_body(b'{"name": "", "email": "a@b.com", "age": 20}')
    err = exc_info.value
    assert [e.field for e in err.field_errors] == ["name"]
    assert err.field_errors[0].rule == "required"
    assert err.message == "field name is required field"


def test_zero_age_is_required_violation():
    with pytest.raises(StudentValidationError) as exc_info:
        decode_student_body(b'{"name": "Ada", "email": "a@b.com", "age": 0}')
    assert exc_info.value.message == "field age is required field"


def test_empty_object_reports_every_field_in_order():
    with pytest.raises(StudentValidationError) as exc_info:
        decode_student_body(b"{}")
    err = exc_info.value
    assert [e.field for e in err.field_errors] == ["name", "email", "age"]
    assert err.message == (
        "field name is required field, "
        "field email is required field, "
        "field age is required field"
    )


@pytest.mark.parametrize("age", [b'"20"', b"true", b"20.5"])
def test_wrong_age_type_is_invalid(age):
    body = b'{"name": "Ada", "email": "a@b.com", "age": ' + age + b"}"
    with pytest.raises(StudentValidationError) as exc_info:
        decode_student_body(body)
    assert exc_info.value.field_errors[0].rule == "invalid"
    assert exc_info.value.message == "field age is invalid"


@pytest.mark.parametrize("raw,expected", [
    ("1", 1), ("42", 42), ("+7", 7), ("-3", -3), ("007", 7),
    ("9223372036854775807", 9223372036854775807),
])
def test_parses_integer_ids(raw, expected):
    assert parse_student_id(raw) == expected


@pytest.mark.parametrize("raw", [
    "abc", "", "1.5", " 1", "1 ", "1_000", "0x10", "9223372036854775808", "١٢",
])
def test_rejects_non_integer_ids(raw):
    with pytest.raises(PathParseError) as exc_info:
        parse_student_id(raw)
    assert exc_info.value.http_status == 400
    assert exc_info.value.code == "PATH_PARSE_ERROR"


@pytest.mark.parametrize("age", [2 ** 63, -(2 ** 63) - 1, 2 ** 70])
def test_age_outside_64_bits_is_invalid(age):
    body = b'{"name": "Ada", "email": "a@b.com", "age": ' + str(age).encode() + b"}"
    with pytest.raises(StudentValidationError) as exc_info:
        decode_student_body(body)
    assert exc_info.value.message == "field age is invalid"


def test_age_at_64_bit_bounds_is_accepted():
    for age in (2 ** 63 - 1, -(2 ** 63)):
        body = b'{"name": "Ada", "email": "a@b.com", "age": ' + str(age).encode() + b"}"
        assert decode_student_body(body).age == age
