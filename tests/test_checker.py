"""Tests for the restrictive parameter checker."""

import pytest

from fastapi_jsonapi_params.config import JSONAPI_MEDIA_TYPE as TYPE
from fastapi_jsonapi_params.core.errors import BadRequest, NotAcceptable, UnsupportedMediaType
from fastapi_jsonapi_params.parameters import MediaType, RestrictiveParameterChecker


def _parse(parser, request_params, content_type=TYPE, accept=TYPE):
    return parser.parse_values(content_type, accept, request_params)


def test_default_not_really_restrictive_settings(parser, request_params):
    checker = RestrictiveParameterChecker({TYPE: ["ext2"]}, {TYPE: ["ext1,ext3"]})

    checker.check(_parse(parser, request_params))


def test_fully_default_checker_allows_plain_requests(parser, request_params):
    request_params["some"] = "value"

    RestrictiveParameterChecker().check(_parse(parser, request_params))


def test_allowed_extensions(parser, request_params):
    checker = RestrictiveParameterChecker({TYPE: ["ext2"]}, {TYPE: ["ext1,ext3"]})

    checker.check(_parse(parser, request_params, f"{TYPE};ext=ext2", f'{TYPE};ext="ext1,ext3"'))


def test_not_allowed_input_extensions(parser, request_params):
    checker = RestrictiveParameterChecker({TYPE: ["ext2"]}, {TYPE: ["ext1,ext3"]})

    with pytest.raises(UnsupportedMediaType):
        checker.check(_parse(parser, request_params, content_type=f"{TYPE};ext=ext4"))


def test_not_allowed_output_extensions(parser, request_params):
    checker = RestrictiveParameterChecker({TYPE: ["ext2"]}, {TYPE: ["ext1,ext3"]})

    with pytest.raises(NotAcceptable):
        checker.check(_parse(parser, request_params, accept=f'{TYPE};ext="ext2,ext3"'))


def test_extensions_for_unknown_media_range_are_rejected(parser):
    checker = RestrictiveParameterChecker({TYPE: ["ext2"]}, {TYPE: []})

    with pytest.raises(UnsupportedMediaType):
        checker.check(parser.parse_values("application/json;ext=ext2", TYPE, {}))


def test_media_range_lookup_is_case_insensitive(parser):
    checker = RestrictiveParameterChecker({"Application/Vnd.Api+JSON": ["ext2"]}, {})

    checker.check(parser.parse_values(f"{TYPE};ext=ext2", None, {}))


@pytest.mark.parametrize(
    "allowed, requested, passes",
    [
        ([], "", True),
        (["a"], "", True),
        (["a", "b"], ";ext=a", True),
        (["a", "b"], ';ext="a,b"', True),
        (["a"], ';ext="a,c"', False),
        ([], ";ext=a", False),
    ],
)
def test_extensions_must_be_a_subset(parser, allowed, requested, passes):
    checker = RestrictiveParameterChecker({"t/s": allowed}, {})
    parameters = parser.parse_values(f"t/s{requested}", None, {})

    if passes:
        checker.check(parameters)
    else:
        with pytest.raises(UnsupportedMediaType):
            checker.check(parameters)


def test_allowed_include_paths(parser, request_params):
    checker = RestrictiveParameterChecker(
        {TYPE: []},
        {TYPE: []},
        False,
        ["author", "comments", "comments.author", "and.one.more.path"],
    )

    checker.check(_parse(parser, request_params))


def test_not_allowed_include_paths(parser, request_params):
    checker = RestrictiveParameterChecker({TYPE: []}, {TYPE: []}, False, ["author", "comments"])

    with pytest.raises(BadRequest) as exc_info:
        checker.check(_parse(parser, request_params))

    assert exc_info.value.source == {"parameter": "include"}
    assert "comments.author" in exc_info.value.detail


def test_empty_include_allow_list_rejects_any_path(parser, request_params):
    checker = RestrictiveParameterChecker({TYPE: []}, {TYPE: []}, False, [])

    with pytest.raises(BadRequest):
        checker.check(_parse(parser, request_params))


def test_include_check_skipped_without_include_parameter(parser, request_params):
    del request_params["include"]
    checker = RestrictiveParameterChecker({TYPE: []}, {TYPE: []}, False, [])

    checker.check(_parse(parser, request_params))


def test_allowed_field_sets(parser, request_params):
    checker = RestrictiveParameterChecker(
        {TYPE: []}, {TYPE: []}, False, None, ["type1", "anotherType"]
    )

    checker.check(_parse(parser, request_params))


def test_not_allowed_field_sets(parser, request_params):
    checker = RestrictiveParameterChecker({TYPE: []}, {TYPE: []}, False, None, ["anotherType"])

    with pytest.raises(BadRequest) as exc_info:
        checker.check(_parse(parser, request_params))

    assert exc_info.value.source == {"parameter": "fields"}


def test_allowed_sort_params(parser, request_params):
    checker = RestrictiveParameterChecker(
        {TYPE: []}, {TYPE: []}, False, None, None, ["created", "title", "name", "and-others"]
    )

    checker.check(_parse(parser, request_params))


def test_not_allowed_sort_params(parser, request_params):
    checker = RestrictiveParameterChecker(
        {TYPE: []}, {TYPE: []}, False, None, None, ["created", "name"]
    )

    with pytest.raises(BadRequest) as exc_info:
        checker.check(_parse(parser, request_params))

    assert exc_info.value.source == {"parameter": "sort"}
    assert "title" in exc_info.value.detail


def test_allowed_unrecognized_parameters(parser, request_params):
    request_params["some"] = ["other", "parameters"]
    checker = RestrictiveParameterChecker({TYPE: []}, {TYPE: []}, True)

    checker.check(_parse(parser, request_params))


def test_not_allowed_unrecognized_parameters(parser, request_params):
    request_params["some"] = ["other", "parameters"]
    checker = RestrictiveParameterChecker({TYPE: []}, {TYPE: []}, False)

    with pytest.raises(BadRequest) as exc_info:
        checker.check(_parse(parser, request_params))

    assert exc_info.value.source == {"parameter": "some"}


def test_first_violation_wins(parser, request_params):
    request_params["some"] = "value"
    checker = RestrictiveParameterChecker(
        {TYPE: []}, {TYPE: []}, False, ["author"], ["other"], ["other"]
    )

    with pytest.raises(UnsupportedMediaType):
        checker.check(_parse(parser, request_params, content_type=f"{TYPE};ext=ext1"))


def test_output_check_runs_before_query_checks(parser, request_params):
    checker = RestrictiveParameterChecker({TYPE: []}, {TYPE: []}, False, [])

    with pytest.raises(NotAcceptable):
        checker.check(_parse(parser, request_params, accept=f"{TYPE};ext=ext1"))


def test_checker_can_be_reused(parser, request_params):
    checker = RestrictiveParameterChecker({TYPE: []}, {TYPE: []}, False, None, None, ["created"])
    bad = _parse(parser, request_params)
    good = parser.parse_values(TYPE, TYPE, {"sort": "-created"})

    with pytest.raises(BadRequest):
        checker.check(bad)
    checker.check(good)
    with pytest.raises(BadRequest):
        checker.check(bad)


def test_media_type_checks_can_be_called_directly():
    checker = RestrictiveParameterChecker({TYPE: ["ext2"]}, {})

    checker.check_input_media_type(MediaType.parse(f"{TYPE};ext=ext2"))
    with pytest.raises(NotAcceptable):
        checker.check_output_media_type(MediaType.parse(f"{TYPE};ext=ext2"))


def test_non_string_unrecognized_keys_are_rejected(parser):
    checker = RestrictiveParameterChecker({}, {}, False)

    with pytest.raises(BadRequest) as exc_info:
        checker.check(parser.parse_values(None, None, {1: "x", "other": "y"}))

    assert exc_info.value.source == {"parameter": "1"}
