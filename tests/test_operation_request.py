from pathlib import Path

import pytest

from build_ref_tool.api.exceptions import ArgumentError
from build_ref_tool.constants import ReferenceOperation
from build_ref_tool.models.operation import OperationRequest, split_list


def test_split_list():
    assert split_list(None) == []
    assert split_list("") == []
    assert split_list(" api  web\tworker ") == ["api", "web", "worker"]


def test_from_strings_defaults_to_list():
    request = OperationRequest.from_strings(units="api web")

    assert request.operation == ReferenceOperation.LIST
    assert request.units == ["api", "web"]
    assert request.registry_root is None


def test_from_strings_accepts_operation_names():
    request = OperationRequest.from_strings("ListFull", registry_root="reg")

    assert request.operation == ReferenceOperation.LISTFULL
    assert request.registry_root == Path("reg")


def test_from_strings_rejects_unknown_operation():
    with pytest.raises(ArgumentError):
        OperationRequest.from_strings("delete", units="api")


def test_short_lists_and_markers_are_unset():
    request = OperationRequest.from_strings(
        units="api web worker", commits="c1 ?", tags="? v2", image_formats="docker"
    )

    first = request.unit_request(0)
    second = request.unit_request(1)
    third = request.unit_request(2)

    assert (first.commit, first.tag, first.formats) == ("c1", None, "docker")
    assert (second.commit, second.tag, second.formats) == (None, "v2", None)
    assert (third.commit, third.tag, third.repo, third.provider) == (None, None, None, None)


def test_unit_request_with_explicit_unit():
    request = OperationRequest.from_strings("listfull", registry_root="reg")

    unit_request = request.unit_request(0, "api")

    assert unit_request.unit == "api"
    assert unit_request.commit is None


@pytest.mark.parametrize("operation, kwargs", [
    ("accept", {"acceptance_tag": "rc1"}),
    ("accept", {"units": "api"}),
    ("list", {}),
    ("listfull", {"units": "api"}),
    ("update", {"units": "api"}),
    ("update", {"registry_root": "reg"}),
    ("verify", {"units": "api"}),
    ("verify", {"verification_tag": "rc1"}),
])
def test_validate_missing_inputs(operation, kwargs):
    request = OperationRequest.from_strings(operation, **kwargs)

    with pytest.raises(ArgumentError):
        request.validate()


@pytest.mark.parametrize("operation, kwargs", [
    ("accept", {"units": "api", "acceptance_tag": "rc1"}),
    ("list", {"units": "api"}),
    ("listfull", {"registry_root": "reg"}),
    ("update", {"units": "api", "registry_root": "reg"}),
    ("verify", {"units": "api", "verification_tag": "rc1"}),
])
def test_validate_complete_inputs(operation, kwargs):
    OperationRequest.from_strings(operation, **kwargs).validate()
