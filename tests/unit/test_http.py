import copy

import pytest
from aws_sdk_s3_signers import URI, AWSRequest, Field, Fields


def test_field_as_string_folds_values() -> None:
    field = Field(name="X-Amz-Meta-ReviewedBy", values=["joe", "jane"])
    assert field.as_string() == "joe,jane"
    field.add("jim")
    assert field.as_string() == "joe,jane,jim"
    assert Field(name="Empty").as_string() == ""


def test_fields_are_case_insensitive() -> None:
    fields = Fields([Field(name="Content-Type", values=["text/plain"])])
    assert "content-type" in fields
    assert fields["CONTENT-TYPE"].as_string() == "text/plain"
    assert fields.get("Date") is None

    fields.set_field(Field(name="content-type", values=["image/jpeg"]))
    assert len(fields) == 1
    assert fields.as_mapping() == {"content-type": "image/jpeg"}

    del fields["Content-Type"]
    assert len(fields) == 0


def test_fields_reject_repeated_initial_names() -> None:
    with pytest.raises(ValueError):
        Fields([Field(name="x-amz-acl"), Field(name="X-Amz-Acl")])


@pytest.mark.parametrize(
    "uri,resource,url",
    [
        (URI(host="s3.amazonaws.com"), "/", "https://s3.amazonaws.com"),
        (
            URI(host="s3.amazonaws.com", path="/bucket/key", query="acl"),
            "/bucket/key?acl",
            "https://s3.amazonaws.com/bucket/key?acl",
        ),
        (
            URI(scheme="http", host="localhost", port=9000, path="/b/k"),
            "/b/k",
            "http://localhost:9000/b/k",
        ),
    ],
)
def test_uri(uri: URI, resource: str, url: str) -> None:
    assert uri.resource == resource
    assert uri.build() == url


def test_request_deepcopy_shares_body() -> None:
    body = iter([b"abc"])
    request = AWSRequest(
        destination=URI(host="s3.amazonaws.com", path="/b/k"),
        method="PUT",
        body=body,
        fields=Fields([Field(name="Date", values=["D"])]),
    )
    copied = copy.deepcopy(request)
    assert copied is not request
    assert copied.body is body
    assert copied.fields == request.fields
    assert copied.fields is not request.fields
