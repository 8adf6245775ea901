# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
import datetime
import hmac
import logging
from base64 import b64encode
from copy import deepcopy
from hashlib import sha1
from typing import TypedDict

from ._http import AWSRequest, Field
from ._identity import AWSCredentialIdentity
from ._request import SigningRequest
from .canonicalization import canonicalize_headers, canonicalize_resource
from .exceptions import MissingFieldException

logger = logging.getLogger(__name__)

SIGV2_ALGORITHM: str = "AWS"
SIGV2_TIMESTAMP_FORMAT: str = "%a, %d %b %Y %H:%M:%S GMT"
PRESIGNED_VERB: str = "GET"


class SigV2SigningProperties(TypedDict, total=False):
    date: str
    resource: str


class SigV2Signer:
    """Request signer for the S3 HMAC-SHA1 shared secret signing scheme.

    The signer holds no state and can be shared between threads.
    """

    def sign(
        self,
        *,
        signing_properties: SigV2SigningProperties,
        http_request: AWSRequest,
        identity: AWSCredentialIdentity,
    ) -> AWSRequest:
        """Generate and apply an ``Authorization`` field to a copy of the supplied
        request.

        :param signing_properties: SigV2SigningProperties to override the date and
            the signed resource.
        :param http_request: An AWSRequest to sign prior to sending to the service.
        :param identity: A set of credentials representing an AWS Identity or role
            capacity.
        """
        self._validate_identity(identity=identity)
        new_request = deepcopy(http_request)
        self._apply_required_fields(
            request=new_request,
            signing_properties=signing_properties,
            identity=identity,
        )

        signing_request = self.signing_request_from_http(
            http_request=new_request,
            signing_properties=signing_properties,
            identity=identity,
        )
        new_request.fields.set_field(
            Field(
                name="Authorization",
                values=[self.generate_authorization(request=signing_request)],
            )
        )
        return new_request

    def signing_request_from_http(
        self,
        *,
        http_request: AWSRequest,
        signing_properties: SigV2SigningProperties,
        identity: AWSCredentialIdentity,
    ) -> SigningRequest:
        """Collect the signed metadata of ``http_request`` into a SigningRequest."""
        fields = http_request.fields
        resource = signing_properties.get("resource")
        if resource is None:
            resource = http_request.destination.resource
        return SigningRequest(
            verb=http_request.method,
            content_md5=self._field_value(http_request, "Content-MD5"),
            content_type=self._field_value(http_request, "Content-Type"),
            date=self._field_value(http_request, "Date"),
            service_headers=fields.as_mapping(),
            resource=resource,
            access_key=identity.access_key_id,
            secret_key=identity.secret_access_key,
        )

    def string_to_sign(self, *, request: SigningRequest) -> str:
        """The string to sign for header based authentication.

        The format is defined as:
            <Verb>\n
            <Content-MD5>\n
            <Content-Type>\n
            <Date>\n
            [<CanonicalizedAmzHeaders>\n]
            <CanonicalizedResource>

        Every line is emitted even when empty. The header block is omitted
        entirely when no ``x-amz`` header is present.

        :param request: The SigningRequest to render.
        :raises MissingFieldException: If the verb, date or resource is missing.
        """
        verb = _require(request.verb, "verb")
        date = _require(request.date, "date")
        canonical_resource = canonicalize_resource(request.resource)
        canonical_headers = canonicalize_headers(request.service_headers)
        if canonical_headers:
            canonical_resource = f"{canonical_headers}\n{canonical_resource}"
        string_to_sign = "\n".join(
            (
                verb,
                request.content_md5,
                request.content_type,
                date,
                canonical_resource,
            )
        )
        logger.debug("StringToSign:\n%s", string_to_sign)
        return string_to_sign

    def query_string_to_sign(self, *, request: SigningRequest) -> str:
        """The string to sign for presigned URLs.

        Presigned URLs only grant ``GET`` access, so the verb is fixed and the
        content lines are always empty:
            GET\n
            \n
            \n
            <Expires>\n
            <CanonicalizedResource>

        :param request: The SigningRequest to render. Its verb, content fields and
            headers are ignored.
        :raises MissingFieldException: If the date or resource is missing.
        """
        date = _require(request.date, "date")
        canonical_resource = canonicalize_resource(request.resource)
        string_to_sign = f"{PRESIGNED_VERB}\n\n\n{date}\n{canonical_resource}"
        logger.debug("QueryStringToSign:\n%s", string_to_sign)
        return string_to_sign

    def signature(self, *, secret_key: str, string_to_sign: str) -> str:
        """Sign the string to sign.

        Signature = Base64(HMAC-SHA1(UTF8(SecretKey), UTF8(StringToSign)))
        """
        digest = hmac.new(
            key=secret_key.encode("utf-8"),
            msg=string_to_sign.encode("utf-8"),
            digestmod=sha1,
        ).digest()
        return b64encode(digest).decode("ascii")

    def generate_authorization(self, *, request: SigningRequest) -> str:
        """Generate the ``Authorization`` field value.

        Defined as:
            AWS <AccessKey>:<Signature>
        """
        signature = self.signature(
            secret_key=request.secret_key,
            string_to_sign=self.string_to_sign(request=request),
        )
        return f"{SIGV2_ALGORITHM} {request.access_key}:{signature}"

    def generate_query_signature(self, *, request: SigningRequest) -> str:
        """Generate the value of the ``Signature`` query parameter of a presigned
        URL.

        Assembling the URL with the access key and expiry is left to the caller.
        """
        return self.signature(
            secret_key=request.secret_key,
            string_to_sign=self.query_string_to_sign(request=request),
        )

    def _validate_identity(self, *, identity: AWSCredentialIdentity) -> None:
        """Perform runtime and expiration checks before attempting signing."""
        if not isinstance(identity, AWSCredentialIdentity):  # pyright: ignore
            raise ValueError(
                "Received unexpected value for identity parameter. Expected "
                f"AWSCredentialIdentity but received {type(identity)}."
            )
        elif identity.is_expired:
            raise ValueError(
                f"Provided identity expired at {identity.expiration}. Please "
                "refresh the credentials or update the expiration parameter."
            )

    def _apply_required_fields(
        self,
        *,
        request: AWSRequest,
        signing_properties: SigV2SigningProperties,
        identity: AWSCredentialIdentity,
    ) -> None:
        if "Date" not in request.fields:
            date = signing_properties.get("date")
            if date is None:
                date_obj = datetime.datetime.now(datetime.UTC)
                date = date_obj.strftime(SIGV2_TIMESTAMP_FORMAT)
            request.fields.set_field(Field(name="Date", values=[date]))
        # The token is an x-amz header, so it has to be in place before signing.
        if (
            "X-Amz-Security-Token" not in request.fields
            and identity.session_token is not None
        ):
            request.fields.set_field(
                Field(name="X-Amz-Security-Token", values=[identity.session_token])
            )

    def _field_value(self, request: AWSRequest, name: str) -> str:
        field = request.fields.get(name)
        if field is None:
            return ""
        return field.as_string()


def _require(value: str, field_name: str) -> str:
    if not isinstance(value, str) or not value:
        raise MissingFieldException(field_name)
    return value
