# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0


class BaseAWSSDKException(Exception):
    """Top-level exception to capture SDK-related errors."""


class MissingFieldException(BaseAWSSDKException, ValueError):
    """A field required by the string to sign is absent, empty, or not a string."""

    def __init__(self, field_name: str, message: str | None = None):
        self.field_name = field_name
        if message is None:
            message = (
                f"Cannot generate a signature without a value for '{field_name}'."
            )
        super().__init__(message)


class InvalidResourceException(BaseAWSSDKException, ValueError):
    """The resource could not be decomposed into a path and query string."""

    def __init__(self, resource: object, reason: str):
        self.resource = resource
        super().__init__(f"Invalid resource {resource!r}: {reason}")


MissingField = MissingFieldException
InvalidResource = InvalidResourceException
