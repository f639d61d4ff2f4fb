"""
Input Validators

This module validates caller input before any request is built.

- check_url: a pure syntactic check of an absolute http/https URL
- FIELDS: the registry of request parameters and how each one is checked
- ParamValidator: validates a set of values against that registry

The URL check is intentionally narrower than RFC 3986: it accepts a host
made of dot-separated labels with a 2-6 letter top-level segment, optional
path segments, an optional file name with extension and optional
key=value query parameters joined by '&'. Ports, userinfo and fragments
are rejected.
"""

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional

from url_shortener_client.core.exceptions import (
    InvalidFieldTypeError,
    InvalidURLError,
    MissingRequiredFieldError,
    NullRequiredFieldError,
    ParameterError,
    UnknownFieldError,
)

__all__ = ["FIELDS", "FieldSpec", "ParamValidator", "check_url", "is_valid_url"]


URL_PATTERN = re.compile(
    r"""
    \A
    https?://
    [a-zA-Z0-9-]+(?:\.[a-zA-Z0-9-]+)*   # host labels
    \.[a-zA-Z]{2,6}                     # top-level segment
    (?:/[\w-]+)*                        # path segments
    (?:/[\w-]+\.[a-zA-Z0-9]{2,4})?      # file name with extension
    /?
    (?:\?\w+=[\w-]+(?:&\w+=[\w-]+)*)?   # query parameters
    \Z
    """,
    re.VERBOSE | re.ASCII,
)


def is_valid_url(url: Any) -> bool:
    """
    Return True if url is a well-formed absolute http/https URL.

    Args:
        url: The value to check

    Returns:
        True if valid, False otherwise
    """
    if not url or not isinstance(url, str):
        return False
    return URL_PATTERN.match(url) is not None


def check_url(url: Any) -> None:
    """
    Validate a URL, raising if it is malformed.

    Args:
        url: The URL to validate

    Raises:
        InvalidURLError: If url is missing, empty or does not match the
            accepted URL shape
    """
    if not is_valid_url(url):
        raise InvalidURLError(url)


@dataclass(frozen=True)
class FieldSpec:
    """A registered request parameter: its check function and declared type."""
    check: Callable[[Any], None]
    value_type: type = str


FIELDS: Mapping[str, FieldSpec] = MappingProxyType({
    "shortUrl": FieldSpec(check=check_url, value_type=str),
    "longUrl": FieldSpec(check=check_url, value_type=str),
})


class ParamValidator:
    """
    Validates request parameters against a field registry.

    The registry is injected at construction and never modified, so one
    validator can be shared by any number of clients.
    """

    def __init__(self, fields: Optional[Mapping[str, FieldSpec]] = None):
        self.fields = MappingProxyType(dict(fields if fields is not None else FIELDS))

    def check(self, value: Any, field: str = "longUrl") -> None:
        """
        Validate a single value with the registered check for field.

        Args:
            value: The value to check
            field: Registered field name (default: longUrl)

        Raises:
            UnknownFieldError: If field is not in the registry
            InvalidFieldTypeError: If value has the wrong type
            InvalidURLError: If the field's check rejects value
        """
        field_spec = self.fields.get(field)
        if field_spec is None:
            raise UnknownFieldError(field)
        if not isinstance(value, field_spec.value_type):
            raise InvalidFieldTypeError(field, field_spec.value_type)
        field_spec.check(value)

    def validate(self, required: Mapping[str, bool], values: Mapping[str, Any]) -> None:
        """
        Validate values against the registry.

        Args:
            required: Field name -> whether the field is mandatory
            values: Field name -> supplied value

        Raises:
            ParameterError: If values is not a mapping
            UnknownFieldError: If a field is not in the registry
            MissingRequiredFieldError: If a mandatory field is absent
            NullRequiredFieldError: If a mandatory field is None
            InvalidFieldTypeError: If a value has the wrong type
            InvalidURLError: If a field's check rejects its value
        """
        if values is None:
            raise ParameterError("Missing params list")
        if not isinstance(values, Mapping):
            raise ParameterError("Parameters have to be a mapping")

        for field, is_required in required.items():
            if field not in self.fields:
                raise UnknownFieldError(field)

            if is_required and field not in values:
                raise MissingRequiredFieldError(field)

            value = values.get(field)
            if is_required and value is None:
                raise NullRequiredFieldError(field)

            if value is not None:
                self.check(value, field)
