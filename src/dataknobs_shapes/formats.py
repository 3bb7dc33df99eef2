"""String schemas for common input formats.

Each format schema is a ``StringSchema`` with a fixed format check, a form
input type, a title reported on mismatch and a default placeholder. Length
bounds, extra patterns and the other string modifiers still apply.

Example:
    ```python
    from dataknobs_shapes import EmailSchema, ObjectSchema, ZipCodeSchema

    contact = ObjectSchema({
        "email": EmailSchema(max_length=100),
        "zip": ZipCodeSchema().optional(),
    })
    contact.to_dict()["properties"]["email"]["type"]
    # 'email'
    ```
"""

from __future__ import annotations

import ipaddress
import json
from typing import Any

from .constraints import Constraint, Custom, Pattern
from .exceptions import SchemaDefinitionError
from .leaves import StringSchema


class FormatSchema(StringSchema):
    """String schema whose values must follow a fixed format.

    Subclasses set ``format_pattern`` or override ``_format_constraint``.
    """

    format_pattern: str | None = None
    title = "Invalid format"
    default_placeholder: str | None = None

    def __init__(self, **kwargs: Any):
        super().__init__(**kwargs)
        self._constraints["format"] = self._format_constraint()
        self._placeholder = self.default_placeholder

    def _format_constraint(self) -> Constraint:
        return Pattern(self.format_pattern, self.title)

    def to_dict(self) -> dict[str, Any]:
        out = super().to_dict()
        out.setdefault("title", self.title)
        return out


class PasswordSchema(StringSchema):
    """Free-form string rendered as a password input."""

    input_type = "password"


class EmailSchema(FormatSchema):
    input_type = "email"
    format_pattern = (
        r"^[A-Za-z0-9.!#$%&'*+/=?^_`{|}~-]+"
        r"@[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?"
        r"(?:\.[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?)+$"
    )
    title = "Email must be a valid email address e.g., example@example.com"
    default_placeholder = "example@example.com"


class UrlSchema(FormatSchema):
    """Absolute URL with a scheme and a host, e.g. ``https://example.com/a?b=1``."""

    input_type = "url"
    format_pattern = r"^[A-Za-z][A-Za-z0-9+.-]*://[^\s/?#]+(?:[/?#]\S*)?$"
    title = "URL must be a valid web address e.g., https://example.com"
    default_placeholder = "https://example.com"


class ZipCodeSchema(FormatSchema):
    """US ZIP code, five digits with an optional ``-1234`` extension."""

    format_pattern = r"^[0-9]{5}(?:-[0-9]{4})?$"
    title = "Zip code must be in the format 12345 or 12345-6789"
    default_placeholder = "12345 or 12345-6789"


class UUIDSchema(FormatSchema):
    format_pattern = (
        r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-5][0-9a-fA-F]{3}"
        r"-[089abAB][0-9a-fA-F]{3}-[0-9a-fA-F]{12}$"
    )
    title = "UUID must be in the format 550e8400-e29b-41d4-a716-446655440000"
    default_placeholder = "550e8400-e29b-41d4-a716-446655440000"


class GUIDSchema(FormatSchema):
    """8-4-4-4-12 hex identifier, optionally wrapped in braces."""

    format_pattern = (
        r"^\{?[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}"
        r"-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}\}?$"
    )
    title = "GUID must be in the format 550e8400-e29b-41d4-a716-446655440000"
    default_placeholder = "550e8400-e29b-41d4-a716-446655440000"


class PhoneNumberSchema(FormatSchema):
    input_type = "tel"
    format_pattern = r"^\+?\d{1,4}?[-.\s]?\(?\d{1,3}?\)?[-.\s]?\d{1,4}[-.\s]?\d{1,4}[-.\s]?\d{1,9}$"
    title = "Phone number must be in a valid international format"
    default_placeholder = "+12345678900"


class HexColorSchema(FormatSchema):
    input_type = "color"
    format_pattern = r"^#(?:[a-fA-F0-9]{6}|[a-fA-F0-9]{3})$"
    title = "Hex color must be in the format #RRGGBB or #RGB"
    default_placeholder = "#RRGGBB or #RGB"


class MacAddressSchema(FormatSchema):
    format_pattern = r"^(?:[0-9A-Fa-f]{2}[:-]){5}[0-9A-Fa-f]{2}$"
    title = "MAC address must be in the format 00:1A:2B:3C:4D:5E"
    default_placeholder = "00:1A:2B:3C:4D:5E"


class StringNumberSchema(FormatSchema):
    """Decimal number written as a string, with optional thousands separators."""

    format_pattern = r"^-?(?:0|[1-9](?:\d{0,2}(?:,\d{3})+|\d*))(?:\.\d+)?$"
    title = "String number must be a valid numeric format"
    default_placeholder = "12345"


class StreetAddressSchema(FormatSchema):
    """US street address such as ``1234 Main St, City, ST 12345``."""

    format_pattern = r"^\d+ [a-zA-Z0-9\s]+,? [a-zA-Z]+,? [A-Z]{2} [0-9]{5,6}$"
    title = "Street address must be in the format '1234 Main St, City, ST 12345'"
    default_placeholder = "1234 Main St, City, ST 12345"


class DateSchema(FormatSchema):
    """Calendar date in ``MM/DD/YYYY`` form."""

    input_type = "date"
    format_pattern = r"^(?:0[1-9]|1[0-2])/(?:0[1-9]|[12][0-9]|3[01])/(?:19|20)\d\d$"
    title = "Date must be in the format MM/DD/YYYY"
    default_placeholder = "MM/DD/YYYY"


class DatetimeLocalSchema(FormatSchema):
    """Local date and time in ``YYYY-MM-DDTHH:MM`` form, without a zone."""

    input_type = "datetime-local"
    format_pattern = (
        r"^(?:19|20)[0-9]{2}-"
        r"(?:(?:0[1-9]|1[0-2])-(?:0[1-9]|1[0-9]|2[0-9])"
        r"|(?!02)(?:0[1-9]|1[0-2])-30"
        r"|(?:0[13578]|1[02])-31)"
        r"T(?:[01][0-9]|2[0-3]):[0-5][0-9]$"
    )
    title = "Datetime must be in the format YYYY-MM-DDTHH:MM"
    default_placeholder = "YYYY-MM-DDTHH:MM"


class ISODateSchema(FormatSchema):
    """ISO 8601 timestamp with optional fraction and ``Z`` or offset zone."""

    format_pattern = r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(?:\.\d+)?(?:Z|[+-]\d{2}:\d{2})?$"
    title = "ISO date must be in the format YYYY-MM-DDTHH:MM:SSZ"
    default_placeholder = "YYYY-MM-DDTHH:MM:SSZ"


class HTMLSchema(FormatSchema):
    """Text containing at least one HTML tag."""

    format_pattern = r"""<(?:"[^"]*"['"]*|'[^']*'['"]*|[^'">])+>"""
    title = "HTML content must be valid HTML tags"
    default_placeholder = "<tag>content</tag>"


class XMLSchema(FormatSchema):
    """Text containing at least one matched ``<tag>...</tag>`` element."""

    format_pattern = r"<([A-Za-z_][\w.-]*)[^>]*>[\s\S]*?</\1>"
    title = "XML content must be enclosed within <TAG>value</TAG>"
    default_placeholder = "<TAG>value</TAG>"


class IPAddressSchema(FormatSchema):
    """IPv4 or IPv6 address, checked with :mod:`ipaddress`."""

    PLACEHOLDERS = {
        4: "255.255.255.255",
        6: "2001:0db8:85a3:0000:0000:8a2e:0370:7334",
    }

    def __init__(self, version: int = 4, **kwargs: Any):
        """Initialize IP address schema.

        Args:
            version: 4 or 6
            **kwargs: String bounds and common schema flags

        Raises:
            SchemaDefinitionError: If *version* is neither 4 nor 6
        """
        if version not in self.PLACEHOLDERS:
            raise SchemaDefinitionError(
                f"IP version must be 4 or 6, got {version!r}",
                context={"version": version},
            )
        self.version = version
        self.title = f"IP address must be in the format {self.PLACEHOLDERS[version]}"
        self.default_placeholder = self.PLACEHOLDERS[version]
        super().__init__(**kwargs)

    def _format_constraint(self) -> Constraint:
        return Custom(self._is_address, self.title, code="invalid_string")

    def _is_address(self, value: str) -> bool:
        try:
            return ipaddress.ip_address(value).version == self.version
        except ValueError:
            return False


class JSONSchema(FormatSchema):
    """String holding a well-formed JSON document."""

    input_type = "json"
    title = "JSON must be valid JSON format"
    default_placeholder = '{"key":"value"}'

    def _format_constraint(self) -> Constraint:
        return Custom(_is_json, self.title, code="invalid_json")


def _is_json(value: str) -> bool:
    try:
        json.loads(value)
    except ValueError:
        return False
    return True
