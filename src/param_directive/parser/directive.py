"""Parameter directive parser.

Parses the body of a parameter directive comment into bindings:

    <argName> [<parameter> [, <parameter2> [, ...]]]

where each parameter is a whitespace-separated list of options:

    in=<in> name=<name> required=<required> type=<type> descr=<descr>

Several bindings can share one directive when separated by semicolons.
There is no escaping: a ``;``, ``,`` or whitespace inside a value splits it.
"""

import logging
import re

from .base import REQUEST_REMOTE_ADDR, Binding, Location, Parameter
from .errors import (
    EmptyInputError,
    InvalidDirectiveError,
    InvalidLocationError,
    InvalidPairError,
    UnknownOptionError,
    UnsupportedRequestFieldError,
)

logger = logging.getLogger(__name__)

_BINDING_RE = re.compile(r"(\w+)(.*)", re.ASCII)

_ACCEPTED_LOCATIONS = [loc.value for loc in Location]


def parse_directive(text: str) -> list[Binding]:
    """Parse a directive body into its bindings, in order.

    Raises the first DirectiveError found; no partial result is returned.
    """
    text = text.strip()
    if not text:
        raise EmptyInputError()

    bindings = [_parse_binding(segment) for segment in text.split(";")]
    logger.debug("Parsed %d binding(s) from %r", len(bindings), text)
    return bindings


def parse_param_options(arg_name: str, text: str) -> list[Parameter]:
    """Parse the comma-separated option groups that follow an argument name."""
    return [_parse_option(arg_name, group) for group in text.split(",")]


def validate_location(value: str) -> Location:
    """Return the Location for value, or raise InvalidLocationError."""
    # cookie is reserved and not accepted yet.
    if value not in _ACCEPTED_LOCATIONS:
        raise InvalidLocationError(value, _ACCEPTED_LOCATIONS)
    return Location(value)


def _parse_binding(segment: str) -> Binding:
    segment = segment.strip()

    match = _BINDING_RE.fullmatch(segment)
    if not match:
        raise InvalidDirectiveError(segment)
    arg_name, remaining = match.group(1), match.group(2).strip()

    # No options after the argument name: the caller applies its defaults.
    options = parse_param_options(arg_name, remaining) if remaining else []
    binding = Binding(arg_name=arg_name, options=options)

    logger.debug("Binding %s: %d option group(s)", arg_name, len(binding.options))
    return binding


def _parse_option(arg_name: str, text: str) -> Parameter:
    location: Location | None = None
    fields: dict = {}

    for part in text.split():
        key, sep, value = part.partition("=")
        if not sep:
            raise InvalidPairError(part)

        if key == "in":
            location = validate_location(value)
        elif key == "name":
            fields["name"] = value
        elif key == "required":
            fields["required"] = value == "true"
        elif key == "type":
            fields["param_type"] = value
        elif key == "descr":
            fields["description"] = value
        else:
            raise UnknownOptionError(key, part)

    if location is Location.PATH:
        # Path parameters are always required.
        fields["required"] = True

    name = fields.get("name", "")
    if location is Location.REQUEST and name != REQUEST_REMOTE_ADDR:
        raise UnsupportedRequestFieldError(arg_name, name, REQUEST_REMOTE_ADDR)

    if location is None:
        location = Location.QUERY

    return Parameter(location=location, **fields)
