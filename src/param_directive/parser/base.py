"""Data models for parsed parameter directives.

The directive parser and the comment scanner produce these models;
a code generator consumes them downstream.
"""

from enum import Enum

from pydantic import BaseModel


class Location(str, Enum):
    """Where in an HTTP request a bound argument is read from.

    ``cookie`` is reserved for a later release and is not accepted yet.
    """

    PATH = "path"
    QUERY = "query"
    HEADER = "header"
    REQUEST = "request"


# The only field of the request object an argument may be bound to.
REQUEST_REMOTE_ADDR = "RemoteAddr"


class Parameter(BaseModel):
    """One option group of a binding, fully resolved."""

    location: Location = Location.QUERY
    name: str = ""  # empty means "use the argument name"
    required: bool = False
    param_type: str = ""
    description: str = ""


class Binding(BaseModel):
    """An argument name and the request locations it is bound to."""

    arg_name: str
    options: list[Parameter] = []


class DirectiveComment(BaseModel):
    """A directive found in a source file comment."""

    line: int  # 1-based
    text: str
