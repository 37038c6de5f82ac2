"""Errors raised while parsing parameter directives."""


class DirectiveError(Exception):
    """Base class for all directive parsing errors.

    Attributes:
        text: The offending part of the directive.
    """

    def __init__(self, message: str, text: str = "") -> None:
        super().__init__(message)
        self.text = text


class EmptyInputError(DirectiveError):
    """Raised when the directive is empty after trimming."""

    def __init__(self) -> None:
        super().__init__("empty parameter directive")


class InvalidDirectiveError(DirectiveError):
    """Raised when a binding does not start with an argument name."""

    def __init__(self, text: str) -> None:
        super().__init__(f"invalid directive arguments: {text!r}", text)


class InvalidPairError(DirectiveError):
    """Raised when an option token is not of the form ``key=value``."""

    def __init__(self, text: str) -> None:
        super().__init__(f"invalid parameter pair: {text}", text)


class UnknownOptionError(DirectiveError):
    """Raised for an option key other than in, name, required, type or descr."""

    def __init__(self, key: str, text: str) -> None:
        super().__init__(f"unknown option {key!r} in directive argument: {text}", text)
        self.key = key


class InvalidLocationError(DirectiveError):
    """Raised when ``in=`` names a location that is not accepted."""

    def __init__(self, value: str, accepted: list[str]) -> None:
        quoted = [f'"{a}"' for a in accepted]
        choices = ", ".join(quoted[:-1]) + f" or {quoted[-1]}"
        super().__init__(f"invalid location value: {value} (must be {choices})", value)
        self.value = value


class UnsupportedRequestFieldError(DirectiveError):
    """Raised when ``in=request`` names a field other than the remote address."""

    def __init__(self, arg_name: str, field: str, allowed: str) -> None:
        super().__init__(
            f'argument "{arg_name}" tries to extract value from `request.{field}`, '
            f"but only `request.{allowed}` is available",
            field,
        )
        self.arg_name = arg_name
        self.field = field
