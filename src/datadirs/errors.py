from __future__ import annotations


class LocationError(ValueError):
    def __init__(self, message: str, text: str) -> None:
        super().__init__(message)
        self.text = text


class UnknownMedium(LocationError):
    def __init__(self, text: str) -> None:
        super().__init__(f"Unknown storage medium: {text!r}", text)


class UnknownModifier(LocationError):
    def __init__(self, text: str) -> None:
        super().__init__(f"Unknown storage modifier: {text!r}", text)


class UnsupportedScheme(LocationError):
    def __init__(self, scheme: str, location: str | None = None) -> None:
        detail = f" in {location!r}" if location is not None else ""
        super().__init__(f"Unsupported URI scheme {scheme!r}{detail}", scheme)
        self.location = location

    @property
    def scheme(self) -> str:
        return self.text


class MalformedLocation(LocationError):
    def __init__(self, text: str, reason: str = "not a valid URI") -> None:
        super().__init__(f"Malformed storage location {text!r}: {reason}", text)
        self.reason = reason


class InvalidDataDirs(LocationError):
    """Raised when one entry of a configured data directory list fails to parse."""

    def __init__(self, index: int, token: str, cause: LocationError) -> None:
        super().__init__(f"Invalid data directory #{index} {token!r}: {cause}", cause.text)
        self.index = index
        self.token = token
        self.cause = cause


__all__ = [
    "InvalidDataDirs",
    "LocationError",
    "MalformedLocation",
    "UnknownMedium",
    "UnknownModifier",
    "UnsupportedScheme",
]
