"""
Error types raised by the RajaOngkir client.
Transport failures, undecodable bodies, and non-2xx envelope statuses each get their own class.
"""
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rajaongkir.data.models.envelope import Status


class RajaOngkirError(Exception):
    """Base class for every error raised by this package."""


class TransportError(RajaOngkirError):
    """The request never produced a usable reply (connection, timeout, HTTP error without an envelope)."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class DecodeError(RajaOngkirError):
    """The reply body is not JSON or does not match the expected envelope."""


class RemoteError(RajaOngkirError):
    """The envelope status code is outside [200, 300)."""

    def __init__(self, code: int, description: str):
        super().__init__(description)
        self.code = code
        self.description = description

    def __str__(self) -> str:
        return self.description

    def __repr__(self) -> str:
        return f"RemoteError(code={self.code!r}, description={self.description!r})"


class EmptyResultError(RajaOngkirError):
    """A cost lookup returned no carrier service."""


def check_status(status: "Status") -> None:
    if status.ok:
        return
    raise RemoteError(status.code, status.description)
