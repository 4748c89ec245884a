"""Hostname service backed by the socket module."""

import socket

from .interfaces import HostnamePort, HostnameResolutionError


class SocketHostnameService(HostnamePort):
    """Hostname service that asks the operating system on every call."""

    def system_hostname(self) -> str:
        """Return the current machine hostname.

        Returns:
            str: Non-empty hostname reported by the OS.

        Raises:
            HostnameResolutionError: Raised when the OS lookup fails or is blank.
        """

        try:
            hostname = socket.gethostname()
        except OSError as error:
            raise HostnameResolutionError("hostname lookup failed") from error
        if not hostname:
            raise HostnameResolutionError("hostname lookup returned an empty value")
        return hostname
