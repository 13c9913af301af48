"""Exceptions raised by the port, device and attribute layers.

Every error is recoverable by the caller; nothing here is retried internally
because re-sending a motor command could actuate the motor twice.
"""

from pathlib import Path


class Ev3Error(Exception):
    """Base exception for all ev3_python errors."""


class InvalidPortError(Ev3Error):
    """Raised when a port id is out of range or the port cannot host the device."""


class DeviceNotPresentError(Ev3Error):
    """Raised when no enumerated instance has the requested address.

    This is potentially transient: the driver may not have enumerated the
    device yet.
    """

    def __init__(self, device_class: str, subsystem: str, address: str) -> None:
        """Initialize the error.

        :param device_class: Device class that was searched.
        :param subsystem: Instance name prefix that was searched.
        :param address: Address that did not match any instance.
        :return: None
        """
        super().__init__(
            f"No {device_class} device ({subsystem}N) found with address '{address}'"
        )
        self.device_class = device_class
        self.subsystem = subsystem
        self.address = address


class AttributeIOError(Ev3Error):
    """Raised when reading or writing a backing attribute file fails."""

    def __init__(
        self,
        path: Path,
        operation: str,
        errno: int | None = None,
        reason: str = "",
    ) -> None:
        """Initialize the error.

        :param path: Attribute file that was accessed.
        :param operation: "read" or "write".
        :param errno: OS error number, if any.
        :param reason: Human-readable cause.
        :return: None
        """
        message = f"Failed to {operation} attribute {path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.path = path
        self.operation = operation
        self.errno = errno


class DeviceNotConnectedError(AttributeIOError):
    """Raised when an attribute access fails because the device was unplugged."""


class AttributeFormatError(Ev3Error):
    """Raised when an attribute value cannot be coerced to the requested type."""

    def __init__(self, path: Path, raw_value: str, expected: str) -> None:
        """Initialize the error.

        :param path: Attribute file that was read.
        :param raw_value: Content that failed to convert.
        :param expected: Description of the expected type.
        :return: None
        """
        super().__init__(f"Attribute {path} holds {raw_value!r}, expected {expected}")
        self.path = path
        self.raw_value = raw_value
        self.expected = expected
