"""Base class binding a LegoPort to the driver instance behind it.

Construction validates the port before resolving anything::

    port = LegoPort(LegoPort.PORT_B)
    device = Device(port, DeviceClass.TACHO_MOTOR, Subsystem.MOTOR)
    device.get_attribute("driver_name")

The binding made here is fixed: if different hardware is plugged in, build
a new Device.
"""

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from enum import Enum
from typing import TypeVar

from loguru import logger

from ev3_python.attribute_store import AttributeValue, token_value
from ev3_python.definitions import ADDRESS_ATTRIBUTE, MOTOR_ATTRIBUTES, SUBSYSTEM_FAMILIES
from ev3_python.device_resolver import DeviceResolver, ResolvedDevice
from ev3_python.exceptions import (
    AttributeIOError,
    DeviceNotConnectedError,
    InvalidPortError,
)
from ev3_python.lego_port import LegoPort

E = TypeVar("E", bound=Enum)


class Device:
    """A driver instance resolved from a port, with generic attribute access.

    Attribute access is serialized per Device object through a re-entrant
    lock. Use exclusive() to make several accesses atomic, e.g. writing a
    setpoint and then a command.
    """

    def __init__(
        self,
        port: LegoPort,
        device_class: str,
        subsystem: str,
        resolver: DeviceResolver | None = None,
    ) -> None:
        """Validate the port and resolve the backing instance.

        :param port: Port the device is plugged into.
        :param device_class: Required device class (e.g. "tacho-motor").
        :param subsystem: Instance name prefix (e.g. "motor").
        :param resolver: Resolver to use, defaults to one over the port's store.
        :return: None
        :raises InvalidPortError: If the port is the wrong connector family or
            reports a different device class.
        :raises DeviceNotPresentError: If no instance has the port's address.
        """
        self.port = port
        self.store = port.store
        self._device_class = token_value(device_class)
        self._subsystem = token_value(subsystem)
        self._lock = threading.RLock()

        address = self._validate_port()
        resolver = resolver if resolver is not None else DeviceResolver(self.store)
        self._resolved = resolver.resolve(self._device_class, self._subsystem, address)

    def _validate_port(self) -> str:
        """Check the connector family, then the bound device class.

        :return: The port address, used as the resolution key.
        """
        address = self.port.get_address()
        family = SUBSYSTEM_FAMILIES.get(self._subsystem)
        if family is None:
            raise InvalidPortError(
                f"Subsystem {self._subsystem!r} has no connector family; "
                f"expected one of {', '.join(SUBSYSTEM_FAMILIES)}"
            )
        if family.value not in address:
            logger.warning(
                f"Port {int(self.port.port_id)} ({address}) is not a "
                f"{family.name.lower()} port"
            )
            raise InvalidPortError(
                f"The specified port {int(self.port.port_id)} ({address}) "
                f"isn't an {family.name.lower()} port"
            )

        status = self.port.get_status()
        if status != self._device_class:
            logger.warning(
                f"Port {address} reports {status}, expected {self._device_class}"
            )
            raise InvalidPortError(
                f"The specified port ({address}) isn't a {self._device_class} "
                f"(expected {self._device_class}, found {status})"
            )
        return address

    @property
    def device_class(self) -> str:
        """Device class this object is bound to."""
        return self._device_class

    @property
    def subsystem(self) -> str:
        """Instance name prefix this object is bound to."""
        return self._subsystem

    @property
    def resolved(self) -> ResolvedDevice:
        """The instance directory resolved at construction."""
        return self._resolved

    @property
    def instance(self) -> str:
        """Name of the backing instance directory (e.g. "motor1")."""
        return self._resolved.instance

    @contextmanager
    def exclusive(self) -> Iterator["Device"]:
        """Hold this device's lock for a sequence of attribute accesses.

        :return: Iterator yielding self while the lock is held.
        """
        with self._lock:
            yield self

    def is_connected(self) -> bool:
        """Check that the resolved instance still exists at the same address.

        :return: True if the device is still present; never raises.
        """
        if not self.store.instance_exists(self._device_class, self.instance):
            return False
        try:
            address = self.store.read(self._device_class, self.instance, ADDRESS_ATTRIBUTE)
        except AttributeIOError:
            return False
        return address == self._resolved.address

    def get_attribute(self, name: str) -> str:
        """Read a raw attribute of the bound instance.

        :param name: Attribute name.
        :return: Attribute value as text.
        :raises DeviceNotConnectedError: If the device was unplugged.
        :raises AttributeIOError: On any other read failure.
        """
        return self._access(self.store.read, name)

    def get_int_attribute(self, name: str) -> int:
        """Read an integer attribute of the bound instance.

        :param name: Attribute name.
        :return: Attribute value.
        :raises AttributeFormatError: If the value is not an integer.
        """
        return self._access(self.store.read_int, name)

    def get_list_attribute(self, name: str) -> list[str]:
        """Read a whitespace-separated attribute of the bound instance.

        :param name: Attribute name.
        :return: Tokens in driver order.
        """
        return self._access(self.store.read_list, name)

    def get_bool_attribute(self, name: str) -> bool:
        """Read an on/off attribute of the bound instance.

        :param name: Attribute name.
        :return: Attribute value.
        """
        return self._access(self.store.read_bool, name)

    def get_enum_attribute(self, name: str, enum_cls: type[E]) -> E:
        """Read a token attribute of the bound instance.

        :param name: Attribute name.
        :param enum_cls: Enum holding the accepted tokens.
        :return: Matching enum member.
        """
        return self._access(self.store.read_enum, name, enum_cls)

    def get_enum_list_attribute(self, name: str, enum_cls: type[E]) -> list[E]:
        """Read a token list attribute of the bound instance.

        :param name: Attribute name.
        :param enum_cls: Enum holding the accepted tokens.
        :return: Enum members in driver order.
        """
        return self._access(self.store.read_enum_list, name, enum_cls)

    def set_attribute(self, name: str, value: AttributeValue) -> None:
        """Write an attribute of the bound instance.

        :param name: Attribute name.
        :param value: Value to write; coerced to text by the store.
        :return: None
        :raises DeviceNotConnectedError: If the device was unplugged.
        :raises AttributeIOError: If the driver rejects the write.
        """
        self._access(self.store.write, name, value)

    def get_address(self) -> str:
        """Get the address of this device.

        :return: Port address described as text.
        """
        return self.get_attribute(MOTOR_ATTRIBUTES.address)

    def get_driver_name(self) -> str:
        """Get the name of the driver that provides this device.

        :return: Driver name.
        """
        return self.get_attribute(MOTOR_ATTRIBUTES.driver_name)

    def _access(self, operation, name: str, *args):
        with self._lock:
            try:
                return operation(self._device_class, self.instance, name, *args)
            except DeviceNotConnectedError:
                raise
            except AttributeIOError as e:
                if not self.store.instance_exists(self._device_class, self.instance):
                    raise DeviceNotConnectedError(
                        e.path,
                        e.operation,
                        e.errno,
                        f"{self._device_class} {self.instance} is no longer connected",
                    ) from e
                raise

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self._device_class} {self.instance} "
            f"at {self._resolved.address})"
        )
