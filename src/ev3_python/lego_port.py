"""Physical connector of the brick, backed by a lego-port instance."""

from loguru import logger

from ev3_python.attribute_store import AttributeStore
from ev3_python.definitions import (
    MAX_PORT_ID,
    MIN_PORT_ID,
    PORT_ATTRIBUTES,
    UNBOUND_PORT_STATUSES,
    DeviceClass,
    PortId,
    Subsystem,
)
from ev3_python.exceptions import InvalidPortError


class LegoPort:
    """One of the eight connectors: 0-3 are sensor inputs, 4-7 motor outputs.

    Every accessor re-reads the port's attribute directory; nothing is
    cached because the attached hardware can change at any time.
    """

    PORT_1 = PortId.PORT_1
    PORT_2 = PortId.PORT_2
    PORT_3 = PortId.PORT_3
    PORT_4 = PortId.PORT_4
    PORT_A = PortId.PORT_A
    PORT_B = PortId.PORT_B
    PORT_C = PortId.PORT_C
    PORT_D = PortId.PORT_D

    def __init__(self, port: int, store: AttributeStore | None = None) -> None:
        """Initialize the port.

        :param port: Port id, 0 to 7 (see PortId).
        :param store: Attribute store, defaults to the live sysfs tree.
        :return: None
        :raises InvalidPortError: If the id is not an integer in range.
        """
        if isinstance(port, bool) or not isinstance(port, int):
            raise InvalidPortError(f"Port must be an integer, got {port!r}")
        if port < MIN_PORT_ID:
            raise InvalidPortError(f"Port is lower than {int(MIN_PORT_ID)}, Port: {port}")
        if port > MAX_PORT_ID:
            raise InvalidPortError(f"Port is higher than {int(MAX_PORT_ID)}, Port: {port}")
        self._port_id = PortId(port)
        self.store = store if store is not None else AttributeStore()

    @property
    def port_id(self) -> PortId:
        """Port id this object was constructed with."""
        return self._port_id

    @property
    def instance(self) -> str:
        """Name of the lego-port instance directory (e.g. "port4")."""
        return f"{Subsystem.PORT.value}{int(self._port_id)}"

    def get_name(self) -> str:
        """Get the slot name printed on the brick.

        :return: Slot name such as "in1" or "outA".
        """
        return self._port_id.get_name()

    def is_output(self) -> bool:
        """Check whether this is a motor output slot.

        :return: True for ports A to D.
        """
        return self._port_id.is_output()

    def get_address(self) -> str:
        """Get the address the driver reports for this port.

        :return: Address such as "outA".
        """
        return self._read(PORT_ATTRIBUTES.address)

    def get_driver_name(self) -> str:
        """Get the name of the driver that provides this port.

        :return: Driver name.
        """
        return self._read(PORT_ATTRIBUTES.driver_name)

    def get_modes(self) -> list[str]:
        """Get the modes this port supports.

        :return: Mode names in driver order.
        """
        return self.store.read_list(
            DeviceClass.LEGO_PORT, self.instance, PORT_ATTRIBUTES.modes
        )

    def get_mode(self) -> str:
        """Get the currently active mode.

        :return: Mode name.
        """
        return self._read(PORT_ATTRIBUTES.mode)

    def set_mode(self, mode: str) -> None:
        """Change the active mode.

        :param mode: One of the names returned by get_modes().
        :return: None
        """
        logger.info(f"Setting {self.get_name()} mode to {mode}")
        self.store.write(DeviceClass.LEGO_PORT, self.instance, PORT_ATTRIBUTES.mode, mode)

    def set_device(self, driver_name: str) -> None:
        """Bind a driver to a port whose mode does not auto-detect devices.

        :param driver_name: Name of the device driver to load.
        :return: None
        """
        logger.info(f"Binding driver {driver_name} to {self.get_name()}")
        self.store.write(
            DeviceClass.LEGO_PORT, self.instance, PORT_ATTRIBUTES.set_device, driver_name
        )

    def get_status(self) -> str:
        """Get the device class currently bound to this port.

        :return: Device class name, or an unbound marker such as "no-device".
        """
        return self._read(PORT_ATTRIBUTES.status)

    def is_bound(self) -> bool:
        """Check whether a device driver is bound to this port.

        :return: False if the status is one of the unbound markers.
        """
        return self.get_status() not in UNBOUND_PORT_STATUSES

    def _read(self, attribute: str) -> str:
        return self.store.read(DeviceClass.LEGO_PORT, self.instance, attribute)

    def __repr__(self) -> str:
        return f"LegoPort({self._port_id.name})"
