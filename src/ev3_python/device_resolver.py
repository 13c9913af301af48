"""Resolve a (device class, subsystem, address) triple to an instance directory."""

import errno
from dataclasses import dataclass

from loguru import logger

from ev3_python.attribute_store import AttributeStore, token_value
from ev3_python.definitions import ADDRESS_ATTRIBUTE
from ev3_python.exceptions import AttributeIOError, DeviceNotPresentError


@dataclass(frozen=True)
class ResolvedDevice:
    """An instance directory bound to the address it was resolved for.

    Only valid while the physical connection persists: drivers may
    re-enumerate a reconnected device under a different index.
    """

    device_class: str
    subsystem: str
    instance: str
    address: str


class DeviceResolver:
    """Finds the numbered instance whose `address` attribute matches."""

    def __init__(self, store: AttributeStore) -> None:
        """Initialize the resolver.

        :param store: Attribute store used to enumerate and read instances.
        :return: None
        """
        self.store = store

    def resolve(self, device_class: str, subsystem: str, address: str) -> ResolvedDevice:
        """Scan `<subsystem>0`, `<subsystem>1`, ... and return the first match.

        Neither waits nor retries. If two instances share an address the
        lowest index wins, which is deterministic but carries no meaning.

        :param device_class: Device class directory name (e.g. "tacho-motor").
        :param subsystem: Instance name prefix (e.g. "motor").
        :param address: Port address to match exactly (e.g. "outB").
        :return: The resolved device.
        :raises DeviceNotPresentError: If no instance has the address.
        :raises AttributeIOError: If a present instance cannot be read.
        """
        device_class = token_value(device_class)
        subsystem = token_value(subsystem)
        instances = self.store.list_instances(device_class, subsystem)
        for instance in instances:
            try:
                instance_address = self.store.read(
                    device_class, instance, ADDRESS_ATTRIBUTE
                )
            except AttributeIOError as e:
                if e.errno != errno.ENOENT or self.store.instance_exists(
                    device_class, instance
                ):
                    raise
                logger.warning(f"Skipping vanished {device_class}/{instance}: {e}")
                continue
            if instance_address == address:
                logger.info(f"Resolved {device_class} at {address} to {instance}")
                return ResolvedDevice(
                    device_class=device_class,
                    subsystem=subsystem,
                    instance=instance,
                    address=address,
                )

        logger.debug(
            f"No match for {address} among {len(instances)} {device_class} instances"
        )
        raise DeviceNotPresentError(device_class, subsystem, address)
