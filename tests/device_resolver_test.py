"""Unit tests for DeviceResolver."""

import errno
import shutil
from unittest.mock import patch

import pytest

from ev3_python.definitions import DeviceClass, Subsystem
from ev3_python.device_resolver import DeviceResolver, ResolvedDevice
from ev3_python.exceptions import AttributeIOError, DeviceNotPresentError


@pytest.fixture
def three_motors(fake_sysfs):
    """Provide motor0..motor2 on outA..outC."""
    for index, address in enumerate(["outA", "outB", "outC"]):
        fake_sysfs.add_device("tacho-motor", f"motor{index}", address)
    return fake_sysfs


class TestResolve:
    """Address matching over numbered instances."""

    def test_resolves_matching_address(self, three_motors, store):
        """outB resolves to motor1."""
        resolved = DeviceResolver(store).resolve("tacho-motor", "motor", "outB")
        assert resolved == ResolvedDevice(
            device_class="tacho-motor", subsystem="motor", instance="motor1", address="outB"
        )

    def test_accepts_enum_tokens(self, three_motors, store):
        """Device class and subsystem enums resolve like their strings."""
        resolved = DeviceResolver(store).resolve(
            DeviceClass.TACHO_MOTOR, Subsystem.MOTOR, "outC"
        )
        assert resolved.instance == "motor2"
        assert resolved.device_class == "tacho-motor"

    def test_unknown_address(self, three_motors, store):
        """An address no instance reports raises DeviceNotPresentError."""
        with pytest.raises(DeviceNotPresentError) as exc_info:
            DeviceResolver(store).resolve("tacho-motor", "motor", "outD")
        assert exc_info.value.address == "outD"
        assert exc_info.value.device_class == "tacho-motor"

    def test_missing_device_class(self, store):
        """No enumerated class directory at all is also DeviceNotPresentError."""
        with pytest.raises(DeviceNotPresentError):
            DeviceResolver(store).resolve("dc-motor", "motor", "outA")

    def test_exact_match_only(self, fake_sysfs, store):
        """Addresses are compared exactly, not by prefix."""
        fake_sysfs.add_device("tacho-motor", "motor0", "outA:lego-ev3-l-motor")
        with pytest.raises(DeviceNotPresentError):
            DeviceResolver(store).resolve("tacho-motor", "motor", "outA")

    def test_duplicate_address_lowest_index_wins(self, fake_sysfs, store):
        """With duplicate addresses the scan stops at the lowest index."""
        fake_sysfs.add_device("tacho-motor", "motor3", "outA")
        fake_sysfs.add_device("tacho-motor", "motor1", "outA")
        resolved = DeviceResolver(store).resolve("tacho-motor", "motor", "outA")
        assert resolved.instance == "motor1"

    def test_gap_in_numbering(self, fake_sysfs, store):
        """Instances after a removed index are still found."""
        fake_sysfs.add_device("tacho-motor", "motor0", "outA")
        fake_sysfs.add_device("tacho-motor", "motor2", "outC")
        resolved = DeviceResolver(store).resolve("tacho-motor", "motor", "outC")
        assert resolved.instance == "motor2"

    def test_unreadable_sibling_is_skipped(self, three_motors, store):
        """An instance that vanishes mid-scan does not hide later matches."""
        real_read = store.read

        def unplugging_read(device_class, instance, attribute):
            if instance == "motor0":
                shutil.rmtree(three_motors.root / device_class / instance)
            return real_read(device_class, instance, attribute)

        with patch.object(store, "read", side_effect=unplugging_read):
            resolved = DeviceResolver(store).resolve("tacho-motor", "motor", "outB")
        assert resolved.instance == "motor1"

    def test_permission_error_propagates(self, three_motors, store):
        """A present instance that cannot be read raises instead of being skipped."""
        real_read = store.read

        def denied_read(device_class, instance, attribute):
            if instance == "motor1":
                raise AttributeIOError(
                    store.attribute_path(device_class, instance, attribute),
                    "read",
                    errno.EACCES,
                    "Permission denied",
                )
            return real_read(device_class, instance, attribute)

        with patch.object(store, "read", side_effect=denied_read):
            with pytest.raises(AttributeIOError) as exc_info:
                DeviceResolver(store).resolve("tacho-motor", "motor", "outB")
        assert exc_info.value.errno == errno.EACCES

    def test_missing_address_on_present_instance_propagates(self, three_motors, store):
        """A missing address file on a present instance is not a vanished device."""
        (three_motors.root / "tacho-motor" / "motor0" / "address").unlink()
        with pytest.raises(AttributeIOError) as exc_info:
            DeviceResolver(store).resolve("tacho-motor", "motor", "outB")
        assert exc_info.value.errno == errno.ENOENT

    def test_resolution_is_not_cached(self, three_motors, store):
        """A re-enumerated device is found under its new instance name."""
        resolver = DeviceResolver(store)
        assert resolver.resolve("tacho-motor", "motor", "outB").instance == "motor1"
        three_motors.add_device("tacho-motor", "motor1", "outC")
        three_motors.add_device("tacho-motor", "motor2", "outB")
        assert resolver.resolve("tacho-motor", "motor", "outB").instance == "motor2"

    def test_resolved_device_is_immutable(self, three_motors, store):
        """ResolvedDevice cannot be rebound."""
        resolved = DeviceResolver(store).resolve("tacho-motor", "motor", "outA")
        with pytest.raises(AttributeError):
            resolved.instance = "motor2"
