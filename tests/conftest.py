"""Code to help initialize pytest."""

import os
import sys
from pathlib import Path

import pytest

# Add the src directory to the path so that the ev3_python package can be imported
my_path = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, os.path.join(my_path, "../src"))

from ev3_python.attribute_store import AttributeStore  # noqa: E402
from ev3_python.definitions import MOTOR_ATTRIBUTES, MotorCommand, MotorStateFlag  # noqa: E402

TACHO_MOTOR_ATTRIBUTES = {
    "driver_name": "lego-ev3-l-motor",
    "command": "",
    "commands": "run-forever run-to-abs-pos run-to-rel-pos run-timed run-direct stop reset",
    "state": "",
    "count_per_rot": "360",
    "duty_cycle": "0",
    "duty_cycle_sp": "0",
    "encoder_polarity": "normal",
    "polarity": "normal",
    "position": "0",
    "position_p": "80000",
    "position_i": "0",
    "position_d": "0",
    "position_sp": "0",
    "speed": "0",
    "speed_sp": "0",
    "ramp_up_sp": "0",
    "ramp_down_sp": "0",
    "speed_regulation": "off",
    "speed_regulation_P": "1000",
    "speed_regulation_I": "60",
    "speed_regulation_D": "0",
    "stop_action": "coast",
    "stop_actions": "coast brake hold",
    "time_sp": "0",
}

DC_MOTOR_ATTRIBUTES = {
    "driver_name": "rcx-motor",
    "command": "",
    "commands": "run-forever run-timed run-direct stop",
    "state": "",
    "duty_cycle": "0",
    "duty_cycle_sp": "0",
    "polarity": "normal",
    "ramp_up_sp": "0",
    "ramp_down_sp": "0",
    "stop_action": "coast",
    "stop_actions": "coast brake",
    "time_sp": "0",
}


class FakeSysfs:
    """Builds a device-class tree of plain files under a temporary directory."""

    def __init__(self, root: Path) -> None:
        self.root = root

    def write_attributes(self, device_class: str, instance: str, attributes: dict) -> Path:
        instance_dir = self.root / device_class / instance
        instance_dir.mkdir(parents=True, exist_ok=True)
        for name, value in attributes.items():
            (instance_dir / name).write_text(f"{value}\n")
        return instance_dir

    def add_port(
        self,
        port_id: int,
        address: str,
        status: str = "no-device",
        driver_name: str | None = None,
    ) -> Path:
        if driver_name is None:
            driver_name = (
                "legoev3-output-port" if address.startswith("out") else "legoev3-input-port"
            )
        return self.write_attributes(
            "lego-port",
            f"port{port_id}",
            {
                "address": address,
                "driver_name": driver_name,
                "modes": "auto tacho-motor dc-motor led raw",
                "mode": "auto",
                "set_device": "",
                "status": status,
            },
        )

    def add_device(
        self, device_class: str, instance: str, address: str, **overrides: str
    ) -> Path:
        defaults = DC_MOTOR_ATTRIBUTES if device_class == "dc-motor" else TACHO_MOTOR_ATTRIBUTES
        attributes = {"address": address, **defaults, **overrides}
        return self.write_attributes(device_class, instance, attributes)

    def read(self, device_class: str, instance: str, attribute: str) -> str:
        return (self.root / device_class / instance / attribute).read_text()


class SimulatedMotorStore(AttributeStore):
    """AttributeStore that updates `state` the way a motor driver would."""

    def __init__(self, root: Path) -> None:
        super().__init__(root)
        self.commands: list[str] = []

    def write(self, device_class, instance, attribute, value) -> None:
        super().write(device_class, instance, attribute, value)
        if attribute != MOTOR_ATTRIBUTES.command:
            return
        command = MotorCommand(getattr(value, "value", value))
        self.commands.append(command.value)
        if command in (MotorCommand.STOP, MotorCommand.RESET):
            state = ""
        else:
            state = MotorStateFlag.RUNNING.value
        path = self.attribute_path(device_class, instance, MOTOR_ATTRIBUTES.state)
        path.write_text(f"{state}\n")


@pytest.fixture
def fake_sysfs(tmp_path) -> FakeSysfs:
    """Provide an empty fake device-class tree."""
    return FakeSysfs(tmp_path / "class")


@pytest.fixture
def store(fake_sysfs) -> AttributeStore:
    """Provide an attribute store over the fake tree."""
    return AttributeStore(fake_sysfs.root)


@pytest.fixture
def sim_store(fake_sysfs) -> SimulatedMotorStore:
    """Provide a store whose command writes update the motor state."""
    return SimulatedMotorStore(fake_sysfs.root)


@pytest.fixture
def brick(fake_sysfs) -> FakeSysfs:
    """Provide a brick with all eight ports and three tacho motors on A-C.

    Motor instances are numbered out of port order to exercise resolution.
    """
    for port_id, address in enumerate(
        ["in1", "in2", "in3", "in4", "outA", "outB", "outC", "outD"]
    ):
        fake_sysfs.add_port(port_id, address)
    fake_sysfs.add_port(0, "in1", status="lego-sensor")
    fake_sysfs.add_port(4, "outA", status="tacho-motor")
    fake_sysfs.add_port(5, "outB", status="tacho-motor")
    fake_sysfs.add_port(6, "outC", status="tacho-motor")
    fake_sysfs.add_device("tacho-motor", "motor0", "outA")
    fake_sysfs.add_device("tacho-motor", "motor1", "outB")
    fake_sysfs.add_device("tacho-motor", "motor2", "outC")
    return fake_sysfs
