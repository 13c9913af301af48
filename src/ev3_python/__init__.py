"""Motor and port access for LEGO MINDSTORMS bricks running ev3dev.

Every device is a directory of plain-text attributes under /sys/class.
LegoPort reads a connector, Device resolves the driver instance behind it,
and TachoMotor / DCMotor expose typed commands and setpoints.
"""

__version__ = "0.1.0"

from ev3_python.attribute_store import AttributeStore
from ev3_python.dc_motor import DCMotor
from ev3_python.device import Device
from ev3_python.device_resolver import DeviceResolver, ResolvedDevice
from ev3_python.lego_port import LegoPort
from ev3_python.tacho_motor import TachoMotor

# Convenience alias: tacho motors are the standard EV3 motors
Motor = TachoMotor

__all__ = [
    "AttributeStore",
    "DCMotor",
    "Device",
    "DeviceResolver",
    "LegoPort",
    "Motor",
    "ResolvedDevice",
    "TachoMotor",
]
