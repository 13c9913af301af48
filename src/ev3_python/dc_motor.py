"""Plain DC motor (RCX, Power Functions) without feedback."""

from ev3_python.definitions import DeviceClass
from ev3_python.motor_base import MotorBase


class DCMotor(MotorBase):
    """DC motor: duty cycle, ramps, timed runs and stop action only.

    Supports run-forever, run-timed, run-direct and stop. Position and speed
    regulation are tacho-motor features.
    """

    DEVICE_CLASS = DeviceClass.DC_MOTOR.value
