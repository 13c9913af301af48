"""Example usage functions for motor control."""

import time

from loguru import logger

from ev3_python.definitions import EV3_DEFAULTS, StopAction
from ev3_python.lego_port import LegoPort
from ev3_python.motor_base import MotorBase
from ev3_python.tacho_motor import TachoMotor


def log_port_info(port: LegoPort) -> None:
    """Log everything the port reports about itself.

    :param port: Port to inspect.
    :return: None
    """
    logger.info(f"Port {port.get_name()} ({port.instance}):")
    logger.info(f"  Address: {port.get_address()}")
    logger.info(f"  Driver: {port.get_driver_name()}")
    logger.info(f"  Mode: {port.get_mode()} (available: {' '.join(port.get_modes())})")
    logger.info(f"  Status: {port.get_status()}")


def log_motor_info(motor: MotorBase) -> None:
    """Log the commands, state and main setpoints of a motor.

    :param motor: Motor to inspect.
    :return: None
    """
    commands = " ".join(command.value for command in motor.get_commands())
    state = " ".join(sorted(flag.value for flag in motor.get_state())) or "idle"
    logger.info(f"Motor {motor.instance} ({motor.get_driver_name()}):")
    logger.info(f"  Commands: {commands}")
    logger.info(f"  State: {state}")
    logger.info(f"  Duty cycle: {motor.get_duty_cycle()}% (sp {motor.get_duty_cycle_sp()}%)")
    if isinstance(motor, TachoMotor):
        logger.info(
            f"  Position: {motor.get_position()} / {motor.get_count_per_rot()} counts per rot"
        )


def run_timed_demo(
    motor: MotorBase,
    time_sp: int = EV3_DEFAULTS.time_sp_ms,
    duty_cycle_sp: int = EV3_DEFAULTS.duty_cycle_sp,
    stop_action: StopAction = StopAction.BRAKE,
) -> None:
    """Run the motor for a fixed time, forward and then reverse.

    :param motor: Motor to drive.
    :param time_sp: Duration of each run in milliseconds.
    :param duty_cycle_sp: Duty cycle in percent for the forward run.
    :param stop_action: Stop action applied at the end of each run.
    :return: None
    """
    motor.set_stop_action(stop_action)
    for duty in (duty_cycle_sp, -duty_cycle_sp):
        logger.info(f"Running {motor.instance} at {duty}% for {time_sp} ms")
        motor.run_timed(time_sp=time_sp, duty_cycle_sp=duty)
        # Motion duration is driver-side; just wait it out before the next run
        time.sleep(time_sp / 1000.0)
        logger.info(f"  State after run: {sorted(f.value for f in motor.get_state())}")
    motor.stop()
