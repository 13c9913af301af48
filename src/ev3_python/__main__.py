"""Motor control main entry point using the LegoPort and motor classes."""

import argparse
from pathlib import Path

from loguru import logger

from ev3_python.attribute_store import AttributeStore
from ev3_python.dc_motor import DCMotor
from ev3_python.definitions import (
    DEFAULT_LOG_LEVEL,
    EV3_DEFAULTS,
    OUTPUT_PORT_LETTERS,
    LogLevel,
)
from ev3_python.examples import log_motor_info, log_port_info, run_timed_demo
from ev3_python.exceptions import Ev3Error
from ev3_python.lego_port import LegoPort
from ev3_python.motor_base import MotorBase
from ev3_python.tacho_motor import TachoMotor
from ev3_python.utils import setup_logger

MOTOR_TYPES: dict[str, type[MotorBase]] = {"tacho": TachoMotor, "dc": DCMotor}


def main(
    log_level: str = DEFAULT_LOG_LEVEL,
    stderr_level: str = DEFAULT_LOG_LEVEL,
    sysfs_root: Path = EV3_DEFAULTS.sysfs_root,
    port: str = EV3_DEFAULTS.port,
    motor_type: str = EV3_DEFAULTS.motor_type,
    time_sp: int = EV3_DEFAULTS.time_sp_ms,
    duty_cycle_sp: int = EV3_DEFAULTS.duty_cycle_sp,
    log_dir: Path | None = None,
) -> bool:
    """Inspect an output port and run a timed demo on the motor behind it.

    :param log_level: The log level to use.
    :param stderr_level: The std err level to use.
    :param sysfs_root: Root of the device-class tree.
    :param port: Output port letter, A to D.
    :param motor_type: "tacho" or "dc".
    :param time_sp: Duration of each demo run in milliseconds.
    :param duty_cycle_sp: Duty cycle for the demo runs in percent.
    :param log_dir: Directory for the log file (default: data/logs).
    :return: True if the demo ran, False if the hardware was not available.
    """
    setup_logger(log_level=log_level, stderr_level=stderr_level, log_dir=log_dir)
    logger.info(f"Starting motor demo on port {port} ({sysfs_root})...")

    port_id = OUTPUT_PORT_LETTERS.get(port.upper())
    if port_id is None:
        logger.error(
            f"Unknown output port {port!r}; expected one of {', '.join(OUTPUT_PORT_LETTERS)}"
        )
        return False

    store = AttributeStore(sysfs_root)
    lego_port = LegoPort(port_id, store=store)

    try:
        log_port_info(lego_port)
        motor = MOTOR_TYPES[motor_type](lego_port)
    except Ev3Error as e:
        logger.error(f"Failed to initialize motor: {e}")
        logger.info("Exiting gracefully - hardware not available")
        return False

    try:
        log_motor_info(motor)
        run_timed_demo(motor, time_sp=time_sp, duty_cycle_sp=duty_cycle_sp)
    except Ev3Error as e:
        logger.error(f"Motor demo failed: {e}")
        return False

    logger.info("Motor demo complete!")
    return True


if __name__ == "__main__":  # pragma: no cover
    parser = argparse.ArgumentParser("Run the motor demo.")
    parser.add_argument(
        "--log-level",
        default=DEFAULT_LOG_LEVEL,
        choices=list(LogLevel()),
        help="Set the log level.",
        required=False,
        type=str,
    )
    parser.add_argument(
        "--stderr-level",
        default=DEFAULT_LOG_LEVEL,
        choices=list(LogLevel()),
        help="Set the std err level.",
        required=False,
        type=str,
    )
    parser.add_argument(
        "--sysfs-root",
        default=EV3_DEFAULTS.sysfs_root,
        help="Root of the device-class tree.",
        type=Path,
    )
    parser.add_argument(
        "--port",
        default=EV3_DEFAULTS.port,
        choices=list(OUTPUT_PORT_LETTERS),
        help="Output port the motor is plugged into.",
        type=str.upper,
    )
    parser.add_argument(
        "--motor-type",
        default=EV3_DEFAULTS.motor_type,
        choices=list(MOTOR_TYPES),
        help="Kind of motor on the port.",
        type=str,
    )
    parser.add_argument(
        "--time-sp",
        default=EV3_DEFAULTS.time_sp_ms,
        help="Duration of each demo run in milliseconds.",
        type=int,
    )
    parser.add_argument(
        "--duty-cycle-sp",
        default=EV3_DEFAULTS.duty_cycle_sp,
        help="Duty cycle of the demo runs in percent.",
        type=int,
    )
    args = parser.parse_args()

    main(
        log_level=args.log_level,
        stderr_level=args.stderr_level,
        sysfs_root=args.sysfs_root,
        port=args.port,
        motor_type=args.motor_type,
        time_sp=args.time_sp,
        duty_cycle_sp=args.duty_cycle_sp,
    )
