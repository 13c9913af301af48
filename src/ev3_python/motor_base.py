"""Command and setpoint API shared by tacho motors and DC motors.

Both motor kinds are driven the same way: setpoints are plain attribute
writes, and motion starts when a command token is written to `command`.
The driver decides which commands are legal and rejects out-of-range
setpoints; those rejections surface as AttributeIOError, never as silent
clamping here.

Usage examples::

    motor = TachoMotor(LegoPort(LegoPort.PORT_A))
    motor.set_duty_cycle_sp(50)
    motor.run_timed(time_sp=1000)
    MotorStateFlag.RUNNING in motor.get_state()
    motor.stop()
"""

from loguru import logger

from ev3_python.attribute_store import AttributeValue
from ev3_python.definitions import (
    MOTOR_ATTRIBUTES,
    MotorCommand,
    MotorStateFlag,
    Polarity,
    StopAction,
    Subsystem,
)
from ev3_python.device import Device
from ev3_python.device_resolver import DeviceResolver
from ev3_python.lego_port import LegoPort


class MotorBase(Device):
    """Motor on an output port; subclasses fix the device class."""

    DEVICE_CLASS: str

    def __init__(self, port: LegoPort, resolver: DeviceResolver | None = None) -> None:
        """Bind the motor plugged into an output port.

        :param port: Output port (A to D).
        :param resolver: Resolver to use, defaults to one over the port's store.
        :return: None
        :raises InvalidPortError: If the port is an input or holds another device.
        :raises DeviceNotPresentError: If the driver has not enumerated the motor.
        """
        super().__init__(port, self.DEVICE_CLASS, Subsystem.MOTOR, resolver)
        logger.info(f"Connected to {self.DEVICE_CLASS} {self.instance} on {port.get_name()}")

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def send_command(self, command: MotorCommand | str) -> None:
        """Write a command token to the motor.

        :param command: Command supported by the motor driver.
        :return: None
        """
        logger.debug(f"{self.instance} command: {getattr(command, 'value', command)}")
        self.set_attribute(MOTOR_ATTRIBUTES.command, command)

    def _run(self, command: MotorCommand, **setpoints: AttributeValue | None) -> None:
        """Write the given setpoints, then the command, under the device lock.

        :param command: Command to send after the setpoints.
        :param setpoints: Attribute name to value; None values are skipped.
        :return: None
        """
        with self.exclusive():
            for name, value in setpoints.items():
                if value is not None:
                    self.set_attribute(getattr(MOTOR_ATTRIBUTES, name), value)
            self.send_command(command)

    def run_forever(self, duty_cycle_sp: int | None = None) -> None:
        """Run the motor until another command is sent.

        :param duty_cycle_sp: Optional duty cycle setpoint written first.
        :return: None
        """
        self._run(MotorCommand.RUN_FOREVER, duty_cycle_sp=duty_cycle_sp)

    def run_timed(self, time_sp: int | None = None, duty_cycle_sp: int | None = None) -> None:
        """Run for `time_sp` milliseconds, then stop using the stop action.

        :param time_sp: Optional run time in milliseconds written first.
        :param duty_cycle_sp: Optional duty cycle setpoint written first.
        :return: None
        """
        self._run(MotorCommand.RUN_TIMED, time_sp=time_sp, duty_cycle_sp=duty_cycle_sp)

    def run_direct(self) -> None:
        """Run the motor at `duty_cycle_sp`; later setpoint writes apply immediately.

        :return: None
        """
        self.send_command(MotorCommand.RUN_DIRECT)

    def stop(self) -> None:
        """Stop any running command using the configured stop action.

        :return: None
        """
        self.send_command(MotorCommand.STOP)

    def get_commands(self) -> list[MotorCommand]:
        """Get the commands supported by the motor driver.

        :return: Supported commands in driver order.
        """
        return self.get_enum_list_attribute(MOTOR_ATTRIBUTES.commands, MotorCommand)

    def get_state(self) -> frozenset[MotorStateFlag]:
        """Get the state flags currently reported by the driver.

        :return: Active flags; empty when the motor is idle.
        """
        return frozenset(
            self.get_enum_list_attribute(MOTOR_ATTRIBUTES.state, MotorStateFlag)
        )

    def is_running(self) -> bool:
        """Check whether the driver reports the motor as running.

        :return: True if the running flag is set.
        """
        return MotorStateFlag.RUNNING in self.get_state()

    # ------------------------------------------------------------------
    # Setpoints
    # ------------------------------------------------------------------

    def get_duty_cycle(self) -> int:
        """Get the current duty cycle in percent (-100 to 100).

        :return: Duty cycle.
        """
        return self.get_int_attribute(MOTOR_ATTRIBUTES.duty_cycle)

    def get_duty_cycle_sp(self) -> int:
        """Get the duty cycle setpoint in percent.

        :return: Duty cycle setpoint.
        """
        return self.get_int_attribute(MOTOR_ATTRIBUTES.duty_cycle_sp)

    def set_duty_cycle_sp(self, duty_cycle_sp: int) -> None:
        """Set the duty cycle setpoint; negative values reverse the motor.

        :param duty_cycle_sp: Percent, -100 to 100.
        :return: None
        """
        self.set_attribute(MOTOR_ATTRIBUTES.duty_cycle_sp, duty_cycle_sp)

    def get_polarity(self) -> Polarity:
        """Get the motor polarity.

        :return: Polarity.
        """
        return self.get_enum_attribute(MOTOR_ATTRIBUTES.polarity, Polarity)

    def set_polarity(self, polarity: Polarity | str) -> None:
        """Set the motor polarity.

        :param polarity: Polarity or its token.
        :return: None
        """
        self.set_attribute(MOTOR_ATTRIBUTES.polarity, polarity)

    def get_ramp_up_sp(self) -> int:
        """Get the ramp up setpoint in milliseconds.

        :return: Ramp up time.
        """
        return self.get_int_attribute(MOTOR_ATTRIBUTES.ramp_up_sp)

    def set_ramp_up_sp(self, ramp_up_sp: int) -> None:
        """Set the ramp up setpoint in milliseconds.

        :param ramp_up_sp: Ramp up time.
        :return: None
        """
        self.set_attribute(MOTOR_ATTRIBUTES.ramp_up_sp, ramp_up_sp)

    def get_ramp_down_sp(self) -> int:
        """Get the ramp down setpoint in milliseconds.

        :return: Ramp down time.
        """
        return self.get_int_attribute(MOTOR_ATTRIBUTES.ramp_down_sp)

    def set_ramp_down_sp(self, ramp_down_sp: int) -> None:
        """Set the ramp down setpoint in milliseconds.

        :param ramp_down_sp: Ramp down time.
        :return: None
        """
        self.set_attribute(MOTOR_ATTRIBUTES.ramp_down_sp, ramp_down_sp)

    def get_time_sp(self) -> int:
        """Get the run-timed duration in milliseconds.

        :return: Time setpoint.
        """
        return self.get_int_attribute(MOTOR_ATTRIBUTES.time_sp)

    def set_time_sp(self, time_sp: int) -> None:
        """Set the run-timed duration in milliseconds.

        :param time_sp: Time setpoint.
        :return: None
        """
        self.set_attribute(MOTOR_ATTRIBUTES.time_sp, time_sp)

    def get_stop_action(self) -> StopAction:
        """Get the action applied when the motor stops.

        :return: Stop action.
        """
        return self.get_enum_attribute(MOTOR_ATTRIBUTES.stop_action, StopAction)

    def set_stop_action(self, stop_action: StopAction | str) -> None:
        """Set the action applied when the motor stops.

        :param stop_action: One of get_stop_actions().
        :return: None
        """
        self.set_attribute(MOTOR_ATTRIBUTES.stop_action, stop_action)

    def get_stop_actions(self) -> list[StopAction]:
        """Get the stop actions supported by the driver.

        :return: Stop actions in driver order.
        """
        return self.get_enum_list_attribute(MOTOR_ATTRIBUTES.stop_actions, StopAction)
