"""LEGO tacho motor (EV3 large/medium, NXT) with encoder feedback."""

from ev3_python.definitions import MOTOR_ATTRIBUTES, DeviceClass, MotorCommand, Polarity
from ev3_python.motor_base import MotorBase


class TachoMotor(MotorBase):
    """Motor with a rotation encoder, position/speed setpoints and PID tuning."""

    DEVICE_CLASS = DeviceClass.TACHO_MOTOR.value

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def run_to_abs_pos(self, position_sp: int | None = None) -> None:
        """Run to the absolute position in `position_sp`.

        :param position_sp: Optional target in tacho counts written first.
        :return: None
        """
        self._run(MotorCommand.RUN_TO_ABS_POS, position_sp=position_sp)

    def run_to_rel_pos(self, position_sp: int | None = None) -> None:
        """Run `position_sp` tacho counts from the current position.

        :param position_sp: Optional relative target written first.
        :return: None
        """
        self._run(MotorCommand.RUN_TO_REL_POS, position_sp=position_sp)

    def reset(self) -> None:
        """Reset all motor attributes to their defaults; also stops the motor.

        :return: None
        """
        self.send_command(MotorCommand.RESET)

    # ------------------------------------------------------------------
    # Encoder
    # ------------------------------------------------------------------

    def get_count_per_rot(self) -> int:
        """Get the number of tacho counts in one rotation.

        :return: Counts per rotation.
        """
        return self.get_int_attribute(MOTOR_ATTRIBUTES.count_per_rot)

    def get_encoder_polarity(self) -> Polarity:
        """Get the encoder polarity.

        :return: Polarity.
        """
        return self.get_enum_attribute(MOTOR_ATTRIBUTES.encoder_polarity, Polarity)

    def set_encoder_polarity(self, encoder_polarity: Polarity | str) -> None:
        """Set the encoder polarity.

        :param encoder_polarity: Polarity or its token.
        :return: None
        """
        self.set_attribute(MOTOR_ATTRIBUTES.encoder_polarity, encoder_polarity)

    def get_position(self) -> int:
        """Get the current position in tacho counts.

        :return: Position.
        """
        return self.get_int_attribute(MOTOR_ATTRIBUTES.position)

    def set_position(self, position: int) -> None:
        """Redefine the current position without moving the motor.

        :param position: New position value in tacho counts.
        :return: None
        """
        self.set_attribute(MOTOR_ATTRIBUTES.position, position)

    def get_speed(self) -> int:
        """Get the current speed in tacho counts per second.

        :return: Speed.
        """
        return self.get_int_attribute(MOTOR_ATTRIBUTES.speed)

    # ------------------------------------------------------------------
    # Setpoints
    # ------------------------------------------------------------------

    def get_position_sp(self) -> int:
        """Get the position setpoint used by the run-to-*-pos commands.

        :return: Position setpoint.
        """
        return self.get_int_attribute(MOTOR_ATTRIBUTES.position_sp)

    def set_position_sp(self, position_sp: int) -> None:
        """Set the position setpoint used by the run-to-*-pos commands.

        :param position_sp: Target in tacho counts.
        :return: None
        """
        self.set_attribute(MOTOR_ATTRIBUTES.position_sp, position_sp)

    def get_speed_sp(self) -> int:
        """Get the speed setpoint used when speed regulation is on.

        :return: Speed setpoint.
        """
        return self.get_int_attribute(MOTOR_ATTRIBUTES.speed_sp)

    def set_speed_sp(self, speed_sp: int) -> None:
        """Set the speed setpoint used when speed regulation is on.

        :param speed_sp: Tacho counts per second.
        :return: None
        """
        self.set_attribute(MOTOR_ATTRIBUTES.speed_sp, speed_sp)

    def is_speed_regulation_enabled(self) -> bool:
        """Check whether the driver regulates speed (uses `speed_sp`).

        :return: True if speed regulation is on.
        """
        return self.get_bool_attribute(MOTOR_ATTRIBUTES.speed_regulation)

    def set_speed_regulation_enabled(self, enabled: bool) -> None:
        """Turn speed regulation on or off.

        :param enabled: True to regulate on `speed_sp`, False for `duty_cycle_sp`.
        :return: None
        """
        self.set_attribute(MOTOR_ATTRIBUTES.speed_regulation, bool(enabled))

    # ------------------------------------------------------------------
    # PID gains
    # ------------------------------------------------------------------

    def get_position_p(self) -> int:
        """Get the proportional gain of the position controller."""
        return self.get_int_attribute(MOTOR_ATTRIBUTES.position_p)

    def set_position_p(self, position_p: int) -> None:
        """Set the proportional gain of the position controller."""
        self.set_attribute(MOTOR_ATTRIBUTES.position_p, position_p)

    def get_position_i(self) -> int:
        """Get the integral gain of the position controller."""
        return self.get_int_attribute(MOTOR_ATTRIBUTES.position_i)

    def set_position_i(self, position_i: int) -> None:
        """Set the integral gain of the position controller."""
        self.set_attribute(MOTOR_ATTRIBUTES.position_i, position_i)

    def get_position_d(self) -> int:
        """Get the derivative gain of the position controller."""
        return self.get_int_attribute(MOTOR_ATTRIBUTES.position_d)

    def set_position_d(self, position_d: int) -> None:
        """Set the derivative gain of the position controller."""
        self.set_attribute(MOTOR_ATTRIBUTES.position_d, position_d)

    def get_speed_regulation_p(self) -> int:
        """Get the proportional gain of the speed controller."""
        return self.get_int_attribute(MOTOR_ATTRIBUTES.speed_regulation_p)

    def set_speed_regulation_p(self, p: int) -> None:
        """Set the proportional gain of the speed controller."""
        self.set_attribute(MOTOR_ATTRIBUTES.speed_regulation_p, p)

    def get_speed_regulation_i(self) -> int:
        """Get the integral gain of the speed controller."""
        return self.get_int_attribute(MOTOR_ATTRIBUTES.speed_regulation_i)

    def set_speed_regulation_i(self, i: int) -> None:
        """Set the integral gain of the speed controller."""
        self.set_attribute(MOTOR_ATTRIBUTES.speed_regulation_i, i)

    def get_speed_regulation_d(self) -> int:
        """Get the derivative gain of the speed controller."""
        return self.get_int_attribute(MOTOR_ATTRIBUTES.speed_regulation_d)

    def set_speed_regulation_d(self, d: int) -> None:
        """Set the derivative gain of the speed controller."""
        self.set_attribute(MOTOR_ATTRIBUTES.speed_regulation_d, d)
