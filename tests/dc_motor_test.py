"""Unit tests for DCMotor."""

import pytest

from ev3_python.dc_motor import DCMotor
from ev3_python.definitions import MotorCommand, MotorStateFlag, Polarity, StopAction
from ev3_python.exceptions import AttributeIOError, InvalidPortError
from ev3_python.lego_port import LegoPort


@pytest.fixture
def dc_brick(brick):
    """Brick with an RCX motor on port D, enumerated as dc-motor motor0."""
    brick.add_port(7, "outD", status="dc-motor")
    brick.add_device("dc-motor", "motor0", "outD")
    return brick


@pytest.fixture
def dc_motor(dc_brick, sim_store) -> DCMotor:
    """DCMotor on port D backed by the simulated driver."""
    return DCMotor(LegoPort(LegoPort.PORT_D, store=sim_store))


class TestDCMotor:
    """DC motor binding and API."""

    def test_binds_dc_motor_class(self, dc_motor):
        """Resolution searches the dc-motor class, not tacho-motor."""
        assert dc_motor.device_class == "dc-motor"
        assert dc_motor.instance == "motor0"
        assert dc_motor.get_driver_name() == "rcx-motor"

    def test_tacho_port_rejected(self, dc_brick, sim_store):
        """A port bound to a tacho motor is not a DC motor."""
        with pytest.raises(InvalidPortError) as exc_info:
            DCMotor(LegoPort(LegoPort.PORT_A, store=sim_store))
        assert "dc-motor" in str(exc_info.value)
        assert "tacho-motor" in str(exc_info.value)

    def test_commands(self, dc_motor):
        """DC motors report their reduced command set."""
        assert dc_motor.get_commands() == [
            MotorCommand.RUN_FOREVER,
            MotorCommand.RUN_TIMED,
            MotorCommand.RUN_DIRECT,
            MotorCommand.STOP,
        ]

    def test_no_position_commands(self, dc_motor):
        """Position commands are tacho-motor only."""
        assert not hasattr(dc_motor, "run_to_abs_pos")
        assert not hasattr(dc_motor, "get_position")

    def test_run_and_stop(self, dc_motor, sim_store):
        """run_forever then stop drive the state flags."""
        dc_motor.run_forever(duty_cycle_sp=60)
        assert dc_motor.get_duty_cycle_sp() == 60
        assert dc_motor.get_state() == {MotorStateFlag.RUNNING}
        dc_motor.stop()
        assert dc_motor.get_state() == frozenset()
        assert sim_store.commands == ["run-forever", "stop"]

    def test_setpoints(self, dc_motor):
        """Shared setpoints work on DC motors."""
        dc_motor.set_ramp_up_sp(100)
        dc_motor.set_polarity(Polarity.INVERSED)
        dc_motor.set_stop_action(StopAction.BRAKE)
        assert dc_motor.get_ramp_up_sp() == 100
        assert dc_motor.get_polarity() is Polarity.INVERSED
        assert dc_motor.get_stop_action() is StopAction.BRAKE
        assert dc_motor.get_stop_actions() == [StopAction.COAST, StopAction.BRAKE]

    def test_unsupported_attribute_write(self, dc_motor):
        """Writing an attribute the driver lacks is an I/O error."""
        with pytest.raises(AttributeIOError):
            dc_motor.set_attribute("speed_sp", 100)
