"""Common definitions for this module."""

from dataclasses import asdict, dataclass
from enum import Enum, IntEnum
from pathlib import Path

# --- Directories ---
ROOT_DIR: Path = Path("src").parent
DATA_DIR: Path = ROOT_DIR / "data"
LOG_DIR: Path = DATA_DIR / "logs"

# Default encoding
ENCODING: str = "utf-8"

DATE_FORMAT = "%Y-%m-%d_%H-%M-%S"


@dataclass
class LogLevel:
    """Log level."""

    trace: str = "TRACE"
    debug: str = "DEBUG"
    info: str = "INFO"
    success: str = "SUCCESS"
    warning: str = "WARNING"
    error: str = "ERROR"
    critical: str = "CRITICAL"

    def __iter__(self):
        """Iterate over log levels."""
        return iter(asdict(self).values())


DEFAULT_LOG_LEVEL = LogLevel.info
DEFAULT_LOG_FILENAME = "log_file"

# Root of the kernel device-class tree
SYSFS_CLASS_ROOT: Path = Path("/sys/class")


class DeviceClass(str, Enum):
    """Driver-level device classes (directory names under the sysfs root)."""

    LEGO_PORT = "lego-port"
    TACHO_MOTOR = "tacho-motor"
    DC_MOTOR = "dc-motor"
    SERVO_MOTOR = "servo-motor"
    LEGO_SENSOR = "lego-sensor"


class Subsystem(str, Enum):
    """Instance name prefixes inside a device-class directory."""

    PORT = "port"
    MOTOR = "motor"
    SENSOR = "sensor"


class ConnectorFamily(str, Enum):
    """Address markers for input and output connectors."""

    INPUT = "in"
    OUTPUT = "out"


# Connector family a subsystem must be plugged into
SUBSYSTEM_FAMILIES: dict[str, ConnectorFamily] = {
    Subsystem.MOTOR.value: ConnectorFamily.OUTPUT,
    Subsystem.SENSOR.value: ConnectorFamily.INPUT,
}


class PortId(IntEnum):
    """Physical connector slots of the brick."""

    PORT_1 = 0
    PORT_2 = 1
    PORT_3 = 2
    PORT_4 = 3
    PORT_A = 4
    PORT_B = 5
    PORT_C = 6
    PORT_D = 7

    def get_name(self) -> str:
        """Get the slot name printed on the brick.

        :return: "in1".."in4" for input slots, "outA".."outD" for output slots.
        """
        return PORT_NAMES[self]

    def is_output(self) -> bool:
        """Check whether this slot is a motor output.

        :return: True for PORT_A..PORT_D.
        """
        return self >= PortId.PORT_A


PORT_NAMES: dict[PortId, str] = {
    PortId.PORT_1: "in1",
    PortId.PORT_2: "in2",
    PortId.PORT_3: "in3",
    PortId.PORT_4: "in4",
    PortId.PORT_A: "outA",
    PortId.PORT_B: "outB",
    PortId.PORT_C: "outC",
    PortId.PORT_D: "outD",
}

MIN_PORT_ID = min(PortId)
MAX_PORT_ID = max(PortId)

# Port status values meaning that no driver is bound
UNBOUND_PORT_STATUSES: frozenset[str] = frozenset(
    {"no-device", "no-motor", "no-sensor", "error"}
)


class MotorCommand(str, Enum):
    """Tokens accepted by the motor `command` attribute."""

    RUN_FOREVER = "run-forever"
    RUN_TO_ABS_POS = "run-to-abs-pos"
    RUN_TO_REL_POS = "run-to-rel-pos"
    RUN_TIMED = "run-timed"
    RUN_DIRECT = "run-direct"
    STOP = "stop"
    RESET = "reset"


class MotorStateFlag(str, Enum):
    """Tokens reported by the motor `state` attribute."""

    RUNNING = "running"
    RAMPING = "ramping"
    HOLDING = "holding"
    OVERLOADED = "overloaded"
    STALLED = "stalled"


class StopAction(str, Enum):
    """Behaviour applied when a motor stops."""

    COAST = "coast"
    BRAKE = "brake"
    HOLD = "hold"


class Polarity(str, Enum):
    """Motor and encoder polarity."""

    NORMAL = "normal"
    INVERSED = "inversed"


# Attribute every device instance exposes, used to match it to a port
ADDRESS_ATTRIBUTE = "address"

# Boolean attribute tokens
SWITCH_ON = "on"
SWITCH_OFF = "off"


@dataclass(frozen=True)
class PortAttributes:
    """Attribute names of a lego-port instance."""

    address: str = "address"
    driver_name: str = "driver_name"
    modes: str = "modes"
    mode: str = "mode"
    set_device: str = "set_device"
    status: str = "status"


@dataclass(frozen=True)
class MotorAttributes:
    """Attribute names of tacho-motor and dc-motor instances."""

    address: str = "address"
    driver_name: str = "driver_name"
    command: str = "command"
    commands: str = "commands"
    state: str = "state"
    count_per_rot: str = "count_per_rot"
    duty_cycle: str = "duty_cycle"
    duty_cycle_sp: str = "duty_cycle_sp"
    encoder_polarity: str = "encoder_polarity"
    polarity: str = "polarity"
    position: str = "position"
    position_p: str = "position_p"
    position_i: str = "position_i"
    position_d: str = "position_d"
    position_sp: str = "position_sp"
    speed: str = "speed"
    speed_sp: str = "speed_sp"
    ramp_up_sp: str = "ramp_up_sp"
    ramp_down_sp: str = "ramp_down_sp"
    speed_regulation: str = "speed_regulation"
    speed_regulation_p: str = "speed_regulation_P"
    speed_regulation_i: str = "speed_regulation_I"
    speed_regulation_d: str = "speed_regulation_D"
    stop_action: str = "stop_action"
    stop_actions: str = "stop_actions"
    time_sp: str = "time_sp"


@dataclass(frozen=True)
class Ev3Defaults:
    """Defaults used by the CLI and the examples."""

    sysfs_root: Path = SYSFS_CLASS_ROOT
    port: str = "A"
    motor_type: str = "tacho"
    time_sp_ms: int = 1000
    duty_cycle_sp: int = 50


PORT_ATTRIBUTES = PortAttributes()
MOTOR_ATTRIBUTES = MotorAttributes()
EV3_DEFAULTS = Ev3Defaults()

# CLI port letters
OUTPUT_PORT_LETTERS: dict[str, PortId] = {
    "A": PortId.PORT_A,
    "B": PortId.PORT_B,
    "C": PortId.PORT_C,
    "D": PortId.PORT_D,
}
