"""Typed access to the plain-text attribute files of the device-class tree."""

import errno
import os
import re
from enum import Enum
from pathlib import Path
from typing import TypeVar

from loguru import logger

from ev3_python.definitions import ENCODING, SWITCH_OFF, SWITCH_ON, SYSFS_CLASS_ROOT
from ev3_python.exceptions import AttributeFormatError, AttributeIOError

E = TypeVar("E", bound=Enum)

INTEGER_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)

AttributeValue = str | int | bool | Enum


class AttributeStore:
    """Reads and writes attributes laid out as `<root>/<class>/<instance>/<name>`.

    Nothing is cached: drivers update values such as `state` asynchronously,
    so every read opens the file again.
    """

    def __init__(self, root: Path = SYSFS_CLASS_ROOT) -> None:
        """Initialize the store.

        :param root: Directory holding one sub-directory per device class.
        :return: None
        """
        self.root = Path(root)

    def attribute_path(self, device_class: str, instance: str, attribute: str) -> Path:
        """Build the path of an attribute file.

        :param device_class: Device class directory name.
        :param instance: Instance directory name (e.g. "motor0").
        :param attribute: Attribute file name.
        :return: Path of the attribute file.
        """
        return self.root / token_value(device_class) / instance / attribute

    def read(self, device_class: str, instance: str, attribute: str) -> str:
        """Read a scalar attribute.

        :param device_class: Device class directory name.
        :param instance: Instance directory name.
        :param attribute: Attribute file name.
        :return: File content with surrounding whitespace stripped.
        :raises AttributeIOError: If the file is missing or unreadable.
        """
        path = self.attribute_path(device_class, instance, attribute)
        try:
            with open(path, encoding=ENCODING) as attribute_file:
                value = attribute_file.read().strip()
        except OSError as e:
            raise AttributeIOError(path, "read", e.errno, e.strerror or str(e)) from e
        logger.debug(f"RD {path}: {value!r}")
        return value

    def read_int(self, device_class: str, instance: str, attribute: str) -> int:
        """Read an integer attribute.

        :param device_class: Device class directory name.
        :param instance: Instance directory name.
        :param attribute: Attribute file name.
        :return: Parsed integer.
        :raises AttributeFormatError: If the content is not an integer.
        """
        raw = self.read(device_class, instance, attribute)
        if not INTEGER_PATTERN.fullmatch(raw):
            path = self.attribute_path(device_class, instance, attribute)
            raise AttributeFormatError(path, raw, "an integer")
        return int(raw)

    def read_list(self, device_class: str, instance: str, attribute: str) -> list[str]:
        """Read a whitespace-separated list attribute.

        :param device_class: Device class directory name.
        :param instance: Instance directory name.
        :param attribute: Attribute file name.
        :return: Tokens in file order, without empty entries.
        """
        return self.read(device_class, instance, attribute).split()

    def read_bool(self, device_class: str, instance: str, attribute: str) -> bool:
        """Read an on/off attribute.

        :param device_class: Device class directory name.
        :param instance: Instance directory name.
        :param attribute: Attribute file name.
        :return: True for "on", False for "off".
        :raises AttributeFormatError: For any other token.
        """
        raw = self.read(device_class, instance, attribute)
        if raw == SWITCH_ON:
            return True
        if raw == SWITCH_OFF:
            return False
        path = self.attribute_path(device_class, instance, attribute)
        raise AttributeFormatError(path, raw, f"'{SWITCH_ON}' or '{SWITCH_OFF}'")

    def read_enum(
        self, device_class: str, instance: str, attribute: str, enum_cls: type[E]
    ) -> E:
        """Read a single-token attribute into an enum member.

        :param device_class: Device class directory name.
        :param instance: Instance directory name.
        :param attribute: Attribute file name.
        :param enum_cls: Enum whose values are the accepted tokens.
        :return: Matching enum member.
        :raises AttributeFormatError: If the token is not a member value.
        """
        raw = self.read(device_class, instance, attribute)
        path = self.attribute_path(device_class, instance, attribute)
        return _to_enum(path, raw, enum_cls)

    def read_enum_list(
        self, device_class: str, instance: str, attribute: str, enum_cls: type[E]
    ) -> list[E]:
        """Read a token list attribute into enum members, keeping order.

        :param device_class: Device class directory name.
        :param instance: Instance directory name.
        :param attribute: Attribute file name.
        :param enum_cls: Enum whose values are the accepted tokens.
        :return: Enum members in file order.
        :raises AttributeFormatError: If any token is not a member value.
        """
        tokens = self.read_list(device_class, instance, attribute)
        path = self.attribute_path(device_class, instance, attribute)
        return [_to_enum(path, token, enum_cls) for token in tokens]

    def write(
        self,
        device_class: str,
        instance: str,
        attribute: str,
        value: AttributeValue,
    ) -> None:
        """Write an attribute in a single call.

        Failed writes are raised, never retried: a repeated command write
        could start the motor twice.

        :param device_class: Device class directory name.
        :param instance: Instance directory name.
        :param attribute: Attribute file name.
        :param value: String, integer, bool (written as on/off) or token enum.
        :return: None
        :raises AttributeIOError: If the file is missing, read-only or the
            driver rejects the value.
        """
        path = self.attribute_path(device_class, instance, attribute)
        text = _to_text(value)
        # opening with "w" must not create attributes the driver does not expose
        if not path.exists():
            raise AttributeIOError(
                path, "write", errno.ENOENT, os.strerror(errno.ENOENT)
            )
        try:
            with open(path, "w", encoding=ENCODING) as attribute_file:
                attribute_file.write(text)
        except OSError as e:
            raise AttributeIOError(path, "write", e.errno, e.strerror or str(e)) from e
        logger.debug(f"WR {path}: {text!r}")

    def instance_exists(self, device_class: str, instance: str) -> bool:
        """Check whether an instance directory is currently present.

        :param device_class: Device class directory name.
        :param instance: Instance directory name.
        :return: True if the directory exists.
        """
        return (self.root / token_value(device_class) / instance).is_dir()

    def list_instances(self, device_class: str, prefix: str) -> list[str]:
        """List the numbered instances of a device class.

        :param device_class: Device class directory name.
        :param prefix: Instance name prefix (e.g. "motor").
        :return: Instance names sorted by numeric index, ascending. Empty if
            the class directory does not exist.
        """
        class_dir = self.root / token_value(device_class)
        if not class_dir.is_dir():
            logger.debug(f"Device class directory {class_dir} does not exist")
            return []
        pattern = re.compile(rf"^{re.escape(token_value(prefix))}(\d+)$", re.ASCII)
        indexed = []
        for entry in class_dir.iterdir():
            match = pattern.match(entry.name)
            if match and entry.is_dir():
                indexed.append((int(match.group(1)), entry.name))
        return [name for _index, name in sorted(indexed)]


def token_value(value: str | Enum) -> str:
    """Return the raw string of a token enum, or the string itself."""
    return value.value if isinstance(value, Enum) else value


def _to_text(value: AttributeValue) -> str:
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return SWITCH_ON if value else SWITCH_OFF
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def _to_enum(path: Path, raw: str, enum_cls: type[E]) -> E:
    try:
        return enum_cls(raw)
    except ValueError as e:
        accepted = ", ".join(str(member.value) for member in enum_cls)
        raise AttributeFormatError(path, raw, f"one of [{accepted}]") from e
