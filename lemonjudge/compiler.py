"""Compiler definitions with named argument configurations."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any

from lemonjudge.jsonutil import JsonFieldError, read_field, read_list, write_field


class CompilerType(enum.IntEnum):
    """How a compiler turns source into something that runs."""

    TYPICAL = 0
    INTERPRETIVE_WITH_BYTE_CODE = 1
    INTERPRETIVE_WITHOUT_BYTE_CODE = 2


def split_extensions(text: str) -> list[str]:
    """Split a ``;``-separated extension list, dropping empty parts."""
    return [part for part in text.split(";") if part]


def _parse_environment(entries: list[str]) -> dict[str, str]:
    environment: dict[str, str] = {}
    for entry in entries:
        variable, sep, value = entry.partition("=")
        if not sep:
            # Without '=' the whole entry serves as both name and value.
            value = entry
        environment[variable] = value
    return environment


def _optional(data: dict, name: str, kind: type, default: Any) -> Any:
    try:
        return read_field(data, name, kind)
    except JsonFieldError:
        return default


def _optional_list(data: dict, name: str, kind: type, default: list) -> list:
    try:
        return read_list(data, name, kind)
    except JsonFieldError:
        return default


@dataclass
class Compiler:
    """A compiler or interpreter with its configurations."""

    compiler_type: CompilerType = CompilerType.TYPICAL
    compiler_name: str = ""
    source_extensions: list[str] = field(default_factory=list)
    compiler_location: str = ""
    interpreter_location: str = ""
    bytecode_extensions: list[str] = field(default_factory=list)
    configuration_names: list[str] = field(default_factory=list)
    compiler_arguments: list[str] = field(default_factory=list)
    interpreter_arguments: list[str] = field(default_factory=list)
    environment: dict[str, str] = field(default_factory=dict)
    time_limit_ratio: float = 1.0
    memory_limit_ratio: float = 1.0
    disable_memory_limit_check: bool = False

    def add_configuration(self, name: str, compiler_arguments: str, interpreter_arguments: str) -> None:
        """Append a named configuration."""
        self.configuration_names.append(name)
        self.compiler_arguments.append(compiler_arguments)
        self.interpreter_arguments.append(interpreter_arguments)

    def set_config_name(self, index: int, name: str) -> None:
        """Rename configuration ``index``; out-of-range indices are ignored."""
        if 0 <= index < len(self.configuration_names):
            self.configuration_names[index] = name

    def set_compiler_arguments(self, index: int, arguments: str) -> None:
        """Replace the compiler arguments of configuration ``index`` if it exists."""
        if 0 <= index < len(self.compiler_arguments):
            self.compiler_arguments[index] = arguments

    def set_interpreter_arguments(self, index: int, arguments: str) -> None:
        """Replace the interpreter arguments of configuration ``index`` if it exists."""
        if 0 <= index < len(self.interpreter_arguments):
            self.interpreter_arguments[index] = arguments

    def delete_configuration(self, index: int) -> None:
        """Remove configuration ``index`` if it exists."""
        if 0 <= index < len(self.configuration_names):
            del self.configuration_names[index]
            del self.compiler_arguments[index]
            del self.interpreter_arguments[index]

    def copy_from(self, other: Compiler) -> None:
        """Make this compiler an independent copy of ``other``."""
        self.compiler_type = other.compiler_type
        self.compiler_name = other.compiler_name
        self.source_extensions = list(other.source_extensions)
        self.compiler_location = other.compiler_location
        self.interpreter_location = other.interpreter_location
        self.bytecode_extensions = list(other.bytecode_extensions)
        self.configuration_names = list(other.configuration_names)
        self.compiler_arguments = list(other.compiler_arguments)
        self.interpreter_arguments = list(other.interpreter_arguments)
        self.environment = dict(other.environment)
        self.time_limit_ratio = other.time_limit_ratio
        self.memory_limit_ratio = other.memory_limit_ratio
        self.disable_memory_limit_check = other.disable_memory_limit_check

    @classmethod
    def from_json(cls, data: dict) -> Compiler:
        """Build a compiler from a JSON object; absent or mistyped fields keep defaults."""
        compiler = cls()
        raw_type = data.get("compilerType")
        if isinstance(raw_type, (int, float)) and not isinstance(raw_type, bool):
            compiler.compiler_type = read_field(data, "compilerType", CompilerType)
        compiler.compiler_name = _optional(data, "compilerName", str, compiler.compiler_name)
        compiler.compiler_location = _optional(data, "compilerLocation", str, compiler.compiler_location)
        compiler.interpreter_location = _optional(
            data, "interpreterLocation", str, compiler.interpreter_location
        )
        compiler.source_extensions = _optional_list(data, "sourceExtensions", str, [])
        compiler.bytecode_extensions = _optional_list(data, "bytecodeExtensions", str, [])
        compiler.configuration_names = _optional_list(data, "configurationNames", str, [])
        compiler.compiler_arguments = _optional_list(data, "compilerArguments", str, [])
        compiler.interpreter_arguments = _optional_list(data, "interpreterArguments", str, [])
        compiler.environment = _parse_environment(_optional_list(data, "environment", str, []))
        compiler.time_limit_ratio = _optional(data, "timeLimitRatio", float, compiler.time_limit_ratio)
        compiler.memory_limit_ratio = _optional(data, "memoryLimitRatio", float, compiler.memory_limit_ratio)
        compiler.disable_memory_limit_check = _optional(
            data, "disableMemoryLimitCheck", bool, compiler.disable_memory_limit_check
        )
        return compiler

    def to_json(self) -> dict:
        """Return the compiler as a JSON object."""
        data: dict = {}
        write_field(data, "compilerType", self.compiler_type)
        write_field(data, "compilerName", self.compiler_name)
        write_field(data, "compilerLocation", self.compiler_location)
        write_field(data, "interpreterLocation", self.interpreter_location)
        write_field(data, "sourceExtensions", self.source_extensions)
        write_field(data, "bytecodeExtensions", self.bytecode_extensions)
        write_field(data, "configurationNames", self.configuration_names)
        write_field(data, "compilerArguments", self.compiler_arguments)
        write_field(data, "interpreterArguments", self.interpreter_arguments)
        write_field(
            data,
            "environment",
            [f"{name}={value}" for name, value in sorted(self.environment.items())],
        )
        write_field(data, "timeLimitRatio", float(self.time_limit_ratio))
        write_field(data, "memoryLimitRatio", float(self.memory_limit_ratio))
        write_field(data, "disableMemoryLimitCheck", bool(self.disable_memory_limit_check))
        return data