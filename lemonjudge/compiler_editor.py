"""Checks and configuration edits behind the advanced compiler settings."""

from __future__ import annotations

from dataclasses import dataclass

from lemonjudge.compiler import Compiler, CompilerType

DEFAULT_CONFIGURATION = "default"
RESERVED_CONFIGURATION = "disable"


class CompilerEditError(ValueError):
    """A compiler's details are invalid; ``index`` names the configuration at fault, if any."""

    def __init__(self, message: str, index: int | None = None) -> None:
        super().__init__(message)
        self.index = index


@dataclass(frozen=True)
class EnabledFields:
    """Which parts of a compiler's description apply to its type."""

    compiler: bool
    interpreter: bool
    bytecode: bool


def enabled_fields(compiler_type: CompilerType | int) -> EnabledFields:
    """Fields that are editable for a compiler of ``compiler_type``.

    ``compiler`` covers the compiler location and arguments, ``interpreter`` the
    interpreter location and arguments, ``bytecode`` the byte-code extensions.
    """
    kind = CompilerType(compiler_type)
    return EnabledFields(
        compiler=kind != CompilerType.INTERPRETIVE_WITHOUT_BYTE_CODE,
        interpreter=kind != CompilerType.TYPICAL,
        bytecode=kind == CompilerType.INTERPRETIVE_WITH_BYTE_CODE,
    )


def validate_compiler_details(compiler: Compiler) -> None:
    """Raise CompilerEditError on the first problem with ``compiler``'s details."""
    fields = enabled_fields(compiler.compiler_type)
    if fields.compiler and not compiler.compiler_location:
        raise CompilerEditError("Empty compiler's Location!")
    if fields.interpreter and not compiler.interpreter_location:
        raise CompilerEditError("Empty interpreter's Location!")
    if fields.bytecode and not compiler.bytecode_extensions:
        raise CompilerEditError("Empty Byte-code Extensions!")

    names = list(compiler.configuration_names)
    for index, name in enumerate(names):
        if not name:
            raise CompilerEditError("Empty configuration name!", index)
        if names.count(name) > 1:
            raise CompilerEditError(f"Configuration {name} appears more than once!", index)
        if name == RESERVED_CONFIGURATION:
            raise CompilerEditError(f'Invalid configuration name "{RESERVED_CONFIGURATION}"!', index)


def new_configuration(compiler: Compiler, counter: int) -> tuple[str, int]:
    """Append an empty configuration named after the next counter value.

    Returns the new configuration's name and the updated counter.
    """
    counter += 1
    name = f"New configuration {counter}"
    compiler.add_configuration(name, "", "")
    return name, counter


def delete_configuration(compiler: Compiler, index: int) -> int:
    """Remove configuration ``index`` and return the index to select afterwards.

    The default configuration at index 0 cannot be removed.
    """
    count = len(compiler.configuration_names)
    if not 0 <= index < count:
        raise IndexError(f"no configuration at index {index}")
    if index == 0:
        raise CompilerEditError("The default configuration cannot be deleted!", index)
    selected = index if index + 1 < count else index - 1
    compiler.delete_configuration(index)
    return selected