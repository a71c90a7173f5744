"""Step-by-step creation of custom or built-in compilers."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass

from lemonjudge.compiler import Compiler, CompilerType
from lemonjudge.compiler_presets import (
    custom_compiler,
    fbc_compiler,
    fpc_compiler,
    gcc_compiler,
    gpp_compiler,
    java_compiler,
    python_compiler,
)

_TOOLS = ("gcc", "g++", "fpc", "javac", "java", "python")

_TYPE_LABELS = {
    CompilerType.TYPICAL: "Typical",
    CompilerType.INTERPRETIVE_WITH_BYTE_CODE: "Interpretive with byte-code",
    CompilerType.INTERPRETIVE_WITHOUT_BYTE_CODE: "Interpretive without byte-code",
}

JAVA_MEMORY_LIMIT_RANGE = (64, 2048)


class WizardError(ValueError):
    """A wizard page holds incomplete or invalid input."""


def detect_tools(path_value: str | None = None, windows: bool | None = None) -> dict[str, str]:
    """Find the first gcc, g++, fpc, javac, java and python in a PATH value.

    Returns a mapping from tool name to the full path of the first match.
    """
    if path_value is None:
        path_value = os.environ.get("PATH", "")
    if windows is None:
        windows = sys.platform.startswith("win")
    separator = ";" if windows else ":"
    slash = "\\" if windows else "/"
    suffix = ".exe" if windows else ""
    wanted = {tool + suffix: tool for tool in _TOOLS}
    found: dict[str, str] = {}
    for directory in path_value.split(separator):
        if not directory:
            continue
        try:
            with os.scandir(directory) as entries:
                names = sorted(entry.name for entry in entries if entry.is_file())
        except OSError:
            continue
        for name in names:
            tool = wanted.get(name)
            if tool is not None and tool not in found:
                found[tool] = directory + slash + name
    return found


@dataclass
class CompilerWizard:
    """Answers given on the pages of the add-compiler wizard."""

    custom: bool = False
    compiler_type: CompilerType = CompilerType.TYPICAL
    compiler_name: str = ""
    compiler_location: str = ""
    interpreter_location: str = ""
    source_extensions: str = ""
    bytecode_extensions: str = ""
    compiler_arguments: str = ""
    interpreter_arguments: str = ""
    gcc_enabled: bool = False
    gcc_path: str = ""
    gcc_recommended: bool = True
    gpp_enabled: bool = False
    gpp_path: str = ""
    gpp_recommended: bool = True
    fpc_enabled: bool = False
    fpc_path: str = ""
    fpc_recommended: bool = True
    fbc_enabled: bool = False
    fbc_path: str = ""
    java_enabled: bool = False
    javac_path: str = ""
    java_path: str = ""
    java_memory_limit: int = 512
    python_enabled: bool = False
    python_path: str = ""
    platform: str = sys.platform

    @property
    def compiler_location_enabled(self) -> bool:
        """Whether the custom compiler needs a compiler location and arguments."""
        return CompilerType(self.compiler_type) != CompilerType.INTERPRETIVE_WITHOUT_BYTE_CODE

    @property
    def interpreter_location_enabled(self) -> bool:
        """Whether the custom compiler needs an interpreter location and arguments."""
        return CompilerType(self.compiler_type) != CompilerType.TYPICAL

    @property
    def bytecode_extensions_enabled(self) -> bool:
        """Whether the custom compiler produces byte code."""
        return CompilerType(self.compiler_type) == CompilerType.INTERPRETIVE_WITH_BYTE_CODE

    def next_page(self, current: int) -> int:
        """Page shown after ``current``; -1 means the wizard ends."""
        if current == 0:
            return 1 if self.custom else 2
        if current == 3:
            return -1
        return 3

    def validate_custom(self) -> None:
        """Check the custom-compiler page; raise WizardError on the first problem."""
        if not self.compiler_name:
            raise WizardError("Empty compiler name!")
        if self.compiler_location_enabled and not self.compiler_location:
            raise WizardError("Empty compiler location!")
        if self.interpreter_location_enabled and not self.interpreter_location:
            raise WizardError("Empty interpreter location!")
        if not self.source_extensions:
            raise WizardError("Empty source file extensions!")
        if self.bytecode_extensions_enabled and not self.bytecode_extensions:
            raise WizardError("Empty byte-code file extensions!")

    def validate_builtin(self) -> None:
        """Check the built-in compilers page; raise WizardError on the first problem."""
        checks = (
            (self.gcc_enabled, self.gcc_path, "Empty gcc path!"),
            (self.gpp_enabled, self.gpp_path, "Empty g++ path!"),
            (self.fpc_enabled, self.fpc_path, "Empty fpc path!"),
            (self.fbc_enabled, self.fbc_path, "Empty fbc path!"),
            (self.java_enabled, self.javac_path, "Empty javac path!"),
            (self.java_enabled, self.java_path, "Empty java path!"),
            (self.python_enabled, self.python_path, "Empty python path!"),
        )
        for enabled, path, message in checks:
            if enabled and not path:
                raise WizardError(message)
        low, high = JAVA_MEMORY_LIMIT_RANGE
        if self.java_enabled and not low <= int(self.java_memory_limit) <= high:
            raise WizardError(f"Java memory limit must be between {low} and {high} MB!")

    def custom_summary(self) -> str:
        """Text describing the custom compiler about to be added."""
        lines = [
            "[Custom Compiler]",
            f"Compiler Name: {self.compiler_name}",
            f"Compiler Type: {_TYPE_LABELS[CompilerType(self.compiler_type)]}",
        ]
        if self.compiler_location_enabled:
            lines.append(f"Compiler's Location: {self.compiler_location}")
        if self.interpreter_location_enabled:
            lines.append(f"Interpreter's Location: {self.interpreter_location}")
        lines.append(f"Source File Extensions: {self.source_extensions}")
        if self.bytecode_extensions_enabled:
            lines.append(f"Byte-code File Extensions: {self.bytecode_extensions}")
        if self.compiler_location_enabled:
            lines.append(f"Default Compiler's Arguments: {self.compiler_arguments}")
        if self.interpreter_location_enabled:
            lines.append(f"Default Interpreter's Arguments: {self.interpreter_arguments}")
        return "".join(line + "\n" for line in lines)

    def builtin_summary(self) -> str:
        """Text describing the built-in compilers about to be added."""
        text = ""
        for enabled, name, path, recommended in (
            (self.gcc_enabled, "gcc", self.gcc_path, self.gcc_recommended),
            (self.gpp_enabled, "g++", self.gpp_path, self.gpp_recommended),
            (self.fpc_enabled, "fpc", self.fpc_path, self.fpc_recommended),
        ):
            if enabled:
                text += f"[{name} Compiler]\n{name} Path: {path}\n"
                if recommended:
                    text += "Add recommended configurations\n"
                text += "\n"
        if self.fbc_enabled:
            text += f"[fbc Compiler]\nfbc Path: {self.fbc_path}\n\n"
        if self.java_enabled:
            text += "[Java Compiler]\n"
            text += f"javac Path: {self.javac_path}\n"
            text += f"java Path: {self.java_path}\n"
            text += f"Memory Limit: {self.java_memory_limit} MB\n"
            text += "\n"
        if self.python_enabled:
            text += f"[Python Compiler]\npython Path: {self.python_path}\n\n"
        return text

    def build(self) -> list[Compiler]:
        """Create the compilers described by the wizard's answers."""
        if self.custom:
            return [
                custom_compiler(
                    CompilerType(self.compiler_type),
                    self.compiler_name,
                    self.compiler_location,
                    self.interpreter_location,
                    self.source_extensions,
                    self.bytecode_extensions,
                    self.compiler_arguments,
                    self.interpreter_arguments,
                )
            ]
        compilers: list[Compiler] = []
        if self.gcc_enabled:
            compilers.append(gcc_compiler(self.gcc_path, self.gcc_recommended, self.platform))
        if self.gpp_enabled:
            compilers.append(gpp_compiler(self.gpp_path, self.gpp_recommended, self.platform))
        if self.fpc_enabled:
            compilers.append(fpc_compiler(self.fpc_path, self.fpc_recommended))
        if self.fbc_enabled:
            compilers.append(fbc_compiler(self.fbc_path))
        if self.java_enabled:
            compilers.append(java_compiler(self.javac_path, self.java_path, self.java_memory_limit))
        if self.python_enabled:
            compilers.append(python_compiler(self.python_path))
        return compilers