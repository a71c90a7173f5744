"""Ready-made compiler definitions for common toolchains."""

from __future__ import annotations

import ntpath
import sys

from lemonjudge.compiler import Compiler, CompilerType, split_extensions

_WINDOWS_STACK = " -Wl,--stack=2147483647"


def _is_windows(platform: str) -> bool:
    return platform.startswith("win")


def _is_linux(platform: str) -> bool:
    return platform.startswith("linux")


def custom_compiler(
    compiler_type: CompilerType,
    name: str,
    compiler_location: str,
    interpreter_location: str,
    source_extensions: str,
    bytecode_extensions: str,
    compiler_arguments: str,
    interpreter_arguments: str,
) -> Compiler:
    """A user-described compiler with a single ``default`` configuration."""
    compiler = Compiler(
        compiler_type=CompilerType(compiler_type),
        compiler_name=name,
        compiler_location=compiler_location,
        interpreter_location=interpreter_location,
        source_extensions=split_extensions(source_extensions),
        bytecode_extensions=split_extensions(bytecode_extensions),
    )
    compiler.add_configuration("default", compiler_arguments, interpreter_arguments)
    return compiler


def _windows_path_environment(path: str) -> dict[str, str]:
    native = path.replace("/", "\\")
    return {"PATH": ntpath.dirname(ntpath.abspath(native))}


def _gnu_compiler(
    name: str,
    path: str,
    extensions: str,
    standards: list[tuple[str, tuple[str, ...]]],
    recommended: bool,
    platform: str,
) -> Compiler:
    compiler = Compiler(
        compiler_name=name,
        compiler_location=path,
        source_extensions=split_extensions(extensions),
    )
    stack = _WINDOWS_STACK if _is_windows(platform) else ""
    base = "-o %s %s.* -lm"
    compiler.add_configuration("default", base + stack, "")
    if recommended:
        for label, levels in standards:
            flag = f" -std={label.lower()}"
            compiler.add_configuration(label, base + flag + stack, "")
            for level in levels:
                compiler.add_configuration(f"{label} {level}", f"{base}{flag} -{level}{stack}", "")
        if _is_linux(platform):
            for label, _ in standards:
                compiler.add_configuration(
                    f"{label} UB Catching",
                    f"{base} -std={label.lower()} -fsanitize=undefined{stack}",
                    "",
                )
    if _is_windows(platform):
        compiler.environment = _windows_path_environment(path)
    return compiler


def gcc_compiler(path: str, recommended: bool = True, platform: str = sys.platform) -> Compiler:
    """The gcc C compiler, optionally with per-standard configurations."""
    standards = [
        ("C89", ("O2",)),
        ("C99", ("O2",)),
        ("C11", ("O2",)),
        ("C17", ("O2", "O3")),
    ]
    return _gnu_compiler("gcc", path, "c", standards, recommended, platform)


def gpp_compiler(path: str, recommended: bool = True, platform: str = sys.platform) -> Compiler:
    """The g++ C++ compiler, optionally with per-standard configurations."""
    standards = [
        ("C++98", ("O2",)),
        ("C++03", ("O2",)),
        ("C++11", ("O2",)),
        ("C++14", ("O2",)),
        ("C++17", ("O2", "O3")),
        ("C++20", ("O2", "O3")),
    ]
    return _gnu_compiler("g++", path, "cpp;cc;cxx", standards, recommended, platform)


def fpc_compiler(path: str, recommended: bool = True) -> Compiler:
    """The Free Pascal compiler."""
    compiler = Compiler(
        compiler_name="fpc",
        compiler_location=path,
        source_extensions=split_extensions("pas;pp;inc"),
    )
    compiler.add_configuration("default", "%s.*", "")
    if recommended:
        compiler.add_configuration("O2", "%s.* -O2", "")
    return compiler


def fbc_compiler(path: str) -> Compiler:
    """The FreeBASIC compiler."""
    compiler = Compiler(
        compiler_name="fbc",
        compiler_location=path,
        source_extensions=split_extensions("bas"),
    )
    compiler.add_configuration("default", "%s.*", "")
    return compiler


def java_compiler(javac_path: str, java_path: str, memory_limit: int | str) -> Compiler:
    """The JDK: javac compiles to byte code that java runs with a heap limit in MB."""
    compiler = Compiler(
        compiler_name="jdk",
        compiler_type=CompilerType.INTERPRETIVE_WITH_BYTE_CODE,
        compiler_location=javac_path,
        interpreter_location=java_path,
        source_extensions=split_extensions("java"),
        bytecode_extensions=split_extensions("class"),
        time_limit_ratio=5,
        disable_memory_limit_check=True,
    )
    compiler.add_configuration("default", "%s.*", f"-Xmx{memory_limit}m %s")
    return compiler


def python_compiler(path: str) -> Compiler:
    """The Python interpreter, run directly on the source."""
    compiler = Compiler(
        compiler_name="python",
        compiler_type=CompilerType.INTERPRETIVE_WITHOUT_BYTE_CODE,
        interpreter_location=path,
        source_extensions=split_extensions("py"),
        time_limit_ratio=10,
        memory_limit_ratio=5,
    )
    compiler.add_configuration("default", "", "%s.*")
    return compiler