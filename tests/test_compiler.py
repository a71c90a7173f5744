import json

import pytest

from lemonjudge.compiler import Compiler, CompilerType, split_extensions
from lemonjudge.jsonutil import JsonFieldError


def _sample():
    compiler = Compiler(
        compiler_type=CompilerType.INTERPRETIVE_WITH_BYTE_CODE,
        compiler_name="jdk",
        source_extensions=split_extensions("java"),
        compiler_location="/usr/bin/javac",
        interpreter_location="/usr/bin/java",
        bytecode_extensions=split_extensions("class"),
        environment={"PATH": "/usr/bin"},
        time_limit_ratio=5,
        disable_memory_limit_check=True,
    )
    compiler.add_configuration("default", "%s.*", "-Xmx512m %s")
    return compiler


def test_defaults():
    compiler = Compiler()
    assert compiler.compiler_type is CompilerType.TYPICAL
    assert compiler.time_limit_ratio == 1
    assert compiler.memory_limit_ratio == 1
    assert compiler.disable_memory_limit_check is False


def test_split_extensions_skips_empty():
    assert split_extensions("cpp;;cc;cxx;") == ["cpp", "cc", "cxx"]
    assert split_extensions("") == []


def test_configuration_editing():
    compiler = Compiler()
    compiler.add_configuration("default", "-o %s %s.*", "")
    compiler.add_configuration("O2", "-O2", "")
    compiler.set_config_name(1, "fast")
    compiler.set_compiler_arguments(1, "-O3")
    compiler.set_interpreter_arguments(0, "run")
    assert compiler.configuration_names == ["default", "fast"]
    assert compiler.compiler_arguments == ["-o %s %s.*", "-O3"]
    assert compiler.interpreter_arguments == ["run", ""]
    compiler.delete_configuration(0)
    assert compiler.configuration_names == ["fast"]
    assert compiler.compiler_arguments == ["-O3"]
    assert compiler.interpreter_arguments == [""]


def test_out_of_range_indices_ignored():
    compiler = Compiler()
    compiler.add_configuration("default", "a", "b")
    compiler.set_config_name(5, "x")
    compiler.set_compiler_arguments(-1, "x")
    compiler.delete_configuration(3)
    compiler.delete_configuration(-1)
    assert compiler.configuration_names == ["default"]
    assert compiler.compiler_arguments == ["a"]


def test_copy_from_is_independent():
    original = _sample()
    copy = Compiler()
    copy.copy_from(original)
    assert copy == original
    copy.configuration_names.append("other")
    copy.environment["X"] = "1"
    assert original.configuration_names == ["default"]
    assert "X" not in original.environment


def test_json_round_trip():
    original = _sample()
    text = json.dumps(original.to_json())
    assert Compiler.from_json(json.loads(text)) == original


def test_to_json_keys():
    data = _sample().to_json()
    assert data["compilerType"] == int(CompilerType.INTERPRETIVE_WITH_BYTE_CODE)
    assert data["compilerName"] == "jdk"
    assert data["environment"] == ["PATH=/usr/bin"]
    assert data["disableMemoryLimitCheck"] is True


def test_environment_parsing():
    compiler = Compiler.from_json({"environment": ["A=b=c", "FOO", "EMPTY="]})
    assert compiler.environment == {"A": "b=c", "FOO": "FOO", "EMPTY": ""}


def test_missing_and_mistyped_fields_keep_defaults():
    compiler = Compiler.from_json({"compilerName": 3, "compilerType": "x", "timeLimitRatio": "fast"})
    assert compiler == Compiler()


def test_invalid_compiler_type():
    with pytest.raises(JsonFieldError):
        Compiler.from_json({"compilerType": 7})