import pytest

from lemonjudge.compiler import CompilerType
from lemonjudge.compiler_wizard import CompilerWizard, WizardError, detect_tools


@pytest.mark.parametrize(
    "custom, current, expected",
    [(True, 0, 1), (False, 0, 2), (True, 1, 3), (False, 2, 3), (False, 3, -1)],
)
def test_next_page(custom, current, expected):
    assert CompilerWizard(custom=custom).next_page(current) == expected


def test_validate_custom_empty_name():
    wizard = CompilerWizard(custom=True, compiler_location="/bin/cc", source_extensions="c")
    with pytest.raises(WizardError, match="Empty compiler name!"):
        wizard.validate_custom()


def test_validate_custom_typical_needs_compiler_location():
    wizard = CompilerWizard(custom=True, compiler_name="cc", source_extensions="c")
    with pytest.raises(WizardError, match="Empty compiler location!"):
        wizard.validate_custom()


def test_validate_custom_interpreter_needed():
    wizard = CompilerWizard(
        custom=True,
        compiler_type=CompilerType.INTERPRETIVE_WITHOUT_BYTE_CODE,
        compiler_name="py",
        source_extensions="py",
    )
    with pytest.raises(WizardError, match="Empty interpreter location!"):
        wizard.validate_custom()


def test_validate_custom_bytecode_needed():
    wizard = CompilerWizard(
        custom=True,
        compiler_type=CompilerType.INTERPRETIVE_WITH_BYTE_CODE,
        compiler_name="jdk",
        compiler_location="/bin/javac",
        interpreter_location="/bin/java",
        source_extensions="java",
    )
    with pytest.raises(WizardError, match="Empty byte-code file extensions!"):
        wizard.validate_custom()


def test_custom_summary_skips_disabled_fields():
    wizard = CompilerWizard(
        custom=True,
        compiler_type=CompilerType.INTERPRETIVE_WITHOUT_BYTE_CODE,
        compiler_name="py",
        interpreter_location="/bin/python",
        source_extensions="py",
        interpreter_arguments="%s.*",
    )
    summary = wizard.custom_summary()
    assert summary.startswith("[Custom Compiler]\nCompiler Name: py\n")
    assert "Compiler's Location" not in summary
    assert "Interpreter's Location: /bin/python\n" in summary
    assert "Default Interpreter's Arguments: %s.*\n" in summary


def test_validate_builtin_reports_first_missing():
    wizard = CompilerWizard(gcc_enabled=True, java_enabled=True, javac_path="/bin/javac")
    with pytest.raises(WizardError, match="Empty gcc path!"):
        wizard.validate_builtin()
    wizard.gcc_path = "/bin/gcc"
    with pytest.raises(WizardError, match="Empty java path!"):
        wizard.validate_builtin()


def test_builtin_summary_gcc_and_fbc():
    wizard = CompilerWizard(gcc_enabled=True, gcc_path="/bin/gcc", fbc_enabled=True, fbc_path="/bin/fbc")
    summary = wizard.builtin_summary()
    assert summary == (
        "[gcc Compiler]\ngcc Path: /bin/gcc\nAdd recommended configurations\n\n"
        "[fbc Compiler]\nfbc Path: /bin/fbc\n\n"
    )


def test_build_custom():
    wizard = CompilerWizard(
        custom=True,
        compiler_name="cc",
        compiler_location="/bin/cc",
        source_extensions="c;h",
        compiler_arguments="-o %s %s.*",
        gcc_enabled=True,
        gcc_path="/bin/gcc",
    )
    compilers = wizard.build()
    assert [c.compiler_name for c in compilers] == ["cc"]
    assert compilers[0].source_extensions == ["c", "h"]
    assert compilers[0].configuration_names == ["default"]
    assert compilers[0].compiler_arguments == ["-o %s %s.*"]


def test_build_builtin_order():
    wizard = CompilerWizard(
        gcc_enabled=True,
        gcc_path="/bin/gcc",
        gpp_enabled=True,
        gpp_path="/bin/g++",
        fpc_enabled=True,
        fpc_path="/bin/fpc",
        fbc_enabled=True,
        fbc_path="/bin/fbc",
        java_enabled=True,
        javac_path="/bin/javac",
        java_path="/bin/java",
        python_enabled=True,
        python_path="/bin/python",
        platform="linux",
    )
    names = [c.compiler_name for c in wizard.build()]
    assert names == ["gcc", "g++", "fpc", "fbc", "jdk", "python"]


def test_build_gcc_without_recommended():
    wizard = CompilerWizard(gcc_enabled=True, gcc_path="/bin/gcc", gcc_recommended=False, platform="linux")
    (compiler,) = wizard.build()
    assert compiler.configuration_names == ["default"]
    assert compiler.compiler_arguments == ["-o %s %s.* -lm"]


def test_detect_tools_first_match_wins(tmp_path):
    first = tmp_path / "a"
    second = tmp_path / "b"
    first.mkdir()
    second.mkdir()
    (first / "gcc").write_text("")
    (second / "gcc").write_text("")
    (second / "python").write_text("")
    found = detect_tools(f"{first}:{tmp_path / 'missing'}:{second}", windows=False)
    assert found == {"gcc": f"{first}/gcc", "python": f"{second}/python"}


def test_detect_tools_windows_names(tmp_path):
    (tmp_path / "g++.exe").write_text("")
    (tmp_path / "g++").write_text("")
    found = detect_tools(f";{tmp_path}", windows=True)
    assert found == {"g++": f"{tmp_path}\\g++.exe"}