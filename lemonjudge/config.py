"""Judge configuration stored as JSON."""

from __future__ import annotations

from dataclasses import dataclass, field

from lemonjudge.compiler import Compiler
from lemonjudge.jsonutil import JsonFieldError, read_field, read_list, write_field

_INT_FIELDS = {
    "default_full_score": "defaultFullScore",
    "default_time_limit": "defaultTimeLimit",
    "default_memory_limit": "defaultMemoryLimit",
    "compile_time_limit": "compileTimeLimit",
    "special_judge_time_limit": "specialJudgeTimeLimit",
    "file_size_limit": "fileSizeLimit",
    "rejudge_times": "rejudgeTimes",
    "max_judging_threads": "maxJudgingThreads",
}

_STR_FIELDS = {
    "default_input_file_extension": "defaultInputFileExtension",
    "default_output_file_extension": "defaultOutputFileExtension",
    "diff_path": "diffPath",
}

_LIST_FIELDS = {
    "input_file_extensions": "inputFileExtensions",
    "output_file_extensions": "outputFileExtensions",
    "recent_contest": "recentContest",
}


@dataclass
class JudgeConfig:
    """Judging defaults, limits and the list of compilers."""

    compiler_list: list[Compiler] = field(default_factory=list)
    default_full_score: int = 0
    default_time_limit: int = 0
    default_memory_limit: int = 0
    compile_time_limit: int = 0
    special_judge_time_limit: int = 0
    file_size_limit: int = 0
    rejudge_times: int = 0
    max_judging_threads: int = 0
    default_input_file_extension: str = ""
    default_output_file_extension: str = ""
    input_file_extensions: list[str] = field(default_factory=list)
    output_file_extensions: list[str] = field(default_factory=list)
    recent_contest: list[str] = field(default_factory=list)
    diff_path: str = ""

    @classmethod
    def from_json(cls, data: dict) -> JudgeConfig:
        """Build a configuration; the ``compilerList`` array is required."""
        config = cls()
        for attr, key in _INT_FIELDS.items():
            try:
                setattr(config, attr, read_field(data, key, int))
            except JsonFieldError:
                pass
        for attr, key in _STR_FIELDS.items():
            try:
                setattr(config, attr, read_field(data, key, str))
            except JsonFieldError:
                pass
        for attr, key in _LIST_FIELDS.items():
            try:
                setattr(config, attr, read_list(data, key, str))
            except JsonFieldError:
                pass
        compilers = read_field(data, "compilerList", list)
        config.compiler_list = [
            Compiler.from_json(item if isinstance(item, dict) else {}) for item in compilers
        ]
        return config

    def to_json(self) -> dict:
        """Return the configuration as a JSON object."""
        data: dict = {}
        for attr, key in {**_INT_FIELDS, **_STR_FIELDS, **_LIST_FIELDS}.items():
            write_field(data, key, getattr(self, attr))
        write_field(data, "compilerList", [compiler.to_json() for compiler in self.compiler_list])
        return data