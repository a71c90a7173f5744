# lemonjudge

Core pieces of a small judging environment for programming contests. The
package is a library. It has no graphical front end.

- `lemonjudge.compiler` has `Compiler`, a compiler or interpreter definition
  with named configurations. Each configuration holds compiler and interpreter
  arguments. `Compiler.from_json` and `Compiler.to_json` read and write it as
  JSON. `CompilerType` tells typical compilers apart from interpreters, with or
  without byte code. `split_extensions` splits a `;`-separated extension list.
- `lemonjudge.compiler_presets` builds ready-made definitions:
  `gcc_compiler`, `gpp_compiler`, `fpc_compiler`, `fbc_compiler`,
  `java_compiler` and `python_compiler`. `custom_compiler` builds a compiler
  from a user's description.
- `lemonjudge.compiler_wizard` has `CompilerWizard`, which holds the answers
  for adding compilers step by step. It checks them (`validate_custom`,
  `validate_builtin`, which raise `WizardError`), describes them
  (`custom_summary`, `builtin_summary`) and creates the compilers (`build`).
  `detect_tools` finds gcc, g++, fpc, javac, java and python in a `PATH`
  value.
- `lemonjudge.compiler_editor` checks a compiler's details with
  `validate_compiler_details`, which raises `CompilerEditError`. It also adds
  and removes configurations (`new_configuration`, `delete_configuration`) and
  reports which fields apply to a compiler type (`enabled_fields`).
- `lemonjudge.config` has `JudgeConfig`. It holds default limits, file
  extensions, recent contests, the diff path and the compiler list, and is
  stored as JSON. Its `compilerList` array is required when reading.
- `lemonjudge.theme` has `ColorTheme`, `HslTuple`, `DddTuple` and
  `make_per`. Together they map a score ratio to an HSL colour whose parts
  run from 0 to 1.
- `lemonjudge.assets` has `asset_paths` and `language_search_paths`, which
  list the directories where assets may live. `Translator` finds the
  available `.qm` translation files and installs one by language code.
- `lemonjudge.jsonutil` provides typed reading and writing of JSON fields
  (`read_field`, `read_list`, `write_field`, `JsonFieldError`) and directory
  listing helpers (`get_file_list`, `file_exists_in`).

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
import json

from lemonjudge.compiler_presets import gpp_compiler, python_compiler
from lemonjudge.config import JudgeConfig

config = JudgeConfig(default_full_score=10, default_time_limit=1000)
config.compiler_list.append(gpp_compiler("/usr/bin/g++", recommended=True, platform="linux"))
config.compiler_list.append(python_compiler("/usr/bin/python3"))

text = json.dumps(config.to_json())
restored = JudgeConfig.from_json(json.loads(text))
print([c.compiler_name for c in restored.compiler_list])  # ['g++', 'python']
```

Shading a score of 7 out of 10:

```python
from lemonjudge.theme import ColorTheme, DddTuple, HslTuple

theme = ColorTheme(name="green")
theme.set_color(
    HslTuple(120, 70.0, 60.0), HslTuple(0, 70.0, 60.0),
    HslTuple(0, 0.0, 91.67), HslTuple(240, 70.0, 60.0),
    DddTuple(0, 0, 0), DddTuple(1, 1, 1.33),
)
hue, saturation, lightness = theme.color_per(7, 10)
```

## What this package does not do

- It has no command-line program. Nothing is installed to run from a shell.
- It does not save or load a user's settings file. Only `JudgeConfig` and
  `Compiler` are turned to and from JSON objects, and writing these to disk is
  left to the caller.
- It does not define judging result states or their display colours.
- It does not group data files into test cases.
- It does not compile or run contestants' programs.