# vaultscan

`vaultscan` recognises exposed AI provider API keys in text, keeps a per-file
cache of what it found, and has the pieces of a curses dashboard for showing
findings. It also ships two commands that create and remove mock `.env`
fixture files for trying a scanner out.

No third-party packages are required. The drawing code uses the standard
`curses` module, so it works on Linux and macOS terminals.

## Installation

```
pip install .
```

## Recognised keys

`vaultscan.patterns.get_patterns()` returns one `SecretPattern` per provider,
in this order:

| Provider   | Shape of the key                                         |
|------------|----------------------------------------------------------|
| OpenRouter | `sk-or-v1-` followed by 64 hex characters                |
| OpenAI     | `sk-proj-` or `sk-` followed by 32 or more characters (OpenRouter keys excluded) |
| Deepseek   | `sk-` followed by exactly 32 alphanumeric characters     |
| Gemini     | `AIza` followed by 35 characters                         |
| Grok (xAI) | the value assigned to `XAI_API_KEY` (24 or more characters) |
| Anthropic  | `sk-ant-` followed by 20 or more characters              |
| Ollama     | `ollama_…`, `sk-ollama-…` or a 32-hex-character token with a dotted suffix |

Each `SecretPattern` carries `name`, `short_name`, an RGB `color`, the compiled
`regex` and `excluded_prefixes`. `first_capture(line)` returns the first
acceptable key in a line or `None`; `allows_key(key)` tells whether a key is
not rejected by an excluded prefix.

## Matching text

```python
from pathlib import Path

from vaultscan.matcher import find_matches
from vaultscan.patterns import get_patterns

text = Path("settings.py").read_text(encoding="utf-8")
for found, key_hash in find_matches("settings.py", text, get_patterns(), hardcoded_by_default=False):
    print(found.provider, found.line_number, found.key, found.hardcoded)
```

`find_matches` yields a `KeyMatch` (from `vaultscan.models`) together with a
hex digest of the raw key, for every match on every line, applying each
pattern in order. `KeyMatch.key` is always masked: `mask_key` keeps the first
10 and last 4 characters of keys of 12 characters or more and turns anything
shorter into `****`.

`hardcoded` is true when `hardcoded_by_default` is set, or when
`is_hardcoded_in_line(line, key)` finds the key in quotes (`"`, `'` or a
backtick), or on a line that also contains `=` or `:`.

`hash_text(text)` gives the hex digest used for raw keys.

## Result cache

`vaultscan.cache.Cache` stores results per file in
`.vault-cache/index.json` under a root directory:

```python
from vaultscan.cache import Cache, CacheMatch

cache = Cache.load("/path/to/project")
cached = cache.get_matches_with_hash(file_path, content_hash)
if cached is None:
    cache.store(file_path, content_hash, [CacheMatch(...), ...])
cache.save()
```

`get_matches_with_hash` returns the stored `CacheMatch` list only when the
content hash is unchanged. A missing or unreadable index loads as an empty
cache. `save` writes only after a `store`, through a temporary file that is
renamed into place; I/O errors are ignored. Entries hold the masked key and
the digest of the raw key, never the key itself.

## Dashboard pieces

`vaultscan.state.AppState` holds the scan path, the active `Tab` (`ENV`,
`FILES`, `IDES`) and one `ListState` per tab. `push_env`, `push_ide` and
`push_file` add findings; a list follows new findings until the user moves
up, and `end` resumes following. `handle_key(key, viewport_h)` takes key
names and returns `AppAction.EXIT` or `AppAction.NONE`:

| Key name | Action |
|----------|--------|
| `q`, `Q`, `esc`, `ctrl+c` | exit |
| `left` / `right`, `tab` | previous / next tab |
| `e`, `f`, `i` (either case) | jump to ENV, FILES or IDES |
| `up` / `down` | move the selection |
| `pageup` / `pagedown` | move by a page |
| `home` / `end` | first / last finding |

`vaultscan.terminal.TerminalGuard` is a context manager that starts curses and
restores the terminal on exit; `vaultscan.layout.draw(window, state, tick)`
draws the header, the findings list with its side cards, and the footer:

```python
from vaultscan.layout import draw, viewport_height
from vaultscan.state import AppState
from vaultscan.terminal import TerminalGuard

state = AppState(scan_path="/path/to/project")
with TerminalGuard() as window:
    draw(window, state, tick=0)
    window.getch()
```

`viewport_height(rows)` gives the number of list rows visible for a terminal
of that height, for passing to the state methods.

## What it does not do

The package does not walk directory trees: there is no function that finds
`.env` files, project files or IDE directories and scans them, and no
background scanners. There is no dashboard command and no event loop that
reads keys and feeds findings into the state; the pieces above have to be
driven by your own code.

## Test fixtures

Create nested `.env` files full of random, made-up keys:

```
generate-mock-env-fixtures /tmp/fixtures 50 vault_env
```

The count defaults to 50 and the prefix to `vault_env`. Files are laid out as
`workspace-NN/project-NNN/.env.<prefix>_NNN[.local|.development|.production|.test]`,
twenty projects per workspace. The same is available from Python as
`vaultscan.env_fixtures.generate_env_fixtures(target_dir, count, prefix)`,
which returns the created paths.

Remove them again:

```
delete-mock-env-fixtures /tmp/fixtures vault_env --dry-run
delete-mock-env-fixtures /tmp/fixtures vault_env
```

Every file under the directory whose name starts with `.env.<prefix>_` is
listed and, without `--dry-run`, deleted. Prefixes may contain only letters,
digits, `_` and `-`; an invalid prefix or a missing directory exits with
status 1.

## Running the tests

```
pip install ".[test]"
pytest
```