"""Board settings, with overrides from the enclosing git repository's config."""

from pathlib import Path
from typing import Any

from git import InvalidGitRepositoryError, NoSuchPathError, Repo

SECTION = "mdkanban"

DEFAULTS = {
    "suppress-ms": 750,
    "nested-dir": ".kanbn",
    "title": "Kanban Board",
}


def _python_key(git_key: str) -> str:
    """Convert git-style key (hyphenated) to Python-style (underscored)."""
    return git_key.replace("-", "_")


def _git_key(python_key: str) -> str:
    """Convert Python-style key (underscored) to git-style (hyphenated)."""
    return python_key.replace("_", "-")


def _coerce(git_key: str, raw: str) -> Any:
    """Type-coerce a raw config string using the type of its default."""
    default = DEFAULTS.get(git_key)
    if isinstance(default, bool):
        return raw.lower() in ("true", "yes", "1")
    if isinstance(default, int):
        try:
            return int(raw)
        except ValueError:
            return default
    return raw


def find_repo(path: str | Path) -> Repo | None:
    """Return the git repository containing path, or None."""
    try:
        return Repo(path, search_parent_directories=True)
    except (InvalidGitRepositoryError, NoSuchPathError):
        return None


def read_config(path: str | Path) -> dict[str, Any]:
    """Read settings for a board at path.

    Returns python-style keys. Values come from the ``[mdkanban]`` section of
    the enclosing git repository when there is one, else from DEFAULTS.
    """
    result = {_python_key(k): v for k, v in DEFAULTS.items()}
    repo = find_repo(path)
    if repo is None:
        return result

    reader = repo.config_reader()
    if not reader.has_section(SECTION):
        return result
    for git_k, raw in reader.items(SECTION):
        result[_python_key(git_k)] = _coerce(git_k, raw)
    return result


def write_config_key(path: str | Path, key: str, value: Any) -> None:
    """Write one key to the repository config. key is python-style."""
    repo = find_repo(path)
    if repo is None:
        raise ValueError(f"{path} is not inside a git repository")
    git_k = _git_key(key)
    if git_k not in DEFAULTS:
        raise ValueError(f"Unknown setting '{key}'")
    writer = repo.config_writer("repository")
    try:
        if isinstance(value, bool):
            writer.set_value(SECTION, git_k, str(value).lower())
        else:
            writer.set_value(SECTION, git_k, str(value))
    finally:
        writer.release()
