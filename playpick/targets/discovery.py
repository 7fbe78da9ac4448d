"""
Discovery of the spec files a run executes.
"""

from pathlib import Path

from playpick.exceptions import DiscoveryError

DEFAULT_SUFFIX = ".spec.ts"
DEFAULT_EXCLUDE = "visual.spec.ts"


def discover_test_files(
    tests_dir: str | Path,
    suffix: str = DEFAULT_SUFFIX,
    exclude: str | None = DEFAULT_EXCLUDE,
    root: str | Path | None = None,
) -> list[str]:
    """
    List spec files directly inside tests_dir.

    Only immediate regular files ending in suffix are kept, the excluded
    name is dropped, and the result is sorted.

    Args:
        tests_dir: Directory holding the spec files
        suffix: Filename suffix marking a spec file
        exclude: Filename left out of the result (the visual-regression suite)
        root: Paths are returned relative to this directory
            (default: the parent of tests_dir)

    Returns:
        Relative POSIX paths such as "tests/abtest.spec.ts"

    Raises:
        DiscoveryError: If the directory cannot be listed or nothing qualifies
    """
    tests_path = Path(tests_dir)
    base = Path(root) if root is not None else tests_path.parent

    try:
        entries = sorted(tests_path.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise DiscoveryError(
            f"cannot list test directory: {tests_dir}", reason=str(e)
        ) from e

    found = [
        entry
        for entry in entries
        if entry.name.endswith(suffix) and entry.name != exclude and entry.is_file()
    ]
    if not found:
        raise DiscoveryError(
            f"no test files matching *{suffix} in {tests_dir}", exclude=exclude
        )

    return [_relative(entry, base) for entry in found]


def _relative(path: Path, base: Path) -> str:
    try:
        return path.relative_to(base).as_posix()
    except ValueError:
        return path.as_posix()
