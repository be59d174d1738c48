"""Read and rewrite the version field of package.json.

The rewrite touches only the bytes of the top-level ``version`` value when
it can. If the file layout defeats that (the first ``"version"`` key is not
the top-level one, or the key is missing), the JSON is re-serialized with
the indentation detected from the original file.
"""

import json
import logging
import re
from pathlib import Path
from typing import Any

from publish_release.exceptions import FailureReason, ManifestError
from publish_release.models import ResolvedVersion, StepOutcome
from publish_release.utils.output import quiet_output
from publish_release.utils.version import bump_version

logger = logging.getLogger(__name__)

VERSION_FIELD_PATTERN = re.compile(r'("version"\s*:\s*")((?:[^"\\]|\\.)*)(")')
INDENT_PATTERN = re.compile(r"^[ \t]+(?=\")", re.MULTILINE)


def load_manifest(manifest_path: Path) -> tuple[str, dict[str, Any]]:
    """Read the manifest text and its parsed content.

    Raises:
        ManifestError: If the file is missing, unreadable or not a JSON object
    """
    try:
        text = manifest_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ManifestError(
            f"{manifest_path.name} not found",
            details=f"Expected at: {manifest_path}",
            fix_hint="Run from the package root or set manifest.file in the config",
        ) from None
    except OSError as e:
        raise ManifestError(f"Failed to read {manifest_path.name}", details=str(e)) from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ManifestError(
            f"Invalid JSON in {manifest_path.name}",
            details=str(e),
            fix_hint=f"Fix JSON syntax errors in {manifest_path.name}",
        ) from e

    if not isinstance(data, dict):
        raise ManifestError(
            f"{manifest_path.name} must contain a JSON object",
            details=f"Found {type(data).__name__}",
        )

    return text, data


def read_version(manifest_path: Path) -> str:
    """Read the current version from disk.

    Always re-reads the file; the bump step may have rewritten it.

    Raises:
        ManifestError: If the manifest or its version field is unusable
    """
    _, data = load_manifest(manifest_path)
    version = data.get("version")
    if not isinstance(version, str) or not version:
        raise ManifestError(
            f"No version field in {manifest_path.name}",
            fix_hint='Add "version": "1.0.0" to the manifest',
        )
    return version


def detect_indent(text: str) -> int | str:
    """Guess the indentation used by a JSON document (defaults to 2)."""
    match = INDENT_PATTERN.search(text)
    if not match:
        return 2
    indent = match.group(0)
    return indent if "\t" in indent else len(indent)


def render_manifest(text: str, data: dict[str, Any], version: str) -> str:
    """Return the manifest text with its version set to ``version``."""
    expected = {**data, "version": version}

    substituted, count = VERSION_FIELD_PATTERN.subn(
        lambda m: f"{m.group(1)}{version}{m.group(3)}", text, count=1
    )
    if count:
        try:
            if json.loads(substituted) == expected:
                return substituted
        except json.JSONDecodeError:
            pass

    logger.debug("Re-serializing manifest; in-place substitution not possible")
    rendered = json.dumps(expected, indent=detect_indent(text), ensure_ascii=False)
    return rendered + "\n"


def compute_version(resolved: ResolvedVersion, data: dict[str, Any]) -> str:
    """Compute the new version for a manifest's parsed content."""
    if not resolved.is_bump:
        return resolved.value

    current = data.get("version")
    if not isinstance(current, str) or not current:
        raise ManifestError(
            "No version field to bump",
            fix_hint=f"Add a version field or release an exact version instead of '{resolved.value}'",
        )
    return bump_version(current, resolved.value)  # type: ignore[arg-type]


def set_version(resolved: ResolvedVersion, manifest_path: Path) -> str:
    """Rewrite the manifest version in place.

    Returns:
        The version now recorded in the manifest

    Raises:
        ManifestError: If the manifest cannot be read, bumped or written
    """
    text, data = load_manifest(manifest_path)
    new_version = compute_version(resolved, data)

    try:
        manifest_path.write_text(render_manifest(text, data, new_version), encoding="utf-8")
    except OSError as e:
        raise ManifestError(
            f"Failed to write {manifest_path.name}",
            details=str(e),
            fix_hint="Check file permissions",
        ) from e

    logger.debug("Manifest %s: %s -> %s", manifest_path, data.get("version"), new_version)
    return new_version


def bump(resolved: ResolvedVersion, manifest_path: Path, quiet: bool = False) -> StepOutcome:
    """Bump the manifest version.

    Output produced while bumping is suppressed in quiet mode. Suppression
    never changes the outcome.
    """
    try:
        with quiet_output(quiet):
            new_version = set_version(resolved, manifest_path)
    except ManifestError as e:
        return StepOutcome.failed(
            FailureReason.BUMP_FAILED,
            f"failed to bump version in {manifest_path.name}: {e.message}",
            details=e.details,
            fix_hint=e.fix_hint,
        )
    return StepOutcome.ok(f"Version bumped to {new_version}")
