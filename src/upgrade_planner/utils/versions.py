"""Version and platform normalization shared by the planning engine."""

from typing import Iterable, List, Optional

import semver

from ..errors import InvalidVersionError


def clean_version(text: str) -> str:
    """Strip whitespace and a leading 'v' prefix from a version string."""
    text = text.strip()
    if text[:1] in ("v", "V"):
        text = text[1:]
    return text


def parse_version(text: str) -> semver.Version:
    """Parse a version string such as 'v1.28.3', '2.9' or '1.27.6+rke2r1'."""
    if not isinstance(text, str):
        raise InvalidVersionError(str(text), "not a string")

    try:
        return semver.Version.parse(clean_version(text), optional_minor_and_patch=True)
    except ValueError as e:
        raise InvalidVersionError(text, str(e)) from e


def try_parse_version(text: str) -> Optional[semver.Version]:
    """Parse a version string, returning None when it is malformed."""
    try:
        return parse_version(text)
    except InvalidVersionError:
        return None


def version_key(version: semver.Version) -> str:
    """Normalized string used to deduplicate versions."""
    return str(version)


def format_runtime_version(version: semver.Version) -> str:
    """Render a Kubernetes version the way upgrade steps report it."""
    return f"v{version}"


def normalize_platform(name: str) -> str:
    """Case-fold a platform identifier."""
    return (name or "").strip().lower()


def same_version(left: str, right: str) -> bool:
    """Compare two version strings after normalization."""
    parsed_left = try_parse_version(left)
    parsed_right = try_parse_version(right)
    if parsed_left is None or parsed_right is None:
        return clean_version(left) == clean_version(right)
    return version_key(parsed_left) == version_key(parsed_right)


def sort_versions(versions: Iterable[str]) -> List[str]:
    """Sort version strings by semantic version precedence."""
    parsed = [(parse_version(v), v) for v in versions]
    parsed.sort(key=lambda item: item[0])
    return [original for _, original in parsed]
