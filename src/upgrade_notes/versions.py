"""
Version string helpers.

Ordering follows the dependency manager's rules rather than strict semver:
versions are split into numeric and alphabetic components, and alphabetic
components rank as dev < alpha/a < beta/b < RC/rc < (number) < pl/p.
A version with extra trailing numbers is the greater one, so 1.0 < 1.0.0.
"""

import re

from common.constants import DEFAULT_BRANCH_ALIAS, DEFAULT_BRANCH_NAMES

NUMERIC_VERSION_PATTERN = re.compile(r"^[0-9]\.[0-9]+\.?[0-9.]*")
MAJOR_VERSION_PATTERN = re.compile(r"^([0-9]\.[0-9]+\.?[0-9]*)")

# Any run of digits or letters; everything else separates components
_COMPONENT_PATTERN = re.compile(r"[0-9]+|[A-Za-z]+")

# Stands in for a numeric component when it is compared with a special form
_NUMBER_MARKER = "#"

_SPECIAL_FORMS = (
    ("dev", 0),
    ("alpha", 1),
    ("a", 1),
    ("beta", 2),
    ("b", 2),
    ("RC", 3),
    ("rc", 3),
    (_NUMBER_MARKER, 4),
    ("pl", 5),
    ("p", 5),
)


def is_numeric_version(version: str) -> bool:
    """Check whether a version starts with a numeric major.minor form, e.g. 2.0.10."""
    return NUMERIC_VERSION_PATTERN.match(version) is not None


def get_major_version(version: str) -> str:
    """
    Return the leading numeric run of a version.

    Matches <digit>.<digits>[.][<digits>], so "2.5.3" yields "2.5.3" and
    "2.5.3.1" yields "2.5.3". Versions that do not start with a numeric
    form are returned unchanged.
    """
    match = MAJOR_VERSION_PATTERN.match(version)
    if match:
        return match.group(1)
    return version


def _special_rank(form: str) -> int:
    for name, rank in _SPECIAL_FORMS:
        if form.startswith(name):
            return rank
    return -6


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _compare_components(left: list[str], right: list[str]) -> int:
    for left_part, right_part in zip(left, right):
        left_numeric = left_part.isdigit()
        right_numeric = right_part.isdigit()
        if left_numeric and right_numeric:
            result = _sign(int(left_part) - int(right_part))
        elif not left_numeric and not right_numeric:
            result = _sign(_special_rank(left_part) - _special_rank(right_part))
        elif left_numeric:
            result = _sign(_special_rank(_NUMBER_MARKER) - _special_rank(right_part))
        else:
            result = _sign(_special_rank(left_part) - _special_rank(_NUMBER_MARKER))
        if result != 0:
            return result

    common = min(len(left), len(right))
    if len(left) > common:
        if left[common].isdigit():
            return 1
        return _compare_components(left[common:], [_NUMBER_MARKER])
    if len(right) > common:
        if right[common].isdigit():
            return -1
        return _compare_components([_NUMBER_MARKER], right[common:])
    return 0


def _components(version: str) -> list[str]:
    # An empty version ranks like a bare number: newer than dev/alpha/beta/RC, older than 1.0
    if not version:
        return [_NUMBER_MARKER]
    return _COMPONENT_PATTERN.findall(version)


def compare_versions(left: str, right: str) -> int:
    """
    Compare two version strings.

    Returns:
        -1 if left is older, 0 if equal, 1 if left is newer
    """
    return _compare_components(_components(left), _components(right))


def version_lt(left: str, right: str) -> bool:
    """Check whether left is strictly older than right."""
    return compare_versions(left, right) < 0


def is_upgrade(from_version: str, to_version: str) -> bool:
    """
    Decide whether moving from one normalized version to another is an upgrade.

    Identical versions count as an upgrade. Default branches (dev-master,
    dev-trunk, dev-default) rank above every release. Any other named branch
    (dev-*) has no defined order and is reported as a downgrade.
    """
    if from_version == to_version:
        return True

    if from_version in DEFAULT_BRANCH_NAMES:
        from_version = DEFAULT_BRANCH_ALIAS
    if to_version in DEFAULT_BRANCH_NAMES:
        to_version = DEFAULT_BRANCH_ALIAS

    if from_version.startswith("dev-") or to_version.startswith("dev-"):
        return False

    return compare_versions(from_version, to_version) <= 0
