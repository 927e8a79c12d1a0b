"""Server version parsing.

Servers report their version as a free-form string (``"1.5.M02"``,
``"2.2.0"``, ``"2.0.0-RC1"``). Capability resolution compares four numeric
components, so every string is reduced to a :class:`ServerVersion`:

- Milestone builds map the milestone number into the revision slot:
  ``"1.5.M02"`` -> ``1.5.0.2``.
- Other qualifiers (``-RC1``, ``-enterprise``) are kept for display only
  and do not affect ordering.
- Anything that cannot be read becomes ``0.0.0.0``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import ClassVar

_MILESTONE_PATTERN = re.compile(r"^(\d+)\.(\d+)(?:\.(\d+))?[.-]?(M(\d+))")
_NUMERIC_PATTERN = re.compile(
    r"^(\d+(?:\.\d+){1,3})(?:[.-]?([A-Za-z].*)|-(.+))?$"
)


@dataclass(frozen=True, order=True)
class ServerVersion:
    """Four-part comparable server version."""

    major: int = 0
    minor: int = 0
    build: int = 0
    revision: int = 0
    qualifier: str | None = field(default=None, compare=False)
    """Pre-release or edition tag, informational only."""

    ZERO: ClassVar["ServerVersion"]

    @classmethod
    def parse(cls, raw: str | None) -> "ServerVersion":
        """Alias for :func:`parse_server_version`."""
        return parse_server_version(raw)

    @property
    def is_zero(self) -> bool:
        """True when the version could not be determined."""
        return self.as_tuple() == (0, 0, 0, 0)

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.major, self.minor, self.build, self.revision)

    def __str__(self) -> str:
        return ".".join(str(part) for part in self.as_tuple())


ServerVersion.ZERO = ServerVersion()


def parse_server_version(raw: str | None) -> ServerVersion:
    """
    Parse a server version string.

    Never raises: empty, missing or unreadable input yields
    ``ServerVersion.ZERO``.

    Args:
        raw: Version string as reported by the server.

    Returns:
        The parsed ServerVersion.
    """
    if not raw:
        return ServerVersion.ZERO

    text = raw.strip()

    match = _MILESTONE_PATTERN.match(text)
    if match:
        major, minor, build, qualifier, milestone = match.groups()
        return ServerVersion(
            major=int(major),
            minor=int(minor),
            build=int(build or 0),
            revision=int(milestone),
            qualifier=qualifier,
        )

    match = _NUMERIC_PATTERN.match(text)
    if not match:
        return ServerVersion.ZERO

    numbers, letter_qualifier, dash_qualifier = match.groups()
    parts = [int(part) for part in numbers.split(".")]
    parts.extend([0] * (4 - len(parts)))

    return ServerVersion(
        *parts,
        qualifier=letter_qualifier or dash_qualifier,
    )
