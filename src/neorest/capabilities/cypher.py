"""Cypher dialect capabilities derived from the server version."""

from __future__ import annotations

import logging
from enum import Enum

from neorest.capabilities.version import ServerVersion

logger = logging.getLogger(__name__)

CYPHER_20_MIN_VERSION = ServerVersion(2, 0)
CYPHER_22_MIN_VERSION = ServerVersion(2, 2)


class CypherCapabilities(Enum):
    """
    Query dialect feature sets.

    Exactly one member is active per connection. Each member exposes the
    feature flags the query layer checks before emitting version-specific
    syntax:

    - supports_collect_as: ``collect(x) AS y`` projections.
    - supports_property_suffixes_for_null_comparisons: ``n.prop?`` and
      ``n.prop!`` null handling from the 1.x dialect.
    - supports_null_comparisons_with_is_operator: ``IS NULL`` checks.
    - supports_planner: ``PLANNER`` query hints.
    """

    CYPHER_19 = ("1.9", False, True, False, False)
    CYPHER_20 = ("2.0", True, False, True, False)
    CYPHER_22 = ("2.2", True, False, True, True)

    def __init__(
        self,
        dialect: str,
        supports_collect_as: bool,
        supports_property_suffixes_for_null_comparisons: bool,
        supports_null_comparisons_with_is_operator: bool,
        supports_planner: bool,
    ):
        self.dialect = dialect
        self.supports_collect_as = supports_collect_as
        self.supports_property_suffixes_for_null_comparisons = (
            supports_property_suffixes_for_null_comparisons
        )
        self.supports_null_comparisons_with_is_operator = (
            supports_null_comparisons_with_is_operator
        )
        self.supports_planner = supports_planner

    def __str__(self) -> str:
        return f"Cypher {self.dialect}"


def resolve_capabilities(version: ServerVersion) -> CypherCapabilities:
    """
    Pick the capability set for a server version.

    Lower bounds are inclusive: 2.0.0.0 resolves to CYPHER_20 and
    2.2.0.0 to CYPHER_22.

    Args:
        version: Parsed server version.

    Returns:
        The matching CypherCapabilities member.
    """
    if version < CYPHER_20_MIN_VERSION:
        capabilities = CypherCapabilities.CYPHER_19
    elif version < CYPHER_22_MIN_VERSION:
        capabilities = CypherCapabilities.CYPHER_20
    else:
        capabilities = CypherCapabilities.CYPHER_22

    logger.debug(f"Server version {version} resolved to {capabilities}")
    return capabilities
