"""Hierarchical resource identifiers.

A resource names a service path followed by a hierarchy inside that
service, e.g. ``ht:myapp:myservice:hierarchical/path/*``. Service path
segments are delimited by ``:`` and hierarchy segments by ``/``; the last
``:`` separates the two parts.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from hapolicy.config import DEFAULT_LIMITS, MatchLimits
from hapolicy.errors import InvalidResourceError
from hapolicy.glob import matches_segments

__all__ = [
    "Resource",
    "matches_resource",
    "SERVICE_SEPARATOR",
    "HIERARCHY_SEPARATOR",
]

SERVICE_SEPARATOR = ":"
HIERARCHY_SEPARATOR = "/"

_logger = logging.getLogger("hapolicy.resource")


@dataclass(frozen=True)
class Resource:
    """A resource split into its service path and hierarchy.

    Attributes:
        service_path: Segments naming the owning service, outermost first.
        hierarchy: Segments naming the resource inside the service.
    """

    service_path: tuple[str, ...]
    hierarchy: tuple[str, ...]

    @classmethod
    def parse(cls, value: str) -> Resource:
        """Parse a ``service:path:hierarchy/path`` identifier.

        The last ``:`` separates the service path from the hierarchy, so a
        hierarchy cannot contain ``:``: ``ht:app:a/b:c`` parses to service
        path ``("ht", "app", "a/b")`` and hierarchy ``("c",)``. Empty
        segments are kept, as with any other segmented value.

        Raises:
            InvalidResourceError: If ``value`` contains no ``:``.
        """
        service, sep, hierarchy = value.rpartition(SERVICE_SEPARATOR)
        if not sep:
            raise InvalidResourceError(
                resource=value,
                reason=f"missing '{SERVICE_SEPARATOR}' before the hierarchy",
            )
        return cls(
            service_path=tuple(service.split(SERVICE_SEPARATOR)),
            hierarchy=tuple(hierarchy.split(HIERARCHY_SEPARATOR)),
        )

    def __str__(self) -> str:
        return (
            SERVICE_SEPARATOR.join(self.service_path)
            + SERVICE_SEPARATOR
            + HIERARCHY_SEPARATOR.join(self.hierarchy)
        )


def matches_resource(
    pattern: str,
    resource: str,
    limits: MatchLimits | None = None,
) -> bool:
    """Check whether a resource pattern covers a requested resource.

    The service paths and the hierarchies are matched independently, so a
    ``**`` in the service path never reaches into the hierarchy.

    Args:
        pattern: Resource pattern, e.g. ``ht:myapp:*:photos/**``.
        resource: The requested resource identifier.
        limits: Input size bounds; the defaults apply when omitted.

    Returns:
        True if both parts match, False otherwise.

    Raises:
        InvalidResourceError: If either identifier has no service path.
        MatchLimitExceededError: If either identifier is longer than allowed.
    """
    limits = limits if limits is not None else DEFAULT_LIMITS
    limits.check_pattern(pattern)
    limits.check_candidate(resource)

    parsed_pattern = Resource.parse(pattern)
    parsed_resource = Resource.parse(resource)

    decision = matches_segments(
        parsed_pattern.service_path, parsed_resource.service_path
    ) and matches_segments(parsed_pattern.hierarchy, parsed_resource.hierarchy)
    _logger.debug(
        "Resource match: pattern=%s resource=%s decision=%s",
        pattern,
        resource,
        decision,
    )
    return decision
