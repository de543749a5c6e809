"""
Gear Calculator - Design Session

Holds the current parameter record and the latest generated snapshot for
an interactive caller (a form that regenerates on every keystroke).

Recomputation is last-write-wins: every computation takes a ticket from
begin(), and publish() only accepts the result of the newest ticket.
Results of superseded computations are discarded rather than cancelled,
since a computation is bounded by teeth × steps.

Example:
    >>> session = DesignSession()
    >>> params = session.update_parameter("face-width", 12)
    >>> session.recompute().face_width_mm
    12.0
"""

import logging
import threading
from typing import Any, Optional

from ..enums import GearKind
from ..io import (
    GearResult,
    PARAMS_BY_KIND,
    PlanetaryParams,
    SpurParams,
    WormParams,
    normalize_parameter_name,
)
from .constants import PARAMETER_GROUPS
from .gear_types import GenerateHook, generate

logger = logging.getLogger(__name__)

# Shared form fields stored under a family-specific name
_FIELD_ALIASES = {
    (PlanetaryParams, "teeth"): "sun_teeth",
    (WormParams, "helix_angle"): "lead_angle",
}


class DesignSession:
    """Current parameters plus the latest published result."""

    def __init__(self, params=None, hook: Optional[GenerateHook] = None):
        self._params = params if params is not None else SpurParams()
        self._hook = hook
        self._lock = threading.Lock()
        self._generation = 0
        self._result: Optional[GearResult] = None

    @property
    def params(self):
        return self._params

    @property
    def result(self) -> Optional[GearResult]:
        """Latest published snapshot (None before the first publish)."""
        return self._result

    @property
    def generation(self) -> int:
        """Newest ticket handed out by begin()."""
        return self._generation

    def _field_name(self, cls, name: str) -> str:
        field = normalize_parameter_name(name)
        return _FIELD_ALIASES.get((cls, field), field)

    def update_parameter(self, name: str, value: Any):
        """
        Set one parameter and return the new record.

        ``name`` may be a form id ("pressure-angle"). Setting ``kind``
        switches gear family, keeping every field the two families share.

        Raises:
            ValueError: Unknown parameter for the current family
            pydantic.ValidationError: Value has the wrong type
        """
        cls = type(self._params)
        data = self._params.model_dump()
        field = self._field_name(cls, name)

        if field == "kind":
            if isinstance(value, str):
                value = value.lower()
            cls = PARAMS_BY_KIND[GearKind(value)]
            teeth = data.get("sun_teeth", data.get("teeth"))
            data = {k: v for k, v in data.items() if k in cls.model_fields and k != "kind"}
            if teeth is not None:
                data[self._field_name(cls, "teeth")] = teeth
        elif field not in cls.model_fields:
            raise ValueError(f"Unknown parameter '{name}' for {self._params.kind} gears")
        else:
            data[field] = value

        self._params = cls.model_validate(data)
        logger.debug(f"Parameter {field} set to {value!r}")
        return self._params

    def reset_group(self, group: str):
        """
        Reset a group of form fields (basic, body, appearance) to defaults.

        Fields the current family does not have are skipped.
        """
        if group not in PARAMETER_GROUPS:
            raise ValueError(
                f"Unknown parameter group '{group}'. "
                f"Must be one of: {', '.join(PARAMETER_GROUPS)}"
            )
        cls = type(self._params)
        data = self._params.model_dump()
        for name in PARAMETER_GROUPS[group]:
            field = self._field_name(cls, name)
            if field in cls.model_fields:
                data[field] = cls.model_fields[field].default
        self._params = cls.model_validate(data)
        logger.debug(f"Parameter group {group} reset")
        return self._params

    def begin(self) -> int:
        """Start a computation and return its ticket."""
        with self._lock:
            self._generation += 1
            return self._generation

    def publish(self, ticket: int, result: GearResult) -> bool:
        """
        Offer a finished result. Accepted only if no newer ticket exists.

        Returns:
            True if the result became the current snapshot, False if stale
        """
        with self._lock:
            if ticket != self._generation:
                logger.debug(f"Discarding stale result {ticket} (current {self._generation})")
                return False
            self._result = result
            return True

    def recompute(self) -> GearResult:
        """
        Generate the current parameters and publish the result.

        Returns the result of this call even if a newer computation
        superseded it before publishing; ``result`` holds the snapshot.
        """
        ticket = self.begin()
        params = self._params
        result = generate(params, hook=self._hook)
        self.publish(ticket, result)
        return result
