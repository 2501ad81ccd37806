"""Runtime configuration for interpolators."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional, Union

from lininterp.utils.numeric import NumericPolicy, PromotingPolicy
from lininterp.schema.enums import SearchMethod

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def parse_method(method: Union[str, SearchMethod]) -> SearchMethod:
    """Resolve a SearchMethod from an enum member or its case-insensitive name."""
    if isinstance(method, SearchMethod):
        return method
    try:
        return SearchMethod(str(method).strip().upper())
    except ValueError:
        available = ", ".join(m.value for m in SearchMethod)
        raise ValueError(
            f"Unknown search method: {method}. Available: {available}"
        ) from None


def _parse_flag(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw!r}")


@dataclass
class InterpConfig:
    """Interpolator settings.

    Attributes:
        method: Bracket search strategy
        validate: Check the table before every query and report INVALID_TABLE
        strict: Raise InvalidTableError instead of returning INVALID_TABLE
        policy: Arithmetic used for the linear blend
    """

    method: SearchMethod = SearchMethod.LINEAR
    validate: bool = True
    strict: bool = False
    policy: NumericPolicy = field(default_factory=PromotingPolicy)

    def __post_init__(self) -> None:
        self.method = parse_method(self.method)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "InterpConfig":
        """Build a config from LININTERP_METHOD, LININTERP_VALIDATE and LININTERP_STRICT."""
        env = os.environ if environ is None else environ
        config = cls()
        if "LININTERP_METHOD" in env:
            config.method = parse_method(env["LININTERP_METHOD"])
        if "LININTERP_VALIDATE" in env:
            config.validate = _parse_flag("LININTERP_VALIDATE", env["LININTERP_VALIDATE"])
        if "LININTERP_STRICT" in env:
            config.strict = _parse_flag("LININTERP_STRICT", env["LININTERP_STRICT"])
        return config
