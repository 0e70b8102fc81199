"""Typed application settings parsed from the ``[greeting]`` and ``[demo]`` sections.

Pydantic validates the raw layered configuration once at the boundary; the
rest of the package works with frozen models.

Contents:
    * :class:`GreetingSettings` - default name for ``greet`` and ``demo``.
    * :class:`DemoSettings` - operands used by ``demo``.
    * :class:`AppSettings` - aggregate of both sections.
    * :func:`load_app_settings` - build :class:`AppSettings` from a Config.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, cast

from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from greetcalc.application.usecases import DEMO_OPERANDS
from greetcalc.domain.behaviors import DEFAULT_NAME
from greetcalc.domain.errors import ConfigurationError


class GreetingSettings(BaseModel):
    """Validated ``[greeting]`` section.

    Example:
        >>> GreetingSettings().name
        'World'
        >>> GreetingSettings(name=42).name
        '42'
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = DEFAULT_NAME

    @field_validator("name", mode="before")
    @classmethod
    def _coerce_scalar_to_text(cls, v: Any) -> Any:
        """Accept numbers from ``--set`` or environment variables as text."""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v


class DemoSettings(BaseModel):
    """Validated ``[demo]`` section.

    Integral values stay ``int`` so ``5 + 10`` prints ``15`` rather than ``15.0``.
    NaN and infinities are rejected.

    Example:
        >>> DemoSettings().a, DemoSettings().b
        (5, 10)
        >>> DemoSettings(a="2.5").a
        2.5
    """

    model_config = ConfigDict(frozen=True, extra="ignore", allow_inf_nan=False)

    a: int | float = DEMO_OPERANDS[0]
    b: int | float = DEMO_OPERANDS[1]

    @field_validator("a", "b", mode="before")
    @classmethod
    def _reject_booleans(cls, v: Any) -> Any:
        if isinstance(v, bool):
            raise ValueError("expected a number, got a boolean")
        return v


class AppSettings(BaseModel):
    """Aggregate of all application sections."""

    model_config = ConfigDict(frozen=True)

    greeting: GreetingSettings = Field(default_factory=GreetingSettings)
    demo: DemoSettings = Field(default_factory=DemoSettings)


def _section(config: Config, key: str) -> Mapping[str, Any]:
    raw: object = config.get(key, default={})
    if not raw:
        return {}
    if not isinstance(raw, Mapping):
        raise ConfigurationError(f"[{key}] must be a table, got {type(raw).__name__}")
    return cast("Mapping[str, Any]", raw)


def load_app_settings(config: Config) -> AppSettings:
    """Parse the application sections of ``config``.

    Missing sections or keys fall back to the built-in defaults.

    Raises:
        ConfigurationError: If a section is not a table or a value has the
            wrong type.

    Example:
        >>> settings = load_app_settings(Config({"demo": {"a": 1}}, {}))
        >>> settings.demo.a, settings.demo.b, settings.greeting.name
        (1, 10, 'World')
    """
    try:
        return AppSettings.model_validate(
            {"greeting": dict(_section(config, "greeting")), "demo": dict(_section(config, "demo"))}
        )
    except ValidationError as exc:
        details = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        raise ConfigurationError(f"Invalid configuration: {details}") from exc


__all__ = [
    "AppSettings",
    "DemoSettings",
    "GreetingSettings",
    "load_app_settings",
]
