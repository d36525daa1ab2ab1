from __future__ import annotations

import codecs
import os
from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, Mapping, Optional

from ..utils.logging import env_truthy

ENV_STORAGE_ROOT = "TEXTPEEK_STORAGE_ROOT"
ENV_STRICT_READ = "TEXTPEEK_STRICT_READ"
ENV_ENCODING = "TEXTPEEK_ENCODING"


@dataclass(frozen=True)
class SettingsConfig:
    """Typed runtime settings resolved at startup."""

    storage_root: str = "."
    strict_read: bool = False
    encoding: str = "utf-8"
    toast_duration_ms: int = 4000


class SettingsVM:
    """Keeps app settings state and validation, no I/O here."""

    def __init__(self, *, config: Optional[SettingsConfig] = None) -> None:
        self.config = config or SettingsConfig()

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SettingsVM":
        env = os.environ if environ is None else environ
        vm = cls()
        payload: Dict[str, Any] = {}
        if env.get(ENV_STORAGE_ROOT):
            payload["storage_root"] = env[ENV_STORAGE_ROOT]
        if ENV_STRICT_READ in env:
            payload["strict_read"] = env_truthy(env.get(ENV_STRICT_READ))
        if env.get(ENV_ENCODING):
            payload["encoding"] = env[ENV_ENCODING]
        vm.apply_dict(payload)
        return vm

    # ------------------------------------------------------------------
    # Properties bridging to the typed config
    # ------------------------------------------------------------------
    @property
    def storage_root(self) -> str:
        return self.config.storage_root

    @property
    def strict_read(self) -> bool:
        return self.config.strict_read

    @property
    def encoding(self) -> str:
        return self.config.encoding

    @property
    def toast_duration_ms(self) -> int:
        return self.config.toast_duration_ms

    # ------------------------------------------------------------------
    def apply_dict(self, payload: Mapping[str, Any]) -> None:
        """Validate and apply a partial settings mapping; unknown keys are ignored."""
        updates: Dict[str, Any] = {}
        if "storage_root" in payload:
            updates["storage_root"] = self._coerce_dir(payload["storage_root"])
        if "strict_read" in payload:
            updates["strict_read"] = self._coerce_bool(payload["strict_read"])
        if "encoding" in payload:
            updates["encoding"] = self._coerce_encoding(payload["encoding"])
        if "toast_duration_ms" in payload:
            updates["toast_duration_ms"] = self._coerce_int("toast_duration_ms", payload["toast_duration_ms"])
        if updates:
            self.config = replace(self.config, **updates)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self.config)

    # ------------------------------------------------------------------
    # Coercion helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _coerce_dir(value: Any) -> str:
        text = str(value or "").strip()
        return text or "."

    @staticmethod
    def _coerce_bool(value: Any) -> bool:
        if isinstance(value, str):
            return env_truthy(value)
        return bool(value)

    @staticmethod
    def _coerce_encoding(value: Any) -> str:
        text = str(value or "").strip()
        if not text:
            raise ValueError("encoding must not be empty")
        try:
            codecs.lookup(text)
        except LookupError:
            raise ValueError(f"Unknown text encoding: {text}")
        return text

    @staticmethod
    def _coerce_int(name: str, value: Any) -> int:
        try:
            number = int(value)
        except (TypeError, ValueError):
            raise ValueError(f"{name} must be an integer")
        if number <= 0:
            raise ValueError(f"{name} must be positive")
        return number
