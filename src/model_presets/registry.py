"""Preset registry: validated catalog, active-preset filtering and upgrades.

Example::

    from model_presets import builtin_model_presets, resolve_upgrade

    menu = builtin_model_presets("chatgpt")
    resolved = resolve_upgrade("gpt-5", "minimal")
    # ResolvedUpgrade(preset_id="gpt-5.1", reasoning_effort="low")
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from types import MappingProxyType
from typing import Any

import yaml

from .catalog import BUILTIN_PRESETS
from .types import (
    REASONING_EFFORTS,
    AuthMode,
    ModelPreset,
    ReasoningEffort,
    ResolvedUpgrade,
)

logger = logging.getLogger(__name__)

# Presets not offered when signed in with a ChatGPT account.
GATED_MODE_DENYLIST: frozenset[str] = frozenset({"o3", "o4-mini"})

_GATED_AUTH_MODE: AuthMode = "chatgpt"

# ── Errors ────────────────────────────────────────────────────────────────────


class PresetCatalogError(Exception):
    """Raised when preset definitions break a catalog invariant."""

    def __init__(self, problems: list[str]):
        super().__init__("invalid model preset catalog: " + "; ".join(problems))
        self.problems = problems


class UnknownPresetError(KeyError):
    """Raised by strict lookups for a preset id that is not in the catalog."""

    def __init__(self, preset_id: str):
        super().__init__(preset_id)
        self.preset_id = preset_id

    def __str__(self) -> str:
        return f"unknown model preset: {self.preset_id!r}"


# ── Validation ────────────────────────────────────────────────────────────────


def _catalog_problems(
    presets: tuple[ModelPreset, ...], gated_denylist: frozenset[str]
) -> list[str]:
    problems: list[str] = []
    by_id: dict[str, ModelPreset] = {}

    for preset in presets:
        if preset.id in by_id:
            problems.append(f"duplicate preset id {preset.id!r}")
        else:
            by_id[preset.id] = preset

    defaults = [preset.id for preset in presets if preset.is_default]
    if len(defaults) != 1:
        problems.append(f"expected exactly one default preset, found {len(defaults)}: {defaults}")

    for preset in presets:
        efforts = [option.effort for option in preset.supported_reasoning_efforts]
        if not efforts:
            problems.append(f"{preset.id!r} supports no reasoning efforts")
        if len(set(efforts)) != len(efforts):
            problems.append(f"{preset.id!r} lists a reasoning effort more than once")
        unknown = [effort for effort in efforts if effort not in REASONING_EFFORTS]
        if unknown:
            problems.append(f"{preset.id!r} lists unknown reasoning efforts {unknown}")
        if preset.default_reasoning_effort not in efforts:
            problems.append(
                f"{preset.id!r} default effort {preset.default_reasoning_effort!r} "
                "is not a supported effort"
            )

        upgrade = preset.upgrade
        if upgrade is None:
            continue
        target = by_id.get(upgrade.id)
        if upgrade.id == preset.id:
            problems.append(f"{preset.id!r} upgrades to itself")
            continue
        if target is None:
            problems.append(f"{preset.id!r} upgrades to unknown preset {upgrade.id!r}")
            continue
        if target.upgrade is not None:
            problems.append(
                f"{preset.id!r} upgrades to {target.id!r}, which is itself deprecated"
            )
        if upgrade.reasoning_effort_mapping is not None:
            sources = [source for source, _ in upgrade.reasoning_effort_mapping]
            if len(set(sources)) != len(sources):
                problems.append(f"{preset.id!r} upgrade maps an effort more than once")
            unknown = [source for source in sources if source not in REASONING_EFFORTS]
            if unknown:
                problems.append(f"{preset.id!r} upgrade maps unknown reasoning efforts {unknown}")
            for source, mapped in upgrade.reasoning_effort_mapping:
                if not target.supports_effort(mapped):
                    problems.append(
                        f"{preset.id!r} upgrade maps {source!r} to {mapped!r}, "
                        f"which {target.id!r} does not support"
                    )

    current = [preset for preset in presets if preset.upgrade is None]
    if not current:
        problems.append("no preset is offered for new selection")
    elif all(preset.id in gated_denylist for preset in current):
        problems.append(f"gated denylist {sorted(gated_denylist)} hides every current preset")

    return problems


# ── Registry ──────────────────────────────────────────────────────────────────


class PresetRegistry:
    """Immutable, validated collection of model presets.

    Construction checks every catalog invariant and raises
    :class:`PresetCatalogError` on the first build with a bad definition, so a
    broken catalog never reaches callers. After that every method is a pure
    read and safe to share between threads.
    """

    def __init__(
        self,
        presets: Iterable[ModelPreset],
        *,
        gated_denylist: Iterable[str] = GATED_MODE_DENYLIST,
    ) -> None:
        if isinstance(gated_denylist, str):
            raise TypeError("gated_denylist must be a collection of preset ids, not a str")
        self._presets = tuple(presets)
        self._gated_denylist = frozenset(gated_denylist)
        problems = _catalog_problems(self._presets, self._gated_denylist)
        if problems:
            raise PresetCatalogError(problems)
        self._by_id = MappingProxyType({preset.id: preset for preset in self._presets})
        logger.debug(
            "Built model preset registry with %d presets (%d deprecated)",
            len(self._presets),
            sum(1 for preset in self._presets if preset.is_deprecated),
        )

    def __len__(self) -> int:
        return len(self._presets)

    def __contains__(self, preset_id: object) -> bool:
        return preset_id in self._by_id

    @property
    def gated_denylist(self) -> frozenset[str]:
        return self._gated_denylist

    def all_presets(self) -> tuple[ModelPreset, ...]:
        """Return every preset in catalog order, deprecated ones included."""
        return self._presets

    def active_presets(self, auth_mode: AuthMode | None = None) -> list[ModelPreset]:
        """Return the presets to offer for new selection under ``auth_mode``.

        Deprecated presets are always dropped. In ChatGPT mode the gated
        denylist is dropped as well. Catalog order is kept.
        """
        gated = auth_mode == _GATED_AUTH_MODE
        active: list[ModelPreset] = []
        for preset in self._presets:
            if preset.upgrade is not None:
                continue
            if gated and preset.id in self._gated_denylist:
                logger.debug("Hiding preset %s in %s auth mode", preset.id, auth_mode)
                continue
            active.append(preset)
        return active

    def find(self, preset_id: str) -> ModelPreset | None:
        return self._by_id.get(preset_id)

    def get(self, preset_id: str) -> ModelPreset:
        preset = self._by_id.get(preset_id)
        if preset is None:
            raise UnknownPresetError(preset_id)
        return preset

    def default_preset(self, auth_mode: AuthMode | None = None) -> ModelPreset:
        """Return the preset a host should pre-select.

        Falls back to the first active preset when the default is hidden for
        ``auth_mode``.
        """
        active = self.active_presets(auth_mode)
        for preset in active:
            if preset.is_default:
                return preset
        return active[0]

    def resolve_upgrade(
        self, preset_id: str, previous_effort: ReasoningEffort
    ) -> ResolvedUpgrade | None:
        """Map a stored preset/effort pair onto its replacement.

        Returns ``None`` when ``preset_id`` is unknown. A preset that is not
        deprecated resolves to itself with the effort unchanged.
        """
        if previous_effort not in REASONING_EFFORTS:
            raise ValueError(f"unknown reasoning effort: {previous_effort!r}")

        preset = self._by_id.get(preset_id)
        if preset is None:
            return None
        upgrade = preset.upgrade
        if upgrade is None:
            return ResolvedUpgrade(preset_id=preset.id, reasoning_effort=previous_effort)

        target = self._by_id[upgrade.id]
        if target.upgrade is not None:
            raise PresetCatalogError(
                [f"{preset.id!r} upgrades to {target.id!r}, which is itself deprecated"]
            )

        effort = upgrade.mapped_effort(previous_effort)
        if effort is None:
            if target.supports_effort(previous_effort):
                effort = previous_effort
            else:
                effort = target.default_reasoning_effort

        logger.info(
            "Upgrading model preset %s (%s) to %s (%s)",
            preset.id,
            previous_effort,
            target.id,
            effort,
        )
        return ResolvedUpgrade(preset_id=target.id, reasoning_effort=effort)

    def to_dict(
        self, auth_mode: AuthMode | None = None, *, include_deprecated: bool = False
    ) -> dict[str, Any]:
        presets = self._presets if include_deprecated else self.active_presets(auth_mode)
        default = self.default_preset(auth_mode)
        return {
            "defaultPreset": default.id,
            "presets": [preset.to_dict() for preset in presets],
        }

    def to_yaml(
        self, auth_mode: AuthMode | None = None, *, include_deprecated: bool = False
    ) -> str:
        """Serialize the presets offered under ``auth_mode`` to a YAML string."""
        return yaml.dump(
            self.to_dict(auth_mode, include_deprecated=include_deprecated),
            default_flow_style=False,
            sort_keys=False,
        )


# Built at import; the module lock makes this a one-time initialization.
BUILTIN_REGISTRY = PresetRegistry(BUILTIN_PRESETS)


def all_model_presets() -> tuple[ModelPreset, ...]:
    """Return the full built-in catalog, deprecated presets included."""
    return BUILTIN_REGISTRY.all_presets()


def builtin_model_presets(auth_mode: AuthMode | None = None) -> list[ModelPreset]:
    """Return the built-in presets offered for new selection under ``auth_mode``."""
    return BUILTIN_REGISTRY.active_presets(auth_mode)


def find_model_preset(preset_id: str) -> ModelPreset | None:
    return BUILTIN_REGISTRY.find(preset_id)


def default_model_preset(auth_mode: AuthMode | None = None) -> ModelPreset:
    return BUILTIN_REGISTRY.default_preset(auth_mode)


def resolve_upgrade(preset_id: str, previous_effort: ReasoningEffort) -> ResolvedUpgrade | None:
    """Resolve a stored built-in preset/effort pair to its current replacement."""
    return BUILTIN_REGISTRY.resolve_upgrade(preset_id, previous_effort)
