"""Built-in model presets: catalog, active selection and upgrade resolution."""

from .registry import (
    BUILTIN_REGISTRY,
    GATED_MODE_DENYLIST,
    PresetCatalogError,
    PresetRegistry,
    UnknownPresetError,
    all_model_presets,
    builtin_model_presets,
    default_model_preset,
    find_model_preset,
    resolve_upgrade,
)
from .types import (
    REASONING_EFFORTS,
    AuthMode,
    ModelPreset,
    ModelUpgrade,
    ReasoningEffort,
    ReasoningEffortPreset,
    ResolvedUpgrade,
)

__all__ = [
    "all_model_presets",
    "builtin_model_presets",
    "default_model_preset",
    "find_model_preset",
    "resolve_upgrade",
    "BUILTIN_REGISTRY",
    "GATED_MODE_DENYLIST",
    "PresetRegistry",
    "PresetCatalogError",
    "UnknownPresetError",
    "REASONING_EFFORTS",
    "AuthMode",
    "ModelPreset",
    "ModelUpgrade",
    "ReasoningEffort",
    "ReasoningEffortPreset",
    "ResolvedUpgrade",
]
