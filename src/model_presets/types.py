"""Type definitions for model presets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

ReasoningEffort = Literal["minimal", "low", "medium", "high"]
AuthMode = Literal["api_key", "chatgpt"]

# Ordered by increasing deliberation.
REASONING_EFFORTS: tuple[ReasoningEffort, ...] = ("minimal", "low", "medium", "high")

EffortMapping = tuple[tuple[ReasoningEffort, ReasoningEffort], ...]


@dataclass(frozen=True)
class ReasoningEffortPreset:
    """A reasoning effort option that can be surfaced for a model."""

    effort: ReasoningEffort
    description: str

    def to_dict(self) -> dict[str, Any]:
        return {"effort": self.effort, "description": self.description}


@dataclass(frozen=True)
class ModelUpgrade:
    """Points a deprecated preset at the preset that replaces it."""

    id: str
    reasoning_effort_mapping: EffortMapping | None = None

    def mapped_effort(self, effort: ReasoningEffort) -> ReasoningEffort | None:
        if self.reasoning_effort_mapping is None:
            return None
        for source, target in self.reasoning_effort_mapping:
            if source == effort:
                return target
        return None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"id": self.id}
        if self.reasoning_effort_mapping is not None:
            result["reasoningEffortMapping"] = dict(self.reasoning_effort_mapping)
        return result


@dataclass(frozen=True)
class ModelPreset:
    """Metadata describing a supported model.

    ``id`` is the stable identifier persisted in user configuration; ``model``
    is the slug sent to the provider. ``is_default`` marks the preset new users
    start on. A preset with ``upgrade`` set is deprecated.
    """

    id: str
    model: str
    display_name: str
    description: str
    default_reasoning_effort: ReasoningEffort
    supported_reasoning_efforts: tuple[ReasoningEffortPreset, ...]
    is_default: bool = False
    upgrade: ModelUpgrade | None = None

    @property
    def is_deprecated(self) -> bool:
        return self.upgrade is not None

    def supports_effort(self, effort: ReasoningEffort) -> bool:
        return any(option.effort == effort for option in self.supported_reasoning_efforts)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "id": self.id,
            "model": self.model,
            "displayName": self.display_name,
            "description": self.description,
            "defaultReasoningEffort": self.default_reasoning_effort,
            "supportedReasoningEfforts": [
                option.to_dict() for option in self.supported_reasoning_efforts
            ],
            "isDefault": self.is_default,
        }
        if self.upgrade is not None:
            result["upgrade"] = self.upgrade.to_dict()
        return result


@dataclass(frozen=True)
class ResolvedUpgrade:
    preset_id: str
    reasoning_effort: ReasoningEffort

    def to_dict(self) -> dict[str, Any]:
        return {"presetId": self.preset_id, "reasoningEffort": self.reasoning_effort}
