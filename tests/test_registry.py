"""Tests for the built-in preset registry."""

import logging

import pytest
from model_presets import (
    BUILTIN_REGISTRY,
    GATED_MODE_DENYLIST,
    ResolvedUpgrade,
    UnknownPresetError,
    all_model_presets,
    builtin_model_presets,
    default_model_preset,
    find_model_preset,
    resolve_upgrade,
)

AUTH_MODES = [None, "api_key", "chatgpt"]


class TestCatalogInvariants:
    """The shipped catalog satisfies every construction-time invariant."""

    def test_only_one_default_model_is_configured(self):
        defaults = [preset for preset in all_model_presets() if preset.is_default]
        assert len(defaults) == 1

    def test_default_effort_is_supported(self):
        for preset in all_model_presets():
            assert preset.supports_effort(preset.default_reasoning_effort), preset.id

    def test_ids_are_unique(self):
        ids = [preset.id for preset in all_model_presets()]
        assert len(ids) == len(set(ids))

    def test_upgrade_targets_exist_and_are_current(self):
        for preset in all_model_presets():
            if preset.upgrade is None:
                continue
            target = find_model_preset(preset.upgrade.id)
            assert target is not None, preset.id
            assert target.upgrade is None, preset.id

    def test_catalog_size(self):
        presets = all_model_presets()
        assert len(presets) == 14
        assert sum(1 for preset in presets if preset.is_deprecated) == 3


class TestActivePresets:
    def test_non_gated_drops_only_deprecated(self):
        active = builtin_model_presets()
        expected = [preset for preset in all_model_presets() if preset.upgrade is None]

        assert len(active) == 11
        assert active == expected
        assert active[0].id == "gpt-5.1-codex"
        assert active[0].is_default is True

    def test_gated_mode_drops_denylist(self):
        active = builtin_model_presets("chatgpt")
        ids = [preset.id for preset in active]

        assert len(active) == 9
        assert "o3" not in ids
        assert "o4-mini" not in ids
        assert GATED_MODE_DENYLIST == {"o3", "o4-mini"}

    def test_api_key_mode_keeps_denylisted_presets(self):
        ids = [preset.id for preset in builtin_model_presets("api_key")]
        assert "o3" in ids
        assert "o4-mini" in ids

    @pytest.mark.parametrize("auth_mode", AUTH_MODES)
    def test_never_contains_deprecated(self, auth_mode):
        assert all(preset.upgrade is None for preset in builtin_model_presets(auth_mode))

    @pytest.mark.parametrize("auth_mode", [None, "api_key"])
    def test_gated_is_subset_of_other_modes(self, auth_mode):
        gated = builtin_model_presets("chatgpt")
        other = builtin_model_presets(auth_mode)
        assert all(preset in other for preset in gated)
        # Relative order is preserved.
        assert [p for p in other if p in gated] == gated

    @pytest.mark.parametrize("auth_mode", AUTH_MODES)
    def test_repeated_calls_are_identical(self, auth_mode):
        assert builtin_model_presets(auth_mode) == builtin_model_presets(auth_mode)
        assert all_model_presets() == all_model_presets()

    def test_returned_list_is_a_copy(self):
        active = builtin_model_presets()
        active.clear()
        assert len(builtin_model_presets()) == 11


class TestResolveUpgrade:
    def test_explicit_effort_mapping(self):
        assert resolve_upgrade("gpt-5", "minimal") == ResolvedUpgrade(
            preset_id="gpt-5.1", reasoning_effort="low"
        )

    def test_unmapped_effort_kept_when_supported(self):
        assert resolve_upgrade("gpt-5-codex", "high") == ResolvedUpgrade(
            preset_id="gpt-5.1-codex", reasoning_effort="high"
        )

    def test_unsupported_effort_falls_back_to_target_default(self):
        # gpt-5.1-codex-mini supports only medium and high.
        resolved = resolve_upgrade("gpt-5-codex-mini", "low")
        assert resolved == ResolvedUpgrade(
            preset_id="gpt-5.1-codex-mini", reasoning_effort="medium"
        )

    def test_unknown_preset_returns_none(self):
        assert resolve_upgrade("unknown-id", "medium") is None

    def test_current_preset_is_a_no_op(self):
        assert resolve_upgrade("o3", "medium") == ResolvedUpgrade(
            preset_id="o3", reasoning_effort="medium"
        )

    def test_unknown_effort_is_rejected(self):
        with pytest.raises(ValueError, match="unknown reasoning effort"):
            resolve_upgrade("gpt-5", "extreme")

    def test_resolved_preset_is_active(self):
        for preset in all_model_presets():
            if preset.upgrade is None:
                continue
            resolved = resolve_upgrade(preset.id, preset.default_reasoning_effort)
            assert resolved is not None
            target = find_model_preset(resolved.preset_id)
            assert target in builtin_model_presets()
            assert target.supports_effort(resolved.reasoning_effort)

    def test_logs_the_upgrade(self, caplog):
        with caplog.at_level(logging.INFO, logger="model_presets.registry"):
            resolve_upgrade("gpt-5", "minimal")
        assert "gpt-5.1" in caplog.text

    def test_to_dict(self):
        resolved = resolve_upgrade("gpt-5", "minimal")
        assert resolved.to_dict() == {"presetId": "gpt-5.1", "reasoningEffort": "low"}


class TestLookup:
    def test_find_includes_deprecated(self):
        preset = find_model_preset("gpt-5")
        assert preset is not None
        assert preset.is_deprecated

    def test_find_unknown(self):
        assert find_model_preset("nope") is None

    def test_get_unknown_raises(self):
        with pytest.raises(UnknownPresetError) as excinfo:
            BUILTIN_REGISTRY.get("nope")
        assert excinfo.value.preset_id == "nope"
        assert isinstance(excinfo.value, KeyError)
        assert "nope" in str(excinfo.value)

    def test_contains(self):
        assert "gpt-5.1" in BUILTIN_REGISTRY
        assert "nope" not in BUILTIN_REGISTRY
        assert len(BUILTIN_REGISTRY) == 14

    @pytest.mark.parametrize("auth_mode", AUTH_MODES)
    def test_default_preset(self, auth_mode):
        assert default_model_preset(auth_mode).id == "gpt-5.1-codex"
