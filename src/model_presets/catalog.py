"""Built-in model preset definitions.

Order matters: it is the order presets are offered in, and the entry with
``is_default=True`` is the one pre-selected for new users. Deprecated presets
sit at the end and are only kept so stale configuration can be upgraded.
"""

from __future__ import annotations

from .types import ModelPreset, ModelUpgrade, ReasoningEffortPreset

# ── Shared effort options ────────────────────────────────────────────────────

_CODEX_LOW = ReasoningEffortPreset("low", "Fastest responses with limited reasoning")
_CODEX_MEDIUM = ReasoningEffortPreset("medium", "Dynamically adjusts reasoning based on the task")
_DEEP_HIGH = ReasoningEffortPreset(
    "high", "Maximizes reasoning depth for complex or ambiguous problems"
)
_GENERAL_LOW = ReasoningEffortPreset(
    "low",
    "Balances speed with some reasoning; useful for straightforward queries and short explanations",
)
_GENERAL_MEDIUM = ReasoningEffortPreset(
    "medium",
    "Provides a solid balance of reasoning depth and latency for general-purpose tasks",
)

_CODEX_EFFORTS = (_CODEX_LOW, _CODEX_MEDIUM, _DEEP_HIGH)
_CODEX_MINI_EFFORTS = (_CODEX_MEDIUM, _DEEP_HIGH)

# ── Presets ──────────────────────────────────────────────────────────────────

BUILTIN_PRESETS: tuple[ModelPreset, ...] = (
    ModelPreset(
        id="gpt-5.1-codex",
        model="gpt-5.1-codex",
        display_name="gpt-5.1-codex",
        description="Optimized for codex.",
        default_reasoning_effort="medium",
        supported_reasoning_efforts=_CODEX_EFFORTS,
        is_default=True,
    ),
    ModelPreset(
        id="gpt-5.1-codex-mini",
        model="gpt-5.1-codex-mini",
        display_name="gpt-5.1-codex-mini",
        description="Optimized for codex. Cheaper, faster, but less capable.",
        default_reasoning_effort="medium",
        supported_reasoning_efforts=_CODEX_MINI_EFFORTS,
    ),
    ModelPreset(
        id="gpt-5.1",
        model="gpt-5.1",
        display_name="gpt-5.1",
        description="Broad world knowledge with strong general reasoning.",
        default_reasoning_effort="medium",
        supported_reasoning_efforts=(_GENERAL_LOW, _GENERAL_MEDIUM, _DEEP_HIGH),
    ),
    ModelPreset(
        id="o4-mini",
        model="o4-mini",
        display_name="o4-mini",
        description="OpenAI's fast agentic model (default for most CLI sessions).",
        default_reasoning_effort="medium",
        supported_reasoning_efforts=(
            ReasoningEffortPreset("minimal", "Fastest hand-offs with minimal deliberation"),
            ReasoningEffortPreset("low", "Balances speed with solid lightweight reasoning"),
            ReasoningEffortPreset("medium", "Great general-purpose autonomy"),
            ReasoningEffortPreset("high", "Max reasoning depth for tricky refactors"),
        ),
    ),
    ModelPreset(
        id="o3",
        model="o3",
        display_name="o3",
        description="OpenAI's long-context reasoning model.",
        default_reasoning_effort="high",
        supported_reasoning_efforts=(
            ReasoningEffortPreset("medium", "Balanced output quality for large files"),
            ReasoningEffortPreset("high", "Full-depth reasoning for complex audits"),
        ),
    ),
    ModelPreset(
        id="gemini-2-5-pro-preview-03-25",
        model="gemini-2.5-pro-preview-03-25",
        display_name="Gemini 2.5 Pro (Preview)",
        description="Google Gemini's most capable public model via OpenAI-compatible API.",
        default_reasoning_effort="medium",
        supported_reasoning_efforts=(
            ReasoningEffortPreset("minimal", "Prioritize latency when drafting or ideating"),
            ReasoningEffortPreset("low", "Balanced option for everyday coding help"),
            ReasoningEffortPreset("medium", "Extra deliberation for multi-step plans"),
            ReasoningEffortPreset("high", "Deep dives when troubleshooting tough bugs"),
        ),
    ),
    ModelPreset(
        id="gemini-2-0-flash",
        model="gemini-2.0-flash",
        display_name="Gemini 2.0 Flash",
        description="Fast Gemini model for quick iterations and reviews.",
        default_reasoning_effort="low",
        supported_reasoning_efforts=(
            ReasoningEffortPreset("minimal", "Ultra-fast responses for simple edits"),
            ReasoningEffortPreset("low", "Use when you want quick summaries or reviews"),
            ReasoningEffortPreset("medium", "Adds deliberation while staying responsive"),
        ),
    ),
    ModelPreset(
        id="openrouter-polaris-alpha",
        model="openrouter/polaris-alpha",
        display_name="Polaris Alpha (OpenRouter)",
        description="Community-favorite reasoning model hosted via OpenRouter.",
        default_reasoning_effort="medium",
        supported_reasoning_efforts=(
            ReasoningEffortPreset("minimal", "Quick rough drafts or shell plans"),
            ReasoningEffortPreset("low", "Everyday work with solid stability"),
            ReasoningEffortPreset("medium", "Recommended for longer coding sessions"),
            ReasoningEffortPreset("high", "Dig deep into gnarly issues (slower/pricey)"),
        ),
    ),
    ModelPreset(
        id="moonshotai-kimi-linear-48b-a3b-instruct",
        model="moonshotai/kimi-linear-48b-a3b-instruct",
        display_name="Kimi Linear 48B (OpenRouter)",
        description="Moonshot's linear-algebra-focused instruct model via OpenRouter.",
        default_reasoning_effort="medium",
        supported_reasoning_efforts=(
            ReasoningEffortPreset("minimal", "Tight latency for small patches"),
            ReasoningEffortPreset("low", "Adds reasoning for testing or refactors"),
            ReasoningEffortPreset("medium", "Best overall mix of reasoning and speed"),
        ),
    ),
    ModelPreset(
        id="grok-code-fast-1",
        model="grok-code-fast-1",
        display_name="Grok Code Fast 1 (xAI)",
        description="xAI's streamlined Grok variant tuned for coding throughput.",
        default_reasoning_effort="low",
        supported_reasoning_efforts=(
            ReasoningEffortPreset("minimal", "Extremely fast single-file edits"),
            ReasoningEffortPreset("low", "Recommended default for day-to-day work"),
            ReasoningEffortPreset("medium", "Adds deliberation for multi-step plans"),
        ),
    ),
    ModelPreset(
        id="grok-4-fast-reasoning",
        model="grok-4-fast-reasoning",
        display_name="Grok 4 Fast Reasoning (xAI)",
        description="Structured-output capable Grok model that excels at document extraction.",
        default_reasoning_effort="medium",
        supported_reasoning_efforts=(
            ReasoningEffortPreset("low", "Keep latency low while parsing reports"),
            ReasoningEffortPreset("medium", "Best balance for long-lived autonomy"),
            ReasoningEffortPreset("high", "Maximum reasoning depth when accuracy matters most"),
        ),
    ),
    # Deprecated models.
    ModelPreset(
        id="gpt-5-codex",
        model="gpt-5-codex",
        display_name="gpt-5-codex",
        description="Optimized for codex.",
        default_reasoning_effort="medium",
        supported_reasoning_efforts=_CODEX_EFFORTS,
        upgrade=ModelUpgrade(id="gpt-5.1-codex"),
    ),
    ModelPreset(
        id="gpt-5-codex-mini",
        model="gpt-5-codex-mini",
        display_name="gpt-5-codex-mini",
        description="Optimized for codex. Cheaper, faster, but less capable.",
        default_reasoning_effort="medium",
        supported_reasoning_efforts=_CODEX_MINI_EFFORTS,
        upgrade=ModelUpgrade(id="gpt-5.1-codex-mini"),
    ),
    ModelPreset(
        id="gpt-5",
        model="gpt-5",
        display_name="gpt-5",
        description="Broad world knowledge with strong general reasoning.",
        default_reasoning_effort="medium",
        supported_reasoning_efforts=(
            ReasoningEffortPreset("minimal", "Fastest responses with little reasoning"),
            _GENERAL_LOW,
            _GENERAL_MEDIUM,
            _DEEP_HIGH,
        ),
        # gpt-5.1 dropped "minimal".
        upgrade=ModelUpgrade(id="gpt-5.1", reasoning_effort_mapping=(("minimal", "low"),)),
    ),
)
