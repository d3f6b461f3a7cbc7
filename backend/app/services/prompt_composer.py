"""
Prompt composition for draft generation and refinement.

``compose_prompt`` is a pure function: identical inputs always produce the
identical string, with no clock, randomness or I/O involved.
"""
from __future__ import annotations

from ..schemas.brief import AssetType, Brief

EMPTY_PLACEHOLDER = "None"

ASSET_REQUIREMENTS = (
    "Asset requirements:\n"
    "- White Paper: executive summary, problem framing, trends, recommended approach, "
    "implementation considerations, objections/FAQ, CTA.\n"
    "- Comparison Guide: evaluation criteria table, narrative comparison by criteria, "
    "tradeoffs/risks, “when to choose us”, CTA.\n"
    "- Sponsored Blog Post: strong hook, practical guidance, subtle product tie-in, CTA."
)

GUARDRAILS = (
    "Rules:\n"
    "- Do NOT invent customer names, quotes, awards, certifications, or statistics.\n"
    "- If you mention market stats, label them “needs verification” unless provided above.\n"
    "- Output Markdown with headings, bullets, short paragraphs.\n"
    "- End with “Compliance & Verification Checklist”."
)

# Canned revision instructions behind the studio's quick-refinement buttons
QUICK_REFINEMENTS: dict[str, str] = {
    "more_technical": "Make it more technical and add implementation steps.",
    "shorter": "Shorten by about 35% while keeping structure and CTA.",
    "less_salesy": "Make it more consultative and less salesy; reduce hype.",
    "add_faq": "Add an objections/FAQ section with 6 Q&As.",
}


def _or_placeholder(value: str) -> str:
    # only an empty string is replaced; whitespace is restated as typed
    return value or EMPTY_PLACEHOLDER


def _brief_block(brief: Brief) -> str:
    lines = [
        "Brief:",
        f"- Audience: {brief.audience}",
        f"- Industry: {brief.industry}",
        f"- Product/Solution: {brief.solution}",
        f"- Differentiators/Proof points: {brief.differentiators}",
        f"- Competitors (if any): {_or_placeholder(brief.competitors)}",
        f"- Tone: {brief.tone}",
        f"- CTA: {brief.cta}",
        f"- Extra notes: {_or_placeholder(brief.notes)}",
    ]
    return "\n".join(lines)


def compose_prompt(
    asset_type: AssetType | str,
    brief: Brief,
    prior_draft: str | None = None,
    revision_instruction: str | None = None,
) -> str:
    """
    Build the user instruction sent to the model.

    Order: asset header, brief restatement, per-asset structural
    requirements, guardrails, then (when revising) the prior draft fenced by
    ``---`` and the revision instruction line.
    """
    asset = AssetType.parse(asset_type)

    draft_block = f"Prior draft to revise:\n---\n{prior_draft}\n---\n" if prior_draft else ""
    instruction_line = f"Revision instruction: {revision_instruction}" if revision_instruction else ""

    prompt = (
        f"\nCreate a {asset.value}.\n\n"
        f"{_brief_block(brief)}\n\n"
        f"{ASSET_REQUIREMENTS}\n\n"
        f"{GUARDRAILS}\n\n"
        f"{draft_block}\n"
        f"{instruction_line}\n"
    )
    return prompt.strip()


def refinement_instruction(action: str) -> str:
    try:
        return QUICK_REFINEMENTS[action]
    except KeyError:
        raise ValueError(
            f"Unknown refinement '{action}'; expected one of {sorted(QUICK_REFINEMENTS)}"
        ) from None
