"""Competitor context block for the idea-analysis prompt.

The analysis step embeds this block verbatim in its generation prompt so the
model cites the real competitors by name instead of inventing them.
"""

from idea_scout.types.competitor import Competitor

_RULE = "═" * 71

COMPETITORS_FOUND_HEADER = "REAL COMPETITORS FOUND VIA WEB SEARCH"
COMPETITORS_FOUND_INSTRUCTIONS = """CRITICAL INSTRUCTIONS FOR COMPETITOR ANALYSIS:
1. You MUST reference these actual competitors by name in your analysis
2. Explain specifically how the founder's idea differs from each competitor
3. Assess whether the market is crowded (many competitors) or has room
4. Evaluate if the founder has a competitive advantage vs these companies
5. Be brutally honest: if a competitor already does this well, SAY SO
6. Do NOT make up or hallucinate additional competitors
7. Only reference the companies listed above"""

NO_COMPETITORS_HEADER = "NO SPECIFIC COMPETITORS FOUND"
NO_COMPETITORS_BODY = """Web search found no direct competitors for this idea.

This could mean:
1. It's a blue ocean opportunity (rare but possible)
2. The problem isn't clearly defined enough to search for
3. It's too niche for mainstream search results
4. The search query didn't capture the right keywords

CRITICAL INSTRUCTIONS:
1. Analyze whether "no competitors" is GOOD or BAD in this case
2. Consider: "If this problem was real and big, wouldn't someone have built this?"
3. This could be a red flag (problem not real) or opportunity (blue ocean)
4. Do NOT hallucinate or make up competitors
5. Do NOT assume competitors exist if we didn't find them
6. Mention the lack of competitors as part of your analysis"""


def _section(header: str, body: str) -> str:
    return f"\n\n{_RULE}\n{header}\n{_RULE}\n\n{body}\n\n{_RULE}\n"


def format_competitor_entry(index: int, competitor: Competitor) -> str:
    """Render one numbered competitor entry (1-based)."""
    return (
        f"{index}. {competitor.name}\n"
        f"   Description: {competitor.description}\n"
        f"   Website: {competitor.url}\n"
        f"   Relevance Score: {competitor.relevance_score}/100"
    )


def format_competitor_context(competitors: list[Competitor]) -> str:
    """Build the competitor section of the analysis prompt.

    An empty list renders the "no competitors" section, which asks the model
    to treat absence as a signal rather than a failure.
    """
    if not competitors:
        return _section(NO_COMPETITORS_HEADER, NO_COMPETITORS_BODY)

    entries = "\n\n".join(
        format_competitor_entry(i, competitor) for i, competitor in enumerate(competitors, start=1)
    )
    body = (
        "The following are ACTUAL companies found by searching the web.\n"
        "These are NOT made up - they are real competitors in this space.\n\n"
        f"{entries}\n\n"
        f"{COMPETITORS_FOUND_INSTRUCTIONS}"
    )
    return _section(COMPETITORS_FOUND_HEADER, body)
