"""
Prompt construction for provider calls and multi-provider reviews.

All functions here are pure: no I/O and no configuration lookups.
"""

import enum
from typing import Optional


class Focus(str, enum.Enum):
    """What a multi-provider review should concentrate on."""

    ARCHITECTURE = "architecture"
    SECURITY = "security"
    QUALITY = "quality"
    ALL = "all"


DEFAULT_FOCUS = Focus.ALL

FOCUS_PROMPTS = {
    Focus.ARCHITECTURE: "Review for architectural concerns, design patterns, and scalability.",
    Focus.SECURITY: "Review for security vulnerabilities, input validation, and data exposure.",
    Focus.QUALITY: "Review for code quality, best practices, and potential bugs.",
    Focus.ALL: "Provide a comprehensive code review.",
}

CODE_LABEL = "Code:"
TRUNCATION_MARKER = "\n... [truncated {omitted} characters]"


def truncate_code(code: str, max_chars: Optional[int] = None) -> str:
    """
    Cut code context down to at most ``max_chars`` characters.

    Args:
        code: Code context.
        max_chars: Upper bound, or None for no limit.

    Returns:
        The code, with a marker noting how much was dropped if it was cut.
    """
    if max_chars is None or len(code) <= max_chars:
        return code
    omitted = len(code) - max_chars
    return code[:max_chars] + TRUNCATION_MARKER.format(omitted=omitted)


def compose_prompt(prompt: str, code: Optional[str] = None, max_code_chars: Optional[int] = None) -> str:
    """
    Join a prompt and optional code context into the text sent to a provider.

    Args:
        prompt: Instruction text.
        code: Optional code context; empty strings are treated as absent.
        max_code_chars: Optional bound applied to the code context.

    Returns:
        ``prompt`` alone, or ``prompt``, a blank line, and the labelled code.
    """
    if not code:
        return prompt
    return f"{prompt}\n\n{CODE_LABEL}\n{truncate_code(code, max_code_chars)}"


def build_review_prompt(focus: Focus, instruction: str) -> str:
    """
    Build the review prompt one provider receives in a multi-provider review.

    Args:
        focus: Review focus selecting the template prefix.
        instruction: Provider-specific suffix, e.g. "Focus on code quality".

    Returns:
        Template prefix followed by the provider instruction.
    """
    template = FOCUS_PROMPTS[Focus(focus)]
    if not instruction:
        return template
    return f"{template} {instruction}"
