"""User prompt for a new page's first definition."""

DEFINE_TITLE_PROMPT: str = "define {title} with a short sentence, no introduction"


def build_define_title_prompt(title: str) -> str:
    return DEFINE_TITLE_PROMPT.format(title=title)
