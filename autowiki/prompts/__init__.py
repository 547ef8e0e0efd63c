"""Prompt strings for LLM tasks."""

from .define_title import DEFINE_TITLE_PROMPT, build_define_title_prompt

__all__ = ["DEFINE_TITLE_PROMPT", "build_define_title_prompt"]
