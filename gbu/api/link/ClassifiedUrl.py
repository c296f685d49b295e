"""Classified URL dataclass (UNO: single model)."""

from dataclasses import dataclass

from .Category import Category


@dataclass(frozen=True)
class ClassifiedUrl:
    """A caller-supplied URL and the category derived from its scheme and host."""

    url: str
    category: Category
