# -*- coding: utf-8 -*-
from .redesigner import LogicPromptRedesigner, PromptRedesigner
from .suggester import ComponentSuggester, UtilitySuggester

__all__ = [
    "ComponentSuggester",
    "LogicPromptRedesigner",
    "PromptRedesigner",
    "UtilitySuggester",
]
