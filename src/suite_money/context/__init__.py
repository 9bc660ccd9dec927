"""Generic immutable Context model.

A `ContextBuilder` accumulates typed attributes and freezes them into an immutable
`Context` backed by an `AttributeContainer`.
"""

from suite_money.context.attribute_key import AttributeKey
from suite_money.context.attribute_container import AttributeContainer
from suite_money.context.context import Context
from suite_money.context.context_builder import ContextBuilder

__all__ = ["AttributeKey", "AttributeContainer", "Context", "ContextBuilder"]
