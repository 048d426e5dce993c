"""Element converters and the default registration list.

``DEFAULT_CONVERTERS`` is the ordered list of converter classes registered by
:class:`revmark.converter.Converter`. Each class declares the element names it
handles in ``tags``; a later entry overrides an earlier one for the same tag.
"""

from revmark.converters.base import BlockConverterBase, ConverterBase
from revmark.converters.blocks import (
    AsideConverter,
    BlockquoteConverter,
    DivConverter,
    HeadingConverter,
    HorizontalRuleConverter,
    LineBreakConverter,
    ParagraphConverter,
)
from revmark.converters.code import CodeConverter, PreConverter
from revmark.converters.fallback import BypassConverter, DropConverter, PassThroughConverter, UnknownTagConverter
from revmark.converters.inline import (
    EmphasisConverter,
    ImageConverter,
    LinkConverter,
    StrikethroughConverter,
    StrongConverter,
)
from revmark.converters.lists import ListConverter, ListItemConverter
from revmark.converters.tables import TableCellConverter, TableConverter, TableRowConverter
from revmark.converters.text import CommentConverter, TextConverter

DEFAULT_CONVERTERS: tuple[type[ConverterBase], ...] = (
    BypassConverter,
    DropConverter,
    ParagraphConverter,
    DivConverter,
    AsideConverter,
    BlockquoteConverter,
    HeadingConverter,
    HorizontalRuleConverter,
    LineBreakConverter,
    ListConverter,
    ListItemConverter,
    PreConverter,
    CodeConverter,
    EmphasisConverter,
    StrongConverter,
    StrikethroughConverter,
    LinkConverter,
    ImageConverter,
    TableConverter,
    TableRowConverter,
    TableCellConverter,
)

__all__ = [
    "DEFAULT_CONVERTERS",
    "AsideConverter",
    "BlockConverterBase",
    "BlockquoteConverter",
    "BypassConverter",
    "CodeConverter",
    "CommentConverter",
    "ConverterBase",
    "DivConverter",
    "DropConverter",
    "EmphasisConverter",
    "HeadingConverter",
    "HorizontalRuleConverter",
    "ImageConverter",
    "LineBreakConverter",
    "LinkConverter",
    "ListConverter",
    "ListItemConverter",
    "ParagraphConverter",
    "PassThroughConverter",
    "PreConverter",
    "StrikethroughConverter",
    "StrongConverter",
    "TableCellConverter",
    "TableConverter",
    "TableRowConverter",
    "TextConverter",
    "UnknownTagConverter",
]
