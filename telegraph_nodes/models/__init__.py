"""Data models for content nodes, conversion results, pages and accounts."""

from .content_node import ContentNode, ElementNode, NodeKind, TextNode
from .conversion_result import ConversionResult
from .page import Page, PageList, PageViews, UploadResult
from .account import Account

__all__ = [
    'ContentNode',
    'ElementNode',
    'NodeKind',
    'TextNode',
    'ConversionResult',
    'Page',
    'PageList',
    'PageViews',
    'UploadResult',
    'Account',
]
