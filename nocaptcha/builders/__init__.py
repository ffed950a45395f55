"""
Markup builders - rendering layer

This package contains the builders that turn credentials and caller options
into the HTML attribute string and client script URL of the widget.
"""

from .attributes import AttributeBuilder
from .script import ScriptUrlBuilder

__all__ = [
    "AttributeBuilder",
    "ScriptUrlBuilder",
]
