# -*- coding: utf-8 -*-
"""
Funciones de parsing HTML para diffviewer.
"""
from genshi.core import Stream
from genshi.input import ET
import html5lib


def parse_html(html, wrapper_element='span'):
    """Parse an HTML fragment into a Genshi stream."""
    builder = html5lib.getTreeBuilder('etree')
    parser = html5lib.HTMLParser(tree=builder, namespaceHTMLElements=False)
    tree = parser.parseFragment(html)
    tree.tag = wrapper_element
    return Stream(list(ET(tree)))
