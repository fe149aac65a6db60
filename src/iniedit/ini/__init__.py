# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/10 01:16:53

from .lines import Blank, Comment, KeyValue, SectionHeader, classify
from .model import IniDocument, IniSection
from .parser import IniParser

__all__ = [
    'Blank', 'Comment', 'KeyValue', 'SectionHeader', 'classify',
    'IniDocument', 'IniSection', 'IniParser'
]
