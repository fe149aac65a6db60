# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/10 01:16:20

import logging

from .errors import IniError, KeyOutsideSection, StoreNotBound
from .ini import IniDocument, IniParser, IniSection
from .store import IniStore

__all__ = [
    'IniDocument', 'IniSection', 'IniParser', 'IniStore',
    'IniError', 'KeyOutsideSection', 'StoreNotBound'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
