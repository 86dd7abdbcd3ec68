#!/usr/bin/env python
#-*- coding:utf-8 -*-
##
## __init__.py
##
"""
Set of utilities around the MPS converter.


==================
List of submodules
==================

.. autosummary::
    :nosignatures:

    mps
    ortools
"""

from .mps import read_mps
from .mps import write_mps
