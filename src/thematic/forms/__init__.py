"""
Predicate/expression layer used to express classification rules.

    - Expressions   (utils: attribute access, literals, numeric parse)
    - Predicates    (predicates: comparisons, AND/OR, TRUE)
    - Text output   (cql: CQL rendering)
"""

from . import utils
from . import predicates
from . import cql

from .utils import *
from .predicates import *
from .cql import *
