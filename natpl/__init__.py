# Evaluation core of the natpl unit-aware calculator language.
#
# The parser hands us syntax trees (natpl.syntax); the core classifies each line
# against the session state, evaluates it, and returns an EvalResult or raises
# one of the errors in natpl.errors.
#
# Numbers are decimal.Decimal throughout; binary floats never enter the core.

import logging
from decimal import Decimal

# Magnitude alias used in annotations across the package
Magnitude = Decimal

# Library logging stays silent unless the host application configures it
logging.getLogger(__name__).addHandler(logging.NullHandler())
