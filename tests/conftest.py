import pytest

from natpl.runtime import Runtime
from natpl.types.name import Name
from natpl.types.state import EvaluationState


@pytest.fixture
def state():
    """Fresh evaluation state with `meter` and `second` declared as units."""
    s = EvaluationState()
    s.declare_unit(Name("meter"))
    s.declare_unit(Name("second"))
    return s


@pytest.fixture
def runtime():
    return Runtime()
