from natpl.types.name import Name
from natpl.types.unit import Unit
from natpl.types.value import Value, Number, FunctionRef, ValueKind
