from .error import CalcError, ErrorKind
from .memory import Memory
from .safe_eval import evaluate
