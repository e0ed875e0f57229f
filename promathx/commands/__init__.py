from .base import BotCommandBase
from .calc import CalcCommandMixin
from .memory import MemoryCommandMixin
from .misc import MiscCommandMixin


class BotCommands(MiscCommandMixin, MemoryCommandMixin, CalcCommandMixin,
                  BotCommandBase):
    pass
