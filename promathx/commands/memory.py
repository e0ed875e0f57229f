from promathx.safe_eval import evaluate
from promathx.util import get_command_args, command

from .base import format_number


class MemoryCommandMixin:
    def __init__(self, bot):
        super().__init__(bot)
        self.help = self.help + (
            '\n'
            '/ms <expression> - store result in memory\n'
            '/mr - recall memory\n'
            '/mc - clear memory\n'
        )

    @command
    def cmd_ms(self, update, _):
        expr = get_command_args(
            update.effective_message,
            help='usage: /ms <expression>'
        )
        value = evaluate(expr)
        self.memory.store(value)
        return 'stored %s' % format_number(value)

    @command
    def cmd_mr(self, *_):
        value = self.memory.recall()
        if value is None:
            return 'memory is empty'
        return format_number(value)

    @command
    def cmd_mc(self, *_):
        self.memory.clear()
        return 'memory cleared'
