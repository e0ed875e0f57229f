import html

from telegram.constants import ParseMode

from promathx import scientific
from promathx.safe_eval import evaluate
from promathx.util import get_command_args, command

from .base import format_number


class CalcCommandMixin:
    def __init__(self, bot):
        super().__init__(bot)
        self.help = self.help + (
            '\n'
            '/calc <expression> - evaluate expression\n'
            '/eval <expression> - evaluate expression\n'
            '/sci <expression> - scientific notation\n'
            '\n'
            'operators: + - * / ^ ( )\n'
            'functions: sin cos tan asin acos atan log log10 ln exp'
        )

    @command
    def cmd_calc(self, update, _):
        expr = get_command_args(
            update.effective_message,
            help='usage: /calc <expression>'
        )
        result = evaluate(expr)
        return (
            '<i>%s</i> = <b>%s</b>\n%s' % (
                html.escape(expr),
                format_number(result),
                scientific.format(result, self.precision)
            ),
            True, ParseMode.HTML
        )

    cmd_eval = cmd_calc

    @command
    def cmd_sci(self, update, _):
        expr = get_command_args(
            update.effective_message,
            help='usage: /sci <expression>'
        )
        return scientific.format(evaluate(expr), self.precision)
