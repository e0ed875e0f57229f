from promathx.util import command


class MiscCommandMixin:
    def __init__(self, bot):
        super().__init__(bot)
        self.help = self.help + (
            '\n'
            '/help - bot help\n'
            '/start - bot help'
        )

    @command
    def cmd_help(self, *_):
        return self.help

    cmd_start = cmd_help
