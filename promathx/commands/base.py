import logging
from uuid import uuid4

from telegram import InlineQueryResultArticle, InputTextMessageContent
from telegram.constants import ChatType
from telegram.ext import (
    CommandHandler,
    InlineQueryHandler,
    MessageHandler,
    filters
)

from promathx import scientific
from promathx.error import CalcError
from promathx.safe_eval import evaluate
from promathx.util import get_command_name, match_command_user, sanitize_log


class BotCommandBase:
    def __init__(self, bot):
        self.help = 'commands:\n'
        self.logger = logging.getLogger('promathx.commands')
        self.memory = bot.memory
        self.precision = bot.precision

    def get_commands(self):
        return sorted(
            name[4:] for name in dir(self)
            if name.startswith('cmd_') and callable(getattr(self, name))
        )

    def register(self, application):
        names = self.get_commands()
        self.logger.info('register commands: %s', ', '.join(names))
        for name in names:
            application.add_handler(
                CommandHandler(name, getattr(self, 'cmd_' + name))
            )
        application.add_handler(MessageHandler(
            filters.COMMAND,
            self.on_command
        ))
        application.add_handler(InlineQueryHandler(self.inline_query))

    async def on_command(self, update, context):
        msg = update.effective_message
        if msg is None or not msg.text:
            return
        name = get_command_name(msg.text)
        if name is None:
            self.logger.debug('!match command %s', msg.text)
            return
        if not match_command_user(msg.text, context.bot.username):
            return
        if msg.chat.type == ChatType.PRIVATE:
            await msg.reply_text(
                'unknown command "%s"' % sanitize_log(msg.text, True),
                do_quote=True
            )

    async def inline_query(self, update, _):
        query = update.inline_query.query.strip()
        if not query:
            return
        try:
            result = evaluate(query)
        except CalcError as ex:
            self.logger.info('inline_query: %r: %r', query, ex)
            results = []
        else:
            text = '%s = %s' % (query, format_number(result))
            results = [
                InlineQueryResultArticle(
                    id=str(uuid4()),
                    title=format_number(result),
                    description=scientific.format(result, self.precision),
                    input_message_content=InputTextMessageContent(text)
                )
            ]
        await update.inline_query.answer(results)


def format_number(value):
    if float(value).is_integer() and abs(value) < 1e16:
        return '%d' % value
    return repr(float(value))
