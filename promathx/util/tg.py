import logging
from functools import wraps

from promathx.error import BotError, CalcError, CommandError

from .string import match_command_user, strip_command, trunc


LOGGER = logging.getLogger(__name__)


def get_message_text(message):
    return message.text or message.caption or ''

def get_command_args(msg, help='missing command argument'):
    # pylint: disable=redefined-builtin
    args = strip_command(get_message_text(msg))
    if not args:
        raise CommandError(help)
    return args

async def reply_text(update, msg, quote=False, parse_mode=None):
    if not msg:
        return

    if isinstance(msg, tuple):
        if len(msg) == 2:
            msg, quote = msg
        elif len(msg) == 3:
            msg, quote, parse_mode = msg

    if isinstance(msg, Exception):
        quote = True
        if isinstance(msg, (BotError, CalcError)):
            msg = str(msg)
        else:
            LOGGER.error('reply_text: %r', msg)
            msg = repr(msg)

    await update.effective_message.reply_text(
        trunc(msg),
        do_quote=quote,
        parse_mode=parse_mode
    )


def command(method):
    """Wrap a ``cmd_*`` method into a bot handler.

    The method receives ``(update, context)`` and returns the reply: a
    string, a ``(text, quote)`` or ``(text, quote, parse_mode)`` tuple, or
    ``None`` for no reply. Bot and calculator errors are sent back to the
    user; anything else is reported and re-raised.
    """
    @wraps(method)
    async def ret(self, update, context):
        self.logger.info('command %s', method.__name__)

        message = update.effective_message
        if message is None:
            return
        if (message.text
                and not match_command_user(message.text, context.bot.username)):
            self.logger.info('!match_command_user %s', message.text)
            return

        try:
            res = method(self, update, context)
        except (BotError, CalcError) as ex:
            self.logger.info('%s: %r', method.__name__, ex)
            await reply_text(update, ex)
            return
        except Exception as ex:
            await reply_text(update, ex)
            raise

        if res is None:
            self.logger.info('%s: no reply', method.__name__)
            return
        await reply_text(update, res, True)

    return ret
