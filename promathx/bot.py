import logging

from telegram.ext import Application

from .commands import BotCommands
from .memory import Memory
from .util import sanitize_log


class Bot:
    LOG_FORMAT = '[%(asctime).19s] [%(name)s] [%(levelname)s] %(message)s'

    def __init__(self, token, memory=None, proxy=None, precision=6):
        if not token:
            raise ValueError('no token')

        self.logger = logging.getLogger('promathx.bot')
        self.logger.info(
            'init: proxy=%s precision=%s', proxy, precision
        )

        self.token = token.strip()
        self.proxy = proxy.strip() if proxy is not None else None
        self.memory = memory if memory is not None else Memory()
        self.precision = precision

        builder = Application.builder().token(self.token)
        if self.proxy:
            builder = builder.proxy(self.proxy).get_updates_proxy(self.proxy)
        self.application = builder.build()

        self.commands = BotCommands(self)
        self.commands.register(self.application)
        self.application.add_error_handler(self.on_error)

    def start_polling(self, interval=0.0):
        self.logger.info('start_polling %f', interval)
        self.application.run_polling(poll_interval=interval)
        self.logger.info('stopped')

    async def on_error(self, update, context):
        text = None
        if update is not None and getattr(update, 'effective_message', None):
            text = sanitize_log(update.effective_message.text or '', True)
        self.logger.error(
            'update "%s" caused error "%r"', text, context.error
        )
