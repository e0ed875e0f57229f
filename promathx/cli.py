import os
import sys
import logging
from argparse import ArgumentParser

from . import scientific
from .error import CalcError
from .bot import Bot
from .memory import Memory
from .safe_eval import evaluate
from .server import DEFAULT_PORT, create_app
from .util import read_token, configure_logger


def get_default_port():
    try:
        return int(os.environ.get('PORT', DEFAULT_PORT))
    except ValueError:
        return DEFAULT_PORT

def add_precision_argument(parser):
    parser.add_argument(
        '-p', '--precision',
        type=int, default=6,
        help='scientific notation precision (default: %(default)s)'
    )


def create_arg_parser():
    parser = ArgumentParser(prog='promathx')
    parser.add_argument(
        '-l', '--log-level',
        default='info',
        choices=('critical', 'error', 'warning', 'info', 'debug'),
        help='log level (default: %(default)s)'
    )
    parser.add_argument(
        '-L', '--log-file',
        default=None,
        help='also write log messages to this file'
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    parser_eval = subparsers.add_parser('eval', help='evaluate expression')
    parser_eval.add_argument('expression', help='expression')
    add_precision_argument(parser_eval)

    parser_serve = subparsers.add_parser('serve', help='run HTTP API')
    parser_serve.add_argument(
        '-H', '--host',
        default='0.0.0.0',
        help='host (default: %(default)s)'
    )
    parser_serve.add_argument(
        '-P', '--port',
        type=int, default=get_default_port(),
        help='port (default: $PORT or %d)' % DEFAULT_PORT
    )
    parser_serve.add_argument(
        '-d', '--debug',
        action='store_true',
        help='debug mode'
    )

    parser_bot = subparsers.add_parser('bot', help='run telegram bot')
    parser_bot.add_argument(
        '-P', '--poll',
        type=float, default=0.0,
        help='polling interval in seconds (default: %(default)s)'
    )
    parser_bot.add_argument(
        '--proxy',
        default='none',
        help='proxy, e.g. socks5://127.0.0.1:9050/ (default: %(default)s)'
    )
    parser_bot.add_argument(
        'token',
        metavar='TOKEN_OR_FILE',
        help='bot token or token file'
    )
    add_precision_argument(parser_bot)
    return parser


def run_eval(args):
    try:
        result = evaluate(args.expression)
    except CalcError as ex:
        print('error: %s' % ex, file=sys.stderr)
        return 1
    print(result)
    print(scientific.format(result, args.precision))
    return 0

def run_serve(args):
    app = create_app(Memory(), debug=args.debug)
    app.run(host=args.host, port=args.port)
    return 0

def run_bot(args):
    proxy = args.proxy.strip()
    if not proxy or proxy.lower() == 'none':
        proxy = None
    bot = Bot(
        read_token(args.token),
        memory=Memory(),
        proxy=proxy,
        precision=args.precision
    )
    bot.start_polling(args.poll)
    return 0


COMMANDS = {
    'eval': run_eval,
    'serve': run_serve,
    'bot': run_bot
}


def main(args=None):
    parser = create_arg_parser()
    args = parser.parse_args(args)

    args.log_level = getattr(logging, args.log_level.upper())

    logging.basicConfig(
        level=args.log_level,
        format=Bot.LOG_FORMAT
    )
    if args.log_file is not None:
        configure_logger(
            'promathx',
            log_file=args.log_file,
            log_format=Bot.LOG_FORMAT,
            log_level=args.log_level
        )

    try:
        return COMMANDS[args.command](args)
    finally:
        logging.shutdown()


if __name__ == '__main__':
    sys.exit(main())
