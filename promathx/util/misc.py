import re
import logging


def re_list_compile(re_list):
    return [(re.compile(expr), repl) for expr, repl in re_list]

def read_token(token_or_file):
    token_or_file = token_or_file.strip()
    try:
        with open(token_or_file) as fp:
            for line in fp:
                line = line.strip()
                if line:
                    return line
    except (FileNotFoundError, IsADirectoryError):
        return token_or_file
    raise ValueError('%s: no token found' % token_or_file)

def configure_logger(name,
                     log_file=None,
                     log_format=None,
                     log_level=logging.INFO):
    if isinstance(log_file, str):
        handler = logging.FileHandler(log_file, 'a')
    else:
        handler = logging.StreamHandler(log_file)

    formatter = logging.Formatter(log_format)
    logger = logging.getLogger(name)

    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(log_level)

    return logger
