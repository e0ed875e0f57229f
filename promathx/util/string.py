import re
import unicodedata

from .misc import re_list_compile


RE_SANITIZE_MSG = re_list_compile([
    (r'<LF>', '[LF]'),
    (r'\n+', ' <LF> '),
    (r'\s+', ' ')
])

RE_SANITIZE = RE_SANITIZE_MSG + re_list_compile([
    (r'[][|]', '.')
])

RE_COMMAND = re.compile(r'^/[^\s]+\s*')
RE_COMMAND_NAME = re.compile(r'^/([^@\s]+)')
RE_COMMAND_USERNAME = re.compile(r'^/[^@\s]+@([^\s]+)\s*')


def trunc(string, max_length=1000):
    if len(string) > max_length:
        return '... ' + string[4 - max_length:]
    return string

def remove_control_chars(string):
    return ''.join(
        char for char, cat in ((c, unicodedata.category(c)) for c in string)
        if cat[0] != 'C' or cat == 'Cn'
    )

def strip_command(string):
    return RE_COMMAND.sub('', string).strip()

def get_command_name(string):
    match = RE_COMMAND_NAME.match(string)
    if match is None:
        return None
    return match.group(1).lower()

def match_command_user(cmd, username):
    match = RE_COMMAND_USERNAME.match(cmd)
    if match is None:
        return True
    return match.group(1) == username

def sanitize_log(string, is_message=False):
    replace = RE_SANITIZE_MSG if is_message else RE_SANITIZE
    for expr, repl in replace:
        string = expr.sub(repl, string)
    string = remove_control_chars(string).strip()
    if not string:
        string = '<empty>'
    return string
