from .misc import re_list_compile, read_token, configure_logger
from .string import (
    trunc, remove_control_chars, strip_command,
    get_command_name, match_command_user, sanitize_log
)
from .tg import get_message_text, get_command_args, reply_text, command
