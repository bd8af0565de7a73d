"""Default settings, overridable from the command line"""

REPL_CONFIG = {
    "prompt": "arithmetic-parser> ",
    "exit_command": "exit",
    "show_error_position": False,  # print the expression with a caret under the failure
    "explain": False,  # print the infix rendering before the result
}

LOGGING_CONFIG = {
    "level": "WARNING",
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}
