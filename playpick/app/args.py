"""
Argument parsing helpers.
"""

import argparse


class DefaultsHelpFormatter(argparse.HelpFormatter):
    """
    Help formatter that appends default values to argument help text.

    Defaults that are suppressed, None or False (unset flags) are not shown.
    """

    def _get_help_string(self, action: argparse.Action) -> str:
        help_text = action.help or ""
        default = action.default
        if default is argparse.SUPPRESS or default is None or default is False:
            return help_text
        if isinstance(action, argparse._VersionAction):
            return help_text
        return help_text + f" (default: {default})"
