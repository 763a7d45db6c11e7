""" Exceptions raised by the shell. """


class ShellError(Exception):
    """ Base class for shell errors. """


class ShellSyntaxError(ShellError):
    """ A redirection or pipe expression could not be parsed. """


class CaptureError(ShellError):
    """ Output capture was requested while another capture is active. """
