""" Parsed forms of a command line. """


class Command:
    """ A verb and its arguments. """
    def __init__(self, name, args):
        self.name = name          # lower-cased verb
        self.args = args

    def __repr__(self):
        return f"Command({self.name!r}, {self.args!r})"


class RedirectionSpec:
    """ `command > target` or `command >> target`. """
    def __init__(self, command, target, append=False):
        self.command = command    # left-hand command text
        self.target = target      # filename, relative to the current directory
        self.append = append      # True for >>

    def __repr__(self):
        op = ">>" if self.append else ">"
        return f"RedirectionSpec({self.command!r} {op} {self.target!r})"


class PipeSpec:
    """ `left | right`. """
    def __init__(self, left, right):
        self.left = left
        self.right = right

    def __repr__(self):
        return f"PipeSpec({self.left!r} | {self.right!r})"
