"""
Registry of builtin commands.

Each builtin is called as func(args, state, sink). It writes its output to
the sink and returns None on success or a filesystem.Failure; the runner
reports failures.
"""
import filesystem
from constants import FAREWELL, HELP_TEXT

BUILTINS = {}


def builtin(name, min_args=0, missing=None):
    """
    Decorator to register builtins.

    min_args is the number of arguments the builtin needs; missing is the
    message reported when fewer are given.
    """
    def wrapper(func):
        func.min_args = min_args
        func.missing = missing
        BUILTINS[name] = func
        return func
    return wrapper


@builtin("pwd")
def builtin_pwd(args, state, sink):
    sink.print(state.current_directory)


@builtin("cd", 1, "Error: 'cd' requires a directory path.")
def builtin_cd(args, state, sink):
    target = filesystem.resolve_directory(state.current_directory, args[0])
    if isinstance(target, filesystem.Failure):
        return target
    state.change_directory(target)


def parse_ls_args(args):
    options = {
        "all": False,
        "reverse": False,
    }
    # Flags are matched as whole tokens; anything else is ignored.
    for arg in args:
        if arg == "-a":
            options["all"] = True
        elif arg == "-r":
            options["reverse"] = True
    return options


@builtin("ls")
def builtin_ls(args, state, sink):
    options = parse_ls_args(args)
    entries = filesystem.list_entries(state.current_directory,
                                      show_hidden=options["all"],
                                      reverse=options["reverse"])
    if isinstance(entries, filesystem.Failure):
        return entries

    for name in entries:
        sink.print(name)


@builtin("mkdir", 1, "Error: 'mkdir' requires a directory name.")
def builtin_mkdir(args, state, sink):
    name = args[0]
    failure = filesystem.make_directory(state.current_directory, name)
    if failure is None:
        sink.print(f"Directory created: {name}")
    return failure


@builtin("rmdir", 1, "Error: 'rmdir' requires a directory name.")
def builtin_rmdir(args, state, sink):
    name = args[0]
    failure = filesystem.remove_directory(state.current_directory, name)
    if failure is None:
        sink.print(f"Directory removed: {name}")
    return failure


@builtin("touch", 1, "Error: 'touch' requires a file name.")
def builtin_touch(args, state, sink):
    name = args[0]
    failure = filesystem.create_file(state.current_directory, name)
    if failure is None:
        sink.print(f"File created: {name}")
    return failure


@builtin("rm", 1, "Error: 'rm' requires a file name.")
def builtin_rm(args, state, sink):
    name = args[0]
    failure = filesystem.remove_file(state.current_directory, name)
    if failure is None:
        sink.print(f"File removed: {name}")
    return failure


@builtin("cat", 1, "Error: 'cat' requires a file name.")
def builtin_cat(args, state, sink):
    lines = filesystem.read_lines(state.current_directory, args[0])
    if isinstance(lines, filesystem.Failure):
        return lines

    for line in lines:
        sink.print(line)


@builtin("mv", 2, "Error: 'mv' requires a source and a destination.")
def builtin_mv(args, state, sink):
    source, destination = args[0], args[1]
    failure = filesystem.move(state.current_directory, source, destination)
    if failure is None:
        sink.print(f"Moved/Renamed '{source}' to '{destination}'.")
    return failure


@builtin("help")
def builtin_help(args, state, sink):
    sink.print(HELP_TEXT)


@builtin("exit")
def builtin_exit(args, state, sink):
    sink.print(FAREWELL)
    state.stop()
